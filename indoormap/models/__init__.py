from .geometry import Point2D, Point3D, direction_from_points, order_key, is_large_arc
from .building import (
    PolygonMethod, WallMaterial, DoorType, ObstacleType, WallSegmentType,
    Polygon2D, Outline, WallElement, WallDoor, WallWindow, WallSegment2D, Wall,
)
from .sensors import (
    POIType, PointOfInterest, PositionedElement, GroundtruthPoint,
    FingerprintLocation, AccessPoint, Beacon,
)
from .floor import Floor, EarthPosMapPos, EarthRegistration, Map
from .parameters import ParserConfig, SvgStyle

__all__ = [
    "Point2D", "Point3D", "direction_from_points", "order_key", "is_large_arc",
    "PolygonMethod", "WallMaterial", "DoorType", "ObstacleType", "WallSegmentType",
    "Polygon2D", "Outline", "WallElement", "WallDoor", "WallWindow", "WallSegment2D", "Wall",
    "POIType", "PointOfInterest", "PositionedElement", "GroundtruthPoint",
    "FingerprintLocation", "AccessPoint", "Beacon",
    "Floor", "EarthPosMapPos", "EarthRegistration", "Map",
    "ParserConfig", "SvgStyle",
]
