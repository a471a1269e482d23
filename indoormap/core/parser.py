"""Map parser: walks a parsed document and builds the map model.

The walk order is fixed: map, earth registration, then every floor with
its outline, walls, POIs, groundtruth points, access points, beacons and
fingerprint locations. Each entity is handed to the observer on enter and
leave (see indoormap.observers.base).
"""

from __future__ import annotations
import logging
from pathlib import Path
from typing import Any, Optional, Union

from lxml import etree

from indoormap.models import (
    Map, EarthRegistration, EarthPosMapPos, Floor, Outline, Polygon2D, Point2D,
    PolygonMethod, Wall, WallDoor, WallWindow, WallMaterial, ObstacleType, DoorType,
    PointOfInterest, POIType, GroundtruthPoint, AccessPoint, Beacon,
    FingerprintLocation, ParserConfig,
)
from indoormap.core.attributes import (
    float_attribute, int_attribute, bool_attribute, str_attribute, enum_attribute,
    children, first_child,
)
from indoormap.core.errors import MalformedContentError, SourceUnavailableError
from indoormap.core.segmentation import generate_wall_segments, reversed_segments
from indoormap.observers.base import MapObserver, ModelCollector

logger = logging.getLogger(__name__)

# No entity expansion, no network access
_XML_PARSER = etree.XMLParser(resolve_entities=False, no_network=True, remove_comments=True)


class MapParser:
    """
    Builds a Map from a document tree while notifying an observer.

    A parser instance may be reused for several documents, one at a time;
    observers must not call back into the parser that notifies them.
    """

    def __init__(self, config: ParserConfig | None = None) -> None:
        self.config = config or ParserConfig()
        self._observer: MapObserver = MapObserver()
        self._active = False

    def parse(self, root: Any, observer: MapObserver | None = None) -> None:
        """Walk `root` (a `map` element or a tree holding one)."""
        if self._active:
            raise RuntimeError("MapParser is not re-entrant; use a separate instance")

        if hasattr(root, "getroot"):
            root = root.getroot()
        if root is None or root.tag != "map":
            tag = None if root is None else root.tag
            raise MalformedContentError(f"Expected a <map> root element, got <{tag}>")

        self._observer = observer or MapObserver()
        self._active = True
        try:
            self._process_map(root)
        finally:
            self._active = False
            self._observer = MapObserver()

    def parse_map(self, root: Any) -> Map:
        collector = ModelCollector()
        self.parse(root, collector)
        return collector.map

    def read_from_string(self, text: Union[str, bytes], observer: MapObserver | None = None) -> None:
        self.parse(_load_string(text), observer)

    def read_from_file(self, path: Union[str, Path], observer: MapObserver | None = None) -> None:
        self.parse(_load_file(path), observer)

    def read_map_from_string(self, text: Union[str, bytes]) -> Map:
        return self.parse_map(_load_string(text))

    def read_map_from_file(self, path: Union[str, Path]) -> Map:
        return self.parse_map(_load_file(path))

    def _process_map(self, x_map: Any) -> None:
        indoor_map = Map(
            width=float_attribute(x_map, "width"),
            depth=float_attribute(x_map, "depth"),
        )
        self._observer.enter_map(indoor_map)

        x_earth_reg = first_child(x_map, "earthReg")
        if x_earth_reg is not None:
            indoor_map.earth_registration = self._process_earth_registration(x_earth_reg)

        x_floors = first_child(x_map, "floors")
        if x_floors is not None:
            for x_floor in children(x_floors, "floor"):
                floor = self._process_floor(x_floor)
                if floor is not None:
                    indoor_map.floors.append(floor)

        self._observer.leave_map(indoor_map)
        logger.info(
            "Parsed map %sx%s with %d floor(s)",
            indoor_map.width, indoor_map.depth, len(indoor_map.floors),
        )

    def _process_earth_registration(self, x_earth_reg: Any) -> EarthRegistration:
        earth_reg = EarthRegistration()
        self._observer.enter_earth_registration(earth_reg)

        x_correspondences = first_child(x_earth_reg, "correspondences")
        if x_correspondences is not None:
            for x_point in children(x_correspondences, "point"):
                pos = EarthPosMapPos(
                    lat=float_attribute(x_point, "lat"),
                    lon=float_attribute(x_point, "lon"),
                    alt=float_attribute(x_point, "alt"),
                    x=float_attribute(x_point, "mx"),
                    y=float_attribute(x_point, "my"),
                    z=float_attribute(x_point, "mz"),
                )
                self._observer.enter_correspondence(pos)
                self._observer.leave_correspondence(pos)
                earth_reg.correspondences.append(pos)

        self._observer.leave_earth_registration(earth_reg)
        return earth_reg

    def _process_floor(self, x_floor: Any) -> Optional[Floor]:
        floor = Floor(
            at_height=float_attribute(x_floor, "atHeight"),
            height=float_attribute(x_floor, "height"),
            name=str_attribute(x_floor, "name"),
        )
        if not self._observer.enter_floor(floor):
            logger.debug("Floor '%s' skipped by observer", floor.name)
            return None

        x_outline = first_child(x_floor, "outline")
        if x_outline is not None:
            outline = self._process_outline(x_outline)
            if outline is not None:
                floor.outline = outline

        x_obstacles = first_child(x_floor, "obstacles")
        if x_obstacles is not None:
            self._process_obstacles(x_obstacles, floor)

        x_pois = first_child(x_floor, "pois")
        if x_pois is not None:
            self._process_pois(x_pois, floor)

        x_gt = first_child(x_floor, "gtpoints")
        if x_gt is not None:
            self._process_groundtruth_points(x_gt, floor)

        x_ap = first_child(x_floor, "accesspoints")
        if x_ap is not None:
            self._process_access_points(x_ap, floor)

        x_beacons = first_child(x_floor, "beacons")
        if x_beacons is not None:
            self._process_beacons(x_beacons, floor)

        x_fingerprints = first_child(x_floor, "fingerprints")
        if x_fingerprints is not None:
            self._process_fingerprints(x_fingerprints, floor)

        self._observer.leave_floor(floor)
        logger.debug(
            "Floor '%s': %d wall(s), %d polygon(s)",
            floor.name, len(floor.walls), len(floor.outline.polygons),
        )
        return floor

    def _process_outline(self, x_outline: Any) -> Optional[Outline]:
        outline = Outline()
        if not self._observer.enter_outline(outline):
            return None

        for x_polygon in children(x_outline, "polygon"):
            polygon = Polygon2D(
                name=str_attribute(x_polygon, "name"),
                method=enum_attribute(x_polygon, "method", PolygonMethod),
                is_outdoor=bool_attribute(x_polygon, "outdoor"),
                points=[
                    Point2D(x=float_attribute(x_point, "x"), y=float_attribute(x_point, "y"))
                    for x_point in children(x_polygon, "point")
                ],
            )
            self._observer.enter_polygon(polygon)
            self._observer.leave_polygon(polygon)
            outline.polygons.append(polygon)

        self._observer.leave_outline(outline)
        return outline

    def _process_obstacles(self, x_obstacles: Any, floor: Floor) -> None:
        # Only walls are read from <obstacles>; lines, circles and objects are ignored
        self._observer.enter_walls(floor.walls)
        for x_wall in children(x_obstacles, "wall"):
            wall = self._process_wall(x_wall, floor)
            if wall is not None:
                floor.walls.append(wall)
        self._observer.leave_walls(floor.walls)

    def _process_wall(self, x_wall: Any, floor: Floor) -> Optional[Wall]:
        height = float_attribute(x_wall, "height", None)
        if height is None or height == 0.0:
            height = floor.height

        wall = Wall(
            material=enum_attribute(x_wall, "material", WallMaterial),
            type=enum_attribute(x_wall, "type", ObstacleType),
            x1=float_attribute(x_wall, "x1"),
            y1=float_attribute(x_wall, "y1"),
            x2=float_attribute(x_wall, "x2"),
            y2=float_attribute(x_wall, "y2"),
            thickness=float_attribute(x_wall, "thickness", self.config.default_wall_thickness),
            height=height,
        )
        if not self._observer.enter_wall(wall):
            return None

        for x_door in children(x_wall, "door"):
            door = self._process_door(x_door)
            if door is not None:
                wall.doors.append(door)

        for x_window in children(x_wall, "window"):
            window = self._process_window(x_window)
            if window is not None:
                wall.windows.append(window)

        wall.segments = generate_wall_segments(wall)
        if self.config.warn_reversed_segments:
            bad = reversed_segments(wall.segments)
            if bad:
                logger.warning(
                    "Wall (%s, %s)-(%s, %s) on floor '%s' has reversed segment(s) %s; "
                    "doors/windows reach past the wall or overlap",
                    wall.x1, wall.y1, wall.x2, wall.y2, floor.name, bad,
                )

        self._observer.leave_wall(wall)
        return wall

    def _process_door(self, x_door: Any) -> Optional[WallDoor]:
        # Door height is spelled "heigth" in the file format
        height = float_attribute(x_door, "heigth", None)
        if height is None:
            height = float_attribute(x_door, "height")

        door = WallDoor(
            type=enum_attribute(x_door, "type", DoorType),
            material=enum_attribute(x_door, "material", WallMaterial),
            at_line_pos=float_attribute(x_door, "x01"),
            width=float_attribute(x_door, "width"),
            height=height,
            left_right=bool_attribute(x_door, "lr"),
            in_out=bool_attribute(x_door, "io"),
        )
        if not self._observer.enter_wall_door(door):
            return None
        self._observer.leave_wall_door(door)
        return door

    def _process_window(self, x_window: Any) -> Optional[WallWindow]:
        window = WallWindow(
            material=enum_attribute(x_window, "material", WallMaterial),
            at_line_pos=float_attribute(x_window, "x01"),
            at_height=float_attribute(x_window, "y"),
            width=float_attribute(x_window, "width"),
            height=float_attribute(x_window, "height"),
            in_out=bool_attribute(x_window, "io"),
        )
        if not self._observer.enter_wall_window(window):
            return None
        self._observer.leave_wall_window(window)
        return window

    def _position(self, node: Any, floor: Floor, z_name: str = "z") -> dict[str, float]:
        height_above_floor = float_attribute(node, z_name)
        return dict(
            x=float_attribute(node, "x"),
            y=float_attribute(node, "y"),
            z=floor.at_height + height_above_floor,
            height_above_floor=height_above_floor,
        )

    def _process_pois(self, x_pois: Any, floor: Floor) -> None:
        obs = self._observer
        obs.enter_points_of_interest(floor.pois)
        for x_poi in children(x_pois, "poi"):
            poi = PointOfInterest(
                name=str_attribute(x_poi, "name"),
                type=enum_attribute(x_poi, "type", POIType),
                x=float_attribute(x_poi, "x"),
                y=float_attribute(x_poi, "y"),
            )
            obs.enter_point_of_interest(poi)
            obs.leave_point_of_interest(poi)
            floor.pois.append(poi)
        obs.leave_points_of_interest(floor.pois)

    def _process_groundtruth_points(self, x_gt: Any, floor: Floor) -> None:
        obs = self._observer
        obs.enter_groundtruth_points(floor.groundtruth_points)
        for x_point in children(x_gt, "gtpoint"):
            gt = GroundtruthPoint(
                id=int_attribute(x_point, "id"),
                **self._position(x_point, floor),
            )
            obs.enter_groundtruth_point(gt)
            obs.leave_groundtruth_point(gt)
            floor.groundtruth_points.append(gt)
        obs.leave_groundtruth_points(floor.groundtruth_points)

    def _radio_fields(self, node: Any) -> dict[str, Any]:
        return dict(
            name=str_attribute(node, "name"),
            mac_address=str_attribute(node, "mac"),
            mdl_txp=float_attribute(node, "mdl_txp"),
            mdl_exp=float_attribute(node, "mdl_exp"),
            mdl_waf=float_attribute(node, "mdl_waf"),
        )

    def _process_access_points(self, x_aps: Any, floor: Floor) -> None:
        obs = self._observer
        obs.enter_access_points(floor.access_points)
        for x_ap in children(x_aps, "accesspoint"):
            ap = AccessPoint(**self._radio_fields(x_ap), **self._position(x_ap, floor))
            obs.enter_access_point(ap)
            obs.leave_access_point(ap)
            floor.access_points.append(ap)
        obs.leave_access_points(floor.access_points)

    def _process_beacons(self, x_beacons: Any, floor: Floor) -> None:
        obs = self._observer
        obs.enter_beacons(floor.beacons)
        for x_beacon in children(x_beacons, "beacon"):
            beacon = Beacon(
                uuid=str_attribute(x_beacon, "uuid"),
                major=str_attribute(x_beacon, "major"),
                minor=str_attribute(x_beacon, "minor"),
                **self._radio_fields(x_beacon),
                **self._position(x_beacon, floor),
            )
            obs.enter_beacon(beacon)
            obs.leave_beacon(beacon)
            floor.beacons.append(beacon)
        obs.leave_beacons(floor.beacons)

    def _process_fingerprints(self, x_fingerprints: Any, floor: Floor) -> None:
        obs = self._observer
        obs.enter_fingerprint_locations(floor.fingerprint_locations)
        for x_location in children(x_fingerprints, "location"):
            location = FingerprintLocation(
                name=str_attribute(x_location, "name"),
                **self._position(x_location, floor, z_name="dz"),
            )
            obs.enter_fingerprint_location(location)
            obs.leave_fingerprint_location(location)
            floor.fingerprint_locations.append(location)
        obs.leave_fingerprint_locations(floor.fingerprint_locations)


def _load_string(text: Union[str, bytes]) -> Any:
    if isinstance(text, str):
        # lxml refuses str input carrying an encoding declaration
        text = text.encode("utf-8")
    try:
        return etree.fromstring(text, _XML_PARSER)
    except etree.XMLSyntaxError as e:
        raise MalformedContentError(f"XML parser error: {e}") from e


def _load_file(path: Union[str, Path]) -> Any:
    path = Path(path)
    try:
        data = path.read_bytes()
    except OSError as e:
        logger.error("Indoor map file not found: '%s'", path)
        raise SourceUnavailableError(f"Indoor map file not found: '{path}'") from e
    return _load_string(data)
