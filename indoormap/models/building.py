"""Building element models: outlines, walls, doors, windows and segments."""

from __future__ import annotations
from enum import Enum
from typing import Literal, Optional
from pydantic import BaseModel

from .geometry import Point2D


# Enumerations are stored in the source format as ordinals; member order
# below is the ordinal mapping and must not be changed.

class PolygonMethod(str, Enum):
    ADD = "add"
    REMOVE = "remove"


class WallMaterial(str, Enum):
    UNKNOWN = "unknown"
    CONCRETE = "concrete"
    WOOD = "wood"
    DRYWALL = "drywall"
    GLASS = "glass"
    METAL = "metal"
    METALIZED_GLASS = "metalized_glass"


class DoorType(str, Enum):
    UNKNOWN = "unknown"
    SWING = "swing"
    DOUBLE_SWING = "double_swing"
    SLIDE = "slide"
    DOUBLE_SLIDE = "double_slide"
    REVOLVING = "revolving"


class ObstacleType(str, Enum):
    UNKNOWN = "unknown"
    WALL = "wall"
    WINDOW = "window"
    HANDRAIL = "handrail"
    PILLAR = "pillar"


class WallSegmentType(str, Enum):
    WALL = "wall"
    DOOR = "door"
    WINDOW = "window"


class Polygon2D(BaseModel):
    """A part of an outline."""
    name: str = ""
    # REMOVE cuts its area out of the ADD polygons of the same outline
    method: PolygonMethod = PolygonMethod.ADD
    # Area outside of the building, e.g. a yard
    is_outdoor: bool = False
    points: list[Point2D] = []


class Outline(BaseModel):
    """The walkable ground of one floor."""
    polygons: list[Polygon2D] = []


class WallElement(BaseModel):
    """Fields shared by everything embedded in a wall."""
    material: WallMaterial = WallMaterial.UNKNOWN
    width: float = 0.0
    height: float = 0.0
    at_line_pos: float = 0.0  # 0 = wall start, 1 = wall end


class WallDoor(WallElement):
    """A door positioned relatively on a wall."""
    kind: Literal["door"] = "door"
    type: DoorType = DoorType.UNKNOWN
    left_right: bool = False  # True if the hinge is on the right
    in_out: bool = False      # Opening direction


class WallWindow(WallElement):
    """A window positioned relatively on a wall."""
    kind: Literal["window"] = "window"
    at_height: float = 0.0    # Vertical offset relative to the wall
    in_out: bool = False


class WallSegment2D(BaseModel):
    """A continuous piece of wall, door or window with absolute end points."""
    type: WallSegmentType
    start: Point2D
    end: Point2D
    # Index into Wall.doors or Wall.windows; None for WALL segments
    list_index: Optional[int] = None
    # Set on fillers running backwards, i.e. openings outside the wall span
    # or overlapping each other
    reversed: bool = False

    @property
    def length(self) -> float:
        return self.start.distance_to(self.end)


class Wall(BaseModel):
    """A wall line with thickness, optionally carrying doors and windows."""
    material: WallMaterial = WallMaterial.UNKNOWN
    type: ObstacleType = ObstacleType.UNKNOWN
    x1: float = 0.0
    y1: float = 0.0
    x2: float = 0.0
    y2: float = 0.0
    thickness: float = 0.15
    height: float = 0.0
    doors: list[WallDoor] = []
    windows: list[WallWindow] = []
    # Only valid once segmentation has run
    segments: list[WallSegment2D] = []

    @property
    def start(self) -> Point2D:
        return Point2D(x=self.x1, y=self.y1)

    @property
    def end(self) -> Point2D:
        return Point2D(x=self.x2, y=self.y2)

    @property
    def length(self) -> float:
        return self.start.distance_to(self.end)
