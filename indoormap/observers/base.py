"""Observer interface of the map parser.

The parser calls one enter/leave pair per entity kind while it walks a
document. Observers are:
- Passive by default: every hook is a no-op and vetoable hooks return True
- Intervening: hooks receive the live entity and may change its fields
- Gatekeeping: returning False from enter_floor, enter_outline, enter_wall,
  enter_wall_door or enter_wall_window drops that entity and its subtree

enter_* is called once attributes are read and before children are
processed; leave_* once the entity is complete and before it is appended
to its parent. Section hooks (enter_walls, enter_beacons, ...) receive the
floor's list for that section.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any, Optional

from indoormap.models import (
    Map, EarthRegistration, EarthPosMapPos, Floor, Outline, Polygon2D,
    Wall, WallDoor, WallWindow, PointOfInterest, GroundtruthPoint,
    AccessPoint, Beacon, FingerprintLocation,
)


class MapObserver:
    """Base observer. Subclasses override the hooks they care about."""

    def enter_map(self, indoor_map: Map) -> None: ...
    def leave_map(self, indoor_map: Map) -> None: ...

    def enter_earth_registration(self, earth_reg: EarthRegistration) -> None: ...
    def leave_earth_registration(self, earth_reg: EarthRegistration) -> None: ...

    def enter_correspondence(self, pos: EarthPosMapPos) -> None: ...
    def leave_correspondence(self, pos: EarthPosMapPos) -> None: ...

    def enter_floor(self, floor: Floor) -> bool:
        return True

    def leave_floor(self, floor: Floor) -> None: ...

    def enter_outline(self, outline: Outline) -> bool:
        return True

    def leave_outline(self, outline: Outline) -> None: ...

    def enter_polygon(self, polygon: Polygon2D) -> None: ...
    def leave_polygon(self, polygon: Polygon2D) -> None: ...

    def enter_walls(self, walls: list[Wall]) -> None: ...
    def leave_walls(self, walls: list[Wall]) -> None: ...

    def enter_wall(self, wall: Wall) -> bool:
        return True

    def leave_wall(self, wall: Wall) -> None: ...

    def enter_wall_door(self, door: WallDoor) -> bool:
        return True

    def leave_wall_door(self, door: WallDoor) -> None: ...

    def enter_wall_window(self, window: WallWindow) -> bool:
        return True

    def leave_wall_window(self, window: WallWindow) -> None: ...

    def enter_points_of_interest(self, pois: list[PointOfInterest]) -> None: ...
    def leave_points_of_interest(self, pois: list[PointOfInterest]) -> None: ...

    def enter_point_of_interest(self, poi: PointOfInterest) -> None: ...
    def leave_point_of_interest(self, poi: PointOfInterest) -> None: ...

    def enter_groundtruth_points(self, gt_points: list[GroundtruthPoint]) -> None: ...
    def leave_groundtruth_points(self, gt_points: list[GroundtruthPoint]) -> None: ...

    def enter_groundtruth_point(self, gt_point: GroundtruthPoint) -> None: ...
    def leave_groundtruth_point(self, gt_point: GroundtruthPoint) -> None: ...

    def enter_access_points(self, access_points: list[AccessPoint]) -> None: ...
    def leave_access_points(self, access_points: list[AccessPoint]) -> None: ...

    def enter_access_point(self, access_point: AccessPoint) -> None: ...
    def leave_access_point(self, access_point: AccessPoint) -> None: ...

    def enter_beacons(self, beacons: list[Beacon]) -> None: ...
    def leave_beacons(self, beacons: list[Beacon]) -> None: ...

    def enter_beacon(self, beacon: Beacon) -> None: ...
    def leave_beacon(self, beacon: Beacon) -> None: ...

    def enter_fingerprint_locations(self, locations: list[FingerprintLocation]) -> None: ...
    def leave_fingerprint_locations(self, locations: list[FingerprintLocation]) -> None: ...

    def enter_fingerprint_location(self, location: FingerprintLocation) -> None: ...
    def leave_fingerprint_location(self, location: FingerprintLocation) -> None: ...


class ModelCollector(MapObserver):
    """Keeps the finished Map; used to simply obtain a model from a document."""

    def __init__(self) -> None:
        self.map: Optional[Map] = None

    def leave_map(self, indoor_map: Map) -> None:
        self.map = indoor_map


class CompositeObserver(MapObserver):
    """
    Fans every hook out to several observers, in order.

    A vetoable enter stops at the first observer returning False; the
    observers after it are not asked and none of them sees the leave.
    """

    def __init__(self, *observers: MapObserver) -> None:
        self.observers = list(observers)

    def add(self, observer: MapObserver) -> None:
        self.observers.append(observer)

    def _notify(self, hook: str, entity: Any) -> None:
        for observer in self.observers:
            getattr(observer, hook)(entity)

    def _admit(self, hook: str, entity: Any) -> bool:
        return all(getattr(observer, hook)(entity) for observer in self.observers)

    def enter_map(self, indoor_map: Map) -> None:
        self._notify("enter_map", indoor_map)

    def leave_map(self, indoor_map: Map) -> None:
        self._notify("leave_map", indoor_map)

    def enter_earth_registration(self, earth_reg: EarthRegistration) -> None:
        self._notify("enter_earth_registration", earth_reg)

    def leave_earth_registration(self, earth_reg: EarthRegistration) -> None:
        self._notify("leave_earth_registration", earth_reg)

    def enter_correspondence(self, pos: EarthPosMapPos) -> None:
        self._notify("enter_correspondence", pos)

    def leave_correspondence(self, pos: EarthPosMapPos) -> None:
        self._notify("leave_correspondence", pos)

    def enter_floor(self, floor: Floor) -> bool:
        return self._admit("enter_floor", floor)

    def leave_floor(self, floor: Floor) -> None:
        self._notify("leave_floor", floor)

    def enter_outline(self, outline: Outline) -> bool:
        return self._admit("enter_outline", outline)

    def leave_outline(self, outline: Outline) -> None:
        self._notify("leave_outline", outline)

    def enter_polygon(self, polygon: Polygon2D) -> None:
        self._notify("enter_polygon", polygon)

    def leave_polygon(self, polygon: Polygon2D) -> None:
        self._notify("leave_polygon", polygon)

    def enter_walls(self, walls: list[Wall]) -> None:
        self._notify("enter_walls", walls)

    def leave_walls(self, walls: list[Wall]) -> None:
        self._notify("leave_walls", walls)

    def enter_wall(self, wall: Wall) -> bool:
        return self._admit("enter_wall", wall)

    def leave_wall(self, wall: Wall) -> None:
        self._notify("leave_wall", wall)

    def enter_wall_door(self, door: WallDoor) -> bool:
        return self._admit("enter_wall_door", door)

    def leave_wall_door(self, door: WallDoor) -> None:
        self._notify("leave_wall_door", door)

    def enter_wall_window(self, window: WallWindow) -> bool:
        return self._admit("enter_wall_window", window)

    def leave_wall_window(self, window: WallWindow) -> None:
        self._notify("leave_wall_window", window)

    def enter_points_of_interest(self, pois: list[PointOfInterest]) -> None:
        self._notify("enter_points_of_interest", pois)

    def leave_points_of_interest(self, pois: list[PointOfInterest]) -> None:
        self._notify("leave_points_of_interest", pois)

    def enter_point_of_interest(self, poi: PointOfInterest) -> None:
        self._notify("enter_point_of_interest", poi)

    def leave_point_of_interest(self, poi: PointOfInterest) -> None:
        self._notify("leave_point_of_interest", poi)

    def enter_groundtruth_points(self, gt_points: list[GroundtruthPoint]) -> None:
        self._notify("enter_groundtruth_points", gt_points)

    def leave_groundtruth_points(self, gt_points: list[GroundtruthPoint]) -> None:
        self._notify("leave_groundtruth_points", gt_points)

    def enter_groundtruth_point(self, gt_point: GroundtruthPoint) -> None:
        self._notify("enter_groundtruth_point", gt_point)

    def leave_groundtruth_point(self, gt_point: GroundtruthPoint) -> None:
        self._notify("leave_groundtruth_point", gt_point)

    def enter_access_points(self, access_points: list[AccessPoint]) -> None:
        self._notify("enter_access_points", access_points)

    def leave_access_points(self, access_points: list[AccessPoint]) -> None:
        self._notify("leave_access_points", access_points)

    def enter_access_point(self, access_point: AccessPoint) -> None:
        self._notify("enter_access_point", access_point)

    def leave_access_point(self, access_point: AccessPoint) -> None:
        self._notify("leave_access_point", access_point)

    def enter_beacons(self, beacons: list[Beacon]) -> None:
        self._notify("enter_beacons", beacons)

    def leave_beacons(self, beacons: list[Beacon]) -> None:
        self._notify("leave_beacons", beacons)

    def enter_beacon(self, beacon: Beacon) -> None:
        self._notify("enter_beacon", beacon)

    def leave_beacon(self, beacon: Beacon) -> None:
        self._notify("leave_beacon", beacon)

    def enter_fingerprint_locations(self, locations: list[FingerprintLocation]) -> None:
        self._notify("enter_fingerprint_locations", locations)

    def leave_fingerprint_locations(self, locations: list[FingerprintLocation]) -> None:
        self._notify("leave_fingerprint_locations", locations)

    def enter_fingerprint_location(self, location: FingerprintLocation) -> None:
        self._notify("enter_fingerprint_location", location)

    def leave_fingerprint_location(self, location: FingerprintLocation) -> None:
        self._notify("leave_fingerprint_location", location)


class MapExporter(MapObserver, ABC):
    """
    Observer that builds an artifact while the document is walked.

    A fresh instance is used per document; `result()` is valid once
    leave_map has been called.
    """

    media_type: str = "application/octet-stream"

    @abstractmethod
    def get_id(self) -> str:
        """Unique identifier for this exporter (e.g., 'svg')."""
        ...

    @abstractmethod
    def get_name(self) -> str:
        """Human-readable name (e.g., 'SVG floor plan')."""
        ...

    @abstractmethod
    def result(self) -> str:
        """The finished artifact."""
        ...
