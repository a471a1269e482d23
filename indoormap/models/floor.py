"""Floor and map root models."""

from __future__ import annotations
from typing import Iterable, Optional
from pydantic import BaseModel, Field

from .building import Outline, Wall
from .sensors import (
    AccessPoint, Beacon, FingerprintLocation, GroundtruthPoint, PointOfInterest,
)


class Floor(BaseModel):
    """A single storey of the building."""
    at_height: float = 0.0  # Z position of the ground
    height: float = 0.0     # Also the default height of every wall
    name: str = ""
    outline: Outline = Field(default_factory=Outline)
    walls: list[Wall] = []
    access_points: list[AccessPoint] = []
    beacons: list[Beacon] = []
    groundtruth_points: list[GroundtruthPoint] = []
    fingerprint_locations: list[FingerprintLocation] = []
    pois: list[PointOfInterest] = []

    def gt_point_by_id(self, point_id: int) -> Optional[GroundtruthPoint]:
        for gt in self.groundtruth_points:
            if gt.id == point_id:
                return gt
        return None

    def groundtruth_path(self, ids: Iterable[int]) -> list[GroundtruthPoint]:
        """Resolve a walk given as a list of groundtruth ids.

        Raises KeyError for ids not present on this floor.
        """
        path: list[GroundtruthPoint] = []
        for point_id in ids:
            gt = self.gt_point_by_id(point_id)
            if gt is None:
                raise KeyError(f"No groundtruth point with id {point_id} on floor '{self.name}'")
            path.append(gt)
        return path


class EarthPosMapPos(BaseModel):
    """One earth coordinate / map coordinate correspondence."""
    lat: float = 0.0
    lon: float = 0.0
    alt: float = 0.0
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


class EarthRegistration(BaseModel):
    """Correspondences used to fit a map-to-GPS transformation."""
    correspondences: list[EarthPosMapPos] = []


class Map(BaseModel):
    """Root object of every map document."""
    width: float = 0.0
    depth: float = 0.0
    earth_registration: EarthRegistration = Field(default_factory=EarthRegistration)
    floors: list[Floor] = []

    def floor_by_name(self, name: str) -> Optional[Floor]:
        return next((f for f in self.floors if f.name == name), None)
