"""Point-like floor content: sensors, groundtruth points and POIs."""

from __future__ import annotations
from enum import Enum
from pydantic import BaseModel

from .geometry import Point2D, Point3D


class POIType(str, Enum):
    ROOM = "room"


class PointOfInterest(BaseModel):
    """Marks a room."""
    name: str = ""
    type: POIType = POIType.ROOM
    x: float = 0.0
    y: float = 0.0

    @property
    def position(self) -> Point2D:
        return Point2D(x=self.x, y=self.y)


class PositionedElement(BaseModel):
    """Planar position plus height; z is absolute, height_above_floor is not."""
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    height_above_floor: float = 0.0

    @property
    def position(self) -> Point3D:
        return Point3D(x=self.x, y=self.y, z=self.z)


class GroundtruthPoint(PositionedElement):
    """Orientation point placed at every turn of a recorded walk."""
    id: int = 0


class FingerprintLocation(PositionedElement):
    """Location where fingerprints were recorded, not the fingerprints themselves."""
    name: str = ""


class AccessPoint(PositionedElement):
    """A WiFi access point.

    The model parameters follow the log-distance path loss model with wall
    attenuation factor: `mdl_txp` is the sending power, `mdl_exp` the
    path-loss exponent and `mdl_waf` the attenuation per ceiling/floor.
    """
    name: str = ""
    mac_address: str = ""
    mdl_txp: float = 0.0
    mdl_exp: float = 0.0
    mdl_waf: float = 0.0


class Beacon(AccessPoint):
    """A Bluetooth beacon."""
    uuid: str = ""
    major: str = ""
    minor: str = ""
