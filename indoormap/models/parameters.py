"""Parser and exporter configuration."""

from __future__ import annotations
from pydantic import BaseModel, Field

from .building import WallMaterial


class ParserConfig(BaseModel):
    """Controls defaults the parser applies to incomplete documents."""
    default_wall_thickness: float = 0.15  # Meters, used if `thickness` is absent
    warn_reversed_segments: bool = True   # Log fillers running backwards


def _default_material_colors() -> dict[WallMaterial, tuple[int, int, int]]:
    return {
        WallMaterial.UNKNOWN: (0, 0, 0),
        WallMaterial.CONCRETE: (50, 50, 50),
        WallMaterial.WOOD: (206, 92, 0),
        WallMaterial.DRYWALL: (100, 100, 100),
        WallMaterial.GLASS: (0, 110, 255),
        WallMaterial.METAL: (114, 159, 207),
        WallMaterial.METALIZED_GLASS: (0, 220, 255),
    }


class SvgStyle(BaseModel):
    """User-adjustable styling of the SVG exporter."""
    material_colors: dict[WallMaterial, tuple[int, int, int]] = Field(
        default_factory=_default_material_colors,
    )
    opening_stroke_reduction: float = 0.1  # Doors/windows are drawn thinner than the wall
    door_arc_scale: float = 0.9            # Swing arc radius relative to door width
    marker_radius: float = 0.125
    font_size: float = 0.5
    label_offset: float = 0.25
    outline_color: str = "#C8C8C8"
    outdoor_color: str = "#4E9A06"
    removed_color: str = "#FFFFFF"
    window_color: str = "#0000FF"
    door_color: str = "#000000"
    groundtruth_color: str = "#000000"
    access_point_color: str = "#FF0000"

    def material_color(self, material: WallMaterial) -> str:
        r, g, b = (max(0, min(255, c)) for c in self.material_colors.get(material, (0, 0, 0)))
        return f"#{r:02X}{g:02X}{b:02X}"
