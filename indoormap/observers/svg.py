"""SVG floor plan exporter.

Draws outlines, walls (segment by segment, so doors and windows show up as
gaps with their own symbols), groundtruth points, access points and POI
labels. Map y points up, SVG y points down: all y values are negated and
the drawing is shifted back into view once the extents are known.
"""

from __future__ import annotations
from typing import Optional, Sequence

import svgwrite

from indoormap.models import (
    Map, Floor, Outline, PolygonMethod, Wall, WallSegment2D, WallSegmentType,
    GroundtruthPoint, AccessPoint, PointOfInterest, Point2D, SvgStyle, is_large_arc,
)
from indoormap.observers.base import MapExporter


def _fmt(value: float) -> str:
    return f"{value:.6g}"


class SvgExporter(MapExporter):
    """Renders every floor into its own `<g id="floor_<name>">` group."""

    media_type = "image/svg+xml"

    def __init__(self, style: SvgStyle | None = None) -> None:
        self.style = style or SvgStyle()
        self.max_x = 0.0
        self.max_y = 0.0
        self._drawing: Optional[svgwrite.Drawing] = None
        self._root = None
        self._floor_name: Optional[str] = None
        self._group = None
        self._finished = False

    def get_id(self) -> str:
        return "svg"

    def get_name(self) -> str:
        return "SVG floor plan"

    def result(self) -> str:
        if not self._finished:
            raise RuntimeError("SVG is only available after the whole map was visited")
        return self._drawing.tostring()

    def save(self, filename: str) -> None:
        with open(filename, "w", encoding="utf-8") as f:
            f.write(self.result())

    def _track(self, p: Point2D) -> None:
        self.max_x = max(self.max_x, p.x)
        self.max_y = max(self.max_y, p.y)

    def _path_d(self, points: Sequence[Point2D], closed: bool = False) -> str:
        if len(points) < 2:
            return ""
        parts = []
        for i, p in enumerate(points):
            self._track(p)
            parts.append(f"{'M' if i == 0 else 'L'}{_fmt(p.x)} {_fmt(-p.y)}")
        if closed:
            parts.append("Z")
        return " ".join(parts)

    def _arc_d(self, center: Point2D, radius: float, start_angle: float, end_angle: float) -> str:
        start = Point2D.from_polar(center, radius, start_angle)
        end = Point2D.from_polar(center, radius, end_angle)
        self._track(start)
        self._track(end)
        large_arc = 1 if is_large_arc(start_angle, end_angle) else 0
        return (
            f"M {_fmt(start.x)} {_fmt(-start.y)}"
            f" A {_fmt(radius)} {_fmt(radius)} 0 {large_arc} 0"
            f" {_fmt(end.x)} {_fmt(-end.y)}"
        )

    def _add(self, element) -> None:
        if self._group is None and self._floor_name is not None:
            self._group = self._drawing.g(id=f"floor_{self._floor_name}")
            self._root.add(self._group)
        (self._group if self._group is not None else self._root).add(element)

    def _opening_width(self, wall: Wall) -> float:
        return max(wall.thickness - self.style.opening_stroke_reduction, 0.0)

    def enter_map(self, indoor_map: Map) -> None:
        self._drawing = svgwrite.Drawing(debug=False)
        self._root = self._drawing.g()
        self._drawing.add(self._root)

    def leave_map(self, indoor_map: Map) -> None:
        self._drawing["viewBox"] = f"0 0 {_fmt(self.max_x)} {_fmt(self.max_y)}"
        self._root["transform"] = f"translate(0, {_fmt(self.max_y)})"
        self._finished = True

    def enter_floor(self, floor: Floor) -> bool:
        # Group is attached when the first element is drawn
        self._floor_name = floor.name
        self._group = None
        return True

    def leave_floor(self, floor: Floor) -> None:
        self._floor_name = None
        self._group = None

    def leave_outline(self, outline: Outline) -> None:
        for polygon in outline.polygons:
            if polygon.method == PolygonMethod.REMOVE:
                color = self.style.removed_color
            elif polygon.is_outdoor:
                color = self.style.outdoor_color
            else:
                color = self.style.outline_color
            self._add(self._drawing.path(
                d=self._path_d(polygon.points), stroke="none", fill=color,
            ))

    def leave_wall(self, wall: Wall) -> None:
        for seg in wall.segments:
            if seg.type == WallSegmentType.WALL:
                self._add(self._drawing.path(
                    d=self._path_d([seg.start, seg.end]),
                    stroke=self.style.material_color(wall.material),
                    stroke_width=_fmt(wall.thickness),
                    fill="none",
                ))
            elif seg.type == WallSegmentType.WINDOW:
                self._add(self._drawing.path(
                    d=self._path_d([seg.start, seg.end]),
                    stroke=self.style.window_color,
                    stroke_width=_fmt(self._opening_width(wall)),
                    stroke_dasharray="0.2, 0.1",
                    fill="none",
                ))
            else:
                self._draw_door(wall, seg)

    def _draw_door(self, wall: Wall, seg: WallSegment2D) -> None:
        door = wall.doors[seg.list_index]
        stroke = dict(
            stroke=self.style.door_color,
            stroke_width=_fmt(self._opening_width(wall)),
            fill="none",
        )

        open_dir = (seg.end - seg.start).orthogonal().normalized()
        if door.in_out:
            open_dir = -open_dir

        hinge = seg.end if door.left_right else seg.start
        lock = seg.start if door.left_right else seg.end
        leaf = hinge + open_dir * door.width

        start_angle = (lock - hinge).angle()
        end_angle = open_dir.angle()
        if door.in_out:
            start_angle, end_angle = end_angle, start_angle
        if door.left_right:
            start_angle, end_angle = end_angle, start_angle

        self._add(self._drawing.path(
            d=self._path_d([seg.start, seg.end]), stroke_dasharray="0.2, 0.1", **stroke,
        ))
        radius = self.style.door_arc_scale * door.width
        self._add(self._drawing.path(
            d=self._arc_d(hinge, radius, start_angle, end_angle), **stroke,
        ))
        self._add(self._drawing.path(d=self._path_d([hinge, leaf]), **stroke))

    def _label(self, text: str, x: float, y: float, anchor: str) -> None:
        self._add(self._drawing.text(
            text,
            insert=(_fmt(x), _fmt(y)),
            style=f"font: {_fmt(self.style.font_size)}px sans-serif;",
            text_anchor=anchor,
        ))

    def _marker(self, x: float, y: float, color: str) -> None:
        self._track(Point2D(x=x, y=y))
        self._add(self._drawing.circle(
            center=(_fmt(x), _fmt(-y)), r=_fmt(self.style.marker_radius),
            fill=color, stroke="none",
        ))

    def leave_groundtruth_points(self, gt_points: list[GroundtruthPoint]) -> None:
        for gt in gt_points:
            self._marker(gt.x, gt.y, self.style.groundtruth_color)
            self._label(str(gt.id), gt.x + self.style.label_offset, -gt.y, "start")

    def leave_access_points(self, access_points: list[AccessPoint]) -> None:
        for ap in access_points:
            self._marker(ap.x, ap.y, self.style.access_point_color)
            self._label(
                f"{ap.name} ({ap.mac_address})", ap.x + self.style.label_offset, -ap.y, "start",
            )

    def leave_points_of_interest(self, pois: list[PointOfInterest]) -> None:
        for poi in pois:
            self._label(poi.name, poi.x, -poi.y - self.style.label_offset, "middle")
