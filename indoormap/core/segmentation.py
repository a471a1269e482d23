"""Wall segmentation: splits a wall line into wall, door and window pieces.

Doors and windows are stored relative to their wall. This module resolves
them to absolute coordinates and fills the gaps between them with wall
segments, so that the result covers the whole wall line end to end.
Points are ordered by (x, y): left to right, and bottom to top for
vertical walls.

Doors and windows are assumed not to overlap each other.
"""

from __future__ import annotations

from indoormap.models import (
    Point2D, Wall, WallSegment2D, WallSegmentType, direction_from_points, order_key,
)


def _ordered(a: Point2D, b: Point2D) -> tuple[Point2D, Point2D]:
    if order_key(b) < order_key(a):
        return b, a
    return a, b


def _door_segments(wall: Wall) -> list[WallSegment2D]:
    direction = direction_from_points(wall.start, wall.end)
    unit = direction.normalized()
    segments = []
    for i, door in enumerate(wall.doors):
        # The door leaf extends from its anchor towards the hinge side
        anchor = wall.start + direction * door.at_line_pos
        tip = anchor + unit * (-door.width if door.left_right else door.width)
        start, end = _ordered(anchor, tip)
        segments.append(WallSegment2D(
            type=WallSegmentType.DOOR, list_index=i, start=start, end=end,
        ))
    return segments


def _window_segments(wall: Wall) -> list[WallSegment2D]:
    direction = direction_from_points(wall.start, wall.end)
    unit = direction.normalized()
    segments = []
    for i, window in enumerate(wall.windows):
        center = wall.start + direction * window.at_line_pos
        half = unit * (window.width / 2.0)
        start, end = _ordered(center - half, center + half)
        segments.append(WallSegment2D(
            type=WallSegmentType.WINDOW, list_index=i, start=start, end=end,
        ))
    return segments


# Fillers shorter than this (in metres) count as zero-length, not reversed
REVERSED_TOLERANCE = 1e-9


def _filler(start: Point2D, end: Point2D, unit: Point2D) -> WallSegment2D:
    return WallSegment2D(
        type=WallSegmentType.WALL,
        start=start,
        end=end,
        reversed=(end - start).dot(unit) < -REVERSED_TOLERANCE,
    )


def generate_wall_segments(wall: Wall) -> list[WallSegment2D]:
    """
    Convert a wall with relative doors/windows into absolute segments.

    Returns filler, opening, filler, ..., filler. Fillers between adjacent
    openings may have zero length and are kept. Openings reaching past the
    wall ends produce fillers flagged as `reversed`; this never raises.
    """
    if not wall.doors and not wall.windows:
        return [WallSegment2D(type=WallSegmentType.WALL, start=wall.start, end=wall.end)]

    openings = _door_segments(wall) + _window_segments(wall)
    openings.sort(key=lambda s: order_key(s.start))

    w_start, w_end = _ordered(wall.start, wall.end)
    unit = direction_from_points(w_start, w_end).normalized()

    segments: list[WallSegment2D] = [_filler(w_start, openings[0].start, unit)]
    for i, opening in enumerate(openings):
        segments.append(opening)
        if i < len(openings) - 1:
            segments.append(_filler(opening.end, openings[i + 1].start, unit))
        else:
            segments.append(_filler(opening.end, w_end, unit))

    return segments


def reversed_segments(segments: list[WallSegment2D]) -> list[int]:
    """Indices of fillers flagged as running backwards."""
    return [i for i, s in enumerate(segments) if s.reversed]
