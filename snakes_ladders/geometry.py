"""Plane geometry used to keep generated snakes and ladders apart.

Everything here works in a virtual board space ``width`` units wide. The
width has nothing to do with how big the board is drawn; it only gives the
distance thresholds a scale.
"""

from __future__ import annotations

import math
from typing import NamedTuple

from snakes_ladders.board import ROW_LENGTH, column_of, row_of

VIRTUAL_BOARD_WIDTH = 500.0
LADDER_HALF_WIDTH = 4.0
SNAKE_CURVE_FACTOR = 0.3
SNAKE_SEGMENTS = 4
# Snake heads keep this fraction of a cell away from rails and other bodies
HEAD_CLEARANCE = 0.6


class Point(NamedTuple):
    x: float
    y: float


class Segment(NamedTuple):
    start: Point
    end: Point


def square_to_coordinate(square: int, width: float = VIRTUAL_BOARD_WIDTH) -> Point:
    """Centre of *square*'s cell, with y measured down from the top edge."""
    cell = width / ROW_LENGTH
    x = column_of(square) * cell + cell / 2
    y = (ROW_LENGTH - 1 - row_of(square)) * cell + cell / 2
    return Point(x, y)


def ladder_rails(start: int, end: int, width: float = VIRTUAL_BOARD_WIDTH) -> list[Segment]:
    """The two rails of a ladder, offset either side of its centre line."""
    a = square_to_coordinate(start, width)
    b = square_to_coordinate(end, width)
    perp = math.atan2(b.y - a.y, b.x - a.x) + math.pi / 2
    dx = LADDER_HALF_WIDTH * math.cos(perp)
    dy = LADDER_HALF_WIDTH * math.sin(perp)
    return [
        Segment(Point(a.x + dx, a.y + dy), Point(b.x + dx, b.y + dy)),
        Segment(Point(a.x - dx, a.y - dy), Point(b.x - dx, b.y - dy)),
    ]


def _bezier_point(p0: Point, p1: Point, p2: Point, t: float) -> Point:
    u = 1 - t
    return Point(
        u * u * p0.x + 2 * u * t * p1.x + t * t * p2.x,
        u * u * p0.y + 2 * u * t * p1.y + t * t * p2.y,
    )


def snake_polyline(head: int, tail: int, width: float = VIRTUAL_BOARD_WIDTH) -> list[Segment]:
    """Approximate a snake's curved body as a short chain of segments.

    The body is a quadratic curve from head to tail. Its control point is
    pushed sideways off the midpoint by a fixed fraction of the head→tail
    vector, to the left or the right depending on the parity of
    ``head + tail`` so neighbouring snakes don't all bend the same way.
    """
    p0 = square_to_coordinate(head, width)
    p2 = square_to_coordinate(tail, width)
    bend = SNAKE_CURVE_FACTOR if (head + tail) % 2 == 0 else -SNAKE_CURVE_FACTOR
    control = Point(
        (p0.x + p2.x) / 2 + (p0.y - p2.y) * bend,
        (p0.y + p2.y) / 2 + (p2.x - p0.x) * bend,
    )
    points = [
        _bezier_point(p0, control, p2, i / SNAKE_SEGMENTS)
        for i in range(SNAKE_SEGMENTS + 1)
    ]
    return [Segment(a, b) for a, b in zip(points, points[1:])]


# ── Intersection / distance ──────────────────────────────────────────

def _orientation(p: Point, q: Point, r: Point) -> int:
    """0 if collinear, 1 if clockwise, 2 if counter-clockwise."""
    val = (q.y - p.y) * (r.x - q.x) - (q.x - p.x) * (r.y - q.y)
    if val == 0:
        return 0
    return 1 if val > 0 else 2


def _on_segment(p: Point, q: Point, r: Point) -> bool:
    """Whether collinear point *q* lies within the bounding box of p–r."""
    return (
        min(p.x, r.x) <= q.x <= max(p.x, r.x)
        and min(p.y, r.y) <= q.y <= max(p.y, r.y)
    )


def segments_intersect(a: Segment, b: Segment) -> bool:
    p1, q1 = a
    p2, q2 = b
    o1 = _orientation(p1, q1, p2)
    o2 = _orientation(p1, q1, q2)
    o3 = _orientation(p2, q2, p1)
    o4 = _orientation(p2, q2, q1)

    if o1 != o2 and o3 != o4:
        return True

    # Collinear special cases
    if o1 == 0 and _on_segment(p1, p2, q1):
        return True
    if o2 == 0 and _on_segment(p1, q2, q1):
        return True
    if o3 == 0 and _on_segment(p2, p1, q2):
        return True
    if o4 == 0 and _on_segment(p2, q1, q2):
        return True
    return False


def any_intersect(first: list[Segment], second: list[Segment]) -> bool:
    return any(segments_intersect(a, b) for a in first for b in second)


def point_to_segment_distance_squared(point: Point, segment: Segment) -> float:
    v, w = segment
    length_sq = (w.x - v.x) ** 2 + (w.y - v.y) ** 2
    if length_sq == 0:
        return (point.x - v.x) ** 2 + (point.y - v.y) ** 2
    t = ((point.x - v.x) * (w.x - v.x) + (point.y - v.y) * (w.y - v.y)) / length_sq
    t = max(0.0, min(1.0, t))
    proj_x = v.x + t * (w.x - v.x)
    proj_y = v.y + t * (w.y - v.y)
    return (point.x - proj_x) ** 2 + (point.y - proj_y) ** 2


def min_head_distance_squared(width: float = VIRTUAL_BOARD_WIDTH) -> float:
    return (width / ROW_LENGTH * HEAD_CLEARANCE) ** 2
