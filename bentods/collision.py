"""Collision tests between points, circles, rectangles, lines and polygons."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from . import fxmath
from .fixed import Fixed
from .rect import Rect
from .vec2 import Vec2

_LINE_BUFFER = Fixed(0.1)


def _edges(vertices: Sequence[Vec2]) -> Iterator[tuple[Vec2, Vec2]]:
    """Consecutive vertex pairs, closing the polygon."""
    verts = list(vertices)
    return zip(verts, verts[1:] + verts[:1])


def point_circle(point: Vec2, circle: Vec2, radius: Fixed) -> bool:
    return fxmath.distance(point, circle) <= radius * radius


def circle_circle(circle1: Vec2, radius1: Fixed, circle2: Vec2, radius2: Fixed) -> bool:
    reach = Fixed(radius1) + radius2
    return fxmath.distance(circle1, circle2) <= reach * reach


def point_rect(point: Vec2, rect: Rect) -> bool:
    return rect.left <= point.x <= rect.right and rect.top <= point.y <= rect.bottom


def rect_rect(rect1: Rect, rect2: Rect) -> bool:
    return (
        rect1.right >= rect2.left
        and rect1.left <= rect2.right
        and rect1.bottom >= rect2.top
        and rect1.top <= rect2.bottom
    )


def circle_rect(circle: Vec2, radius: Fixed, rect: Rect) -> bool:
    test = Vec2(circle.x, circle.y)
    if circle.x < rect.left:
        test.x = rect.left
    elif circle.x > rect.right:
        test.x = rect.right
    if circle.y < rect.top:
        test.y = rect.top
    elif circle.y > rect.bottom:
        test.y = rect.bottom
    return fxmath.distance(circle, test) <= radius * radius


def line_point(start: Vec2, end: Vec2, point: Vec2) -> bool:
    """True when the point lies on the segment, within a small tolerance."""
    d = fxmath.distance_sqrt(point, start) + fxmath.distance_sqrt(point, end)
    line_len = fxmath.distance_sqrt(start, end)
    return line_len - _LINE_BUFFER <= d <= line_len + _LINE_BUFFER


def line_circle(start: Vec2, end: Vec2, circle: Vec2, radius: Fixed) -> bool:
    if point_circle(start, circle, radius) or point_circle(end, circle, radius):
        return True

    length = fxmath.distance(start, end)
    if length == 0:
        return False

    dot = (
        (circle.x - start.x) * (end.x - start.x) + (circle.y - start.y) * (end.y - start.y)
    ) / length

    closest = Vec2(
        start.x + dot * (end.x - start.x),
        start.y + dot * (end.y - start.y),
    )
    if not line_point(start, end, closest):
        return False

    return fxmath.distance(closest, circle) <= radius * radius


def line_line(start1: Vec2, end1: Vec2, start2: Vec2, end2: Vec2) -> bool:
    denominator = (
        (end2.y - start2.y) * (end1.x - start1.x) - (end2.x - start2.x) * (end1.y - start1.y)
    ).to_float()
    if denominator == 0.0:
        return False

    num_a = (
        (end2.x - start2.x) * (start1.y - start2.y) - (end2.y - start2.y) * (start1.x - start2.x)
    ).to_float()
    num_b = (
        (end1.x - start1.x) * (start1.y - start2.y) - (end1.y - start1.y) * (start1.x - start2.x)
    ).to_float()

    u_a = Fixed(num_a / denominator)
    u_b = Fixed(num_b / denominator)
    return 0 <= u_a <= 1 and 0 <= u_b <= 1


def line_rect(start: Vec2, end: Vec2, rect: Rect) -> bool:
    sides = (
        (Vec2(rect.left, rect.top), Vec2(rect.left, rect.bottom)),
        (Vec2(rect.right, rect.top), Vec2(rect.right, rect.bottom)),
        (Vec2(rect.left, rect.top), Vec2(rect.right, rect.top)),
        (Vec2(rect.left, rect.bottom), Vec2(rect.right, rect.bottom)),
    )
    hits = [line_line(start, end, a, b) for a, b in sides]
    return any(hits)


def poly_point(vertices: Sequence[Vec2], point: Vec2) -> bool:
    """Even-odd test of whether the point lies inside the polygon."""
    inside = False
    for vc, vn in _edges(vertices):
        if ((vc.y >= point.y and vn.y < point.y) or (vc.y < point.y and vn.y >= point.y)) and (
            point.x < (vn.x - vc.x) * (point.y - vc.y) / (vn.y - vc.y) + vc.x
        ):
            inside = not inside
    return inside


def poly_circle(vertices: Sequence[Vec2], circle: Vec2, radius: Fixed) -> bool:
    return any(line_circle(vc, vn, circle, radius) for vc, vn in _edges(vertices))


def poly_rect(vertices: Sequence[Vec2], rect: Rect) -> bool:
    return any(line_rect(vc, vn, rect) for vc, vn in _edges(vertices))


def poly_line(vertices: Sequence[Vec2], start: Vec2, end: Vec2) -> bool:
    return any(line_line(vc, vn, start, end) for vc, vn in _edges(vertices))


def poly_poly(vertices1: Sequence[Vec2], vertices2: Sequence[Vec2]) -> bool:
    """True when any edge of the first polygon crosses an edge of the second."""
    return any(poly_line(vertices2, vc, vn) for vc, vn in _edges(vertices1))