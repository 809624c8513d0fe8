# Pure geometry helpers shared by hit testing and resizing.

from __future__ import annotations

from typing import Optional, Tuple
import math

from model import Circle, Point, Triangle

# Squared lengths / doubled areas below this are treated as degenerate.
EPSILON = 1e-12


def distance(a: Point, b: Point) -> float:
    return math.hypot(a[0] - b[0], a[1] - b[1])


def point_segment_distance(p: Point, a: Point, b: Point) -> float:
    """Description: Distance from p to the segment [a, b]
    Inputs: p: Point, a: Point, b: Point
    """
    vx = b[0] - a[0]
    vy = b[1] - a[1]
    seg_len2 = vx * vx + vy * vy
    if seg_len2 <= EPSILON:
        return distance(p, a)
    t = max(0.0, min(1.0, ((p[0] - a[0]) * vx + (p[1] - a[1]) * vy) / seg_len2))
    return distance(p, (a[0] + t * vx, a[1] + t * vy))


def circle_center(circle: Optional[Circle]) -> Point:
    """Description: Center of a circle whose x, y is the bounding-box top-left
    Inputs: circle: Optional[Circle]
    """
    if not isinstance(circle, Circle):
        return (0.0, 0.0)
    return (circle.x + circle.radius, circle.y + circle.radius)


def triangle_vertices(triangle: Triangle) -> Tuple[Point, Point, Point]:
    p1 = (triangle.start_x, triangle.start_y)
    p2 = (triangle.end_x, triangle.end_y)
    p3 = (triangle.start_x - (triangle.end_x - triangle.start_x), triangle.end_y)
    return p1, p2, p3


def barycentric(p: Point, a: Point, b: Point, c: Point) -> Optional[Tuple[float, float, float]]:
    """Description: Barycentric weights (s, t, u) of p in triangle abc, None for a zero-area triangle
    Inputs: p: Point, a: Point, b: Point, c: Point
    """
    # Signed, so clockwise and counter-clockwise triangles both work.
    double_area = a[0] * (b[1] - c[1]) + b[0] * (c[1] - a[1]) + c[0] * (a[1] - b[1])
    if abs(double_area) <= EPSILON:
        return None
    s = (a[1] * c[0] - a[0] * c[1] + (c[1] - a[1]) * p[0] + (a[0] - c[0]) * p[1]) / double_area
    t = (a[0] * b[1] - a[1] * b[0] + (a[1] - b[1]) * p[0] + (b[0] - a[0]) * p[1]) / double_area
    return s, t, 1 - s - t


def point_in_triangle(p: Point, a: Point, b: Point, c: Point) -> bool:
    weights = barycentric(p, a, b, c)
    if weights is None:
        return False
    return all(w >= 0 for w in weights)
