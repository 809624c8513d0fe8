# Point-in-shape tests and bounding boxes for every shape variant.

from __future__ import annotations

from typing import Optional
import logging

import numpy as np

import config
from geometry import EPSILON, circle_center, distance, point_in_triangle, triangle_vertices
from model import BoundingBox, Circle, Pencil, Point, Rectangle, Shape, Text, Triangle

logger = logging.getLogger(__name__)


def is_point_in_shape(point: Point, shape: Optional[Shape]) -> bool:
    """Description: Whether point lies on or inside shape; False for missing or unknown shapes
    Inputs: point: Point, shape: Optional[Shape]
    """
    match shape:
        case Rectangle() | Text():
            return get_shape_bounding_box(shape).contains(point)
        case Circle():
            return distance(point, circle_center(shape)) <= shape.radius
        case Pencil():
            return _point_near_stroke(point, shape, config.PENCIL_HIT_TOLERANCE)
        case Triangle():
            return point_in_triangle(point, *triangle_vertices(shape))
        case _:
            if shape is not None:
                logger.debug("is_point_in_shape: unsupported shape %r", shape)
            return False


def _point_near_stroke(point: Point, shape: Pencil, tolerance: float) -> bool:
    """Description: Whether point is within tolerance of any non-degenerate stroke segment
    Inputs: point: Point, shape: Pencil, tolerance: float
    """
    if len(shape.points) < 2:
        return False
    pts = np.asarray(shape.points, dtype=float)
    starts = pts[:-1]
    vectors = pts[1:] - starts
    seg_len2 = np.einsum("ij,ij->i", vectors, vectors)
    keep = seg_len2 > EPSILON
    if not np.any(keep):
        return False
    starts = starts[keep]
    vectors = vectors[keep]
    seg_len2 = seg_len2[keep]
    offsets = np.asarray(point, dtype=float) - starts
    t = np.clip(np.einsum("ij,ij->i", offsets, vectors) / seg_len2, 0.0, 1.0)
    gaps = offsets - vectors * t[:, None]
    return bool(np.any(np.hypot(gaps[:, 0], gaps[:, 1]) <= tolerance))


def get_shape_bounding_box(shape: Optional[Shape]) -> BoundingBox:
    """Description: Axis-aligned box of a shape; a zero box for missing or unknown shapes
    Inputs: shape: Optional[Shape]
    """
    match shape:
        case Rectangle() | Text():
            return BoundingBox(shape.x, shape.y, shape.width, shape.height)
        case Circle():
            return BoundingBox(shape.x, shape.y, shape.radius * 2, shape.radius * 2)
        case Pencil():
            if not shape.points:
                return BoundingBox()
            pts = np.asarray(shape.points, dtype=float)
            min_x, min_y = pts.min(axis=0)
            max_x, max_y = pts.max(axis=0)
            return BoundingBox(float(min_x), float(min_y), float(max_x - min_x), float(max_y - min_y))
        case Triangle():
            xs = [p[0] for p in triangle_vertices(shape)]
            ys = [p[1] for p in triangle_vertices(shape)]
            return BoundingBox(min(xs), min(ys), max(xs) - min(xs), max(ys) - min(ys))
        case _:
            if shape is not None:
                logger.debug("get_shape_bounding_box: unsupported shape %r", shape)
            return BoundingBox()
