# Resize handles and the handle-driven resize transform.

from __future__ import annotations

from dataclasses import replace
from enum import Enum
from typing import List, NamedTuple, Optional, Tuple, Union
import logging
import math
import re

import config
from geometry import EPSILON, circle_center, distance
from hit_testing import get_shape_bounding_box
from model import Circle, Pencil, Point, Rectangle, Shape, Text, Triangle
from text_metrics import LineMeasurer, text_shape_min_size

logger = logging.getLogger(__name__)


class Handle(str, Enum):
    TOP_LEFT = "top_left"
    TOP_CENTER = "top_center"
    TOP_RIGHT = "top_right"
    MIDDLE_LEFT = "middle_left"
    MIDDLE_RIGHT = "middle_right"
    BOTTOM_LEFT = "bottom_left"
    BOTTOM_CENTER = "bottom_center"
    BOTTOM_RIGHT = "bottom_right"


class HandlePosition(NamedTuple):
    name: Handle
    x: float
    y: float


# Handles whose drag moves the given edge.
LEFT_HANDLES = frozenset({Handle.TOP_LEFT, Handle.MIDDLE_LEFT, Handle.BOTTOM_LEFT})
RIGHT_HANDLES = frozenset({Handle.TOP_RIGHT, Handle.MIDDLE_RIGHT, Handle.BOTTOM_RIGHT})
TOP_HANDLES = frozenset({Handle.TOP_LEFT, Handle.TOP_CENTER, Handle.TOP_RIGHT})
BOTTOM_HANDLES = frozenset({Handle.BOTTOM_LEFT, Handle.BOTTOM_CENTER, Handle.BOTTOM_RIGHT})

Box = Tuple[float, float, float, float]


def _coerce_handle(handle: Union[Handle, str, None]) -> Optional[Handle]:
    """Description: Handle from an enum member, its value, or a camelCase name like "topLeft"
    Inputs: handle: Union[Handle, str, None]
    """
    if handle is None:
        return None
    try:
        return Handle(handle)
    except ValueError:
        pass
    if isinstance(handle, str):
        snake = re.sub(r"(?<!^)(?=[A-Z])", "_", handle).lower()
        try:
            return Handle(snake)
        except ValueError:
            pass
    logger.warning("Unknown resize handle %r", handle)
    return None


def get_shape_resize_handles(shape: Optional[Shape]) -> List[HandlePosition]:
    """Description: The eight handle positions on a shape's bounding box, corners first
    Inputs: shape: Optional[Shape]
    """
    if shape is None:
        return []
    box = get_shape_bounding_box(shape)
    mid_x = box.x + box.width / 2
    mid_y = box.y + box.height / 2
    return [
        HandlePosition(Handle.TOP_LEFT, box.x, box.y),
        HandlePosition(Handle.TOP_RIGHT, box.right, box.y),
        HandlePosition(Handle.BOTTOM_LEFT, box.x, box.bottom),
        HandlePosition(Handle.BOTTOM_RIGHT, box.right, box.bottom),
        HandlePosition(Handle.TOP_CENTER, mid_x, box.y),
        HandlePosition(Handle.MIDDLE_RIGHT, box.right, mid_y),
        HandlePosition(Handle.BOTTOM_CENTER, mid_x, box.bottom),
        HandlePosition(Handle.MIDDLE_LEFT, box.x, mid_y),
    ]


def get_resize_handle(point: Point, shape: Optional[Shape]) -> Optional[Handle]:
    """Description: First handle whose hit square contains point, or None
    Inputs: point: Point, shape: Optional[Shape]
    """
    if shape is None:
        return None
    box = get_shape_bounding_box(shape)
    off = config.HANDLE_OFFSET
    mid_x = box.x + box.width / 2
    mid_y = box.y + box.height / 2
    # Hit targets sit HANDLE_OFFSET outside the box, edge handles along their normal only.
    # Corners are tested first so they still win on a MIN_SIZE box.
    targets = (
        (Handle.TOP_LEFT, box.x - off, box.y - off),
        (Handle.TOP_RIGHT, box.right + off, box.y - off),
        (Handle.BOTTOM_LEFT, box.x - off, box.bottom + off),
        (Handle.BOTTOM_RIGHT, box.right + off, box.bottom + off),
        (Handle.TOP_CENTER, mid_x, box.y - off),
        (Handle.MIDDLE_RIGHT, box.right + off, mid_y),
        (Handle.BOTTOM_CENTER, mid_x, box.bottom + off),
        (Handle.MIDDLE_LEFT, box.x - off, mid_y),
    )
    half = config.HANDLE_HIT_SIZE / 2
    for name, hx, hy in targets:
        if abs(point[0] - hx) <= half and abs(point[1] - hy) <= half:
            return name
    return None


def resize_shape(
    shape: Optional[Shape],
    handle: Union[Handle, str, None],
    point: Point,
    drag_start: Optional[Point] = None,
    measurer: Optional[LineMeasurer] = None,
) -> Optional[Shape]:
    """Description: Resize shape by dragging handle to point; the opposite edges stay fixed
    Inputs: shape: Optional[Shape], handle: Handle or its value, point: Point, drag_start: Optional[Point] (unused, fixed edges come from the current shape), measurer: Optional[LineMeasurer]
    """
    if shape is None or not handle:
        return shape
    if isinstance(shape, Circle):
        # Any handle drag only changes the radius.
        return _resize_circle(shape, point)
    handle = _coerce_handle(handle)
    if handle is None:
        return shape
    match shape:
        case Rectangle():
            x, y, width, height = _resize_box(
                (shape.x, shape.y, shape.width, shape.height), handle, point, config.MIN_SIZE
            )
            return replace(shape, x=x, y=y, width=width, height=height)
        case Text():
            return _resize_text(shape, handle, point, measurer)
        case Pencil():
            return _resize_pencil(shape, handle, point)
        case Triangle():
            return shape
        case _:
            logger.debug("resize_shape: unsupported shape %r left unchanged", shape)
            return shape


def _resize_box(box: Box, handle: Handle, point: Point, min_size: float) -> Box:
    """Description: Move the edges a handle controls, clamped to min_size
    Inputs: box: Box, handle: Handle, point: Point, min_size: float
    """
    x, y, width, height = box
    fixed_right = x + width
    fixed_bottom = y + height
    if handle in LEFT_HANDLES:
        x = min(point[0], fixed_right - min_size)
        width = fixed_right - x
    elif handle in RIGHT_HANDLES:
        width = max(point[0] - x, min_size)
    if handle in TOP_HANDLES:
        y = min(point[1], fixed_bottom - min_size)
        height = fixed_bottom - y
    elif handle in BOTTOM_HANDLES:
        height = max(point[1] - y, min_size)
    return x, y, width, height


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _scaled_font_size(shape: Text, width: float, height: float) -> int:
    """Description: Damped font size for a text box resized to width x height
    Inputs: shape: Text, width: float, height: float
    """
    width_scale = width / shape.width if shape.width > 0 else 1.0
    height_scale = height / shape.height if shape.height > 0 else 1.0
    raw = (width_scale + height_scale) / 2
    damping = config.FONT_SCALE_DAMPING
    damped = 1.0 * (1 - damping) + raw * damping
    base = shape.font_size or config.DEFAULT_FONT_SIZE
    return max(config.MIN_FONT_SIZE, min(config.MAX_FONT_SIZE, _round_half_up(base * damped)))


def _resize_text(shape: Text, handle: Handle, point: Point, measurer: Optional[LineMeasurer]) -> Text:
    # Pass 1: plain box resize.
    min_size = max(config.TEXT_MIN_SIZE, len(shape.text or "") * 2)
    x, y, width, height = _resize_box((shape.x, shape.y, shape.width, shape.height), handle, point, min_size)

    # Pass 2: font follows the box, then the box must fit the re-measured text.
    font_size = _scaled_font_size(shape, width, height)
    min_width, min_height = text_shape_min_size(shape, font_size, measurer)
    if width < min_width:
        if handle in LEFT_HANDLES:
            x = shape.x + shape.width - min_width
        width = min_width
    if height < min_height:
        if handle in TOP_HANDLES:
            y = shape.y + shape.height - min_height
        height = min_height
    return replace(shape, x=x, y=y, width=width, height=height, font_size=font_size)


def _resize_circle(shape: Circle, point: Point) -> Circle:
    center = circle_center(shape)
    radius = max(distance(point, center), config.MIN_RADIUS)
    return replace(shape, x=center[0] - radius, y=center[1] - radius, radius=radius)


def _resize_pencil(shape: Pencil, handle: Handle, point: Point) -> Pencil:
    """Description: Stretch the stroke so its bounding box follows the handle
    Inputs: shape: Pencil, handle: Handle, point: Point
    """
    box = get_shape_bounding_box(shape)
    x, y, width, height = _resize_box((box.x, box.y, box.width, box.height), handle, point, config.MIN_SIZE)
    # A flat axis has nothing to stretch.
    scale_x = width / box.width if box.width > EPSILON else None
    scale_y = height / box.height if box.height > EPSILON else None
    points = tuple(
        (
            x + (px - box.x) * scale_x if scale_x is not None else px,
            y + (py - box.y) * scale_y if scale_y is not None else py,
        )
        for px, py in shape.points
    )
    return replace(shape, points=points)


def scale_shape(shape: Optional[Shape], factor: float) -> Optional[Shape]:
    """Description: Uniformly scale a shape about its top-left corner
    Inputs: shape: Optional[Shape], factor: float
    """
    if factor <= 0:
        logger.debug("scale_shape: ignoring non-positive factor %s", factor)
        return shape
    match shape:
        case Rectangle():
            return replace(shape, width=shape.width * factor, height=shape.height * factor)
        case Circle():
            return replace(shape, radius=max(shape.radius * factor, config.MIN_RADIUS))
        case Text():
            font_size = _round_half_up((shape.font_size or config.DEFAULT_FONT_SIZE) * factor)
            return replace(
                shape,
                width=shape.width * factor,
                height=shape.height * factor,
                font_size=max(config.MIN_FONT_SIZE, min(config.MAX_FONT_SIZE, font_size)),
            )
        case Pencil():
            box = get_shape_bounding_box(shape)
            return replace(
                shape,
                points=tuple((box.x + (px - box.x) * factor, box.y + (py - box.y) * factor) for px, py in shape.points),
            )
        case Triangle():
            return replace(
                shape,
                end_x=shape.start_x + (shape.end_x - shape.start_x) * factor,
                end_y=shape.start_y + (shape.end_y - shape.start_y) * factor,
            )
        case _:
            return shape
