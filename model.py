from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import ClassVar, Iterable, Optional, Tuple, Union
import logging
import math
import uuid

from matplotlib import colors

import config

logger = logging.getLogger(__name__)

Point = Tuple[float, float]


@dataclass(frozen=True)
class BoundingBox:
    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def center(self) -> Point:
        return (self.x + self.width / 2, self.y + self.height / 2)

    def contains(self, point: Point) -> bool:
        """Description: Inclusive point-in-box test
        Inputs: point: Point
        """
        return self.x <= point[0] <= self.right and self.y <= point[1] <= self.bottom


@dataclass(frozen=True)
class ShapeStyle:
    color: str = config.DEFAULT_COLOR
    font_size: int = config.DEFAULT_FONT_SIZE
    font_family: str = config.DEFAULT_FONT_FAMILY
    font_weight: str = "normal"
    font_style: str = "normal"

    def __post_init__(self) -> None:
        object.__setattr__(self, "color", normalize_color(self.color))
        _check_choice("font_weight", self.font_weight, config.FONT_WEIGHTS)
        _check_choice("font_style", self.font_style, config.FONT_STYLES)
        if self.font_size <= 0:
            raise ValueError(f"font_size must be positive, got {self.font_size}")


@dataclass(frozen=True)
class Rectangle:
    kind: ClassVar[str] = "rectangle"

    id: str
    x: float
    y: float
    width: float
    height: float
    color: str = config.DEFAULT_COLOR


@dataclass(frozen=True)
class Circle:
    kind: ClassVar[str] = "circle"

    id: str
    x: float
    y: float
    radius: float
    color: str = config.DEFAULT_COLOR


@dataclass(frozen=True)
class Pencil:
    kind: ClassVar[str] = "pencil"

    id: str
    points: Tuple[Point, ...] = field(default_factory=tuple)
    color: str = config.DEFAULT_COLOR


@dataclass(frozen=True)
class Text:
    kind: ClassVar[str] = "text"

    id: str
    text: str
    x: float
    y: float
    width: float = config.TEXT_DEFAULT_WIDTH
    height: float = config.TEXT_DEFAULT_HEIGHT
    font_size: int = config.DEFAULT_FONT_SIZE
    color: str = config.DEFAULT_COLOR
    align: str = "center"
    vertical_align: str = "middle"
    font_weight: str = "normal"
    font_style: str = "normal"
    text_decoration: str = "none"
    font_family: str = config.DEFAULT_FONT_FAMILY


@dataclass(frozen=True)
class Triangle:
    """Legacy two-corner triangle; the third vertex is mirrored from the first."""

    kind: ClassVar[str] = "triangle"

    id: str
    start_x: float
    start_y: float
    end_x: float
    end_y: float
    color: str = config.DEFAULT_COLOR


Shape = Union[Rectangle, Circle, Pencil, Text, Triangle]


def _check_choice(name: str, value: str, choices: Tuple[str, ...]) -> None:
    if value not in choices:
        raise ValueError(f"{name} must be one of {choices}, got {value!r}")


def normalize_color(color: str) -> str:
    """Description: Validate a color string and return it as #rrggbb
    Inputs: color: str
    """
    if not colors.is_color_like(color):
        raise ValueError(f"Invalid color: {color!r}")
    return colors.to_hex(color)


def new_shape_id() -> str:
    """Description: New shape id
    Inputs: None
    """
    return str(uuid.uuid4())


def create_rectangle(start: Point, end: Point, style: Optional[ShapeStyle] = None) -> Rectangle:
    """Description: Rectangle spanning two drag corners, at least 1 unit per side
    Inputs: start: Point, end: Point, style: Optional[ShapeStyle]
    """
    style = style or ShapeStyle()
    return Rectangle(
        id=new_shape_id(),
        x=min(start[0], end[0]),
        y=min(start[1], end[1]),
        width=max(abs(end[0] - start[0]), 1),
        height=max(abs(end[1] - start[1]), 1),
        color=style.color,
    )


def create_circle(start: Point, end: Point, style: Optional[ShapeStyle] = None) -> Circle:
    """Description: Circle centered on the drag start with the drag length as radius
    Inputs: start: Point, end: Point, style: Optional[ShapeStyle]
    """
    style = style or ShapeStyle()
    radius = max(math.hypot(end[0] - start[0], end[1] - start[1]), config.MIN_RADIUS)
    return Circle(
        id=new_shape_id(),
        x=start[0] - radius,
        y=start[1] - radius,
        radius=radius,
        color=style.color,
    )


def create_pencil(points: Iterable[Point], style: Optional[ShapeStyle] = None) -> Pencil:
    """Description: Create pencil
    Inputs: points: Iterable[Point], style: Optional[ShapeStyle]
    """
    style = style or ShapeStyle()
    copied = tuple((float(p[0]), float(p[1])) for p in points)
    if not copied:
        raise ValueError("A pencil stroke needs at least one point")
    return Pencil(id=new_shape_id(), points=copied, color=style.color)


def create_text(
    text: str,
    x: float,
    y: float,
    width: float = config.TEXT_DEFAULT_WIDTH,
    height: float = config.TEXT_DEFAULT_HEIGHT,
    style: Optional[ShapeStyle] = None,
) -> Text:
    """Description: Create text
    Inputs: text: str, x: float, y: float, width: float, height: float, style: Optional[ShapeStyle]
    """
    style = style or ShapeStyle()
    if width < 0 or height < 0:
        raise ValueError("Text box dimensions must not be negative")
    return Text(
        id=new_shape_id(),
        text=text,
        x=x,
        y=y,
        width=width,
        height=height,
        font_size=style.font_size,
        color=style.color,
        align="center",
        vertical_align="middle",
        font_weight=style.font_weight,
        font_style=style.font_style,
        font_family=style.font_family,
    )


def create_triangle(start: Point, end: Point, style: Optional[ShapeStyle] = None) -> Triangle:
    style = style or ShapeStyle()
    return Triangle(
        id=new_shape_id(),
        start_x=start[0],
        start_y=start[1],
        end_x=end[0],
        end_y=end[1],
        color=style.color,
    )


def move_shape(shape: Optional[Shape], dx: float, dy: float) -> Optional[Shape]:
    """Description: Translate a shape by a delta
    Inputs: shape: Optional[Shape], dx: float, dy: float
    """
    match shape:
        case Rectangle() | Circle() | Text():
            return replace(shape, x=shape.x + dx, y=shape.y + dy)
        case Pencil():
            return replace(shape, points=tuple((p[0] + dx, p[1] + dy) for p in shape.points))
        case Triangle():
            return replace(
                shape,
                start_x=shape.start_x + dx,
                start_y=shape.start_y + dy,
                end_x=shape.end_x + dx,
                end_y=shape.end_y + dy,
            )
        case _:
            logger.debug("move_shape: unsupported shape %r left unchanged", shape)
            return shape


# Text style helpers. Non-text input is returned unchanged.


def toggle_bold(shape: Shape) -> Shape:
    if not isinstance(shape, Text):
        return shape
    return replace(shape, font_weight="normal" if shape.font_weight == "bold" else "bold")


def toggle_italic(shape: Shape) -> Shape:
    if not isinstance(shape, Text):
        return shape
    return replace(shape, font_style="normal" if shape.font_style == "italic" else "italic")


def toggle_underline(shape: Shape) -> Shape:
    if not isinstance(shape, Text):
        return shape
    return replace(shape, text_decoration="none" if shape.text_decoration == "underline" else "underline")


def set_text_alignment(shape: Shape, align: str) -> Shape:
    """Description: Set horizontal alignment
    Inputs: shape: Shape, align: str
    """
    if not isinstance(shape, Text):
        return shape
    _check_choice("align", align, config.TEXT_ALIGNMENTS)
    return replace(shape, align=align)


def set_vertical_alignment(shape: Shape, vertical_align: str) -> Shape:
    """Description: Set vertical alignment
    Inputs: shape: Shape, vertical_align: str
    """
    if not isinstance(shape, Text):
        return shape
    _check_choice("vertical_align", vertical_align, config.TEXT_VERTICAL_ALIGNMENTS)
    return replace(shape, vertical_align=vertical_align)


def set_text_color(shape: Shape, color: str) -> Shape:
    if not isinstance(shape, Text):
        return shape
    return replace(shape, color=normalize_color(color))


_TEXT_STYLE_CHOICES = {
    "align": config.TEXT_ALIGNMENTS,
    "vertical_align": config.TEXT_VERTICAL_ALIGNMENTS,
    "font_weight": config.FONT_WEIGHTS,
    "font_style": config.FONT_STYLES,
    "text_decoration": config.TEXT_DECORATIONS,
}


def update_text_style(shape: Shape, **styles: object) -> Shape:
    """Description: Apply several style fields at once
    Inputs: shape: Shape, styles: keyword style values (align, vertical_align, font_weight, font_style, text_decoration, color, font_size, font_family)
    """
    if not isinstance(shape, Text):
        return shape
    allowed = set(_TEXT_STYLE_CHOICES) | {"color", "font_size", "font_family"}
    unknown = set(styles) - allowed
    if unknown:
        raise ValueError(f"Unknown text style fields: {sorted(unknown)}")
    for key, choices in _TEXT_STYLE_CHOICES.items():
        if key in styles:
            _check_choice(key, str(styles[key]), choices)
    if "color" in styles:
        styles["color"] = normalize_color(str(styles["color"]))
    if "font_size" in styles:
        font_size = int(styles["font_size"])
        if font_size <= 0:
            raise ValueError(f"font_size must be positive, got {font_size}")
        styles["font_size"] = font_size
    return replace(shape, **styles)
