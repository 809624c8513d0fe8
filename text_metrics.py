# Text measurement used for text bounding boxes and resize minimums.

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import Optional, Protocol, Tuple
import logging

from matplotlib.font_manager import FontProperties
from matplotlib.textpath import text_to_path

import config
from model import Text

logger = logging.getLogger(__name__)


class LineMeasurer(Protocol):
    def __call__(
        self,
        line: str,
        font_size: float,
        font_style: str = "normal",
        font_weight: str = "normal",
        font_family: str = config.DEFAULT_FONT_FAMILY,
    ) -> float:
        ...


@dataclass(frozen=True)
class TextMetrics:
    lines: Tuple[str, ...]
    line_widths: Tuple[float, ...]
    max_line_width: float
    line_height: float
    total_height: float


class MatplotlibLineMeasurer:
    """Measures line advance widths with matplotlib's FreeType text layout.

    Works without a display, so it is the default backend. Sizes are in
    points at 72 dpi, which makes one point one logical canvas unit.
    """

    def __call__(
        self,
        line: str,
        font_size: float,
        font_style: str = "normal",
        font_weight: str = "normal",
        font_family: str = config.DEFAULT_FONT_FAMILY,
    ) -> float:
        prop = FontProperties(family=font_family, style=font_style, weight=font_weight, size=font_size)
        width, _height, _descent = text_to_path.get_text_width_height_descent(line, prop, False)
        return float(width)


def estimate_line_width(line: str, font_size: float) -> float:
    return font_size * len(line) * config.TEXT_ESTIMATE_CHAR_RATIO


@lru_cache(maxsize=1)
def default_measurer() -> LineMeasurer:
    return MatplotlibLineMeasurer()


def measure_text(
    text: str,
    font_size: float,
    font_style: str = "normal",
    font_weight: str = "normal",
    font_family: str = config.DEFAULT_FONT_FAMILY,
    measurer: Optional[LineMeasurer] = None,
) -> TextMetrics:
    """Description: Measure every line of a possibly multi-line string
    Inputs: text: str, font_size: float, font_style: str, font_weight: str, font_family: str, measurer: Optional[LineMeasurer]
    """
    measurer = measurer or default_measurer()
    lines = tuple((text or "").split("\n"))
    # Empty lines still take up room, so measure them as a single space.
    widths = tuple(
        float(measurer(line or " ", font_size, font_style, font_weight, font_family)) for line in lines
    )
    line_height = font_size * config.LINE_HEIGHT_RATIO
    return TextMetrics(
        lines=lines,
        line_widths=widths,
        max_line_width=max(widths, default=0.0),
        line_height=line_height,
        total_height=line_height * len(lines),
    )


def min_text_size(
    text: str,
    font_size: float,
    font_style: str = "normal",
    font_weight: str = "normal",
    font_family: str = config.DEFAULT_FONT_FAMILY,
    measurer: Optional[LineMeasurer] = None,
) -> Tuple[float, float]:
    """Description: Smallest container that holds the text with its padding
    Inputs: text: str, font_size: float, font_style: str, font_weight: str, font_family: str, measurer: Optional[LineMeasurer]
    """
    metrics = measure_text(text, font_size, font_style, font_weight, font_family, measurer)
    padding_x = font_size * config.TEXT_PADDING_X_RATIO
    padding_y = font_size * config.TEXT_PADDING_Y_RATIO
    width = max(metrics.max_line_width + padding_x * 2, config.TEXT_MIN_WIDTH)
    height = max(metrics.total_height + padding_y * 2, config.TEXT_MIN_HEIGHT)
    return width, height


def text_shape_min_size(
    shape: Text,
    font_size: Optional[float] = None,
    measurer: Optional[LineMeasurer] = None,
) -> Tuple[float, float]:
    return min_text_size(
        shape.text,
        font_size if font_size is not None else shape.font_size,
        shape.font_style,
        shape.font_weight,
        shape.font_family,
        measurer,
    )
