# Tk font backend for text measurement, for hosts that draw on a tk.Canvas.

from __future__ import annotations

from typing import Optional
import logging

import tkinter as tk
import tkinter.font as tkfont

import config
from text_metrics import estimate_line_width

logger = logging.getLogger(__name__)


class TkLineMeasurer:
    """Measures lines with Tk fonts, falling back to a glyph-width estimate without Tk."""

    def __init__(self, root: Optional[tk.Misc] = None) -> None:
        """Description: Init
        Inputs: root: Optional[tk.Misc]
        """
        self._root = root
        self._warned = False

    def __call__(
        self,
        line: str,
        font_size: float,
        font_style: str = "normal",
        font_weight: str = "normal",
        font_family: str = config.DEFAULT_FONT_FAMILY,
    ) -> float:
        """Description: Pixel width of one line
        Inputs: line: str, font_size: float, font_style: str, font_weight: str, font_family: str
        """
        try:
            # Negative sizes are pixels in Tk.
            font = tkfont.Font(
                root=self._root,
                family=font_family,
                size=-max(1, int(round(font_size))),
                weight="bold" if font_weight == "bold" else "normal",
                slant="italic" if font_style == "italic" else "roman",
            )
            return float(font.measure(line))
        except (tk.TclError, RuntimeError) as exc:
            if not self._warned:
                logger.warning("Tk font measurement unavailable (%s); estimating text widths", exc)
                self._warned = True
            return estimate_line_width(line, font_size)
