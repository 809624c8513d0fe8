# Pan/zoom state and screen <-> world coordinate conversion.

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional
import logging

import config
from hit_testing import get_shape_bounding_box
from model import BoundingBox, Point, Shape

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Viewport:
    """Maps world coordinates to the screen as ``screen = world * zoom + pan``."""

    zoom: float = 1.0
    pan_x: float = 0.0
    pan_y: float = 0.0

    def __post_init__(self) -> None:
        if self.zoom <= 0:
            raise ValueError(f"zoom must be positive, got {self.zoom}")

    def world_to_screen(self, point: Point) -> Point:
        """Description: World to screen
        Inputs: point: Point
        """
        return (point[0] * self.zoom + self.pan_x, point[1] * self.zoom + self.pan_y)

    def screen_to_world(self, point: Point) -> Point:
        """Description: Screen to world
        Inputs: point: Point
        """
        return ((point[0] - self.pan_x) / self.zoom, (point[1] - self.pan_y) / self.zoom)

    def zoom_at(self, x: float, y: float, factor: float) -> "Viewport":
        """Description: Zoom by factor keeping the world point under (x, y) in place
        Inputs: x: float, y: float, factor: float
        """
        if factor <= 0:
            logger.debug("zoom_at: ignoring non-positive factor %s", factor)
            return self
        new_zoom = min(config.ZOOM_MAX, max(config.ZOOM_MIN, self.zoom * factor))
        if new_zoom == self.zoom:
            return self
        world = self.screen_to_world((x, y))
        return Viewport(zoom=new_zoom, pan_x=x - world[0] * new_zoom, pan_y=y - world[1] * new_zoom)

    def zoom_in(self, width: float, height: float) -> "Viewport":
        return self.zoom_at(width / 2, height / 2, config.ZOOM_STEP)

    def zoom_out(self, width: float, height: float) -> "Viewport":
        return self.zoom_at(width / 2, height / 2, 1 / config.ZOOM_STEP)

    def pan_by(self, dx: float, dy: float) -> "Viewport":
        """Description: Pan by a screen-space delta
        Inputs: dx: float, dy: float
        """
        return replace(self, pan_x=self.pan_x + dx, pan_y=self.pan_y + dy)

    def visible_bounds(self, width: float, height: float) -> BoundingBox:
        """Description: World-space box covered by a width x height view
        Inputs: width: float, height: float
        """
        left, top = self.screen_to_world((0, 0))
        return BoundingBox(left, top, max(width, 0) / self.zoom, max(height, 0) / self.zoom)

    def is_shape_visible(
        self,
        shape: Optional[Shape],
        width: float,
        height: float,
        padding: float = config.VIEWPORT_PADDING,
    ) -> bool:
        """Description: Whether any part of shape falls inside the padded view
        Inputs: shape: Optional[Shape], width: float, height: float, padding: float
        """
        if shape is None:
            return False
        view = self.visible_bounds(width, height)
        box = get_shape_bounding_box(shape)
        return not (
            box.right < view.x - padding
            or box.x > view.right + padding
            or box.bottom < view.y - padding
            or box.y > view.bottom + padding
        )

    def fit(self, bounds: BoundingBox, width: float, height: float, margin: float = 0.0) -> "Viewport":
        """Description: Zoom and pan so bounds is centered and fully visible
        Inputs: bounds: BoundingBox, width: float, height: float, margin: float
        """
        avail_w = width - margin * 2
        avail_h = height - margin * 2
        if avail_w <= 0 or avail_h <= 0:
            logger.debug("fit: view %sx%s too small for margin %s", width, height, margin)
            return self
        scales = []
        if bounds.width > 0:
            scales.append(avail_w / bounds.width)
        if bounds.height > 0:
            scales.append(avail_h / bounds.height)
        zoom = min(scales) if scales else self.zoom
        zoom = min(config.ZOOM_MAX, max(config.ZOOM_MIN, zoom))
        center_x, center_y = bounds.center
        return Viewport(zoom=zoom, pan_x=width / 2 - center_x * zoom, pan_y=height / 2 - center_y * zoom)
