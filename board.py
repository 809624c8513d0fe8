# Ordered shape collection; list order is z-order (last drawn on top).

from __future__ import annotations

from typing import Iterator, List, Optional, Union
import logging

from hit_testing import is_point_in_shape
from model import Point, Shape, move_shape
from resize import Handle, get_resize_handle, resize_shape
from text_metrics import LineMeasurer

logger = logging.getLogger(__name__)


class Board:
    def __init__(self, shapes: Optional[List[Shape]] = None) -> None:
        """Description: Init
        Inputs: shapes: Optional[List[Shape]]
        """
        self._shapes: List[Shape] = []
        for shape in shapes or []:
            self.add(shape)

    def __iter__(self) -> Iterator[Shape]:
        return iter(list(self._shapes))

    def __len__(self) -> int:
        return len(self._shapes)

    @property
    def shapes(self) -> List[Shape]:
        return list(self._shapes)

    def add(self, shape: Shape) -> Shape:
        """Description: Append a shape on top of the others
        Inputs: shape: Shape
        """
        if self._index_of(shape.id) is not None:
            raise ValueError(f"Duplicate shape id: {shape.id}")
        self._shapes.append(shape)
        return shape

    def get(self, shape_id: str) -> Optional[Shape]:
        index = self._index_of(shape_id)
        return None if index is None else self._shapes[index]

    def remove(self, shape_id: str) -> Optional[Shape]:
        """Description: Remove a shape by id
        Inputs: shape_id: str
        """
        index = self._index_of(shape_id)
        if index is None:
            return None
        return self._shapes.pop(index)

    def replace(self, shape: Shape) -> bool:
        """Description: Swap in a new version of a shape, keeping its z-position
        Inputs: shape: Shape
        """
        index = self._index_of(shape.id)
        if index is None:
            logger.debug("replace: no shape with id %s", shape.id)
            return False
        self._shapes[index] = shape
        return True

    def bring_to_front(self, shape_id: str) -> bool:
        shape = self.remove(shape_id)
        if shape is None:
            return False
        self._shapes.append(shape)
        return True

    def clear(self) -> None:
        self._shapes.clear()

    def shape_at(self, point: Point) -> Optional[Shape]:
        """Description: Topmost shape under point
        Inputs: point: Point
        """
        for shape in reversed(self._shapes):
            if is_point_in_shape(point, shape):
                return shape
        return None

    def handle_at(self, point: Point, shape_id: str) -> Optional[Handle]:
        """Description: Resize handle of a stored shape under point
        Inputs: point: Point, shape_id: str
        """
        return get_resize_handle(point, self.get(shape_id))

    def resize(
        self,
        shape_id: str,
        handle: Union[Handle, str],
        point: Point,
        measurer: Optional[LineMeasurer] = None,
    ) -> Optional[Shape]:
        """Description: Resize a stored shape and keep the result
        Inputs: shape_id: str, handle: Union[Handle, str], point: Point, measurer: Optional[LineMeasurer]
        """
        shape = self.get(shape_id)
        if shape is None:
            return None
        resized = resize_shape(shape, handle, point, measurer=measurer)
        self.replace(resized)
        return resized

    def move(self, shape_id: str, dx: float, dy: float) -> Optional[Shape]:
        """Description: Move a stored shape and keep the result
        Inputs: shape_id: str, dx: float, dy: float
        """
        shape = self.get(shape_id)
        if shape is None:
            return None
        moved = move_shape(shape, dx, dy)
        self.replace(moved)
        return moved

    def _index_of(self, shape_id: str) -> Optional[int]:
        for index, shape in enumerate(self._shapes):
            if shape.id == shape_id:
                return index
        return None
