"""
test_resize.py
--------------
Unit tests for resize.py
"""

import pytest

import config
from geometry import circle_center
from model import Circle, Pencil, Rectangle, Text, Triangle
from resize import Handle, get_resize_handle, get_shape_resize_handles, resize_shape, scale_shape
from text_metrics import min_text_size

DRAG_POINTS = [(150, 80), (-40, -30), (12, 22), (500, -500), (60, 45)]


# ---------------------------------------------------------------------------
# 1. Handle geometry
# ---------------------------------------------------------------------------

def test_resize_handles_order_and_positions(rect):
    handles = get_shape_resize_handles(rect)
    assert [h.name for h in handles] == [
        Handle.TOP_LEFT, Handle.TOP_RIGHT, Handle.BOTTOM_LEFT, Handle.BOTTOM_RIGHT,
        Handle.TOP_CENTER, Handle.MIDDLE_RIGHT, Handle.BOTTOM_CENTER, Handle.MIDDLE_LEFT,
    ]
    positions = {h.name: (h.x, h.y) for h in handles}
    assert positions[Handle.TOP_LEFT] == (10, 20)
    assert positions[Handle.BOTTOM_RIGHT] == (110, 70)
    assert positions[Handle.TOP_CENTER] == (60, 20)
    assert positions[Handle.MIDDLE_LEFT] == (10, 45)


def test_resize_handles_for_circle_use_bounding_box(circle):
    positions = {h.name: (h.x, h.y) for h in get_shape_resize_handles(circle)}
    assert positions[Handle.BOTTOM_RIGHT] == (20, 20)
    assert positions[Handle.MIDDLE_RIGHT] == (20, 10)


def test_resize_handles_missing_shape():
    assert get_shape_resize_handles(None) == []


@pytest.mark.parametrize("shape", [
    Rectangle(id="r", x=10, y=20, width=100, height=50),
    Circle(id="c", x=0, y=0, radius=25),
    Pencil(id="p", points=((0, 0), (80, 40))),
    Text(id="t", text="hi", x=5, y=5, width=150, height=40),
    Rectangle(id="r", x=0, y=0, width=10, height=10),
    Circle(id="c", x=0, y=0, radius=5),
])
def test_handle_positions_round_trip(shape):
    for handle in get_shape_resize_handles(shape):
        assert get_resize_handle((handle.x, handle.y), shape) == handle.name


def test_handles_round_trip_after_clamp_to_min_size(rect):
    tiny = resize_shape(rect, Handle.TOP_LEFT, (500, 500))
    assert (tiny.width, tiny.height) == (config.MIN_SIZE, config.MIN_SIZE)
    for handle in get_shape_resize_handles(tiny):
        assert get_resize_handle((handle.x, handle.y), tiny) == handle.name


def test_get_resize_handle_offset_outside_box(rect):
    assert get_resize_handle((5, 15), rect) == Handle.TOP_LEFT
    assert get_resize_handle((115, 75), rect) == Handle.BOTTOM_RIGHT
    assert get_resize_handle((60, 75), rect) == Handle.BOTTOM_CENTER


def test_get_resize_handle_misses(rect):
    assert get_resize_handle((60, 45), rect) is None
    assert get_resize_handle((-10, 20), rect) is None
    assert get_resize_handle((0, 0), None) is None


def test_get_resize_handle_first_match_wins_on_tiny_box():
    tiny = Rectangle(id="r", x=0, y=0, width=2, height=2)
    assert get_resize_handle((1, -5), tiny) == Handle.TOP_LEFT


# ---------------------------------------------------------------------------
# 2. Rectangle resize
# ---------------------------------------------------------------------------

def test_bottom_right_scenario():
    shape = Rectangle(id="r", x=0, y=0, width=100, height=50)
    out = resize_shape(shape, Handle.BOTTOM_RIGHT, (150, 80), (100, 50))
    assert (out.x, out.y, out.width, out.height) == (0, 0, 150, 80)
    assert out.id == shape.id


def test_resize_returns_new_value(rect):
    out = resize_shape(rect, Handle.BOTTOM_RIGHT, (200, 200))
    assert out is not rect
    assert (rect.width, rect.height) == (100, 50)


@pytest.mark.parametrize("name", ["bottomRight", "BottomRight"])
def test_handle_accepts_camel_case_name(rect, name):
    assert resize_shape(rect, name, (210, 170)) == resize_shape(rect, Handle.BOTTOM_RIGHT, (210, 170))


def test_unknown_handle_is_logged(rect, caplog):
    with caplog.at_level("WARNING", logger="resize"):
        resize_shape(rect, "diagonal", (0, 0))
    assert any("diagonal" in r.getMessage() for r in caplog.records)


def test_handle_accepts_string_value(rect):
    assert resize_shape(rect, "bottom_right", (150, 80)) == resize_shape(rect, Handle.BOTTOM_RIGHT, (150, 80))


@pytest.mark.parametrize("point", DRAG_POINTS)
def test_bottom_right_keeps_top_left(rect, point):
    out = resize_shape(rect, Handle.BOTTOM_RIGHT, point)
    assert (out.x, out.y) == (rect.x, rect.y)


@pytest.mark.parametrize("point", DRAG_POINTS)
def test_top_left_keeps_bottom_right(rect, point):
    out = resize_shape(rect, Handle.TOP_LEFT, point)
    assert out.x + out.width == pytest.approx(rect.x + rect.width)
    assert out.y + out.height == pytest.approx(rect.y + rect.height)


@pytest.mark.parametrize("handle", list(Handle))
@pytest.mark.parametrize("point", DRAG_POINTS)
def test_rectangle_never_below_min_size(rect, handle, point):
    out = resize_shape(rect, handle, point)
    assert out.width >= config.MIN_SIZE
    assert out.height >= config.MIN_SIZE


def test_edge_handles_touch_one_axis(rect):
    out = resize_shape(rect, Handle.TOP_CENTER, (999, 0))
    assert (out.x, out.width) == (rect.x, rect.width)
    assert (out.y, out.height) == (0, 70)

    out = resize_shape(rect, Handle.MIDDLE_LEFT, (0, 999))
    assert (out.y, out.height) == (rect.y, rect.height)
    assert (out.x, out.width) == (0, 110)


def test_top_right_and_bottom_left(rect):
    out = resize_shape(rect, Handle.TOP_RIGHT, (150, 10))
    assert (out.x, out.y, out.width, out.height) == (10, 10, 140, 60)

    out = resize_shape(rect, Handle.BOTTOM_LEFT, (0, 100))
    assert (out.x, out.y, out.width, out.height) == (0, 20, 110, 80)


def test_clamp_when_dragged_past_fixed_edge(rect):
    out = resize_shape(rect, Handle.TOP_LEFT, (500, 500))
    assert (out.x, out.y, out.width, out.height) == (100, 60, 10, 10)


def test_resize_is_idempotent(rect):
    first = resize_shape(rect, Handle.TOP_LEFT, (0, 0))
    assert resize_shape(rect, Handle.TOP_LEFT, (0, 0)) == first


@pytest.mark.parametrize("handle", [None, "diagonal", ""])
def test_unknown_handle_returns_shape_unchanged(rect, handle):
    assert resize_shape(rect, handle, (0, 0)) is rect


def test_missing_or_unknown_shape_unchanged():
    assert resize_shape(None, Handle.TOP_LEFT, (0, 0)) is None
    thing = object()
    assert resize_shape(thing, Handle.TOP_LEFT, (0, 0)) is thing


# ---------------------------------------------------------------------------
# 3. Circle resize
# ---------------------------------------------------------------------------

def test_circle_scenario(circle):
    out = resize_shape(circle, Handle.BOTTOM_RIGHT, (10, 40))
    assert out.radius == pytest.approx(30)
    assert (out.x, out.y) == (pytest.approx(-20), pytest.approx(-20))
    assert circle_center(out) == (pytest.approx(10), pytest.approx(10))


@pytest.mark.parametrize("handle", list(Handle))
@pytest.mark.parametrize("point", DRAG_POINTS)
def test_circle_keeps_center(circle, handle, point):
    out = resize_shape(circle, handle, point)
    cx, cy = circle_center(out)
    assert cx == pytest.approx(10)
    assert cy == pytest.approx(10)
    assert out.radius >= config.MIN_RADIUS


def test_circle_ignores_handle_name(circle):
    out = resize_shape(circle, "diagonal", (10, 40))
    assert out.radius == pytest.approx(30)
    assert resize_shape(circle, None, (10, 40)) is circle
    assert resize_shape(circle, "", (10, 40)) is circle


def test_circle_radius_floor(circle):
    out = resize_shape(circle, Handle.TOP_LEFT, (10, 10))
    assert out.radius == config.MIN_RADIUS
    assert (out.x, out.y) == (9, 9)


# ---------------------------------------------------------------------------
# 4. Text resize
# ---------------------------------------------------------------------------

def test_text_growth_scales_font(text_box, measurer):
    out = resize_shape(text_box, Handle.BOTTOM_RIGHT, (400, 120), measurer=measurer)
    # Both axes doubled: raw scale 2, damped to 1.5.
    assert out.font_size == 24
    assert (out.x, out.y, out.width, out.height) == (0, 0, 400, 120)


def test_text_shrink_clamps_to_content_minimum(text_box, measurer):
    out = resize_shape(text_box, Handle.BOTTOM_RIGHT, (5, 5), measurer=measurer)
    min_w, min_h = min_text_size(text_box.text, out.font_size, measurer=measurer)
    assert out.font_size == 10
    assert (out.width, out.height) == (pytest.approx(min_w), pytest.approx(min_h))
    assert (out.x, out.y) == (0, 0)


def test_text_shrink_from_top_left_keeps_far_edges(text_box, measurer):
    out = resize_shape(text_box, Handle.TOP_LEFT, (195, 55), measurer=measurer)
    assert out.x + out.width == pytest.approx(200)
    assert out.y + out.height == pytest.approx(60)
    min_w, min_h = min_text_size(text_box.text, out.font_size, measurer=measurer)
    assert out.width >= min_w - 1e-9
    assert out.height >= min_h - 1e-9


@pytest.mark.parametrize("handle", list(Handle))
@pytest.mark.parametrize("point", DRAG_POINTS)
def test_text_never_below_content_minimum(text_box, measurer, handle, point):
    out = resize_shape(text_box, handle, point, measurer=measurer)
    min_w, min_h = min_text_size(text_box.text, out.font_size, measurer=measurer)
    assert out.width >= min_w - 1e-9
    assert out.height >= min_h - 1e-9
    assert config.MIN_FONT_SIZE <= out.font_size <= config.MAX_FONT_SIZE


def test_text_font_size_clamped(measurer):
    big = Text(id="t", text="A", x=0, y=0, width=100, height=100, font_size=150)
    out = resize_shape(big, Handle.BOTTOM_RIGHT, (10000, 10000), measurer=measurer)
    assert out.font_size == config.MAX_FONT_SIZE

    small = Text(id="t", text="A", x=0, y=0, width=1000, height=1000, font_size=9)
    out = resize_shape(small, Handle.BOTTOM_RIGHT, (1, 1), measurer=measurer)
    assert out.font_size == config.MIN_FONT_SIZE


def test_text_keeps_style_fields(measurer):
    shape = Text(
        id="t", text="Hi", x=0, y=0, width=150, height=40, align="left",
        vertical_align="bottom", font_weight="bold", font_style="italic", text_decoration="underline",
    )
    out = resize_shape(shape, Handle.MIDDLE_RIGHT, (300, 0), measurer=measurer)
    assert (out.align, out.vertical_align) == ("left", "bottom")
    assert (out.font_weight, out.font_style, out.text_decoration) == ("bold", "italic", "underline")


def test_text_with_zero_box_does_not_divide_by_zero(measurer):
    shape = Text(id="t", text="Hi", x=0, y=0, width=0, height=0)
    out = resize_shape(shape, Handle.BOTTOM_RIGHT, (100, 100), measurer=measurer)
    assert out.font_size == shape.font_size
    assert (out.width, out.height) == (100, 100)


def test_text_without_content_still_resizes(measurer):
    shape = Text(id="t", text=None, x=0, y=0)
    out = resize_shape(shape, Handle.BOTTOM_RIGHT, (50, 50), measurer=measurer)
    assert out.font_size == 14
    # Width is held at the content minimum, height follows the drag.
    assert (out.width, out.height) == (config.TEXT_MIN_WIDTH, 50)


# ---------------------------------------------------------------------------
# 5. Pencil / triangle resize
# ---------------------------------------------------------------------------

def test_pencil_stretches_points(stroke):
    out = resize_shape(stroke, Handle.BOTTOM_RIGHT, (20, 30))
    assert out.points == ((0, 0), (20, 0), (20, 30))


def test_pencil_top_left_keeps_far_corner(stroke):
    out = resize_shape(stroke, Handle.TOP_LEFT, (-10, -10))
    assert out.points == ((-10, -10), (10, -10), (10, 10))


def test_pencil_flat_axis_untouched():
    flat = Pencil(id="p", points=((0, 5), (10, 5)))
    out = resize_shape(flat, Handle.BOTTOM_RIGHT, (30, 50))
    assert out.points == ((0, 5), (30, 5))


def test_triangle_not_resized():
    tri = Triangle(id="t", start_x=0, start_y=0, end_x=10, end_y=10)
    assert resize_shape(tri, Handle.BOTTOM_RIGHT, (50, 50)) is tri


# ---------------------------------------------------------------------------
# 6. scale_shape
# ---------------------------------------------------------------------------

def test_scale_shapes(rect, circle, stroke, text_box):
    assert scale_shape(rect, 2) == Rectangle(id="r1", x=10, y=20, width=200, height=100)
    assert scale_shape(circle, 0.5).radius == 5
    assert scale_shape(stroke, 2).points == ((0, 0), (20, 0), (20, 20))
    scaled_text = scale_shape(text_box, 1.5)
    assert (scaled_text.width, scaled_text.height, scaled_text.font_size) == (300, 90, 24)


@pytest.mark.parametrize("factor", [0, -1])
def test_scale_shape_ignores_non_positive_factor(rect, factor):
    assert scale_shape(rect, factor) is rect
