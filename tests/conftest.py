"""
conftest.py
-----------
Shared pytest fixtures for the shape geometry tests.
"""

import matplotlib
matplotlib.use("Agg")  # headless font metrics only

import pytest

from model import Circle, Pencil, Rectangle, Text


def fake_measure(line, font_size, font_style="normal", font_weight="normal", font_family="sans-serif"):
    """Half an em per character; bold lines are a bit wider."""
    width = len(line) * font_size * 0.5
    return width * 1.1 if font_weight == "bold" else width


@pytest.fixture
def measurer():
    return fake_measure


@pytest.fixture
def rect() -> Rectangle:
    return Rectangle(id="r1", x=10, y=20, width=100, height=50)


@pytest.fixture
def circle() -> Circle:
    return Circle(id="c1", x=0, y=0, radius=10)


@pytest.fixture
def stroke() -> Pencil:
    return Pencil(id="p1", points=((0, 0), (10, 0), (10, 10)))


@pytest.fixture
def text_box() -> Text:
    return Text(id="t1", text="Hello world", x=0, y=0, width=200, height=60, font_size=16)
