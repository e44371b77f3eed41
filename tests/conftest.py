"""Shared fixtures for Site Canvas tests."""

import pytest

from sitecanvas.canvas.controller import CanvasController
from sitecanvas.canvas.document import Document
from sitecanvas.canvas.session import EditingSession
from sitecanvas.elements.registry import default_registry
from sitecanvas.models.element_models import Element, Position, Size


def make_element(element_id, element_type="text", x=0, y=0, width=100, height=50, **kwargs):
    return Element(
        id=element_id,
        type=element_type,
        position=Position(x=x, y=y),
        size=Size(width=width, height=height),
        **kwargs
    )


@pytest.fixture
def registry():
    return default_registry()


@pytest.fixture
def document():
    return Document([
        make_element("a", "text", x=0, y=0, content="Alpha"),
        make_element("b", "button", x=200, y=0, content="Go"),
    ])


@pytest.fixture
def controller(document, registry):
    return CanvasController(document, EditingSession(), registry, session_id="test")
