"""
Session Models for Site Canvas
===============================

Models for editing-session state and the commands a canvas accepts.
"""

from enum import Enum
from typing import Dict, Optional
from pydantic import BaseModel, Field

from .element_models import Position, Size


class SessionPhase(str, Enum):
    """Phase of the editing state machine."""
    IDLE = "idle"
    SELECTED = "selected"
    EDITING = "editing"
    DRAGGING = "dragging"
    RESIZING = "resizing"


class ResizeHandle(str, Enum):
    """Resize handle grabbed on a selected element."""
    N = "n"
    S = "s"
    E = "e"
    W = "w"
    NE = "ne"
    NW = "nw"
    SE = "se"
    SW = "sw"


class SessionState(BaseModel):
    """Serializable snapshot of an EditingSession."""
    phase: SessionPhase = SessionPhase.IDLE
    element_id: Optional[str] = None
    origin_offset: Optional[Position] = None
    origin_pointer: Optional[Position] = None
    origin_size: Optional[Size] = None
    handle: Optional[ResizeHandle] = None


class CommandType(str, Enum):
    """Mutation and selection commands understood by the canvas."""
    SELECT = "select"
    UPDATE_CONTENT = "update_content"
    UPDATE_POSITION = "update_position"
    UPDATE_SIZE = "update_size"
    UPDATE_STYLES = "update_styles"
    SET_IMAGE = "set_image"
    DELETE = "delete"
    DESELECT = "deselect"


class Command(BaseModel):
    """A single canvas command; only the fields its type needs are read."""
    type: CommandType
    element_id: Optional[str] = None
    text: Optional[str] = None
    position: Optional[Position] = None
    size: Optional[Size] = None
    styles: Optional[Dict[str, str]] = None
    url: Optional[str] = None

    @classmethod
    def select(cls, element_id: str) -> "Command":
        return cls(type=CommandType.SELECT, element_id=element_id)

    @classmethod
    def deselect(cls) -> "Command":
        return cls(type=CommandType.DESELECT)

    @classmethod
    def update_content(cls, element_id: str, text: str) -> "Command":
        return cls(type=CommandType.UPDATE_CONTENT, element_id=element_id, text=text)

    @classmethod
    def update_position(cls, element_id: str, x: float, y: float) -> "Command":
        return cls(
            type=CommandType.UPDATE_POSITION,
            element_id=element_id,
            position=Position(x=x, y=y)
        )

    @classmethod
    def update_size(cls, element_id: str, width: float, height: float) -> "Command":
        return cls(
            type=CommandType.UPDATE_SIZE,
            element_id=element_id,
            size=Size(width=width, height=height)
        )

    @classmethod
    def update_styles(cls, element_id: str, styles: Dict[str, str]) -> "Command":
        return cls(type=CommandType.UPDATE_STYLES, element_id=element_id, styles=styles)

    @classmethod
    def set_image(cls, element_id: str, url: str) -> "Command":
        return cls(type=CommandType.SET_IMAGE, element_id=element_id, url=url)

    @classmethod
    def delete(cls, element_id: str) -> "Command":
        return cls(type=CommandType.DELETE, element_id=element_id)
