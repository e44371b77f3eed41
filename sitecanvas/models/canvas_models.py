"""
Canvas Models for Site Canvas
==============================

Models for device view modes, canvas frames and page backgrounds.
"""

from enum import Enum
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field, field_validator

from .element_models import Element
from .session_models import SessionState


class ViewMode(str, Enum):
    """Device mode the canvas is laid out for."""
    DESKTOP = "desktop"
    TABLET = "tablet"
    MOBILE = "mobile"


class CanvasFrame(BaseModel):
    """Fixed logical resolution of a view mode."""
    width: int
    height: int


VIEWPORTS: Dict[ViewMode, CanvasFrame] = {
    ViewMode.DESKTOP: CanvasFrame(width=1200, height=800),
    ViewMode.TABLET: CanvasFrame(width=768, height=1024),
    ViewMode.MOBILE: CanvasFrame(width=375, height=667),
}


class BackgroundType(str, Enum):
    """Page background fill."""
    SOLID = "solid"
    GRADIENT = "gradient"


class PageBackground(BaseModel):
    """Page background; `type` selects which of color/gradient is used."""
    type: BackgroundType = BackgroundType.SOLID
    color: str = "#ffffff"
    gradient: str = "linear-gradient(to right, #ffffff, #f0f0f0)"

    @field_validator("type", mode="before")
    @classmethod
    def _legacy_color_type(cls, value: Any) -> Any:
        # Older layouts stored solid fills as "color"
        if value == "color":
            return BackgroundType.SOLID
        return value

    def css(self) -> Dict[str, str]:
        """CSS declarations for this background, never both at once."""
        if self.type == BackgroundType.GRADIENT:
            return {"background": self.gradient}
        return {"background-color": self.color}


class CanvasSnapshot(BaseModel):
    """State of one editing surface after a command."""
    session_id: Optional[str] = None
    view_mode: ViewMode = ViewMode.DESKTOP
    frame: CanvasFrame = Field(default_factory=lambda: VIEWPORTS[ViewMode.DESKTOP])
    background: PageBackground = Field(default_factory=PageBackground)
    elements: List[Element] = Field(default_factory=list)
    session: SessionState = Field(default_factory=SessionState)
    applied: bool = True
