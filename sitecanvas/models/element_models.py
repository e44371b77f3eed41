"""
Element Models for Site Canvas
===============================

Models for placeable page elements, their geometry and type configuration.
"""

import re
from enum import Enum
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator

_SAFE_ID = re.compile(r"^[A-Za-z0-9_-]+$")


class ElementType(str, Enum):
    """Built-in element type tags."""
    TEXT = "text"
    BUTTON = "button"
    IMAGE = "image"
    HERO = "hero"
    DIVIDER = "divider"
    SPACER = "spacer"
    LINK = "link"
    LOGO = "logo"
    MODAL = "modal"
    TABS = "tabs"
    ACCORDION = "accordion"
    SLIDER = "slider"
    RATING = "rating"
    CONTACT = "contact"
    ABOUT = "about"
    GALLERY = "gallery"
    SOCIAL = "social"
    FOOTER = "footer"
    PROJECTS = "projects"
    SECTION = "section"


class ElementCategory(str, Enum):
    """Palette category an element type is listed under."""
    BASIC = "basic"
    LAYOUT = "layout"
    INTERACTIVE = "interactive"
    FORMS = "forms"
    SECTIONS = "sections"


class Position(BaseModel):
    """Top-left corner in canvas coordinates."""
    x: float = 0
    y: float = 0


class Size(BaseModel):
    """Element box size in canvas pixels."""
    width: float = Field(default=100, ge=0)
    height: float = Field(default=50, ge=0)


class Animation(BaseModel):
    """Entrance/loop animation applied to an element on the published page."""
    type: str
    duration: float = 1
    delay: float = 0
    iteration: str = "1"

    @field_validator("type")
    @classmethod
    def _css_safe_name(cls, value: str) -> str:
        # Used as a @keyframes name
        if not _SAFE_ID.match(value):
            raise ValueError(f"Animation type must match {_SAFE_ID.pattern}: {value!r}")
        return value


class HoverInteraction(BaseModel):
    """Styles applied while the pointer is over the element."""
    styles: Dict[str, str] = Field(default_factory=dict)


class Interaction(BaseModel):
    """Interaction settings; click actions are kept as given."""
    model_config = ConfigDict(extra="allow")

    hover: Optional[HoverInteraction] = None
    click: Optional[Dict[str, Any]] = None


class Element(BaseModel):
    """
    A single placeable unit on a page.

    `type` is a plain string rather than ElementType so that documents can
    carry tags this build no longer registers; those are skipped at render
    time. `styles` values are opaque CSS strings keyed by camelCase property
    name and are forwarded without validation. Fields this model does not
    know are kept and written back unchanged.

    `id` is restricted to letters, digits, `_` and `-` because it is used
    as a CSS class name and selector in exported pages.
    """
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    id: str
    type: str
    content: str = ""
    styles: Dict[str, str] = Field(default_factory=dict)
    image_url: Optional[str] = Field(default=None, alias="imageUrl")
    video_url: Optional[str] = Field(default=None, alias="videoUrl")
    url: Optional[str] = None
    classes: Optional[List[str]] = None
    attributes: Optional[Dict[str, str]] = None
    animation: Optional[Animation] = None
    interaction: Optional[Interaction] = None
    position: Position = Field(default_factory=Position)
    size: Size = Field(default_factory=Size)

    @field_validator("id")
    @classmethod
    def _css_safe_id(cls, value: str) -> str:
        if not _SAFE_ID.match(value):
            raise ValueError(f"Element id must match {_SAFE_ID.pattern}: {value!r}")
        return value

    def link_target(self) -> Optional[str]:
        """URL a link element points to: `url`, else a link-type click action."""
        if self.url:
            return self.url
        click = self.interaction.click if self.interaction else None
        if click and click.get("action") == "link" and click.get("target"):
            return str(click["target"])
        return None

    def to_dict(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)


class ElementConfig(BaseModel):
    """Factory defaults and palette metadata for one element type."""
    type: str
    name: str
    category: ElementCategory
    default_content: str = ""
    default_styles: Dict[str, str] = Field(default_factory=dict)
    default_size: Size = Field(default_factory=Size)
    description: str = ""
