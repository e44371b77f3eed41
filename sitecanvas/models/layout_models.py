"""
Layout Models for Site Canvas
==============================

The persisted/export form of a page. A layout is either markup form
(pre-rendered html/css, e.g. from the visual builder widget) or block form
(a loose array of typed content blocks plus page-wide defaults).

The form is detected from field presence, never declared: markup form wins
whenever `html` or `css` is present, even if `blocks` is set too.
"""

import logging
from typing import Any, List, Optional, Union
from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)


class LayoutSettings(BaseModel):
    """Page metadata rendered into the document head."""
    model_config = ConfigDict(extra="allow")

    title: Optional[Any] = None
    description: Optional[Any] = None
    keywords: Optional[Any] = None


class GlobalStyles(BaseModel):
    """Page-wide defaults for block-form layouts."""
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    font_family: Optional[Any] = Field(default=None, alias="fontFamily")
    font_size: Optional[Any] = Field(default=None, alias="fontSize")
    line_height: Optional[Any] = Field(default=None, alias="lineHeight")
    color: Optional[Any] = None
    background_color: Optional[Any] = Field(default=None, alias="backgroundColor")
    max_width: Optional[Any] = Field(default=None, alias="maxWidth")
    margin: Optional[Any] = None
    padding: Optional[Any] = None


class Block(BaseModel):
    """A typed content block; extra keys are kept untouched."""
    model_config = ConfigDict(extra="allow")

    type: Optional[Any] = None
    content: Optional[Any] = None


class MarkupLayout(BaseModel):
    """Markup form: html and stylesheet text plus settings."""
    html: Optional[str] = None
    css: Optional[str] = None
    settings: LayoutSettings = Field(default_factory=LayoutSettings)


class BlockLayout(BaseModel):
    """Block form: blocks in paint order plus global styles and settings."""
    model_config = ConfigDict(populate_by_name=True)

    blocks: List[Block] = Field(default_factory=list)
    global_styles: GlobalStyles = Field(default_factory=GlobalStyles, alias="globalStyles")
    settings: LayoutSettings = Field(default_factory=LayoutSettings)


Layout = Union[MarkupLayout, BlockLayout]


def _coerce_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, str):
        return value
    return str(value)


def _parse_settings(raw: Any) -> LayoutSettings:
    if not isinstance(raw, dict):
        return LayoutSettings()
    return LayoutSettings.model_validate(raw)


def _parse_global_styles(raw: Any) -> GlobalStyles:
    if not isinstance(raw, dict):
        return GlobalStyles()
    return GlobalStyles.model_validate(raw)


def _parse_block(raw: Any) -> Block:
    if isinstance(raw, dict):
        return Block.model_validate(raw)
    return Block()


def parse_layout(raw: Any) -> Optional[Layout]:
    """
    Resolve a raw layout into its tagged form.

    Args:
        raw: Parsed JSON mapping, an already-resolved layout model, or None

    Returns:
        MarkupLayout, BlockLayout, or None when the input is absent or
        matches neither form. Never raises.
    """
    if raw is None:
        return None
    if isinstance(raw, (MarkupLayout, BlockLayout)):
        return raw
    if not isinstance(raw, dict):
        logger.warning(f"[LAYOUT] Unsupported layout value of type {type(raw).__name__}")
        return None

    settings = _parse_settings(raw.get("settings"))

    if "html" in raw or "css" in raw:
        return MarkupLayout(
            html=_coerce_text(raw.get("html")),
            css=_coerce_text(raw.get("css")),
            settings=settings
        )

    blocks = raw.get("blocks")
    if isinstance(blocks, list):
        return BlockLayout(
            blocks=[_parse_block(b) for b in blocks],
            global_styles=_parse_global_styles(raw.get("globalStyles")),
            settings=settings
        )

    return None
