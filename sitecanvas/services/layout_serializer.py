"""
Layout Serializer
=================

Converts a persisted layout into one self-contained HTML document.

Used for live preview and for export downloads. The conversion is a total,
pure function: every input, including None and unrecognized shapes, yields a
well-formed document and nothing is raised.

Only the metadata text fields (title, description, keywords) are entity
escaped. Bulk html, css and block content are author markup and pass through
verbatim; callers sanitize those upstream.
"""

import logging
from typing import Any, List

from ..models.layout_models import (
    BlockLayout,
    GlobalStyles,
    LayoutSettings,
    MarkupLayout,
    parse_layout,
)

logger = logging.getLogger(__name__)

DEFAULT_TITLE = "Website"

# Block-form stylesheet fallbacks
DEFAULT_FONT_FAMILY = "Inter, system-ui, sans-serif"
DEFAULT_FONT_SIZE = "16px"
DEFAULT_LINE_HEIGHT = "1.6"
DEFAULT_COLOR = "#333333"
DEFAULT_BACKGROUND_COLOR = "#ffffff"
DEFAULT_MAX_WIDTH = "1200px"
DEFAULT_MARGIN = "0 auto"
DEFAULT_PADDING = "0 20px"

EMPTY_DOCUMENT = (
    '<html><head><meta charset="UTF-8"><title>Website</title></head>'
    '<body><p>No content available</p></body></html>'
)

UNRECOGNIZED_DOCUMENT = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>Website</title>
</head>
<body>
  <p>Content format not recognized</p>
</body>
</html>"""


def escape_html(text: Any) -> str:
    """Escape the five HTML-special characters in a metadata value."""
    if not isinstance(text, str):
        text = str(text)
    return (
        text.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
        .replace("'", "&#039;")
    )


def _or_default(value: Any, default: str) -> str:
    # Empty strings and other falsy values fall back like unset ones
    if not value:
        return default
    return value if isinstance(value, str) else str(value)


def _render_head(settings: LayoutSettings, css: str) -> str:
    title = _or_default(settings.title, DEFAULT_TITLE)
    description = (
        f'<meta name="description" content="{escape_html(settings.description)}">'
        if settings.description else ""
    )
    keywords = (
        f'<meta name="keywords" content="{escape_html(settings.keywords)}">'
        if settings.keywords else ""
    )
    return f"""<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>{escape_html(title)}</title>
  {description}
  {keywords}
  <style>{css}</style>
</head>"""


def _render_markup(layout: MarkupLayout) -> str:
    html = layout.html or ""
    css = layout.css or ""
    return f"""<!DOCTYPE html>
<html lang="en">
{_render_head(layout.settings, css)}
<body>
  {html}
</body>
</html>"""


def build_global_css(styles: GlobalStyles) -> str:
    """Default stylesheet for block-form layouts."""
    return f"""
      * {{
        margin: 0;
        padding: 0;
        box-sizing: border-box;
      }}
      body {{
        font-family: {_or_default(styles.font_family, DEFAULT_FONT_FAMILY)};
        font-size: {_or_default(styles.font_size, DEFAULT_FONT_SIZE)};
        line-height: {_or_default(styles.line_height, DEFAULT_LINE_HEIGHT)};
        color: {_or_default(styles.color, DEFAULT_COLOR)};
        background-color: {_or_default(styles.background_color, DEFAULT_BACKGROUND_COLOR)};
      }}
      .container {{
        max-width: {_or_default(styles.max_width, DEFAULT_MAX_WIDTH)};
        margin: {_or_default(styles.margin, DEFAULT_MARGIN)};
        padding: {_or_default(styles.padding, DEFAULT_PADDING)};
      }}
    """


def render_blocks(layout: BlockLayout) -> str:
    """
    Render blocks as generic wrappers in array order.

    Each block becomes a div tagged with its type; there is no per-type
    markup. Missing type renders as "unknown", missing content as an
    empty wrapper.
    """
    parts: List[str] = []
    for block in layout.blocks:
        block_type = _or_default(block.type, "unknown")
        content = _or_default(block.content, "")
        parts.append(f'<div class="block" data-block-type="{block_type}">{content}</div>')
    return "\n".join(parts)


def _render_block_layout(layout: BlockLayout) -> str:
    css = build_global_css(layout.global_styles)
    html = render_blocks(layout)
    return f"""<!DOCTYPE html>
<html lang="en">
{_render_head(layout.settings, css)}
<body>
  <div class="container">
    {html}
  </div>
</body>
</html>"""


def _is_absent(layout: Any) -> bool:
    # Empty mappings and lists are present but unrecognized
    if layout is None:
        return True
    return isinstance(layout, (str, int, float, bool)) and not layout


def serialize(layout: Any) -> str:
    """
    Serialize a layout to a standalone HTML document.

    Args:
        layout: Raw layout mapping, MarkupLayout, BlockLayout, or None

    Returns:
        Complete HTML document text
    """
    if _is_absent(layout):
        return EMPTY_DOCUMENT

    resolved = parse_layout(layout)

    if isinstance(resolved, MarkupLayout):
        logger.debug(
            f"[SERIALIZER] Markup layout: html_chars={len(resolved.html or '')}, "
            f"css_chars={len(resolved.css or '')}"
        )
        return _render_markup(resolved)

    if isinstance(resolved, BlockLayout):
        logger.debug(f"[SERIALIZER] Block layout: blocks={len(resolved.blocks)}")
        return _render_block_layout(resolved)

    logger.info("[SERIALIZER] Layout format not recognized, emitting fallback document")
    return UNRECOGNIZED_DOCUMENT
