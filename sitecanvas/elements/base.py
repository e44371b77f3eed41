"""
Element Renderer Base
=====================

The capability set every element type implements inside the editing canvas:
render to an HTML fragment, accept content edits, accept delete requests and
start drag/resize gestures.

Renderers never mutate elements themselves. Every change goes back through
the ElementCommands bundle the canvas controller supplies, so the document
has a single mutation path.
"""

import html
import logging
import re
from typing import Any, Callable, Dict, Optional

from ..models.element_models import Element, ElementConfig, Position
from ..models.session_models import ResizeHandle

logger = logging.getLogger(__name__)

RESIZE_HANDLES = [h.value for h in ResizeHandle]

# Box placement comes from position/size only; styles cannot override it
GEOMETRY_KEYS = frozenset(("position", "left", "top", "right", "bottom", "width", "height"))

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def css_property(name: str) -> str:
    """Convert a camelCase style key to its CSS property name."""
    if "-" in name:
        return name.lower()
    return _CAMEL_BOUNDARY.sub("-", name).lower()


def px(value: float) -> str:
    """Format a pixel length without a trailing .0 for whole numbers."""
    if float(value).is_integer():
        return f"{int(value)}px"
    return f"{value}px"


def style_attr(declarations: Dict[str, str]) -> str:
    """Inline style attribute value; values are forwarded verbatim."""
    text = "; ".join(f"{css_property(k)}: {v}" for k, v in declarations.items() if v is not None)
    return html.escape(text, quote=True)


def safe_href(url: Optional[str]) -> str:
    """Link target for an href; script URLs and missing targets become "#"."""
    if not url or url.strip().lower().startswith(("javascript:", "vbscript:")):
        return "#"
    return url


class ElementCommands:
    """
    Callbacks a renderer uses to request changes.

    select(element_id), update(element_id, changes), delete(element_id),
    begin_drag(element_id, pointer), begin_resize(element_id, handle, pointer)
    """

    def __init__(
        self,
        select: Callable[[str], Any],
        update: Callable[[str, Dict[str, Any]], Any],
        delete: Callable[[str], Any],
        begin_drag: Callable[[str, Position], Any],
        begin_resize: Callable[[str, ResizeHandle, Position], Any]
    ):
        self.select = select
        self.update = update
        self.delete = delete
        self.begin_drag = begin_drag
        self.begin_resize = begin_resize


class ElementRenderer:
    """
    Default renderer: a positioned box showing the element content as text,
    swapped for an inline editor while selected.

    Subclasses override render_body/render_editor for their own markup and
    set text_bearing = False for purely visual types.
    """

    text_bearing = True
    editor_tag = "textarea"
    # Style keys applied to the inner text node as well as the wrapper
    text_style_keys = (
        "color", "fontSize", "fontWeight", "fontFamily", "lineHeight", "textAlign"
    )

    def __init__(self, config: Optional[ElementConfig] = None):
        self.config = config

    def accepts_text(self, element: Element) -> bool:
        """Whether the element has an inline text editor."""
        return self.text_bearing

    def effective_styles(self, element: Element) -> Dict[str, str]:
        """Stored styles over the type defaults; the stored mapping is untouched."""
        defaults = self.config.default_styles if self.config else {}
        return {**defaults, **element.styles}

    def text_styles(self, styles: Dict[str, str]) -> Dict[str, str]:
        return {k: styles[k] for k in self.text_style_keys if k in styles}

    def render(self, element: Element, is_selected: bool) -> str:
        """Render the element as a positioned canvas fragment."""
        styles = self.effective_styles(element)
        frame = {
            "position": "absolute",
            "left": px(element.position.x),
            "top": px(element.position.y),
            "width": px(element.size.width),
            "height": px(element.size.height),
            **{k: v for k, v in styles.items() if k not in GEOMETRY_KEYS},
        }
        classes = ["canvas-element", f"element-{element.type}"]
        if is_selected:
            classes.append("selected")

        if is_selected and self.accepts_text(element):
            body = self.render_editor(element, styles)
        else:
            body = self.render_body(element, styles, is_selected)

        handles = self.render_handles() if is_selected else ""
        return (
            f'<div class="{" ".join(classes)}" '
            f'data-element-id="{html.escape(element.id)}" '
            f'data-element-type="{html.escape(element.type)}" '
            f'style="{style_attr(frame)}">{body}{handles}</div>'
        )

    def render_body(self, element: Element, styles: Dict[str, str], is_selected: bool) -> str:
        return (
            f'<div class="element-content" style="{style_attr(self.text_styles(styles))}">'
            f'{html.escape(element.content)}</div>'
        )

    def render_editor(self, element: Element, styles: Dict[str, str]) -> str:
        text_style = style_attr(self.text_styles(styles))
        content = html.escape(element.content)
        if self.editor_tag == "input":
            return f'<input type="text" data-inline-editor value="{content}" style="{text_style}">'
        return f'<textarea data-inline-editor style="{text_style}">{content}</textarea>'

    def render_handles(self) -> str:
        return "".join(
            f'<div class="resize-handle resize-{h}" data-handle="{h}"></div>'
            for h in RESIZE_HANDLES
        )

    def on_content_change(self, element: Element, text: str, commands: ElementCommands) -> bool:
        """Forward an inline edit as an immediate content update."""
        if not self.accepts_text(element):
            logger.debug(f"[RENDERER] {element.type} ignores content edits")
            return False
        commands.update(element.id, {"content": text})
        return True

    def on_delete(self, element: Element, commands: ElementCommands) -> None:
        commands.delete(element.id)

    def on_drag_start(self, element: Element, pointer: Position, commands: ElementCommands) -> None:
        commands.begin_drag(element.id, pointer)

    def on_resize_start(
        self,
        element: Element,
        handle: ResizeHandle,
        pointer: Position,
        commands: ElementCommands
    ) -> None:
        commands.begin_resize(element.id, handle, pointer)
