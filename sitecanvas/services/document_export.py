"""
Document Export
===============

Turns an editing document into a markup-form layout (html + css) so it can
be saved and serialized like any externally authored page.

Each element becomes an absolutely positioned `.element-{id}` box with one
CSS rule carrying its styles, plus its animation keyframes and hover rule
when set. Element text is escaped here because it comes from the inline
editor, not from author markup.
"""

import html
import logging
from typing import Iterable, List, Optional

from ..canvas.document import Document
from ..elements.base import GEOMETRY_KEYS, css_property, px, safe_href
from ..elements.registry import ElementRegistry
from ..models.canvas_models import PageBackground
from ..models.element_models import Animation, Element
from ..models.layout_models import LayoutSettings, MarkupLayout

logger = logging.getLogger(__name__)

PLACEHOLDER_IMAGE_URL = "https://via.placeholder.com/300x200"

# Style key -> fallback emitted when the element does not set it.
# "animation" is filled from Element.animation, not from styles.
CSS_FALLBACKS = [
    ("color", "#333333"),
    ("fontSize", "16px"),
    ("fontWeight", "normal"),
    ("backgroundColor", "transparent"),
    ("backgroundImage", "none"),
    ("backgroundSize", "cover"),
    ("backgroundPosition", "center"),
    ("padding", "0"),
    ("margin", "0"),
    ("textAlign", "left"),
    ("borderRadius", "0"),
    ("border", "none"),
    ("opacity", "1"),
    ("boxShadow", "none"),
    ("transform", "none"),
    ("transition", "all 0.3s ease"),
    ("animation", "none"),
    ("zIndex", "auto"),
    ("overflow", "hidden"),
    ("display", "block"),
    ("flexDirection", "row"),
    ("justifyContent", "flex-start"),
    ("alignItems", "stretch"),
    ("gap", "0"),
]

# backgroundColor can hold a gradient, so it is emitted as the shorthand
CSS_PROPERTY_OVERRIDES = {"backgroundColor": "background"}

KEYFRAMES = {
    "fadeIn": "from { opacity: 0; } to { opacity: 1; }",
    "slideIn": (
        "from { transform: translateY(-20px); opacity: 0; } "
        "to { transform: translateY(0); opacity: 1; }"
    ),
    "bounce": (
        "0%, 20%, 50%, 80%, 100% { transform: translateY(0); } "
        "40% { transform: translateY(-10px); } 60% { transform: translateY(-5px); }"
    ),
    "pulse": "0% { transform: scale(1); } 50% { transform: scale(1.05); } 100% { transform: scale(1); }",
    "rotate": "from { transform: rotate(0deg); } to { transform: rotate(360deg); }",
    "scale": "from { transform: scale(0); } to { transform: scale(1); }",
}


def _seconds(value: float) -> str:
    if float(value).is_integer():
        return f"{int(value)}s"
    return f"{value}s"


def animation_value(animation: Animation) -> str:
    """CSS `animation` shorthand: name duration delay iteration-count."""
    return (
        f"{animation.type} {_seconds(animation.duration)} "
        f"{_seconds(animation.delay)} {animation.iteration}"
    )


def _element_html(element: Element) -> str:
    content = html.escape(element.content)
    if element.type == "button":
        inner = (
            '<button style="width: 100%; height: 100%; border: none; cursor: pointer;">'
            f'{content}</button>'
        )
    elif element.type == "image":
        src = html.escape(element.image_url or PLACEHOLDER_IMAGE_URL)
        inner = (
            f'<img src="{src}" alt="{content}" '
            'style="width: 100%; height: 100%; object-fit: cover;" />'
        )
    elif element.type == "link":
        href = html.escape(safe_href(element.link_target()))
        inner = (
            f'<a href="{href}" style="width: 100%; height: 100%; display: flex; '
            f'align-items: center; justify-content: center;">{content}</a>'
        )
    else:
        inner = (
            '<div style="width: 100%; height: 100%; display: flex; '
            f'align-items: center; justify-content: center;">{content}</div>'
        )

    return (
        f'<div class="element-{html.escape(element.id)}" style="position: absolute; '
        f'left: {px(element.position.x)}; top: {px(element.position.y)}; '
        f'width: {px(element.size.width)}; height: {px(element.size.height)};">'
        f'{inner}</div>'
    )


def generate_html(elements: Iterable[Element]) -> str:
    """Positioned markup for elements in paint order."""
    return "\n".join(_element_html(e) for e in elements)


def _element_css(element: Element) -> str:
    selector = f".element-{element.id}"
    declarations: List[str] = []
    known = set()
    for key, fallback in CSS_FALLBACKS:
        known.add(key)
        prop = CSS_PROPERTY_OVERRIDES.get(key, css_property(key))
        if key == "animation":
            value = animation_value(element.animation) if element.animation else fallback
        else:
            value = element.styles.get(key) or fallback
        declarations.append(f"{prop}: {value};")
    for key, value in element.styles.items():
        if key not in known and key not in GEOMETRY_KEYS:
            declarations.append(f"{css_property(key)}: {value};")
    declarations.append("box-sizing: border-box;")

    body = "\n  ".join(declarations)
    rules = [f"{selector} {{\n  {body}\n}}"]

    if element.animation and element.animation.type in KEYFRAMES:
        rules.append(f"@keyframes {element.animation.type} {{ {KEYFRAMES[element.animation.type]} }}")

    hover = element.interaction.hover if element.interaction else None
    if hover and hover.styles:
        hover_body = " ".join(f"{css_property(k)}: {v};" for k, v in hover.styles.items())
        rules.append(f"{selector}:hover {{ {hover_body} }}")

    return "\n".join(rules)


def generate_css(
    elements: Iterable[Element],
    background: Optional[PageBackground] = None,
    base_css: str = ""
) -> str:
    """One rule per element, after the page rule and any template base CSS."""
    rules: List[str] = []
    if base_css:
        rules.append(base_css)
    page = {"margin": "0", "position": "relative", "min-height": "100vh"}
    if background is not None:
        page.update(background.css())
    rules.append("body { " + " ".join(f"{k}: {v};" for k, v in page.items()) + " }")
    rules.extend(_element_css(e) for e in elements)
    return "\n".join(rules)


def document_to_layout(
    document: Document,
    registry: ElementRegistry,
    settings: Optional[LayoutSettings] = None,
    background: Optional[PageBackground] = None
) -> MarkupLayout:
    """
    Export a document as a markup-form layout.

    Elements whose type is not registered are left out, matching how the
    canvas skips them.
    """
    elements = [e for e in document if registry.is_registered(e.type)]
    dropped = len(document) - len(elements)
    if dropped:
        logger.info(f"[EXPORT] Left out {dropped} element(s) with unregistered types")

    return MarkupLayout(
        html=generate_html(elements),
        css=generate_css(elements, background),
        settings=settings or LayoutSettings()
    )
