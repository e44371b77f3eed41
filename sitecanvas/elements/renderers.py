"""
Element Renderers
=================

Concrete renderers for the built-in element types.
"""

import html
from typing import Dict

from ..models.element_models import Element
from .base import ElementRenderer, safe_href, style_attr

SOCIAL_LINKS = [
    ("Facebook", "📘"),
    ("Twitter", "🐦"),
    ("Instagram", "📷"),
    ("LinkedIn", "💼"),
]

SLIDES = ["Slide 1", "Slide 2", "Slide 3"]

PROJECT_GRADIENTS = [
    "linear-gradient(135deg, #667eea 0%, #764ba2 100%)",
    "linear-gradient(135deg, #f093fb 0%, #f5576c 100%)",
    "linear-gradient(135deg, #4facfe 0%, #00f2fe 100%)",
]


def _file_input() -> str:
    return '<input type="file" accept="image/*" data-image-upload>'


class TextRenderer(ElementRenderer):
    """Plain text blocks: text, tabs, accordion, rating, contact, gallery, about."""


class LinkRenderer(ElementRenderer):
    editor_tag = "input"

    def render_body(self, element: Element, styles: Dict[str, str], is_selected: bool) -> str:
        return (
            f'<a href="{html.escape(safe_href(element.link_target()))}" '
            f'style="{style_attr(self.text_styles(styles))}">'
            f'{html.escape(element.content)}</a>'
        )


class HeroRenderer(ElementRenderer):
    text_style_keys = ElementRenderer.text_style_keys + (
        "backgroundImage", "backgroundSize", "backgroundPosition"
    )


class ButtonRenderer(ElementRenderer):
    editor_tag = "input"

    def render_body(self, element: Element, styles: Dict[str, str], is_selected: bool) -> str:
        return (
            f'<button type="button" style="{style_attr(self.text_styles(styles))}">'
            f'{html.escape(element.content)}</button>'
        )


class ImageRenderer(ElementRenderer):
    """Uploaded image, or a placeholder with its caption and an upload input."""

    text_bearing = False

    def render_body(self, element: Element, styles: Dict[str, str], is_selected: bool) -> str:
        if element.image_url:
            radius = styles.get("borderRadius")
            img_style = style_attr({"borderRadius": radius}) if radius else ""
            return (
                f'<img src="{html.escape(element.image_url)}" '
                f'alt="{html.escape(element.content)}" style="{img_style}">'
            )
        upload = _file_input() if is_selected else ""
        return (
            f'<div class="image-placeholder">'
            f'<div class="image-caption">{html.escape(element.content)}</div>'
            f'{upload}</div>'
        )


class LogoRenderer(ElementRenderer):
    """Brand text that can be swapped for an uploaded image."""

    editor_tag = "input"

    def accepts_text(self, element: Element) -> bool:
        return not element.image_url

    def render_body(self, element: Element, styles: Dict[str, str], is_selected: bool) -> str:
        if element.image_url:
            return (
                f'<img src="{html.escape(element.image_url)}" '
                f'alt="{html.escape(element.content)}">'
            )
        return super().render_body(element, styles, is_selected)

    def render_editor(self, element: Element, styles: Dict[str, str]) -> str:
        return super().render_editor(element, styles) + _file_input()


class SpacerRenderer(ElementRenderer):
    """Invisible gap; only outlined and labelled while selected."""

    text_bearing = False

    def render_body(self, element: Element, styles: Dict[str, str], is_selected: bool) -> str:
        if not is_selected:
            return '<div class="spacer"></div>'
        outline = style_attr({
            "backgroundColor": "rgba(59, 130, 246, 0.1)",
            "border": "2px dashed #3b82f6",
        })
        return f'<div class="spacer" style="{outline}"><span>Spacer</span></div>'


class DividerRenderer(ElementRenderer):
    """Horizontal rule; its width/height styles size the line inside the box."""

    text_bearing = False

    def render_body(self, element: Element, styles: Dict[str, str], is_selected: bool) -> str:
        line = style_attr({
            "backgroundColor": styles.get("backgroundColor"),
            "width": styles.get("width", "100%"),
            "height": styles.get("height", "2px"),
            "margin": styles.get("margin"),
            "borderRadius": styles.get("borderRadius"),
        })
        return f'<div class="divider" style="{line}"></div>'


class ModalRenderer(ElementRenderer):
    """Trigger button plus the dialog it opens."""

    def render_body(self, element: Element, styles: Dict[str, str], is_selected: bool) -> str:
        content = html.escape(element.content)
        text_style = style_attr(self.text_styles(styles))
        return (
            f'<button type="button" class="modal-trigger" style="{text_style}">{content}</button>'
            f'<dialog class="modal-dialog"><h3>Modal Content</h3>'
            f'<div style="{text_style}">{content}</div></dialog>'
        )


class SliderRenderer(ElementRenderer):
    def render_body(self, element: Element, styles: Dict[str, str], is_selected: bool) -> str:
        indicators = "".join(
            f'<span class="slide-indicator{" active" if i == 0 else ""}" data-slide="{i}"></span>'
            for i in range(len(SLIDES))
        )
        return (
            f'<div class="slide" style="{style_attr(self.text_styles(styles))}">'
            f'{html.escape(element.content)} - {SLIDES[0]}</div>'
            f'<div class="slide-indicators">{indicators}</div>'
        )


class SocialRenderer(ElementRenderer):
    def render_body(self, element: Element, styles: Dict[str, str], is_selected: bool) -> str:
        links = "".join(
            f'<a href="#" class="social-link" title="{name}">{icon}</a>'
            for name, icon in SOCIAL_LINKS
        )
        return (
            f'<div class="social-caption" style="{style_attr(self.text_styles(styles))}">'
            f'{html.escape(element.content)}</div>'
            f'<div class="social-links">{links}</div>'
        )


class FooterRenderer(ElementRenderer):
    text_bearing = False

    def render_body(self, element: Element, styles: Dict[str, str], is_selected: bool) -> str:
        name = html.escape(element.content or "Company Name")
        return (
            '<div class="footer-columns">'
            f'<div><h3>{name}</h3>'
            '<p>Creating amazing digital experiences for businesses worldwide.</p></div>'
            '<div><h4>Quick Links</h4>'
            '<a href="#home">Home</a><a href="#about">About</a>'
            '<a href="#services">Services</a><a href="#contact">Contact</a></div>'
            '<div><h4>Contact Info</h4>'
            '<div>📧 info@company.com</div><div>📞 +1 (555) 123-4567</div>'
            '<div>📍 123 Business St, City, State</div></div>'
            '</div>'
            f'<div class="footer-bottom"><p>&copy; {name}. All rights reserved.</p></div>'
        )


class ProjectsRenderer(ElementRenderer):
    text_bearing = False

    def render_body(self, element: Element, styles: Dict[str, str], is_selected: bool) -> str:
        cards = "".join(
            '<div class="project-card">'
            f'<div class="project-cover" style="{style_attr({"background": gradient})}">'
            f'Project {i + 1}</div>'
            '<div class="project-body"><h3>Project Title</h3>'
            '<p>Project description goes here</p></div></div>'
            for i, gradient in enumerate(PROJECT_GRADIENTS)
        )
        return (
            f'<div class="projects-header"><h2>{html.escape(element.content or "My Projects")}</h2>'
            '<p>A showcase of my recent work</p></div>'
            f'<div class="projects-grid">{cards}</div>'
        )


class SectionRenderer(ElementRenderer):
    text_bearing = False

    def render_body(self, element: Element, styles: Dict[str, str], is_selected: bool) -> str:
        return (
            f'<div class="section-body"><h2>{html.escape(element.content or "Section Title")}</h2>'
            '<p>This is a generic section that can be customized with your content.</p></div>'
        )
