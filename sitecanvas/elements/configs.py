"""
Element Type Configurations
===========================

Factory defaults for every built-in element type: default content, styles
and size, plus the palette category each type is listed under.
"""

from typing import Dict

from ..models.element_models import ElementCategory, ElementConfig, ElementType, Size

HERO_GRADIENT = "linear-gradient(135deg, #667eea 0%, #764ba2 100%)"


def _config(
    element_type: ElementType,
    name: str,
    category: ElementCategory,
    content: str,
    styles: Dict[str, str],
    width: float,
    height: float,
    description: str
) -> ElementConfig:
    return ElementConfig(
        type=element_type.value,
        name=name,
        category=category,
        default_content=content,
        default_styles=styles,
        default_size=Size(width=width, height=height),
        description=description
    )


ELEMENT_CONFIGS: Dict[str, ElementConfig] = {
    c.type: c for c in [
        # Basic elements
        _config(
            ElementType.TEXT, "Text", ElementCategory.BASIC,
            "Your text content goes here",
            {
                "color": "#333333",
                "fontSize": "16px",
                "fontWeight": "normal",
                "backgroundColor": "transparent",
                "padding": "20px",
                "textAlign": "left",
                "borderRadius": "0px",
            },
            200, 40, "Add text content to your page"
        ),
        _config(
            ElementType.BUTTON, "Button", ElementCategory.BASIC,
            "Click Me",
            {
                "color": "#ffffff",
                "fontSize": "16px",
                "fontWeight": "bold",
                "backgroundColor": "#ff6b6b",
                "padding": "15px 30px",
                "textAlign": "center",
                "borderRadius": "25px",
                "transition": "all 0.3s ease",
                "boxShadow": "0 4px 15px rgba(255,107,107,0.3)",
            },
            200, 60, "Interactive button element"
        ),
        _config(
            ElementType.IMAGE, "Image", ElementCategory.BASIC,
            "Image placeholder",
            {
                "backgroundColor": "#f0f0f0",
                "border": "2px dashed #ccc",
                "padding": "20px",
                "textAlign": "center",
                "borderRadius": "8px",
            },
            300, 200, "Display images on your page"
        ),
        _config(
            ElementType.HERO, "Hero", ElementCategory.BASIC,
            "Your Heading",
            {
                "color": "#ffffff",
                "fontSize": "48px",
                "fontWeight": "bold",
                "backgroundColor": HERO_GRADIENT,
                "padding": "80px 20px",
                "textAlign": "center",
                "borderRadius": "0px",
                "boxShadow": "0 10px 30px rgba(0,0,0,0.3)",
            },
            800, 200, "Hero section with large heading"
        ),

        # Layout elements
        _config(
            ElementType.DIVIDER, "Divider", ElementCategory.LAYOUT,
            "",
            {
                "backgroundColor": "#e0e0e0",
                "height": "2px",
                "width": "100%",
                "margin": "20px 0",
            },
            400, 2, "Visual divider line"
        ),
        _config(
            ElementType.SPACER, "Spacer", ElementCategory.LAYOUT,
            "",
            {"backgroundColor": "transparent"},
            100, 50, "Add spacing between elements"
        ),
        _config(
            ElementType.LINK, "Link", ElementCategory.LAYOUT,
            "Link text",
            {
                "color": "#0066cc",
                "fontSize": "16px",
                "textDecoration": "underline",
                "cursor": "pointer",
            },
            100, 30, "Clickable link element"
        ),
        _config(
            ElementType.LOGO, "Logo", ElementCategory.LAYOUT,
            "Your Logo",
            {
                "fontSize": "24px",
                "fontWeight": "bold",
                "color": "#333333",
                "textAlign": "center",
            },
            150, 50, "Logo or brand element"
        ),

        # Interactive elements
        _config(
            ElementType.MODAL, "Modal", ElementCategory.INTERACTIVE,
            "Modal content",
            {
                "backgroundColor": "#ffffff",
                "padding": "30px",
                "textAlign": "center",
                "borderRadius": "10px",
                "boxShadow": "0 10px 30px rgba(0,0,0,0.3)",
                "color": "#333333",
                "fontSize": "16px",
            },
            400, 300, "Modal dialog element"
        ),
        _config(
            ElementType.TABS, "Tabs", ElementCategory.INTERACTIVE,
            "Tab content",
            {
                "backgroundColor": "#ffffff",
                "padding": "20px",
                "textAlign": "left",
                "borderRadius": "8px",
                "border": "1px solid #e0e0e0",
                "color": "#333333",
                "fontSize": "16px",
            },
            400, 200, "Tabbed content interface"
        ),
        _config(
            ElementType.ACCORDION, "Accordion", ElementCategory.INTERACTIVE,
            "Accordion item",
            {
                "backgroundColor": "#ffffff",
                "padding": "15px",
                "textAlign": "left",
                "borderRadius": "5px",
                "border": "1px solid #e0e0e0",
                "color": "#333333",
                "fontSize": "16px",
            },
            400, 150, "Collapsible content sections"
        ),
        _config(
            ElementType.SLIDER, "Slider", ElementCategory.INTERACTIVE,
            "Slider content",
            {
                "backgroundColor": "#f8f9fa",
                "padding": "20px",
                "textAlign": "center",
                "borderRadius": "8px",
                "color": "#333333",
                "fontSize": "16px",
            },
            400, 100, "Image or content slider"
        ),
        _config(
            ElementType.RATING, "Rating", ElementCategory.INTERACTIVE,
            "★★★★★",
            {
                "color": "#ffc107",
                "fontSize": "20px",
                "backgroundColor": "transparent",
                "padding": "10px",
                "textAlign": "center",
            },
            150, 40, "Star rating display"
        ),

        # Form elements
        _config(
            ElementType.CONTACT, "Contact", ElementCategory.FORMS,
            "Contact form placeholder",
            {
                "backgroundColor": "#f8f9fa",
                "padding": "30px",
                "textAlign": "center",
                "borderRadius": "8px",
            },
            400, 300, "Contact form element"
        ),

        # Section elements
        _config(
            ElementType.ABOUT, "About", ElementCategory.SECTIONS,
            "About section content",
            {
                "color": "#333333",
                "fontSize": "18px",
                "fontWeight": "normal",
                "backgroundColor": "#f8f9fa",
                "padding": "40px 20px",
                "textAlign": "center",
                "borderRadius": "0px",
            },
            600, 200, "About section with content"
        ),
        _config(
            ElementType.GALLERY, "Gallery", ElementCategory.SECTIONS,
            "Gallery placeholder",
            {
                "backgroundColor": "#f8f9fa",
                "padding": "20px",
                "textAlign": "center",
                "borderRadius": "8px",
            },
            500, 300, "Image gallery section"
        ),
        _config(
            ElementType.SOCIAL, "Social", ElementCategory.SECTIONS,
            "Social links placeholder",
            {
                "backgroundColor": "transparent",
                "padding": "10px",
                "textAlign": "center",
            },
            200, 50, "Social media links"
        ),
        _config(
            ElementType.FOOTER, "Footer", ElementCategory.SECTIONS,
            "Company Name",
            {
                "backgroundColor": "#34495e",
                "color": "white",
                "padding": "40px",
            },
            1200, 200, "Footer with links and contact details"
        ),
        _config(
            ElementType.PROJECTS, "Projects", ElementCategory.SECTIONS,
            "My Projects",
            {
                "backgroundColor": "white",
                "padding": "60px 40px",
            },
            1200, 500, "Project showcase grid"
        ),
        _config(
            ElementType.SECTION, "Section", ElementCategory.SECTIONS,
            "Section Title",
            {
                "backgroundColor": "white",
                "padding": "40px",
                "border": "1px solid #e9ecef",
                "borderRadius": "8px",
            },
            800, 300, "Generic content section"
        ),
    ]
}
