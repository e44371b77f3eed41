"""
Element Registry
================

Maps element type tags to their renderer and factory configuration.

Lookups for unregistered tags return None instead of raising: documents may
reference types the current build no longer supports, and the canvas skips
those elements rather than failing the whole page.
"""

import logging
import uuid
from typing import Dict, List, Optional, Type

from ..models.element_models import Element, ElementConfig, Position
from .base import ElementRenderer
from .configs import ELEMENT_CONFIGS
from .renderers import (
    ButtonRenderer,
    DividerRenderer,
    FooterRenderer,
    HeroRenderer,
    ImageRenderer,
    LinkRenderer,
    LogoRenderer,
    ModalRenderer,
    ProjectsRenderer,
    SectionRenderer,
    SliderRenderer,
    SocialRenderer,
    SpacerRenderer,
    TextRenderer,
)

logger = logging.getLogger(__name__)

DEFAULT_POSITION = Position(x=50, y=50)

BUILTIN_RENDERERS: Dict[str, Type[ElementRenderer]] = {
    "text": TextRenderer,
    "button": ButtonRenderer,
    "image": ImageRenderer,
    "hero": HeroRenderer,
    "divider": DividerRenderer,
    "spacer": SpacerRenderer,
    "link": LinkRenderer,
    "logo": LogoRenderer,
    "modal": ModalRenderer,
    "tabs": TextRenderer,
    "accordion": TextRenderer,
    "slider": SliderRenderer,
    "rating": TextRenderer,
    "contact": TextRenderer,
    "about": TextRenderer,
    "gallery": TextRenderer,
    "social": SocialRenderer,
    "footer": FooterRenderer,
    "projects": ProjectsRenderer,
    "section": SectionRenderer,
}


class UnknownElementTypeError(KeyError):
    """Raised when creating an element of an unregistered type."""


def new_element_id(element_type: str) -> str:
    return f"{element_type}-{uuid.uuid4().hex[:12]}"


class ElementRegistry:
    """Type tag -> renderer/config lookup plus the element factory."""

    def __init__(self):
        self._renderers: Dict[str, ElementRenderer] = {}
        self._configs: Dict[str, ElementConfig] = {}

    def register(
        self,
        element_type: str,
        renderer: ElementRenderer,
        config: Optional[ElementConfig] = None
    ) -> None:
        """Register (or replace) the renderer for a type tag."""
        if element_type in self._renderers:
            logger.info(f"[REGISTRY] Replacing renderer for '{element_type}'")
        self._renderers[element_type] = renderer
        if config is not None:
            self._configs[element_type] = config
            if renderer.config is None:
                renderer.config = config

    def unregister(self, element_type: str) -> bool:
        self._configs.pop(element_type, None)
        return self._renderers.pop(element_type, None) is not None

    def get_renderer(self, element_type: str) -> Optional[ElementRenderer]:
        return self._renderers.get(element_type)

    def get_config(self, element_type: str) -> Optional[ElementConfig]:
        return self._configs.get(element_type)

    def is_registered(self, element_type: str) -> bool:
        return element_type in self._renderers

    def all_types(self) -> List[str]:
        return list(self._renderers.keys())

    def types_by_category(self, category: str) -> List[str]:
        return [
            t for t, config in self._configs.items()
            if config.category.value == category
        ]

    def create(self, element_type: str, element_id: Optional[str] = None) -> Element:
        """
        Create a new element with the type's factory defaults.

        Args:
            element_type: Registered type tag
            element_id: Explicit id; a fresh unique id is generated otherwise

        Returns:
            Element with default content, styles, size and position (50, 50)

        Raises:
            UnknownElementTypeError: If the type has no configuration
        """
        config = self._configs.get(element_type)
        if config is None:
            raise UnknownElementTypeError(element_type)

        return Element(
            id=element_id or new_element_id(element_type),
            type=element_type,
            content=config.default_content,
            styles=dict(config.default_styles),
            position=DEFAULT_POSITION.model_copy(),
            size=config.default_size.model_copy()
        )


def default_registry() -> ElementRegistry:
    """Registry with every built-in element type."""
    registry = ElementRegistry()
    for element_type, renderer_cls in BUILTIN_RENDERERS.items():
        config = ELEMENT_CONFIGS[element_type]
        registry.register(element_type, renderer_cls(config), config)
    logger.debug(f"[REGISTRY] Registered {len(BUILTIN_RENDERERS)} built-in element types")
    return registry
