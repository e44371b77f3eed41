"""
Canvas State Manager
====================

Keeps one editing surface (document, session, background, view mode) per
session id in memory. Surfaces are single-writer; nothing here persists.
Saving goes through a LayoutStore.
"""

import logging
from datetime import datetime
from typing import Dict, List, Optional
import uuid

from ..elements.registry import ElementRegistry, default_registry
from ..models.canvas_models import PageBackground, ViewMode
from ..models.element_models import Element
from .controller import CanvasController
from .document import Document
from .session import EditingSession

logger = logging.getLogger(__name__)


class EditingSurface:
    """A canvas controller plus bookkeeping for one session."""

    def __init__(self, session_id: str, controller: CanvasController):
        self.session_id = session_id
        self.controller = controller
        self.created_at = datetime.now()
        self.updated_at: Optional[datetime] = None

    def touch(self) -> None:
        self.updated_at = datetime.now()


class StateManager:
    """Manages editing surfaces for sessions."""

    def __init__(
        self,
        registry: Optional[ElementRegistry] = None,
        default_view_mode: ViewMode = ViewMode.DESKTOP
    ):
        self.registry = registry or default_registry()
        self.default_view_mode = ViewMode(default_view_mode)
        self._surfaces: Dict[str, EditingSurface] = {}
        logger.info(f"[STATE-MANAGER] Initialized with {len(self.registry.all_types())} element types")

    def create_session(
        self,
        session_id: Optional[str] = None,
        elements: Optional[List[Element]] = None,
        background: Optional[PageBackground] = None
    ) -> str:
        """Create a new surface with optional ID and starting elements."""
        if session_id is None:
            session_id = str(uuid.uuid4())

        if session_id not in self._surfaces:
            controller = CanvasController(
                document=Document(elements),
                session=EditingSession(),
                registry=self.registry,
                background=background,
                view_mode=self.default_view_mode,
                session_id=session_id
            )
            self._surfaces[session_id] = EditingSurface(session_id, controller)
            logger.info(f"[STATE-MANAGER] Created session {session_id}")
        return session_id

    def get_surface(self, session_id: str) -> Optional[EditingSurface]:
        return self._surfaces.get(session_id)

    def get_controller(self, session_id: str) -> Optional[CanvasController]:
        surface = self._surfaces.get(session_id)
        return surface.controller if surface else None

    def touch(self, session_id: str) -> None:
        surface = self._surfaces.get(session_id)
        if surface:
            surface.touch()

    def clear_session(self, session_id: str) -> bool:
        """Clear all elements and the selection from a surface."""
        surface = self._surfaces.get(session_id)
        if not surface:
            return False

        surface.controller.document.clear()
        surface.controller.session.clear()
        surface.touch()
        return True

    def remove_session(self, session_id: str) -> bool:
        if self._surfaces.pop(session_id, None) is None:
            return False
        logger.info(f"[STATE-MANAGER] Removed session {session_id}")
        return True

    def list_sessions(self) -> List[str]:
        return list(self._surfaces.keys())
