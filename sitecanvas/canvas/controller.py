"""
Canvas Controller
=================

Owns the viewport for one editing surface: device frame, page background,
hit-testing, and the commands that mutate the document.

The controller never persists anything. Its only side effects are selection
changes on the EditingSession and mutations of the Document it was given.
"""

import logging
from typing import Any, Dict, List, Optional

from ..elements.base import ElementCommands, px, style_attr
from ..elements.registry import ElementRegistry, default_registry
from ..models.canvas_models import (
    VIEWPORTS,
    CanvasFrame,
    CanvasSnapshot,
    PageBackground,
    ViewMode,
)
from ..models.element_models import Element, Position
from ..models.session_models import Command, CommandType, ResizeHandle, SessionPhase
from .document import Document
from .session import EditingSession

logger = logging.getLogger(__name__)

PLACEMENT_X = 50
PLACEMENT_STEP = 100


def canvas_frame(view_mode: ViewMode) -> CanvasFrame:
    """Logical resolution for a device mode."""
    return VIEWPORTS[ViewMode(view_mode)]


def render_canvas(
    document: Document,
    background: PageBackground,
    view_mode: ViewMode,
    selected_id: Optional[str],
    registry: ElementRegistry
) -> str:
    """
    Render a document into its device frame.

    Elements whose type has no registered renderer are skipped; every other
    element renders unaffected.
    """
    frame = canvas_frame(view_mode)
    frame_style = {
        "position": "relative",
        "overflow": "hidden",
        "width": px(frame.width),
        "height": px(frame.height),
        **background.css(),
    }

    parts: List[str] = []
    skipped = 0
    for element in document:
        renderer = registry.get_renderer(element.type)
        if renderer is None:
            skipped += 1
            logger.debug(f"[CANVAS] No renderer for type '{element.type}', skipping {element.id}")
            continue
        parts.append(renderer.render(element, selected_id == element.id))

    if skipped:
        logger.debug(f"[CANVAS] Skipped {skipped} unrenderable element(s)")

    return (
        f'<div class="canvas" data-view-mode="{ViewMode(view_mode).value}" '
        f'style="{style_attr(frame_style)}">{"".join(parts)}</div>'
    )


class CanvasController:
    """
    Canvas for one document and its editing session.

    Usage:
        controller = CanvasController(Document(), EditingSession())
        element = controller.add_element("hero")
        controller.dispatch(Command.update_position(element.id, 10, 20))
        html = controller.render()
    """

    def __init__(
        self,
        document: Optional[Document] = None,
        session: Optional[EditingSession] = None,
        registry: Optional[ElementRegistry] = None,
        background: Optional[PageBackground] = None,
        view_mode: ViewMode = ViewMode.DESKTOP,
        session_id: Optional[str] = None
    ):
        self.document = document if document is not None else Document()
        self.session = session if session is not None else EditingSession()
        self.registry = registry or default_registry()
        self.background = background or PageBackground()
        self.view_mode = ViewMode(view_mode)
        self.session_id = session_id
        self.commands = ElementCommands(
            select=self._select,
            update=self._update,
            delete=self._delete,
            begin_drag=self._begin_drag,
            begin_resize=self._begin_resize
        )

    # Viewport

    @property
    def frame(self) -> CanvasFrame:
        return canvas_frame(self.view_mode)

    def set_view_mode(self, view_mode: ViewMode) -> CanvasFrame:
        """Switch device frame; element positions are left as they are."""
        self.view_mode = ViewMode(view_mode)
        logger.info(f"[CANVAS] View mode -> {self.view_mode.value}")
        return self.frame

    def set_background(self, background: PageBackground) -> None:
        self.background = background

    def render(self) -> str:
        return render_canvas(
            self.document,
            self.background,
            self.view_mode,
            self.session.selected_id,
            self.registry
        )

    def is_renderable(self, element: Element) -> bool:
        return self.registry.is_registered(element.type)

    def snapshot(self, applied: bool = True) -> CanvasSnapshot:
        return CanvasSnapshot(
            session_id=self.session_id,
            view_mode=self.view_mode,
            frame=self.frame,
            background=self.background,
            elements=self.document.elements,
            session=self.session.snapshot(),
            applied=applied
        )

    # Hit testing

    def hit_test(self, x: float, y: float) -> Optional[Element]:
        """Topmost renderable element containing the point."""
        for element in reversed(self.document.elements):
            if not self.is_renderable(element):
                continue
            left, top = element.position.x, element.position.y
            if (left <= x <= left + element.size.width
                    and top <= y <= top + element.size.height):
                return element
        return None

    # Command dispatch

    def dispatch(self, command: Command) -> CanvasSnapshot:
        """Apply one command and return the resulting surface state."""
        handler = {
            CommandType.SELECT: self._dispatch_select,
            CommandType.DESELECT: self._dispatch_deselect,
            CommandType.UPDATE_CONTENT: self._dispatch_update_content,
            CommandType.UPDATE_POSITION: self._dispatch_update_position,
            CommandType.UPDATE_SIZE: self._dispatch_update_size,
            CommandType.UPDATE_STYLES: self._dispatch_update_styles,
            CommandType.SET_IMAGE: self._dispatch_set_image,
            CommandType.DELETE: self._dispatch_delete,
        }[command.type]
        applied = handler(command)
        if not applied:
            logger.info(
                f"[CANVAS] Command {command.type.value} not applied "
                f"(element_id={command.element_id})"
            )
        return self.snapshot(applied=applied)

    def _dispatch_select(self, command: Command) -> bool:
        return self._select(command.element_id)

    def _dispatch_deselect(self, command: Command) -> bool:
        self.session.clear()
        return True

    def _dispatch_update_content(self, command: Command) -> bool:
        return self._update(command.element_id, {"content": command.text or ""})

    def _dispatch_update_position(self, command: Command) -> bool:
        if command.position is None:
            return False
        return self._update(command.element_id, {"position": command.position})

    def _dispatch_update_size(self, command: Command) -> bool:
        if command.size is None:
            return False
        return self._update(command.element_id, {"size": command.size})

    def _dispatch_update_styles(self, command: Command) -> bool:
        element = self.document.get(command.element_id)
        if element is None or command.styles is None:
            return False
        return self._update(element.id, {"styles": {**element.styles, **command.styles}})

    def _dispatch_set_image(self, command: Command) -> bool:
        if not command.url:
            return False
        return self._update(command.element_id, {"image_url": command.url})

    def _dispatch_delete(self, command: Command) -> bool:
        return self._delete(command.element_id)

    # Callbacks handed to renderers

    def _select(self, element_id: Optional[str]) -> bool:
        element = self.document.get(element_id) if element_id is not None else None
        if element is None or not self.is_renderable(element):
            return False
        self.session.select(element_id)
        return True

    def _update(self, element_id: Optional[str], changes: Dict[str, Any]) -> bool:
        if element_id is None:
            return False
        return self.document.update(element_id, changes) is not None

    def _delete(self, element_id: Optional[str]) -> bool:
        if element_id is None or not self.document.delete(element_id):
            return False
        self.session.element_removed(element_id)
        logger.info(f"[CANVAS] Deleted element {element_id}")
        return True

    def _begin_drag(self, element_id: str, pointer: Position) -> bool:
        element = self.document.get(element_id)
        if element is None:
            return False
        return self.session.begin_drag(element_id, pointer, element.position)

    def _begin_resize(self, element_id: str, handle: ResizeHandle, pointer: Position) -> bool:
        element = self.document.get(element_id)
        if element is None:
            return False
        return self.session.begin_resize(element_id, handle, pointer, element.size)

    # Element lifecycle

    def add_element(self, element_type: str) -> Element:
        """Create an element from its type defaults, stack it below the others and select it."""
        element = self.registry.create(element_type)
        element.position = Position(
            x=PLACEMENT_X,
            y=len(self.document) * PLACEMENT_STEP + PLACEMENT_X
        )
        self.document.insert(element)
        self.session.select(element.id)
        logger.info(f"[CANVAS] Added {element_type} element {element.id}")
        return element

    def duplicate_element(self, element_id: str) -> Optional[Element]:
        copy = self.document.duplicate(element_id)
        if copy is not None:
            self.session.select(copy.id)
        return copy

    # Pointer gestures

    def click(self, x: float, y: float) -> Optional[str]:
        """Click at a canvas point; empty area clears the selection."""
        element = self.hit_test(x, y)
        if element is None:
            self.session.clear()
            return None
        renderer = self.registry.get_renderer(element.type)
        self.session.click_element(element.id, renderer.accepts_text(element))
        return element.id

    def pointer_down(self, x: float, y: float, handle: Optional[ResizeHandle] = None) -> bool:
        """
        Pointer down at a canvas point.

        With a handle, starts resizing the selected element; otherwise starts
        dragging the element under the pointer.
        """
        pointer = Position(x=x, y=y)
        if handle is not None:
            selected = self.document.get(self.session.selected_id) if self.session.selected_id else None
            if selected is None:
                return False
            renderer = self.registry.get_renderer(selected.type)
            if renderer is None:
                return False
            renderer.on_resize_start(selected, ResizeHandle(handle), pointer, self.commands)
            return self.session.phase == SessionPhase.RESIZING

        element = self.hit_test(x, y)
        if element is None:
            return False
        renderer = self.registry.get_renderer(element.type)
        renderer.on_drag_start(element, pointer, self.commands)
        return self.session.phase == SessionPhase.DRAGGING

    def pointer_move(self, x: float, y: float) -> Optional[Element]:
        """Track the pointer during a drag or resize; returns the updated element."""
        element_id = self.session.selected_id
        if element_id is None:
            return None
        pointer = Position(x=x, y=y)

        if self.session.phase == SessionPhase.DRAGGING:
            position = self.session.drag_to(pointer)
            return self.document.update(element_id, {"position": position})
        if self.session.phase == SessionPhase.RESIZING:
            size = self.session.resize_to(pointer)
            return self.document.update(element_id, {"size": size})
        return None

    def pointer_up(self) -> bool:
        return self.session.release()

    # Inline editing

    def focus_editor(self, element_id: str) -> bool:
        element = self.document.get(element_id)
        renderer = self.registry.get_renderer(element.type) if element else None
        if renderer is None or not renderer.accepts_text(element):
            return False
        return self.session.begin_editing(element_id)

    def edit_text(self, element_id: str, text: str) -> bool:
        """One keystroke in the inline editor, applied immediately."""
        element = self.document.get(element_id)
        if element is None:
            return False
        renderer = self.registry.get_renderer(element.type)
        if renderer is None:
            return False
        return renderer.on_content_change(element, text, self.commands)

    def commit_edit(self) -> bool:
        return self.session.commit_edit()

    def request_delete(self, element_id: str) -> bool:
        """Delete through the element's renderer (keyboard delete, toolbar)."""
        element = self.document.get(element_id)
        if element is None:
            return False
        renderer = self.registry.get_renderer(element.type)
        if renderer is None:
            return self._delete(element_id)
        renderer.on_delete(element, self.commands)
        return element_id not in self.document
