"""
Editing Session
===============

Selection, in-place editing, drag and resize state for one editing surface.

Phases:
    IDLE -> SELECTED        click an element
    SELECTED -> EDITING     click the selected text element again, or focus its editor
    EDITING -> SELECTED     blur / commit
    SELECTED -> DRAGGING    pointer down on the element body
    SELECTED -> RESIZING    pointer down on a resize handle
    DRAGGING/RESIZING -> SELECTED   pointer up
    any -> IDLE             click empty canvas, or the selected element is deleted

At most one element is selected. The session holds no element data beyond
the origin values captured when a gesture starts; it computes the new
position or size and the controller writes it to the document.
"""

import logging
from typing import Optional

from ..models.element_models import Position, Size
from ..models.session_models import ResizeHandle, SessionPhase, SessionState

logger = logging.getLogger(__name__)

MIN_WIDTH = 50
MIN_HEIGHT = 30


class EditingSession:
    """Explicit state machine for the active editing surface."""

    def __init__(self):
        self._state = SessionState()

    @property
    def phase(self) -> SessionPhase:
        return self._state.phase

    @property
    def selected_id(self) -> Optional[str]:
        """Id of the selected element in any non-idle phase."""
        if self._state.phase == SessionPhase.IDLE:
            return None
        return self._state.element_id

    def is_selected(self, element_id: str) -> bool:
        return self.selected_id is not None and self.selected_id == element_id

    def snapshot(self) -> SessionState:
        return self._state.model_copy(deep=True)

    def _transition(self, state: SessionState) -> None:
        if state.phase != self._state.phase or state.element_id != self._state.element_id:
            logger.debug(
                f"[SESSION] {self._state.phase.value}({self._state.element_id}) -> "
                f"{state.phase.value}({state.element_id})"
            )
        self._state = state

    # Selection

    def select(self, element_id: str) -> None:
        """Select an element, leaving any edit or gesture on the previous one."""
        self._transition(SessionState(phase=SessionPhase.SELECTED, element_id=element_id))

    def click_element(self, element_id: str, text_bearing: bool = False) -> SessionPhase:
        """Handle a click on an element."""
        if self.is_selected(element_id):
            if self.phase == SessionPhase.EDITING:
                return self.phase
            if self.phase == SessionPhase.SELECTED and text_bearing:
                self._transition(SessionState(phase=SessionPhase.EDITING, element_id=element_id))
                return self.phase
        self.select(element_id)
        return self.phase

    def clear(self) -> None:
        """Click on empty canvas: back to idle from any phase."""
        self._transition(SessionState())

    def element_removed(self, element_id: str) -> None:
        if self._state.element_id == element_id:
            self.clear()

    # In-place editing

    def begin_editing(self, element_id: str) -> bool:
        """Focus the inline editor of the selected element."""
        if not self.is_selected(element_id):
            return False
        if self.phase in (SessionPhase.DRAGGING, SessionPhase.RESIZING):
            return False
        self._transition(SessionState(phase=SessionPhase.EDITING, element_id=element_id))
        return True

    def commit_edit(self) -> bool:
        """Blur or commit from the inline editor."""
        if self.phase != SessionPhase.EDITING:
            return False
        self.select(self._state.element_id)
        return True

    # Drag

    def begin_drag(self, element_id: str, pointer: Position, element_position: Position) -> bool:
        """
        Start dragging from a pointer-down on the element body.

        A pointer-down on an element that is not selected selects it first.
        Ignored while its inline editor is active.
        """
        if self.is_selected(element_id) and self.phase == SessionPhase.EDITING:
            return False
        if not self.is_selected(element_id) or self.phase != SessionPhase.SELECTED:
            self.select(element_id)

        offset = Position(x=pointer.x - element_position.x, y=pointer.y - element_position.y)
        self._transition(SessionState(
            phase=SessionPhase.DRAGGING,
            element_id=element_id,
            origin_offset=offset
        ))
        return True

    def drag_to(self, pointer: Position) -> Optional[Position]:
        """New element position for the pointer, clamped to the canvas origin."""
        if self.phase != SessionPhase.DRAGGING or self._state.origin_offset is None:
            return None
        offset = self._state.origin_offset
        return Position(x=max(0, pointer.x - offset.x), y=max(0, pointer.y - offset.y))

    # Resize

    def begin_resize(
        self,
        element_id: str,
        handle: ResizeHandle,
        pointer: Position,
        element_size: Size
    ) -> bool:
        """Start resizing from a handle; only allowed on the selected element."""
        if not self.is_selected(element_id) or self.phase != SessionPhase.SELECTED:
            return False
        self._transition(SessionState(
            phase=SessionPhase.RESIZING,
            element_id=element_id,
            handle=ResizeHandle(handle),
            origin_pointer=pointer.model_copy(),
            origin_size=element_size.model_copy()
        ))
        return True

    def resize_to(self, pointer: Position) -> Optional[Size]:
        """New element size for the pointer relative to the grabbed handle."""
        state = self._state
        if state.phase != SessionPhase.RESIZING or state.origin_size is None:
            return None

        dx = pointer.x - state.origin_pointer.x
        dy = pointer.y - state.origin_pointer.y
        width = state.origin_size.width
        height = state.origin_size.height
        handle = state.handle.value

        if "e" in handle:
            width += dx
        if "w" in handle:
            width -= dx
        if "s" in handle:
            height += dy
        if "n" in handle:
            height -= dy

        return Size(width=max(MIN_WIDTH, width), height=max(MIN_HEIGHT, height))

    def release(self) -> bool:
        """Pointer up: end a drag or resize, keeping the selection."""
        if self.phase not in (SessionPhase.DRAGGING, SessionPhase.RESIZING):
            return False
        self.select(self._state.element_id)
        return True
