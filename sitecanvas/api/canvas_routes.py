"""
Canvas Routes
==============

API routes for editing surfaces: session lifecycle, state, rendering,
device frame and page background.
"""

from fastapi import APIRouter, HTTPException
from fastapi.responses import HTMLResponse
from typing import Optional, Dict, Any, List
from pydantic import BaseModel

from ..canvas.controller import CanvasController
from ..models.canvas_models import CanvasSnapshot, PageBackground, ViewMode
from ..models.element_models import Element

router = APIRouter(prefix="/api/canvas", tags=["canvas"])

# Injected by server
state_manager = None


class SessionRequest(BaseModel):
    """Request to create a session, optionally seeded with elements."""
    session_id: Optional[str] = None
    elements: List[Element] = []
    background: Optional[PageBackground] = None


class CanvasStateResponse(BaseModel):
    """Response for canvas state."""
    session_id: str
    elements: List[Dict[str, Any]]
    snapshot: CanvasSnapshot
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class ViewModeRequest(BaseModel):
    """Request to switch device frame."""
    view_mode: ViewMode


def get_controller(session_id: str) -> CanvasController:
    """Resolve a session's controller or raise the matching HTTP error."""
    if not state_manager:
        raise HTTPException(status_code=500, detail="State manager not initialized")

    controller = state_manager.get_controller(session_id)
    if not controller:
        raise HTTPException(status_code=404, detail="Session not found")
    return controller


@router.post("/session")
async def create_session(request: Optional[SessionRequest] = None):
    """Create a new canvas session."""
    if not state_manager:
        raise HTTPException(status_code=500, detail="State manager not initialized")

    request = request or SessionRequest()
    try:
        session_id = state_manager.create_session(
            session_id=request.session_id,
            elements=request.elements,
            background=request.background
        )
    except ValueError as e:
        raise HTTPException(status_code=409, detail=str(e))

    return {"session_id": session_id, "message": "Session created"}


@router.get("/state/{session_id}")
async def get_state(session_id: str) -> CanvasStateResponse:
    """Get canvas state for session."""
    controller = get_controller(session_id)
    surface = state_manager.get_surface(session_id)

    return CanvasStateResponse(
        session_id=session_id,
        elements=controller.document.to_list(),
        snapshot=controller.snapshot(),
        created_at=surface.created_at.isoformat(),
        updated_at=surface.updated_at.isoformat() if surface.updated_at else None
    )


@router.get("/render/{session_id}", response_class=HTMLResponse)
async def render_canvas(session_id: str):
    """Render the canvas as HTML."""
    controller = get_controller(session_id)
    return HTMLResponse(content=controller.render())


@router.put("/view-mode/{session_id}")
async def set_view_mode(session_id: str, request: ViewModeRequest):
    """Switch the device frame; element positions are kept."""
    controller = get_controller(session_id)
    frame = controller.set_view_mode(request.view_mode)
    state_manager.touch(session_id)
    return {"view_mode": controller.view_mode.value, "frame": frame.model_dump()}


@router.put("/background/{session_id}")
async def set_background(session_id: str, background: PageBackground):
    """Set the page background."""
    controller = get_controller(session_id)
    controller.set_background(background)
    state_manager.touch(session_id)
    return {"background": background.model_dump(), "css": background.css()}


@router.delete("/state/{session_id}")
async def clear_canvas(session_id: str):
    """Clear all elements from canvas."""
    if not state_manager:
        raise HTTPException(status_code=500, detail="State manager not initialized")

    if not state_manager.clear_session(session_id):
        raise HTTPException(status_code=404, detail="Session not found")

    return {"message": "Canvas cleared", "session_id": session_id}
