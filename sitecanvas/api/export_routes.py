"""
Export Routes
==============

API routes for turning layouts into standalone HTML documents and for
saving/loading site layouts.
"""

import logging

from fastapi import APIRouter, Body, HTTPException
from fastapi.responses import HTMLResponse
from typing import Any, Optional
from pydantic import BaseModel

from ..models.layout_models import LayoutSettings
from ..services.document_export import document_to_layout
from ..services.layout_serializer import serialize
from .canvas_routes import get_controller

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/export", tags=["export"])

# Injected by server
state_manager = None
layout_store = None


class SaveRequest(BaseModel):
    """Request to save a session's document as a site layout."""
    settings: Optional[LayoutSettings] = None


def _session_layout(session_id: str, settings: Optional[LayoutSettings] = None):
    controller = get_controller(session_id)
    return document_to_layout(
        controller.document,
        controller.registry,
        settings=settings,
        background=controller.background
    )


@router.post("/serialize", response_class=HTMLResponse)
async def serialize_layout(layout: Any = Body(default=None)):
    """Serialize a raw layout (markup or block form) to HTML."""
    return HTMLResponse(content=serialize(layout))


@router.get("/sites/{site_id}", response_class=HTMLResponse)
async def render_site(site_id: str):
    """Load a saved site layout and serialize it."""
    if not layout_store:
        raise HTTPException(status_code=500, detail="Layout store not initialized")

    layout = layout_store.load_layout(site_id)
    if layout is None:
        raise HTTPException(status_code=404, detail="Site not found")

    return HTMLResponse(content=serialize(layout))


@router.get("/{session_id}", response_class=HTMLResponse)
async def export_session(session_id: str, title: Optional[str] = None):
    """Download the session's document as a standalone HTML page."""
    settings = LayoutSettings(title=title) if title else None
    layout = _session_layout(session_id, settings)
    return HTMLResponse(
        content=serialize(layout),
        headers={"Content-Disposition": 'attachment; filename="website.html"'}
    )


@router.put("/{session_id}/sites/{site_id}")
async def save_site(session_id: str, site_id: str, request: Optional[SaveRequest] = None):
    """Save the session's document as the layout of a site."""
    if not layout_store:
        raise HTTPException(status_code=500, detail="Layout store not initialized")

    settings = request.settings if request else None
    layout = _session_layout(session_id, settings)
    if not layout_store.save_layout(site_id, layout.model_dump(exclude_none=True)):
        raise HTTPException(status_code=400, detail=f"Could not save site {site_id}")

    logger.info(f"[EXPORT] Saved session {session_id} as site {site_id}")
    return {"message": "Site saved", "site_id": site_id, "session_id": session_id}
