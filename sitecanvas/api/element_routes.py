"""
Element Routes
===============

API routes for element management. Every mutation goes through the canvas
controller, either as a Command or through one of its element operations.
"""

import logging

from fastapi import APIRouter, File, HTTPException, UploadFile
from typing import Dict, Any
from pydantic import BaseModel

from ..elements.registry import UnknownElementTypeError
from ..models.canvas_models import CanvasSnapshot
from ..models.session_models import Command
from ..services.content_client import GenerationType
from ..services.upload_client import ImageUploader
from .canvas_routes import get_controller

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/element", tags=["elements"])

# Injected by server
state_manager = None
upload_client = None
content_client = None


class ElementRequest(BaseModel):
    """Request to add an element by type."""
    element_type: str


class ElementResponse(BaseModel):
    """Response for element operations."""
    element_id: str
    element_type: str
    element: Dict[str, Any]
    message: str


class GenerateRequest(BaseModel):
    """Request to fill an element with generated text."""
    prompt: str
    generation_type: GenerationType = GenerationType.CONTENT


def _touch(session_id: str):
    if state_manager:
        state_manager.touch(session_id)


@router.post("/{session_id}")
async def add_element(session_id: str, request: ElementRequest) -> ElementResponse:
    """Add element to canvas at the next free slot and select it."""
    controller = get_controller(session_id)

    try:
        element = controller.add_element(request.element_type)
    except UnknownElementTypeError:
        raise HTTPException(status_code=400, detail=f"Unknown element type: {request.element_type}")
    except ValueError as e:
        raise HTTPException(status_code=409, detail=str(e))

    _touch(session_id)
    return ElementResponse(
        element_id=element.id,
        element_type=element.type,
        element=element.to_dict(),
        message="Element added"
    )


@router.post("/{session_id}/commands")
async def dispatch_command(session_id: str, command: Command) -> CanvasSnapshot:
    """Apply one canvas command."""
    controller = get_controller(session_id)
    snapshot = controller.dispatch(command)
    if snapshot.applied:
        _touch(session_id)
    return snapshot


@router.post("/{session_id}/{element_id}/duplicate")
async def duplicate_element(session_id: str, element_id: str) -> ElementResponse:
    """Copy an element with a fresh id, offset from the original."""
    controller = get_controller(session_id)

    element = controller.duplicate_element(element_id)
    if element is None:
        raise HTTPException(status_code=404, detail="Element not found")

    _touch(session_id)
    return ElementResponse(
        element_id=element.id,
        element_type=element.type,
        element=element.to_dict(),
        message="Element duplicated"
    )


@router.delete("/{session_id}/{element_id}")
async def remove_element(session_id: str, element_id: str):
    """Remove element from canvas."""
    controller = get_controller(session_id)

    if not controller.request_delete(element_id):
        raise HTTPException(status_code=404, detail="Element not found")

    _touch(session_id)
    return {"message": "Element removed", "element_id": element_id}


@router.post("/{session_id}/{element_id}/image")
async def upload_image(
    session_id: str,
    element_id: str,
    file: UploadFile = File(...)
) -> CanvasSnapshot:
    """Upload an image and store its URL on the element."""
    controller = get_controller(session_id)
    if not upload_client:
        raise HTTPException(status_code=500, detail="Upload client not initialized")
    if element_id not in controller.document:
        raise HTTPException(status_code=404, detail="Element not found")

    data = await file.read()
    uploader = ImageUploader(upload_client, controller.dispatch)
    url = await uploader.start(
        element_id,
        data,
        filename=file.filename or "image",
        content_type=file.content_type or "application/octet-stream"
    )
    if url is None:
        raise HTTPException(status_code=400, detail="Image upload failed")

    _touch(session_id)
    return controller.snapshot()


@router.post("/{session_id}/{element_id}/generate")
async def generate_content(
    session_id: str,
    element_id: str,
    request: GenerateRequest
) -> CanvasSnapshot:
    """Replace an element's text with AI-generated content."""
    controller = get_controller(session_id)
    if not content_client:
        raise HTTPException(status_code=500, detail="Content client not initialized")

    element = controller.document.get(element_id)
    if element is None:
        raise HTTPException(status_code=404, detail="Element not found")

    response = await content_client.generate(
        request.prompt,
        request.generation_type,
        current_content=element.content or None
    )
    if not response.success:
        logger.warning(f"[ELEMENT-ROUTES] Generation failed for {element_id}: {response.error}")
        raise HTTPException(status_code=502, detail=response.error or "Generation failed")

    snapshot = controller.dispatch(Command.update_content(element_id, response.content))
    _touch(session_id)
    return snapshot
