"""
Site Canvas Server
==================

FastAPI server for the website-builder canvas.

Features:
- Editing surfaces with an element registry, selection and drag/resize state
- Canvas rendering per device frame (desktop, tablet, mobile)
- Image uploads and AI content generation applied as canvas commands
- Layout serialization to standalone HTML and per-site JSON persistence
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import AppConfig

config = AppConfig.from_env()

# Configure logging
logging.basicConfig(
    level=getattr(logging, config.log_level, logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

# Import services
from .services.content_client import ContentClient, GenerationType
from .services.layout_store import JsonLayoutStore
from .services.upload_client import UploadClient

# Import canvas manager
from .canvas.state_manager import StateManager
from .models.canvas_models import VIEWPORTS

# Import API routers
from .api import canvas_routes, element_routes, export_routes


# Shared service instances
state_manager: StateManager = None
layout_store: JsonLayoutStore = None
upload_client: UploadClient = None
content_client: ContentClient = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    global config, state_manager, layout_store, upload_client, content_client

    logger.info("[SITE-CANVAS] Starting up...")
    config = AppConfig.from_env()

    # Initialize state manager
    state_manager = StateManager(default_view_mode=config.default_view_mode)

    # Initialize layout persistence
    layout_store = JsonLayoutStore(sites_dir=config.sites_dir)

    # Initialize upload client (inlines images when no service is configured)
    upload_client = UploadClient(
        base_url=config.upload_api_url,
        timeout=config.request_timeout
    )

    # Initialize content client
    content_client = ContentClient(
        base_url=config.content_api_url,
        timeout=config.request_timeout
    )

    # Inject into route modules
    canvas_routes.state_manager = state_manager

    element_routes.state_manager = state_manager
    element_routes.upload_client = upload_client
    element_routes.content_client = content_client

    export_routes.state_manager = state_manager
    export_routes.layout_store = layout_store

    logger.info("[SITE-CANVAS] Services initialized")

    yield

    # Cleanup
    logger.info("[SITE-CANVAS] Shutting down...")
    if upload_client:
        await upload_client.close()
    if content_client:
        await content_client.close()


# Create FastAPI app
app = FastAPI(
    title="Site Canvas",
    description="Website-builder canvas with element registry and layout export",
    version="1.0.0",
    lifespan=lifespan
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Allow all origins for development
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API routers
app.include_router(canvas_routes.router)
app.include_router(element_routes.router)
app.include_router(export_routes.router)


@app.get("/")
async def root():
    """Return API info."""
    return {
        "service": "Site Canvas",
        "version": "1.0.0",
        "status": "running",
        "endpoints": {
            "canvas": "/api/canvas/state/{session_id}",
            "render": "/api/canvas/render/{session_id}",
            "elements": "/api/element/{session_id}",
            "commands": "/api/element/{session_id}/commands",
            "export": "/api/export/{session_id}"
        }
    }


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "service": "site-canvas",
        "sessions": len(state_manager.list_sessions()) if state_manager else 0,
        "upload_api": config.upload_api_url or "inline",
        "content_api": config.content_api_url
    }


@app.get("/api/info")
async def api_info():
    """Get API information, element types and device frames."""
    registry = state_manager.registry if state_manager else None
    element_types = []
    if registry:
        for element_type in registry.all_types():
            element_config = registry.get_config(element_type)
            if element_config is None:
                continue
            element_types.append({
                "type": element_type,
                "name": element_config.name,
                "category": element_config.category.value,
                "description": element_config.description,
                "default_size": element_config.default_size.model_dump()
            })

    return {
        "service": "Site Canvas",
        "version": "1.0.0",
        "element_types": element_types,
        "view_modes": {
            mode.value: frame.model_dump() for mode, frame in VIEWPORTS.items()
        },
        "generation_types": [t.value for t in GenerationType]
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "sitecanvas.server:app",
        host="0.0.0.0",
        port=8080,
        reload=True
    )
