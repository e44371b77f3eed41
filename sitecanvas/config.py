"""
Site Canvas Configuration
=========================

Environment-driven settings for the server and its service clients.
"""

import os
from pathlib import Path
from typing import Optional
from pydantic import BaseModel

from .models.canvas_models import ViewMode

SITES_DIR = os.getenv(
    "SITECANVAS_SITES_DIR",
    str(Path(__file__).parent.parent / "sites")
)

# Unset means uploads are inlined as data URIs
UPLOAD_API_URL = os.getenv("UPLOAD_API_URL")

CONTENT_API_URL = os.getenv("CONTENT_API_URL", "http://localhost:5000")


class AppConfig(BaseModel):
    """Configuration for the Site Canvas service."""
    sites_dir: Path = Path(SITES_DIR)
    upload_api_url: Optional[str] = UPLOAD_API_URL
    content_api_url: str = CONTENT_API_URL
    request_timeout: float = 30.0
    log_level: str = "INFO"
    default_view_mode: ViewMode = ViewMode.DESKTOP

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Read settings from the environment at call time."""
        return cls(
            sites_dir=Path(os.getenv("SITECANVAS_SITES_DIR", SITES_DIR)),
            upload_api_url=os.getenv("UPLOAD_API_URL") or None,
            content_api_url=os.getenv("CONTENT_API_URL", CONTENT_API_URL),
            request_timeout=float(os.getenv("SITECANVAS_TIMEOUT", "30")),
            log_level=os.getenv("SITECANVAS_LOG_LEVEL", "INFO").upper(),
            default_view_mode=ViewMode(os.getenv("SITECANVAS_VIEW_MODE", ViewMode.DESKTOP.value))
        )
