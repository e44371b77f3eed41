"""
Layout Store
============

Persistence adapter for layouts. The canvas treats a stored layout as an
opaque mapping; only the serializer looks inside it.
"""

import json
import logging
import re
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

_SAFE_SITE_ID = re.compile(r"^[A-Za-z0-9_.-]+$")


class LayoutStore:
    """Interface of the persistence service."""

    def load_layout(self, site_id: str) -> Optional[Dict[str, Any]]:
        raise NotImplementedError

    def save_layout(self, site_id: str, layout: Dict[str, Any]) -> bool:
        raise NotImplementedError


class JsonLayoutStore(LayoutStore):
    """Stores one JSON file per site under a directory."""

    def __init__(self, sites_dir: Optional[Path] = None):
        self.sites_dir = Path(sites_dir or "sites")
        self.sites_dir.mkdir(parents=True, exist_ok=True)
        self._cache: Dict[str, Dict[str, Any]] = {}
        logger.info(f"[LAYOUT-STORE] Initialized with sites_dir={self.sites_dir}")

    def _site_path(self, site_id: str) -> Optional[Path]:
        if site_id in (".", "..") or not _SAFE_SITE_ID.match(site_id):
            logger.warning(f"[LAYOUT-STORE] Rejected site id {site_id!r}")
            return None
        return self.sites_dir / f"{site_id}.json"

    def load_layout(self, site_id: str) -> Optional[Dict[str, Any]]:
        """Get a stored layout, or None if the site has none."""
        if site_id in self._cache:
            return self._cache[site_id]["layout"]

        site_path = self._site_path(site_id)
        if site_path is None or not site_path.exists():
            return None

        try:
            with open(site_path) as f:
                record = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"[LAYOUT-STORE] Failed to read {site_path}: {e}")
            return None

        self._cache[site_id] = record
        return record.get("layout")

    def save_layout(self, site_id: str, layout: Dict[str, Any]) -> bool:
        """Write a layout snapshot for a site."""
        site_path = self._site_path(site_id)
        if site_path is None:
            return False

        record = {
            "site_id": site_id,
            "updated_at": datetime.now().isoformat(),
            "layout": layout
        }
        try:
            with open(site_path, "w") as f:
                json.dump(record, f, indent=2)
        except OSError as e:
            logger.error(f"[LAYOUT-STORE] Failed to write {site_path}: {e}")
            return False

        self._cache[site_id] = record
        logger.info(f"[LAYOUT-STORE] Saved layout for site {site_id}")
        return True
