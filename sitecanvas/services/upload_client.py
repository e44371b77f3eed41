"""
Upload Client for Site Canvas
=============================

Turns an uploaded image blob into the string stored in an element's
image_url: either the URL returned by the upload service, or a data URI
when no upload service is configured.

ImageUploader is the one asynchronous boundary of the canvas. An upload is
fire-and-forget: on success it dispatches exactly one set_image command, on
failure nothing is dispatched and the element keeps its previous image.
Concurrent uploads for the same element race and the last one to finish wins.
"""

import asyncio
import base64
import logging
from typing import Callable, Optional, Set

import httpx
from pydantic import BaseModel

from ..models.session_models import Command

logger = logging.getLogger(__name__)


class UploadResponse(BaseModel):
    """Result of an image upload."""
    success: bool
    url: Optional[str] = None
    error: Optional[str] = None


def to_data_uri(data: bytes, content_type: str = "application/octet-stream") -> str:
    """Encode a blob as a base64 data URI."""
    encoded = base64.b64encode(data).decode("ascii")
    return f"data:{content_type};base64,{encoded}"


class UploadClient:
    """
    HTTP client for the upload service.

    Usage:
        client = UploadClient(base_url="https://media.example.com")
        response = await client.upload(data, "logo.png", "image/png")
        if response.success:
            url = response.url
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self.base_url = base_url.rstrip("/") if base_url else None
        self.timeout = timeout
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None
        if self.base_url:
            logger.info(f"[UPLOAD-CLIENT] Initialized with base URL: {self.base_url}")
        else:
            logger.info("[UPLOAD-CLIENT] No upload service configured, images will be inlined")

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self.timeout, transport=self._transport)
        return self._client

    async def close(self):
        """Close the HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    async def upload(
        self,
        data: bytes,
        filename: str = "image",
        content_type: str = "application/octet-stream"
    ) -> UploadResponse:
        """
        Upload an image blob.

        Args:
            data: Raw file bytes
            filename: Original file name
            content_type: MIME type of the blob

        Returns:
            UploadResponse with the URL (or data URI) to store on the element
        """
        if not data:
            return UploadResponse(success=False, error="Empty upload")

        if not content_type.startswith("image/"):
            logger.warning(f"[UPLOAD-CLIENT] Rejected non-image upload: {content_type}")
            return UploadResponse(success=False, error=f"Unsupported content type: {content_type}")

        if not self.base_url:
            return UploadResponse(success=True, url=to_data_uri(data, content_type))

        url = f"{self.base_url}/api/media/upload"
        logger.info(f"[UPLOAD-CLIENT] Uploading {filename} ({len(data)} bytes) to {url}")

        try:
            client = await self._get_client()
            response = await client.post(
                url,
                files={"file": (filename, data, content_type)}
            )
            response.raise_for_status()

            payload = response.json()
            media_url = payload.get("url")
            if not media_url:
                return UploadResponse(success=False, error="Upload response missing url")

            logger.info(f"[UPLOAD-CLIENT-OK] {filename} -> {media_url}")
            return UploadResponse(success=True, url=media_url)

        except httpx.TimeoutException:
            logger.error(f"[UPLOAD-CLIENT-TIMEOUT] Upload to {url} timed out")
            return UploadResponse(success=False, error="Request timed out")

        except httpx.HTTPStatusError as e:
            logger.error(f"[UPLOAD-CLIENT-ERROR] HTTP {e.response.status_code}: {e.response.text}")
            return UploadResponse(
                success=False,
                error=f"HTTP {e.response.status_code}: {e.response.text[:200]}"
            )

        except Exception as e:
            logger.error(f"[UPLOAD-CLIENT-ERROR] {type(e).__name__}: {e}")
            return UploadResponse(success=False, error=str(e))


class ImageUploader:
    """
    Runs uploads in the background and applies each result as one command.

    `dispatch` is the canvas controller's dispatch (or any callable taking a
    Command). No cancellation or retry: a later upload simply overwrites an
    earlier one when it completes.
    """

    def __init__(self, client: UploadClient, dispatch: Callable[[Command], object]):
        self.client = client
        self.dispatch = dispatch
        self._tasks: Set[asyncio.Task] = set()

    def start(
        self,
        element_id: str,
        data: bytes,
        filename: str = "image",
        content_type: str = "application/octet-stream"
    ) -> asyncio.Task:
        """Schedule an upload; must be called from a running event loop."""
        task = asyncio.get_running_loop().create_task(
            self._run(element_id, data, filename, content_type)
        )
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def _run(
        self,
        element_id: str,
        data: bytes,
        filename: str,
        content_type: str
    ) -> Optional[str]:
        response = await self.client.upload(data, filename, content_type)
        if not response.success or not response.url:
            logger.warning(
                f"[IMAGE-UPLOADER] Upload for {element_id} produced no image: {response.error}"
            )
            return None

        self.dispatch(Command.set_image(element_id, response.url))
        return response.url

    async def wait(self) -> int:
        """Wait for all pending uploads (used on shutdown and in tests)."""
        pending = list(self._tasks)
        if pending:
            await asyncio.gather(*pending, return_exceptions=True)
        return len(pending)
