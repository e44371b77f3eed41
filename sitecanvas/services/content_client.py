"""
Content Client for Site Canvas
==============================

HTTP client for the AI content-generation service.

Generated text is opaque to the canvas: callers apply it with the same
update_content command a manual edit uses.
"""

import logging
from enum import Enum
from typing import List, Optional

import httpx
from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)


class GenerationType(str, Enum):
    """Kind of generation requested."""
    CONTENT = "content"
    SECTION = "section"
    IMPROVE = "improve"
    SEO = "seo"


class ContentResponse(BaseModel):
    """Response from the content service."""
    success: bool
    content: str = ""
    suggestions: List[str] = Field(default_factory=list)
    generation_type: GenerationType = GenerationType.CONTENT
    error: Optional[str] = None


class ContentClient:
    """
    Client for the content-generation service.

    Usage:
        client = ContentClient(base_url="http://localhost:5000")
        response = await client.generate("Write a tagline", GenerationType.CONTENT)
        if response.success:
            text = response.content
    """

    ENDPOINT = "/api/ai/generate-section"

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self.timeout,
                headers={"Content-Type": "application/json"},
                transport=self._transport
            )
        return self._client

    async def close(self):
        """Close the HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    async def generate(
        self,
        prompt: str,
        generation_type: GenerationType = GenerationType.CONTENT,
        current_content: Optional[str] = None
    ) -> ContentResponse:
        """
        Request generated text.

        Args:
            prompt: Free-text instruction
            generation_type: content, section, improve or seo
            current_content: Existing element text, sent for improve/seo

        Returns:
            ContentResponse; success=False with error set on any failure
        """
        generation_type = GenerationType(generation_type)
        request_data = {
            "prompt": prompt,
            "type": generation_type.value,
        }
        if current_content:
            request_data["currentContent"] = current_content

        url = f"{self.base_url}{self.ENDPOINT}"
        logger.info(f"[CONTENT-CLIENT] Calling {url} with type={generation_type.value}")

        try:
            client = await self._get_client()
            response = await client.post(url, json=request_data)
            response.raise_for_status()

            data = response.json()
            if not data.get("success", True):
                return ContentResponse(
                    success=False,
                    generation_type=generation_type,
                    error=data.get("error", "Unknown error - success=false")
                )

            content = data.get("content") or data.get("generatedHtml") or ""
            suggestions = data.get("suggestions") or data.get("improvements") or []
            logger.info(
                f"[CONTENT-CLIENT-OK] type={generation_type.value}, "
                f"chars={len(content)}, suggestions={len(suggestions)}"
            )
            return ContentResponse(
                success=bool(content),
                content=content,
                suggestions=[str(s) for s in suggestions],
                generation_type=generation_type,
                error=None if content else "Empty generation result"
            )

        except httpx.TimeoutException:
            logger.error(f"[CONTENT-CLIENT-TIMEOUT] Request to {url} timed out")
            return ContentResponse(
                success=False,
                generation_type=generation_type,
                error="Request timed out"
            )

        except httpx.HTTPStatusError as e:
            logger.error(f"[CONTENT-CLIENT-ERROR] HTTP {e.response.status_code}: {e.response.text}")
            return ContentResponse(
                success=False,
                generation_type=generation_type,
                error=f"HTTP {e.response.status_code}: {e.response.text[:200]}"
            )

        except Exception as e:
            logger.error(f"[CONTENT-CLIENT-ERROR] {type(e).__name__}: {e}")
            return ContentResponse(
                success=False,
                generation_type=generation_type,
                error=str(e)
            )
