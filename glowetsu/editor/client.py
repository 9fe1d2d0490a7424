from typing import Any, Dict, Optional
import httpx


from glowetsu.collections.enums import ContentType
from glowetsu.utils.logger_utils import get_logger


logger = get_logger(__name__)


class ContentApiError(Exception):
    """
    Raised when the content API answers with a non-2xx status or cannot be reached.
    """

    def __init__(self, status_code: Optional[int], detail: str):
        super().__init__(f"{status_code}: {detail}")
        self.status_code = status_code
        self.detail = detail


class ContentApiClient:
    """
    Async HTTP client for the `/content` endpoints.
    """

    def __init__(self, http: httpx.AsyncClient, api_prefix: str = "/api"):
        self.http = http
        self.api_prefix = api_prefix.rstrip("/")

    def _url(self, content_type: ContentType) -> str:
        return f"{self.api_prefix}/content/{content_type.value}"

    async def _send(self, method: str, content_type: ContentType, **kwargs) -> Dict[str, Any]:
        """
        Send a request and decode the JSON answer.

        Args:
            method: HTTP method
            content_type: Content section addressed
            **kwargs: Extra arguments for httpx

        Returns:
            Decoded JSON body
        """
        try:
            response = await self.http.request(method, self._url(content_type), **kwargs)
        except httpx.HTTPError as e:
            logger.error(f"{method} {content_type.value} failed: {e}")
            raise ContentApiError(None, str(e)) from e

        if response.is_error:
            try:
                detail = response.json().get("detail", response.text)
            except ValueError:
                detail = response.text
            raise ContentApiError(response.status_code, detail)

        try:
            return response.json()
        except ValueError as e:
            logger.error(f"{method} {content_type.value} returned a non-JSON body")
            raise ContentApiError(response.status_code, "Invalid JSON response") from e

    async def fetch(self, content_type: ContentType) -> Dict[str, Any]:
        """
        Fetch the current content document.

        Args:
            content_type: Content section to fetch

        Returns:
            Content document as stored
        """
        return await self._send("GET", content_type)

    async def save(self, content_type: ContentType, payload: Dict[str, Any]) -> Dict[str, Any]:
        """
        Persist a content draft.

        Args:
            content_type: Content section to update
            payload: Complete draft in wire format

        Returns:
            Acknowledgement body
        """
        return await self._send("PUT", content_type, json=payload)

    async def upload_image(
        self,
        content_type: ContentType,
        filename: str,
        data: bytes,
        mime_type: str = "application/octet-stream",
    ) -> str:
        """
        Upload an image and return its URL.

        Args:
            content_type: Content section the image belongs to
            filename: File name sent with the upload
            data: Raw image bytes
            mime_type: Declared MIME type

        Returns:
            Public URL of the uploaded image
        """
        body = await self._send(
            "POST", content_type, files={"image": (filename, data, mime_type)}
        )
        return body["imageUrl"]
