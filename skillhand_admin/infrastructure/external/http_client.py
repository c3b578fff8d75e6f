"""
HTTP transport for the marketplace backend.
"""

import asyncio
import json
import time
from typing import Any, Dict, Optional

import httpx
import structlog

from skillhand_admin.domain.exceptions.api_error import (
    HttpStatusError,
    InvalidResponseError,
    RequestCancelledError,
    TransportError,
)
from skillhand_admin.infrastructure.external.cancellation import CancelToken
from skillhand_admin.infrastructure.monitoring.metrics import record_backend_request

logger = structlog.get_logger()

JSON_CONTENT_TYPE = "application/json"


def extract_error_message(status_code: int, body_text: str) -> str:
    """Pick the message for a failed response.

    Preference order: the JSON body's `message` field, the raw body text,
    then a generic status-coded message.
    """
    message = body_text
    try:
        payload = json.loads(body_text)
    except ValueError:
        payload = None

    if isinstance(payload, dict) and payload.get("message"):
        message = str(payload["message"])

    return message or f"Request failed with status {status_code}"


def _endpoint_label(path: str) -> str:
    """Collapse a path to its first segment to keep metric labels bounded."""
    path = path.split("?", 1)[0]
    if path.startswith("http"):
        path = httpx.URL(path).path
    segments = [segment for segment in path.split("/") if segment]
    return "/" + segments[0] if segments else "/"


class ApiTransport:
    """JSON request helper bound to the backend base URL.

    One `httpx.AsyncClient` is shared by every call so cookies set by the
    backend travel with later requests.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.client = client
        self._owns_client = client is None

    async def __aenter__(self):
        """Async context manager entry."""
        self._ensure_client()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.aclose()

    async def aclose(self) -> None:
        if self.client and self._owns_client:
            await self.client.aclose()
            self.client = None

    def build_url(self, path: str) -> str:
        """Resolve a relative path against the base URL."""
        if path.startswith("http"):
            return path
        separator = "" if path.startswith("/") else "/"
        return f"{self.base_url}{separator}{path}"

    async def get(
        self,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        cancel: Optional[CancelToken] = None,
    ) -> Any:
        """Make GET request."""
        return await self.request(path, params=params, cancel=cancel)

    async def put(
        self,
        path: str,
        body: Optional[Dict[str, Any]] = None,
        cancel: Optional[CancelToken] = None,
    ) -> Any:
        """Make PUT request."""
        return await self.request(path, method="PUT", body=body, cancel=cancel)

    async def request(
        self,
        path: str,
        method: str = "GET",
        headers: Optional[Dict[str, str]] = None,
        body: Optional[Any] = None,
        params: Optional[Dict[str, Any]] = None,
        cancel: Optional[CancelToken] = None,
    ) -> Any:
        """Perform one request and return the decoded JSON body.

        Returns None when the response carries no JSON content. Raises
        HttpStatusError for non-2xx answers, TransportError when the backend
        cannot be reached and RequestCancelledError when cancel fires first.
        """
        url = self.build_url(path)
        method = method.upper()
        endpoint = _endpoint_label(path)
        request_headers = {"Content-Type": JSON_CONTENT_TYPE, **(headers or {})}
        start_time = time.time()

        try:
            response = await self._send(
                method,
                url,
                headers=request_headers,
                json=body if body else None,
                params=params,
                cancel=cancel,
            )
        except RequestCancelledError:
            record_backend_request(method, endpoint, "cancelled", time.time() - start_time)
            logger.debug("HTTP request cancelled", method=method, url=url)
            raise
        except httpx.TimeoutException:
            record_backend_request(method, endpoint, "timeout", time.time() - start_time)
            logger.error("HTTP request timed out", method=method, url=url)
            raise TransportError("Request timeout", url=url)
        except httpx.RequestError as e:
            record_backend_request(
                method, endpoint, "network_error", time.time() - start_time
            )
            logger.error("HTTP request failed", method=method, url=url, error=str(e))
            raise TransportError(f"Network error: {str(e)}", url=url)

        response_time = (time.time() - start_time) * 1000
        record_backend_request(
            method, endpoint, str(response.status_code), response_time / 1000
        )

        logger.debug(
            "HTTP request completed",
            method=method,
            url=url,
            status_code=response.status_code,
            response_time_ms=response_time,
        )

        if not response.is_success:
            message = extract_error_message(response.status_code, response.text)
            logger.warning(
                "Backend returned an error",
                method=method,
                url=url,
                status_code=response.status_code,
                message=message,
            )
            raise HttpStatusError(response.status_code, message)

        content_type = response.headers.get("content-type", "")
        if JSON_CONTENT_TYPE not in content_type or not response.content:
            return None

        try:
            return response.json()
        except ValueError as e:
            raise InvalidResponseError(url, str(e))

    def _ensure_client(self) -> httpx.AsyncClient:
        if self.client is None:
            self.client = httpx.AsyncClient(timeout=self.timeout)
            self._owns_client = True
        return self.client

    async def _send(
        self, method: str, url: str, cancel: Optional[CancelToken] = None, **kwargs
    ) -> httpx.Response:
        """Send the request, racing it against the cancel token."""
        client = self._ensure_client()

        if cancel is None:
            return await client.request(method, url, **kwargs)

        if cancel.cancelled:
            raise RequestCancelledError(url)

        request_task = asyncio.ensure_future(client.request(method, url, **kwargs))
        cancel_task = asyncio.ensure_future(cancel.wait())
        try:
            done, _ = await asyncio.wait(
                {request_task, cancel_task}, return_when=asyncio.FIRST_COMPLETED
            )
        finally:
            pending = [task for task in (request_task, cancel_task) if not task.done()]
            for task in pending:
                task.cancel()
            if pending:
                await asyncio.gather(*pending, return_exceptions=True)

        if cancel_task in done:
            if request_task.done() and not request_task.cancelled():
                # Consume the outcome so an aborted failure is not reported later
                request_task.exception()
            raise RequestCancelledError(url)

        return request_task.result()
