"""
Service request resource client.
"""

from typing import Any, List, Optional
from urllib.parse import quote

import structlog

from skillhand_admin.application.interfaces.gateways import ServiceRequestGateway
from skillhand_admin.domain.entities.service_request import ServiceRequest
from skillhand_admin.domain.exceptions.api_error import (
    ApiClientError,
    RequestCancelledError,
)
from skillhand_admin.domain.value_objects.page import Page, RequestSummary
from skillhand_admin.domain.value_objects.request_status import RequestStatus
from skillhand_admin.infrastructure.backend.transformer import (
    BackendRecordTransformer,
    coerce_int,
    extract_list,
)
from skillhand_admin.infrastructure.external.cancellation import CancelToken
from skillhand_admin.infrastructure.external.http_client import ApiTransport

logger = structlog.get_logger()

SERVICE_REQUESTS_PATH = "/service-requests"
SUMMARY_PATH = f"{SERVICE_REQUESTS_PATH}/summary"


def derive_has_more(
    explicit: Any, page: int, limit: int, total: Optional[int], returned: int
) -> bool:
    """Decide whether another page exists.

    An explicit boolean from the backend wins. Otherwise a known positive
    total decides (`page * limit < total`), and without a total a full page
    is taken as a sign that more may follow.
    """
    if isinstance(explicit, bool):
        return explicit
    if total is not None and total > 0:
        return page * limit < total
    return returned >= limit


class ServiceRequestClient(ServiceRequestGateway):
    """Service request endpoints of the marketplace backend."""

    def __init__(
        self,
        transport: ApiTransport,
        transformer: Optional[BackendRecordTransformer] = None,
    ):
        self.transport = transport
        self.transformer = transformer or BackendRecordTransformer()

    async def list_all(
        self, cancel: Optional[CancelToken] = None
    ) -> List[ServiceRequest]:
        """Fetch every service request.

        The endpoint may answer with a bare array or an object holding a
        `data` or `results` array. Any other shape yields an empty list.
        """
        payload = await self.transport.get(SERVICE_REQUESTS_PATH, cancel=cancel)

        raw_items = extract_list(payload, "data", "results")
        if raw_items is None:
            logger.warning(
                "Unrecognized service request list payload",
                payload_type=type(payload).__name__,
            )
            return []

        return self.transformer.transform_service_requests(raw_items)

    async def list_page(
        self, page: int, limit: int, cancel: Optional[CancelToken] = None
    ) -> Page:
        """Fetch one page of service requests.

        Falls back to slicing the plain list client-side when the backend
        has no pagination support. Without pagination support only page 1
        is served; later pages come back empty.
        """
        if page < 1 or limit < 1:
            raise ValueError("page and limit must be positive")

        try:
            payload = await self.transport.get(
                SERVICE_REQUESTS_PATH,
                params={"page": page, "limit": limit},
                cancel=cancel,
            )
        except RequestCancelledError:
            raise
        except ApiClientError as e:
            logger.warning(
                "Paginated endpoint unavailable", page=page, limit=limit, error=str(e)
            )
            if page != 1:
                return Page.empty(page, limit)
            all_requests = await self.list_all(cancel=cancel)
            return self._slice(all_requests, page, limit, total=len(all_requests))

        if isinstance(payload, list):
            window = self._slice(payload, page, limit, total=len(payload))
            return Page(
                items=self.transformer.transform_service_requests(window.items),
                has_more=window.has_more,
                total=window.total,
                page=page,
                limit=limit,
            )

        if isinstance(payload, dict) and isinstance(payload.get("data"), list):
            return self._page_from_envelope(payload, page, limit)

        logger.warning(
            "Unrecognized paginated payload",
            page=page,
            payload_type=type(payload).__name__,
        )
        return Page.empty(page, limit)

    async def fetch_summary(
        self, cancel: Optional[CancelToken] = None
    ) -> Optional[RequestSummary]:
        """Fetch server-computed counts.

        Returns None on any failure so callers fall back to computed counts.
        """
        try:
            payload = await self.transport.get(SUMMARY_PATH, cancel=cancel)
        except RequestCancelledError:
            raise
        except ApiClientError as e:
            logger.info("Summary unavailable", error=str(e))
            return None

        return self.transformer.transform_summary(payload)

    async def update(
        self,
        request_id: str,
        status: Optional[RequestStatus] = None,
        scheduled_date: Optional[str] = None,
    ) -> Optional[ServiceRequest]:
        """Send a partial update and return the record confirmed by the backend."""
        if not request_id:
            raise ValueError("request_id is required")

        body = self.transformer.transform_update_request(status, scheduled_date)
        if not body:
            raise ValueError("Nothing to update")

        payload = await self.transport.put(
            f"{SERVICE_REQUESTS_PATH}/{quote(request_id, safe='')}", body=body
        )

        logger.info("Service request updated", request_id=request_id, **body)

        if isinstance(payload, dict) and isinstance(payload.get("data"), dict):
            payload = payload["data"]
        return self.transformer.transform_service_request(payload)

    def _page_from_envelope(self, payload: dict, page: int, limit: int) -> Page:
        raw_items = payload["data"]
        total = coerce_int(payload.get("total"))
        current_page = coerce_int(payload.get("page")) or page
        page_limit = coerce_int(payload.get("limit")) or limit

        return Page(
            items=self.transformer.transform_service_requests(raw_items),
            has_more=derive_has_more(
                payload.get("hasMore"), current_page, page_limit, total, len(raw_items)
            ),
            total=total,
            page=current_page,
            limit=page_limit,
            counts=self.transformer.transform_status_counts(payload),
        )

    @staticmethod
    def _slice(items: list, page: int, limit: int, total: int) -> Page:
        start = (page - 1) * limit
        end = start + limit
        return Page(
            items=list(items[start:end]),
            has_more=end < total,
            total=total,
            page=page,
            limit=limit,
        )
