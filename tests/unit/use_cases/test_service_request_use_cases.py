"""
Unit tests for the service request status use cases.
"""

from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

import pytest

from skillhand_admin.application.services.service_request_queries import (
    ServiceRequestQueries,
)
from skillhand_admin.application.use_cases.complete_service_request import (
    CompleteServiceRequestUseCase,
)
from skillhand_admin.application.use_cases.reject_service_request import (
    RejectServiceRequestUseCase,
)
from skillhand_admin.application.use_cases.schedule_service_request import (
    ScheduleServiceRequestUseCase,
    to_iso_timestamp,
)
from skillhand_admin.domain.exceptions.api_error import HttpStatusError
from skillhand_admin.domain.exceptions.validation_error import (
    InvalidFormatError,
    InvalidStatusTransitionError,
    RequiredFieldError,
)
from skillhand_admin.domain.value_objects.page import Page
from skillhand_admin.domain.value_objects.request_status import RequestStatus


@pytest.fixture
def mock_queries():
    queries = MagicMock(spec=ServiceRequestQueries)
    queries.invalidate_after_update = AsyncMock()
    return queries


class TestToIsoTimestamp:
    def test_datetime_with_offset(self):
        scheduled = datetime(2024, 3, 10, 14, 0, tzinfo=timezone.utc)
        assert to_iso_timestamp(scheduled) == "2024-03-10T14:00:00.000Z"

    def test_naive_values_are_utc(self):
        assert to_iso_timestamp(datetime(2024, 3, 10, 14, 0)) == "2024-03-10T14:00:00.000Z"
        assert to_iso_timestamp("2024-03-10T14:00") == "2024-03-10T14:00:00.000Z"

    def test_offset_is_converted(self):
        assert to_iso_timestamp("2024-03-10T09:00:00-05:00") == "2024-03-10T14:00:00.000Z"

    def test_bad_string(self):
        with pytest.raises(InvalidFormatError):
            to_iso_timestamp("next tuesday")


class TestScheduleServiceRequestUseCase:
    @pytest.fixture
    def use_case(self, mock_service_request_gateway, mock_queries):
        return ScheduleServiceRequestUseCase(mock_service_request_gateway, mock_queries)

    @pytest.mark.asyncio
    async def test_schedules_pending_request(
        self, use_case, mock_service_request_gateway, mock_queries, make_request
    ):
        request = make_request("r1")
        updated = make_request(
            "r1",
            status=RequestStatus.IN_PROCESS,
            scheduled_date="2024-03-10T14:00:00.000Z",
        )
        mock_service_request_gateway.update.return_value = updated

        result = await use_case.execute(request, "2024-03-10T14:00:00Z")

        assert result is updated
        mock_service_request_gateway.update.assert_awaited_once_with(
            "r1",
            status=RequestStatus.IN_PROCESS,
            scheduled_date="2024-03-10T14:00:00.000Z",
        )
        mock_queries.invalidate_after_update.assert_awaited_once()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("scheduled_at", [None, "", "   "])
    async def test_requires_a_date(
        self, use_case, mock_service_request_gateway, make_request, scheduled_at
    ):
        with pytest.raises(RequiredFieldError):
            await use_case.execute(make_request(), scheduled_at)

        mock_service_request_gateway.update.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_only_pending_requests(
        self, use_case, mock_service_request_gateway, make_request
    ):
        request = make_request(status=RequestStatus.COMPLETED)

        with pytest.raises(InvalidStatusTransitionError):
            await use_case.execute(request, "2024-03-10T14:00:00Z")

        mock_service_request_gateway.update.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_failed_update_leaves_caches_alone(
        self, use_case, mock_service_request_gateway, mock_queries, make_request
    ):
        mock_service_request_gateway.update.side_effect = HttpStatusError(
            500, "Internal error"
        )

        with pytest.raises(HttpStatusError):
            await use_case.execute(make_request(), "2024-03-10T14:00:00Z")

        mock_queries.invalidate_after_update.assert_not_awaited()


class TestRejectServiceRequestUseCase:
    @pytest.mark.asyncio
    async def test_rejects_pending_request(
        self, mock_service_request_gateway, mock_queries, make_request
    ):
        use_case = RejectServiceRequestUseCase(mock_service_request_gateway, mock_queries)

        await use_case.execute(make_request("r1"))

        mock_service_request_gateway.update.assert_awaited_once_with(
            "r1", status=RequestStatus.CANCELLED
        )
        mock_queries.invalidate_after_update.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_in_process_request_cannot_be_rejected(
        self, mock_service_request_gateway, mock_queries, make_request
    ):
        use_case = RejectServiceRequestUseCase(mock_service_request_gateway, mock_queries)

        with pytest.raises(InvalidStatusTransitionError):
            await use_case.execute(make_request(status=RequestStatus.IN_PROCESS))

    @pytest.mark.asyncio
    async def test_failed_list_refetch_does_not_undo_the_result(
        self, mock_service_request_gateway, make_request
    ):
        queries = ServiceRequestQueries(mock_service_request_gateway, page_size=10)
        mock_service_request_gateway.list_page.side_effect = None
        mock_service_request_gateway.list_page.return_value = Page(
            items=[make_request("r1")], has_more=False, page=1, limit=10
        )
        cursor = queries.cursor()
        await cursor.start()

        cancelled = make_request("r1", status=RequestStatus.CANCELLED)
        mock_service_request_gateway.update.return_value = cancelled
        mock_service_request_gateway.list_page.side_effect = HttpStatusError(
            503, "Service unavailable"
        )
        use_case = RejectServiceRequestUseCase(mock_service_request_gateway, queries)

        result = await use_case.execute(make_request("r1"))

        assert result is cancelled
        mock_service_request_gateway.update.assert_awaited_once()
        assert isinstance(cursor.last_error, HttpStatusError)


class TestCompleteServiceRequestUseCase:
    @pytest.mark.asyncio
    async def test_completes_in_process_request(
        self, mock_service_request_gateway, mock_queries, make_request
    ):
        use_case = CompleteServiceRequestUseCase(mock_service_request_gateway, mock_queries)

        await use_case.execute(make_request("r1", status=RequestStatus.IN_PROCESS))

        mock_service_request_gateway.update.assert_awaited_once_with(
            "r1", status=RequestStatus.COMPLETED
        )
        mock_queries.invalidate_after_update.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_pending_request_cannot_be_completed(
        self, mock_service_request_gateway, mock_queries, make_request
    ):
        use_case = CompleteServiceRequestUseCase(mock_service_request_gateway, mock_queries)

        with pytest.raises(InvalidStatusTransitionError) as exc_info:
            await use_case.execute(make_request("r1"))

        assert exc_info.value.current_status == "pending"
        assert exc_info.value.target_status == "completed"
