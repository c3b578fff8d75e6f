"""
Unit tests for ReviewEmployeeApplicationUseCase.
"""

import pytest

from skillhand_admin.application.use_cases.review_employee_application import (
    ReviewEmployeeApplicationUseCase,
)
from skillhand_admin.domain.exceptions.validation_error import (
    InvalidStatusTransitionError,
)
from skillhand_admin.domain.value_objects.application_status import ApplicationStatus


class TestReviewEmployeeApplicationUseCase:
    @pytest.fixture
    def use_case(self, mock_employee_application_gateway):
        return ReviewEmployeeApplicationUseCase(mock_employee_application_gateway)

    @pytest.mark.asyncio
    async def test_approve(self, use_case, mock_employee_application_gateway, make_application):
        approved = make_application(status=ApplicationStatus.APPROVED)
        mock_employee_application_gateway.update_status.return_value = approved

        result = await use_case.approve(make_application())

        assert result is approved
        mock_employee_application_gateway.update_status.assert_awaited_once_with(
            "app-1", ApplicationStatus.APPROVED
        )

    @pytest.mark.asyncio
    async def test_reject(self, use_case, mock_employee_application_gateway, make_application):
        await use_case.reject(make_application())

        mock_employee_application_gateway.update_status.assert_awaited_once_with(
            "app-1", ApplicationStatus.REJECTED
        )

    @pytest.mark.asyncio
    async def test_decisions_are_final(
        self, use_case, mock_employee_application_gateway, make_application
    ):
        with pytest.raises(InvalidStatusTransitionError):
            await use_case.reject(make_application(status=ApplicationStatus.APPROVED))

        mock_employee_application_gateway.update_status.assert_not_awaited()
