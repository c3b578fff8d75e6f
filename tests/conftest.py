"""
Pytest configuration and fixtures.
"""

from unittest.mock import AsyncMock

import pytest

from skillhand_admin.application.interfaces.gateways import (
    EmployeeApplicationGateway,
    ServiceRequestGateway,
)
from skillhand_admin.config.settings import Settings
from skillhand_admin.domain.entities.employee_application import EmployeeApplication
from skillhand_admin.domain.entities.service_request import ServiceRequest
from skillhand_admin.domain.value_objects.address import Address
from skillhand_admin.domain.value_objects.application_status import (
    ApplicationStatus,
    ExperienceLevel,
)
from skillhand_admin.domain.value_objects.page import Page
from skillhand_admin.domain.value_objects.priority import Priority
from skillhand_admin.domain.value_objects.request_status import RequestStatus


@pytest.fixture(scope="session")
def test_settings():
    """Test settings configuration."""
    return Settings(
        ENVIRONMENT="test",
        DEBUG=True,
        LOG_LEVEL="DEBUG",
        API_BASE_URL="http://backend.test/api",
        SESSION_FILE=None,
    )


@pytest.fixture
def make_request():
    """Factory for canonical service requests."""

    def _make(
        request_id="req-1",
        status=RequestStatus.PENDING,
        priority=Priority.MEDIUM,
        **overrides,
    ):
        values = {
            "id": request_id,
            "customer_name": "Jane Smith",
            "customer_phone": "555-0100",
            "address": Address(
                street="12 Oak St", city="Springfield", state="IL", zip_code="62701"
            ),
            "location": "12 Oak St, Springfield, IL 62701",
            "service_type": "Plumbing",
            "description": "Leaking kitchen faucet",
            "status": status,
            "priority": priority,
            "requested_date": "2024-03-01T09:00:00Z",
        }
        values.update(overrides)
        return ServiceRequest(**values)

    return _make


@pytest.fixture
def make_application():
    """Factory for employee applications."""

    def _make(
        application_id="app-1",
        status=ApplicationStatus.PENDING,
        **overrides,
    ):
        values = {
            "id": application_id,
            "name": "Carlos Rivera",
            "email": "carlos@example.com",
            "skills": ["Electrical", "HVAC"],
            "experience_level": ExperienceLevel.EXPERT,
            "rating": 4.8,
            "previous_job_count": 120,
            "status": status,
            "applied_date": "2024-02-20T10:00:00Z",
            "location": "Chicago, IL",
        }
        values.update(overrides)
        return EmployeeApplication(**values)

    return _make


@pytest.fixture
def sample_raw_request():
    """Backend service request record in the `_id` + nested address shape."""
    return {
        "_id": "65f1c2a9e4b0a1b2c3d4e5f6",
        "id": "SR-1001",
        "customerName": "Jane Smith",
        "customerPhone": "555-0100",
        "customerEmail": "jane@example.com",
        "address": {
            "street": "12 Oak St",
            "city": "Springfield",
            "state": "IL",
            "zipCode": "62701",
        },
        "serviceType": "Plumbing",
        "description": "Leaking kitchen faucet",
        "estimatedCost": "150",
        "status": "in-progress",
        "priority": "high",
        "requestedDate": "2024-03-01T09:00:00Z",
    }


@pytest.fixture
def mock_service_request_gateway():
    """Mock service request gateway."""
    mock_gateway = AsyncMock(spec=ServiceRequestGateway)

    mock_gateway.list_all = AsyncMock(return_value=[])
    mock_gateway.list_page = AsyncMock(
        side_effect=lambda page, limit, cancel=None: Page.empty(page, limit)
    )
    mock_gateway.fetch_summary = AsyncMock(return_value=None)
    mock_gateway.update = AsyncMock()

    return mock_gateway


@pytest.fixture
def mock_employee_application_gateway():
    """Mock employee application gateway."""
    mock_gateway = AsyncMock(spec=EmployeeApplicationGateway)

    mock_gateway.list_all = AsyncMock(return_value=[])
    mock_gateway.update_status = AsyncMock()

    return mock_gateway
