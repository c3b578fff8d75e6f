"""Integration tests for the admin API routes."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from skillhand_admin.api.app import create_app
from skillhand_admin.api.dependencies import (
    get_auth_session,
    get_disconnect_token,
    get_employee_application_client,
    get_service_request_queries,
    get_transport,
)
from skillhand_admin.application.services.auth_session import AuthSession
from skillhand_admin.application.services.service_request_queries import (
    ServiceRequestQueries,
)
from skillhand_admin.domain.exceptions.api_error import (
    HttpStatusError,
    RequestCancelledError,
    TransportError,
)
from skillhand_admin.domain.value_objects.application_status import ApplicationStatus
from skillhand_admin.domain.value_objects.page import Page
from skillhand_admin.domain.value_objects.priority import Priority
from skillhand_admin.domain.value_objects.request_status import RequestStatus
from skillhand_admin.infrastructure.external.cancellation import CancelToken
from skillhand_admin.infrastructure.external.http_client import ApiTransport

PREFIX = "/api/v1"


@pytest.mark.integration
class TestAdminApi:
    """Exercise the routes against mocked backend gateways."""

    @pytest.fixture
    def session(self):
        session = AuthSession()
        session.login("admin")
        return session

    @pytest.fixture
    def mock_transport(self):
        transport = MagicMock(spec=ApiTransport)
        transport.get = AsyncMock(return_value=[])
        return transport

    @pytest.fixture
    def app(
        self,
        session,
        mock_transport,
        mock_service_request_gateway,
        mock_employee_application_gateway,
    ):
        app = create_app()
        queries = ServiceRequestQueries(mock_service_request_gateway, page_size=10)
        app.dependency_overrides[get_service_request_queries] = lambda: queries
        app.dependency_overrides[get_employee_application_client] = (
            lambda: mock_employee_application_gateway
        )
        app.dependency_overrides[get_auth_session] = lambda: session
        app.dependency_overrides[get_transport] = lambda: mock_transport
        return app

    @pytest.fixture
    def client(self, app):
        with TestClient(app) as test_client:
            yield test_client

    @pytest.fixture
    def pending_requests(self, mock_service_request_gateway, make_request):
        requests = [
            make_request("r1", customer_name="Jane Smith", priority=Priority.HIGH),
            make_request(
                "r2", customer_name="Tom Brown", status=RequestStatus.IN_PROCESS
            ),
            make_request("r3", customer_name="Ann Lee", status=RequestStatus.COMPLETED),
        ]
        mock_service_request_gateway.list_all.return_value = requests
        mock_service_request_gateway.list_page.side_effect = None
        mock_service_request_gateway.list_page.return_value = Page(
            items=requests, has_more=True, total=23, page=1, limit=10
        )
        return requests

    # Health and auth

    def test_liveness(self, client):
        response = client.get(f"{PREFIX}/health/live")

        assert response.status_code == 200
        assert response.json()["status"] == "alive"

    def test_readiness(self, client, mock_transport):
        assert client.get(f"{PREFIX}/health/ready").status_code == 200

        mock_transport.get.side_effect = TransportError("Network error: refused")
        assert client.get(f"{PREFIX}/health/ready").status_code == 503

    def test_metrics(self, client):
        response = client.get(f"{PREFIX}/health/metrics")

        assert response.status_code == 200
        assert "text/plain" in response.headers["content-type"]

    def test_login_flow(self, client, session):
        session.logout()
        assert client.get(f"{PREFIX}/auth/me").status_code == 401

        response = client.post(f"{PREFIX}/auth/login", json={"user_type": "demo"})
        assert response.status_code == 200
        assert response.json()["email"] == "admin@skillhand.com"

        assert client.get(f"{PREFIX}/auth/me").json()["role"] == "Administrator"

        assert client.post(f"{PREFIX}/auth/logout").status_code == 200
        assert client.get(f"{PREFIX}/auth/me").status_code == 401

    def test_unknown_user_type(self, client):
        response = client.post(f"{PREFIX}/auth/login", json={"user_type": "root"})
        assert response.status_code == 400

    def test_routes_require_login(self, client, session):
        session.logout()

        assert client.get(f"{PREFIX}/service-requests").status_code == 401
        assert client.get(f"{PREFIX}/dashboard").status_code == 401
        assert client.get(f"{PREFIX}/employee-applications").status_code == 401

    # Service requests

    def test_list_renders_cards(self, client, pending_requests):
        response = client.get(f"{PREFIX}/service-requests", params={"page": 1})

        assert response.status_code == 200
        body = response.json()
        assert [item["id"] for item in body["items"]] == ["r1", "r2", "r3"]
        assert body["items"][0]["available_actions"] == [
            "accept",
            "reject",
            "view-details",
        ]
        assert body["items"][0]["status_variant"] == "warning"
        assert body["items"][1]["available_actions"] == ["complete", "view-details"]
        assert body["items"][2]["available_actions"] == ["view-details"]
        assert body["meta"] == {
            "page": 1,
            "limit": 10,
            "total": 23,
            "has_more": True,
            "fetched": 3,
        }

    def test_list_filters_fetched_page(self, client, pending_requests):
        response = client.get(
            f"{PREFIX}/service-requests",
            params={"q": "tom", "status": "in-progress"},
        )

        assert [item["id"] for item in response.json()["items"]] == ["r2"]
        assert response.json()["meta"]["fetched"] == 3

    def test_list_rejects_oversized_limit(self, client):
        response = client.get(f"{PREFIX}/service-requests", params={"limit": 1000})
        assert response.status_code == 422

    def test_disconnected_client_aborts_list_fetch(
        self, app, client, mock_service_request_gateway, pending_requests
    ):
        gone = CancelToken()
        gone.cancel()
        app.dependency_overrides[get_disconnect_token] = lambda: gone

        assert client.get(f"{PREFIX}/service-requests").status_code == 499
        assert client.get(f"{PREFIX}/service-requests/summary").status_code == 499
        mock_service_request_gateway.list_page.assert_not_awaited()
        mock_service_request_gateway.fetch_summary.assert_not_awaited()

    def test_summary_is_computed_without_server_counts(self, client, pending_requests):
        response = client.get(f"{PREFIX}/service-requests/summary")

        body = response.json()
        assert body["source"] == "computed"
        assert body["total"] == 3
        assert [tile["key"] for tile in body["tiles"]] == [
            "total",
            "pending",
            "in-process",
            "completed",
        ]

    def test_accept_schedules_request(
        self, client, pending_requests, mock_service_request_gateway, make_request
    ):
        mock_service_request_gateway.update.return_value = make_request(
            "r1",
            status=RequestStatus.IN_PROCESS,
            scheduled_date="2024-03-10T14:00:00.000Z",
        )

        response = client.post(
            f"{PREFIX}/service-requests/r1/accept",
            json={"scheduled_date": "2024-03-10T14:00:00Z"},
        )

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["status"] == "in-process"
        assert data["available_actions"] == ["complete", "view-details"]
        mock_service_request_gateway.update.assert_awaited_once_with(
            "r1",
            status=RequestStatus.IN_PROCESS,
            scheduled_date="2024-03-10T14:00:00.000Z",
        )

    def test_accept_without_date(self, client, pending_requests):
        response = client.post(f"{PREFIX}/service-requests/r1/accept", json={})

        assert response.status_code == 400
        assert response.json()["type"] == "validation_error"

    def test_invalid_transition(self, client, pending_requests):
        response = client.post(f"{PREFIX}/service-requests/r1/complete")

        assert response.status_code == 409
        assert response.json()["type"] == "invalid_transition"

    def test_unknown_request(self, client, pending_requests):
        response = client.post(f"{PREFIX}/service-requests/nope/reject")
        assert response.status_code == 404

    def test_backend_failure(self, client, pending_requests, mock_service_request_gateway):
        mock_service_request_gateway.update.side_effect = HttpStatusError(
            500, "Internal error"
        )

        response = client.post(f"{PREFIX}/service-requests/r1/reject")

        assert response.status_code == 502
        assert response.json()["message"] == "Internal error"
        assert response.json()["details"] == {"status_code": 500}

    def test_cancelled_backend_call(
        self, client, pending_requests, mock_service_request_gateway
    ):
        mock_service_request_gateway.update.side_effect = RequestCancelledError()

        response = client.post(f"{PREFIX}/service-requests/r2/complete")

        assert response.status_code == 499
        assert response.content == b""

    # Employee applications

    def test_list_and_approve_applications(
        self, client, mock_employee_application_gateway, make_application
    ):
        mock_employee_application_gateway.list_all.return_value = [
            make_application("a1"),
            make_application("a2", name="Dana", status=ApplicationStatus.APPROVED),
        ]
        mock_employee_application_gateway.update_status.return_value = make_application(
            "a1", status=ApplicationStatus.APPROVED
        )

        listing = client.get(
            f"{PREFIX}/employee-applications", params={"status": "pending"}
        ).json()
        assert [item["id"] for item in listing["items"]] == ["a1"]
        assert listing["total"] == 2

        response = client.post(f"{PREFIX}/employee-applications/a1/approve")
        assert response.status_code == 200
        assert response.json()["data"]["status"] == "approved"

        conflict = client.post(f"{PREFIX}/employee-applications/a2/reject")
        assert conflict.status_code == 409

    # Dashboard

    def test_dashboard(
        self,
        client,
        pending_requests,
        mock_employee_application_gateway,
        make_application,
    ):
        mock_employee_application_gateway.list_all.return_value = [make_application()]

        response = client.get(f"{PREFIX}/dashboard")

        assert response.status_code == 200
        body = response.json()
        assert body["stats"]["total_service_requests"] == 3
        assert body["stats"]["urgent_requests"] == 1
        assert body["stats"]["employee_applications"] == 1
        assert body["counts_source"] == "computed"
        assert len(body["recent_requests"]) == 3
        assert len(body["recent_applications"]) == 1
