"""
Unit tests for AuthSession.
"""

import pytest

from skillhand_admin.application.services.auth_session import (
    DEFAULT_ADMIN,
    AuthSession,
)


class TestAuthSession:
    def test_starts_logged_out(self):
        session = AuthSession()

        assert session.current_user is None
        assert session.is_authenticated is False

    @pytest.mark.parametrize("user_type", ["guest", "demo", "admin"])
    def test_every_user_type_logs_in_as_admin(self, user_type):
        session = AuthSession()

        user = session.login(user_type)

        assert user == DEFAULT_ADMIN
        assert session.is_authenticated is True

    def test_unknown_user_type(self):
        with pytest.raises(ValueError):
            AuthSession().login("root")

    def test_logout(self):
        session = AuthSession()
        session.login()

        session.logout()

        assert session.current_user is None

    def test_session_survives_restart(self, tmp_path):
        session_file = tmp_path / "session.json"
        AuthSession(session_file).login("demo")

        restored = AuthSession(session_file)

        assert restored.current_user == DEFAULT_ADMIN

    def test_logout_removes_session_file(self, tmp_path):
        session_file = tmp_path / "session.json"
        session = AuthSession(session_file)
        session.login()

        session.logout()

        assert not session_file.exists()
        assert AuthSession(session_file).current_user is None

    def test_unreadable_session_file_is_ignored(self, tmp_path):
        session_file = tmp_path / "session.json"
        session_file.write_text("{broken")

        assert AuthSession(session_file).current_user is None
