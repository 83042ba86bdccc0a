"""Unit tests for the admin session gate."""

from datetime import datetime, timedelta

import pytest

import create_first_admin
from conftest import ADMIN_PASSWORD, ADMIN_USERNAME
from college_events import auth
from college_events.errors import AuthorizationError, InvalidCredentialsError, ValidationError
from college_events.models.admin import Admin, AdminSessionRecord


class TestLogin:

    def test_wrong_password(self, db, admin_session):
        with pytest.raises(InvalidCredentialsError) as exc_info:
            auth.login(db, admin_session, ADMIN_USERNAME, "wrong-password")
        assert exc_info.value.message == "Invalid username or password"
        assert auth.check_status(admin_session) == {"is_logged_in": False, "username": None}

    def test_unknown_user_gets_the_same_message(self, db, admin_session):
        with pytest.raises(InvalidCredentialsError) as exc_info:
            auth.login(db, admin_session, "nobody", ADMIN_PASSWORD)
        assert exc_info.value.message == "Invalid username or password"

    def test_failed_login_is_logged(self, db, admin_session, caplog):
        caplog.set_level("WARNING")
        with pytest.raises(InvalidCredentialsError):
            auth.login(db, admin_session, "mallory", "guess")
        assert "Failed login attempt for username: mallory" in caplog.text
        assert "guess" not in caplog.text

    def test_missing_credentials(self, db, admin_session):
        with pytest.raises(ValidationError) as exc_info:
            auth.login(db, admin_session, ADMIN_USERNAME, "  ")
        assert exc_info.value.message == "Username and password are required"

    def test_success_establishes_session(self, db, admin_session):
        assert auth.login(db, admin_session, ADMIN_USERNAME, ADMIN_PASSWORD) == ADMIN_USERNAME
        assert admin_session.is_authenticated
        assert admin_session.admin_id is not None
        assert auth.check_status(admin_session) == {"is_logged_in": True, "username": ADMIN_USERNAME}

    def test_success_stores_session_server_side(self, db):
        state = {}
        auth.login(db, auth.AdminSession(state, db), ADMIN_USERNAME, ADMIN_PASSWORD)
        assert list(state) == [auth.AdminSession.TOKEN]
        record = db.query(AdminSessionRecord).one()
        assert record.token == state[auth.AdminSession.TOKEN]
        assert record.admin.username == ADMIN_USERNAME

    def test_success_records_last_login(self, db, admin_session):
        auth.login(db, admin_session, ADMIN_USERNAME, ADMIN_PASSWORD)
        admin = db.query(Admin).filter(Admin.username == ADMIN_USERNAME).one()
        assert admin.last_login_at is not None

    def test_username_with_markup_characters(self, db, admin_session):
        create_first_admin.create_first_admin(username="o'brien&co", password="pa<ss>")
        assert auth.login(db, admin_session, " o'brien&co ", "pa<ss>") == "o'brien&co"


class TestLogout:

    def test_logout_twice_is_harmless(self, db, admin_session):
        auth.login(db, admin_session, ADMIN_USERNAME, ADMIN_PASSWORD)
        auth.logout(db, admin_session)
        assert not admin_session.is_authenticated
        auth.logout(db, admin_session)
        assert not admin_session.is_authenticated
        assert auth.check_status(admin_session)["username"] is None

    def test_logout_revokes_the_token_for_every_copy(self, db):
        state = {}
        auth.login(db, auth.AdminSession(state, db), ADMIN_USERNAME, ADMIN_PASSWORD)
        copy = auth.AdminSession(dict(state), db)
        assert copy.is_authenticated

        auth.logout(db, auth.AdminSession(state, db))

        assert not copy.is_authenticated
        assert db.query(AdminSessionRecord).count() == 0

    def test_logout_leaves_other_sessions_alone(self, db):
        first, second = auth.AdminSession({}, db), auth.AdminSession({}, db)
        auth.login(db, first, ADMIN_USERNAME, ADMIN_PASSWORD)
        auth.login(db, second, ADMIN_USERNAME, ADMIN_PASSWORD)

        auth.logout(db, second)

        assert first.is_authenticated
        assert not second.is_authenticated


class TestRequireAuthenticated:

    def test_anonymous_session_is_rejected(self, admin_session):
        with pytest.raises(AuthorizationError):
            auth.require_authenticated(admin_session)

    def test_unknown_token_is_rejected(self, db):
        for token in ("forged-token", True, ""):
            with pytest.raises(AuthorizationError):
                auth.require_authenticated(auth.AdminSession({auth.AdminSession.TOKEN: token}, db))

    def test_expired_session_is_rejected(self, db, admin_session):
        auth.login(db, admin_session, ADMIN_USERNAME, ADMIN_PASSWORD)
        record = db.query(AdminSessionRecord).one()
        record.expires_at = datetime.now() - timedelta(seconds=1)
        db.commit()

        with pytest.raises(AuthorizationError):
            auth.require_authenticated(admin_session)

    def test_authenticated_session_passes(self, db, admin_session):
        auth.login(db, admin_session, ADMIN_USERNAME, ADMIN_PASSWORD)
        auth.require_authenticated(admin_session)


class TestPasswordHashing:

    def test_hash_is_not_cleartext_and_verifies(self):
        hashed = auth.get_password_hash("s3cret")
        assert hashed != "s3cret"
        assert auth.verify_password("s3cret", hashed)
        assert not auth.verify_password("other", hashed)
