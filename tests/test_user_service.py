# tests/test_user_service.py
"""Unit tests for user management and login."""

import pytest

from app.exceptions import AuthenticationFailed, DuplicateUsername, NotFound, ValidationFailed
from app.services import user_service


class TestUserService:
    def test_create_hashes_password(self, db):
        user = user_service.create_user(db, "operator", "pw-123")
        assert user.id is not None
        assert user.role == "USER"
        assert user.password_hash != "pw-123"
        assert user.created_at is not None

    def test_create_requires_username_and_password(self, db):
        with pytest.raises(ValidationFailed) as exc_info:
            user_service.create_user(db, "", None)
        assert set(exc_info.value.errors) == {"username", "password"}

    def test_unknown_role_rejected(self, db):
        with pytest.raises(ValidationFailed) as exc_info:
            user_service.create_user(db, "operator", "pw", role="ROOT")
        assert "role" in exc_info.value.errors

    def test_role_is_normalised(self, db):
        assert user_service.create_user(db, "boss", "pw", role="admin").role == "ADMIN"

    def test_duplicate_username(self, db):
        user_service.create_user(db, "operator", "pw")
        with pytest.raises(DuplicateUsername):
            user_service.create_user(db, "operator", "other")

    def test_update_allows_own_username(self, db):
        user = user_service.create_user(db, "operator", "pw")
        updated = user_service.update_user(db, user.id, "operator", "ADMIN")
        assert updated.role == "ADMIN"

    def test_update_onto_taken_username(self, db):
        user_service.create_user(db, "alice", "pw")
        bob = user_service.create_user(db, "bob", "pw")
        with pytest.raises(DuplicateUsername):
            user_service.update_user(db, bob.id, "alice", "USER")

    def test_change_password(self, db):
        user = user_service.create_user(db, "operator", "old-pw")
        user_service.change_password(db, user.id, "old-pw", "new-pw")
        assert user_service.authenticate(db, "operator", "new-pw").id == user.id
        with pytest.raises(AuthenticationFailed):
            user_service.authenticate(db, "operator", "old-pw")

    def test_change_password_wrong_old(self, db):
        user = user_service.create_user(db, "operator", "old-pw")
        with pytest.raises(ValidationFailed) as exc_info:
            user_service.change_password(db, user.id, "guess", "new-pw")
        assert "old_password" in exc_info.value.errors

    def test_delete(self, db):
        user = user_service.create_user(db, "operator", "pw")
        user_id = user.id
        user_service.delete_user(db, user_id)
        with pytest.raises(NotFound):
            user_service.get_user(db, user_id)
        with pytest.raises(NotFound):
            user_service.delete_user(db, user_id)

    def test_authenticate_unknown_user(self, db):
        with pytest.raises(AuthenticationFailed):
            user_service.authenticate(db, "ghost", "pw")

    def test_authenticate_wrong_password(self, db):
        user_service.create_user(db, "operator", "pw")
        with pytest.raises(AuthenticationFailed):
            user_service.authenticate(db, "operator", "PW")


class TestUsernameRace:
    """The pre-check can be passed by two writers; the unique constraint decides."""

    def test_lost_create_race_is_duplicate_username(self, db, monkeypatch):
        user_service.create_user(db, "operator", "pw")
        monkeypatch.setattr(user_service, "_username_taken", lambda db, username: False)

        with pytest.raises(DuplicateUsername):
            user_service.create_user(db, "operator", "other")

        # session was rolled back and is still usable
        assert [u.username for u in user_service.list_users(db)] == ["operator"]

    def test_lost_rename_race_is_duplicate_username(self, db, monkeypatch):
        user_service.create_user(db, "alice", "pw")
        bob = user_service.create_user(db, "bob", "pw")
        bob_id = bob.id
        monkeypatch.setattr(user_service, "_username_taken", lambda db, username: False)

        with pytest.raises(DuplicateUsername):
            user_service.update_user(db, bob_id, "alice", "ADMIN")

        reloaded = user_service.get_user(db, bob_id)
        assert (reloaded.username, reloaded.role) == ("bob", "USER")
