"""Unit tests for the user entity package and user service."""

import pytest

from src.storefront.core.services import UserService
from src.storefront.entities.user import User, UserRepository


class TestUser:
    def test_email_is_normalized(self):
        user = User(email_address="  One@Example.COM ", password_digest="x")
        assert user.email_address == "one@example.com"


class TestUserRepository:
    def test_get_by_email_is_case_insensitive(self, session):
        repo = UserRepository(session)
        created = repo.create(User(email_address="one@example.com", password_digest="x"))

        assert repo.get_by_email("ONE@example.com") == created
        assert repo.get(created.id) == created
        assert repo.get_by_email("two@example.com") is None


class TestUserService:
    def test_register_stores_digest_only(self, session):
        user = UserService(session).register("one@example.com", "password")

        assert user.password_digest != "password"
        assert UserRepository(session).get(user.id) == user

    def test_register_duplicate_email_raises(self, session):
        service = UserService(session)
        service.register("one@example.com", "password")

        with pytest.raises(ValueError, match="already taken"):
            service.register("One@Example.com", "other")

    @pytest.mark.parametrize(("email", "password"), [("", "pw"), ("a@b.c", "")])
    def test_register_requires_email_and_password(self, session, email, password):
        with pytest.raises(ValueError):
            UserService(session).register(email, password)

    def test_authenticate(self, session):
        service = UserService(session)
        user = service.register("one@example.com", "password")

        assert service.authenticate("one@example.com", "password") == user
        assert service.authenticate("one@example.com", "wrong") is None
        assert service.authenticate("nobody@example.com", "password") is None

    def test_list_users(self, session):
        service = UserService(session)
        service.register("one@example.com", "password")
        service.register("two@example.com", "password")

        assert {u.email_address for u in service.list_users()} == {
            "one@example.com",
            "two@example.com",
        }
