"""Unit tests for password hashing, CSRF tokens and return URLs."""

import time

import pytest

from src.storefront.core.security import (
    generate_csrf_token,
    generate_secure_token,
    hash_password,
    sanitize_return_url,
    validate_csrf_token,
    verify_password,
)


class TestPasswords:
    def test_hash_and_verify(self):
        digest = hash_password("secret")

        assert digest != "secret"
        assert verify_password("secret", digest)
        assert not verify_password("wrong", digest)

    def test_hashes_are_salted(self):
        assert hash_password("secret") != hash_password("secret")


class TestTokens:
    def test_secure_tokens_are_unique_and_url_safe(self):
        tokens = {generate_secure_token() for _ in range(20)}
        assert len(tokens) == 20
        assert all("=" not in token and "+" not in token for token in tokens)


class TestCsrf:
    def test_token_valid_for_its_session(self):
        token = generate_csrf_token("session-1")
        assert validate_csrf_token("session-1", token)

    def test_token_bound_to_session(self):
        token = generate_csrf_token("session-1")
        assert not validate_csrf_token("session-2", token)

    @pytest.mark.parametrize("token", [None, "", "garbage", "abc:def", "1:"])
    def test_malformed_tokens_rejected(self, token):
        assert not validate_csrf_token("session-1", token)

    def test_expired_token_rejected(self):
        old_hour = int(time.time() // 3600) - 25
        token = generate_csrf_token("session-1", timestamp=old_hour)

        assert not validate_csrf_token("session-1", token, max_age_hours=24)
        assert validate_csrf_token("session-1", token, max_age_hours=48)


class TestSanitizeReturnUrl:
    @pytest.mark.parametrize(
        ("return_to", "expected"),
        [
            ("/products/new", "/products/new"),
            ("/products?locale=es", "/products?locale=es"),
            (None, "/"),
            ("", "/"),
            ("//evil.example.com", "/"),
            ("https://evil.example.com/", "/"),
            ("/\\evil.example.com", "/"),
            ("javascript:alert(1)", "/"),
        ],
    )
    def test_only_local_paths_pass(self, return_to, expected):
        assert sanitize_return_url(return_to) == expected

    def test_allowed_hosts(self):
        url = "https://shop.example.com/products"
        assert sanitize_return_url(url, allowed_hosts=["shop.example.com"]) == url

    def test_custom_default(self):
        assert sanitize_return_url("//evil", default="/products") == "/products"
