"""Integration tests for signing in and out."""

from tests.fixtures.web import USER_EMAIL, USER_PASSWORD


class TestSignIn:
    def test_sign_in_form(self, client):
        response = client.get("/session/new?return_to=/products/new")

        assert response.status_code == 200
        assert 'name="email_address"' in response.text
        assert 'value="/products/new"' in response.text

    def test_sign_in_form_drops_foreign_return_to(self, client):
        response = client.get("/session/new?return_to=https://evil.example.com")
        assert "evil.example.com" not in response.text

    def test_valid_credentials_start_session(self, client, user):
        response = client.post(
            "/session",
            data={"email_address": USER_EMAIL.upper(), "password": USER_PASSWORD},
            follow_redirects=False,
        )

        assert response.status_code == 303
        assert response.headers["location"] == "/products"
        set_cookie = response.headers["set-cookie"]
        assert "session_id=" in set_cookie
        assert "HttpOnly" in set_cookie
        assert "samesite=lax" in set_cookie.lower()
        assert "Secure" not in set_cookie

    def test_return_to_is_honored(self, client, user):
        response = client.post(
            "/session",
            data={
                "email_address": USER_EMAIL,
                "password": USER_PASSWORD,
                "return_to": "/products/new",
            },
            follow_redirects=False,
        )
        assert response.headers["location"] == "/products/new"

    def test_open_redirect_is_refused(self, client, user):
        response = client.post(
            "/session",
            data={
                "email_address": USER_EMAIL,
                "password": USER_PASSWORD,
                "return_to": "//evil.example.com",
            },
            follow_redirects=False,
        )
        assert response.headers["location"] == "/products"

    def test_invalid_credentials(self, client, user):
        response = client.post(
            "/session",
            data={"email_address": USER_EMAIL, "password": "wrong"},
            follow_redirects=False,
        )

        assert response.status_code == 401
        assert "Try another email address or password." in response.text
        assert "session_id" not in client.cookies

    def test_redirected_sign_in_returns_to_original_page(self, client, user):
        redirect = client.get("/products/new", follow_redirects=False)
        sign_in_page = client.get(redirect.headers["location"])
        assert 'value="/products/new"' in sign_in_page.text

        response = client.post(
            "/session",
            data={
                "email_address": USER_EMAIL,
                "password": USER_PASSWORD,
                "return_to": "/products/new",
            },
        )

        assert response.status_code == 200
        assert 'name="product[name]"' in response.text

    def test_layout_shows_sign_out_when_signed_in(self, signed_in_client):
        response = signed_in_client.get("/products")
        assert "Sign out" in response.text
        assert "_method=DELETE" in response.text


class TestSignOut:
    def test_sign_out_ends_session(self, signed_in_client, csrf_token):
        response = signed_in_client.post(
            "/session?_method=DELETE",
            data={"authenticity_token": csrf_token(signed_in_client)},
            follow_redirects=False,
        )

        assert response.status_code == 303
        assert response.headers["location"] == "/session/new"

        after = signed_in_client.get("/products/new", follow_redirects=False)
        assert after.status_code == 303
        assert after.headers["location"].startswith("/session/new")

    def test_sign_out_requires_token(self, signed_in_client):
        response = signed_in_client.delete("/session")

        assert response.status_code == 403
        assert signed_in_client.get("/products/new", follow_redirects=False).status_code == 200

    def test_stale_cookie_is_treated_as_signed_out(self, client):
        response = client.get(
            "/products/new", headers={"Cookie": "session_id=stale"}, follow_redirects=False
        )
        assert response.status_code == 303
