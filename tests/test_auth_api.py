"""API tests for registration, login and the x-auth-token gate."""

from datetime import UTC, datetime, timedelta

import jwt

from offiswap.core.config import get_settings
from offiswap.core.security import decode_access_token, issue_token
from offiswap.schemas.auth import TokenClaim
from tests.helpers import PASSWORD, ApiTestCase, auth


class TestRegister(ApiTestCase):
    """POST /api/auth/register."""

    def test_returns_public_profile(self) -> None:
        user = self.register(name="Acme Ltd", email="ops@acme.test", location="Berlin")
        self.assertEqual(user["name"], "Acme Ltd")
        self.assertEqual(user["email"], "ops@acme.test")
        self.assertEqual(user["location"], "Berlin")
        self.assertIn("id", user)
        self.assertIn("created_at", user)
        self.assertNotIn("password_hash", user)
        self.assertNotIn("password", user)

    def test_location_is_optional(self) -> None:
        user = self.register()
        self.assertIsNone(user["location"])

    def test_duplicate_email_conflicts(self) -> None:
        self.register(email="ops@acme.test")
        response = self.client.post(
            "/api/auth/register",
            json={"name": "Other", "email": "ops@acme.test", "password": "whatever"},
        )
        self.assertEqual(response.status_code, 409)
        self.assertEqual(response.json(), {"message": "User with this email already exists."})

    def test_missing_name_is_bad_request(self) -> None:
        response = self.client.post(
            "/api/auth/register", json={"email": "ops@acme.test", "password": PASSWORD}
        )
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["message"], "name is required.")

    def test_empty_password_is_bad_request(self) -> None:
        response = self.client.post(
            "/api/auth/register",
            json={"name": "Acme", "email": "ops@acme.test", "password": ""},
        )
        self.assertEqual(response.status_code, 400)

    def test_password_longer_than_bcrypt_limit_is_bad_request(self) -> None:
        response = self.client.post(
            "/api/auth/register",
            json={"name": "Acme", "email": "ops@acme.test", "password": "x" * 73},
        )
        self.assertEqual(response.status_code, 400)
        self.assertTrue(response.json()["message"].startswith("Invalid value for password"))


class TestLogin(ApiTestCase):
    """POST /api/auth/login."""

    def test_token_carries_identity_claim(self) -> None:
        user = self.register(name="Acme Ltd", email="ops@acme.test")
        token = self.login(email="ops@acme.test")
        claim = decode_access_token(token)
        self.assertEqual(claim, TokenClaim(id=user["id"], email="ops@acme.test", name="Acme Ltd"))

    def test_token_expires_one_hour_after_issue(self) -> None:
        self.register(email="ops@acme.test")
        token = self.login(email="ops@acme.test")
        payload = jwt.decode(token, options={"verify_signature": False})
        self.assertEqual(get_settings().JWT_EXPIRE_MINUTES, 60)
        self.assertEqual(payload["exp"] - payload["iat"], 60 * 60)

    def test_unknown_email_and_wrong_password_look_identical(self) -> None:
        self.register(email="ops@acme.test")
        unknown = self.client.post(
            "/api/auth/login", json={"email": "nobody@acme.test", "password": PASSWORD}
        )
        wrong = self.client.post(
            "/api/auth/login", json={"email": "ops@acme.test", "password": "not-it"}
        )
        self.assertEqual(unknown.status_code, 401)
        self.assertEqual(wrong.status_code, 401)
        self.assertEqual(unknown.json(), wrong.json())
        self.assertEqual(wrong.json(), {"message": "Invalid credentials."})

    def test_missing_password_is_bad_request(self) -> None:
        response = self.client.post("/api/auth/login", json={"email": "ops@acme.test"})
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["message"], "password is required.")


class TestAuthGate(ApiTestCase):
    """Protected routes reject missing and invalid tokens with 401."""

    def test_missing_token(self) -> None:
        response = self.client.get("/api/listings/my")
        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.json(), {"message": "No token, authorization denied."})

    def test_malformed_token(self) -> None:
        response = self.client.get("/api/listings/my", headers=auth("garbage"))
        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.json(), {"message": "Token is not valid."})

    def test_expired_token(self) -> None:
        settings = get_settings()
        token = issue_token(
            TokenClaim(id=1, email="ops@acme.test", name="Acme"),
            settings.JWT_SECRET.get_secret_value(),
            timedelta(hours=1),
            now=datetime.now(UTC) - timedelta(hours=1, seconds=1),
        )
        response = self.client.get("/api/listings/my", headers=auth(token))
        self.assertEqual(response.status_code, 401)
        self.assertEqual(response.json(), {"message": "Token is not valid."})

    def test_token_signed_with_other_secret(self) -> None:
        token = issue_token(
            TokenClaim(id=1, email="ops@acme.test", name="Acme"),
            "some-other-secret-abcdefghijklmnopqrstuvwxyz",
            timedelta(hours=1),
        )
        response = self.client.get("/api/listings/my", headers=auth(token))
        self.assertEqual(response.status_code, 401)

    def test_valid_token_passes(self) -> None:
        _, token = self.register_and_login()
        response = self.client.get("/api/listings/my", headers=auth(token))
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), [])
