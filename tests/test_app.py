"""Tests for app wiring: root, health, error envelope and settings validation."""

import unittest
from unittest.mock import patch

from pydantic import SecretStr, ValidationError
from sqlalchemy.exc import OperationalError

from offiswap import __version__
from offiswap.core.config import Settings
from tests.helpers import ApiTestCase, auth


class TestRootAndHealth(ApiTestCase):
    def test_root(self) -> None:
        response = self.client.get("/")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"message": "Welcome to OffiSwap API!"})

    def test_health_reports_database_and_feed_size(self) -> None:
        _, token = self.register_and_login()
        self.create_listing(token, title="Desk")
        claimed = self.create_listing(token, title="Chair")
        self.client.put(
            f"/api/listings/{claimed['id']}", json={"status": "claimed"}, headers=auth(token)
        )

        response = self.client.get("/api/health")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(
            response.json(),
            {
                "status": "ok",
                "version": __version__,
                "environment": "dev",
                "database": "connected",
                "available_listings": 1,
            },
        )

    def test_health_degraded_without_database(self) -> None:
        with patch("offiswap.api.health.check_db_connected", return_value=False):
            response = self.client.get("/api/health")
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["status"], "degraded")
        self.assertEqual(body["database"], "disconnected")
        self.assertIsNone(body["available_listings"])

    def test_database_failure_is_generic_server_error(self) -> None:
        with patch(
            "offiswap.api.listings.listing_service.list_available",
            side_effect=OperationalError("SELECT", {}, Exception("connection lost")),
        ):
            response = self.client.get("/api/listings")
        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.json(), {"message": "Server error."})

    def test_unknown_route_uses_message_envelope(self) -> None:
        response = self.client.get("/api/nope")
        self.assertEqual(response.status_code, 404)
        self.assertIn("message", response.json())

    def test_malformed_json_is_bad_request(self) -> None:
        response = self.client.post(
            "/api/auth/login",
            content=b"{not json",
            headers={"content-type": "application/json"},
        )
        self.assertEqual(response.status_code, 400)
        self.assertIn("message", response.json())


class TestSettings(unittest.TestCase):
    """Settings validators reject bad configuration early."""

    def _settings(self, **overrides: object) -> Settings:
        values = {"DATABASE_URL": "sqlite://", "JWT_SECRET": SecretStr("s" * 32)}
        values.update(overrides)
        return Settings(_env_file=None, **values)

    def test_defaults(self) -> None:
        settings = self._settings()
        self.assertEqual(settings.JWT_EXPIRE_MINUTES, 60)
        self.assertEqual(settings.API_PREFIX, "/api")

    def test_rejects_unsupported_database(self) -> None:
        with self.assertRaises(ValidationError):
            self._settings(DATABASE_URL="mysql://root@localhost/offiswap")

    def test_rejects_blank_secret(self) -> None:
        with self.assertRaises(ValidationError):
            self._settings(JWT_SECRET=SecretStr("  "))

    def test_rejects_out_of_range_expiry(self) -> None:
        with self.assertRaises(ValidationError):
            self._settings(JWT_EXPIRE_MINUTES=0)

    def test_normalizes_api_prefix(self) -> None:
        self.assertEqual(self._settings(API_PREFIX="/api/").API_PREFIX, "/api")
        with self.assertRaises(ValidationError):
            self._settings(API_PREFIX="api")

    def test_wildcard_cors_only_in_dev(self) -> None:
        self.assertEqual(self._settings(CORS_ORIGINS="*").cors_origins(), ["*"])
        prod = self._settings(APP_ENV="prod", CORS_ORIGINS="*, https://offiswap.example")
        self.assertEqual(prod.cors_origins(), ["https://offiswap.example"])
