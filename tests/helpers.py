"""Shared base class for API tests: isolated in-memory database and request helpers."""

import unittest
from typing import Any

from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from offiswap.core.database import enforce_sqlite_foreign_keys, get_db
from offiswap.main import app
from offiswap.models import Base

PASSWORD = "correct-horse"


def auth(token: str) -> dict[str, str]:
    """Headers carrying the token for a protected route."""
    return {"x-auth-token": token}


class ApiTestCase(unittest.TestCase):
    """Fresh schema per test; get_db is overridden to use the test engine."""

    def setUp(self) -> None:
        self.engine = create_engine(
            "sqlite://",
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
        enforce_sqlite_foreign_keys(self.engine)
        Base.metadata.create_all(self.engine)
        self.SessionTesting = sessionmaker(bind=self.engine, autocommit=False, autoflush=False)

        def override_get_db():
            db = self.SessionTesting()
            try:
                yield db
            finally:
                db.close()

        app.dependency_overrides[get_db] = override_get_db
        self.client = TestClient(app)

    def tearDown(self) -> None:
        self.client.close()
        app.dependency_overrides.clear()
        Base.metadata.drop_all(self.engine)
        self.engine.dispose()

    def register(
        self,
        name: str = "Acme Ltd",
        email: str = "ops@acme.test",
        password: str = PASSWORD,
        **extra: Any,
    ) -> dict[str, Any]:
        response = self.client.post(
            "/api/auth/register",
            json={"name": name, "email": email, "password": password, **extra},
        )
        self.assertEqual(response.status_code, 201, response.text)
        return response.json()

    def login(self, email: str = "ops@acme.test", password: str = PASSWORD) -> str:
        response = self.client.post(
            "/api/auth/login", json={"email": email, "password": password}
        )
        self.assertEqual(response.status_code, 200, response.text)
        return response.json()["token"]

    def register_and_login(
        self, name: str = "Acme Ltd", email: str = "ops@acme.test"
    ) -> tuple[dict[str, Any], str]:
        user = self.register(name=name, email=email)
        return user, self.login(email=email)

    def create_listing(self, token: str, **fields: Any) -> dict[str, Any]:
        body = {"title": "Desk chair", "item_type": "furniture", "location": "Berlin"}
        body.update(fields)
        response = self.client.post("/api/listings", json=body, headers=auth(token))
        self.assertEqual(response.status_code, 201, response.text)
        return response.json()
