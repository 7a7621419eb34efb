"""HTTP client for the OffiSwap API.

Credentials are passed explicitly on each authenticated call; the client keeps no
default auth header. Local token inspection here is advisory only: the server's
verification decides whether a token is accepted.
"""

from __future__ import annotations

from datetime import UTC, date, datetime
from typing import Any

import httpx
import jwt

from offiswap.schemas.auth import TokenClaim

TOKEN_HEADER = "x-auth-token"
DEFAULT_BASE_URL = "http://localhost:8000"


class OffiSwapAPIError(Exception):
    """Raised when the API answers with an error status; carries its message."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


def _jsonable(fields: dict[str, Any]) -> dict[str, Any]:
    return {
        key: value.isoformat() if isinstance(value, date) else value
        for key, value in fields.items()
    }


def read_claim(token: str) -> TokenClaim | None:
    """Decode the claim without verifying the signature (display purposes only)."""
    try:
        payload = jwt.decode(token, options={"verify_signature": False})
        return TokenClaim.model_validate(payload.get("user"))
    except (jwt.PyJWTError, ValueError):
        return None


def token_expired(token: str, now: datetime | None = None) -> bool:
    """Advisory expiry check on the client side; unreadable tokens count as expired."""
    try:
        payload = jwt.decode(token, options={"verify_signature": False})
    except jwt.PyJWTError:
        return True
    exp = payload.get("exp")
    if not isinstance(exp, (int, float)):
        return True
    current = now or datetime.now(UTC)
    return current.timestamp() >= exp


class OffiSwapClient:
    """Thin synchronous wrapper over the REST API."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        *,
        api_prefix: str = "/api",
        timeout: float = 30.0,
        http: httpx.Client | None = None,
    ) -> None:
        self._owns_http = http is None
        self._http = http or httpx.Client(base_url=base_url, timeout=timeout)
        self._prefix = api_prefix.rstrip("/")

    def __enter__(self) -> OffiSwapClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_http:
            self._http.close()

    def _request(
        self,
        method: str,
        path: str,
        *,
        token: str | None = None,
        json: dict[str, Any] | None = None,
    ) -> Any:
        headers = {TOKEN_HEADER: token} if token else None
        response = self._http.request(
            method,
            f"{self._prefix}{path}",
            headers=headers,
            json=json,
        )
        if response.is_error:
            try:
                message = response.json().get("message") or response.reason_phrase
            except ValueError:
                message = response.text or response.reason_phrase
            raise OffiSwapAPIError(message, status_code=response.status_code)
        return response.json()

    def register(
        self,
        name: str,
        email: str,
        password: str,
        location: str | None = None,
    ) -> dict[str, Any]:
        body = {"name": name, "email": email, "password": password}
        if location is not None:
            body["location"] = location
        return self._request("POST", "/auth/register", json=body)

    def login(self, email: str, password: str) -> str:
        """Return the signed token; the caller decides where to keep it."""
        data = self._request("POST", "/auth/login", json={"email": email, "password": password})
        return data["token"]

    def create_listing(self, token: str, **fields: Any) -> dict[str, Any]:
        return self._request("POST", "/listings", token=token, json=_jsonable(fields))

    def list_listings(self) -> list[dict[str, Any]]:
        return self._request("GET", "/listings")

    def my_listings(self, token: str) -> list[dict[str, Any]]:
        return self._request("GET", "/listings/my", token=token)

    def get_listing(self, listing_id: int) -> dict[str, Any]:
        return self._request("GET", f"/listings/{listing_id}")

    def update_listing(self, token: str, listing_id: int, **fields: Any) -> dict[str, Any]:
        return self._request(
            "PUT", f"/listings/{listing_id}", token=token, json=_jsonable(fields)
        )

    def delete_listing(self, token: str, listing_id: int) -> str:
        return self._request("DELETE", f"/listings/{listing_id}", token=token)["message"]
