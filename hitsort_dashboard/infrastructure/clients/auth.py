"""Session gateway HTTP client for exchanging credentials for a token"""

from dataclasses import dataclass

import httpx

from hitsort_dashboard.config import settings
from hitsort_dashboard.domain.exceptions import AuthenticationError, RecordStoreError


@dataclass(frozen=True)
class StoreSession:
    """Opaque bearer token for the record store, passed explicitly to every call"""

    token: str

    @property
    def headers(self) -> dict:
        # The store expects the raw token, without a "Bearer" scheme
        return {"Authorization": self.token}


class AuthClient:
    """Client for the external login endpoint"""

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url or settings.auth_base
        self.timeout = timeout or settings.http_timeout_seconds
        self.transport = transport

    async def login(self, username: str, password: str) -> StoreSession:
        """
        Exchange credentials for a session token.

        Raises:
            AuthenticationError: Gateway answered with a non-2xx status or no token
            RecordStoreError: Timeout or network failure
        """
        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            try:
                response = await client.post(
                    f"{self.base_url}/api/auth/login",
                    json={"username": username, "password": password},
                )
                response.raise_for_status()
                token = response.json()["token"]

            except httpx.HTTPStatusError as e:
                raise AuthenticationError(f"Login failed: {e.response.status_code}") from e
            except httpx.TimeoutException as e:
                raise RecordStoreError(f"Login timeout after {self.timeout}s") from e
            except httpx.RequestError as e:
                raise RecordStoreError(f"Login request failed: {e}") from e
            except (KeyError, ValueError, TypeError) as e:
                raise AuthenticationError(f"Login response carried no token: {e}") from e

        if not token:
            raise AuthenticationError("Login response carried an empty token")
        return StoreSession(token=str(token))
