import logging
from typing import Any, Optional

import httpx

from mollie_components.schemas import Profile

logger = logging.getLogger(__name__)


class MollieApiError(Exception):
    """Raised for every failed call to the Mollie API."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        title: Optional[str] = None,
        field: Optional[str] = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.title = title
        self.field = field

    def __str__(self) -> str:
        message = super().__str__()
        if self.status_code is None:
            return message
        return f"[{self.status_code}] {self.title or 'Error'}: {message}"


class ProfilesEndpoint:
    def __init__(self, client: "MollieApiClient"):
        self._client = client

    async def get(self, profile_id: str) -> Profile:
        """Fetch a profile; ``"me"`` is the profile the API key belongs to."""
        data = await self._client.perform_http_call("GET", f"profiles/{profile_id}")
        return Profile.model_validate(data)


class MollieApiClient:
    def __init__(
        self,
        api_key: str,
        base_url: str = "https://api.mollie.com/v2/",
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key
        self.base_url = base_url

        self._http = httpx.AsyncClient(
            base_url=base_url,
            timeout=timeout,
            transport=transport,
            headers={"Accept": "application/json"},
        )

        self.profiles = ProfilesEndpoint(self)

    async def perform_http_call(self, method: str, path: str, **kwargs) -> dict[str, Any]:
        if not self.api_key:
            raise MollieApiError("You have not set an API key")

        headers = {"Authorization": f"Bearer {self.api_key}"}

        try:
            response = await self._http.request(method, path, headers=headers, **kwargs)
        except httpx.HTTPError as e:
            raise MollieApiError(f"Unable to communicate with Mollie: {e}") from e

        logger.debug(f"Mollie API {method} {path} -> {response.status_code}")

        try:
            data = response.json()
        except ValueError as e:
            raise MollieApiError(
                f"Unable to decode Mollie response: {response.text[:200]!r}",
                status_code=response.status_code,
            ) from e

        if not isinstance(data, dict):
            raise MollieApiError(
                "Unexpected Mollie response body", status_code=response.status_code
            )

        if response.status_code >= 400:
            raise MollieApiError(
                data.get("detail", "Unknown error"),
                status_code=response.status_code,
                title=data.get("title"),
                field=data.get("field"),
            )

        return data

    async def close(self):
        """Release the underlying HTTP connections."""
        await self._http.aclose()

    async def __aenter__(self) -> "MollieApiClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()
