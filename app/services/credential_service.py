"""Adapter for the compute metadata server's access-token endpoint."""

from __future__ import annotations

import logging

import httpx

from app.config import Settings
from app.exceptions import CredentialServiceError

logger = logging.getLogger(__name__)


class CredentialService:
    """Fetches the default service account's short-lived bearer token."""

    _headers = {"Metadata-Flavor": "Google"}

    def __init__(self, client: httpx.AsyncClient, settings: Settings) -> None:
        self._client = client
        self._settings = settings

    async def fetch_token(self) -> str:
        """Return an OAuth access token issued by the metadata server."""

        try:
            response = await self._client.get(
                self._settings.metadata_token_url,
                headers=self._headers,
                timeout=self._settings.metadata_timeout,
            )
            response.raise_for_status()
        except httpx.TimeoutException as exc:
            logger.warning("Metadata token request timed out", exc_info=exc)
            raise CredentialServiceError("Metadata token request timed out") from exc
        except httpx.HTTPStatusError as exc:
            logger.error(
                "Metadata token request failed",
                extra={"status_code": exc.response.status_code},
            )
            raise CredentialServiceError(
                f"Metadata server returned HTTP {exc.response.status_code}",
                status_code=exc.response.status_code,
            ) from exc
        except httpx.HTTPError as exc:
            logger.exception("Unexpected metadata HTTP error")
            raise CredentialServiceError(f"Metadata token request failed: {exc}") from exc

        try:
            data = response.json()
        except ValueError as exc:
            logger.error("Metadata token response is not JSON")
            raise CredentialServiceError("Metadata token response was not valid JSON") from exc

        token = data.get("access_token") if isinstance(data, dict) else None
        if not token or not isinstance(token, str):
            raise CredentialServiceError("No access_token in metadata response")

        return token
