"""Adapter for Vertex AI publisher-model text predictions."""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote

import httpx

from app.config import Settings
from app.exceptions import PredictionServiceError

logger = logging.getLogger(__name__)


class PredictionService:
    """Wrapper around the regional ``:predict`` endpoint."""

    def __init__(self, client: httpx.AsyncClient, settings: Settings) -> None:
        self._client = client
        self._settings = settings

    async def predict(
        self,
        token: str,
        project: str,
        location: str,
        model: str,
        prompt: str,
    ) -> dict[str, Any]:
        """Send ``prompt`` as a single instance and return the decoded response."""

        payload = {
            "instances": [{"content": prompt}],
            "parameters": {
                "temperature": self._settings.prediction_temperature,
                "maxOutputTokens": self._settings.prediction_max_output_tokens,
            },
        }

        headers = {
            "Authorization": f"Bearer {token}",
            "Content-Type": "application/json",
        }

        url = self.endpoint(project, location, model)

        try:
            response = await self._client.post(
                url,
                headers=headers,
                json=payload,
                timeout=self._settings.prediction_timeout,
            )
            response.raise_for_status()
        except httpx.TimeoutException as exc:
            logger.warning("Prediction request timed out", exc_info=exc)
            raise PredictionServiceError("Prediction request timed out") from exc
        except httpx.HTTPStatusError as exc:
            logger.error(
                "Prediction request failed",
                extra={
                    "status_code": exc.response.status_code,
                    "response_text": exc.response.text,
                },
            )
            raise PredictionServiceError(
                f"Prediction service returned HTTP {exc.response.status_code}: "
                f"{exc.response.text}",
                status_code=exc.response.status_code,
                response_text=exc.response.text,
            ) from exc
        except httpx.HTTPError as exc:
            logger.exception("Unexpected prediction HTTP error")
            raise PredictionServiceError(f"Prediction request failed: {exc}") from exc

        try:
            return response.json()
        except ValueError as exc:
            logger.error("Malformed prediction response", extra={"raw_response": response.text})
            raise PredictionServiceError(
                "Prediction response was not valid JSON",
                status_code=response.status_code,
                response_text=response.text,
            ) from exc

    @staticmethod
    def endpoint(project: str, location: str, model: str) -> str:
        path = "/v1/projects/{}/locations/{}/publishers/google/models/{}:predict".format(
            quote(project, safe=""),
            quote(location, safe=""),
            quote(model, safe=""),
        )
        return f"https://{location}-aiplatform.googleapis.com{path}"
