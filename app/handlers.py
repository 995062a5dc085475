"""HTTP handlers for the application."""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import Depends, Request, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from app.config import Settings, get_settings
from app.dependencies import get_credential_service, get_prediction_service
from app.exceptions import ConfigurationError
from app.ideas import build_prompt, extract_prediction_text, normalize_ideas
from app.models import ErrorResponse, IdeasRequest, IdeasResponse
from app.services.credential_service import CredentialService
from app.services.prediction_service import PredictionService

logger = logging.getLogger(__name__)


async def generate_ideas(
    request: Request,
    credential_service: Annotated[CredentialService, Depends(get_credential_service)],
    prediction_service: Annotated[PredictionService, Depends(get_prediction_service)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> JSONResponse:
    """Main workflow: topic → access token → prediction → three ideas."""

    try:
        topic = await _read_topic(request)
        if not topic:
            return _error(status.HTTP_400_BAD_REQUEST, ErrorResponse(error="Missing topic"))

        if not settings.project_id:
            raise ConfigurationError("PROJECT_ID is not configured")

        token = await credential_service.fetch_token()
        payload = await prediction_service.predict(
            token=token,
            project=settings.project_id,
            location=settings.location,
            model=settings.model_name,
            prompt=build_prompt(topic),
        )

        ideas = normalize_ideas(extract_prediction_text(payload))
        logger.info(
            "Ideas generated",
            extra={"topic_chars": len(topic), "model": settings.model_name},
        )
        return JSONResponse(IdeasResponse(ideas=ideas).model_dump())
    except Exception as exc:
        logger.exception("Idea generation failed")
        return _error(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            ErrorResponse(error="Internal error", detail=str(exc) or exc.__class__.__name__),
        )


async def _read_topic(request: Request) -> str:
    """Extract the trimmed topic, treating any unusable body as missing."""

    try:
        payload = IdeasRequest.model_validate_json(await request.body())
    except ValidationError:
        return ""
    return payload.topic


def _error(status_code: int, error: ErrorResponse) -> JSONResponse:
    return JSONResponse(error.model_dump(exclude_none=True), status_code=status_code)
