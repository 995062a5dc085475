"""Dependency providers for the FastAPI application."""

from collections.abc import AsyncIterator

import httpx
from fastapi import Depends

from app.config import Settings, get_settings
from app.services.credential_service import CredentialService
from app.services.prediction_service import PredictionService


async def get_http_client() -> AsyncIterator[httpx.AsyncClient]:
    """Provide a client scoped to the current request."""

    async with httpx.AsyncClient() as client:
        yield client


async def get_credential_service(
    client: httpx.AsyncClient = Depends(get_http_client),
    settings: Settings = Depends(get_settings),
) -> CredentialService:
    """Dependency provider for CredentialService."""

    return CredentialService(client=client, settings=settings)


async def get_prediction_service(
    client: httpx.AsyncClient = Depends(get_http_client),
    settings: Settings = Depends(get_settings),
) -> PredictionService:
    """Dependency provider for PredictionService."""

    return PredictionService(client=client, settings=settings)
