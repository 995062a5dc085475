"""Shared pytest fixtures."""

from __future__ import annotations

import os
import sys
from collections.abc import Callable, Iterator
from pathlib import Path

import httpx
import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

os.environ.setdefault("PROJECT_ID", "demo-project")
os.environ.setdefault("ENVIRONMENT", "test")

from app.config import get_settings  # noqa: E402
from app.main import create_app  # noqa: E402

METADATA_HOST = "metadata.google.internal"


@pytest.fixture(autouse=True)
def configure_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Ensure a predictable environment and fresh settings for every test."""

    monkeypatch.setenv("PROJECT_ID", "demo-project")
    monkeypatch.setenv("ENVIRONMENT", "test")
    for name in ("LOCATION", "MODEL_NAME"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def app():
    return create_app()


def token_response(token: str = "tok-123") -> httpx.Response:
    return httpx.Response(200, json={"access_token": token, "expires_in": 3599})


def prediction_response(content: str) -> httpx.Response:
    return httpx.Response(200, json={"predictions": [{"content": content}]})


@pytest.fixture
def upstream() -> Callable[..., "Upstream"]:
    return Upstream


class Upstream:
    """Scripted stand-in for the metadata server and the prediction endpoint."""

    def __init__(
        self,
        token: Callable[[httpx.Request], httpx.Response] | None = None,
        prediction: Callable[[httpx.Request], httpx.Response] | None = None,
        content: str = "",
    ) -> None:
        self._token = token or (lambda _: token_response())
        self._prediction = prediction or (lambda _: prediction_response(content))
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.url.host == METADATA_HOST:
            return self._token(request)
        return self._prediction(request)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)
