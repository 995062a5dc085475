import pytest

from app.config import DEFAULT_LOCATION, DEFAULT_MODEL_NAME, Settings


def test_settings_defaults() -> None:
    settings = Settings()

    assert settings.project_id == "demo-project"
    assert settings.location == DEFAULT_LOCATION == "us-central1"
    assert settings.model_name == DEFAULT_MODEL_NAME == "text-bison@001"
    assert settings.metadata_timeout == 5.0
    assert settings.prediction_timeout == 10.0


@pytest.mark.parametrize("value", ["", "   "])
def test_blank_optional_settings_fall_back_to_defaults(monkeypatch, value) -> None:
    monkeypatch.setenv("LOCATION", value)
    monkeypatch.setenv("MODEL_NAME", value)

    settings = Settings()

    assert settings.location == "us-central1"
    assert settings.model_name == "text-bison@001"


def test_blank_project_id_is_unset(monkeypatch) -> None:
    monkeypatch.setenv("PROJECT_ID", "  ")

    assert Settings().project_id is None


def test_settings_read_overrides(monkeypatch) -> None:
    monkeypatch.setenv("LOCATION", "asia-northeast1")
    monkeypatch.setenv("MODEL_NAME", "text-bison-32k")
    monkeypatch.setenv("PREDICTION_TIMEOUT", "2.5")

    settings = Settings()

    assert settings.location == "asia-northeast1"
    assert settings.model_name == "text-bison-32k"
    assert settings.prediction_timeout == 2.5
