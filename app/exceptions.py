"""Custom exceptions shared across services."""

from dataclasses import dataclass


@dataclass(eq=False)
class ServiceError(Exception):
    """Base exception for service layer failures."""

    message: str
    code: str = "service_error"
    status_code: int | None = None

    def __str__(self) -> str:
        return self.message


@dataclass(eq=False)
class CredentialServiceError(ServiceError):
    """Raised when the metadata server does not hand out an access token."""

    code: str = "credential_error"


@dataclass(eq=False)
class PredictionServiceError(ServiceError):
    """Raised when the prediction endpoint fails to return a usable payload."""

    code: str = "prediction_error"
    response_text: str | None = None


@dataclass(eq=False)
class ConfigurationError(ServiceError):
    """Raised when a required setting is missing at request time."""

    code: str = "configuration_error"
