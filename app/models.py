"""Pydantic models shared across application layers."""

from typing import Any

from pydantic import BaseModel, Field, field_validator

from app.ideas import IDEA_COUNT


class IdeasRequest(BaseModel):
    """Incoming idea generation payload."""

    topic: str = Field(default="", description="Subject to brainstorm ideas for.")

    @field_validator("topic", mode="before")
    @classmethod
    def _coerce_topic(cls, value: Any) -> str:
        if not value:
            return ""
        # Render scalars the way JSON clients print them: true, 3 not 3.0.
        if isinstance(value, bool):
            return "true"
        if isinstance(value, float) and value.is_integer():
            return str(int(value))
        return str(value).strip()


class IdeasResponse(BaseModel):
    """Successful response body."""

    ideas: list[str] = Field(min_length=IDEA_COUNT, max_length=IDEA_COUNT)


class ErrorResponse(BaseModel):
    """Error body returned to HTTP clients."""

    error: str
    detail: str | None = None
