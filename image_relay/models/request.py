"""Request models for the relay API."""

from pydantic import BaseModel, Field


class GenerateRequest(BaseModel):
    """Body of POST /api/generate."""

    prompt: str | None = Field(default=None, description="Text prompt")
    model: str | None = Field(
        default=None, description="Model id; the configured default when omitted"
    )
