"""Response models for the relay API."""

from pydantic import BaseModel, Field


class ImageResult(BaseModel):
    """A generated image."""

    image: str = Field(..., description="Base64 encoded image bytes")
    mimeType: str = Field(default="image/png", description="MIME type of the image")
    model: str = Field(..., description="Display name of the model that produced it")


class TextResult(BaseModel):
    """Text returned in place of an image."""

    text: str = Field(..., description="Text content")
    message: str | None = Field(default=None, description="Hint for the user")
    finishReason: str | None = Field(
        default=None, description="Upstream finish reason when generation stopped"
    )


GenerationResult = ImageResult | TextResult


class ErrorResponse(BaseModel):
    """Error response model."""

    error: str = Field(..., description="Error message")


class ModelInfo(BaseModel):
    """Entry of GET /api/models."""

    id: str
    name: str
    supportsImageGen: bool


class ModelsResponse(BaseModel):
    """Response of GET /api/models."""

    models: list[ModelInfo]
    default: str


class HealthResponse(BaseModel):
    """Response of GET /api/health."""

    status: str = Field(default="OK")
    timestamp: str = Field(..., description="ISO-8601 UTC timestamp")
    hasApiKey: bool
