"""Data models for the application."""

from .catalog import IMAGE_MODELS, EndpointKind, ModelDescriptor
from .request import GenerateRequest
from .response import (
    ErrorResponse,
    GenerationResult,
    HealthResponse,
    ImageResult,
    ModelInfo,
    ModelsResponse,
    TextResult,
)

__all__ = [
    "IMAGE_MODELS",
    "EndpointKind",
    "ModelDescriptor",
    "GenerateRequest",
    "ErrorResponse",
    "GenerationResult",
    "HealthResponse",
    "ImageResult",
    "ModelInfo",
    "ModelsResponse",
    "TextResult",
]
