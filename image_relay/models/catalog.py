"""Static table of upstream image generation models."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class EndpointKind(str, Enum):
    """Upstream method a model is served through."""

    GENERATE_CONTENT = "generateContent"
    GENERATE_IMAGE = "generateImage"


class ModelDescriptor(BaseModel):
    """Metadata identifying one upstream backend and its request shape."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Upstream model id")
    display_name: str = Field(..., description="Human readable model name")
    endpoint_kind: EndpointKind = Field(..., description="Upstream method")
    supports_image_gen: bool = Field(default=True, description="Can produce images")


IMAGE_MODELS: dict[str, ModelDescriptor] = {
    descriptor.id: descriptor
    for descriptor in (
        ModelDescriptor(
            id="gemini-2.0-flash-exp",
            display_name="Gemini 2.0 Flash (Experimental)",
            endpoint_kind=EndpointKind.GENERATE_CONTENT,
        ),
        ModelDescriptor(
            id="imagen-4",
            display_name="Imagen 4 (High Quality)",
            endpoint_kind=EndpointKind.GENERATE_IMAGE,
        ),
        ModelDescriptor(
            id="imagen-4-fast",
            display_name="Imagen 4 Fast",
            endpoint_kind=EndpointKind.GENERATE_IMAGE,
        ),
    )
}
