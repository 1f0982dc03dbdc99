"""Image generation and model listing endpoints."""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from loguru import logger

from image_relay.config import settings
from image_relay.models.catalog import IMAGE_MODELS
from image_relay.models.request import GenerateRequest
from image_relay.models.response import (
    ErrorResponse,
    ImageResult,
    ModelInfo,
    ModelsResponse,
    TextResult,
)
from image_relay.services.dispatcher import RequestDispatcher
from image_relay.services.errors import GenerationError
from image_relay.services.session import get_dispatcher


router = APIRouter(prefix="/api")


@router.post(
    "/generate",
    response_model=ImageResult | TextResult,
    response_model_exclude_none=True,
    responses={
        400: {"model": ErrorResponse, "description": "Bad Request"},
        500: {"model": ErrorResponse, "description": "Internal Server Error"},
        503: {"model": ErrorResponse, "description": "Service Unavailable"},
    },
    summary="Generate an image",
    description="Generate an image from a text prompt with the selected model.",
)
async def generate(
    request: GenerateRequest,
    dispatcher: RequestDispatcher = Depends(get_dispatcher),
):
    """
    Generate an image for the prompt.

    Returns the image as base64, or text when the model answered with text
    or stopped early. Failures are reported as ``{"error": message}``.
    """
    try:
        return await dispatcher.generate(request)
    except GenerationError as e:
        if e.status_code >= 500:
            logger.error(f"Generation failed: {e.message}")
        else:
            logger.warning(f"Rejected generate request: {e.message}")
        return JSONResponse(status_code=e.status_code, content={"error": e.message})
    except Exception as e:
        logger.exception(f"Unexpected error during generation: {e}")
        return JSONResponse(
            status_code=500, content={"error": f"Internal server error: {e}"}
        )


@router.get(
    "/models",
    response_model=ModelsResponse,
    summary="List available models",
)
async def list_models() -> ModelsResponse:
    """List all supported models and the default one."""
    return ModelsResponse(
        models=[
            ModelInfo(
                id=descriptor.id,
                name=descriptor.display_name,
                supportsImageGen=descriptor.supports_image_gen,
            )
            for descriptor in IMAGE_MODELS.values()
        ],
        default=settings.default_model,
    )
