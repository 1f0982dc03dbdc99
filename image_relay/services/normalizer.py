"""Turn Gemini and Imagen responses into the relay's result models."""

from typing import Any

from loguru import logger

from image_relay.models.response import GenerationResult, ImageResult, TextResult
from image_relay.services.errors import NoContentError

TEXT_INSTEAD_OF_IMAGE = (
    "The model returned text instead of an image. "
    "Try a more specific visual description."
)


def _dicts(value: Any) -> list[dict[str, Any]]:
    """Keep only the object entries of a JSON array."""
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, dict)]


def normalize_response(data: dict[str, Any], model_name: str) -> GenerationResult:
    """
    Interpret an upstream response body.

    Checked in order: the Imagen ``generatedImages`` array, an image part of
    the first candidate, its text parts, then a non-STOP finish reason.
    Entries that are not JSON objects are ignored.

    Raises:
        NoContentError: if none of the above is present
    """
    for generated in _dicts(data.get("generatedImages")):
        image = generated.get("bytesBase64Encoded")
        if image and isinstance(image, str):
            logger.info("Image generated successfully with Imagen")
            mime_type = generated.get("mimeType")
            return ImageResult(
                image=image,
                mimeType=mime_type if isinstance(mime_type, str) and mime_type else "image/png",
                model=model_name,
            )

    candidates = _dicts(data.get("candidates"))
    if not candidates:
        raise NoContentError("No candidates returned from API")
    candidate = candidates[0]

    content = candidate.get("content")
    parts = _dicts(content.get("parts")) if isinstance(content, dict) else []
    for part in parts:
        inline = part.get("inlineData")
        if not isinstance(inline, dict):
            continue
        mime_type = inline.get("mimeType")
        image = inline.get("data")
        if isinstance(mime_type, str) and mime_type.startswith("image/") and image and isinstance(image, str):
            logger.info("Image generated successfully")
            return ImageResult(image=image, mimeType=mime_type, model=model_name)

    texts = [part["text"] for part in parts if isinstance(part.get("text"), str) and part["text"]]
    if texts:
        logger.info("No image generated, returning text response")
        return TextResult(text="\n".join(texts), message=TEXT_INSTEAD_OF_IMAGE)

    finish_reason = candidate.get("finishReason")
    if finish_reason and isinstance(finish_reason, str) and finish_reason != "STOP":
        logger.warning(f"Generation stopped with finish reason: {finish_reason}")
        return TextResult(
            text=f"Generation stopped due to: {finish_reason}. Try modifying your prompt.",
            finishReason=finish_reason,
        )

    raise NoContentError("No content returned from model")
