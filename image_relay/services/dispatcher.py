"""Request dispatcher for Gemini and Imagen image generation."""

import asyncio
from typing import Any

from curl_cffi.requests import AsyncSession
from curl_cffi.requests.exceptions import RequestException
from loguru import logger

from image_relay.config import Settings
from image_relay.models.catalog import IMAGE_MODELS, EndpointKind, ModelDescriptor
from image_relay.models.request import GenerateRequest
from image_relay.models.response import GenerationResult
from image_relay.services.errors import (
    InvalidInputError,
    MissingCredentialError,
    NoContentError,
    TransportFailureError,
    UnsupportedModelError,
    UpstreamFailureError,
)
from image_relay.services.normalizer import normalize_response


class RequestDispatcher:
    """Sends prompts upstream with retry and fallback, and normalizes the answer."""

    def __init__(
        self,
        session: AsyncSession,
        settings: Settings,
        models: dict[str, ModelDescriptor] = IMAGE_MODELS,
    ):
        self.session = session
        self.settings = settings
        self.api_key = settings.google_api_key
        self.models = models

    async def generate(self, request: GenerateRequest) -> GenerationResult:
        """
        Generate an image (or text) for the request.

        Args:
            request: Prompt and optional model id

        Returns:
            ImageResult or TextResult

        Raises:
            GenerationError: classified failure carrying the HTTP status to report
        """
        prompt = request.prompt
        if not isinstance(prompt, str) or not prompt.strip():
            raise InvalidInputError("Please provide a valid prompt")

        if not self.api_key:
            raise MissingCredentialError("Google API key not configured")

        model_id = self.settings.default_model if request.model is None else request.model
        descriptor = self.models.get(model_id)
        if descriptor is None:
            raise UnsupportedModelError(
                f"Unsupported model: {model_id}. "
                f"Available models: {', '.join(self.models)}"
            )

        logger.info(f'Generating image with {descriptor.display_name} for prompt: "{prompt}"')

        response = await self._send(descriptor, prompt)

        fallback = self._fallback_for(descriptor)
        if response.status_code == 503 and fallback is not None:
            logger.warning(
                f"{descriptor.display_name} overloaded, trying {fallback.display_name} as fallback..."
            )
            descriptor = fallback
            try:
                response = await self._send(descriptor, prompt)
            except TransportFailureError as e:
                raise TransportFailureError(
                    f"Both primary and fallback models failed: {e.message}"
                ) from e
            if not self._is_success(response.status_code):
                logger.error(f"Fallback API error: {response.status_code} {response.text}")
                raise UpstreamFailureError(
                    response.status_code,
                    response.text,
                    prefix="Both primary and fallback models failed",
                )

        if not self._is_success(response.status_code):
            logger.error(f"API error: {response.status_code} {response.text}")
            raise UpstreamFailureError(response.status_code, response.text)

        try:
            data = response.json()
        except ValueError as e:
            logger.error(f"JSON decode error: {e}, response text: {response.text[:500]}")
            raise NoContentError("Invalid JSON response from API") from e

        if not isinstance(data, dict):
            raise NoContentError("Unexpected response structure from API")

        logger.debug(f"API response structure: {data}")
        return normalize_response(data, descriptor.display_name)

    def _fallback_for(self, descriptor: ModelDescriptor) -> ModelDescriptor | None:
        """Return the fallback descriptor if the given model is the default one."""
        fallback_id = self.settings.fallback_model
        if descriptor.id != self.settings.default_model or not fallback_id:
            return None
        if fallback_id == descriptor.id:
            return None
        return self.models.get(fallback_id)

    async def _send(self, descriptor: ModelDescriptor, prompt: str):
        """Send the request for one model, retrying on 503 and transport errors."""
        url = (
            f"{self.settings.gemini_base_api}/models/"
            f"{descriptor.id}:{descriptor.endpoint_kind.value}"
        )
        body = self._build_request_body(descriptor, prompt)
        headers = {
            "Content-Type": "application/json",
            "User-Agent": self.settings.user_agent,
        }
        max_retry = self.settings.max_retry

        for attempt in range(1, max_retry + 1):
            try:
                response = await self.session.post(
                    url,
                    params={"key": self.api_key},
                    headers=headers,
                    json=body,
                    timeout=self.settings.timeout,
                    proxy=self.settings.proxy,
                )
            except RequestException as e:
                if attempt == max_retry:
                    logger.error(f"Request to {descriptor.id} failed after {attempt} attempts: {e}")
                    raise TransportFailureError(
                        f"Request failed after {attempt} attempts: {e}"
                    ) from e
                delay = self._backoff(attempt)
                logger.warning(
                    f"Attempt {attempt} failed with error: {e}. Retrying in {delay:g} seconds..."
                )
                await asyncio.sleep(delay)
                continue

            if response.status_code == 503 and attempt < max_retry:
                delay = self._backoff(attempt)
                logger.warning(
                    f"Attempt {attempt} failed with 503. Retrying in {delay:g} seconds..."
                )
                await asyncio.sleep(delay)
                continue

            return response

    def _backoff(self, attempt: int) -> float:
        return min(
            self.settings.retry_base_delay * 2**attempt, self.settings.retry_max_delay
        )

    @staticmethod
    def _is_success(status_code: int) -> bool:
        return 200 <= status_code < 300

    def _build_request_body(self, descriptor: ModelDescriptor, prompt: str) -> dict[str, Any]:
        """Build the upstream body for the model's endpoint kind."""
        if descriptor.endpoint_kind is EndpointKind.GENERATE_IMAGE:
            return {
                "prompt": prompt,
                "config": {
                    "aspectRatio": self.settings.aspect_ratio,
                    "numberOfImages": self.settings.number_of_images,
                    "safetyFilterLevel": self.settings.safety_filter_level,
                },
            }

        return {
            "contents": [{"role": "user", "parts": [{"text": prompt}]}],
            "generationConfig": {
                "responseModalities": ["TEXT", "IMAGE"],
                "temperature": self.settings.temperature,
                "topP": self.settings.top_p,
            },
        }
