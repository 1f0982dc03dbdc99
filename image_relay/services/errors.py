"""Errors raised while dispatching a generation request."""


class GenerationError(Exception):
    """Base class for classified generation failures."""

    status_code: int = 500

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class InvalidInputError(GenerationError):
    status_code = 400


class UnsupportedModelError(GenerationError):
    status_code = 400


class MissingCredentialError(GenerationError):
    status_code = 500


class UpstreamFailureError(GenerationError):
    """The upstream API answered with a non-success status."""

    def __init__(self, status_code: int, body: str, prefix: str = "API request failed"):
        super().__init__(f"{prefix}: {status_code} - {body}", status_code)
        self.body = body


class NoContentError(GenerationError):
    status_code = 500


class TransportFailureError(GenerationError):
    status_code = 500
