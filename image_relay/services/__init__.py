"""Services for the application."""

from .dispatcher import RequestDispatcher
from .errors import GenerationError
from .normalizer import normalize_response
from .session import close_session, get_dispatcher, get_session

__all__ = [
    "RequestDispatcher",
    "GenerationError",
    "normalize_response",
    "close_session",
    "get_dispatcher",
    "get_session",
]
