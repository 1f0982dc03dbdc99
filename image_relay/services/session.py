"""HTTP session and dispatcher wiring."""

from curl_cffi.requests import AsyncSession

from image_relay.config import settings
from image_relay.services.dispatcher import RequestDispatcher


_session: AsyncSession | None = None


async def get_session() -> AsyncSession:
    """Get or create the shared upstream session."""
    global _session
    if _session is None:
        _session = AsyncSession()
    return _session


async def close_session() -> None:
    """Close the shared upstream session."""
    global _session
    if _session is not None:
        await _session.close()
        _session = None


async def get_dispatcher() -> RequestDispatcher:
    """FastAPI dependency returning a dispatcher bound to the shared session."""
    return RequestDispatcher(await get_session(), settings)
