"""Main FastAPI application entry point."""

import sys
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
from loguru import logger

from image_relay import __version__
from image_relay.config import settings
from image_relay.models.catalog import IMAGE_MODELS
from image_relay.routers import generate_router, health_router
from image_relay.services.session import close_session, get_session


# Configure loguru
logger.remove()
logger.add(
    sys.stdout,
    format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
    level=settings.log_level.upper(),
)

STATIC_DIR = Path(settings.static_dir) if settings.static_dir else Path(__file__).parent / "static"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info(f"Starting image relay v{__version__}")
    logger.info(f"Server running at http://{settings.host}:{settings.port}")
    logger.info(f"Health check: http://{settings.host}:{settings.port}/api/health")
    logger.info(f"API key configured: {bool(settings.google_api_key)}")
    logger.info(f"Proxy: {settings.proxy or 'None'}")
    logger.info(
        f"Max retries: {settings.max_retry}, default model: {settings.default_model}, "
        f"fallback: {settings.fallback_model or 'None'}"
    )

    await get_session()

    yield

    logger.info("Shutting down...")
    await close_session()
    logger.info("Shutdown complete")


# Create FastAPI application
app = FastAPI(
    title="Image Relay",
    description="Relays text prompts to Gemini and Imagen and returns the generated image",
    version=__version__,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)


# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Report malformed bodies in the same shape as other errors."""
    errors = exc.errors()
    logger.warning(f"Invalid request to {request.url.path}: {errors}")
    first = errors[0] if errors else {}
    if "model" in first.get("loc", ()):
        message = (
            f"Unsupported model: {first.get('input')}. "
            f"Available models: {', '.join(IMAGE_MODELS)}"
        )
    else:
        message = "Please provide a valid prompt"
    return JSONResponse(status_code=400, content={"error": message})


# Include routers
app.include_router(generate_router, tags=["Generate"])
app.include_router(health_router, tags=["Health"])


@app.get("/", include_in_schema=False)
async def index():
    """Serve the browser client."""
    return FileResponse(STATIC_DIR / "index.html")


def run():
    """Run the application with uvicorn."""
    import uvicorn

    uvicorn.run(
        "image_relay.main:app",
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level="info",
    )


if __name__ == "__main__":
    run()
