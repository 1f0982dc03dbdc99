"""Configuration management for the application."""

from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Server Configuration
    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(default=3000, description="Server port")
    log_level: str = Field(default="INFO", description="Loguru log level")
    static_dir: str | None = Field(
        default=None, description="Directory holding index.html (defaults to the bundled page)"
    )

    # Proxy Configuration
    proxy: str | None = Field(default=None, description="HTTP proxy URL")

    # Timeout Configuration
    timeout: int = Field(default=120, description="Request timeout in seconds")

    # Retry Configuration
    max_retry: int = Field(default=3, ge=1, description="Maximum retry attempts")
    retry_base_delay: float = Field(
        default=1.0, description="Base delay for retry backoff in seconds"
    )
    retry_max_delay: float = Field(
        default=30.0, description="Maximum delay for retry backoff in seconds"
    )

    # Google Generative Language API Configuration
    google_api_key: str | None = Field(
        default=None, description="API key for the Generative Language API"
    )
    gemini_base_api: str = Field(
        default="https://generativelanguage.googleapis.com/v1beta",
        description="Generative Language API base URL",
    )
    user_agent: str = Field(
        default="GeminiImageGenerator/1.0", description="User-Agent sent upstream"
    )

    # Model Selection
    default_model: str = Field(
        default="gemini-2.0-flash-exp", description="Model used when none is given"
    )
    fallback_model: str | None = Field(
        default="imagen-4-fast",
        description="Model tried when the default model is overloaded (503)",
    )

    # Generation Parameters
    temperature: float = Field(default=0.8, description="generateContent temperature")
    top_p: float = Field(default=0.9, description="generateContent topP")
    aspect_ratio: str = Field(default="1:1", description="generateImage aspect ratio")
    number_of_images: int = Field(default=1, ge=1, description="generateImage count")
    safety_filter_level: str = Field(
        default="block_some", description="generateImage safety filter level"
    )

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


# Global settings instance
settings = Settings()
