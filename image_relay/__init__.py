"""Gemini / Imagen image generation relay."""

__version__ = "1.0.0"
