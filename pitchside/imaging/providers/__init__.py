"""Concrete image provider adapters."""

from .gemini_provider import GeminiImageProvider
from .ideogram_provider import IdeogramProvider
from .imagen_provider import ImagenProvider

__all__ = [
    "GeminiImageProvider",
    "IdeogramProvider",
    "ImagenProvider",
]
