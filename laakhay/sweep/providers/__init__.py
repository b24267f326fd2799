"""Host-side page providers."""

from .http import HTTPPageProvider

__all__ = ["HTTPPageProvider"]
