"""Data models exchanged with page providers."""

from .page import PageResponse

__all__ = ["PageResponse"]
