"""Core components."""

from .exceptions import (
    InvalidRangeError,
    ProviderError,
    RangeExhaustedError,
    RateLimitError,
    SweepError,
    UpstreamInconsistencyError,
)

__all__ = [
    "SweepError",
    "InvalidRangeError",
    "UpstreamInconsistencyError",
    "RangeExhaustedError",
    "ProviderError",
    "RateLimitError",
]
