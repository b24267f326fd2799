"""Custom exception hierarchy."""

from __future__ import annotations


class SweepError(Exception):
    """Base exception for all library errors."""

    pass


class InvalidRangeError(SweepError):
    """Query interval has its lower bound above its upper bound."""

    def __init__(
        self,
        message: str,
        low_bound: float | None = None,
        high_bound: float | None = None,
    ) -> None:
        super().__init__(message)
        self.low_bound = low_bound
        self.high_bound = high_bound


class UpstreamInconsistencyError(SweepError):
    """Page provider returned a response that contradicts itself.

    Raised when a page reports more returned items than it claims exist
    (``total < count``) or when its totals cannot be read at all.
    """

    def __init__(
        self,
        message: str,
        total: int | None = None,
        count: int | None = None,
    ) -> None:
        super().__init__(message)
        self.total = total
        self.count = count


class RangeExhaustedError(SweepError):
    """Recursion depth guard tripped before the interval could be resolved."""

    def __init__(
        self,
        message: str,
        low_bound: float | None = None,
        high_bound: float | None = None,
        depth: int | None = None,
    ) -> None:
        super().__init__(message)
        self.low_bound = low_bound
        self.high_bound = high_bound
        self.depth = depth


class ProviderError(SweepError):
    """Error from external page source."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code


class RateLimitError(ProviderError):
    """Page source rate limit exceeded."""

    def __init__(self, message: str, retry_after: float = 60) -> None:
        super().__init__(message, status_code=429)
        self.retry_after = retry_after
