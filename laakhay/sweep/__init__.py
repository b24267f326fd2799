"""Complete item retrieval from page-capped sources by recursive range splitting.

Architecture:
    - core: Exception hierarchy
    - models: PageResponse, the pydantic model every provider answer is read into
    - runtime.collector: RangeCollector and collect(), the recursive sweep
    - utils / providers: aiohttp-based adapter wrapping a paginated HTTP
      endpoint as a page provider

Example:
    >>> from laakhay.sweep import CollectorConfig, collect
    >>> items = await collect(
    ...     CollectorConfig(page_provider=fetch_by_price, low_bound=0, high_bound=5_000)
    ... )
"""

from .core import (
    InvalidRangeError,
    ProviderError,
    RangeExhaustedError,
    RateLimitError,
    SweepError,
    UpstreamInconsistencyError,
)
from .models import PageResponse
from .providers import HTTPPageProvider
from .runtime.collector import (
    CollectionResult,
    CollectorConfig,
    RangeCollector,
    collect,
    default_identity,
)
from .utils import HTTPClient

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Collector
    "collect",
    "RangeCollector",
    "CollectorConfig",
    "CollectionResult",
    "default_identity",
    # Models
    "PageResponse",
    # Exceptions
    "SweepError",
    "InvalidRangeError",
    "UpstreamInconsistencyError",
    "RangeExhaustedError",
    "ProviderError",
    "RateLimitError",
    # HTTP adapter
    "HTTPClient",
    "HTTPPageProvider",
]
