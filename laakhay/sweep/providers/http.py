"""Page provider backed by a paginated HTTP JSON endpoint."""

from __future__ import annotations

from typing import Any

from ..models import PageResponse
from ..utils.http import HTTPClient


def _dig(payload: Any, path: str) -> Any:
    """Follow a dotted path through nested mappings, None if any hop is missing."""
    value = payload
    for part in path.split("."):
        if not isinstance(value, dict):
            return None
        value = value.get(part)
    return value


class HTTPPageProvider:
    """Adapts an HTTP endpoint filtered by price range to the page provider contract.

    The endpoint is queried with the interval bounds as query parameters, and
    the total, count and item list are read from the JSON body. Field names
    may be dotted paths (``"data.products"``). With ``count_field=None`` the
    count is taken from the length of the item list.

    Example:
        >>> async with HTTPClient(base_url="https://api.example.com") as client:
        ...     provider = HTTPPageProvider(client, "/products", items_field="products")
        ...     items = await collect(CollectorConfig(page_provider=provider))
    """

    def __init__(
        self,
        client: HTTPClient,
        path: str,
        *,
        low_param: str = "min_price",
        high_param: str = "max_price",
        params: dict[str, Any] | None = None,
        total_field: str = "total",
        count_field: str | None = "count",
        items_field: str = "items",
    ) -> None:
        self._client = client
        self._path = path
        self._low_param = low_param
        self._high_param = high_param
        self._params = dict(params or {})
        self._total_field = total_field
        self._count_field = count_field
        self._items_field = items_field

    def build_params(self, low_bound: float, high_bound: float) -> dict[str, Any]:
        return {**self._params, self._low_param: low_bound, self._high_param: high_bound}

    def parse(self, payload: Any) -> PageResponse:
        """Read a PageResponse out of a decoded JSON body."""
        items = _dig(payload, self._items_field)
        if self._count_field is None:
            count = len(items) if isinstance(items, list) else 0
        else:
            count = _dig(payload, self._count_field)
        return PageResponse.coerce(
            {"total": _dig(payload, self._total_field), "count": count, "items": items}
        )

    async def __call__(self, low_bound: float, high_bound: float) -> PageResponse:
        params = self.build_params(low_bound, high_bound)
        payload = await self._client.get(self._path, params=params)
        return self.parse(payload)
