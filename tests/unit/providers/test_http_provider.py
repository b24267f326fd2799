"""Unit tests for HTTPPageProvider."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest

from laakhay.sweep.core import UpstreamInconsistencyError
from laakhay.sweep.models import PageResponse
from laakhay.sweep.providers import HTTPPageProvider
from laakhay.sweep.runtime.collector import CollectorConfig, collect


def mock_client(*payloads):
    client = MagicMock()
    client.get = AsyncMock(side_effect=list(payloads))
    return client


class TestHTTPPageProvider:
    """Test HTTPPageProvider request building and parsing."""

    @pytest.mark.asyncio
    async def test_default_fields(self):
        """Test default query parameters and response fields."""
        client = mock_client({"total": 1, "count": 1, "items": [{"id": 1}]})
        provider = HTTPPageProvider(client, "/products")

        page = await provider(0, 500)

        assert isinstance(page, PageResponse)
        assert page.items == [{"id": 1}]
        client.get.assert_awaited_once_with(
            "/products", params={"min_price": 0, "max_price": 500}
        )

    @pytest.mark.asyncio
    async def test_custom_params_and_static_query(self):
        """Test renamed bound parameters are merged with static parameters."""
        client = mock_client({"total": 0, "count": 0, "items": []})
        provider = HTTPPageProvider(
            client,
            "/search",
            low_param="price_from",
            high_param="price_to",
            params={"category": "gpu"},
        )

        await provider(10, 20)

        client.get.assert_awaited_once_with(
            "/search", params={"category": "gpu", "price_from": 10, "price_to": 20}
        )

    def test_dotted_fields(self):
        """Test nested response fields are reachable with dotted paths."""
        provider = HTTPPageProvider(
            MagicMock(),
            "/products",
            total_field="meta.total",
            count_field="meta.count",
            items_field="data.products",
        )

        page = provider.parse(
            {"meta": {"total": 2, "count": 2}, "data": {"products": [{"id": 1}, {"id": 2}]}}
        )

        assert page.total == 2
        assert page.items == [{"id": 1}, {"id": 2}]

    def test_count_derived_from_items(self):
        """Test count_field=None counts the returned items."""
        provider = HTTPPageProvider(MagicMock(), "/products", count_field=None)

        page = provider.parse({"total": 9, "items": [{"id": 1}, {"id": 2}]})

        assert page.count == 2
        assert page.is_truncated

    def test_count_derived_from_malformed_items_is_zero(self):
        provider = HTTPPageProvider(MagicMock(), "/products", count_field=None)

        page = provider.parse({"total": 0, "items": None})

        assert page.count == 0
        assert page.items is None

    def test_missing_total_raises(self):
        """Test a body without the total field is an upstream inconsistency."""
        provider = HTTPPageProvider(MagicMock(), "/products")

        with pytest.raises(UpstreamInconsistencyError):
            provider.parse({"count": 1, "items": []})

    @pytest.mark.asyncio
    async def test_drives_collector(self):
        """Test the provider plugs into collect() end to end."""
        client = mock_client(
            {"total": 3, "count": 2, "products": [{"id": 1}, {"id": 2}]},
            {"total": 2, "count": 2, "products": [{"id": 1}, {"id": 2}]},
            {"total": 1, "count": 1, "products": [{"id": 3}]},
        )
        provider = HTTPPageProvider(client, "/products", items_field="products")

        items = await collect(CollectorConfig(page_provider=provider, low_bound=0, high_bound=10))

        assert items == [{"id": 1}, {"id": 2}, {"id": 3}]
        assert [call.kwargs["params"] for call in client.get.await_args_list] == [
            {"min_price": 0, "max_price": 10},
            {"min_price": 0, "max_price": 5},
            {"min_price": 6, "max_price": 10},
        ]
