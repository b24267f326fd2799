"""Unit tests for the PageResponse model."""

from __future__ import annotations

from types import SimpleNamespace

import pytest
from pydantic import ValidationError

from laakhay.sweep.core import UpstreamInconsistencyError
from laakhay.sweep.models import PageResponse


class TestPageResponse:
    """Test PageResponse validation and classification."""

    def test_complete_page(self):
        page = PageResponse(total=2, count=2, items=[{"id": 1}, {"id": 2}])
        assert page.is_complete
        assert not page.is_truncated

    def test_truncated_page(self):
        page = PageResponse(total=2_000, count=1_000, items=[])
        assert page.is_truncated
        assert not page.is_complete

    def test_inconsistent_page_is_neither(self):
        """Test total < count is neither complete nor truncated."""
        page = PageResponse(total=1, count=2, items=[1, 2])
        assert not page.is_complete
        assert not page.is_truncated

    @pytest.mark.parametrize("items", [None, "abc", {"id": 1}, 3, object()])
    def test_non_sequence_items_normalized(self, items):
        """Test anything but a list or tuple becomes None."""
        assert PageResponse(total=0, count=0, items=items).items is None

    def test_tuple_items_become_list(self):
        page = PageResponse(total=2, count=2, items=({"id": 1}, {"id": 2}))
        assert page.items == [{"id": 1}, {"id": 2}]

    def test_items_optional(self):
        assert PageResponse(total=0, count=0).items is None

    def test_negative_totals_rejected(self):
        with pytest.raises(ValidationError):
            PageResponse(total=-1, count=0)

    def test_frozen(self):
        page = PageResponse(total=0, count=0)
        with pytest.raises(ValidationError):
            page.total = 5


class TestPageResponseCoerce:
    """Test coercion of raw provider answers."""

    def test_instance_passthrough(self):
        page = PageResponse(total=1, count=1, items=[1])
        assert PageResponse.coerce(page) is page

    def test_from_mapping(self):
        page = PageResponse.coerce({"total": 3, "count": 1, "items": [{"id": 1}]})
        assert page.total == 3
        assert page.count == 1

    def test_from_attributes(self):
        """Test objects exposing total/count/items attributes are accepted."""
        raw = SimpleNamespace(total=1, count=1, items=[{"id": 1}])
        assert PageResponse.coerce(raw).items == [{"id": 1}]

    @pytest.mark.parametrize(
        "raw",
        [
            None,
            {},
            {"count": 1},
            {"total": "many", "count": 1},
            {"total": 1, "count": -3},
            {"total": True, "count": 1},
            {"total": 1, "count": "1"},
        ],
    )
    def test_unreadable_raises_upstream_inconsistency(self, raw):
        """Test unusable totals raise UpstreamInconsistencyError chained to pydantic."""
        with pytest.raises(UpstreamInconsistencyError) as exc_info:
            PageResponse.coerce(raw)

        assert isinstance(exc_info.value.__cause__, ValidationError)
