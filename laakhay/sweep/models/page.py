"""Page response data model."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..core.exceptions import UpstreamInconsistencyError


class PageResponse(BaseModel):
    """One bounded page returned by a page provider.

    ``total`` is the provider's count of every item matching the queried
    interval, ``count`` the number of items actually present in this page.
    ``items`` is ``None`` whenever the provider sent something that is not a
    proper sequence.
    """

    total: int = Field(..., ge=0, strict=True)
    count: int = Field(..., ge=0, strict=True)
    items: list[Any] | None = None

    model_config = ConfigDict(frozen=True, from_attributes=True)

    @field_validator("items", mode="before")
    @classmethod
    def normalize_items(cls, v: Any) -> list[Any] | None:
        """Collapse anything that is not a list or tuple to None."""
        if isinstance(v, (list, tuple)):
            return list(v)
        return None

    @property
    def is_complete(self) -> bool:
        """Whether this single page holds every matching item."""
        return self.total == self.count

    @property
    def is_truncated(self) -> bool:
        """Whether more items match than the page returned."""
        return self.total > self.count

    @classmethod
    def coerce(cls, raw: Any) -> PageResponse:
        """Build a PageResponse from a model, mapping, or attribute object.

        Raises:
            UpstreamInconsistencyError: If total or count are missing or invalid
        """
        if isinstance(raw, cls):
            return raw
        try:
            return cls.model_validate(raw)
        except ValidationError as e:
            raise UpstreamInconsistencyError(
                f"Page provider returned an unreadable response: {e.error_count()} invalid field(s)"
            ) from e
