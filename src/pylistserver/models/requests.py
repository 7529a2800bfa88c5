"""Pydantic request models for the HTTP handlers.

These models provide a consistent "validate → normalize → execute" flow.
Query strings are parsed leniently; JSON bodies must carry integer ids.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field, field_validator

from pylistserver._constants import DEFAULT_PAGE_SIZE
from pylistserver.models._base import ApiModel
from pylistserver.state.policy import parse_js_int


class ListItemsQuery(ApiModel):
    """Query string of ``GET /api/items``.

    ``offset`` and ``limit`` become ``None`` when they cannot be parsed;
    the store answers such a request with an empty page.
    """

    offset: int | None = 0
    limit: int | None = DEFAULT_PAGE_SIZE
    query: str = ""

    @field_validator("offset", "limit", mode="before")
    @classmethod
    def _parse_int_prefix(cls, value: Any) -> int | None:
        return parse_js_int(value)

    @field_validator("query", mode="before")
    @classmethod
    def _query_text(cls, value: Any) -> str:
        if value is None:
            return ""
        return str(value)


class SaveOrderRequest(ApiModel):
    """Body of ``POST /api/sort``."""

    new_sorted_ids: list[int] | None = None


class SaveSelectionRequest(ApiModel):
    """Body of ``POST /api/select``.  A missing ``ids`` clears the selection."""

    ids: list[int] = Field(default_factory=list)

    @field_validator("ids", mode="before")
    @classmethod
    def _null_is_empty(cls, value: Any) -> Any:
        if value is None:
            return []
        return value
