"""Item and page models."""

from __future__ import annotations

from dataclasses import dataclass

from pylistserver.models._base import ApiModel


@dataclass(frozen=True, slots=True)
class Item:
    """A single list entry.

    Items are created once when the store is built and never change.
    A plain slotted dataclass keeps a million of them affordable.
    """

    id: int
    value: str


class ItemsPage(ApiModel):
    """Response of ``GET /api/items``."""

    items: list[Item]
    has_more: bool


class InitialState(ItemsPage):
    """Response of ``GET /api/initial-state``: first page plus the selection."""

    selected_ids: list[int]
