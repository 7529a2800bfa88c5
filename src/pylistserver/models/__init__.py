"""Data models for pylistserver payloads."""

from pylistserver.models._base import ApiModel
from pylistserver.models.item import InitialState, Item, ItemsPage
from pylistserver.models.requests import ListItemsQuery, SaveOrderRequest, SaveSelectionRequest

__all__ = [
    "ApiModel",
    "InitialState",
    "Item",
    "ItemsPage",
    "ListItemsQuery",
    "SaveOrderRequest",
    "SaveSelectionRequest",
]
