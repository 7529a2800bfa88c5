"""In-memory list store.

This is the only component allowed to hold or replace the display order
and the selection.  Request handlers receive it by injection.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from pylistserver._constants import DEFAULT_DATA_SIZE, DEFAULT_PAGE_SIZE, DEFAULT_VALUE_TEMPLATE
from pylistserver.config import ListServerConfig
from pylistserver.exceptions import InvalidOrderError, InvalidSelectionError
from pylistserver.models.item import InitialState, Item, ItemsPage
from pylistserver.state.policy import (
    HasMorePolicy,
    compute_has_more,
    is_permutation,
    page_bounds,
    unknown_ids,
)

_logger = logging.getLogger(__name__)


class ListStore:
    """Process-lifetime state: items, item index, order and selection.

    Items are built once from ``value_template`` with ids ``1..size`` and
    are never mutated.  The order and the selection are replaced
    wholesale, last writer wins.
    """

    def __init__(
        self,
        *,
        size: int = DEFAULT_DATA_SIZE,
        value_template: str = DEFAULT_VALUE_TEMPLATE,
        strict: bool = True,
        has_more_policy: HasMorePolicy = HasMorePolicy.EXACT,
    ) -> None:
        if size < 0:
            raise ValueError(f"size must be non-negative, got {size}")
        self._strict = strict
        self._has_more_policy = has_more_policy
        self._items: tuple[Item, ...] = tuple(Item(id=i, value=value_template.format(id=i)) for i in range(1, size + 1))
        self._index: dict[int, Item] = {item.id: item for item in self._items}
        # Lowercased once; search compares against these.
        self._search_keys: tuple[str, ...] = tuple(item.value.lower() for item in self._items)
        self._order: tuple[int, ...] = tuple(self._index)
        self._selected: frozenset[int] = frozenset()
        _logger.info("List store ready with %d items (strict=%s, has_more=%s)", size, strict, has_more_policy)

    @classmethod
    def from_config(cls, config: ListServerConfig) -> ListStore:
        return cls(
            size=config.data_size,
            value_template=config.value_template,
            strict=config.strict_validation,
            has_more_policy=config.has_more_policy,
        )

    # ------------------------------------------------------------------
    # Read side
    # ------------------------------------------------------------------

    @property
    def size(self) -> int:
        return len(self._items)

    @property
    def order(self) -> tuple[int, ...]:
        """Current display order."""
        return self._order

    @property
    def selected_ids(self) -> frozenset[int]:
        return self._selected

    def get_item(self, item_id: int) -> Item | None:
        return self._index.get(item_id)

    def candidate_ids(self, query: str = "") -> Sequence[int]:
        """Return the id sequence a listing pages over.

        With a query, every item whose value contains it (case-insensitive)
        in ascending id order.  The custom order is not applied to search
        results.  Without a query, the current order.
        """
        if not query:
            return self._order
        needle = query.lower()
        return [item.id for item, key in zip(self._items, self._search_keys) if needle in key]

    def list_items(
        self,
        offset: int | None = 0,
        limit: int | None = DEFAULT_PAGE_SIZE,
        query: str = "",
    ) -> ItemsPage:
        """Return one page of the candidate list.

        ``offset``/``limit`` of ``None`` (unparsable input), a negative
        offset or a non-positive limit give an empty page.
        """
        candidates = self.candidate_ids(query)
        bounds = page_bounds(offset, limit)
        page_ids: Sequence[int] = candidates[bounds[0] : bounds[1]] if bounds is not None else ()
        has_more = compute_has_more(
            self._has_more_policy,
            offset=offset,
            limit=limit,
            returned=len(page_ids),
            total=len(candidates),
        )
        return ItemsPage(items=self._resolve(page_ids), has_more=has_more)

    def initial_state(self, page_size: int = DEFAULT_PAGE_SIZE) -> InitialState:
        """First page of the current order plus the full selection."""
        first_ids = self._order[:page_size]
        return InitialState(
            items=self._resolve(first_ids),
            has_more=len(self._order) > page_size,
            selected_ids=sorted(self._selected),
        )

    def _resolve(self, ids: Iterable[int]) -> list[Item]:
        # Unknown ids can only be present in lax mode; they are skipped.
        index = self._index
        return [index[item_id] for item_id in ids if item_id in index]

    # ------------------------------------------------------------------
    # Write side
    # ------------------------------------------------------------------

    def replace_order(self, ids: Sequence[int]) -> None:
        """Replace the display order.

        Raises
        ------
        InvalidOrderError
            In strict mode, when *ids* is not a permutation of all item ids.
        """
        if self._strict and not is_permutation(ids, self._index):
            raise InvalidOrderError(
                f"Order must contain each of the {len(self._index)} item ids exactly once (got {len(ids)} ids)."
            )
        self._order = tuple(ids)
        _logger.info("Order replaced (%d ids)", len(self._order))

    def replace_selection(self, ids: Iterable[int]) -> None:
        """Replace the selection.

        Raises
        ------
        InvalidSelectionError
            In strict mode, when any id does not name an item.
        """
        selected = frozenset(ids)
        if self._strict:
            missing = unknown_ids(sorted(selected), self._index)
            if missing:
                shown = ", ".join(str(item_id) for item_id in missing[:10])
                raise InvalidSelectionError(f"Unknown item ids in selection: {shown}.")
        self._selected = selected
        _logger.info("Selection replaced (%d ids)", len(self._selected))
