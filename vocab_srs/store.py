"""Item store boundary for vocab_srs.

The scheduler never owns persistence. This module defines the contract a
store has to meet, an in-memory implementation for tests and
snapshot-based callers, and the glue that runs one review answer through
a store.
"""

from __future__ import annotations

from datetime import datetime
from typing import Iterable, Optional, Protocol, Tuple, runtime_checkable

from vocab_srs.logging import get_logger
from vocab_srs.schemas import Familiarity, ItemUpdate, VocabularyItem
from vocab_srs.sm2.scheduler import process_review

__all__ = [
    "ItemStore",
    "InMemoryItemStore",
    "record_review",
]

logger = get_logger(__name__)


@runtime_checkable
class ItemStore(Protocol):
    """Contract for the learner's vocabulary store.

    Implementations are responsible for at-most-one-writer-per-item
    consistency if they are shared across processes or devices.
    """

    def get_items(
        self,
        familiarity: Optional[Familiarity] = None,
        container_id: Optional[int] = None,
    ) -> list[VocabularyItem]:
        """List items, optionally filtered by familiarity and/or container.

        Args:
            familiarity: Only items at this level
            container_id: Only items met in this container

        Returns:
            Snapshot list of items
        """
        ...

    def get_item(self, item_id: str) -> VocabularyItem:
        """Get one item by id.

        Raises:
            KeyError: if no item has this id
        """
        ...

    def get_by_root(self, root: str) -> list[VocabularyItem]:
        """List all items sharing a lexical root."""
        ...

    def update_item(self, item_id: str, update: ItemUpdate) -> VocabularyItem:
        """Apply a partial update.

        Args:
            item_id: Item to update
            update: Fields to overwrite

        Returns:
            The stored item after the update

        Raises:
            KeyError: if no item has this id
        """
        ...


class InMemoryItemStore:
    """Dict-backed ItemStore. Insertion order is preserved in every listing."""

    def __init__(self, items: Optional[Iterable[VocabularyItem]] = None) -> None:
        self._items: dict[str, VocabularyItem] = {}
        for item in items or ():
            self.add_item(item)

    def add_item(self, item: VocabularyItem) -> None:
        if item.item_id in self._items:
            raise ValueError(f"Duplicate item_id: {item.item_id}")
        self._items[item.item_id] = item

    def get_item(self, item_id: str) -> VocabularyItem:
        try:
            return self._items[item_id]
        except KeyError:
            raise KeyError(f"Unknown item_id: {item_id}") from None

    def get_items(
        self,
        familiarity: Optional[Familiarity] = None,
        container_id: Optional[int] = None,
    ) -> list[VocabularyItem]:
        items = list(self._items.values())
        if familiarity is not None:
            items = [item for item in items if item.familiarity == familiarity]
        if container_id is not None:
            items = [item for item in items if item.seen_in_container(container_id)]
        return items

    def get_by_root(self, root: str) -> list[VocabularyItem]:
        return [item for item in self._items.values() if item.root == root]

    def update_item(self, item_id: str, update: ItemUpdate) -> VocabularyItem:
        updated = self.get_item(item_id).apply(update)
        self._items[item_id] = updated
        return updated

    def __len__(self) -> int:
        return len(self._items)


def record_review(
    store: ItemStore,
    item_id: str,
    quality: int,
    now: Optional[datetime] = None,
) -> Tuple[VocabularyItem, dict]:
    """Run one review answer through a store.

    Fetches the item and its root family, computes the update and writes
    it back.

    Returns:
        Tuple of (stored_item, event_data_dict)
    """
    item = store.get_item(item_id)

    family = store.get_by_root(item.root) if item.root else None
    update, event_data = process_review(item, quality, family=family, now=now)
    stored = store.update_item(item_id, update)

    logger.info(
        "review_recorded",
        item_id=item_id,
        quality=event_data["quality"],
        familiarity=stored.familiarity.value,
        next_review_date=stored.next_review_date.isoformat(),
    )
    return stored, event_data
