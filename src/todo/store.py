from __future__ import annotations

import logging
from typing import Callable, Iterable, Iterator, List, Optional, Tuple

from .models import TodoItem

logger = logging.getLogger(__name__)

Snapshot = Tuple[TodoItem, ...]
Observer = Callable[[Snapshot], None]

SEED_NAMES = ("item 1", "item 2", "item 3")


def default_seed() -> list[TodoItem]:
    return [TodoItem.create(name) for name in SEED_NAMES]


class TodoStore:
    """In-memory ordered list of todos. The only place todos are mutated.

    Observers registered with :meth:`subscribe` receive a snapshot of the
    sequence after every successful mutation.
    """

    def __init__(self, items: Optional[Iterable[TodoItem]] = None):
        self._items: List[TodoItem] = list(items) if items is not None else []
        self._observers: List[Observer] = []

    @classmethod
    def initialize(cls, seed: Optional[Iterable[TodoItem]] = None) -> "TodoStore":
        """Create a store seeded with the default items (or ``seed``)."""
        store = cls(default_seed() if seed is None else seed)
        logger.debug("Initialized todo store with %d items", len(store))
        return store

    # --- read access -------------------------------------------------

    @property
    def items(self) -> Snapshot:
        return tuple(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[TodoItem]:
        return iter(self.items)

    def __getitem__(self, index: int) -> TodoItem:
        return self._items[index]

    # --- subscription ------------------------------------------------

    def subscribe(self, observer: Observer) -> Callable[[], None]:
        """Register ``observer``; the returned callable removes it again."""
        self._observers.append(observer)

        def unsubscribe() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return unsubscribe

    def _notify(self) -> None:
        snapshot = self.items
        for observer in list(self._observers):
            observer(snapshot)

    # --- mutations ---------------------------------------------------

    def append(self, item: TodoItem) -> TodoItem:
        self._items.append(item)
        logger.debug("Appended todo %s (%r)", item.id, item.name)
        self._notify()
        return item

    def update(self, item: TodoItem) -> Optional[TodoItem]:
        """Replace the stored todo that has ``item.id``.

        Returns the stored todo, or None when no todo has that id. In that
        case nothing changes and observers are not notified.
        """
        for index, current in enumerate(self._items):
            if current.id == item.id:
                updated = current.with_values_of(item)
                self._items[index] = updated
                logger.debug("Updated todo %s at position %d", item.id, index)
                self._notify()
                return updated
        logger.debug("Update ignored, todo %s not found", item.id)
        return None

    def move(self, from_indices: Iterable[int], to_index: int) -> None:
        """Move the todos at ``from_indices`` as a block before ``to_index``.

        ``to_index`` is a position in the sequence after the moved todos
        have been taken out.
        """
        positions = self._checked_positions(from_indices)
        if not positions:
            return
        selected = set(positions)
        moved = [self._items[i] for i in positions]
        remaining = [item for i, item in enumerate(self._items) if i not in selected]
        if not 0 <= to_index <= len(remaining):
            raise IndexError(f"destination index {to_index} out of range")
        self._items = remaining[:to_index] + moved + remaining[to_index:]
        logger.debug("Moved positions %s to %d", positions, to_index)
        self._notify()

    def delete(self, indices: Iterable[int]) -> list[TodoItem]:
        """Remove the todos at ``indices`` all at once and return them."""
        positions = self._checked_positions(indices)
        if not positions:
            return []
        selected = set(positions)
        removed = [self._items[i] for i in positions]
        self._items = [item for i, item in enumerate(self._items) if i not in selected]
        logger.debug("Deleted positions %s", positions)
        self._notify()
        return removed

    def _checked_positions(self, indices: Iterable[int]) -> list[int]:
        positions = sorted(set(indices))
        for index in positions:
            if not 0 <= index < len(self._items):
                raise IndexError(f"todo index {index} out of range")
        return positions
