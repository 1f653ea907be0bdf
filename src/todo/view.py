"""Text presentation of the todo store: list rows and edit drafts."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from typing import Any, Callable, Dict, Optional

from .models import TodoItem
from .schemas import TodoSchema
from .store import Snapshot, TodoStore

logger = logging.getLogger(__name__)

LIST_TITLE = "Todo List"


def format_todo_row(todo: TodoItem, index: Optional[int] = None) -> str:
    """Format one todo as a list row."""
    mark = "[x]" if todo.completed else "[ ]"
    row = f"{mark} {todo.name} | {todo.priority}"
    if index is not None:
        row = f"{index}. {row}"
    return row


def format_todo_json(todo: TodoItem) -> Dict[str, Any]:
    return TodoSchema.model_validate(asdict(todo)).model_dump()


@dataclass
class TodoDraft:
    """Uncommitted copy of a todo being edited."""

    id: str
    name: str
    completed: bool
    priority: str

    @classmethod
    def from_item(cls, todo: TodoItem) -> "TodoDraft":
        return cls(id=todo.id, name=todo.name, completed=todo.completed, priority=todo.priority)

    def to_item(self) -> TodoItem:
        return TodoItem(id=self.id, name=self.name, completed=self.completed, priority=self.priority)


class TodoListView:
    """Keeps a rendered list in sync with a :class:`TodoStore`.

    The view subscribes on construction; every store notification replaces
    the snapshot it renders from and, when given, calls ``on_change`` with
    the freshly rendered list.
    """

    def __init__(
        self,
        store: TodoStore,
        output_format: str = "text",
        on_change: Optional[Callable[[str], None]] = None,
    ):
        self.store = store
        self.output_format = output_format
        self.on_change = on_change
        self.snapshot: Snapshot = store.items
        self._unsubscribe: Optional[Callable[[], None]] = store.subscribe(self._refresh)

    def _refresh(self, snapshot: Snapshot) -> None:
        self.snapshot = snapshot
        logger.debug("List view refreshed with %d items", len(snapshot))
        if self.on_change is not None:
            self.on_change(self.render())

    def render(self, output_format: Optional[str] = None) -> str:
        output_format = output_format or self.output_format
        if output_format == "json":
            return json.dumps([format_todo_json(todo) for todo in self.snapshot], ensure_ascii=False)
        lines = [LIST_TITLE]
        if not self.snapshot:
            lines.append("(no todos)")
        lines.extend(format_todo_row(todo, index) for index, todo in enumerate(self.snapshot))
        return "\n".join(lines)

    def begin_edit(self, index: int) -> TodoDraft:
        """Start editing the todo shown at ``index``."""
        if not 0 <= index < len(self.snapshot):
            raise IndexError(f"todo index {index} out of range")
        return TodoDraft.from_item(self.snapshot[index])

    def save(self, draft: TodoDraft) -> bool:
        """Commit ``draft`` to the store. False when its todo no longer exists."""
        return self.store.update(draft.to_item()) is not None

    def close(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None
