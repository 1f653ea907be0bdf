from __future__ import annotations

import uuid
from dataclasses import dataclass, replace

DEFAULT_PRIORITY = "P1"


def new_todo_id() -> str:
    """Return a fresh random identifier for a todo item."""
    return str(uuid.uuid4())


@dataclass(frozen=True, slots=True)
class TodoItem:
    """A single todo entry. Changes are made by building a new value."""

    id: str
    name: str
    completed: bool = False
    priority: str = DEFAULT_PRIORITY

    @classmethod
    def create(
        cls,
        name: str,
        completed: bool = False,
        priority: str = DEFAULT_PRIORITY,
    ) -> "TodoItem":
        return cls(id=new_todo_id(), name=name, completed=completed, priority=priority)

    def replace(self, **changes) -> "TodoItem":
        if "id" in changes:
            raise TypeError("id of a TodoItem cannot be changed")
        return replace(self, **changes)

    def with_values_of(self, other: "TodoItem") -> "TodoItem":
        """Copy name/completed/priority from ``other``, keeping this id."""
        return replace(
            self,
            name=other.name,
            completed=other.completed,
            priority=other.priority,
        )
