"""TodoItem tests"""

import dataclasses

import pytest

from src.todo.models import TodoItem, new_todo_id


def test_create_generates_unique_ids():
    first = TodoItem.create("item")
    second = TodoItem.create("item")
    assert first.id != second.id
    assert first.completed is False
    assert first.priority == "P1"


def test_new_todo_id_is_uuid_string():
    todo_id = new_todo_id()
    assert isinstance(todo_id, str)
    assert len(todo_id) == 36


def test_todo_item_is_frozen():
    todo = TodoItem.create("item")
    with pytest.raises(dataclasses.FrozenInstanceError):
        todo.name = "changed"  # type: ignore[misc]


def test_replace_keeps_id():
    todo = TodoItem.create("item")
    changed = todo.replace(name="Buy milk", completed=True)
    assert changed.id == todo.id
    assert changed.name == "Buy milk"
    assert changed.completed is True
    assert todo.name == "item"


def test_replace_rejects_id_change():
    todo = TodoItem.create("item")
    with pytest.raises(TypeError):
        todo.replace(id="other")


def test_with_values_of_copies_fields_but_not_id():
    todo = TodoItem.create("item")
    other = TodoItem(id="other-id", name="", completed=True, priority="P3")
    merged = todo.with_values_of(other)
    assert merged.id == todo.id
    assert merged.name == ""
    assert merged.completed is True
    assert merged.priority == "P3"
