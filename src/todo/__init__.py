"""In-memory todo list: store, presentation and console."""

from .models import TodoItem, new_todo_id
from .store import TodoStore
from .view import TodoDraft, TodoListView

__all__ = ["TodoItem", "TodoStore", "TodoDraft", "TodoListView", "new_todo_id"]
