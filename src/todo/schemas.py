"""Pydantic schemas used to serialize todos."""

from __future__ import annotations

from pydantic import BaseModel, Field


class TodoSchema(BaseModel):
    """JSON representation of a todo item."""

    id: str = Field(..., description="Stable identifier of the todo")
    name: str = Field(..., description="Free-form label")
    completed: bool = Field(default=False, description="Completion flag")
    priority: str = Field(default="P1", description="Priority label such as P1")


class SeedItemSchema(BaseModel):
    """One entry of the ``seed`` section in the configuration file."""

    name: str
    completed: bool = False
    priority: str = "P1"
