"""Acciones de la interfaz, independientes de cómo se capturan."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Refresh:
    pass


@dataclass(frozen=True, slots=True)
class AddTodo:
    task: str
    due_date: str


@dataclass(frozen=True, slots=True)
class EditTodo:
    id: str
    task: str
    due_date: str


@dataclass(frozen=True, slots=True)
class ToggleTodo:
    id: str


@dataclass(frozen=True, slots=True)
class DeleteTodo:
    id: str


Command = Refresh | AddTodo | EditTodo | ToggleTodo | DeleteTodo
