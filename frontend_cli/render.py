"""Render de texto plano: funciones puras sobre un ViewState."""

from collections.abc import Sequence

from frontend_cli.controller import ERROR, Notice, ViewState
from frontend_cli.models import RemoteTodo

HEADERS = ("#", "Task", "Due date", "Status")
SEP = " | "
EMPTY_MESSAGE = "No tasks yet. Use: add <YYYY-MM-DD> <task>"


def _row(index: int, todo: RemoteTodo) -> tuple[str, ...]:
    return (str(index), todo.task, todo.due_date.date().isoformat(), todo.status)


def render_table(todos: Sequence[RemoteTodo]) -> str:
    if not todos:
        return EMPTY_MESSAGE

    rows = [HEADERS] + [_row(i, todo) for i, todo in enumerate(todos, start=1)]
    widths = [max(len(row[col]) for row in rows) for col in range(len(HEADERS))]

    def line(cells: Sequence[str]) -> str:
        return SEP.join(cell.ljust(width) for cell, width in zip(cells, widths)).rstrip()

    divider = "-+-".join("-" * width for width in widths)
    return "\n".join([line(rows[0]), divider] + [line(row) for row in rows[1:]])


def render_notice(notice: Notice) -> str:
    tag = "ERROR" if notice.level == ERROR else "OK"
    return f"[{tag}] {notice.message}"


def render_view(view: ViewState) -> str:
    parts = [render_table(view.todos)]
    if view.notice is not None:
        parts.append(render_notice(view.notice))
    return "\n\n".join(parts)
