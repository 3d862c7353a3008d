"""REPL de terminal sobre el TodoController.

Las filas se referencian por su número en la última tabla mostrada; el
número se traduce al id de la tarea antes de despachar el comando.
"""
import asyncio
import os
from collections.abc import Sequence
from dataclasses import replace

from dotenv import load_dotenv

from frontend_cli.commands import (
    AddTodo,
    Command,
    DeleteTodo,
    EditTodo,
    Refresh,
    ToggleTodo,
)
from frontend_cli.controller import ERROR, Notice, TodoController, ViewState
from frontend_cli.models import RemoteTodo
from frontend_cli.render import render_view
from frontend_cli.state_manager import TodoStateManager
from infrastructure.logging_config import setup_logging

HELP = """Commands:
  add <YYYY-MM-DD> <task>        add a task
  edit <n> <YYYY-MM-DD> <task>   change task text and due date of row n
  toggle <n>                     flip row n between pending and completed
  delete <n>                     delete row n
  refresh                        reload the list
  help                           show this help
  quit                           exit"""

QUIT_WORDS = {"q", "quit", "exit"}


class CommandSyntaxError(ValueError):
    pass


def _resolve_row(token: str, todos: Sequence[RemoteTodo]) -> str:
    try:
        index = int(token)
    except ValueError:
        raise CommandSyntaxError(f"Not a task number: {token}") from None
    if not 1 <= index <= len(todos):
        raise CommandSyntaxError(f"No task number {index}")
    return todos[index - 1].id


def parse_command(line: str, todos: Sequence[RemoteTodo]) -> Command:
    """
    Convierte una línea de entrada en un comando tipado.

    Raises:
        CommandSyntaxError: si la línea no corresponde a ningún comando.
    """
    parts = line.split()
    if not parts:
        raise CommandSyntaxError("Empty command")
    verb, args = parts[0].lower(), parts[1:]

    if verb in {"r", "refresh"}:
        return Refresh()
    if verb in {"a", "add"}:
        if len(args) < 2:
            raise CommandSyntaxError("Usage: add <YYYY-MM-DD> <task>")
        return AddTodo(task=" ".join(args[1:]), due_date=args[0])
    if verb in {"e", "edit"}:
        if len(args) < 3:
            raise CommandSyntaxError("Usage: edit <n> <YYYY-MM-DD> <task>")
        return EditTodo(
            id=_resolve_row(args[0], todos), task=" ".join(args[2:]), due_date=args[1]
        )
    if verb in {"t", "toggle"}:
        if len(args) != 1:
            raise CommandSyntaxError("Usage: toggle <n>")
        return ToggleTodo(id=_resolve_row(args[0], todos))
    if verb in {"d", "rm", "delete"}:
        if len(args) != 1:
            raise CommandSyntaxError("Usage: delete <n>")
        return DeleteTodo(id=_resolve_row(args[0], todos))
    raise CommandSyntaxError(f"Unknown command: {verb} (try 'help')")


async def run(base_url: str) -> None:
    async with TodoStateManager(base_url) as manager:
        controller = TodoController(manager)
        view = await controller.dispatch(Refresh())

        while True:
            print(render_view(view))
            # Notices are shown once.
            view = replace(view, notice=None)
            try:
                line = await asyncio.to_thread(input, "\n> ")
            except EOFError:
                break

            word = line.strip().lower()
            if word in QUIT_WORDS:
                break
            if word in {"h", "help", "?"}:
                print(HELP)
                continue
            try:
                command = parse_command(line, view.todos)
            except CommandSyntaxError as e:
                view = ViewState(todos=view.todos, notice=Notice(str(e), ERROR))
                continue
            view = await controller.dispatch(command)


def main() -> None:
    load_dotenv()
    setup_logging(os.getenv("LOG_LEVEL", "warning"))
    base_url = os.getenv("TODO_API_URL", "http://localhost:5000")
    try:
        asyncio.run(run(base_url))
    except KeyboardInterrupt:
        print()


if __name__ == "__main__":
    main()
