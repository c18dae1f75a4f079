"""Simple to-do list kept in a JSON file."""

from __future__ import annotations

import argparse
import json
import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

TODO_FILE = "todo.json"

_ACTIONS = (
    "Add Task",
    "List Tasks",
    "Edit Task",
    "Delete Task",
    "Toggle Task Done/Undone",
    "Exit",
)


@dataclass
class Task:
    description: str
    done: bool = False

    def label(self) -> str:
        """Return the task as shown in selection menus."""
        mark = "[x] " if self.done else "[ ] "
        return f"{mark}{self.description}"


def _task_from_json(entry: Any) -> Task:
    if not isinstance(entry, dict):
        raise ValueError("task entry must be an object")
    description = entry.get("description")
    done = entry.get("done")
    if not isinstance(description, str) or not isinstance(done, bool):
        raise ValueError("task entry needs a string 'description' and a boolean 'done'")
    return Task(description, done)


def load_tasks(path: str | Path = TODO_FILE) -> list[Task]:
    """Read tasks from ``path``; a missing or unreadable document gives an empty list."""
    path = Path(path)
    if not path.exists():
        return []
    with path.open(encoding="utf-8") as handle:
        try:
            data = json.load(handle)
        except (json.JSONDecodeError, UnicodeDecodeError):
            return []
    if not isinstance(data, list):
        return []
    try:
        return [_task_from_json(entry) for entry in data]
    except ValueError:
        return []


def save_tasks(tasks: Iterable[Task], path: str | Path = TODO_FILE) -> None:
    """Write ``tasks`` to ``path`` as pretty-printed JSON, replacing its contents."""
    payload = [{"description": t.description, "done": t.done} for t in tasks]
    Path(path).write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")


@dataclass
class TodoList:
    """A list of tasks that is saved to its file after every change."""

    tasks: list[Task] = field(default_factory=list)
    path: Path = field(default_factory=lambda: Path(TODO_FILE))

    def __post_init__(self) -> None:
        self.path = Path(self.path)

    def _task_at(self, index: int) -> Task:
        if not 0 <= index < len(self.tasks):
            raise IndexError(f"no task at position {index}")
        return self.tasks[index]

    def add(self, description: str) -> Task:
        """Append a new task; an empty description raises ValueError."""
        if not description.strip():
            raise ValueError("Task description cannot be empty.")
        task = Task(description)
        self.tasks.append(task)
        self.save()
        return task

    def edit(self, index: int, description: str) -> Task:
        """Replace the description of the task at ``index``."""
        task = self._task_at(index)
        if not description.strip():
            raise ValueError("Description cannot be empty.")
        task.description = description
        self.save()
        return task

    def delete(self, index: int) -> Task:
        """Remove and return the task at ``index``."""
        self._task_at(index)
        task = self.tasks.pop(index)
        self.save()
        return task

    def toggle(self, index: int) -> Task:
        """Flip the done state of the task at ``index``."""
        task = self._task_at(index)
        task.done = not task.done
        self.save()
        return task

    def listing(self) -> list[str]:
        """Return one numbered line per task."""
        return [
            f"{'[x]' if task.done else '[ ]'} {number}: {task.description}"
            for number, task in enumerate(self.tasks, start=1)
        ]

    def save(self) -> None:
        save_tasks(self.tasks, self.path)


def _select(prompt: str, items: Sequence[str], default: int = 0) -> int:
    """Ask the user to pick one of ``items``; blank input picks ``default``."""
    while True:
        print(f"{prompt}:")
        for number, item in enumerate(items, start=1):
            marker = ">" if number - 1 == default else " "
            print(f"{marker} {number}. {item}")
        answer = input(f"[{default + 1}]: ").strip()
        if not answer:
            return default
        if answer.isdigit() and 1 <= int(answer) <= len(items):
            return int(answer) - 1
        print(f"Please enter a number from 1 to {len(items)}.")


def _confirm(prompt: str) -> bool:
    """Ask a yes/no question that defaults to no."""
    while True:
        answer = input(f"{prompt}[y/N] ").strip().lower()
        if answer in ("", "n", "no"):
            return False
        if answer in ("y", "yes"):
            return True


def _run(todo: TodoList) -> None:
    while True:
        print("\n--- To-Do List ---\n")
        choice = _select("Choose an action", _ACTIONS)
        if choice == 0:
            try:
                todo.add(input("Enter the task description: "))
                print("Task added.")
            except ValueError as exc:
                print(exc)
        elif choice == 1:
            lines = todo.listing()
            if not lines:
                print("No tasks found.")
            for line in lines:
                print(line)
        elif choice == 5:
            print("Goodbye!")
            return
        else:
            verb = {2: "edit", 3: "delete", 4: "toggle"}[choice]
            if not todo.tasks:
                print(f"No tasks to {verb}.")
                continue
            labels = [task.label() for task in todo.tasks]
            if choice == 4:
                index = _select("Select task to toggle done/undone", labels)
                task = todo.toggle(index)
                state = "done" if task.done else "not done"
                print(f"Task '{task.description}' marked as {state}.")
                continue
            index = _select(f"Select task to {verb}", labels)
            if choice == 2:
                current = todo.tasks[index].description
                try:
                    todo.edit(index, input(f"Enter new description (was '{current}'): "))
                    print("Task updated.")
                except ValueError as exc:
                    print(exc)
            elif _confirm(
                f"Are you sure you want to delete task: '{todo.tasks[index].description}'? "
            ):
                todo.delete(index)
                print("Task deleted.")
            else:
                print("Deletion cancelled.")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive to-do list."""
    parser = argparse.ArgumentParser(description="Interactive to-do list.")
    parser.add_argument("--file", default=TODO_FILE, help="JSON file holding the tasks")
    path = Path(parser.parse_args(argv).file)
    try:
        todo = TodoList(load_tasks(path), path)
        _run(todo)
    except EOFError:
        return 0
    except OSError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())