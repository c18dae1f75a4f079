"""Personal task manager with priorities and JSON persistence."""

from __future__ import annotations

import argparse
import json
import re
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any

DEFAULT_FILE = "tasks.json"
_UNSIGNED = re.compile(r"\+?[0-9]+")
_U32_MAX = 2**32 - 1


class TaskNotFoundError(KeyError):
    """Raised when no task has the requested id."""

    def __init__(self, task_id: int) -> None:
        super().__init__(task_id)
        self.task_id = task_id

    def __str__(self) -> str:
        return f"Task with ID {self.task_id} not found"


class Priority(Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_choice(cls, choice: str) -> Priority:
        """Map a menu choice "1", "2" or "3" to a priority."""
        choices = {"1": cls.LOW, "2": cls.MEDIUM, "3": cls.HIGH}
        try:
            return choices[choice]
        except KeyError:
            raise ValueError(f"invalid priority choice: {choice!r}") from None


@dataclass
class Task:
    id: int
    title: str
    description: str
    priority: Priority
    completed: bool = False

    def mark_complete(self) -> None:
        self.completed = True

    def display(self) -> str:
        """Return the one-line listing of this task."""
        status = "✓" if self.completed else "✗"
        return f"ID: {self.id} | {status} | [{self.priority}] {self.title} - {self.description}"


@dataclass
class TaskManager:
    tasks: dict[int, Task] = field(default_factory=dict)
    next_id: int = 1

    def add_task(self, title: str, description: str, priority: Priority) -> Task:
        """Add a task under the next free id and return it."""
        task = Task(self.next_id, title, description, priority)
        self.tasks[task.id] = task
        self.next_id += 1
        return task

    def list_tasks(self, show_completed: bool) -> list[Task]:
        """Return the tasks, leaving out completed ones unless ``show_completed``."""
        return [t for t in self.tasks.values() if show_completed or not t.completed]

    def complete_task(self, task_id: int) -> Task:
        try:
            task = self.tasks[task_id]
        except KeyError:
            raise TaskNotFoundError(task_id) from None
        task.mark_complete()
        return task

    def delete_task(self, task_id: int) -> Task:
        try:
            return self.tasks.pop(task_id)
        except KeyError:
            raise TaskNotFoundError(task_id) from None

    def save_to_file(self, filename: str | Path) -> None:
        Path(filename).write_text(json.dumps(self.to_dict(), indent=2, ensure_ascii=False), encoding="utf-8")

    def to_dict(self) -> dict[str, Any]:
        return {
            "tasks": {
                str(task_id): {
                    "id": task.id,
                    "title": task.title,
                    "description": task.description,
                    "completed": task.completed,
                    "priority": task.priority.value,
                }
                for task_id, task in self.tasks.items()
            },
            "next_id": self.next_id,
        }


def _require(value: Any, kind: type, name: str) -> Any:
    if not isinstance(value, kind) or (kind is int and isinstance(value, bool)):
        raise ValueError(f"field {name!r} must be {kind.__name__}")
    return value


def _task_from_dict(data: Any) -> Task:
    if not isinstance(data, dict):
        raise ValueError("task entry must be an object")
    try:
        priority = Priority(data["priority"])
        return Task(
            id=_require(data["id"], int, "id"),
            title=_require(data["title"], str, "title"),
            description=_require(data["description"], str, "description"),
            completed=_require(data["completed"], bool, "completed"),
            priority=priority,
        )
    except KeyError as exc:
        raise ValueError(f"missing field {exc.args[0]!r}") from None


def load_manager(filename: str | Path) -> TaskManager:
    """Load a manager from a JSON file written by ``save_to_file``."""
    data = json.loads(Path(filename).read_text(encoding="utf-8"))
    if not isinstance(data, dict) or not isinstance(data.get("tasks"), dict):
        raise ValueError("expected an object with a 'tasks' mapping")
    if "next_id" not in data:
        raise ValueError("missing field 'next_id'")
    tasks: dict[int, Task] = {}
    for key, entry in data["tasks"].items():
        if not _UNSIGNED.fullmatch(key):
            raise ValueError(f"invalid task key {key!r}")
        tasks[int(key)] = _task_from_dict(entry)
    return TaskManager(tasks=tasks, next_id=_require(data["next_id"], int, "next_id"))


def _parse_id(text: str) -> int:
    if not _UNSIGNED.fullmatch(text) or int(text) > _U32_MAX:
        raise ValueError(text)
    return int(text)


def _ask(prompt: str) -> str:
    return input(prompt).strip()


def _ask_priority() -> Priority:
    while True:
        print("Priority levels: 1=Low, 2=Medium, 3=High")
        try:
            return Priority.from_choice(_ask("Enter priority (1-3): "))
        except ValueError:
            print("Invalid input! Please enter 1, 2, or 3.")


def _print_tasks(manager: TaskManager, show_completed: bool) -> None:
    if not manager.tasks:
        print("No tasks found!")
        return
    print("\n--- Your Tasks ---")
    for task in manager.list_tasks(show_completed):
        print(task.display())
    print()


def _show_menu() -> None:
    print("\n=== Personal Task Manager ===")
    print("1. Add new task")
    print("2. List all tasks")
    print("3. List pending tasks only")
    print("4. Complete a task")
    print("5. Delete a task")
    print("6. Save tasks to file")
    print("7. Load tasks from file")
    print("8. Exit")
    print("===============================")


def _act_on_id(manager: TaskManager, prompt: str, action: str) -> None:
    try:
        task_id = _parse_id(_ask(prompt))
    except ValueError:
        print("Invalid ID format!")
        return
    try:
        if action == "complete":
            manager.complete_task(task_id)
            print(f"Task {task_id} marked as complete!")
        else:
            manager.delete_task(task_id)
            print(f"Task {task_id} deleted!")
    except TaskNotFoundError as exc:
        print(f"Error: {exc}")


def _save(manager: TaskManager, path: str) -> None:
    manager.save_to_file(path)
    print(f"Tasks saved to {path}")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive task manager."""
    parser = argparse.ArgumentParser(description="Personal task manager.")
    parser.add_argument("--file", default=DEFAULT_FILE, help="JSON file for saved tasks")
    save_file = parser.parse_args(argv).file

    manager = TaskManager()
    try:
        manager = load_manager(save_file)
        print(f"Loaded existing tasks from {save_file}")
    except (OSError, ValueError):
        pass

    while True:
        _show_menu()
        try:
            choice = _ask("Enter your choice (1-8): ")
            if choice == "1":
                title = _ask("Task title: ")
                description = _ask("Task description: ")
                task = manager.add_task(title, description, _ask_priority())
                print(f"Task added with ID: {task.id}")
            elif choice == "2":
                _print_tasks(manager, True)
            elif choice == "3":
                _print_tasks(manager, False)
            elif choice == "4":
                _print_tasks(manager, False)
                _act_on_id(manager, "Enter task ID to complete: ", "complete")
            elif choice == "5":
                _print_tasks(manager, True)
                _act_on_id(manager, "Enter task ID to delete: ", "delete")
            elif choice == "6":
                try:
                    _save(manager, save_file)
                except OSError as exc:
                    print(f"Error saving file: {exc}")
            elif choice == "7":
                try:
                    manager = load_manager(save_file)
                    print("Tasks loaded successfully!")
                except (OSError, ValueError) as exc:
                    print(f"Error loading file: {exc}")
            elif choice == "8":
                print("Saving tasks and exiting...")
                try:
                    _save(manager, save_file)
                except OSError:
                    pass
                print("Goodbye!")
                return 0
            else:
                print("Invalid choice! Please enter a number from 1-8.")
        except EOFError:
            return 0


if __name__ == "__main__":
    raise SystemExit(main())