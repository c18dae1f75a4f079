# taskdesk

This package contains a few small interactive programs for the terminal:

- **taskdesk-tasks** is a personal task manager with priorities. By default it keeps its tasks in `tasks.json`.
- **taskdesk-todo** is a simple to-do list. You can add, list, edit, delete and toggle items. By default it keeps its items in `todo.json`.
- **taskdesk-guess** asks you to guess a secret number between 1 and 100.
- **taskdesk-basics** prints the output of a few short examples: a greeting, arithmetic, constants and shadowing.

The package needs only the standard library.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Task manager

```
taskdesk-tasks [--file PATH]
```

The program shows a numbered menu. From it you can:

- add a task with a title, a description and a priority (1=Low, 2=Medium, 3=High);
- list all tasks, or only the pending ones;
- complete a task by its ID;
- delete a task by its ID;
- save the tasks to the file, or load them from it.

On start-up the program loads the file if it exists. When you choose Exit, it saves the tasks to the file. The file is `tasks.json` in the current directory unless you give `--file`.

You can also use the task manager from code:

```python
from taskdesk.tasks import Priority, TaskManager, TaskNotFoundError, load_manager

manager = TaskManager()
task = manager.add_task("Write report", "Quarterly summary", Priority.HIGH)
manager.complete_task(task.id)
print(task.display())   # ID: 1 | ✓ | [High] Write report - Quarterly summary
manager.save_to_file("tasks.json")

restored = load_manager("tasks.json")
try:
    restored.delete_task(42)
except TaskNotFoundError as err:
    print(err)           # Task with ID 42 not found
```

`list_tasks(show_completed)` returns the tasks in the order they were added. If `show_completed` is false, completed tasks are left out. `Priority.from_choice("1")` turns a menu choice into a priority. Any other choice raises `ValueError`. `load_manager` raises `ValueError` when the file is not a valid saved manager.

## To-do list

```
taskdesk-todo [--file PATH]
```

Choose an action from the menu by its number. Pressing Enter on its own picks the highlighted entry. Every change is written to the file straight away. The file is `todo.json` in the current directory unless you give `--file`. If the file is missing or does not hold a valid list of tasks, the program starts with an empty list.

You can also use the to-do list from code:

```python
from taskdesk.todo import TodoList

todo = TodoList(path="todo.json")
todo.add("Buy milk")
todo.toggle(0)
print("\n".join(todo.listing()))   # [x] 1: Buy milk
```

`add` and `edit` raise `ValueError` for an empty description. `edit`, `delete` and `toggle` raise `IndexError` for a position that has no task. The module-level functions `load_tasks(path)` and `save_tasks(tasks, path)` read and write the same JSON file.

## Guessing game

```
taskdesk-guess
```

Type a whole number and press Enter. The game answers "Too small!" or "Too big!" until you find the number, and then it says "You win!". Any input that is not a number is ignored. If the input ends before you find the number, the command exits with status 1.

From code, `taskdesk.guessing.play(secret, lines, out)` runs one game against any iterable of input lines. It returns the number of valid guesses.

## Basics

```
taskdesk-basics
```

This prints the results of the small examples in `taskdesk.basics`: `add(3, 4)`, `multiply(6, 7)`, `greet("Rustacean")`, the constants `MAX_POINTS`, `PI` and `SECONDS_IN_MINUTE`, and the values that `shadowing_steps` produces.