import io
import json

import pytest

from taskdesk.tasks import (
    Priority,
    Task,
    TaskManager,
    TaskNotFoundError,
    load_manager,
    main,
)


def test_priority_from_choice():
    assert Priority.from_choice("1") is Priority.LOW
    assert Priority.from_choice("2") is Priority.MEDIUM
    assert Priority.from_choice("3") is Priority.HIGH


@pytest.mark.parametrize("choice", ["0", "4", "", "high"])
def test_priority_from_choice_invalid(choice):
    with pytest.raises(ValueError):
        Priority.from_choice(choice)


def test_priority_str():
    assert str(Priority.from_choice("1")) == "Low"
    assert str(Priority.from_choice("2")) == "Medium"
    assert str(Priority.from_choice("3")) == "High"


def test_task_display_and_complete():
    task = Task(1, "Write", "docs", Priority.HIGH)
    assert task.display() == "ID: 1 | ✗ | [High] Write - docs"
    task.mark_complete()
    assert task.completed is True
    assert task.display() == "ID: 1 | ✓ | [High] Write - docs"


def test_add_task_assigns_sequential_ids():
    manager = TaskManager()
    first = manager.add_task("a", "x", Priority.LOW)
    second = manager.add_task("b", "y", Priority.HIGH)
    assert (first.id, second.id) == (1, 2)
    assert manager.next_id == 3
    assert manager.tasks[2].title == "b"
    assert first.completed is False


def test_list_tasks_filters_completed():
    manager = TaskManager()
    manager.add_task("a", "x", Priority.LOW)
    manager.add_task("b", "y", Priority.LOW)
    manager.complete_task(1)
    assert [t.id for t in manager.list_tasks(True)] == [1, 2]
    assert [t.id for t in manager.list_tasks(False)] == [2]


def test_complete_missing_task_raises():
    manager = TaskManager()
    with pytest.raises(TaskNotFoundError) as info:
        manager.complete_task(9)
    assert str(info.value) == "Task with ID 9 not found"


def test_delete_task():
    manager = TaskManager()
    manager.add_task("a", "x", Priority.LOW)
    removed = manager.delete_task(1)
    assert removed.title == "a"
    assert manager.tasks == {}
    with pytest.raises(TaskNotFoundError):
        manager.delete_task(1)


def test_ids_not_reused_after_delete():
    manager = TaskManager()
    manager.add_task("a", "x", Priority.LOW)
    manager.delete_task(1)
    assert manager.add_task("b", "y", Priority.LOW).id == 2


def test_to_dict_format():
    manager = TaskManager()
    manager.add_task("a", "x", Priority.HIGH)
    data = manager.to_dict()
    assert data["next_id"] == 2
    assert data["tasks"]["1"] == {
        "id": 1,
        "title": "a",
        "description": "x",
        "completed": False,
        "priority": "High",
    }


def test_save_and_load_round_trip(tmp_path):
    path = tmp_path / "tasks.json"
    manager = TaskManager()
    manager.add_task("a", "x", Priority.LOW)
    manager.add_task("b", "y", Priority.MEDIUM)
    manager.complete_task(2)
    manager.save_to_file(path)
    loaded = load_manager(path)
    assert loaded == manager
    assert json.loads(path.read_text(encoding="utf-8")) == manager.to_dict()


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(OSError):
        load_manager(tmp_path / "absent.json")


@pytest.mark.parametrize(
    "content",
    [
        "not json",
        "[]",
        '{"tasks": {}}',
        '{"tasks": {"1": {"id": 1}}, "next_id": 2}',
        '{"tasks": {"x": {"id": 1, "title": "a", "description": "b", '
        '"completed": false, "priority": "Low"}}, "next_id": 2}',
        '{"tasks": {"1": {"id": 1, "title": "a", "description": "b", '
        '"completed": false, "priority": "Urgent"}}, "next_id": 2}',
    ],
)
def test_load_invalid_content_raises(tmp_path, content):
    path = tmp_path / "tasks.json"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(ValueError):
        load_manager(path)


def test_main_add_and_exit_saves(tmp_path, monkeypatch, capsys):
    path = tmp_path / "tasks.json"
    monkeypatch.setattr("sys.stdin", io.StringIO("1\nTitle\nDesc\n9\n3\n8\n"))
    assert main(["--file", str(path)]) == 0
    out = capsys.readouterr().out
    assert "Invalid input! Please enter 1, 2, or 3." in out
    assert "Task added with ID: 1" in out
    assert "Goodbye!" in out
    loaded = load_manager(path)
    assert loaded.tasks[1].title == "Title"
    assert loaded.tasks[1].priority is Priority.HIGH


def test_main_loads_and_completes(tmp_path, monkeypatch, capsys):
    path = tmp_path / "tasks.json"
    manager = TaskManager()
    manager.add_task("a", "x", Priority.LOW)
    manager.save_to_file(path)
    monkeypatch.setattr("sys.stdin", io.StringIO("4\nabc\n4\n5\n4\n1\n8\n"))
    assert main(["--file", str(path)]) == 0
    out = capsys.readouterr().out
    assert f"Loaded existing tasks from {path}" in out
    assert "Invalid ID format!" in out
    assert "Error: Task with ID 5 not found" in out
    assert "Task 1 marked as complete!" in out
    assert load_manager(path).tasks[1].completed is True


def test_main_invalid_choice(tmp_path, monkeypatch, capsys):
    path = tmp_path / "tasks.json"
    monkeypatch.setattr("sys.stdin", io.StringIO("2\nzz\n8\n"))
    assert main(["--file", str(path)]) == 0
    out = capsys.readouterr().out
    assert "No tasks found!" in out
    assert "Invalid choice! Please enter a number from 1-8." in out