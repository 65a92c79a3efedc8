# tests/test_cli.py

from __future__ import annotations

import json
import os
from pathlib import Path

import pytest

from taskbot.cli import main
from taskbot.persistence import load
from taskbot.schema import StorageConfig


@pytest.fixture()
def run(config: StorageConfig):
    """Call the CLI against the test task file."""

    def _run(*argv: str) -> int:
        return main([*argv, "--dir", config.directory, "--file", config.filename])

    return _run


def test_add_done_delete_flow(
    run, config: StorageConfig, capsys: pytest.CaptureFixture[str]
) -> None:
    assert run("todo", "read book") == 0
    assert run("deadline", "submit report", "--by", "2024-05-01 2359") == 0
    assert run("event", "team dinner", "--at", "2024-06-01 1800-2000") == 0
    out = capsys.readouterr().out
    assert "Added: 1. [T][ ] read book" in out
    assert "Now 3 task(s) in the list" in out

    assert run("done", "2") == 0
    assert "2. [D][X] submit report (by: 2024-05-01 2359)" in capsys.readouterr().out

    assert run("delete", "1") == 0
    assert "Deleted: 1. [T][ ] read book" in capsys.readouterr().out

    store = load(config)
    assert [(t.description, t.done) for t in store] == [
        ("submit report", True),
        ("team dinner", False),
    ]


def test_list_and_json(run, capsys: pytest.CaptureFixture[str]) -> None:
    assert run("list") == 0
    assert "No tasks yet" in capsys.readouterr().out

    run("todo", "read book")
    capsys.readouterr()

    assert run("list", "--json") == 0
    data = json.loads(capsys.readouterr().out)
    assert data == [
        {"index": 1, "kind": "todo", "description": "read book", "done": False, "time": None}
    ]


def test_find(run, capsys: pytest.CaptureFixture[str]) -> None:
    run("deadline", "evening thing", "--by", "2024-06-01 1800")
    run("event", "morning thing", "--at", "2024-06-01 0900")
    capsys.readouterr()

    assert run("find", "2024-06-01", "--json") == 0
    assert json.loads(capsys.readouterr().out) == [1, 2]

    assert run("find", "2024-06-01 1800", "--json") == 0
    assert json.loads(capsys.readouterr().out) == [1]

    assert run("find", "2024-06-01 1800") == 0
    out = capsys.readouterr().out
    assert "1. [D][ ] evening thing" in out
    assert "morning thing" not in out


def test_errors_return_one(run, capsys: pytest.CaptureFixture[str]) -> None:
    assert run("done", "1") == 1
    assert "does not exist" in capsys.readouterr().out

    assert run("find", "someday") == 1
    assert "Not a date" in capsys.readouterr().out

    assert run("deadline", "report", "--by", "   ") == 1
    assert "Invalid task" in capsys.readouterr().out


def test_path(run, config: StorageConfig, capsys: pytest.CaptureFixture[str]) -> None:
    assert run("path") == 0
    assert capsys.readouterr().out.strip() == os.path.abspath(config.path)
    assert not Path(config.path).exists()


def test_no_command_prints_help(capsys: pytest.CaptureFixture[str]) -> None:
    assert main([]) == 1
    assert "usage: taskbot" in capsys.readouterr().out


def test_undecodable_task_file_returns_one(
    run, config: StorageConfig, capsys: pytest.CaptureFixture[str]
) -> None:
    Path(config.directory).mkdir(parents=True, exist_ok=True)
    Path(config.path).write_bytes(b"T0\n\xff\xfe\n\n")

    assert run("list") == 1
    assert "Cannot read task file" in capsys.readouterr().out
