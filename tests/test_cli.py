"""Tests for gdconfig CLI entrypoints."""

from __future__ import annotations

import io
import json
import sys
from pathlib import Path
from types import SimpleNamespace

import pytest
from rich.console import Console

import gdconfig.main as main
from gdconfig.cli import actions as actions_module
from gdconfig.cli import dump as dump_module

PROJECT_TEXT = """config_version=5

[input]

fire={
"deadzone": 0.5,
"events": [Object(InputEventMouseButton,"device":-1,"position":Vector2(0, 0),"button_index":1,"double_click":true)
, Object(InputEventKey,"device":-1,"ctrl_pressed":1,"keycode":0,"physical_keycode":0,"unicode":97)
]
}
idle={
"deadzone": 0.2,
"events": []
}
"""


def _write(tmp_path: Path, name: str, text: str) -> Path:
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


def test_main_dispatches_dump_command(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Verify that `main` parses args and dispatches dump_command."""

    monkeypatch.setattr(main, "setup_logging", lambda *a, **k: None)

    captured: dict[str, object] = {}

    def fake_dump_command(args) -> int:
        captured["args"] = args
        return 0

    monkeypatch.setattr(main, "dump_command", fake_dump_command)

    argv = [
        "gdconfig",
        "--config",
        '{"encoding": "utf-8"}',
        "dump",
        str(tmp_path / "project.godot"),
        "--dialect",
        "project",
        "-o",
        str(tmp_path / "out.json"),
    ]
    monkeypatch.setattr(sys, "argv", argv)

    exit_code = main.main()

    assert exit_code == 0
    parsed = captured["args"]
    assert parsed.descriptor == str(tmp_path / "project.godot")
    assert parsed.dialect == "project"
    assert parsed.format == "json"
    assert parsed.config == '{"encoding": "utf-8"}'


def test_main_requires_command(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    """Ensure missing subcommands make the CLI print help and fail."""

    monkeypatch.setattr(main, "setup_logging", lambda *a, **k: None)
    monkeypatch.setattr(sys, "argv", ["gdconfig"])

    exit_code = main.main()

    assert exit_code == 1
    assert "descriptor parser" in capsys.readouterr().out


def test_dump_command_writes_json(tmp_path: Path) -> None:
    """The dump command serialises the parsed document."""
    descriptor = _write(tmp_path, "project.godot", PROJECT_TEXT)
    output_file = tmp_path / "out.json"
    args = SimpleNamespace(
        descriptor=str(descriptor),
        dialect=None,
        format="json",
        output=str(output_file),
        config=None,
    )

    assert dump_module.dump_command(args) == 0
    data = json.loads(output_file.read_text(encoding="utf-8"))
    assert data["config_version"] == 5
    assert sorted(data["input"]["actions"]) == ["fire", "idle"]


def test_dump_command_text_format(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Text output re-renders extension sections."""
    descriptor = _write(tmp_path, "rust.gdextension", '[icons]\nB="b.svg"\nA="a.svg"\n')
    args = SimpleNamespace(descriptor=str(descriptor), dialect="extension", format="text", output=None)

    assert dump_module.dump_command(args) == 0
    assert capsys.readouterr().out == '[icons]\nA="a.svg"\nB="b.svg"\n\n'


def test_dump_command_missing_file_fails(tmp_path: Path) -> None:
    """Unreadable descriptors give exit code 1."""
    args = SimpleNamespace(descriptor=str(tmp_path / "missing.godot"), dialect=None, output=None)
    assert dump_module.dump_command(args) == 1


def test_dump_command_invalid_config_fails(tmp_path: Path) -> None:
    """An invalid configuration gives exit code 1."""
    descriptor = _write(tmp_path, "project.godot", PROJECT_TEXT)
    args = SimpleNamespace(
        descriptor=str(descriptor),
        dialect=None,
        output=None,
        config='{"dropped_log_level": "LOUD"}',
    )
    assert dump_module.dump_command(args) == 1


def test_actions_command_lists_triggers(tmp_path: Path) -> None:
    """The actions table shows each action's resolved triggers."""
    descriptor = _write(tmp_path, "project.godot", PROJECT_TEXT)
    buffer = io.StringIO()
    console = Console(file=buffer, width=200, color_system=None)

    exit_code = actions_module.actions_command(SimpleNamespace(descriptor=str(descriptor)), console)

    assert exit_code == 0
    output = buffer.getvalue()
    assert "double_left_click, ctrl+a" in output
    assert "idle" in output
    assert output.index("fire") < output.index("idle")


def test_actions_command_without_input_section(tmp_path: Path) -> None:
    """A project without actions succeeds and prints nothing."""
    descriptor = _write(tmp_path, "project.godot", "config_version=5\n")
    buffer = io.StringIO()
    console = Console(file=buffer)

    assert actions_module.actions_command(SimpleNamespace(descriptor=str(descriptor)), console) == 0
    assert buffer.getvalue() == ""


def test_actions_command_missing_file_fails(tmp_path: Path) -> None:
    """Unreadable descriptors give exit code 1."""
    args = SimpleNamespace(descriptor=str(tmp_path / "project.godot"))
    assert actions_module.actions_command(args, Console(file=io.StringIO())) == 1
