from __future__ import annotations

import importlib

import pytest


def test_console_entrypoint_registers_planner_commands() -> None:
    pytest.importorskip("typer")

    module = importlib.import_module("longterm_planner.main")

    names = {command.name or command.callback.__name__ for command in module.app.registered_commands}
    assert names == {"start", "plan", "replay"}
