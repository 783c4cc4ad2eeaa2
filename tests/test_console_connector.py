# tests/test_console_connector.py

from __future__ import annotations

import builtins

from tasknest.connectors import console_connector


def _feed(monkeypatch, lines: list[str]) -> None:
    it = iter(lines)

    def fake_input(prompt: str = "") -> str:
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    monkeypatch.setattr(builtins, "input", fake_input)


def test_console_loop_add_delete_exit(state, monkeypatch, capsys) -> None:
    # The task id is only known after the add, so the delete line is built from the store.
    lines = iter(["Buy milk", "/list all"])

    def fake_input(prompt: str = "") -> str:
        try:
            return next(lines)
        except StopIteration:
            pass
        if prompt.endswith("[y/N] "):
            return "y"
        if state.task_store.count():
            return f"/delete {state.task_store.tasks[0].id}"
        return "/exit"

    monkeypatch.setattr(builtins, "input", fake_input)
    console_connector.run_console_loop(state)

    out = capsys.readouterr().out
    assert "** Task added! **" in out
    assert "** Task deleted! **" in out
    assert state.task_store.count() == 0


def test_console_loop_stops_on_eof(state, monkeypatch, capsys) -> None:
    _feed(monkeypatch, ["", "/count"])
    console_connector.run_console_loop(state)
    assert "0 tasks" in capsys.readouterr().out


def test_ask_yes_no(monkeypatch) -> None:
    _feed(monkeypatch, ["ya", "n"])
    assert console_connector.ask_yes_no("Delete?") is True
    assert console_connector.ask_yes_no("Delete?") is False
    # EOF answers "no".
    assert console_connector.ask_yes_no("Delete?") is False
