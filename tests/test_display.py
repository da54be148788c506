# Copyright (c) 2025 iiPython

# Modules
import subprocess

import pytest

from m1switch import DisplayError
from m1switch.display import M1DDC

# Fixtures
@pytest.fixture
def commands(monkeypatch: pytest.MonkeyPatch) -> list:
    calls, results = [], []

    def run(command: list[str], **kwargs) -> subprocess.CompletedProcess:
        calls.append(command)
        returncode, stdout = results.pop(0)
        return subprocess.CompletedProcess(command, returncode, stdout if kwargs.get("stdout") else None)

    monkeypatch.setattr(subprocess, "run", run)
    return [calls, results]

# m1ddc wrapper
def test_get_input(commands) -> None:
    calls, results = commands
    results.append((0, "16\n"))

    assert M1DDC().get_input("UUID") == 16
    assert calls == [["m1ddc", "display", "UUID", "get", "input"]]

@pytest.mark.parametrize("result", [(1, ""), (0, ""), (0, "Could not read\n")])
def test_get_input_unusable(commands, result: tuple[int, str]) -> None:
    commands[1].append(result)

    with pytest.raises(DisplayError):
        M1DDC().get_input("UUID")

def test_set_input(commands) -> None:
    calls, results = commands
    results.append((0, None))

    M1DDC("/opt/bin/m1ddc").set_input("UUID", 15)
    assert calls == [["/opt/bin/m1ddc", "display", "UUID", "set", "input", "15"]]

def test_set_input_failure(commands) -> None:
    commands[1].append((5, None))

    with pytest.raises(DisplayError) as e:
        M1DDC().set_input("UUID", 15)

    assert e.value.code == 5

def test_list_displays(commands) -> None:
    commands[1].append((0, "[1] MPG 321URX\n\n[2] Built-in\n"))
    assert M1DDC().list_displays() == ["[1] MPG 321URX", "[2] Built-in"]

def test_available(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("shutil.which", lambda binary: None)
    assert M1DDC().available() is False

    monkeypatch.setattr("shutil.which", lambda binary: f"/usr/local/bin/{binary}")
    assert M1DDC().available() is True
