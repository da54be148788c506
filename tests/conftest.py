# Copyright (c) 2025 iiPython

# Modules
from io import StringIO
from pathlib import Path

import pytest
from rich.console import Console

from m1switch import DisplayError
from m1switch.config import Configuration
from m1switch.controller import Controller
from m1switch.display import DisplayControl

# Scripted display control
class FakeDisplay(DisplayControl):
    def __init__(self, current: int | None = None, set_code: int = 0, installed: bool = True, list_code: int = 0) -> None:
        self.current, self.set_code, self.installed, self.list_code = current, set_code, installed, list_code
        self.calls = []

    def available(self) -> bool:
        return self.installed

    def list_displays(self) -> list[str]:
        self.calls.append(("list",))
        if self.list_code != 0:
            raise DisplayError(self.list_code)

        return ["[1] MPG 321URX QD-OLED (C85F15D4-1755-408A-A7A6-E183AAA7D23C)", "[2] Built-in display"]

    def get_input(self, display_id: str) -> int:
        self.calls.append(("get", display_id))
        if self.current is None:
            raise DisplayError(1)

        return self.current

    def set_input(self, display_id: str, code: int) -> None:
        self.calls.append(("set", display_id, code))
        if self.set_code != 0:
            raise DisplayError(self.set_code)

    @property
    def writes(self) -> list[int]:
        return [call[2] for call in self.calls if call[0] == "set"]

@pytest.fixture
def state_file(tmp_path: Path) -> Path:
    return tmp_path / "monitor-input-state"

@pytest.fixture
def config(tmp_path: Path, state_file: Path) -> Configuration:
    return Configuration(tmp_path / "missing.json", state_file = str(state_file))

@pytest.fixture
def console() -> Console:
    return Console(file = StringIO(), highlight = False, soft_wrap = True)

@pytest.fixture
def make_controller(config: Configuration, console: Console):
    def factory(**kwargs) -> tuple[Controller, FakeDisplay]:
        display = FakeDisplay(**kwargs)
        return Controller(config, display, console), display

    return factory
