# Copyright (c) 2025 iiPython

# Modules
import os
import json
from pathlib import Path

from m1switch import ConfigurationError
from m1switch.inputs import Input

# Defaults (MSI MPG 321URX OLED, find your UUID with `m1ddc display list`)
DEFAULTS = {
    "display": "C85F15D4-1755-408A-A7A6-E183AAA7D23C",
    "model": "MSI MPG 321URX OLED",
    "binary": "m1ddc",
    "state_file": "~/.monitor-input-state",
    "inputs": {
        "dp": 15,     # DisplayPort 1 (0x0F)
        "usbc": 16,   # DisplayPort 2 (0x10), USB-C in DP Alt Mode
        "hdmi1": 17,  # HDMI 1 (0x11)
        "hdmi2": 18   # HDMI 2 (0x12)
    }
}

# Config handling
class Configuration:
    fallback = Input.USB_C  # Assumed current input when nothing can be read

    def __init__(self, file: Path | None = None, **overrides) -> None:
        self.file = file or Path(os.environ.get("M1SWITCH_CONFIG", Path.home() / ".config/m1switch/config.json"))

        # Load existing data
        data = {}
        if self.file.is_file():
            try:
                data = json.loads(self.file.read_text())

            except json.JSONDecodeError as e:
                raise ConfigurationError(f"{self.file} is not valid JSON ({e})")

            if not isinstance(data, dict):
                raise ConfigurationError(f"{self.file} must contain a JSON object")

        data |= overrides

        self.display = self.expect(data, "display", str)
        self.model = self.expect(data, "model", str)
        self.binary = self.expect(data, "binary", str)
        self.state_file = Path(self.expect(data, "state_file", (str, Path))).expanduser()

        inputs = self.expect(data, "inputs", dict)
        for key, code in inputs.items():
            if Input.from_key(key) is Input.UNKNOWN:
                raise ConfigurationError(f"unknown input '{key}' (expected one of: dp, usbc, hdmi1, hdmi2)")

            if not isinstance(code, int) or isinstance(code, bool) or code <= 0:
                raise ConfigurationError(f"input code for '{key}' must be a positive integer")

        self.codes = {Input.from_key(key): code for key, code in (DEFAULTS["inputs"] | inputs).items()}

    @staticmethod
    def expect(data: dict, key: str, kind: type | tuple[type, ...]) -> object:
        value = data.get(key, DEFAULTS[key])
        if not isinstance(value, kind):
            raise ConfigurationError(f"'{key}' has the wrong type in configuration")

        return value

    def code(self, source: Input) -> int:
        return self.codes[source]

    def resolve(self, code: int) -> Input:
        for source, value in self.codes.items():
            if value == code:
                return source

        return Input.UNKNOWN
