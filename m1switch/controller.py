# Copyright (c) 2025 iiPython

# Modules
import logging

from rich.console import Console
from rich.markup import escape

from m1switch import DisplayError
from m1switch.config import Configuration
from m1switch.display import DisplayControl
from m1switch.inputs import Input, DESCRIPTIONS
from m1switch.state import StateFile

# Initialization
log = logging.getLogger("m1switch")

TROUBLESHOOTING = [
    "Make sure the monitor has DDC/CI enabled in its OSD settings",
    "(Settings > System > DDC/CI = ON)",
    "Try running: {binary} display list",
    "The display UUID may have changed - update \"display\" in {config}"
]

# Handle switching
class Controller:
    def __init__(self, config: Configuration, display: DisplayControl, console: Console) -> None:
        self.config, self.display, self.console = config, display, console
        self.state = StateFile(config.state_file)

    def require(self) -> bool:
        """Check that the display control binary can be found on this system."""
        if self.display.available():
            return True

        self.console.print(f"[red]ERROR: {self.config.binary} is not installed.")
        self.console.print(f"[bright_black]Install it with: brew install {self.config.binary}")
        return False

    def read_input(self) -> int | None:
        try:
            return self.display.get_input(self.config.display)

        except DisplayError as e:
            log.debug(f"Reading current input failed: {e}")
            return None

    def set_input(self, source: Input) -> int:
        code = self.config.code(source)
        self.console.print(f"Switching to {source.label} (input value: {code})...")

        try:
            self.display.set_input(self.config.display, code)

        except DisplayError as e:
            self.console.print(f"[red]FAILED: Could not switch input (exit code: {e.code})")
            self.console.print("\nTroubleshooting tips:")
            for tip in TROUBLESHOOTING:
                self.console.print(f"  - {escape(tip.format(binary = self.config.binary, config = self.config.file))}")

            return e.code

        self.console.print(f"[green]SUCCESS: Switched to {source.label}")

        # Save state for toggle, since `get input` is unreliable on some monitors
        try:
            self.state.write(code)

        except OSError as e:
            log.warning(f"Failed to save input state to {self.state.file}: {e}")

        return 0

    def toggle(self) -> int:
        current = self.read_input()
        shown = str(current)

        # Monitors that can't report their input answer with 0
        if current is None or current == 0:
            if self.state.exists():
                shown, current = self.state.read() or "", self.state.read_code()
                self.console.print(f"[yellow](Using saved state: {escape(shown)})")

            else:
                current = self.config.code(self.config.fallback)
                shown = str(current)
                self.console.print(f"[yellow](Cannot read current input; assuming {self.config.fallback.label} since you're connected)")

        self.console.print(f"Current input value: {escape(shown)}")

        source = Input.UNKNOWN if current is None else self.config.resolve(current)
        match source:
            case Input.USB_C:
                return self.set_input(Input.DISPLAYPORT)

            case Input.DISPLAYPORT:
                return self.set_input(Input.USB_C)

            case _:
                self.console.print(f"[yellow]Unknown current input value ({escape(shown)}). Defaulting to switch to DisplayPort.")
                return self.set_input(Input.DISPLAYPORT)

    def status(self) -> int:
        try:
            displays = self.display.list_displays()

        except DisplayError as e:
            log.debug(f"Listing displays failed: {e}")
            displays = []

        current = self.read_input()

        self.console.print("[blue]=== Monitor Input Status ===")
        self.console.print(f"Display: {escape(displays[0] if displays else '')}")
        self.console.print(f"Display UUID: {escape(self.config.display)}")
        self.console.print(f"Current input value (from DDC): {'error' if current is None else current}")
        if self.state.exists():
            self.console.print(f"Saved state: {escape(self.state.read() or '')}")

        self.console.print(f"\nInput values ({escape(self.config.model)}):")
        for source, code in sorted(self.config.codes.items(), key = lambda item: item[1]):
            self.console.print(f"  {code} = {DESCRIPTIONS[source]}")

        return 0
