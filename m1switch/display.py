# Copyright (c) 2025 iiPython

# Modules
import shutil
import logging
import subprocess
from abc import ABC, abstractmethod

from m1switch import DisplayError

# Initialization
log = logging.getLogger("m1switch")

# Handle display control
class DisplayControl(ABC):
    """Anything capable of reading and writing a monitor's input selector."""

    @abstractmethod
    def available(self) -> bool:
        ...

    @abstractmethod
    def list_displays(self) -> list[str]:
        ...

    @abstractmethod
    def get_input(self, display_id: str) -> int:
        ...

    @abstractmethod
    def set_input(self, display_id: str, code: int) -> None:
        ...

class M1DDC(DisplayControl):
    def __init__(self, binary: str = "m1ddc") -> None:
        self.binary = binary

    def available(self) -> bool:
        return shutil.which(self.binary) is not None

    def run(self, *arguments: str, capture: bool = True) -> str:
        command = [self.binary, "display", *arguments]
        log.debug(f"Running command: \"{' '.join(command)}\"")

        result = subprocess.run(
            command,
            stdout = subprocess.PIPE if capture else None,
            stderr = subprocess.DEVNULL if capture else subprocess.STDOUT,
            text = True
        )
        log.debug(f"{self.binary} exited with code {result.returncode}")
        if result.returncode != 0:
            raise DisplayError(result.returncode)

        return result.stdout or ""

    def list_displays(self) -> list[str]:
        return [line for line in self.run("list").splitlines() if line.strip()]

    def get_input(self, display_id: str) -> int:
        output = self.run(display_id, "get", "input").strip()
        try:
            return int(output)

        except ValueError:
            log.debug(f"Unusable input reading: \"{output}\"")
            raise DisplayError(0)

    def set_input(self, display_id: str, code: int) -> None:
        self.run(display_id, "set", "input", str(code), capture = False)
