# Copyright (c) 2025 iiPython

# Modules
from pathlib import Path

# Handle the saved input
class StateFile:
    def __init__(self, file: Path) -> None:
        self.file = file

    def exists(self) -> bool:
        return self.file.is_file()

    def read(self) -> str | None:
        if not self.exists():
            return None

        return self.file.read_text().strip()

    def read_code(self) -> int | None:
        try:
            return int(self.read() or "")

        except ValueError:
            return None

    def write(self, code: int) -> None:
        self.file.write_text(f"{code}\n")
