# Copyright (c) 2025 iiPython

# Initialization
__version__ = "0.1.0"

# Exceptions
class DisplayError(Exception):
    def __init__(self, code: int) -> None:
        super().__init__(f"display control exited with code {code}")
        self.code = code

class ConfigurationError(Exception):
    pass
