# Copyright (c) 2025 iiPython

# Modules
from enum import Enum

# Input sources (MCCS VCP 0x60)
class Input(Enum):
    DISPLAYPORT = ("dp", "DisplayPort")
    USB_C       = ("usbc", "USB-C")
    HDMI1       = ("hdmi1", "HDMI 1")
    HDMI2       = ("hdmi2", "HDMI 2")
    UNKNOWN     = ("unknown", "Unknown")

    def __init__(self, key: str, label: str) -> None:
        self.key, self.label = key, label

    @classmethod
    def from_key(cls, key: str) -> "Input":
        for source in cls:
            if source.key == key:
                return source

        return cls.UNKNOWN

# Legend descriptions shown by `status`
DESCRIPTIONS = {
    Input.DISPLAYPORT: "DisplayPort",
    Input.USB_C:       "USB-C (Type-C / DP Alt Mode)",
    Input.HDMI1:       "HDMI 1",
    Input.HDMI2:       "HDMI 2"
}
