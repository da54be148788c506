# Copyright (c) 2025 iiPython

# Modules
import sys
import logging

from rich.console import Console
from rich.markup import escape

from m1switch import __version__, ConfigurationError
from m1switch.config import Configuration
from m1switch.controller import Controller
from m1switch.display import DisplayControl, M1DDC
from m1switch.inputs import Input

# Handle UI
def show_help(console: Console) -> None:
    console.print(escape("Usage: m1switch [-D] [dp|usbc|toggle|status|version|help]"))
    console.print()
    for command, description in [
        ("dp", "Switch to DisplayPort"),
        ("usbc", "Switch to USB-C"),
        ("toggle", "Toggle between USB-C and DisplayPort"),
        ("status", "Show current input status"),
        ("version", "Show version information"),
        ("help", "Show this help")
    ]:
        console.print(f"  [yellow]{command}{' ' * (8 - len(command))}[/] - {description}")

    console.print("\nIf no argument is given, defaults to switching to DisplayPort.")
    console.print("[bright_black]Pass -D to enable debug logging.")

# Handle CLI
def main(argv: list[str] | None = None, display: DisplayControl | None = None, console: Console | None = None) -> int:
    arguments = list(sys.argv[1:] if argv is None else argv)
    if console is None:
        console = Console(highlight = False, soft_wrap = True)

    # Handle logging
    debug = "-D" in arguments
    logging.basicConfig(
        format = "[%(asctime)s] (%(levelname)s) %(message)s",
        datefmt = "%m/%d/%Y %H:%M:%S",
        level = logging.DEBUG if debug else logging.WARNING
    )
    if debug:
        arguments.remove("-D")

    logging.getLogger("m1switch").setLevel(logging.DEBUG if debug else logging.WARNING)

    # Only the first argument picks the command
    match arguments[:1]:
        case ["help" | "--help" | "-h"]:
            show_help(console)
            return 0

        case ["version"]:
            console.print(f"[blue]m1switch v{__version__}[/] by [yellow]iiPython")
            return 0

        case [] | ["dp" | "displayport" | "DP"]:
            action = lambda controller: controller.set_input(Input.DISPLAYPORT)

        case ["usbc" | "usb-c" | "typec" | "type-c" | "USB-C"]:
            action = lambda controller: controller.set_input(Input.USB_C)

        case ["toggle"]:
            action = Controller.toggle

        case ["status"]:
            action = Controller.status

        case _:
            console.print(f"[red]Unknown option: {escape(arguments[0])}")
            console.print("Run 'm1switch help' for usage.")
            return 1

    try:
        config = Configuration()

    except ConfigurationError as e:
        console.print(f"[red]ERROR: {escape(str(e))}")
        return 1

    controller = Controller(config, display or M1DDC(config.binary), console)
    if not controller.require():
        return 1

    return action(controller)

if __name__ == "__main__":
    sys.exit(main())
