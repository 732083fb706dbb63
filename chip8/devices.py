"""Bundle of peripherals an instruction may touch."""

from typing import NamedTuple

from chip8.display import Display
from chip8.keypad import Keypad


class Devices(NamedTuple):
    display: Display
    keypad: Keypad


def create_devices() -> Devices:
    return Devices(display=Display(), keypad=Keypad())
