"""Console logging utilities for the CHIP-8 interpreter.

Provides a small levelled console logger and a machine-specific subclass
that knows how to report program loads, instruction traces, faults and
key waits.
"""

import time
import sys
from typing import Any, Dict

from chip8.decode import disassemble

LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# ANSI escape per level
LEVEL_COLORS = {
    "DEBUG": "\033[36m",
    "INFO": "\033[32m",
    "WARNING": "\033[33m",
    "ERROR": "\033[31m",
    "CRITICAL": "\033[35m",
}
RESET = "\033[0m"


def level_rank(level: str) -> int:
    """Position of level in LEVELS; unknown names rank as INFO."""
    level = level.upper()
    return LEVELS.index(level) if level in LEVELS else 1


class ConsoleLogger:
    """Levelled console logger writing to a stream, optionally colored."""

    def __init__(
        self,
        name: str = "CHIP-8",
        log_level: str = "INFO",
        use_colors: bool = True,
        show_timestamps: bool = True,
        stream=None,
    ):
        self.name = name
        self.log_level = log_level.upper()
        self.stream = stream if stream is not None else sys.stdout
        isatty = getattr(self.stream, "isatty", None)
        self.use_colors = use_colors and isatty is not None and isatty()
        self.show_timestamps = show_timestamps
        self.start_time = time.time()

    def is_enabled_for(self, level: str) -> bool:
        return level_rank(level) >= level_rank(self.log_level)

    def _prefix(self, level: str) -> str:
        tag = f"[{level:>8s}]"
        if self.use_colors:
            tag = f"{LEVEL_COLORS.get(level, '')}{tag}{RESET}"
        if self.show_timestamps:
            tag = f"[{time.time() - self.start_time:8.2f}s]{tag}"
        return f"{tag}[{self.name}]"

    def log(self, level: str, message: str):
        level = level.upper()
        if self.is_enabled_for(level):
            print(f"{self._prefix(level)} {message}", file=self.stream, flush=True)

    def debug(self, message: str):
        self.log("DEBUG", message)

    def info(self, message: str):
        self.log("INFO", message)

    def warning(self, message: str):
        self.log("WARNING", message)

    def error(self, message: str):
        self.log("ERROR", message)

    def critical(self, message: str):
        self.log("CRITICAL", message)


class MachineLogger(ConsoleLogger):
    """Logger for interpreter events."""

    def __init__(self, name: str = "CHIP-8", **kwargs):
        super().__init__(name, **kwargs)
        self.instruction_count = 0

    def log_config(self, config: Dict[str, Any]):
        self.debug("Machine configuration:")
        for key, value in config.items():
            self.debug(f"  {key}: {value}")

    def log_program_loaded(self, size: int, source: str = "<bytes>"):
        self.info(f"Loaded {size} bytes from {source} at 0x200")

    def log_instruction(self, pc: int, instruction: int):
        """Trace one executed instruction (DEBUG only)."""
        self.instruction_count += 1
        if self.is_enabled_for("DEBUG"):
            self.debug(f"0x{pc:03X}: {instruction:04X}  {disassemble(instruction)}")

    def log_fault(self, fault: Exception):
        self.error(f"Machine halted: {fault}")

    def log_pause(self, register: int):
        self.debug(f"Waiting for key press into V{register:X}")

    def log_resume(self, key: int):
        self.debug(f"Key {key:X} pressed, resuming")

    def log_registers(self, state):
        """Dump registers, I, PC and timers at DEBUG level."""
        if not self.is_enabled_for("DEBUG"):
            return
        for i in range(0, 16, 4):
            self.debug(" ".join(f"V{j:X}:{int(state.V[j]):02X}" for j in range(i, i + 4)))
        self.debug(
            f"PC:0x{int(state.pc):03X} I:0x{int(state.I):03X} "
            f"DT:{int(state.delay_timer)} ST:{int(state.sound_timer)} SP:{state.stack.pointer}"
        )
