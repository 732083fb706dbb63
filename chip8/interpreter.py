"""Frame-driven CHIP-8 interpreter.

The :class:`Interpreter` owns one machine state together with the devices
it drives. A host calls :meth:`Interpreter.run_frame` sixty times per
second and paints ``interpreter.display`` afterwards. Equivalently it can
call :meth:`step` a number of times, then :meth:`tick_60hz`, then
:meth:`update_tone`.
"""

import dataclasses
from typing import Optional

from chip8.config import MachineConfig
from chip8.devices import Devices
from chip8.display import Display
from chip8.emulator import step, fetch, load_program, tick_timers
from chip8.errors import MachineFault, MachineHalted
from chip8.instructions.misc import resume_with_key
from chip8.keypad import Keypad, check_key
from chip8.logging import MachineLogger
from chip8.speaker import ToneDevice, SilentSpeaker
from chip8.state import MachineState, create_state


class Interpreter:
    """Fetch-decode-execute driver over a single :class:`MachineState`."""

    def __init__(
        self,
        config: Optional[MachineConfig] = None,
        display: Optional[Display] = None,
        keypad: Optional[Keypad] = None,
        speaker: Optional[ToneDevice] = None,
        logger: Optional[MachineLogger] = None,
    ):
        self.config = config if config is not None else MachineConfig()
        self.display = display if display is not None else Display()
        self.keypad = keypad if keypad is not None else Keypad()
        self.speaker = speaker if speaker is not None else SilentSpeaker(self.config.tone_frequency)
        self.logger = logger if logger is not None else MachineLogger(log_level="WARNING")

        self.state: MachineState = create_state(self.config)
        self.fault: Optional[MachineFault] = None
        self._program = b""
        self.logger.log_config(dataclasses.asdict(self.config))

    @property
    def devices(self) -> Devices:
        return Devices(display=self.display, keypad=self.keypad)

    @property
    def halted(self) -> bool:
        return self.fault is not None

    def load_program(self, program: bytes, source: str = "<bytes>"):
        """Copy a program image to 0x200. Raises ProgramTooLarge if it does not fit."""
        self.state = load_program(self.state, program)
        self._program = bytes(program)
        self.logger.log_program_loaded(len(self._program), source)

    def load_rom(self, filename: str):
        with open(filename, "rb") as f:
            self.load_program(f.read(), source=filename)

    def reset(self):
        """Re-create the whole machine state and reload the last program."""
        self.state = create_state(self.config)
        self.fault = None
        self.display.clear()
        self.keypad.cancel_wait()
        self.speaker.stop()
        if self._program:
            self.state = load_program(self.state, self._program)

    def is_paused(self) -> bool:
        return bool(self.state.paused)

    def should_sound(self) -> bool:
        return int(self.state.sound_timer) != 0

    def step(self):
        """Execute one instruction. Does nothing while waiting for a key.

        Raises:
            UnknownOpcode, StackOverflow, StackUnderflow: the machine is
                halted and later calls raise MachineHalted
            MachineHalted: a previous step faulted
        """
        if self.fault is not None:
            raise MachineHalted(f"Interpreter halted after fault: {self.fault}")
        if self.state.paused:
            return

        if self.logger.is_enabled_for("DEBUG"):
            _, instruction = fetch(self.state)
            self.logger.log_instruction(int(self.state.pc), instruction)

        try:
            self.state = step(self.state, self.devices)
        except MachineFault as fault:
            self.fault = fault
            self.logger.log_fault(fault)
            self.logger.log_registers(self.state)
            raise

        if self.state.paused:
            self.logger.log_pause(self.state.waiting_register)
            self.keypad.on_next_key_press(self.deliver_key_press)

    def deliver_key_press(self, key: int):
        """Resume a pending FX0A with the given key code.

        Raises:
            ValueError: key is not a hex key code (0..15)
        """
        check_key(key)
        if not self.state.paused:
            return
        self.state = resume_with_key(self.state, key)
        self.logger.log_resume(key)

    def tick_60hz(self):
        """Decrement timers once. Timers are frozen while paused."""
        if not self.state.paused:
            self.state = tick_timers(self.state)

    def update_tone(self):
        if self.should_sound():
            self.speaker.start()
        else:
            self.speaker.stop()

    def run_frame(self):
        """Run one 60 Hz frame: instructions, then timers, then the tone."""
        for _ in range(self.config.instructions_per_frame):
            if self.state.paused:
                break
            self.step()
        self.tick_60hz()
        self.update_tone()
