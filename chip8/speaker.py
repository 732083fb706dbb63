"""Buzzer devices driven by the sound timer."""

from chip8.constants import TONE_FREQUENCY


class ToneDevice:
    """Idempotent start/stop wrapper around a fixed-pitch tone.

    Subclasses implement ``_start``/``_stop``; they are only called on an
    actual state change.
    """

    def __init__(self, frequency: int = TONE_FREQUENCY):
        self.frequency = frequency
        self.playing = False

    def start(self):
        if not self.playing:
            self._start()
            self.playing = True

    def stop(self):
        if self.playing:
            self._stop()
            self.playing = False

    def _start(self):
        raise NotImplementedError

    def _stop(self):
        raise NotImplementedError


class SilentSpeaker(ToneDevice):
    """Tone device that only tracks state. Counts start/stop transitions."""

    def __init__(self, frequency: int = TONE_FREQUENCY):
        super().__init__(frequency)
        self.starts = 0
        self.stops = 0

    def _start(self):
        self.starts += 1

    def _stop(self):
        self.stops += 1
