"""Hexadecimal keypad input device."""

from typing import Callable, Optional

from chip8.constants import NUM_KEYS


def check_key(key: int) -> int:
    """Return key unchanged if it is a valid hex key code, else raise ValueError."""
    if not 0 <= key < NUM_KEYS:
        raise ValueError(f"Key code must be in 0..{NUM_KEYS - 1}, got {key}")
    return key


class Keypad:
    """State of the 16 hex keys plus a one-shot key press listener."""

    def __init__(self):
        self.held = [False] * NUM_KEYS
        self._next_key_callback: Optional[Callable[[int], None]] = None

    def is_pressed(self, key: int) -> bool:
        return self.held[check_key(key)]

    def on_next_key_press(self, callback: Callable[[int], None]):
        """Register the single pending callback for the next key press.

        A new registration replaces any callback still pending.
        """
        self._next_key_callback = callback

    def cancel_wait(self):
        """Drop the pending next-key-press callback, if any."""
        self._next_key_callback = None

    @property
    def waiting(self) -> bool:
        return self._next_key_callback is not None

    def press(self, key: int):
        """Mark key as held and fire the pending callback, if any."""
        self.held[check_key(key)] = True
        callback, self._next_key_callback = self._next_key_callback, None
        if callback is not None:
            callback(key)

    def release(self, key: int):
        self.held[check_key(key)] = False

    def pressed_keys(self) -> list[int]:
        return [key for key in range(NUM_KEYS) if self.held[key]]
