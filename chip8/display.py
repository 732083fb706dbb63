"""Monochrome frame buffer device."""

import numpy as np

from chip8.constants import SCREEN_WIDTH, SCREEN_HEIGHT
from chip8.rendering import frame_to_rgb, palette


class Display:
    """64x32 grid of on/off pixels, indexed ``pixels[x, y]``.

    The interpreter never writes the grid directly: sprites are composed
    pixel by pixel through :meth:`toggle_pixel`.
    """

    def __init__(self, width: int = SCREEN_WIDTH, height: int = SCREEN_HEIGHT):
        self.width = width
        self.height = height
        self.pixels = np.zeros((width, height), dtype=np.bool_)

    def toggle_pixel(self, x: int, y: int) -> bool:
        """XOR the pixel at (x, y), wrapping at the edges.

        Returns:
            True if the pixel is now off, i.e. a lit pixel was erased
        """
        x %= self.width
        y %= self.height
        self.pixels[x, y] ^= True
        return not bool(self.pixels[x, y])

    def clear(self):
        self.pixels[:] = False

    def is_on(self, x: int, y: int) -> bool:
        return bool(self.pixels[x % self.width, y % self.height])

    def lit_count(self) -> int:
        return int(np.count_nonzero(self.pixels))

    def to_rgb(self, scale: int = 8, color_scheme: str = "classic") -> np.ndarray:
        """Paint the frame buffer into an RGB array of shape (H*scale, W*scale, 3)."""
        return frame_to_rgb(self.pixels, scale, palette(color_scheme))

    def __repr__(self) -> str:
        return f"Display({self.width}x{self.height}, lit={self.lit_count()})"


def display_to_text(display: Display, on: str = "#", off: str = ".") -> str:
    """Row-major text dump of the frame buffer, one line per row."""
    rows = []
    for y in range(display.height):
        rows.append("".join(on if display.pixels[x, y] else off for x in range(display.width)))
    return "\n".join(rows)
