"""Rasterize the monochrome frame buffer into RGB pixels."""

import numpy as np

# name -> (on, off)
COLOR_SCHEMES = {
    "classic": ((0, 255, 0), (0, 0, 0)),
    "paper": ((0, 0, 0), (255, 255, 255)),
    "amber": ((255, 176, 0), (0, 0, 0)),
    "white": ((255, 255, 255), (0, 0, 0)),
    "blue": ((0, 255, 255), (0, 0, 64)),
    "retro": ((255, 255, 0), (64, 0, 64)),
}


def palette(scheme: str = "classic") -> np.ndarray:
    """Look up a color scheme as a (2, 3) uint8 array indexed by pixel value.

    Row 0 is the "off" color, row 1 the "on" color.
    """
    try:
        on_color, off_color = COLOR_SCHEMES[scheme]
    except KeyError:
        raise ValueError(
            f"Unknown color scheme '{scheme}'. Available: {sorted(COLOR_SCHEMES)}"
        ) from None
    return np.array([off_color, on_color], dtype=np.uint8)


def frame_to_rgb(pixels: np.ndarray, scale: int = 8, colors: np.ndarray = None) -> np.ndarray:
    """Map a (width, height) boolean frame buffer to a (height*scale, width*scale, 3) image."""
    if scale < 1:
        raise ValueError(f"scale must be >= 1, got {scale}")
    if colors is None:
        colors = palette()

    indices = np.asarray(pixels, dtype=np.uint8).T
    image = colors[indices]
    return image.repeat(scale, axis=0).repeat(scale, axis=1)
