"""A flat 32-bit pixel buffer with raw-image addressing."""

import numpy as np

BLACK = 0x000000
WHITE = 0xFFFFFF

_MAX_COLOR = 0xFFFFFFFF


class Framebuffer:
    """A width x height grid of 32-bit pixels.

    Pixels are addressed linearly, row after row, so an x outside the row
    spills into the neighbouring row just as it would in a raw image buffer.
    Only positions outside the whole buffer are rejected.
    """

    def __init__(self, width, height):
        if width <= 0 or height <= 0:
            raise ValueError(f"invalid framebuffer size {width}x{height}")
        self.width = int(width)
        self.height = int(height)
        self._data = np.zeros(self.width * self.height, dtype=np.uint32)

    @property
    def pixels(self):
        """A (height, width) view of the pixels; writes go to the buffer."""
        return self._data.reshape(self.height, self.width)

    def _offset(self, x, y):
        index = int(y) * self.width + int(x)
        if not 0 <= index < self._data.size:
            raise IndexError(f"pixel ({x}, {y}) lies outside the framebuffer")
        return index

    def put_pixel(self, x, y, color):
        """Store ``color`` at (x, y); fractional coordinates are truncated."""
        if not 0 <= color <= _MAX_COLOR:
            raise ValueError(f"color {color:#x} does not fit in 32 bits")
        self._data[self._offset(x, y)] = color

    def get_pixel(self, x, y):
        """Return the color stored at (x, y)."""
        return int(self._data[self._offset(x, y)])

    def fill(self, color):
        """Set every pixel to ``color``."""
        if not 0 <= color <= _MAX_COLOR:
            raise ValueError(f"color {color:#x} does not fit in 32 bits")
        self._data.fill(color)