"""Square byte-per-pixel buffer for callers that don't bring their own."""

import numpy as np

from thickline.rasterizer import SENTINEL, Rasterizer

# Value of an undrawn pixel
BACKGROUND = 1

Pixel = tuple[int, int]


class Canvas:
    """Square pixel buffer, one byte per pixel.

    Pixels are stored as a flat bytearray, row-major: pixel (x, y) is at
    index y * edge_length + x. Drawn pixels hold SENTINEL, everything else
    keeps the fill value.
    """

    def __init__(self, edge_length: int, fill: int = BACKGROUND):
        self.edge_length = edge_length
        self.buffer = bytearray([fill]) * (edge_length * edge_length)

    def clear(self, value: int = BACKGROUND) -> None:
        """Reset every pixel to value."""
        self.buffer[:] = bytes([value]) * len(self.buffer)

    def get(self, x: int, y: int) -> int | None:
        """Get a pixel's value. Returns None for out-of-bounds."""
        if 0 <= x < self.edge_length and 0 <= y < self.edge_length:
            return self.buffer[y * self.edge_length + x]
        return None

    def get_row(self, y: int) -> bytes:
        """Get raw bytes for a single row."""
        start = y * self.edge_length
        return bytes(self.buffer[start:start + self.edge_length])

    def get_buffer(self) -> bytes:
        """Get the entire pixel buffer as bytes."""
        return bytes(self.buffer)

    def to_array(self) -> np.ndarray:
        """Writable (edge_length, edge_length) uint8 view of the buffer, indexed [y, x]."""
        return np.frombuffer(self.buffer, dtype=np.uint8).reshape(self.edge_length, self.edge_length)

    def drawn(self) -> set[Pixel]:
        """All (x, y) pixels currently holding SENTINEL."""
        ys, xs = np.nonzero(self.to_array() == SENTINEL)
        return {(int(x), int(y)) for x, y in zip(xs, ys)}

    def rasterizer(self) -> Rasterizer:
        return Rasterizer(self.buffer, self.edge_length)
