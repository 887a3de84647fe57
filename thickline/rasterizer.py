"""Integer-only line rasterizer for a square, byte-per-pixel canvas.

Lines are clipped by clamping each endpoint into the canvas. The clamp is
lossy: an endpoint far outside the canvas moves to the nearest edge rather
than to the point where the segment actually crosses it, so a clipped line
can come out with a different slope than the one requested.
"""

import itertools
import logging

from thickline.modes import Overlap, ThicknessMode, draw_start_adjust_count

logger = logging.getLogger(__name__)

# Value written for every drawn pixel
SENTINEL = 0


def clamp(value: int, edge_length: int) -> int:
    """Clamp a single coordinate into [0, edge_length - 1]."""
    if value >= edge_length:
        value = edge_length - 1
    if value < 0:
        value = 0
    return value


def _perpendicular_walk(delta_x: int, delta_y: int, step_x: int, step_y: int, x_major: bool):
    """Endless Bresenham walk along the perpendicular of a line.

    Yields (move_x, move_y, minor_moved) for every step. The major axis moves
    on each step, the minor axis only when the error term says so.
    """
    if x_major:
        delta_major, delta_minor = delta_x, delta_y
    else:
        delta_major, delta_minor = delta_y, delta_x
    # start value represents a half step in minor direction
    error = 2 * delta_minor - delta_major
    while True:
        minor_moved = error >= 0
        if minor_moved:
            error -= 2 * delta_major
        error += 2 * delta_minor
        if x_major:
            yield step_x, (step_y if minor_moved else 0), minor_moved
        else:
            yield (step_x if minor_moved else 0), step_y, minor_moved


class Rasterizer:
    """Draws lines into a caller-owned canvas buffer.

    The canvas is square and row-major: pixel (x, y) lives at index
    x + edge_length * y. Any mutable byte buffer with integer item assignment
    works (bytearray, writable memoryview, flat numpy uint8 array). The buffer
    is only referenced, never resized or replaced.

    Not thread safe; callers serialize access to a shared canvas.
    """

    def __init__(self, canvas, edge_length: int):
        if edge_length < 1:
            raise ValueError(f"edge_length must be positive, got {edge_length}")
        if len(canvas) < edge_length * edge_length:
            raise ValueError(
                f"canvas holds {len(canvas)} bytes, "
                f"need at least {edge_length * edge_length} for edge length {edge_length}"
            )
        self.canvas = canvas
        self.edge_length = edge_length
        logger.debug("Rasterizer bound to %d byte canvas, edge length %d", len(canvas), edge_length)

    def _draw_pixel(self, x: int, y: int) -> None:
        # Unchecked, callers clamp first
        self.canvas[x + self.edge_length * y] = SENTINEL

    def _draw_filled_rect(self, x0: int, y0: int, x1: int, y1: int) -> None:
        """Fill the inclusive box spanned by two corners. No clipping."""
        sx, ex = min(x0, x1), max(x0, x1)
        sy, ey = min(y0, y1), max(y0, y1)
        for y in range(sy, ey + 1):
            for x in range(sx, ex + 1):
                self._draw_pixel(x, y)

    def draw_line(self, x0: int, y0: int, x1: int, y1: int) -> None:
        """Draw a one pixel wide Bresenham line, endpoints clamped to the canvas."""
        self._draw_line_overlap(x0, y0, x1, y1, Overlap.NONE)

    def _draw_line_overlap(self, x0: int, y0: int, x1: int, y1: int, overlap: Overlap) -> None:
        """Bresenham line that can add extra pixels whenever the minor coordinate changes.

        MAJOR draws the pixel reached by the main step before the minor step,
        MINOR draws the pixel behind the main step after the minor step.
        """
        edge = self.edge_length
        x0, y0 = clamp(x0, edge), clamp(y0, edge)
        x1, y1 = clamp(x1, edge), clamp(y1, edge)

        if x0 == x1 or y0 == y1:
            # Horizontal or vertical line, a filled rect is faster
            self._draw_filled_rect(x0, y0, x1, y1)
            return

        delta_x = x1 - x0
        delta_y = y1 - y0
        if delta_x < 0:
            delta_x = -delta_x
            step_x = -1
        else:
            step_x = 1
        if delta_y < 0:
            delta_y = -delta_y
            step_y = -1
        else:
            step_y = 1
        delta_x_times2 = delta_x << 1
        delta_y_times2 = delta_y << 1

        self._draw_pixel(x0, y0)
        if delta_x > delta_y:
            error = delta_y_times2 - delta_x
            while x0 != x1:
                x0 += step_x
                if error >= 0:
                    if overlap & Overlap.MAJOR:
                        self._draw_pixel(x0, y0)
                    y0 += step_y
                    if overlap & Overlap.MINOR:
                        self._draw_pixel(x0 - step_x, y0)
                    error -= delta_x_times2
                error += delta_y_times2
                self._draw_pixel(x0, y0)
        else:
            error = delta_x_times2 - delta_y
            while y0 != y1:
                y0 += step_y
                if error >= 0:
                    if overlap & Overlap.MAJOR:
                        self._draw_pixel(x0, y0)
                    x0 += step_x
                    if overlap & Overlap.MINOR:
                        self._draw_pixel(x0, y0 - step_y)
                    error -= delta_y_times2
                error += delta_x_times2
                self._draw_pixel(x0, y0)

    def _draw_parallel_lines(self, x0: int, y0: int, x1: int, y1: int, thickness: int,
                             start_adjust: int, perpendicular: tuple, overlap: Overlap) -> None:
        """Draw `thickness` copies of a line, each shifted one perpendicular step.

        The first copy sits `start_adjust` steps behind the requested line.
        Copies whose shift also moved the minor axis are drawn with `overlap`.
        """
        for move_x, move_y, _ in itertools.islice(_perpendicular_walk(*perpendicular), start_adjust):
            x0 -= move_x
            x1 -= move_x
            y0 -= move_y
            y1 -= move_y

        self.draw_line(x0, y0, x1, y1)
        for move_x, move_y, minor_moved in itertools.islice(_perpendicular_walk(*perpendicular),
                                                            max(thickness - 1, 0)):
            x0 += move_x
            x1 += move_x
            y0 += move_y
            y1 += move_y
            self._draw_line_overlap(x0, y0, x1, y1, overlap if minor_moved else Overlap.NONE)

    def draw_thick_line(self, x0: int, y0: int, x1: int, y1: int, thickness: int,
                        mode: ThicknessMode = ThicknessMode.MIDDLE) -> None:
        """Thick Bresenham line: no pixel missed and every pixel drawn only once.

        Every copy goes through the clamped line routine. The side the
        thickness grows on follows `mode` relative to the direction from
        (x0, y0) to (x1, y1), in every octant.
        """
        start_adjust = draw_start_adjust_count(thickness, mode)
        if thickness <= 1:
            self.draw_line(x0, y0, x1, y1)
            return

        # Swap the x and y deltas to get the perpendicular direction
        delta_y = x1 - x0
        delta_x = y1 - y0
        # Mirror into one quadrant, counting effective mirrorings
        swap = True
        if delta_x < 0:
            delta_x = -delta_x
            step_x = -1
            swap = not swap
        else:
            step_x = 1
        if delta_y < 0:
            delta_y = -delta_y
            step_y = -1
            swap = not swap
        else:
            step_y = 1

        # The draw vector has to stay counterclockwise to the original line
        # so MAJOR overlap fills every gap. Its sign toggles with each octant.
        x_major = delta_x >= delta_y
        if x_major:
            if swap:
                start_adjust = (thickness - 1) - start_adjust
                step_y = -step_y
            else:
                step_x = -step_x
        else:
            if swap:
                step_x = -step_x
            else:
                start_adjust = (thickness - 1) - start_adjust
                step_y = -step_y

        logger.debug("Thick line (%d,%d)-(%d,%d) thickness %d %s, %d copies before origin",
                     x0, y0, x1, y1, thickness, mode.name, start_adjust)
        self._draw_parallel_lines(x0, y0, x1, y1, thickness, start_adjust,
                                  (delta_x, delta_y, step_x, step_y, x_major), Overlap.MAJOR)

    def draw_thick_line_simple(self, x0: int, y0: int, x1: int, y1: int, thickness: int,
                               mode: ThicknessMode = ThicknessMode.MIDDLE) -> None:
        """Thick Bresenham line without octant correction.

        Some pixels are drawn twice (copies use MAJOR and MINOR overlap), and
        the thickness side flips between octants unless mode is MIDDLE with
        an odd thickness. CLOCKWISE and COUNTERCLOCKWISE draw the same pixels.
        The endpoints are not clamped here; only each copy is clamped on its own.
        """
        if not isinstance(mode, ThicknessMode):
            raise ValueError(f"Unknown thickness mode: {mode!r}")

        delta_y = x0 - x1
        delta_x = y1 - y0
        if delta_x < 0:
            delta_x = -delta_x
            step_x = -1
        else:
            step_x = 1
        if delta_y < 0:
            delta_y = -delta_y
            step_y = -1
        else:
            step_y = 1

        start_adjust = 0
        if mode is ThicknessMode.MIDDLE and thickness > 1:
            start_adjust = thickness // 2

        logger.debug("Simple thick line (%d,%d)-(%d,%d) thickness %d %s",
                     x0, y0, x1, y1, thickness, mode.name)
        self._draw_parallel_lines(x0, y0, x1, y1, thickness, start_adjust,
                                  (delta_x, delta_y, step_x, step_y, delta_x > delta_y),
                                  Overlap.BOTH)
