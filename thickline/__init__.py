"""Integer Bresenham lines, with thickness, on a square byte-per-pixel canvas."""

from thickline.modes import Overlap, ThicknessMode
from thickline.rasterizer import SENTINEL, Rasterizer
from thickline.canvas import BACKGROUND, Canvas

__all__ = ["BACKGROUND", "Canvas", "Overlap", "Rasterizer", "SENTINEL", "ThicknessMode"]
