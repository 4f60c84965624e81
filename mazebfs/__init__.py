from mazebfs.grid import Direction, Grid
from mazebfs.generator import generate
from mazebfs.pathfinder import find_path
from mazebfs.renderer import draw, render

__all__ = ["Direction", "Grid", "generate", "find_path", "draw", "render"]
