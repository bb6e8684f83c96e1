#!/usr/bin/env python3
# render.py — truth table bitmap (PPM output)

from PIL import Image
from typing import Tuple

from truth_table import TruthTable

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
BLUE  = (0, 0, 255)
GREY  = (200, 200, 200)

UPSCALE = 8

class Grid:
    def __init__(self, w: int, h: int, bg: Tuple[int,int,int]=WHITE):
        self.w, self.h = w, h
        self.img = Image.new("RGB", (w, h), bg)
        self.px = self.img.load()
    def set(self, x: int, y: int, c: Tuple[int,int,int]) -> None:
        self.px[x, y] = c


def table_grid(table: TruthTable) -> Grid:
    """
    One pixel per cell: a row per assignment, a column per variable,
    then a GREY separator column and the output column.
    The top pixel row is a BLUE header band.
    1 is BLACK, 0 is WHITE.
    """
    n = len(table.variables)
    grid = Grid(n + 2, len(table.rows) + 1, WHITE)
    for x in range(grid.w):
        grid.set(x, 0, BLUE)
    for y, (inputs, out) in enumerate(table.rows, start=1):
        for x, v in enumerate(inputs):
            grid.set(x, y, BLACK if v else WHITE)
        grid.set(n, y, GREY)
        grid.set(n + 1, y, BLACK if out else WHITE)
    return grid


def render_table(table: TruthTable, outfile: str, up: int = UPSCALE) -> None:
    grid = table_grid(table)
    big = grid.img.resize((grid.w * up, grid.h * up), Image.NEAREST)
    # PIL writes binary PPM (P6) by default
    big.save(outfile, format="PPM")


__all__ = ["Grid", "table_grid", "render_table"]
