#
# PROJECT: wireframe-spinner
# MODULE: wireframe_spinner/rasterizer.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import math


def draw_line_dda(canvas, p1, p2):
    """
    Draws a line using the DDA algorithm.
    p1, p2 are (x, y) tuples in pixel space; off-canvas pixels are clipped
    by ``canvas.set_pixel``.
    """
    x1, y1 = int(p1[0]), int(p1[1])
    x2, y2 = int(p2[0]), int(p2[1])

    dx = x2 - x1
    dy = y2 - y1
    if dx == 0 and dy == 0:
        canvas.set_pixel(x1, y1)
        return

    step = abs(dx) if abs(dx) > abs(dy) else abs(dy)

    x_inc = dx / step
    y_inc = dy / step

    cx, cy = float(x1), float(y1)
    for _ in range(step + 1):
        canvas.set_pixel(int(round(cx)), int(round(cy)))
        cx += x_inc; cy += y_inc


def fill_rect_pixels(canvas, x, y, w, h, plot):
    """Calls ``plot(px, py)`` for each on-canvas pixel of the rectangle."""
    x0 = max(0, int(math.floor(x)))
    y0 = max(0, int(math.floor(y)))
    x1 = min(canvas.w, int(math.ceil(x + w)))
    y1 = min(canvas.h, int(math.ceil(y + h)))
    for py in range(y0, y1):
        for px in range(x0, x1):
            plot(px, py)
