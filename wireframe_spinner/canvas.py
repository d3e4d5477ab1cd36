#
# PROJECT: wireframe-spinner
# MODULE: wireframe_spinner/canvas.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from .rasterizer import draw_line_dda, fill_rect_pixels


class Canvas:
    """
    Monochrome pixel surface packed into 2x4 terminal cells.

    Implements the DrawingSurface calls (clear, paths, fill_rect) so a
    renderer can draw on it; ``rows`` turns the cells into text lines.
    """
    __slots__ = ['w', 'h', 'grid', '_path', '_subpath']

    # Braille dot mapping for 2x4 grid
    #  1 4
    #  2 5
    #  3 6
    #  7 8
    # 0x01, 0x02, 0x04, 0x40, 0x08, 0x10, 0x20, 0x80
    BRAILLE_REMAP = [0x01, 0x02, 0x04, 0x40, 0x08, 0x10, 0x20, 0x80]

    def __init__(self, w, h):
        self._path = []
        self._subpath = None
        self.resize(w, h)

    @classmethod
    def for_terminal(cls, rows, cols):
        """Canvas covering a terminal of rows x cols, minus a HUD line."""
        return cls(max(0, (cols - 1) * 2), max(0, (rows - 2) * 4))

    @property
    def width(self):
        return self.w

    @property
    def height(self):
        return self.h

    def resize(self, w, h):
        self.w, self.h = int(w), int(h)
        # Grid stores 8-bit masks for 2x4 cells
        self.grid = [[0] * (self.w // 2 + 1) for _ in range(self.h // 4 + 1)]

    def set_pixel(self, x, y):
        if x < 0 or x >= self.w or y < 0 or y >= self.h: return
        # Bit index 0-7: 0,1,2,3 for left col; 4,5,6,7 for right col
        self.grid[y >> 2][x >> 1] |= (1 << ((y & 3) + (x & 1) * 4))

    def clear_pixel(self, x, y):
        if x < 0 or x >= self.w or y < 0 or y >= self.h: return
        self.grid[y >> 2][x >> 1] &= ~(1 << ((y & 3) + (x & 1) * 4))

    def get_pixel(self, x, y):
        if x < 0 or x >= self.w or y < 0 or y >= self.h:
            return False
        return bool(self.grid[y >> 2][x >> 1] & (1 << ((y & 3) + (x & 1) * 4)))

    # ── DrawingSurface ──────────────────────────────────────────────────

    def clear(self, x, y, w, h):
        if x <= 0 and y <= 0 and x + w >= self.w and y + h >= self.h:
            for row in self.grid:
                row[:] = [0] * len(row)
            return
        fill_rect_pixels(self, x, y, w, h, self.clear_pixel)

    def begin_path(self):
        self._path = []
        self._subpath = None

    def move_to(self, x, y):
        self._subpath = [(x, y)]
        self._path.append(self._subpath)

    def line_to(self, x, y):
        if self._subpath is None:
            self.move_to(x, y)
            return
        self._subpath.append((x, y))

    def stroke(self):
        for points in self._path:
            if len(points) == 1:
                self.set_pixel(int(points[0][0]), int(points[0][1]))
            for p1, p2 in zip(points, points[1:]):
                draw_line_dda(self, p1, p2)

    def fill_rect(self, x, y, w, h):
        fill_rect_pixels(self, x, y, w, h, self.set_pixel)

    # ── Text output ─────────────────────────────────────────────────────

    def rows(self, braille=True):
        render = render_cell_braille if braille else render_cell_ascii
        return [''.join(render(mask) for mask in row) for row in self.grid]

    def lit_pixels(self):
        return sum(bin(mask).count('1') for row in self.grid for mask in row)


def render_cell_ascii(mask: int) -> str:
    """
    Renders a 2x4 cell mask as an ASCII character based on pixel density.
    Used when Braille is unavailable.
    """
    if not mask:
        return ' '
    density = bin(mask).count('1')
    chars = " .:-=+*#%@"
    return chars[density] if density < len(chars) else '@'


def render_cell_braille(mask: int) -> str:
    """Renders a 2x4 cell mask as a Unicode Braille character."""
    if not mask:
        return ' '
    b = sum(Canvas.BRAILLE_REMAP[i] for i in range(8) if mask & (1 << i))
    return chr(0x2800 + b)
