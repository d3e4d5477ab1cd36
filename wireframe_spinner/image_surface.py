#
# PROJECT: wireframe-spinner
# MODULE: wireframe_spinner/image_surface.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import logging

from PIL import Image, ImageDraw

logger = logging.getLogger(__name__)


class ImageSurface:
    """Drawing surface backed by a Pillow RGB image."""

    def __init__(self, width: int, height: int,
                 foreground="#FFFFFF", background="#008000", line_width: int = 1):
        self.image = Image.new('RGB', (int(width), int(height)), background)
        self.foreground = foreground
        self.background = background
        self.line_width = line_width
        self._draw = ImageDraw.Draw(self.image)
        self._path = []
        self._subpath = None

    @property
    def width(self) -> int:
        return self.image.width

    @property
    def height(self) -> int:
        return self.image.height

    def clear(self, x, y, w, h):
        if w <= 0 or h <= 0:
            return
        self._draw.rectangle([x, y, max(x, x + w - 1), max(y, y + h - 1)], fill=self.background)

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
            if len(points) > 1:
                self._draw.line(points, fill=self.foreground, width=self.line_width)

    def fill_rect(self, x, y, w, h):
        if w <= 0 or h <= 0:
            return
        self._draw.rectangle([x, y, max(x, x + w - 1), max(y, y + h - 1)], fill=self.foreground)

    def snapshot(self) -> Image.Image:
        return self.image.copy()


def save_gif(frames, path, frame_ms: float = 1000 / 60):
    """Write ``frames`` (Pillow images) as a looping animated GIF."""
    frames = list(frames)
    if not frames:
        raise ValueError("save_gif needs at least one frame")
    frames[0].save(
        path,
        save_all=True,
        append_images=frames[1:],
        duration=int(round(frame_ms)),
        loop=0,
    )
    logger.info("wrote %d frames to %s", len(frames), path)
