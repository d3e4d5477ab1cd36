#
# PROJECT: wireframe-spinner
# MODULE: wireframe_spinner/surface.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from typing import Callable, Protocol

TickCallback = Callable[[float], None]


class DrawingSurface(Protocol):
    """2D target the renderer draws on. Coordinates are pixels, y down."""

    @property
    def width(self) -> int: ...

    @property
    def height(self) -> int: ...

    def clear(self, x: float, y: float, w: float, h: float) -> None: ...

    def begin_path(self) -> None: ...

    def move_to(self, x: float, y: float) -> None: ...

    def line_to(self, x: float, y: float) -> None: ...

    def stroke(self) -> None: ...

    def fill_rect(self, x: float, y: float, w: float, h: float) -> None: ...


class TickScheduler(Protocol):
    """Host frame-tick primitive."""

    def request_tick(self, callback: TickCallback) -> None:
        """Call ``callback(timestamp_ms)`` once, on the next displayed frame."""
