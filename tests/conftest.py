"""Shared fixtures: a surface that records draw calls and a hand-cranked scheduler."""

from __future__ import annotations

import pytest


class RecordingSurface:
    """DrawingSurface that logs every call as a tuple."""

    def __init__(self, width: int = 400, height: int = 300):
        self.width = width
        self.height = height
        self.calls: list[tuple] = []

    def clear(self, x, y, w, h):
        self.calls.append(("clear", x, y, w, h))

    def begin_path(self):
        self.calls.append(("begin_path",))

    def move_to(self, x, y):
        self.calls.append(("move_to", x, y))

    def line_to(self, x, y):
        self.calls.append(("line_to", x, y))

    def stroke(self):
        self.calls.append(("stroke",))

    def fill_rect(self, x, y, w, h):
        self.calls.append(("fill_rect", x, y, w, h))

    def named(self, name: str) -> list[tuple]:
        return [c for c in self.calls if c[0] == name]


class ManualScheduler:
    """TickScheduler whose ticks are fired explicitly by the test."""

    def __init__(self):
        self.callbacks = []

    def request_tick(self, callback):
        self.callbacks.append(callback)

    def fire(self, timestamp: float) -> int:
        callbacks, self.callbacks = self.callbacks, []
        for cb in callbacks:
            cb(timestamp)
        return len(callbacks)


@pytest.fixture()
def surface() -> RecordingSurface:
    return RecordingSurface()


@pytest.fixture()
def scheduler() -> ManualScheduler:
    return ManualScheduler()
