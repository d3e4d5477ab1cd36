#
# PROJECT: wireframe-spinner
# MODULE: wireframe_spinner/scheduler.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import logging
import time

logger = logging.getLogger(__name__)


class FrameLoop:
    """
    Cooperative frame-tick scheduler for hosts without a display refresh
    callback (terminal, headless export).

    Callbacks queued with ``request_tick`` are delivered together on the
    next frame with a timestamp in milliseconds. In realtime mode the
    timestamp comes from ``clock`` and ``run`` sleeps to hold ``fps``;
    otherwise time is synthetic and advances by exactly one frame period
    per frame, starting at 0.
    """

    def __init__(self, fps: int = 60, clock=None, sleep=time.sleep,
                 realtime: bool = True):
        if fps <= 0:
            raise ValueError(f"fps must be positive, got {fps}")
        self.fps = fps
        self.frame_ms = 1000.0 / fps
        self.clock = clock or time.perf_counter
        self.sleep = sleep
        self.realtime = realtime
        self.frames = 0
        self.running = False
        self._pending = []
        self._frame_hooks = []

    @property
    def pending(self) -> int:
        return len(self._pending)

    def request_tick(self, callback):
        self._pending.append(callback)

    def on_frame(self, hook):
        """Register ``hook(timestamp_ms)``, called after each frame's callbacks."""
        self._frame_hooks.append(hook)
        return hook

    def now(self) -> float:
        if self.realtime:
            return self.clock() * 1000.0
        return self.frames * self.frame_ms

    def step(self) -> float:
        """Deliver one frame and return its timestamp."""
        timestamp = self.now()
        callbacks, self._pending = self._pending, []
        for callback in callbacks:
            callback(timestamp)
        for hook in self._frame_hooks:
            hook(timestamp)
        self.frames += 1
        return timestamp

    def stop(self):
        self.running = False

    def run(self, max_frames: int = None):
        """Deliver frames until stopped, out of callbacks, or ``max_frames`` reached."""
        self.running = True
        delivered = 0
        logger.debug("frame loop running at %s fps", self.fps)
        while self.running and self._pending:
            if max_frames is not None and delivered >= max_frames:
                break
            start = self.now()
            self.step()
            delivered += 1
            if self.realtime:
                remaining = self.frame_ms - (self.now() - start)
                if remaining > 0:
                    self.sleep(remaining / 1000.0)
        self.running = False
        logger.debug("frame loop finished after %d frames", delivered)
        return delivered
