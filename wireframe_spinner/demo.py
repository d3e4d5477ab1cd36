#
# PROJECT: wireframe-spinner
# MODULE: wireframe_spinner/demo.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import curses
import logging
import time

from .canvas import Canvas
from .config import RenderConfig
from .renderer import make_shape, renderer_for
from .scheduler import FrameLoop

logger = logging.getLogger(__name__)


class DemoApp:
    """
    Terminal host: owns the curses screen, a braille Canvas sized to it and
    a realtime FrameLoop, and wires them to a renderer. After every frame
    the canvas is copied to the screen with a HUD line on top.
    """

    def __init__(self, stdscr, args, config: RenderConfig = None):
        self.stdscr = stdscr

        # ── Curses setup ────────────────────────────────────────────────
        curses.curs_set(0)
        stdscr.nodelay(True)

        # ── RenderConfig from terminal detection + CLI overrides ────────
        if config is None:
            config = RenderConfig.detect_terminal(
                angular_velocity=args.velocity, fps=args.fps)
        if args.ascii:
            config.use_braille = False
        self.config = config

        th, tw = stdscr.getmaxyx()
        self.term_size = (th, tw)
        self.canvas = Canvas.for_terminal(th, tw)

        self.loop = FrameLoop(fps=config.fps)
        self.loop.on_frame(self.present)

        self.shape = make_shape(args.shape, config, args.size)
        self.renderer = renderer_for(self.canvas, self.loop, self.shape, config)

        # ── Frame counter ───────────────────────────────────────────────
        self.frame_count = 0
        self.fps = 0
        self.last_fps_time = time.time()

    def check_resize(self):
        size = self.stdscr.getmaxyx()
        if size != self.term_size:
            self.term_size = size
            th, tw = size
            self.canvas.resize(max(0, (tw - 1) * 2), max(0, (th - 2) * 4))
            logger.debug("terminal resized to %sx%s", tw, th)

    def present(self, timestamp):
        """Frame hook: blit the canvas, draw the HUD, refresh."""
        stdscr = self.stdscr
        th, tw = stdscr.getmaxyx()

        stdscr.erase()
        for y, line in enumerate(self.canvas.rows(self.config.use_braille)):
            if y + 1 >= th:
                break
            try:
                stdscr.addstr(y + 1, 0, line[:max(0, tw - 1)])
            except curses.error:
                pass

        self.frame_count += 1
        now = time.time()
        if now - self.last_fps_time >= 1.0:
            self.fps = self.frame_count
            self.frame_count = 0
            self.last_fps_time = now

        yaw, pitch, roll = self.shape.orientation
        hdr = (f" {self.shape.name.upper()}"
               f" | V:{len(self.shape.vertices)}"
               f" E:{len(self.shape.edges)}"
               f" | FRAME:{self.renderer.frame_count}"
               f" | FPS:{self.fps}"
               f" | Y:{yaw:.2f} P:{pitch:.2f} R:{roll:.2f} ")
        try:
            stdscr.addstr(0, 0, hdr.center(max(0, tw - 1), '='), curses.A_BOLD)
        except curses.error:
            pass

        stdscr.refresh()
        self.check_resize()

    def run(self, max_frames=None):
        try:
            return self.loop.run(max_frames)
        finally:
            self.renderer.stop()


def main(stdscr, args, config=None):
    """Entry point called from curses.wrapper."""
    app = DemoApp(stdscr, args, config)
    app.run(args.frames)
