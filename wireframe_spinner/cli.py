#
# PROJECT: wireframe-spinner
# MODULE: wireframe_spinner/cli.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import argparse
import curses
import logging
import sys

from .config import RenderConfig
from .image_surface import ImageSurface, save_gif
from .renderer import make_shape, renderer_for
from .scheduler import FrameLoop

logger = logging.getLogger(__name__)


def build_parser():
    defaults = RenderConfig()
    epilog = """\
examples:
  %(prog)s                                   Spinning cube in the terminal
  %(prog)s --shape rectangle --ascii         Rotating square, ASCII cells
  %(prog)s --gif cube.gif --frames 120       Render 2 seconds to a GIF
  %(prog)s --gif r.gif --shape rectangle --bg #000000 --fg #00FF00
"""
    parser = argparse.ArgumentParser(
        prog="wireframe-spinner",
        description="Rotating wireframe shapes",
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument("--shape", choices=("cube", "rectangle"), default="cube",
                        help="Shape to animate (default: cube)")
    parser.add_argument("--size", type=float, default=None,
                        help=(f"Half-extent of the shape (default: {defaults.cube_size:g} cube, "
                              f"{defaults.rectangle_size:g} rectangle)"))
    parser.add_argument("--velocity", type=float, default=defaults.angular_velocity,
                        help="Angular velocity in radians per ms (default: %(default)s)")
    parser.add_argument("--fps", type=int, default=defaults.fps,
                        help="Target frames per second (default: %(default)s)")
    parser.add_argument("--frames", type=int, default=None,
                        help="Stop after N frames (default: run until Ctrl-C; 120 for --gif)")
    parser.add_argument("--ascii", action="store_true",
                        help="Use ASCII characters instead of Braille")
    parser.add_argument("--gif", metavar="PATH",
                        help="Render headless to an animated GIF instead of the terminal")
    parser.add_argument("--width", type=int, default=640,
                        help="GIF width in pixels (default: 640)")
    parser.add_argument("--height", type=int, default=480,
                        help="GIF height in pixels (default: 480)")
    parser.add_argument("--fg", default=defaults.foreground,
                        help="GIF line color (default: %(default)s)")
    parser.add_argument("--bg", default=defaults.background,
                        help="GIF background color (default: %(default)s)")
    parser.add_argument("--log-level", default="WARNING",
                        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
                        help="Logging level (default: WARNING)")
    parser.add_argument("--log-file", default=None,
                        help="Write log records to this file")
    return parser


def parse_args(argv=None):
    return build_parser().parse_args(argv)


def configure_logging(args):
    """Route logging to --log-file, or stderr when not drawing to the terminal."""
    level = getattr(logging, args.log_level)
    fmt = "%(asctime)s %(levelname)s %(name)s: %(message)s"
    if args.log_file:
        logging.basicConfig(filename=args.log_file, level=level, format=fmt)
    elif args.gif:
        logging.basicConfig(stream=sys.stderr, level=level, format=fmt)
    else:
        # stderr output would tear the curses screen
        logging.getLogger().addHandler(logging.NullHandler())


def build_config(args):
    """RenderConfig from the command line; raises ValueError on bad values."""
    settings = dict(angular_velocity=args.velocity, fps=args.fps,
                    foreground=args.fg, background=args.bg)
    if args.size is not None:
        settings['cube_size' if args.shape == 'cube' else 'rectangle_size'] = args.size
    return RenderConfig.detect_terminal(**settings)


def export_gif(args, config=None):
    """Render ``args.frames`` frames on synthetic time and save them as a GIF."""
    config = config or build_config(args)
    frames = 120 if args.frames is None else args.frames
    surface = ImageSurface(args.width, args.height,
                           foreground=config.foreground, background=config.background)
    loop = FrameLoop(fps=config.fps, realtime=False)
    images = []
    loop.on_frame(lambda _ts: images.append(surface.snapshot()))

    renderer = renderer_for(surface, loop, make_shape(args.shape, config), config)
    loop.run(frames)
    renderer.stop()

    save_gif(images, args.gif, loop.frame_ms)
    return images


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        config = build_config(args)
    except ValueError as e:
        parser.error(str(e))
    configure_logging(args)

    if args.gif:
        export_gif(args, config)
        return 0

    from .demo import main as demo_main
    try:
        curses.wrapper(lambda s: demo_main(s, args, config))
    except KeyboardInterrupt:
        pass
    except Exception as e:
        logger.exception("demo crashed")
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
