#
# PROJECT: wireframe-spinner
# MODULE: wireframe_spinner/renderer.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import logging
from dataclasses import replace

from .config import RenderConfig
from .math_utils import Vector
from .shapes import Cube, Rectangle, Shape

logger = logging.getLogger(__name__)


class Renderer:
    """
    Frame-driven animator for a single shape.

    Every frame callback (``render``) runs the same pipeline:
      1. Time delta since the previous frame (0 on the first frame)
      2. Advance the shape's yaw/pitch/roll by delta * angular velocity
      3. Clear the whole surface
      4. Per vertex: rotate by the current angles, then the view pipeline
         of the subclass (``view``)
      5. Emit draw calls (``draw``)
      6. Request the next frame tick

    The surface and scheduler are supplied by the host; nothing here owns
    a window or a loop.
    """

    def __init__(self, surface, scheduler, shape: Shape,
                 config: RenderConfig = None, *, autostart: bool = True):
        self.surface = surface
        self.scheduler = scheduler
        self.shape = shape
        self.config = config or RenderConfig()
        self.previous_timestamp = None
        self.running = False
        self.frame_count = 0
        self._tick_pending = False
        if autostart:
            self.start()

    @property
    def velocity(self) -> float:
        return self.config.angular_velocity

    def start(self):
        """Begin requesting frame ticks. No-op when already running."""
        if self.running:
            return
        self.running = True
        logger.debug("renderer started: %r", self.shape)
        # A tick queued before stop() is still owed to us; reuse it
        if not self._tick_pending:
            self._request_tick()

    def stop(self):
        """Stop requesting ticks; an already queued tick draws nothing."""
        if self.running:
            logger.debug("renderer stopped after %d frames", self.frame_count)
        self.running = False

    def get_delta(self, timestamp: float) -> float:
        previous = self.previous_timestamp
        self.previous_timestamp = timestamp
        if previous is None:
            logger.debug("first frame at t=%s", timestamp)
            return 0
        return timestamp - previous

    def update(self, delta: float):
        step = delta * self.velocity
        self.shape.rotate_by(step, step, step)

    def project(self, vertex: Vector) -> Vector:
        rotated = vertex.rotate(self.shape.yaw, self.shape.pitch, self.shape.roll)
        return self.view(rotated)

    def view(self, vertex: Vector) -> Vector:
        """Map a rotated model-space vertex to surface pixels."""
        raise NotImplementedError

    def draw(self):
        raise NotImplementedError

    def _request_tick(self):
        self._tick_pending = True
        self.scheduler.request_tick(self.render)

    def render(self, timestamp: float):
        self._tick_pending = False
        if not self.running:
            return
        delta = self.get_delta(timestamp)
        if delta > 0:
            self.update(delta)

        surface = self.surface
        surface.clear(0, 0, surface.width, surface.height)
        self.draw()
        self.frame_count += 1

        self._request_tick()

    def _centre(self):
        return self.surface.width / 2, self.surface.height / 2


class RectangleRenderer(Renderer):
    """Flat outline: rotate, then move the origin to the surface centre."""

    def view(self, vertex: Vector) -> Vector:
        cx, cy = self._centre()
        return vertex.translate(cx, cy)

    def draw(self):
        points = [self.project(v) for v in self.shape.vertices]
        if not points:
            return
        surface = self.surface
        surface.begin_path()
        surface.move_to(points[0].x, points[0].y)
        for p in points[1:]:
            surface.line_to(p.x, p.y)
        surface.stroke()


class CubeRenderer(Renderer):
    """Perspective wireframe: rotate, depth project, scale, centre."""

    def view(self, vertex: Vector) -> Vector:
        cx, cy = self._centre()
        return (vertex
                .depth_project(self.config.projection_distance)
                .scale_all(self.config.projection_scale)
                .translate(cx, cy))

    def draw(self):
        # Edges reference the vertex objects themselves; key projections by identity
        projected = {id(v): self.project(v) for v in self.shape.vertices}
        surface = self.surface

        for a, b in self.shape.edges:
            pa, pb = projected[id(a)], projected[id(b)]
            surface.begin_path()
            surface.move_to(pa.x, pa.y)
            surface.line_to(pb.x, pb.y)
            surface.stroke()

        marker = self.config.vertex_marker
        if marker:
            half = marker / 2
            for p in projected.values():
                surface.fill_rect(p.x - half, p.y - half, marker, marker)


_RENDERERS = {
    Rectangle: RectangleRenderer,
    Cube: CubeRenderer,
}


def renderer_for(surface, scheduler, shape: Shape,
                 config: RenderConfig = None, **kwargs) -> Renderer:
    """Build the renderer matching ``shape``'s type."""
    for shape_type, renderer_cls in _RENDERERS.items():
        if isinstance(shape, shape_type):
            return renderer_cls(surface, scheduler, shape, config, **kwargs)
    raise TypeError(f"no renderer for shape type {type(shape).__name__}")


def make_shape(name: str, config: RenderConfig = None, size: float = None) -> Shape:
    """Construct a shape by name ('cube' or 'rectangle') using config sizes.

    A ``size`` override goes through RenderConfig so an oversized cube
    raises ValueError here instead of at the first projected frame.
    """
    config = config or RenderConfig()
    if name == Cube.name:
        if size is not None:
            config = replace(config, cube_size=size)
        return Cube(config.cube_size)
    if name == Rectangle.name:
        if size is not None:
            config = replace(config, rectangle_size=size)
        return Rectangle(config.rectangle_size)
    raise ValueError(f"unknown shape {name!r}")
