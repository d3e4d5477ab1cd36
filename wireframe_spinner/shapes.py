#
# PROJECT: wireframe-spinner
# MODULE: wireframe_spinner/shapes.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from .math_utils import Vector


class Shape:
    """
    Fixed vertex/edge topology plus an accumulated orientation.

    ``vertices`` and ``edges`` are tuples built once from ``size``; edges
    hold the very Vector objects stored in ``vertices``. Only the
    yaw/pitch/roll angles change after construction.
    """
    name = 'shape'

    def __init__(self, size: float, vertices, edges=()):
        self.size = float(size)
        self.vertices = tuple(vertices)
        self.edges = tuple(tuple(edge) for edge in edges)
        self.yaw = 0.0
        self.pitch = 0.0
        self.roll = 0.0

    def __repr__(self):
        return (f"{type(self).__name__}(size={self.size}, "
                f"V:{len(self.vertices)} E:{len(self.edges)})")

    @property
    def orientation(self):
        return (self.yaw, self.pitch, self.roll)

    def rotate_by(self, d_yaw: float, d_pitch: float, d_roll: float):
        """Advance orientation angles (radians). No wraparound is applied."""
        self.yaw += d_yaw
        self.pitch += d_pitch
        self.roll += d_roll


class Rectangle(Shape):
    """Square outline in the z=0 plane, first vertex repeated to close the path."""
    name = 'rectangle'

    def __init__(self, size: float):
        s = float(size)
        first = Vector((-s, -s, 0.0))
        vertices = [
            first,
            Vector(( s, -s, 0.0)),
            Vector(( s,  s, 0.0)),
            Vector((-s,  s, 0.0)),
            first,
        ]
        super().__init__(s, vertices)


class Cube(Shape):
    """Wireframe cube with corners at +-size on every axis."""
    name = 'cube'

    # Index pairs into the vertex list below
    EDGE_INDICES = (
        (0, 1), (1, 2), (2, 3), (3, 0),  # bottom (z = -s)
        (4, 5), (5, 6), (6, 7), (7, 4),  # top (z = +s)
        (0, 4), (1, 5), (2, 6), (3, 7),  # verticals
    )

    def __init__(self, size: float):
        s = float(size)
        vertices = [
            Vector((-s, -s, -s)), Vector(( s, -s, -s)),
            Vector(( s,  s, -s)), Vector((-s,  s, -s)),
            Vector((-s, -s,  s)), Vector(( s, -s,  s)),
            Vector(( s,  s,  s)), Vector((-s,  s,  s)),
        ]
        edges = [(vertices[a], vertices[b]) for a, b in self.EDGE_INDICES]
        super().__init__(s, vertices, edges)
