#
# PROJECT: wireframe-spinner
# MODULE: wireframe_spinner/math_utils.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import math


class TransformError(ValueError):
    """Base class for geometry errors raised by the transform engine."""


class MatrixDimensionError(TransformError):
    """Operands of a matrix operation have incompatible shapes."""


class ProjectionError(TransformError):
    """Perspective divide is undefined for the given point."""


class Vector:
    """Immutable homogeneous-coordinate vector of 0..N components.

    Components beyond the stored length are absent: ``get`` returns None for
    them. Only ``Matrix.vec_mul`` interprets an absent component as 1.
    """
    __slots__ = ('_components',)

    def __init__(self, components=()):
        self._components = tuple(float(c) for c in components)

    def __repr__(self):
        body = ", ".join(f"{c:.2f}" for c in self._components)
        return f"Vector({body})"

    def __len__(self):
        return len(self._components)

    def __iter__(self):
        return iter(self._components)

    def __getitem__(self, index):
        return self._components[index]

    def __eq__(self, other):
        if isinstance(other, Vector):
            return self._components == other._components
        return NotImplemented

    def __hash__(self):
        return hash(self._components)

    def get(self, index: int):
        if 0 <= index < len(self._components):
            return self._components[index]
        return None

    @property
    def x(self):
        return self.get(0)

    @property
    def y(self):
        return self.get(1)

    @property
    def z(self):
        return self.get(2)

    def translate(self, dx: float = 0.0, dy: float = 0.0, dz: float = 0.0) -> 'Vector':
        return Matrix.translation(dx, dy, dz).vec_mul(self)

    def rotate(self, yaw: float, pitch: float, roll: float) -> 'Vector':
        return Matrix.rotation(yaw, pitch, roll).vec_mul(self)

    def depth_project(self, distance: float) -> 'Vector':
        """Perspective divide by ``distance - z``; drops the z row."""
        return Matrix.depth_projection(distance, self).vec_mul(self)

    def scale_all(self, factor: float) -> 'Vector':
        return Matrix.scale(factor, factor, factor).vec_mul(self)


class Matrix:
    """Rectangular matrix stored as a tuple of rows, [row][col]."""
    __slots__ = ('_rows',)

    def __init__(self, rows=()):
        rows = tuple(tuple(float(v) for v in row) for row in rows)
        if rows:
            width = len(rows[0])
            for i, row in enumerate(rows):
                if len(row) != width:
                    raise MatrixDimensionError(
                        f"row {i} has {len(row)} columns, expected {width}")
        self._rows = rows

    def __repr__(self):
        return f"Matrix({self.height}x{self.width}, {list(self._rows)})"

    def __getitem__(self, index):
        return self._rows[index]

    def __eq__(self, other):
        if isinstance(other, Matrix):
            return self._rows == other._rows
        return NotImplemented

    def __hash__(self):
        return hash(self._rows)

    @property
    def rows(self):
        return self._rows

    @property
    def width(self) -> int:
        return len(self._rows[0]) if self._rows else 0

    @property
    def height(self) -> int:
        return len(self._rows)

    # ── Factories ───────────────────────────────────────────────────────

    @classmethod
    def identity(cls, size: int) -> 'Matrix':
        return cls([[1.0 if r == c else 0.0 for c in range(size)]
                    for r in range(size)])

    @classmethod
    def yaw(cls, rad: float) -> 'Matrix':
        """Rotation about Z."""
        c = math.cos(rad)
        s = math.sin(rad)
        return cls([
            [c, -s, 0.0],
            [s,  c, 0.0],
            [0.0, 0.0, 1.0],
        ])

    @classmethod
    def pitch(cls, rad: float) -> 'Matrix':
        """Rotation about Y."""
        c = math.cos(rad)
        s = math.sin(rad)
        return cls([
            [ c, 0.0, s],
            [0.0, 1.0, 0.0],
            [-s, 0.0, c],
        ])

    @classmethod
    def roll(cls, rad: float) -> 'Matrix':
        """Rotation about X."""
        c = math.cos(rad)
        s = math.sin(rad)
        return cls([
            [1.0, 0.0, 0.0],
            [0.0, c, -s],
            [0.0, s,  c],
        ])

    @classmethod
    def rotation(cls, yaw: float, pitch: float, roll: float) -> 'Matrix':
        """Yaw first, then pitch, then roll: R = roll . (pitch . yaw)."""
        return cls.roll(roll).mat_mul(cls.pitch(pitch).mat_mul(cls.yaw(yaw)))

    @classmethod
    def translation(cls, x: float = 0.0, y: float = 0.0, z: float = 0.0) -> 'Matrix':
        return cls([
            [1.0, 0.0, 0.0, x],
            [0.0, 1.0, 0.0, y],
            [0.0, 0.0, 1.0, z],
            [0.0, 0.0, 0.0, 1.0],
        ])

    @classmethod
    def scale(cls, sx: float, sy: float, sz: float) -> 'Matrix':
        return cls([
            [sx, 0.0, 0.0],
            [0.0, sy, 0.0],
            [0.0, 0.0, sz],
        ])

    @classmethod
    def depth_projection(cls, distance: float, vector: Vector) -> 'Matrix':
        """2x3 projection scaling x and y by ``1 / (distance - vector.z)``.

        Not a full projective transform: the z row is discarded, so the
        result of applying it is a 2-component vector.
        """
        z = vector.z
        if z is None:
            raise MatrixDimensionError(
                f"depth projection needs a z component, got {len(vector)}-vector")
        depth = distance - z
        if depth == 0:
            raise ProjectionError(
                f"point at z={z} lies on the projection plane (distance={distance})")
        f = 1.0 / depth
        return cls([
            [f, 0.0, 0.0],
            [0.0, f, 0.0],
        ])

    # ── Products ────────────────────────────────────────────────────────

    def mat_mul(self, other: 'Matrix') -> 'Matrix':
        if self.width != other.height:
            raise MatrixDimensionError(
                f"cannot multiply {self.height}x{self.width} "
                f"by {other.height}x{other.width}")
        cols = list(zip(*other.rows))
        return Matrix([
            [sum(a * b for a, b in zip(row, col)) for col in cols]
            for row in self._rows
        ])

    def vec_mul(self, vector: Vector) -> Vector:
        """Homogeneous multiply: absent vector components contribute 1."""
        width = self.width
        if len(vector) > width:
            raise MatrixDimensionError(
                f"cannot multiply {self.height}x{width} matrix "
                f"by {len(vector)}-vector")
        comps = [vector.get(i) for i in range(width)]
        comps = [1.0 if c is None else c for c in comps]
        return Vector(
            sum(c * m for c, m in zip(comps, row)) for row in self._rows)

    def __matmul__(self, other):
        if isinstance(other, Matrix):
            return self.mat_mul(other)
        if isinstance(other, Vector):
            return self.vec_mul(other)
        return NotImplemented
