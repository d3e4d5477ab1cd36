#
# PROJECT: wireframe-spinner
# MODULE: wireframe_spinner/__init__.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from .math_utils import (Vector, Matrix, TransformError,
                         MatrixDimensionError, ProjectionError)
from .config import RenderConfig
from .shapes import Shape, Rectangle, Cube
from .surface import DrawingSurface, TickScheduler
from .renderer import (Renderer, RectangleRenderer, CubeRenderer,
                       renderer_for, make_shape)
from .scheduler import FrameLoop
from .canvas import Canvas
from .image_surface import ImageSurface, save_gif
