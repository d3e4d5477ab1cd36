#
# PROJECT: wireframe-spinner
# MODULE: wireframe_spinner/config.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import os
from dataclasses import dataclass


@dataclass
class RenderConfig:
    """Configuration for the animation and projection pipeline."""
    angular_velocity: float = 0.0007   # radians per millisecond, all three axes
    projection_distance: float = 2.0   # eye distance for the cube's depth projection
    projection_scale: float = 200.0    # pixels per unit after projection
    rectangle_size: float = 100.0      # half-extent in pixels
    cube_size: float = 0.5             # half-extent in model units
    vertex_marker: int = 4             # side of the square drawn on cube corners
    fps: int = 60
    use_braille: bool = True
    foreground: str = "#FFFFFF"
    background: str = "#008000"

    def __post_init__(self):
        if self.fps <= 0:
            raise ValueError(f"fps must be positive, got {self.fps}")
        if self.projection_scale <= 0:
            raise ValueError(
                f"projection_scale must be positive, got {self.projection_scale}")
        if self.vertex_marker < 0:
            raise ValueError(
                f"vertex_marker must not be negative, got {self.vertex_marker}")
        # Any rotated corner must stay in front of the eye: |corner| = size * sqrt(3)
        if self.cube_size * 3 ** 0.5 >= self.projection_distance:
            raise ValueError(
                f"cube_size {self.cube_size} reaches the projection plane "
                f"at distance {self.projection_distance}")

    @classmethod
    def detect_terminal(cls, **overrides) -> 'RenderConfig':
        """
        Build a config suited to the current terminal.
        Checks TERM and LANG environment variables.
        """
        term = os.environ.get('TERM', '').lower()
        lang = os.environ.get('LANG', '').lower()

        is_dumb = term in ('dumb', 'unknown')
        is_linux_console = term == 'linux'
        supports_utf8 = 'utf-8' in lang or 'utf8' in lang

        # Linux console font often lacks braille
        settings = dict(use_braille=supports_utf8 and not is_linux_console and not is_dumb)
        settings.update(overrides)
        return cls(**settings)
