from dataclasses import dataclass
from typing import Tuple

import numpy as np


@dataclass(frozen=True)
class RenderShip:
    """Snapshot of the ship for rendering purposes."""
    position: complex
    angle: float
    radius: float
    thrusting: bool
    exploding: bool
    visible: bool  # False on odd blink cycles and once dead


@dataclass(frozen=True)
class RenderAsteroid:
    position: complex
    radius: float
    angle: float
    offsets: np.ndarray  # (V,) per-vertex radius multipliers


@dataclass(frozen=True)
class RenderLaser:
    position: complex
    exploding: bool


@dataclass(frozen=True)
class RenderState:
    """Snapshot of the entire session for rendering purposes."""
    ship: RenderShip
    asteroids: Tuple[RenderAsteroid, ...]
    lasers: Tuple[RenderLaser, ...]

    score: int
    high_score: int
    lives: int
    level: int

    banner_text: str
    banner_alpha: float  # Banner hidden once negative
