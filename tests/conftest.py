import os
import sys

import numpy as np
import pytest

# Ensure the src layout is importable without installing
src_root = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if src_root not in sys.path:
    sys.path.insert(0, src_root)

from asteroid_blaster.core.config import GameConfig
from asteroid_blaster.core.constants import Tier
from asteroid_blaster.env.entities import Asteroid
from asteroid_blaster.env.factory import EntityFactory
from asteroid_blaster.env.session import GameSession
from asteroid_blaster.persistence import HighScoreStore


@pytest.fixture
def config():
    """Default game configuration (800x600 at 30 ticks per second)."""
    return GameConfig()


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def factory(config, rng):
    return EntityFactory(config, rng)


@pytest.fixture
def store(tmp_path):
    return HighScoreStore(tmp_path / "high_score.yaml")


@pytest.fixture
def session(config, store, rng):
    return GameSession(config, store, rng=rng)


@pytest.fixture
def still_asteroid(config):
    """Build a motionless, perfectly round asteroid of a given tier."""

    def _make(x: float, y: float, tier: Tier = Tier.LARGE) -> Asteroid:
        offsets = np.ones(10)
        offsets.setflags(write=False)
        return Asteroid(
            position=complex(x, y),
            velocity=0j,
            radius=config.tier_radius(tier),
            tier=tier,
            angle=0.0,
            offsets=offsets,
        )

    return _make
