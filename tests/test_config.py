"""
Tests for the game configuration and its Hydra composition.
"""

from pathlib import Path

import numpy as np
import pytest
from hydra import compose, initialize_config_dir
from hydra.core.global_hydra import GlobalHydra
from omegaconf import OmegaConf

from asteroid_blaster.core.config import ConfigurationError, GameConfig
from asteroid_blaster.core.constants import Tier
from asteroid_blaster.env.factory import EntityFactory

CONFIG_DIR = Path(__file__).resolve().parents[1] / "configs"


class TestDerivedValues:
    """Per-tick quantities derived from the seconds-based settings."""

    def test_tick_counts(self, config):
        assert config.explosion_ticks == 9
        assert config.blink_ticks == 3
        assert config.blink_count == 30
        assert config.laser_explosion_ticks == 3

    def test_turn_rate(self, config):
        assert config.ship_turn_rate == pytest.approx(2 * np.pi / 30)

    def test_geometry(self, config):
        assert config.ship_radius == 15.0
        assert config.laser_range == pytest.approx(320.0)
        assert config.world_size == (800.0, 600.0)

    def test_tier_radius_and_score(self, config):
        assert config.tier_radius(Tier.LARGE) == 50
        assert config.tier_radius(Tier.MEDIUM) == 25
        assert config.tier_radius(Tier.SMALL) == 13
        assert config.tier_score(Tier.LARGE) == 20
        assert config.tier_score(Tier.MEDIUM) == 50
        assert config.tier_score(Tier.SMALL) == 100

    def test_text_fade_step(self, config):
        assert config.text_fade_step == pytest.approx(1 / 75)


class TestValidation:
    @pytest.mark.parametrize(
        "field,value",
        [
            ("fps", 0),
            ("lives", 0),
            ("ship_size", -1.0),
            ("ship_blink_duration", 0.0),
            ("asteroid_size", -100.0),
            ("asteroid_vertices", 0),
            ("laser_speed", 0.0),
            ("text_fade_duration", -2.5),
        ],
    )
    def test_non_positive_rejected(self, field, value):
        with pytest.raises(ConfigurationError, match=field):
            GameConfig(**{field: value})

    @pytest.mark.parametrize("field", ["ship_friction", "asteroid_speed", "score_small"])
    def test_negative_rejected(self, field):
        with pytest.raises(ConfigurationError, match=field):
            GameConfig(**{field: -1})

    @pytest.mark.parametrize("vertices", [1, 3, 5])
    def test_too_few_asteroid_vertices(self, vertices):
        with pytest.raises(ConfigurationError, match="asteroid_vertices"):
            GameConfig(asteroid_vertices=vertices)

    def test_fewest_asteroid_vertices_spawn_triangles(self):
        config = GameConfig(asteroid_vertices=6)
        factory = EntityFactory(config, np.random.default_rng(0))
        counts = {
            factory.create_asteroid(0j, Tier.LARGE, 0).num_vertices for _ in range(200)
        }
        assert min(counts) == 3
        assert max(counts) <= 9

    def test_randomness_range(self):
        GameConfig(asteroid_randomness=0.0)
        with pytest.raises(ConfigurationError):
            GameConfig(asteroid_randomness=1.0)

    def test_world_size(self):
        with pytest.raises(ConfigurationError):
            GameConfig(world_size=(800.0, 0.0))
        with pytest.raises(ConfigurationError):
            GameConfig(world_size=(800.0,))

    def test_configuration_error_is_value_error(self):
        assert issubclass(ConfigurationError, ValueError)


class TestFromCfg:
    def test_from_dictconfig(self):
        cfg = OmegaConf.create({"fps": 60, "world_size": [1024, 768], "lives": 5})
        config = GameConfig.from_cfg(cfg)
        assert config.fps == 60
        assert config.world_size == (1024.0, 768.0)
        assert config.lives == 5
        assert config.asteroid_count == 3

    def test_from_none(self):
        assert GameConfig.from_cfg(None) == GameConfig()

    def test_unknown_key(self):
        with pytest.raises(ConfigurationError, match="warp_drive"):
            GameConfig.from_cfg({"warp_drive": True})


class TestHydraConfig:
    """The shipped config composes into the default game configuration."""

    def setup_method(self):
        GlobalHydra.instance().clear()

    def teardown_method(self):
        GlobalHydra.instance().clear()

    def test_compose_default_config(self):
        with initialize_config_dir(config_dir=str(CONFIG_DIR), version_base=None):
            cfg = compose(config_name="config")

        assert cfg.mode == "play"
        assert GameConfig.from_cfg(cfg.game) == GameConfig()

    def test_override(self):
        with initialize_config_dir(config_dir=str(CONFIG_DIR), version_base=None):
            cfg = compose(config_name="config", overrides=["game.lives=1", "mode=simulate"])

        assert cfg.mode == "simulate"
        assert GameConfig.from_cfg(cfg.game).lives == 1
