import logging

import numpy as np
from omegaconf import DictConfig

from asteroid_blaster.controls import KeyboardControls
from asteroid_blaster.core.config import GameConfig
from asteroid_blaster.core.constants import InputAction
from asteroid_blaster.env.event import EventType
from asteroid_blaster.env.session import GameSession
from asteroid_blaster.persistence import HighScoreStore

log = logging.getLogger(__name__)


class RandomPilot:
    """
    Presses and releases random keys, the way a human would hold them.

    Each tick every key flips state with probability `flip_probability`.
    """

    def __init__(
        self,
        controls: KeyboardControls,
        rng: np.random.Generator,
        flip_probability: float = 0.1,
    ):
        self.controls = controls
        self.rng = rng
        self.flip_probability = flip_probability
        self.held: dict[InputAction, bool] = {action: False for action in InputAction}

    def act(self) -> None:
        for action in InputAction:
            if self.rng.random() >= self.flip_probability:
                continue
            if self.held[action]:
                self.controls.key_intent_up(action)
            else:
                self.controls.key_intent_down(action)
            self.held[action] = not self.held[action]


def simulate(cfg: DictConfig) -> dict:
    """
    Run the game headless for a fixed number of ticks with a random pilot.

    Args:
        cfg: Configuration containing game, seed, high_score_path and
            simulate.ticks / simulate.flip_probability.

    Returns:
        Summary of the run.
    """
    config = GameConfig.from_cfg(cfg.game)
    rng = np.random.default_rng(cfg.get("seed"))
    session = GameSession(config, HighScoreStore(cfg.high_score_path), rng=rng)
    pilot = RandomPilot(
        KeyboardControls(session), rng, flip_probability=cfg.simulate.flip_probability
    )

    ticks = cfg.simulate.ticks
    log.info(f"Simulating {ticks} ticks")

    counts = {event_type: 0 for event_type in EventType}
    best_level = 0
    for _ in range(ticks):
        pilot.act()
        for event in session.step():
            counts[event.event_type] += 1
        best_level = max(best_level, session.level)

    summary = {
        **session.get_state(),
        "best_level": best_level,
        "asteroids_destroyed": counts[EventType.ASTEROID_DESTROYED],
        "lasers_fired": counts[EventType.LASER_FIRED],
        "games_over": counts[EventType.GAME_OVER],
    }
    log.info(f"Simulation finished: {summary}")
    return summary
