import logging

import numpy as np
from omegaconf import DictConfig

from asteroid_blaster.audio import AudioPlayer, dispatch_audio
from asteroid_blaster.controls import KeyboardControls
from asteroid_blaster.core.config import GameConfig
from asteroid_blaster.env.adapter import session_to_render_state
from asteroid_blaster.env.session import GameSession
from asteroid_blaster.persistence import HighScoreStore
from asteroid_blaster.renderer import GameRenderer

log = logging.getLogger(__name__)


def play(cfg: DictConfig) -> None:
    """
    Run the game in a window with keyboard control.

    One simulation tick per frame at the configured tick rate; the renderer's
    clock paces the loop.

    Args:
        cfg: Configuration containing:
            - game: GameConfig values.
            - seed: Optional seed for the asteroid field.
            - high_score_path: YAML file holding the high score.
            - audio: enabled, music and sound_dir.
    """
    config = GameConfig.from_cfg(cfg.game)
    rng = np.random.default_rng(cfg.get("seed"))
    session = GameSession(config, HighScoreStore(cfg.high_score_path), rng=rng)

    renderer = GameRenderer(config)
    renderer.initialize()
    controls = KeyboardControls(session)
    audio = AudioPlayer(
        sound_dir=cfg.audio.sound_dir,
        enabled=cfg.audio.enabled,
        music=cfg.audio.music,
    )

    log.info("Starting play mode")
    try:
        while controls.handle_events():
            events = session.step()
            dispatch_audio(events, audio)
            renderer.render(session_to_render_state(session))
    except KeyboardInterrupt:
        log.info("Game interrupted by user")
    finally:
        audio.close()
        renderer.close()
        log.info(f"Play mode ended, high score {session.high_score}")
