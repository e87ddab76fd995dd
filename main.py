import hydra
from hydra.utils import to_absolute_path
from omegaconf import DictConfig, OmegaConf

from asteroid_blaster.modes.play import play
from asteroid_blaster.modes.simulate import simulate
from asteroid_blaster.utils import setup_logging


@hydra.main(version_base=None, config_path="configs", config_name="config")
def my_app(cfg: DictConfig) -> None:
    setup_logging("asteroid_blaster", cfg.logging.level, cfg.logging.log_dir)

    # Hydra changes the working directory per run
    OmegaConf.set_struct(cfg, False)
    cfg.audio.sound_dir = to_absolute_path(cfg.audio.sound_dir)
    cfg.high_score_path = to_absolute_path(cfg.high_score_path)

    match cfg.mode:
        case "play":
            play(cfg)
        case "simulate":
            simulate(cfg)
        case _:
            raise TypeError(
                f"Mode should be one of [play, simulate]. You used: {cfg.mode}"
            )


if __name__ == "__main__":
    my_app()
