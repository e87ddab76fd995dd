"""
High score persistence.

The high score survives restarts in a small YAML file. Reading never fails:
a missing or damaged file counts as no high score. Writing never interrupts
a game: failures are logged and the in-memory value stays authoritative.
"""

import logging
from pathlib import Path
from typing import Union

import yaml

log = logging.getLogger(__name__)

HIGH_SCORE_KEY = "high_score"


class HighScoreStore:
    """YAML-file backed store for the process-wide high score."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def load(self) -> int:
        """
        Read the saved high score.

        Returns:
            The saved value, or 0 if there is none or it cannot be read.
        """
        if not self.path.exists():
            log.info(f"No high score saved at {self.path}")
            return 0

        try:
            with open(self.path, "r") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            log.warning(f"Could not read high score from {self.path}: {e}")
            return 0

        value = data.get(HIGH_SCORE_KEY) if isinstance(data, dict) else None
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            log.warning(f"Ignoring malformed high score in {self.path}: {data!r}")
            return 0

        return value

    def save(self, high_score: int) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w") as f:
                yaml.safe_dump({HIGH_SCORE_KEY: int(high_score)}, f)
        except (OSError, yaml.YAMLError) as e:
            log.error(f"Error saving high score to {self.path}: {e}")
