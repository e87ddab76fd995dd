import math

from asteroid_blaster.core.constants import BEAT_SPEEDUP


class BeatController:
    """
    Background beat whose tempo rises as the asteroid field thins out.

    The beat alternates between a low and a high tone. The ratio of
    asteroids left sets the pause between beats, from one second with a
    full field down to a quarter second when it is nearly cleared.
    """

    def __init__(self, fps: int):
        self.fps = fps
        self.ratio = 1.0
        self.beat_time = 0
        self.high = False

    @property
    def seconds_per_beat(self) -> float:
        return 1.0 - BEAT_SPEEDUP * (1.0 - self.ratio)

    def set_ratio(self, ratio: float) -> None:
        if not 0.0 < ratio <= 1.0:
            raise ValueError(f"Beat ratio must be in (0, 1], got {ratio}")
        self.ratio = ratio

    def reset(self) -> None:
        self.ratio = 1.0

    def tick(self) -> bool | None:
        """
        Advance one tick.

        Returns:
            The tone of the beat due this tick (True for high), or None.
        """
        if self.beat_time > 0:
            self.beat_time -= 1
            return None

        tone = self.high
        self.high = not self.high
        self.beat_time = math.ceil(round(self.seconds_per_beat * self.fps, 6))
        return tone
