import logging

import numpy as np

from asteroid_blaster.core.config import GameConfig
from asteroid_blaster.core.constants import ASTEROIDS_PER_LARGE, GamePhase
from asteroid_blaster.persistence import HighScoreStore
from . import physics
from .beat import BeatController
from .collisions import resolve_laser_hits, resolve_ship_collision
from .entities import Asteroid
from .event import Event, EventType
from .factory import EntityFactory

log = logging.getLogger(__name__)


class GameSession:
    """
    Owns the whole game: ship, lasers, asteroids, score, lives and level.

    A driver calls `step` once per tick; it returns the events produced by
    that tick for the audio player and anything else that reacts to the
    game. Input handlers only flip intent flags through the setters below;
    all motion happens inside `step`.

    Attributes:
        config: Game configuration.
        factory: Builds entities from the session's random generator.
        beat: Background beat controller.
        ship: The player ship; replaced on respawn.
        asteroids: Live asteroids.
        level: Zero-based level index.
        lives: Lives left.
        score: Score of the current game.
        high_score: Best score across games, persisted through `store`.
        banner_text: Level or game over banner.
        banner_alpha: Banner opacity; the banner is hidden once it is negative.
        asteroids_total: Rocks this level can yield, counting all splits.
        asteroids_remaining: Rocks of `asteroids_total` not yet destroyed.
        phase: Current game phase.
        tick_count: Ticks since the session was created.
    """

    def __init__(
        self,
        config: GameConfig,
        store: HighScoreStore,
        rng: np.random.Generator | None = None,
    ):
        self.config = config
        self.store = store
        self.factory = EntityFactory(config, rng)
        self.beat = BeatController(config.fps)

        self.high_score = store.load()
        self.tick_count = 0

        self._events: list[Event] = []
        self._pending_shots = 0
        self._thrust_audible = False

        self.new_game()

    # Game lifecycle

    def new_game(self) -> None:
        self.lives = self.config.lives
        self.score = 0
        self.level = 0
        self.ship = self.factory.create_ship()
        self._pending_shots = 0
        self.phase = GamePhase.SPAWNING
        self.emit(Event(EventType.NEW_GAME))
        log.info(f"New game started, high score {self.high_score}")
        self.start_level()

    def start_level(self) -> None:
        """Show the level banner and spawn a fresh field around the ship."""
        self.banner_text = f"Level {self.level + 1}"
        self.banner_alpha = 1.0

        self.asteroids_total = (self.config.asteroid_count + self.level) * ASTEROIDS_PER_LARGE
        self.asteroids_remaining = self.asteroids_total
        self.asteroids: list[Asteroid] = self.factory.spawn_level_asteroids(
            self.level, self.ship.position
        )

        if not (self.ship.exploding or self.ship.dead):
            self.phase = GamePhase.SPAWNING
        log.info(f"Level {self.level + 1} started with {len(self.asteroids)} asteroids")

    def explode_ship(self) -> None:
        self.ship.explosion_time = self.config.explosion_ticks
        self.phase = GamePhase.SHIP_EXPLODING
        self.emit(Event(EventType.SHIP_EXPLODED))

    def _lose_life(self) -> None:
        self.lives -= 1
        self.emit(Event(EventType.LIFE_LOST, amount=self.lives))
        log.info(f"Ship lost, {self.lives} lives left")

        if self.lives == 0:
            self._game_over()
            return

        self.ship = self.factory.create_ship()
        self.phase = GamePhase.RESPAWNING
        self.emit(Event(EventType.SHIP_RESPAWNED))
        log.debug("Ship respawned")

    def _game_over(self) -> None:
        self.ship.dead = True
        self.banner_text = "Game Over"
        self.banner_alpha = 1.0
        self.beat.reset()
        self.phase = GamePhase.GAME_OVER
        self.emit(Event(EventType.BEAT_TEMPO, amount=self.beat.ratio))
        self.emit(Event(EventType.GAME_OVER, amount=self.score))
        log.info(f"Game over at level {self.level + 1} with score {self.score}")

    def add_score(self, points: int) -> None:
        self.score += points
        if self.score > self.high_score:
            self.high_score = self.score
            self.store.save(self.high_score)
            self.emit(Event(EventType.HIGH_SCORE, amount=self.high_score))

    def emit(self, event: Event) -> None:
        self._events.append(event)

    # Input intents

    def set_rotation(self, rotation: float) -> None:
        self.ship.rotation = rotation

    def set_thrusting(self, thrusting: bool) -> None:
        self.ship.thrusting = thrusting

    def set_shoot_allowed(self, allowed: bool) -> None:
        self.ship.shoot_allowed = allowed

    def request_fire(self) -> None:
        """
        Queue a shot for the next tick.

        Every press between two ticks queues its own shot, provided the fire
        key was released in between.
        """
        if self.ship.shoot_allowed and not self.ship.dead:
            self._pending_shots += 1
        self.ship.shoot_allowed = False

    # Simulation

    def _fire(self) -> None:
        ship = self.ship
        if ship.dead or ship.exploding:
            return
        if len(ship.lasers) >= self.config.laser_max_count:
            return
        ship.lasers.append(self.factory.create_laser(ship))
        self.emit(Event(EventType.LASER_FIRED))

    def _update_thrust_sound(self) -> None:
        audible = self.ship.thrusting and not self.ship.dead
        if audible != self._thrust_audible:
            self._thrust_audible = audible
            self.emit(
                Event(EventType.THRUST_STARTED if audible else EventType.THRUST_STOPPED)
            )

    def _update_banner(self) -> None:
        if self.banner_alpha >= 0:
            self.banner_alpha -= self.config.text_fade_step
        elif self.ship.dead:
            self.new_game()

    def _update_phase(self) -> None:
        if self.phase == GamePhase.SPAWNING and self.banner_alpha < 0:
            self.phase = GamePhase.PLAYING
        elif self.phase == GamePhase.RESPAWNING and not self.ship.invulnerable:
            self.phase = GamePhase.PLAYING

    def step(self) -> list[Event]:
        """
        Advance the game by one tick.

        Returns:
            Events produced since the previous step, in order.
        """
        self.tick_count += 1

        shots, self._pending_shots = self._pending_shots, 0
        for _ in range(shots):
            self._fire()

        self._update_thrust_sound()

        if physics.update_ship(self.ship, self.config):
            self._lose_life()
        physics.update_lasers(self.ship, self.config)
        physics.update_asteroids(self.asteroids, self.config)
        physics.update_invulnerability(self.ship, self.config)

        resolve_ship_collision(self)
        resolve_laser_hits(self)

        tone = self.beat.tick()
        if tone is not None:
            self.emit(Event(EventType.BEAT, high=tone))

        self._update_banner()
        self._update_phase()

        events, self._events = self._events, []
        return events

    @property
    def is_game_over(self) -> bool:
        return self.ship.dead

    def get_state(self) -> dict:
        return {
            "tick": self.tick_count,
            "phase": str(self.phase),
            "level": self.level,
            "lives": self.lives,
            "score": self.score,
            "high_score": self.high_score,
            "asteroids": len(self.asteroids),
            "lasers": len(self.ship.lasers),
        }

