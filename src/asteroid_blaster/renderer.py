"""
Pygame-based rendering for the asteroid field.

Draws a RenderState snapshot: ship, asteroids, lasers, explosions, score,
lives and the fading banner. Rendering never feeds back into the simulation.
"""

import os

import numpy as np
import pygame

from asteroid_blaster.core.config import GameConfig
from asteroid_blaster.core.types import RenderAsteroid, RenderLaser, RenderShip, RenderState

BACKGROUND_COLOR = (0, 0, 0)
LINE_COLOR = (255, 255, 255)
ASTEROID_COLOR = (112, 128, 144)  # slategrey
FLAME_FILL = (255, 0, 0)
FLAME_EDGE = (255, 255, 0)
LASER_COLOR = (250, 128, 114)  # salmon
BOUNDING_COLOR = (0, 255, 0)
LOST_LIFE_COLOR = (255, 0, 0)

# Outer to inner rings, as multiples of the ship radius
SHIP_EXPLOSION_RINGS = [
    (1.7, (139, 0, 0)),
    (1.4, (255, 0, 0)),
    (1.1, (255, 165, 0)),
    (0.8, (255, 255, 0)),
    (0.5, (255, 255, 255)),
]
LASER_EXPLOSION_RINGS = [
    (1.0, (255, 69, 0)),
    (0.75, (250, 128, 114)),
    (0.5, (255, 192, 203)),
]

TEXT_FONT_SIZE = 40


def ship_outline(x: float, y: float, angle: float, radius: float) -> np.ndarray:
    """Nose, rear-left and rear-right corners of the ship triangle."""
    cos_a, sin_a = np.cos(angle), np.sin(angle)
    return np.array(
        [
            [x + 4 / 3 * radius * cos_a, y - 4 / 3 * radius * sin_a],
            [x - radius * (2 / 3 * cos_a + sin_a), y + radius * (2 / 3 * sin_a - cos_a)],
            [x - radius * (2 / 3 * cos_a - sin_a), y + radius * (2 / 3 * sin_a + cos_a)],
        ]
    )


def flame_outline(x: float, y: float, angle: float, radius: float) -> np.ndarray:
    cos_a, sin_a = np.cos(angle), np.sin(angle)
    return np.array(
        [
            [x - radius * (2 / 3 * cos_a + 0.5 * sin_a), y + radius * (2 / 3 * sin_a - 0.5 * cos_a)],
            [x - radius * 2 * cos_a, y + radius * 2 * sin_a],
            [x - radius * (2 / 3 * cos_a - 0.5 * sin_a), y + radius * (2 / 3 * sin_a + 0.5 * cos_a)],
        ]
    )


def asteroid_outline(asteroid: RenderAsteroid) -> np.ndarray:
    """Jagged polygon: one vertex per offset, evenly spaced around the heading."""
    num_vertices = len(asteroid.offsets)
    angles = asteroid.angle + np.arange(num_vertices) * 2 * np.pi / num_vertices
    radii = asteroid.radius * np.asarray(asteroid.offsets)
    return np.stack(
        [
            asteroid.position.real + radii * np.cos(angles),
            asteroid.position.imag + radii * np.sin(angles),
        ],
        axis=1,
    )


class GameRenderer:
    """Renders RenderState snapshots to a pygame window."""

    def __init__(self, config: GameConfig, target_fps: int | None = None):
        """
        Args:
            config: Game configuration; provides the playfield size.
            target_fps: Frame rate cap, defaults to the simulation tick rate.
        """
        self.config = config
        self.world_size = (int(config.width), int(config.height))
        self.target_fps = target_fps or config.fps

        self.screen: pygame.Surface | None = None
        self.clock: pygame.time.Clock | None = None
        self.font: pygame.font.Font | None = None
        self.small_font: pygame.font.Font | None = None
        self.initialized = False

    def initialize(self) -> None:
        if self.initialized:
            return

        if os.environ.get("HEADLESS"):
            os.environ["SDL_VIDEODRIVER"] = "dummy"

        try:
            pygame.init()
            if not pygame.display.get_init():
                pygame.display.init()

            self.screen = pygame.display.set_mode(self.world_size)
            pygame.display.set_caption("Asteroid Blaster")
            self.clock = pygame.time.Clock()
            self.font = pygame.font.Font(None, TEXT_FONT_SIZE)
            self.small_font = pygame.font.Font(None, int(TEXT_FONT_SIZE * 0.75))
            self.initialized = True
        except pygame.error as e:
            raise RuntimeError(
                f"Failed to initialize pygame: {e}. Make sure you have a display available."
            ) from e

    def _draw_ship_triangle(
        self, x: float, y: float, angle: float, radius: float, color=LINE_COLOR
    ) -> None:
        width = max(1, int(self.config.ship_size / 20))
        pygame.draw.polygon(self.screen, color, ship_outline(x, y, angle, radius).tolist(), width)

    def _render_ship(self, ship: RenderShip) -> None:
        x, y = ship.position.real, ship.position.imag

        if ship.exploding:
            for scale, color in SHIP_EXPLOSION_RINGS:
                pygame.draw.circle(self.screen, color, (x, y), ship.radius * scale)
        elif ship.visible:
            if ship.thrusting:
                flame = flame_outline(x, y, ship.angle, ship.radius).tolist()
                pygame.draw.polygon(self.screen, FLAME_FILL, flame)
                pygame.draw.polygon(
                    self.screen, FLAME_EDGE, flame, max(1, int(self.config.ship_size / 10))
                )
            self._draw_ship_triangle(x, y, ship.angle, ship.radius)

        if self.config.show_bounding:
            pygame.draw.circle(self.screen, BOUNDING_COLOR, (x, y), ship.radius, 1)

    def _render_asteroid(self, asteroid: RenderAsteroid) -> None:
        width = max(1, int(self.config.ship_size / 20))
        pygame.draw.polygon(self.screen, ASTEROID_COLOR, asteroid_outline(asteroid).tolist(), width)

        if self.config.show_bounding:
            center = (asteroid.position.real, asteroid.position.imag)
            pygame.draw.circle(self.screen, BOUNDING_COLOR, center, asteroid.radius, 1)

    def _render_laser(self, laser: RenderLaser, ship_radius: float) -> None:
        center = (laser.position.real, laser.position.imag)
        if not laser.exploding:
            pygame.draw.circle(self.screen, LASER_COLOR, center, self.config.ship_size / 15)
            return
        for scale, color in LASER_EXPLOSION_RINGS:
            pygame.draw.circle(self.screen, color, center, ship_radius * scale)

    def _render_ui(self, state: RenderState) -> None:
        size = self.config.ship_size
        width, _ = self.world_size

        score_surface = self.font.render(str(state.score), True, LINE_COLOR)
        self.screen.blit(
            score_surface, score_surface.get_rect(midright=(width - size / 2, size))
        )

        best_surface = self.small_font.render(f"BEST: {state.high_score}", True, LINE_COLOR)
        self.screen.blit(best_surface, best_surface.get_rect(center=(width / 2, size)))

        for i in range(state.lives):
            color = LOST_LIFE_COLOR if state.ship.exploding and i == state.lives - 1 else LINE_COLOR
            self._draw_ship_triangle(
                size + i * size * 1.2, size, 0.5 * np.pi, self.config.ship_radius, color
            )

    def _render_banner(self, state: RenderState) -> None:
        if state.banner_alpha < 0:
            return
        surface = self.font.render(state.banner_text, True, LINE_COLOR)
        surface.set_alpha(int(255 * min(state.banner_alpha, 1.0)))
        center = (self.world_size[0] / 2, self.world_size[1] * 0.75)
        self.screen.blit(surface, surface.get_rect(center=center))

    def render(self, state: RenderState) -> None:
        if not self.initialized:
            self.initialize()

        self.screen.fill(BACKGROUND_COLOR)

        self._render_ship(state.ship)
        for asteroid in state.asteroids:
            self._render_asteroid(asteroid)
        for laser in state.lasers:
            self._render_laser(laser, state.ship.radius)

        self._render_banner(state)
        self._render_ui(state)

        pygame.display.flip()
        self.clock.tick(self.target_fps)

    def close(self) -> None:
        if self.initialized:
            pygame.quit()
            self.initialized = False
            self.screen = None
            self.clock = None
            self.font = None
            self.small_font = None
