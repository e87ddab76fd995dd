"""
Tests for per-tick kinematics.
"""

import numpy as np
import pytest

from asteroid_blaster.core.constants import Tier
from asteroid_blaster.env.entities import Laser
from asteroid_blaster.env.physics import (
    apply_thrust,
    move_ship,
    update_asteroids,
    update_invulnerability,
    update_lasers,
    update_ship,
)


@pytest.fixture
def ship(factory):
    return factory.create_ship()


class TestThrust:
    def test_thrust_accelerates_along_heading(self, ship, config):
        ship.angle = 0.0
        ship.thrusting = True
        apply_thrust(ship, config)
        assert ship.velocity.real == pytest.approx(config.ship_thrust / config.fps)
        assert ship.velocity.imag == pytest.approx(0.0)

    def test_thrust_upwards_decreases_y(self, ship, config):
        ship.thrusting = True
        apply_thrust(ship, config)
        assert ship.velocity.imag == pytest.approx(-config.ship_thrust / config.fps)

    def test_friction_decays_without_stopping(self, ship, config):
        ship.velocity = 3 + 1j
        apply_thrust(ship, config)
        assert ship.velocity == pytest.approx((3 + 1j) * (1 - config.ship_friction / config.fps))

        for _ in range(300):
            apply_thrust(ship, config)
        assert ship.velocity != 0j
        assert abs(ship.velocity) < 0.01

    def test_dead_ship_ignores_thrust(self, ship, config):
        ship.dead = True
        ship.thrusting = True
        ship.velocity = 1 + 0j
        apply_thrust(ship, config)
        assert ship.velocity.real < 1.0


class TestMoveShip:
    def test_rotates_and_translates(self, ship):
        ship.rotation = 0.1
        ship.velocity = 2 - 1j
        finished = move_ship(ship)

        assert finished is False
        assert ship.angle == pytest.approx(np.pi / 2 + 0.1)
        assert ship.position == complex(402, 299)

    def test_explosion_counts_down_in_place(self, ship):
        ship.explosion_time = 2
        ship.velocity = 5 + 5j
        ship.rotation = 0.1

        assert move_ship(ship) is False
        assert ship.explosion_time == 1
        assert move_ship(ship) is True
        assert ship.explosion_time == 0
        assert ship.position == complex(400, 300)
        assert ship.angle == pytest.approx(np.pi / 2)

    def test_dead_ship_does_not_move(self, ship):
        ship.dead = True
        ship.rotation = 0.1
        ship.velocity = 5 + 5j
        assert move_ship(ship) is False
        assert ship.position == complex(400, 300)
        assert ship.angle == pytest.approx(np.pi / 2)


class TestShipWraparound:
    def test_wraps_once_fully_off_screen(self, ship, config):
        ship.position = complex(-14, 300)
        ship.velocity = -2 + 0j
        update_ship(ship, config)
        # -14 + v is beyond -15, so the ship reappears at the right edge
        assert ship.position.real == config.width + ship.radius

    def test_bottom_edge(self, ship, config):
        ship.position = complex(400, config.height + ship.radius + 1)
        update_ship(ship, config)
        assert ship.position.imag == -ship.radius

    def test_partially_visible_ship_stays(self, ship, config):
        ship.position = complex(-10, 300)
        update_ship(ship, config)
        assert ship.position.real == -10


class TestLasers:
    def test_laser_moves_and_accumulates_distance(self, ship, config):
        ship.lasers = [Laser(position=complex(100, 100), velocity=3 - 4j)]
        update_lasers(ship, config)

        laser = ship.lasers[0]
        assert laser.position == complex(103, 96)
        assert laser.distance == pytest.approx(5.0)

    def test_laser_removed_past_range(self, ship, config):
        far = Laser(position=complex(100, 100), velocity=1 + 0j, distance=config.laser_range + 0.1)
        near = Laser(position=complex(200, 100), velocity=1 + 0j, distance=config.laser_range)
        ship.lasers = [far, near]
        update_lasers(ship, config)
        assert ship.lasers == [near]

    def test_exploding_laser_holds_then_disappears(self, ship, config):
        laser = Laser(position=complex(100, 100), velocity=10 + 0j, explosion_time=2)
        ship.lasers = [laser]

        update_lasers(ship, config)
        assert ship.lasers == [laser]
        assert laser.explosion_time == 1
        assert laser.position == complex(100, 100)

        update_lasers(ship, config)
        assert ship.lasers == []

    def test_laser_wraps_at_the_edge(self, ship, config):
        left = Laser(position=complex(1, 300), velocity=-2 + 0j)
        top = Laser(position=complex(400, 1), velocity=0 - 2j)
        right = Laser(position=complex(config.width - 1, 300), velocity=2 + 0j)
        ship.lasers = [left, top, right]
        update_lasers(ship, config)

        assert left.position.real == config.width
        assert top.position.imag == config.height
        assert right.position.real == 0.0

    def test_order_is_preserved(self, ship, config):
        lasers = [Laser(position=complex(10 * i, 10), velocity=1 + 0j) for i in range(5)]
        ship.lasers = list(lasers)
        lasers[2].distance = config.laser_range + 1
        update_lasers(ship, config)
        assert ship.lasers == [lasers[0], lasers[1], lasers[3], lasers[4]]


def test_asteroids_move_and_wrap(config, still_asteroid):
    drifting = still_asteroid(400, 300)
    drifting.velocity = 1 + 2j
    leaving = still_asteroid(config.width + 50, 300)
    leaving.velocity = 1 + 0j

    update_asteroids([drifting, leaving], config)

    assert drifting.position == complex(401, 302)
    assert leaving.position == complex(-50, 300)
    assert leaving.tier == Tier.LARGE


class TestInvulnerability:
    def test_blinks_run_out_after_the_invulnerability_window(self, ship, config):
        window = config.blink_ticks * config.blink_count
        for _ in range(window - 1):
            update_invulnerability(ship, config)
        assert ship.blink_number == 1
        assert ship.invulnerable

        update_invulnerability(ship, config)
        assert ship.blink_number == 0
        assert not ship.invulnerable
        assert ship.can_collide

    def test_blink_timer_reloads(self, ship, config):
        for _ in range(config.blink_ticks):
            update_invulnerability(ship, config)
        assert ship.blink_time == config.blink_ticks
        assert ship.blink_number == config.blink_count - 1

    def test_no_countdown_when_vulnerable(self, ship, config):
        ship.blink_number = 0
        ship.blink_time = 2
        update_invulnerability(ship, config)
        assert ship.blink_time == 2
        assert ship.blink_number == 0
