"""
Keyboard input for the human player.

Key presses are translated into intents and forwarded to the session's
setters. Nothing here moves the ship; motion is integrated by the session
on its next tick.
"""

import pygame

from asteroid_blaster.core.constants import InputAction
from asteroid_blaster.env.session import GameSession

KEY_BINDINGS = {
    pygame.K_LEFT: InputAction.ROTATE_LEFT,
    pygame.K_a: InputAction.ROTATE_LEFT,
    pygame.K_RIGHT: InputAction.ROTATE_RIGHT,
    pygame.K_d: InputAction.ROTATE_RIGHT,
    pygame.K_UP: InputAction.THRUST,
    pygame.K_w: InputAction.THRUST,
    pygame.K_SPACE: InputAction.FIRE,
}


class KeyboardControls:
    """Maps key intents onto a GameSession. Input is ignored once the ship is dead."""

    def __init__(self, session: GameSession):
        self.session = session

    def key_intent_down(self, action: InputAction) -> None:
        session = self.session
        if session.ship.dead:
            return

        match action:
            case InputAction.ROTATE_LEFT:
                session.set_rotation(session.config.ship_turn_rate)
            case InputAction.ROTATE_RIGHT:
                session.set_rotation(-session.config.ship_turn_rate)
            case InputAction.THRUST:
                session.set_thrusting(True)
            case InputAction.FIRE:
                session.request_fire()

    def key_intent_up(self, action: InputAction) -> None:
        session = self.session
        if session.ship.dead:
            return

        match action:
            case InputAction.ROTATE_LEFT | InputAction.ROTATE_RIGHT:
                session.set_rotation(0.0)
            case InputAction.THRUST:
                session.set_thrusting(False)
            case InputAction.FIRE:
                session.set_shoot_allowed(True)

    def handle_events(self) -> bool:
        """
        Drain the pygame event queue.

        Returns:
            True if the game should continue running, False if quit was requested.
        """
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                return False

            if event.type not in (pygame.KEYDOWN, pygame.KEYUP):
                continue
            action = KEY_BINDINGS.get(event.key)
            if action is None:
                continue

            if event.type == pygame.KEYDOWN:
                self.key_intent_down(action)
            else:
                self.key_intent_up(action)
        return True
