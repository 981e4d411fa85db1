import logging
import random

import pygame

from entities import Bat, Ninja
from keys import InputState
from physics import colliding
from settings import (
    BAT_COUNT,
    BAT_SPACING,
    HEIGHT,
    KEY_LEFT,
    KEY_RIGHT,
    KEY_SHOOT,
    KEY_THRUST,
    WIDTH,
)

logger = logging.getLogger("ninjastar.game")


class World:
    """Owns the ninja and the bats, and steps them one tick at a time.

    ``player`` becomes ``None`` once a bat reaches the ninja; from then on
    ``update`` leaves every entity untouched.
    """

    def __init__(self, screen_size=(WIDTH, HEIGHT), bat_count=BAT_COUNT, rng=None):
        self.screen_size = pygame.Vector2(screen_size)
        self.rng = rng if rng is not None else random.Random()
        self.player = Ninja()
        self.bats = [
            Bat((i * BAT_SPACING[0], i * BAT_SPACING[1]), rng=self.rng)
            for i in range(bat_count)
        ]
        logger.debug("world %dx%d with %d bats", self.screen_size.x, self.screen_size.y, len(self.bats))

    @property
    def game_over(self):
        return self.player is None

    @property
    def stars(self):
        if self.player is None:
            return []
        return self.player.stars

    def update(self, keys=None):
        if self.game_over:
            return
        if keys is None:
            keys = InputState()

        for bat in self.bats:
            bat.update(self.screen_size)

        self.player.update(self.screen_size, keys)

        stars = self.player.stars
        survivors = []
        for bat in self.bats:
            if any(colliding(bat, star) for star in stars):
                logger.debug("bat shot down at (%.1f, %.1f)", bat.pos.x, bat.pos.y)
            else:
                survivors.append(bat)
        self.bats = survivors

        if any(colliding(self.player, bat) for bat in self.bats):
            logger.info("GAME OVER")
            self.player = None

    def handle_key(self, key):
        if self.game_over:
            return
        if key == KEY_LEFT:
            self.player.turn(-1)
        elif key == KEY_RIGHT:
            self.player.turn(1)
        elif key == KEY_SHOOT:
            self.player.shoot()
        elif key == KEY_THRUST:
            self.player.thrust()
