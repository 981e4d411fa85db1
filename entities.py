import random

import pygame

from keys import InputState
from physics import advance, angle_to_vector, rando
from settings import (
    BAT_SIZE,
    BAT_SPEED_RANGE,
    FRICTION,
    KEY_LEFT,
    KEY_RIGHT,
    KEY_SHOOT,
    KEY_THRUST,
    NINJA_SIZE,
    NINJA_START,
    NINJA_START_VEL,
    STAR_SIZE,
    STAR_SPEED,
    THRUST_SPEED,
    TURN_RATE,
)


class Ninja:
    def __init__(self, pos=NINJA_START, vel=NINJA_START_VEL, angle=0):
        self.pos = pygame.Vector2(pos)
        self.vel = pygame.Vector2(vel)
        self.size = pygame.Vector2(NINJA_SIZE)
        self.angle = angle
        self.angle_vel = 0
        self.angle_dir = 1  # 1 clockwise, -1 counter-clockwise
        self.stars = []

    def update(self, screen_size, keys=None):
        if keys is None:
            keys = InputState()
        if keys.is_down(KEY_LEFT):
            self.turn(-1)
        if keys.is_down(KEY_RIGHT):
            self.turn(1)
        if keys.is_down(KEY_THRUST):
            self.thrust()
        if keys.is_down(KEY_SHOOT):
            self.shoot()

        self.angle += self.angle_dir * TURN_RATE * self.angle_vel
        self.pos = advance(self.pos, self.vel, screen_size)
        self.vel *= FRICTION
        self.angle_vel *= FRICTION

        i = 0
        while i < len(self.stars):
            self.stars[i].update(screen_size)
            if self.stars[i].expired:
                # off-screen; the next star slides into slot i
                del self.stars[i]
            else:
                i += 1

    def turn(self, direction):
        self.angle_dir = direction
        self.angle_vel = 1

    def shoot(self):
        star = Star(self.pos, self.angle)
        self.stars.append(star)
        return star

    def thrust(self):
        self.vel = angle_to_vector(self.angle) * THRUST_SPEED


class Star:
    def __init__(self, pos, angle):
        self.pos = pygame.Vector2(pos)
        self.vel = angle_to_vector(angle) * STAR_SPEED
        self.size = pygame.Vector2(STAR_SIZE)

    @property
    def expired(self):
        return self.pos is None

    def update(self, screen_size):
        if self.pos is None:
            return
        screen_size = pygame.Vector2(screen_size)
        new_pos = self.pos + self.vel
        if (
            new_pos.x < 0
            or new_pos.x > screen_size.x
            or new_pos.y < 0
            or new_pos.y > screen_size.y
        ):
            self.pos = None
        else:
            self.pos = new_pos


class Bat:
    def __init__(self, pos, vel=None, rng=None):
        self.pos = pygame.Vector2(pos)
        if vel is None:
            lo, hi = BAT_SPEED_RANGE
            rng = rng if rng is not None else random
            vel = (rando(lo, hi, rng), rando(lo, hi, rng))
        self.vel = pygame.Vector2(vel)
        self.size = pygame.Vector2(BAT_SIZE)

    def update(self, screen_size):
        self.pos = advance(self.pos, self.vel, screen_size)
