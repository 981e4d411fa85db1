import math
import random

import pygame


def radians(degrees):
    return degrees * math.pi / 180


def angle_to_vector(degrees):
    return pygame.Vector2(math.cos(radians(degrees)), math.sin(radians(degrees)))


def wrap(value, size):
    # floor modulo is already non-negative; a tiny negative value can
    # round up to exactly `size`, which is the same point as 0
    value %= size
    if value >= size:
        value = 0.0
    return value


def advance(pos, velocity, screen_size):
    """Move pos by velocity, wrapping both axes around the screen (0,0 is top left)."""
    screen_size = pygame.Vector2(screen_size)
    return pygame.Vector2(
        wrap(pos.x + velocity.x, screen_size.x),
        wrap(pos.y + velocity.y, screen_size.y),
    )


def colliding(a, b):
    if a is b:
        return False
    return not (
        a.pos.x + a.size.x / 2 < b.pos.x - b.size.x / 2
        or a.pos.y + a.size.y / 2 < b.pos.y - b.size.y / 2
        or a.pos.x - a.size.x / 2 > b.pos.x + b.size.x / 2
        or a.pos.y - a.size.y / 2 > b.pos.y + b.size.y / 2
    )


def rando(lo, hi, rng=random):
    return rng.random() * (hi - lo) + lo
