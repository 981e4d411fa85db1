import random

import pygame
import pytest

from game import World


@pytest.fixture
def screen_size():
    return pygame.Vector2(800, 600)


@pytest.fixture
def world():
    return World((800, 600), rng=random.Random(42))


@pytest.fixture
def still_world(world):
    # bats that never move, so positions in a test stay where they were put
    for bat in world.bats:
        bat.vel = pygame.Vector2(0, 0)
    return world
