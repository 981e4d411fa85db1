import random

import pygame
import pytest

from entities import Bat, Ninja, Star
from keys import InputState
from settings import KEY_LEFT, KEY_RIGHT, KEY_SHOOT, KEY_THRUST


def test_ninja_starting_state():
    ninja = Ninja()
    assert ninja.pos == (100, 300)
    assert ninja.vel == (1, 0)
    assert ninja.size == (60, 60)
    assert ninja.angle == 0
    assert ninja.stars == []


def test_thrust_then_tick(screen_size):
    ninja = Ninja()
    ninja.thrust()
    assert ninja.vel == (2, 0)
    ninja.update(screen_size)
    assert ninja.pos.x == pytest.approx(102)
    assert ninja.pos.y == pytest.approx(300)
    assert ninja.vel.x == pytest.approx(1.9)
    assert ninja.vel.y == pytest.approx(0)


def test_thrust_overwrites_velocity():
    ninja = Ninja(vel=(-5, 7), angle=90)
    ninja.thrust()
    assert ninja.vel.x == pytest.approx(0, abs=1e-12)
    assert ninja.vel.y == pytest.approx(2)


def test_velocity_decays_toward_rest(screen_size):
    ninja = Ninja()
    for _ in range(200):
        ninja.update(screen_size)
    assert ninja.vel.length() < 1e-4


def test_turn_sets_fixed_impulse():
    ninja = Ninja()
    ninja.turn(-1)
    ninja.turn(-1)
    assert ninja.angle_dir == -1
    assert ninja.angle_vel == 1


def test_held_left_turns_counter_clockwise(screen_size):
    ninja = Ninja()
    ninja.update(screen_size, InputState([KEY_LEFT]))
    assert ninja.angle == pytest.approx(-2)
    assert ninja.angle_vel == pytest.approx(0.95)


def test_turn_keeps_spinning_after_release(screen_size):
    ninja = Ninja()
    ninja.update(screen_size, InputState([KEY_RIGHT]))
    ninja.update(screen_size)
    assert ninja.angle == pytest.approx(2 + 2 * 0.95)


def test_held_thrust_uses_heading(screen_size):
    ninja = Ninja(angle=180)
    ninja.update(screen_size, InputState([KEY_THRUST]))
    assert ninja.pos.x == pytest.approx(98)
    assert ninja.pos.y == pytest.approx(300)


def test_held_shoot_spawns_one_star_per_tick(screen_size):
    ninja = Ninja()
    keys = InputState([KEY_SHOOT])
    for _ in range(3):
        ninja.update(screen_size, keys)
    assert len(ninja.stars) == 3


def test_shoot_copies_position():
    ninja = Ninja()
    star = ninja.shoot()
    assert star.pos == ninja.pos
    star.pos.x += 50
    assert ninja.pos == (100, 300)


def test_star_travels_along_heading():
    star = Star((100, 100), 90)
    assert star.vel.x == pytest.approx(0, abs=1e-12)
    assert star.vel.y == pytest.approx(4)
    assert star.size == (2, 2)


def test_star_moves_inside_screen(screen_size):
    star = Star((100, 100), 0)
    star.update(screen_size)
    assert star.pos == (104, 100)
    assert not star.expired


def test_star_expires_when_leaving_screen(screen_size):
    star = Star((5, 5), 0)
    star.vel = pygame.Vector2(-10, -10)
    star.update(screen_size)
    assert star.pos is None
    assert star.expired


def test_star_on_far_edge_is_still_inside(screen_size):
    star = Star((796, 600), 0)
    star.update(screen_size)
    assert star.pos == (800, 600)


def test_star_does_not_wrap(screen_size):
    star = Star((798, 300), 0)
    star.update(screen_size)
    assert star.expired


def test_expired_stars_removed_in_order(screen_size):
    ninja = Ninja(vel=(0, 0))
    first = Star((100, 100), 0)
    gone_a = Star((799, 100), 0)
    gone_b = Star((799, 200), 0)
    last = Star((200, 200), 0)
    gone_c = Star((1, 1), 180)
    ninja.stars = [first, gone_a, gone_b, last, gone_c]
    ninja.update(screen_size)
    assert ninja.stars == [first, last]


def test_bat_velocity_sampled_in_range():
    rng = random.Random(7)
    for _ in range(50):
        bat = Bat((0, 0), rng=rng)
        assert 0 <= bat.vel.x < 2
        assert 0 <= bat.vel.y < 2
    assert bat.size == (30, 30)


def test_bat_wraps_around_screen(screen_size):
    bat = Bat((799, 599), vel=(1.5, 1.5))
    bat.update(screen_size)
    assert bat.pos.x == pytest.approx(0.5)
    assert bat.pos.y == pytest.approx(0.5)


def test_updates_accept_tuple_screen_size():
    ninja = Ninja()
    ninja.shoot()
    ninja.update((800, 600))
    assert ninja.pos.x == pytest.approx(101)
    assert ninja.stars[0].pos == (104, 300)

    star = Star((5, 5), 0)
    star.vel = pygame.Vector2(-10, -10)
    star.update((800, 600))
    assert star.expired

    bat = Bat((799, 10), vel=(2, 0))
    bat.update((800, 600))
    assert bat.pos == (1, 10)
