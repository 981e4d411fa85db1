import logging

import pygame

from game import World
from keys import InputState
from settings import (
    BANNER_FONT_SIZE,
    BANNER_TEXT,
    BAT_IMAGE,
    BAT_SIZE,
    COLORS,
    FPS,
    HEIGHT,
    KEY_QUIT,
    NINJA_SIZE,
    PLAYER_IMAGE,
    STAR_FONT_SIZE,
    WIDTH,
)

logger = logging.getLogger("ninjastar.main")


def placeholder_sprite(size, color, shape):
    surf = pygame.Surface((int(size[0]), int(size[1])), pygame.SRCALPHA)
    w, h = surf.get_size()
    if shape == "ninja":
        pygame.draw.polygon(surf, color, [(w, h / 2), (0, 0), (w / 4, h / 2), (0, h)])
    else:
        pygame.draw.ellipse(surf, color, surf.get_rect())
    return surf


def load_sprite(path, size, color, shape):
    try:
        image = pygame.image.load(path).convert_alpha()
    except (pygame.error, FileNotFoundError) as exc:
        logger.warning("could not load %s (%s), drawing placeholder", path, exc)
        return placeholder_sprite(size, color, shape)
    return pygame.transform.smoothscale(image, (int(size[0]), int(size[1])))


def draw_ninja(surface, ninja, image):
    # pygame rotates counter-clockwise; heading grows clockwise on screen
    rotated = pygame.transform.rotate(image, -ninja.angle)
    surface.blit(rotated, rotated.get_rect(center=(ninja.pos.x, ninja.pos.y)))


def draw_star(surface, star, glyph):
    surface.blit(glyph, (star.pos.x, star.pos.y))


def draw_bat(surface, bat, image):
    surface.blit(image, (bat.pos.x - bat.size.x / 2, bat.pos.y - bat.size.y / 2))


def draw_game_over(surface, banner, screen_size):
    surface.blit(banner, (screen_size.x / 2, screen_size.y / 2))


def draw_world(surface, world, sprites):
    surface.fill(COLORS["bg"])
    if world.game_over:
        draw_game_over(surface, sprites["banner"], world.screen_size)
    else:
        draw_ninja(surface, world.player, sprites["ninja"])
        for star in world.player.stars:
            draw_star(surface, star, sprites["star"])
    for bat in world.bats:
        draw_bat(surface, bat, sprites["bat"])


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    pygame.init()
    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    pygame.display.set_caption("Ninja Star")
    clock = pygame.time.Clock()
    star_font = pygame.font.SysFont("sans-serif", STAR_FONT_SIZE)
    banner_font = pygame.font.SysFont("sans-serif", BANNER_FONT_SIZE)
    sprites = {
        "ninja": load_sprite(PLAYER_IMAGE, NINJA_SIZE, COLORS["ninja"], "ninja"),
        "bat": load_sprite(BAT_IMAGE, BAT_SIZE, COLORS["bat"], "bat"),
        "star": star_font.render("*", True, COLORS["star"]),
        "banner": banner_font.render(BANNER_TEXT, True, COLORS["banner"]),
    }

    world = World((WIDTH, HEIGHT))
    keys = InputState()
    logger.info("screen size %dx%d", WIDTH, HEIGHT)

    running = True
    while running:
        clock.tick(FPS)

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN and event.key == KEY_QUIT:
                running = False
            else:
                keys.process_event(event)

        world.update(keys)
        draw_world(screen, world, sprites)
        pygame.display.flip()

    pygame.quit()


if __name__ == "__main__":
    main()
