import pygame


WIDTH = 800
HEIGHT = 600
FPS = 60

FRICTION = 0.95

NINJA_START = (100, 300)
NINJA_START_VEL = (1, 0)
NINJA_SIZE = (60, 60)
THRUST_SPEED = 2
TURN_RATE = 2  # degrees per tick at full angular speed

STAR_SPEED = 4
STAR_SIZE = (2, 2)

BAT_COUNT = 8
BAT_SPACING = (100, 50)
BAT_SIZE = (30, 30)
BAT_SPEED_RANGE = (0, 2)

PLAYER_IMAGE = "images/player.png"
BAT_IMAGE = "images/bat.png"

STAR_FONT_SIZE = 18
BANNER_FONT_SIZE = 48
BANNER_TEXT = "GAME OVER"

KEY_LEFT = pygame.K_LEFT
KEY_RIGHT = pygame.K_RIGHT
KEY_THRUST = pygame.K_UP
KEY_SHOOT = pygame.K_SPACE
KEY_QUIT = pygame.K_ESCAPE


COLORS = {
    "bg": (255, 255, 255),
    "ninja": (30, 30, 30),
    "star": (90, 90, 90),
    "bat": (80, 40, 110),
    "banner": (0, 0, 0),
}
