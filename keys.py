import pygame


class InputState:
    """Keys currently held down, fed from KEYDOWN/KEYUP events.

    Kept apart from ``pygame.key.get_pressed()`` so a tick can be driven
    without a display.
    """

    def __init__(self, held=()):
        self._pressed = set(held)

    def is_down(self, key):
        return key in self._pressed

    def on_keydown(self, key):
        self._pressed.add(key)

    def on_keyup(self, key):
        self._pressed.discard(key)

    def process_event(self, event):
        if event.type == pygame.KEYDOWN:
            self.on_keydown(event.key)
        elif event.type == pygame.KEYUP:
            self.on_keyup(event.key)
        elif event.type == pygame.WINDOWFOCUSLOST:
            # releases while unfocused never arrive as KEYUP
            self.clear()

    def clear(self):
        self._pressed.clear()
