
"""Named keys, pressed flags and the pygame key map"""
from dataclasses import dataclass
from enum import Enum
import pygame


class Key(Enum):
    CONFIRM = "confirm"
    PAUSE = "pause"
    ROTATE = "rotate"
    ROTATE_ALT = "rotate_alt"
    LEFT = "left"
    RIGHT = "right"
    DOWN = "down"


ROTATE_KEYS = (Key.ROTATE, Key.ROTATE_ALT)

KEYMAP = {
    pygame.K_RETURN: Key.CONFIRM,
    pygame.K_KP_ENTER: Key.CONFIRM,
    pygame.K_ESCAPE: Key.PAUSE,
    pygame.K_SPACE: Key.ROTATE_ALT,
    pygame.K_UP: Key.ROTATE,
    pygame.K_LEFT: Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_DOWN: Key.DOWN,
}


@dataclass
class KeyState:
    confirm: bool = False
    pause: bool = False
    rotate: bool = False
    rotate_alt: bool = False
    left: bool = False
    right: bool = False
    down: bool = False

    def press(self, key: Key):
        setattr(self, key.value, True)

    def release(self, key: Key):
        setattr(self, key.value, False)

    def is_down(self, key: Key) -> bool:
        return getattr(self, key.value)
