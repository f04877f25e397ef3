
import logging
import sys
import pygame
from blockfall_config import CONFIG
from blockfall_input import KEYMAP
from blockfall_overlay import Overlay
from blockfall_render import RenderAssets, compute_dims
from blockfall_session import GameSession


def recreate_window(dims, flags=pygame.DOUBLEBUF):
    try:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags, vsync=1)
    except TypeError:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags)


def main():
    logging.basicConfig(level=CONFIG["LOG_LEVEL"],
                        format="%(asctime)s %(name)s %(levelname)s %(message)s")
    pygame.init()
    pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN, pygame.KEYUP])

    dims = compute_dims(CONFIG)
    screen = recreate_window(dims)
    pygame.display.set_caption("Blockfall")
    font = pygame.font.SysFont(None, 22)
    big_font = pygame.font.SysFont(None, 42)

    render = RenderAssets(dims, font)
    overlay = Overlay(font, big_font)
    session = GameSession(CONFIG, render=render.draw_snapshot)
    render.draw_snapshot(session.snapshot())
    clock = pygame.time.Clock()

    while True:
        # one scheduler pump per display refresh, like an animation frame
        clock.tick(CONFIG["FPS"])

        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                pygame.quit(); sys.exit()
            key = KEYMAP.get(getattr(e, "key", None))
            if key is None:
                continue
            if e.type == pygame.KEYDOWN:
                session.key_down(key)
            elif e.type == pygame.KEYUP:
                session.key_up(key)

        session.scheduler.pump()

        render.blit(screen, session.lines_cleared)
        overlay.draw(screen, session.state, session.running, dims)
        pygame.display.flip()


if __name__ == '__main__':
    main()
