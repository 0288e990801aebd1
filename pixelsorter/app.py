import logging
import random
import sys

import pygame

from .config import parse_config
from .engine import AnimationEngine
from .grid import PixelGrid
from .sorters import ALGORITHMS, algorithm_name, load_custom_sorters
from .sound import SoundPlayer
from .visualizer import Visualizer

logger = logging.getLogger(__name__)

STATUS_HEIGHT = 25
UI_BG         = (22, 22, 36)
UI_TEXT       = (215, 215, 228)
UI_SUBTEXT    = (105, 105, 130)
UI_ACCENT     = (255, 55, 55)

KEY_HELP = "R restart  SPACE run  P pause  S step  1-9 algorithm  ESC quit"

STEP_KEYS = (pygame.K_s, pygame.K_RIGHT)
ALGO_KEYS = [pygame.K_1, pygame.K_2, pygame.K_3, pygame.K_4, pygame.K_5,
             pygame.K_6, pygame.K_7, pygame.K_8, pygame.K_9]


def build_font():
    for name in ("Consolas", "Courier New", "Lucida Console"):
        font = pygame.font.SysFont(name, 13)
        if font:
            return font
    return pygame.font.SysFont(None, 13)


def draw_status(screen, font, vis, halted):
    rect = pygame.Rect(0, vis.engine.grid.height, screen.get_width(), STATUS_HEIGHT)
    screen.fill(UI_BG, rect)
    if halted:
        state, color = "HALTED", UI_ACCENT
    else:
        state, color = vis.engine.mode.value.upper(), UI_TEXT
    left = f"{algorithm_name(vis.algorithm)}  |  {state}  |  {len(vis.engine.queue)} queued"
    screen.blit(font.render(left, True, color), (8, rect.y + 6))
    help_img = font.render(KEY_HELP, True, UI_SUBTEXT)
    screen.blit(help_img, (rect.right - help_img.get_width() - 8, rect.y + 6))


def handle_key(vis, key):
    """Map one key press onto the control surface. Returns False to quit."""
    if key == pygame.K_ESCAPE:
        return False
    if key == pygame.K_r:
        vis.restart(True)
    elif key == pygame.K_SPACE:
        vis.run_continuous()
    elif key == pygame.K_p:
        vis.pause()
    elif key in STEP_KEYS:
        vis.single_step()
    elif key in ALGO_KEYS:
        idx = ALGO_KEYS.index(key)
        if idx < len(ALGORITHMS):
            vis.select_algorithm(ALGORITHMS[idx][1])
    return True


def tick_frame(engine, frame, frame_skip, halted):
    """
    Tick the engine on every frame_skip-th frame. A tick that raises stops
    the animation for good; returns the new halted flag.
    """
    if halted or frame % frame_skip != 0:
        return halted
    try:
        engine.tick()
    except Exception:
        logger.exception("Error updating animation, stopping playback")
        return True
    return False


def run(cfg):
    grid = PixelGrid(cfg.width, cfg.height)

    pygame.init()
    screen = pygame.display.set_mode((cfg.width, cfg.height + STATUS_HEIGHT))
    pygame.display.set_caption("PixelSorter")

    sound = SoundPlayer(enabled=cfg.sound)
    sound.start()
    try:
        engine = AnimationEngine(grid, sound=sound, sound_enabled=cfg.sound)
        vis    = Visualizer(engine, cfg.element_count, cfg.max_value,
                            algorithm=cfg.algorithm, rng=random.Random(cfg.seed))
        vis.restart(True)

        font   = build_font()
        clock  = pygame.time.Clock()
        frame  = 0
        halted = False
        running = True
        while running:
            clock.tick(cfg.fps)
            for ev in pygame.event.get():
                if ev.type == pygame.QUIT:
                    running = False
                elif ev.type == pygame.KEYDOWN:
                    running = handle_key(vis, ev.key)

            frame += 1
            halted = tick_frame(engine, frame, cfg.frame_skip, halted)

            screen.blit(grid.surface, (0, 0))
            draw_status(screen, font, vis, halted)
            pygame.display.flip()
    finally:
        sound.stop()
        pygame.quit()
        logger.info("Destroyed")


def main(argv=None):
    logging.basicConfig(level=logging.INFO,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    cfg = parse_config(argv)
    load_custom_sorters(cfg.custom_sorters)
    try:
        run(cfg)
    except (KeyError, ValueError) as e:
        logger.error("Cannot start: %s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
