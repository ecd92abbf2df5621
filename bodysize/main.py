import sys
from pathlib import Path

import pygame

from bodysize import log
from bodysize.debug import DebugHUD
from bodysize.input import InputState
from bodysize.physics.sizer import body_size
from bodysize.rendering.renderer import Renderer
from bodysize.world import World

WIDTH, HEIGHT = 1280, 720
DEFAULT_LEVEL = Path(__file__).resolve().parent / "levels" / "demo.json"


def main(level_path=None):
    log.configure()

    # ====================
    # Pygame init
    # ====================

    pygame.init()
    pygame.display.set_caption("Body Size Viewer")
    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    print("pygame:", pygame.version.ver)

    # ====================
    # Core objects
    # ====================

    clock = pygame.time.Clock()
    input_state = InputState()
    world = World(level_path or DEFAULT_LEVEL)
    renderer = Renderer(WIDTH, HEIGHT, world.ppm)
    hud = DebugHUD()

    selected = 0
    show_bounds = True
    world_space = False

    # ====================
    # Main Loop
    # ====================

    running = True
    while running:
        clock.tick(60)

        # -------------
        # Events
        # -------------
        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                running = False

        actions = input_state.update()

        if actions["next_body"] and world.bodies:
            selected = (selected + 1) % len(world.bodies)
        if actions["toggle_bounds"]:
            show_bounds = not show_bounds
        if actions["world_space"]:
            world_space = not world_space
        if actions["zoom_in"]:
            renderer.zoom_by(1.02)
        if actions["zoom_out"]:
            renderer.zoom_by(1 / 1.02)

        # -------------
        # Draw
        # -------------
        renderer.clear(screen)
        for i, body in enumerate(world.bodies):
            renderer.draw_body(
                screen, body,
                selected=(i == selected),
                show_bounds=show_bounds,
                world_space=world_space,
            )

        # Debug HUD
        body = world.bodies[selected] if world.bodies else None
        size = body_size(body, world.ppm) if body is not None else None
        hud.draw(screen, hud.lines_for(body, size, world.ppm, world_space, clock.get_fps()))

        pygame.display.flip()

    pygame.quit()


if __name__ == "__main__":
    main(sys.argv[1] if len(sys.argv) > 1 else None)
