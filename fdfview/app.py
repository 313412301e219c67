"""Interactive wireframe viewer for height maps."""

from __future__ import annotations

import sys
from typing import Callable, Dict, List, Optional, Sequence

from fdfview.colors import WHITE
from fdfview.parsing import Grid, MapFileError, load_map
from fdfview.raster import Image, draw_wireframe
from fdfview.view import WINDOW_HEIGHT, WINDOW_WIDTH, ViewState

WINDOW_TITLE = "WindowToMyKokoro"

LEGEND = (
    "            CONTROLS",
    "     Move Up    |     ^",
    "    Move Down   |     v",
    "    Move Left   |     <",
    "   Move Right   |     >",
    "    Zoom In     |     z",
    "    Zoom Out    |     e",
    "Increase Height |     +",
    "Decrease Height |     -",
    "   Change View  |     i",
    "   Center View  |     p",
    "   Reset  View  |     r",
    "  Exit Program  |     esc",
)
LEGEND_LINE_HEIGHT = 15

KEY_BINDINGS: Dict[str, Callable[[ViewState], None]] = {
    "left": ViewState.move_left,
    "right": ViewState.move_right,
    "down": ViewState.move_down,
    "up": ViewState.move_up,
    "z": ViewState.zoom_in,
    "e": ViewState.zoom_out,
    "p": ViewState.move_center,
    "+": ViewState.depth_inc,
    "-": ViewState.depth_dec,
    "i": ViewState.switch_iso,
    "r": ViewState.center_scale,
}

EXIT_UNREADABLE = 1
EXIT_BAD_FILE = 254


class Viewer:
    """Holds a map, its view state and the rendered image."""

    def __init__(
        self,
        grid: Grid,
        state: Optional[ViewState] = None,
        image: Optional[Image] = None,
    ) -> None:
        self.grid = grid
        self.state = state if state is not None else ViewState()
        self.image = image if image is not None else Image()
        self.projected: Grid = []

    def handle_key(self, key: str) -> bool:
        """Apply the action bound to ``key`` and redraw.

        Returns whether the key had a binding; the image is redrawn either way.
        """
        action = KEY_BINDINGS.get(key)
        if action is not None:
            action(self.state)
        self.render()
        return action is not None

    def render(self) -> Grid:
        """Project the map, draw it into the image and return the projection."""
        self.projected = project_and_draw(self.grid, self.state, self.image)
        self.state.center = False
        self.state.scale = False
        return self.projected


def project_and_draw(grid: Grid, state: ViewState, image: Image) -> Grid:
    from fdfview.view import project

    projected = project(grid, state)
    image.clear()
    draw_wireframe(image, projected)
    return projected


def _pygame_keys(pygame) -> Dict[int, str]:
    return {
        pygame.K_LEFT: "left",
        pygame.K_RIGHT: "right",
        pygame.K_DOWN: "down",
        pygame.K_UP: "up",
        pygame.K_z: "z",
        pygame.K_e: "e",
        pygame.K_p: "p",
        pygame.K_KP_PLUS: "+",
        pygame.K_KP_MINUS: "-",
        pygame.K_i: "i",
        pygame.K_r: "r",
    }


def _present(pygame, screen, font, image: Image) -> None:
    import numpy as np

    data = image.data
    rgb = np.stack(((data >> 16) & 0xFF, (data >> 8) & 0xFF, data & 0xFF), axis=-1)
    surface = pygame.surfarray.make_surface(rgb.astype(np.uint8).transpose(1, 0, 2))
    screen.blit(surface, (0, 0))
    colour = ((WHITE >> 16) & 0xFF, (WHITE >> 8) & 0xFF, WHITE & 0xFF)
    for index, text in enumerate(LEGEND):
        screen.blit(font.render(text, True, colour), (0, index * LEGEND_LINE_HEIGHT))
    pygame.display.flip()


def run(path: str) -> None:
    """Load the map at ``path`` and show it until the window is closed."""
    grid = load_map(path)
    viewer = Viewer(grid)

    import pygame

    pygame.init()
    try:
        screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        pygame.display.set_caption(WINDOW_TITLE)
        font = pygame.font.SysFont("monospace", 14)
        keys = _pygame_keys(pygame)
        viewer.render()
        _present(pygame, screen, font, viewer.image)
        clock = pygame.time.Clock()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYUP and event.key == pygame.K_ESCAPE:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    viewer.handle_key(keys.get(event.key, ""))
                    _present(pygame, screen, font, viewer.image)
            clock.tick(60)
    finally:
        pygame.quit()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command-line entry point: expects exactly one map file."""
    args: List[str] = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        return 0
    try:
        run(args[0])
    except MapFileError:
        print("Error: Invalid file.")
        return EXIT_BAD_FILE
    except OSError:
        return EXIT_UNREADABLE
    return 0


if __name__ == "__main__":
    sys.exit(main())