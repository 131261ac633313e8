import sys
import pygame
import config as C
from state import GameState
from map_loader import MapLoadError, load_game_state
from input_handler import handle_events
import render_map
import render_ui
from render_utils import load_font


def tick(state: GameState, events, screen, font) -> bool:
    """
    Run one frame: apply input, then draw the map and selection overlay.
    Input is fully applied before anything is drawn.
    """
    running = handle_events(state, events)

    screen.fill(C.BACKGROUND_COLOR)
    render_map.render_territories(screen, state)
    render_ui.render_selection_overlay(screen, font, state)
    return running


def main(map_file=None):
    if map_file is None:
        map_file = sys.argv[1] if len(sys.argv) > 1 else C.MAP_FILE

    # Load before opening a window so bad data aborts startup
    try:
        state = load_game_state(map_file)
    except MapLoadError as e:
        print(f"Failed to load map: {e}")
        sys.exit(1)

    pygame.init()
    screen = pygame.display.set_mode((C.SCREEN_WIDTH, C.SCREEN_HEIGHT))
    pygame.display.set_caption(C.WINDOW_TITLE)
    pygame.font.init()
    font = load_font(C.FONT_SIZE)
    clock = pygame.time.Clock()

    running = True
    while running:
        running = tick(state, pygame.event.get(), screen, font)
        pygame.display.flip()
        clock.tick(C.FPS)

    pygame.quit()


if __name__ == "__main__":
    main()
