import pygame
import config as C
from state import GameState


def handle_click(state: GameState, mx: int, my: int, button: int):
    # Only the primary button selects; other buttons are ignored
    if button != C.PRIMARY_BUTTON:
        return
    state.handle_click((mx, my))


def handle_events(state: GameState, events) -> bool:
    """
    Apply one frame's worth of events to the state.
    Returns False once the window has been closed.
    """
    running = True
    for event in events:
        if event.type == pygame.QUIT:
            running = False

        if event.type == pygame.MOUSEBUTTONDOWN:
            mx, my = event.pos
            handle_click(state, mx, my, event.button)
    return running
