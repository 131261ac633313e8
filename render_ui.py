import config as C
from render_utils import draw_text


def selection_overlay_lines(state):
    """Overlay text for the current selection, empty when nothing is selected"""
    selected = state.current_selection()
    if selected is None:
        return []
    return selected.overlay_lines()


def render_selection_overlay(screen, font, state):
    x, y = C.OVERLAY_ORIGIN
    for i, line in enumerate(selection_overlay_lines(state)):
        draw_text(screen, font, line, (x, y + i * C.OVERLAY_LINE_SPACING))
