import pygame
import config as C


def render_territory(screen, territory, selected=False):
    """Draw a territory outline, colored by owner or highlighted when selected."""
    color = territory.color(selected)
    for start, end in territory.edges():
        pygame.draw.line(screen, color, start, end, C.TERRITORY_LINE_WIDTH)


def render_territories(screen, state):
    for idx, territory in enumerate(state.territories):
        render_territory(screen, territory, state.is_selected(idx))
