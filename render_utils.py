import pygame
import config as C


def load_font(size=C.FONT_SIZE, candidates=C.FONT_CANDIDATES):
    """First installed font among candidates; None means pygame's bundled font."""
    installed = set(pygame.font.get_fonts())
    for name in candidates:
        if name is None or name in installed:
            return pygame.font.SysFont(name, size)
    return pygame.font.Font(None, size)


def draw_text(screen, font, line, pos, color=C.OVERLAY_TEXT_COLOR) -> pygame.Rect:
    """Blit one line of text with its top-left at pos, returning the area drawn."""
    return screen.blit(font.render(line, True, color), pos)
