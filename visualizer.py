# visualizer.py
import pygame
from piano_mapping import OCTAVE_ROWS, get_note_name, is_black_key

# ------- Styling -------
WHITE  = (238,238,238)
BLACK  = (28,28,28)
GREY   = (150,150,150)
DGREY  = (92,92,92)
BG     = (16,16,16)
CYAN   = (80,220,230)
YELLOW = (245,215,70)
RED    = (225,70,70)
GREEN  = (110,220,120)
MAGENTA= (200,90,200)

# (background, text, border) per key state
KEY_COLORS = {
    (False, False): (WHITE, BLACK, GREY),
    (False, True):  (BLACK, WHITE, DGREY),
    (True, False):  (YELLOW, BLACK, CYAN),
    (True, True):   (CYAN, BLACK, YELLOW),
}

# ------- Layout -------
MARGIN     = 16
TITLE_H    = 44
ROW_H      = 120
ROW_GAP    = 12
ROW_PAD    = 10
ROW_TITLE  = 20
KEY_GAP    = 4
INFO_H     = 44


class Visualizer:
    """Draws the keyboard from a KeyboardSnapshot; holds no key state of its own."""
    def __init__(self, surface):
        self.surf = surface
        self.font = pygame.font.SysFont(None, 24)
        self.big_font = pygame.font.SysFont(None, 32)

    def draw(self, snapshot):
        w, _ = self.surf.get_size()
        self.surf.fill(BG)

        y = MARGIN
        self._draw_banner("VIRTUAL PIANO", pygame.Rect(MARGIN, y, w - 2*MARGIN, TITLE_H),
                          CYAN, self.big_font)
        y += TITLE_H + ROW_GAP

        for title, keys in OCTAVE_ROWS:
            self._draw_octave(pygame.Rect(MARGIN, y, w - 2*MARGIN, ROW_H), keys, title, snapshot)
            y += ROW_H + ROW_GAP

        self._draw_banner(self._info_text(snapshot.last_played),
                          pygame.Rect(MARGIN, y, w - 2*MARGIN, INFO_H), GREEN, self.font)
        y += INFO_H + ROW_GAP
        self._draw_banner("Esc or Ctrl+C to quit", pygame.Rect(MARGIN, y, w - 2*MARGIN, INFO_H),
                          YELLOW, self.font)

        pygame.display.flip()

    @staticmethod
    def _info_text(last_played):
        if last_played is None:
            return "Press a key to play..."
        key, freq = last_played
        return f"Last note: {key.upper()} ({get_note_name(key)}) - {freq:.2f} Hz"

    # ---------- Drawing pieces ----------
    def _draw_banner(self, text, rect, color, font):
        pygame.draw.rect(self.surf, color, rect, width=1, border_radius=6)
        img = font.render(text, True, color)
        self.surf.blit(img, img.get_rect(center=rect.center))

    def _draw_octave(self, rect, keys, title, snapshot):
        pygame.draw.rect(self.surf, MAGENTA, rect, width=1, border_radius=6)
        self.surf.blit(self.font.render(title, True, MAGENTA), (rect.x + 8, rect.y + 4))

        inner = pygame.Rect(rect.x + ROW_PAD, rect.y + ROW_TITLE + ROW_PAD // 2,
                            rect.w - 2*ROW_PAD, rect.h - ROW_TITLE - ROW_PAD)
        key_w = inner.w // len(keys)
        for i, key in enumerate(keys):
            key_rect = pygame.Rect(inner.x + i*key_w, inner.y, max(1, key_w - KEY_GAP), inner.h)
            self._draw_key(key_rect, key, snapshot.is_active(key), is_black_key(key))

    def _draw_key(self, rect, key, pressed, black):
        bg, fg, border = KEY_COLORS[(pressed, black)]
        pygame.draw.rect(self.surf, bg, rect, border_radius=6)
        pygame.draw.rect(self.surf, border, rect, width=2, border_radius=6)

        letter = self.big_font.render(key.upper(), True, fg)
        self.surf.blit(letter, letter.get_rect(center=(rect.centerx, rect.centery - 12)))
        name = self.font.render(get_note_name(key), True, RED if pressed else DGREY)
        self.surf.blit(name, name.get_rect(center=(rect.centerx, rect.centery + 16)))
