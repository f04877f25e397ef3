
"""
Rendering helpers for the pygame front end.

- Pre-render the static background (grid lines + panel frame) and cell sprites.
- draw_snapshot() is the engine's render sink: it repaints a cached BOARD
  SURFACE from a session Snapshot. The main loop blits that surface every
  display frame, so the board only gets repainted when the engine asks.
- HUD text surfaces are cached and re-rendered only when the values change.
"""
from __future__ import annotations
import pygame
from dataclasses import dataclass
from typing import Dict, Optional, Tuple
from blockfall_config import CONFIG

WALL = (70, 78, 120)
SETTLED = (153, 153, 153)
MARGIN = 16
PANEL_W = 200

COLORS: Dict[str, Tuple[int,int,int]] = {
    "I": (102,224,255),
    "J": (106,119,255),
    "L": (255,158,94),
    "O": (255,224,102),
    "S": (94,224,142),
    "T": (200,119,255),
    "Z": (255,102,119),
}

@dataclass
class Dims:
    """Pixel geometry of the board and side panel for one grid size."""
    rows: int
    cols: int
    cell: int

    @property
    def board_w(self): return self.cols * self.cell
    @property
    def board_h(self): return self.rows * self.cell
    @property
    def board_x(self): return MARGIN
    @property
    def board_y(self): return MARGIN
    @property
    def panel_x(self): return MARGIN + self.board_w + MARGIN
    @property
    def panel_y(self): return MARGIN
    @property
    def panel_w(self): return PANEL_W
    @property
    def total_w(self): return self.panel_x + PANEL_W + MARGIN
    @property
    def total_h(self): return MARGIN + self.board_h + MARGIN

def compute_dims(config=CONFIG) -> Dims:
    return Dims(int(config["GRID_ROWS"]), int(config["GRID_COLS"]), int(config["CELL_SIZE"]))

@dataclass
class HudCache:
    lines: int = -1
    title: Optional[pygame.Surface] = None
    lines_s: Optional[pygame.Surface] = None
    controls: Optional[list] = None

class RenderAssets:
    """Holds all pre-rendered assets for fast blitting."""
    def __init__(self, dims: Dims, font: pygame.font.Font):
        self.dims = dims
        self.font = font
        self._make_static()
        self._make_cells()
        self.hud = HudCache()
        self.board_surface = pygame.Surface((dims.board_w, dims.board_h), pygame.SRCALPHA)

    # ---------- Static background (grid + panel) ----------
    def _make_static(self):
        d = self.dims
        self.bg = pygame.Surface((d.total_w, d.total_h))
        self.bg.fill((10,13,34))
        grid_col = (40,50,90)
        for x in range(d.cols+1):
            X = d.board_x + x*d.cell
            pygame.draw.line(self.bg, grid_col, (X, d.board_y), (X, d.board_y + d.board_h))
        for y in range(d.rows+1):
            Y = d.board_y + y*d.cell
            pygame.draw.line(self.bg, grid_col, (d.board_x, Y), (d.board_x + d.board_w, Y))
        panel_rect = pygame.Rect(d.panel_x, d.panel_y, d.panel_w, d.board_h)
        pygame.draw.rect(self.bg, (21,25,53), panel_rect)
        pygame.draw.rect(self.bg, (50,60,100), panel_rect, 1)

    # ---------- Cell sprites ----------
    def _make_cells(self):
        c = self.dims.cell
        self.cell_surf: Dict[str, pygame.Surface] = {}
        for key, col in list(COLORS.items()) + [("wall", WALL), ("settled", SETTLED)]:
            s = pygame.Surface((c-2, c-2))
            s.fill(col)
            self.cell_surf[key] = s

    def _is_wall(self, row: int, col: int) -> bool:
        d = self.dims
        return col == 0 or col == d.cols - 1 or row == d.rows - 1

    # ---------- Render sink ----------
    def draw_snapshot(self, snap):
        """Repaint the board surface: walls, settled cells, then the falling part."""
        self.board_surface.fill((0,0,0,0))
        c = self.dims.cell
        for y, row in enumerate(snap.grid):
            for x, v in enumerate(row):
                if v:
                    sprite = self.cell_surf["wall" if self._is_wall(y, x) else "settled"]
                    self.board_surface.blit(sprite, (x*c + 1, y*c + 1))
        if snap.part_mask is None:
            return
        sprite = self.cell_surf[snap.part_shape]
        for r, line in enumerate(snap.part_mask):
            for col, v in enumerate(line):
                by, bx = snap.part_y + r, snap.part_x + col
                if v and 0 <= by < self.dims.rows and 0 <= bx < self.dims.cols:
                    self.board_surface.blit(sprite, (bx*c + 1, by*c + 1))

    # ---------- Per-frame blits ----------
    def blit(self, screen: pygame.Surface, lines: int):
        d = self.dims
        screen.blit(self.bg, (0,0))
        screen.blit(self.board_surface, (d.board_x, d.board_y))
        self.draw_panel_hud(screen, lines)

    def draw_panel_hud(self, screen: pygame.Surface, lines: int):
        d = self.dims
        f = self.font
        if self.hud.title is None:
            self.hud.title = f.render("Blockfall", True, (197,202,233))
        if lines != self.hud.lines:
            self.hud.lines = lines
            self.hud.lines_s = f.render(f"Lines: {lines}", True, (200,210,240))
        screen.blit(self.hud.title, (d.panel_x + 12, d.panel_y + 12))
        screen.blit(self.hud.lines_s, (d.panel_x + 12, d.panel_y + 44))
        if not self.hud.controls:
            self.hud.controls = [
                f.render("Controls:", True, (200,210,240)),
                f.render("←/→ Move", True, (165,175,215)),
                f.render("↓ Soft drop", True, (165,175,215)),
                f.render("↑/Space Rotate", True, (165,175,215)),
                f.render("Enter/Esc Pause", True, (165,175,215)),
            ]
        y = d.panel_y + 90
        for surf in self.hud.controls:
            screen.blit(surf, (d.panel_x + 12, y)); y += 20
