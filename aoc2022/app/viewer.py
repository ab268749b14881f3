# aoc2022/app/viewer.py
#!/usr/bin/env python3
"""
Heightmap Viewer: animates the day 12 climb search step by step.

- Keyboard:
    [F]/[B]      -> forward search (S -> E) / backward search (from E)
    [SPACE]      -> run/pause
    [N]          -> single step
    [R]          -> reset
    [+]/[-]      -> steps/sec
    [Q]/[ESC]    -> quit

Input:
- ENV: AOC_INPUT_DIR=<dir>
- CLI: --input-dir=<dir>
Falls back to the puzzle's example heightmap when day12.txt is missing.
"""

import sys
import time
from typing import List, Optional, Tuple

import pygame
from loguru import logger

from aoc2022.core.dijkstra import UNREACHED, ClimbSearch, climbable, descendable
from aoc2022.core.inputs import input_path
from aoc2022.core.types import Cell, StepResult
from aoc2022.days.day12 import EXAMPLE, HIGHEST, LOWEST, Heightmap

# ---------- Config ----------
PANEL_W = 360            # right band: metrics + buttons
GRID_MARGIN = 16
CELL_SIZE_DEFAULT = 24
FONT_NAME = None  # default pygame font

# Colors
WHITE       = (255,255,255)
BLACK       = (  0,  0,  0)
BLUE        = ( 70,130,180)
RED         = (220, 50, 47)
LOW_GREEN   = ( 34, 90, 52)
HIGH_SNOW   = (236,236,228)
NEON_CYAN_A = (0,150,255,110)
NEON_MAG_A  = (255,0,120,90)
NEON_MINT   = (0,255,200)

CARD_BG     = (24,28,36,220)
TEXT_LIGHT  = (230,235,240)
ACCENT_GOLD = (255,210,0)

FORWARD = "Forward"
BACKWARD = "Backward"


def elevation_color(h: int) -> Tuple[int, int, int]:
    t = (h - LOWEST) / max(1, HIGHEST - LOWEST)
    return (
        int(LOW_GREEN[0] + (HIGH_SNOW[0]-LOW_GREEN[0]) * t),
        int(LOW_GREEN[1] + (HIGH_SNOW[1]-LOW_GREEN[1]) * t),
        int(LOW_GREEN[2] + (HIGH_SNOW[2]-LOW_GREEN[2]) * t),
    )


def load_heightmap() -> Heightmap:
    path = input_path(12)
    if path.exists():
        logger.info(f"Loading heightmap from {path}")
        return Heightmap.from_file(path)
    logger.info(f"{path} not found, showing the example heightmap")
    return Heightmap.from_lines(EXAMPLE)


def make_search(hm: Heightmap, direction: str) -> ClimbSearch:
    if direction == BACKWARD:
        return ClimbSearch(hm.map, hm.goal, descendable, name="Dijkstra (from E)")
    return ClimbSearch(hm.map, hm.start, climbable, goal=hm.goal, name="Dijkstra (S -> E)")


def nearest_trailhead(hm: Heightmap, search: ClimbSearch) -> Optional[Cell]:
    """Lowest cell closest to the goal once a backward search has finished."""
    best, best_cell = UNREACHED, None
    for c, h in hm.map.iter_with_position():
        if h == LOWEST and search.distances[c] < best:
            best, best_cell = search.distances[c], c
    return best_cell


# ---------- Simple UI Button ----------
BUTTON_IDLE   = (36, 40, 48)
BUTTON_HOVER  = (46, 50, 60)
BUTTON_ACTIVE = (58, 86, 160)
BUTTON_RING   = (120, 170, 255)


class UIButton:
    """Panel button; `active` marks the selected search direction or a running search."""

    def __init__(self, label: str, rect: pygame.Rect, callback, *, togglable: bool = False):
        self.label = label
        self.rect = rect
        self.callback = callback
        self.togglable = togglable
        self.hover = False
        self.active = False

    def set_active(self, value: bool):
        self.active = self.togglable and bool(value)

    def draw(self, screen: pygame.Surface, font: pygame.font.Font):
        fill = BUTTON_ACTIVE if self.active else BUTTON_HOVER if self.hover else BUTTON_IDLE
        pygame.draw.rect(screen, fill, self.rect, border_radius=10)
        if self.active:
            pygame.draw.rect(screen, BUTTON_RING, self.rect, width=2, border_radius=10)
        text = font.render(self.label, True, TEXT_LIGHT)
        screen.blit(text, text.get_rect(center=self.rect.center))

    def handle_mouse(self, event: pygame.event.Event):
        inside = self.rect.collidepoint(event.pos)
        if event.type == pygame.MOUSEMOTION:
            self.hover = inside
        elif event.button == 1 and inside:
            self.callback()


# ---------- Viewer ----------
class Viewer:
    def __init__(self, hm: Heightmap):
        pygame.init()

        self.hm = hm
        self.font_small = pygame.font.Font(FONT_NAME, 14)
        self.font = pygame.font.Font(FONT_NAME, 18)
        self.font_big = pygame.font.Font(FONT_NAME, 22)

        self.cell_size = self._auto_cell_size()
        grid_px_w = GRID_MARGIN*2 + hm.map.width * self.cell_size
        grid_px_h = GRID_MARGIN*2 + hm.map.height * self.cell_size
        win_w = grid_px_w + PANEL_W
        win_h = max(grid_px_h, 520)

        self.screen = pygame.display.set_mode((win_w, win_h), pygame.RESIZABLE)
        pygame.display.set_caption("Hill Climbing: Heightmap Search")

        self._buttons: list[UIButton] = []
        self._layout(win_w, win_h)

        self.open_set: set[Cell] = set()
        self.closed_set: set[Cell] = set()
        self.path: List[Cell] = []

        self.running = False
        self.clock = pygame.time.Clock()
        self.steps_per_sec = 8
        self._last_step_t = 0.0
        self.state = "Idle"
        self.direction = FORWARD

        self.search = make_search(self.hm, self.direction)
        self._reset_overlays()

    # ---------- layout ----------
    def _layout(self, win_w: int, win_h: int):
        """Compute integer cell_size that fits window and center the grid."""
        avail_w = max(1, win_w - PANEL_W - 2 * GRID_MARGIN)
        avail_h = max(1, win_h - 2 * GRID_MARGIN)
        self.cell_size = max(4, min(avail_w // self.hm.map.width, avail_h // self.hm.map.height))

        grid_plate_w = self.hm.map.width * self.cell_size + 2 * GRID_MARGIN
        grid_plate_h = self.hm.map.height * self.cell_size + 2 * GRID_MARGIN
        left_x = max(0, (win_w - (grid_plate_w + PANEL_W)) // 2)
        top_y  = max(0, (win_h - grid_plate_h) // 2)

        self.canvas_rect = pygame.Rect(left_x, top_y, grid_plate_w, grid_plate_h)
        self._grid_origin = (self.canvas_rect.x + GRID_MARGIN,
                             self.canvas_rect.y + GRID_MARGIN)
        self._right_band = pygame.Rect(self.canvas_rect.right, 0,
                                       max(PANEL_W, win_w - self.canvas_rect.right),
                                       win_h)
        self._build_buttons()

    def _auto_cell_size(self) -> int:
        target_h = 720 - GRID_MARGIN*2
        return max(4, min(CELL_SIZE_DEFAULT, target_h // self.hm.map.height))

    def run(self):
        while True:
            self._handle_events()
            if self.running:
                self._tick_search()
            self._draw()
            self.clock.tick(60)

    def _tick_search(self):
        t0 = time.time()
        if t0 - self._last_step_t >= 1.0 / max(1, self.steps_per_sec):
            self._last_step_t = t0
            self._do_step()

    def _do_step(self):
        res: StepResult = self.search.step()
        self.open_set.update(res.opened)
        self.closed_set.update(res.closed)
        if res.current is not None:
            self.open_set.discard(res.current)
        if res.path is not None:
            self.path = res.path
        if res.status == "done":
            self.state = "Done"; self.running = False
            if self.direction == BACKWARD and not self.path:
                trailhead = nearest_trailhead(self.hm, self.search)
                if trailhead is not None:
                    self.path = list(reversed(self.search.path_to(trailhead)))
        elif res.status == "no_path":
            self.state = "No path"; self.running = False
        else:
            self.state = "Running" if self.running else "Paused"
        if res.metrics:
            self._last_metrics = dict(res.metrics, path_len=max(res.metrics["path_len"], len(self.path)))
        self._refresh_active_states()

    def _apply_resize(self, req_w: int, req_h: int):
        new_w, new_h = max(PANEL_W + 200, req_w), max(320, req_h)
        self.screen = pygame.display.set_mode((new_w, new_h), pygame.RESIZABLE)
        self._layout(new_w, new_h)

    def _handle_events(self):
        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                pygame.quit(); sys.exit(0)
            elif e.type == pygame.KEYDOWN:
                if e.key in (pygame.K_ESCAPE, pygame.K_q):
                    pygame.quit(); sys.exit(0)
                elif e.key == pygame.K_SPACE:
                    self._toggle_run()
                elif e.key == pygame.K_r:
                    self._reset()
                elif e.key == pygame.K_n:
                    self._do_step()
                elif e.key in (pygame.K_PLUS, pygame.K_EQUALS, pygame.K_KP_PLUS):
                    self._bump_speed(+1)
                elif e.key in (pygame.K_MINUS, pygame.K_UNDERSCORE, pygame.K_KP_MINUS):
                    self._bump_speed(-1)
                elif e.key == pygame.K_f:
                    self._switch_direction(FORWARD)
                elif e.key == pygame.K_b:
                    self._switch_direction(BACKWARD)
            elif e.type == pygame.VIDEORESIZE:
                self._apply_resize(e.w, e.h)
            elif e.type in (pygame.MOUSEMOTION, pygame.MOUSEBUTTONDOWN):
                for b in self._buttons:
                    b.handle_mouse(e)

    def _switch_direction(self, direction: str):
        self.direction = direction
        self.search = make_search(self.hm, direction)
        self._reset()

    def _reset_overlays(self):
        self.open_set.clear()
        self.closed_set.clear()
        self.path = []
        self._last_metrics = {
            "algo": self.search.name,
            "popped": 0,
            "open_size": 0,
            "closed_count": 0,
            "path_len": 0,
            "total_cost": None,
        }

    def _reset(self):
        self.running = False
        self.state = "Idle"
        self.search.reset()
        self._reset_overlays()
        self._refresh_active_states()

    def _toggle_run(self):
        if self.state in ("Done", "No path"):
            return
        self.running = not self.running
        self.state = "Running" if self.running else "Paused"
        self._refresh_active_states()

    def _bump_speed(self, dv: int):
        self.steps_per_sec = int(max(1, min(120, self.steps_per_sec + dv)))

    # ---------- drawing ----------
    def _draw(self):
        self.screen.fill((24, 26, 32))
        self._draw_grid()
        self._draw_metrics_and_buttons()
        pygame.display.flip()

    def _cell_rect(self, cell: Cell) -> pygame.Rect:
        cs = self.cell_size
        ox, oy = self._grid_origin
        col, row = cell
        return pygame.Rect(ox + col*cs, oy + row*cs, cs, cs)

    def _draw_grid(self):
        cs = self.cell_size
        for cell, h in self.hm.map.iter_with_position():
            rect = self._cell_rect(cell)
            pygame.draw.rect(self.screen, elevation_color(h), rect)
            if cs >= 12:
                pygame.draw.rect(self.screen, BLACK, rect, 1)

        closed = pygame.Surface((cs, cs), pygame.SRCALPHA); closed.fill(NEON_MAG_A)
        for cell in self.closed_set:
            self.screen.blit(closed, self._cell_rect(cell).topleft)
        opened = pygame.Surface((cs, cs), pygame.SRCALPHA); opened.fill(NEON_CYAN_A)
        for cell in self.open_set:
            self.screen.blit(opened, self._cell_rect(cell).topleft)

        if len(self.path) >= 2:
            pts = [self._cell_rect(c).center for c in self.path]
            pygame.draw.lines(self.screen, NEON_MINT, False, pts, max(2, cs // 5))

        self._draw_badge(self.hm.start, BLUE, "S")
        self._draw_badge(self.hm.goal, RED, "E")

    def _draw_badge(self, cell: Cell, color: Tuple[int,int,int], label: str):
        center = self._cell_rect(cell).center
        pygame.draw.circle(self.screen, color, center, max(3, self.cell_size//2 - 2))
        if self.cell_size >= 14:
            txt = self.font_small.render(label, True, WHITE)
            self.screen.blit(txt, txt.get_rect(center=center))

    # ---------- buttons + metrics ----------
    def _build_buttons(self):
        self._buttons.clear()
        rb = self._right_band
        x = rb.x + 16
        y = rb.y + 230  # leaves space for metrics card above
        w = max(160, rb.width - 32)
        h = 36
        gap = 10

        def add(label, cb, *, togglable=False, store_as: str | None = None):
            btn = UIButton(label, pygame.Rect(x, y, w, h), cb, togglable=togglable)
            self._buttons.append(btn)
            if store_as:
                setattr(self, store_as, btn)

        add("Run / Pause", self._toggle_run, togglable=True, store_as="btn_run"); y += h + gap
        add("Step Once", self._do_step); y += h + gap
        add("Reset", self._reset);       y += h + gap

        half = (w - 8) // 2
        self._buttons.append(UIButton("Speed -", pygame.Rect(x, y, half, h), lambda: self._bump_speed(-1)))
        self._buttons.append(UIButton("Speed +", pygame.Rect(x + half + 8, y, half, h), lambda: self._bump_speed(+1)))
        y += h + gap

        add("Forward: S -> E", lambda: self._switch_direction(FORWARD), togglable=True, store_as="btn_fwd"); y += h + gap
        add("Backward: from E", lambda: self._switch_direction(BACKWARD), togglable=True, store_as="btn_bwd")

        self._refresh_active_states()

    def _refresh_active_states(self):
        if hasattr(self, "btn_run"):
            self.btn_run.set_active(getattr(self, "running", False))
        direction = getattr(self, "direction", FORWARD)
        if hasattr(self, "btn_fwd"):
            self.btn_fwd.set_active(direction == FORWARD)
        if hasattr(self, "btn_bwd"):
            self.btn_bwd.set_active(direction == BACKWARD)

    def _panel_lines(self) -> List[Tuple[str, pygame.font.Font, Tuple[int, int, int]]]:
        m = self._last_metrics
        rows = [
            f"Popped: {m.get('popped', 0)}",
            f"Open: {m.get('open_size', 0)}",
            f"Closed: {m.get('closed_count', 0)}",
            f"Path Len: {m.get('path_len', 0)}",
        ]
        if m.get("total_cost") is not None:
            rows.append(f"Total Cost: {m['total_cost']}")
        rows += ["", f"{self.direction} / {self.state}", f"Speed: {self.steps_per_sec} steps/s"]
        return [("Metrics", self.font_big, ACCENT_GOLD)] + [(r, self.font, TEXT_LIGHT) for r in rows]

    def _draw_metrics_and_buttons(self):
        rb = self._right_band
        card = pygame.Rect(rb.x + 10, rb.y + 10, rb.width - 20, 210)
        pygame.draw.rect(self.screen, CARD_BG, card, border_radius=14)

        y = card.y + 8
        for text, font, color in self._panel_lines():
            surf = font.render(text, True, color)
            self.screen.blit(surf, (card.x + 14, y))
            y += surf.get_height() + 6

        for b in self._buttons:
            b.draw(self.screen, self.font)


# ---------- main ----------
def main():
    Viewer(load_heightmap()).run()


if __name__ == "__main__":
    main()
