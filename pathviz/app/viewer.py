#!/usr/bin/env python3
"""
Pathfinding Viewer: paint walls, place endpoints, watch the search

- Mouse (pointer tool):  left = place START, right = place END
- Mouse (wall / eraser): left press or drag paints
- Keyboard:
    [1]..[4]     -> select algorithm (DFS / BFS / A* / Dijkstra)
    [SPACE]      -> run
    [R]          -> reset search marks
    [C]          -> clear the whole grid
    [G]          -> toggle diagonal moves
    [P]/[W]/[E]  -> pointer / wall brush / eraser
    [+]/[-]      -> faster / slower
    [Q]/[ESC]    -> quit

Settings: see pathviz.core.config (PATHVIZ_* env vars or --key=value flags).
"""

import logging
import sys
import time
from typing import Dict, List, Optional, Tuple

import pygame

from pathviz.app import editor
from pathviz.core.algorithms import algorithm_names
from pathviz.core.board import Board
from pathviz.core.config import AppConfig, load_config
from pathviz.core.controller import RunController
from pathviz.core.types import Cell, CellState, Grid

LOGGER = logging.getLogger(__name__)

# ---------- Config ----------
PANEL_W = 300            # right band: metrics + buttons
GRID_MARGIN = 16
CELL_SIZE_DEFAULT = 18
MAX_STEPS_PER_FRAME = 250
FONT_NAME = None  # default pygame font

# Colors
GRID_LINE   = (214,218,226)
CARD_BG     = (24,28,36,220)
CARD_HI     = (255,255,255,18)
TEXT_LIGHT  = (230,235,240)
ACCENT_GOLD = (255,210,0)

STATE_COLORS: Dict[CellState, Tuple[int, int, int]] = {
    CellState.EMPTY:   (248, 249, 252),
    CellState.START:   ( 90, 173,  87),
    CellState.END:     (224,   4,   4),
    CellState.WALL:    ( 56,   3,  15),
    CellState.VISITED: ( 12,   4, 188),
    CellState.PATH:    (  0, 255, 200),
}

ALGO_KEYS = {pygame.K_1: 0, pygame.K_2: 1, pygame.K_3: 2, pygame.K_4: 3}
TOOL_KEYS = {pygame.K_p: editor.POINTER, pygame.K_w: editor.WALL_BRUSH, pygame.K_e: editor.ERASER}


# ---------- Simple UI Button ----------
class UIButton:
    def __init__(self, label: str, rect: pygame.Rect, callback, *, togglable: bool = False):
        self.label = label
        self.rect = rect
        self.callback = callback
        self.hover = False
        self.togglable = togglable
        self.active = False  # highlight state

    def set_active(self, value: bool):
        self.active = bool(value)

    def draw(self, screen: pygame.Surface, font: pygame.font.Font):
        base = pygame.Surface(self.rect.size, pygame.SRCALPHA)
        bg_idle   = (36, 40, 48, 220)
        bg_hover  = (46, 50, 60, 230)
        bg_active = (58, 86, 160, 235)
        border_active = (120, 170, 255, 255)

        if self.active and self.togglable:
            bg = bg_active
        elif self.hover:
            bg = bg_hover
        else:
            bg = bg_idle

        pygame.draw.rect(base, bg, base.get_rect(), border_radius=10)
        screen.blit(base, self.rect.topleft)

        if self.active and self.togglable:
            pygame.draw.rect(screen, border_active, self.rect, width=2, border_radius=10)

        text = font.render(self.label, True, (235,238,242))
        screen.blit(text, text.get_rect(center=self.rect.center))

    def handle_mouse(self, event: pygame.event.Event) -> bool:
        if event.type == pygame.MOUSEMOTION:
            self.hover = self.rect.collidepoint(event.pos)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.rect.collidepoint(event.pos):
                self.callback()
                return True
        return False


# ---------- Viewer ----------
class Viewer:
    def __init__(self, board: Board, controller: RunController):
        pygame.init()

        self.board = board
        self.controller = controller
        self.config = controller.config
        self.tool = editor.POINTER
        self.state = "Idle"
        self._last_metrics: Dict[str, object] = {}
        self._last_step_t = 0.0
        self._cell_updates = 0
        self._visited_marks = 0

        self.font_small = pygame.font.Font(FONT_NAME, 14)
        self.font = pygame.font.Font(FONT_NAME, 18)
        self.font_big = pygame.font.Font(FONT_NAME, 22)

        grid = board.grid
        self.cell_size = self._auto_cell_size(grid)
        win_w = GRID_MARGIN*2 + grid.width * self.cell_size + PANEL_W
        win_h = max(GRID_MARGIN*2 + grid.height * self.cell_size, 640)

        self.screen = pygame.display.set_mode((win_w, win_h), pygame.RESIZABLE)
        pygame.display.set_caption("Pathfinding — " + controller.selected)

        self._buttons: List[UIButton] = []
        self._layout(win_w, win_h)

        self.board.subscribe(self._on_cell_change)
        self.clock = pygame.time.Clock()

    # ---------- layout ----------
    def _layout(self, win_w: int, win_h: int):
        """Compute integer cell_size that fits window and place the grid on the left."""
        grid = self.board.grid
        avail_w = max(1, win_w - PANEL_W - 2 * GRID_MARGIN)
        avail_h = max(1, win_h - 2 * GRID_MARGIN)
        self.cell_size = int(max(4, min(avail_w // grid.width, avail_h // grid.height)))

        grid_plate_w = grid.width * self.cell_size + 2 * GRID_MARGIN
        grid_plate_h = grid.height * self.cell_size + 2 * GRID_MARGIN
        top_y = max(0, (win_h - grid_plate_h) // 2)

        self.canvas_rect = pygame.Rect(0, top_y, grid_plate_w, grid_plate_h)
        self._grid_origin = (self.canvas_rect.x + GRID_MARGIN,
                             self.canvas_rect.y + GRID_MARGIN)
        self._right_band = pygame.Rect(self.canvas_rect.right, 0,
                                       max(PANEL_W, win_w - self.canvas_rect.right),
                                       win_h)
        self._build_buttons()

    def _auto_cell_size(self, grid: Grid) -> int:
        target_h = 720 - GRID_MARGIN*2
        return max(6, min(CELL_SIZE_DEFAULT, target_h // grid.height))

    def cell_at(self, pos: Tuple[int, int]) -> Optional[Cell]:
        ox, oy = self._grid_origin
        px, py = pos
        if px < ox or py < oy:
            return None
        cell = ((px - ox) // self.cell_size, (py - oy) // self.cell_size)
        return cell if self.board.grid.in_bounds(cell) else None

    # ---------- loop ----------
    def run(self):
        while True:
            self._handle_events()
            self._tick_algorithm()
            self._draw()
            self.clock.tick(60)

    def _tick_algorithm(self):
        if not self.controller.simulating:
            return
        delay = self.config.step_delay  # read every frame so speed changes apply mid-run
        now = time.time()
        if delay <= 0:
            steps = MAX_STEPS_PER_FRAME
        else:
            elapsed = now - self._last_step_t
            if elapsed < delay:
                return
            steps = min(MAX_STEPS_PER_FRAME, max(1, int(elapsed / delay)))
        self._last_step_t = now
        for _ in range(steps):
            if not self._do_step():
                break

    def _do_step(self) -> bool:
        """Advance one suspension; False once the run is over."""
        res = self.controller.tick()
        if res is not None:
            self._last_metrics = res.metrics
            self.state = "Running"
            return True
        result = self.controller.last_result
        if result is not None:
            self.state = "Done" if result.found else "No path"
            self._last_metrics = dict(self._last_metrics,
                                      path_len=len(result.path),
                                      expanded=result.expanded)
        return False

    def _on_cell_change(self, cell: Cell, state: CellState):
        self._cell_updates += 1
        if state == CellState.VISITED:
            self._visited_marks += 1

    # ---------- events ----------
    def _handle_events(self):
        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                pygame.quit(); sys.exit(0)
            elif e.type == pygame.KEYDOWN:
                self._handle_key(e.key)
            elif e.type == pygame.VIDEORESIZE:
                w, h = max(480, e.w), max(360, e.h)
                self.screen = pygame.display.set_mode((w, h), pygame.RESIZABLE)
                self._layout(w, h)
            elif e.type in (pygame.MOUSEMOTION, pygame.MOUSEBUTTONDOWN):
                if any(b.handle_mouse(e) for b in self._buttons):
                    continue
                self._handle_mouse_edit(e)

    def _handle_key(self, key: int):
        if key in (pygame.K_ESCAPE, pygame.K_q):
            pygame.quit(); sys.exit(0)
        elif key == pygame.K_SPACE:
            self._start_run()
        elif key == pygame.K_r:
            self._reset()
        elif key == pygame.K_c:
            self._clear()
        elif key == pygame.K_g:
            self._toggle_diagonal()
        elif key in (pygame.K_PLUS, pygame.K_EQUALS):
            self._bump_speed(faster=True)
        elif key in (pygame.K_MINUS, pygame.K_UNDERSCORE):
            self._bump_speed(faster=False)
        elif key in ALGO_KEYS:
            self._switch_algo(algorithm_names()[ALGO_KEYS[key]])
        elif key in TOOL_KEYS:
            self._switch_tool(TOOL_KEYS[key])

    def _handle_mouse_edit(self, e: pygame.event.Event):
        # the grid must not change under a running search
        if self.controller.simulating:
            return
        cell = self.cell_at(e.pos)
        if cell is None:
            return
        if e.type == pygame.MOUSEBUTTONDOWN:
            if e.button == 1:
                editor.primary_press(self.board, cell, self.tool)
            elif e.button == 3:
                editor.secondary_press(self.board, cell, self.tool)
        elif e.type == pygame.MOUSEMOTION and e.buttons[0]:
            editor.drag(self.board, cell, self.tool)

    # ---------- actions ----------
    def _start_run(self):
        if self.controller.start():
            self.state = "Running"
            self._last_step_t = time.time()
            self._visited_marks = 0
            self._cell_updates = 0
        self._refresh_active_states()

    def _reset(self):
        if self.controller.reset():
            self.state = "Idle"
            self._last_metrics = {}
        self._refresh_active_states()

    def _clear(self):
        if self.controller.simulating:
            return
        self.board.clear()
        self.state = "Idle"
        self._last_metrics = {}

    def _switch_algo(self, label: str):
        self.controller.select(label)
        pygame.display.set_caption("Pathfinding — " + label)
        self._refresh_active_states()

    def _switch_tool(self, tool: str):
        self.tool = tool
        self._refresh_active_states()

    def _toggle_diagonal(self):
        self.config.diagonal = not self.config.diagonal
        self._refresh_active_states()

    def _bump_speed(self, faster: bool):
        self.config.bump_delay(0.5 if faster else 2.0)

    # ---------- drawing ----------
    def _draw(self):
        self._draw_backdrop()
        self._draw_grid()
        self._draw_metrics_and_buttons()
        pygame.display.flip()

    def _draw_backdrop(self):
        w, h = self.screen.get_size()
        top = (24, 26, 32); bot = (36, 40, 48)
        for y in range(h):
            t = y / max(1, h-1)
            c = (
                int(top[0] + (bot[0]-top[0]) * t),
                int(top[1] + (bot[1]-top[1]) * t),
                int(top[2] + (bot[2]-top[2]) * t),
            )
            pygame.draw.line(self.screen, c, (0, y), (w, y))

    def _draw_grid(self):
        cs = self.cell_size
        ox, oy = self._grid_origin
        grid = self.board.grid
        for row in range(grid.height):
            for col in range(grid.width):
                rect = pygame.Rect(ox + col*cs, oy + row*cs, cs, cs)
                pygame.draw.rect(self.screen, STATE_COLORS[grid.cells[row][col]], rect)
                if cs >= 8:
                    pygame.draw.rect(self.screen, GRID_LINE, rect, 1)

    # ---------- buttons + metrics ----------
    def _build_buttons(self):
        self._buttons.clear()
        rb = self._right_band
        x = rb.x + 16
        y = rb.y + 260  # leaves space for metrics card above
        w = max(160, rb.width - 32)
        h = 30
        gap = 6
        half = (w - 8) // 2

        def add(label, cb, *, togglable=False, store_as: Optional[str] = None, rect=None):
            btn = UIButton(label, rect or pygame.Rect(x, y, w, h), cb, togglable=togglable)
            self._buttons.append(btn)
            if store_as:
                setattr(self, store_as, btn)

        add("Run Simulation", self._start_run, togglable=True, store_as="btn_run"); y += h + gap
        add("Reset", self._reset, rect=pygame.Rect(x, y, half, h))
        add("Clear", self._clear, rect=pygame.Rect(x + half + 8, y, half, h)); y += h + gap
        add("Slower", lambda: self._bump_speed(faster=False), rect=pygame.Rect(x, y, half, h))
        add("Faster", lambda: self._bump_speed(faster=True), rect=pygame.Rect(x + half + 8, y, half, h)); y += h + gap
        add("Diagonal moves", self._toggle_diagonal, togglable=True, store_as="btn_diagonal"); y += h + gap + 6

        self._algo_buttons: Dict[str, UIButton] = {}
        for label in algorithm_names():
            add(label, lambda label=label: self._switch_algo(label), togglable=True)
            self._algo_buttons[label] = self._buttons[-1]
            y += h + gap
        y += 6

        self._tool_buttons: Dict[str, UIButton] = {}
        third = (w - 16) // 3
        for i, tool in enumerate(editor.TOOLS):
            rect = pygame.Rect(x + i * (third + 8), y, third, h)
            add(tool.capitalize(), lambda tool=tool: self._switch_tool(tool), togglable=True, rect=rect)
            self._tool_buttons[tool] = self._buttons[-1]

        self._refresh_active_states()

    def _refresh_active_states(self):
        if hasattr(self, "btn_run"):
            self.btn_run.set_active(self.controller.simulating)
        if hasattr(self, "btn_diagonal"):
            self.btn_diagonal.set_active(self.config.diagonal)
        for label, btn in getattr(self, "_algo_buttons", {}).items():
            btn.set_active(label == self.controller.selected)
        for tool, btn in getattr(self, "_tool_buttons", {}).items():
            btn.set_active(tool == self.tool)

    def _draw_metrics_and_buttons(self):
        rb = self._right_band
        self._refresh_active_states()

        # ---- METRICS CARD (top) ----
        card_h = 240
        card = pygame.Surface((rb.width - 20, card_h), pygame.SRCALPHA)
        pygame.draw.rect(card, CARD_BG, card.get_rect(), border_radius=14)
        hi = pygame.Surface((card.get_width(), 24), pygame.SRCALPHA)
        pygame.draw.rect(hi, CARD_HI, hi.get_rect(), border_radius=14)
        card.blit(hi, (0,0))
        self.screen.blit(card, (rb.x + 10, rb.y + 10))

        x0 = rb.x + 24
        y0 = rb.y + 18

        def line(text, big=False, color=TEXT_LIGHT):
            nonlocal y0
            f = self.font_big if big else self.font
            surf = f.render(text, True, color)
            self.screen.blit(surf, (x0, y0))
            y0 += surf.get_height() + 6

        line("Metrics", big=True, color=ACCENT_GOLD)
        m = self._last_metrics
        line(f"State: {self.state}")
        line(f"Expanded: {m.get('expanded', 0)}")
        line(f"Frontier: {m.get('open_size', 0)}")
        line(f"Visited marks: {self._visited_marks}  Updates: {self._cell_updates}")
        line(f"Path Len: {m.get('path_len', 0)}")
        line(f"Algo: {self.controller.selected}")
        delay_ms = self.config.step_delay * 1000
        line(f"Delay: {delay_ms:.1f} ms  Tool: {self.tool}")

        for b in self._buttons:
            b.draw(self.screen, self.font_small)


def build_board(width: int, height: int) -> Board:
    """Empty grid with START and END on the middle row, a quarter in from each side."""
    board = Board(Grid.empty(width, height))
    row = height // 2
    board.place((width // 4, row), CellState.START)
    if width > 1:
        board.place((width - 1 - width // 4, row), CellState.END)
    return board


# ---------- main ----------
def main(argv: Optional[List[str]] = None):
    try:
        cfg: AppConfig = load_config(argv)
    except ValueError as ex:
        logging.basicConfig(level=logging.INFO)
        LOGGER.error("Bad configuration: %s", ex)
        sys.exit(1)
    logging.basicConfig(level=getattr(logging, cfg.log_level, logging.INFO),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    board = build_board(cfg.grid_width, cfg.grid_height)
    try:
        controller = RunController(board, cfg.run, algorithm=cfg.algorithm)
    except KeyError as ex:
        LOGGER.error("Failed to select algorithm: %s", ex)
        sys.exit(1)
    LOGGER.info("Viewer starting: %dx%d grid, delay %.3fs, diagonal=%s",
                cfg.grid_width, cfg.grid_height, cfg.run.step_delay, cfg.run.diagonal)
    Viewer(board, controller).run()

if __name__ == "__main__":
    main()
