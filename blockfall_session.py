
"""Game session: lifecycle states, key handling, input and gravity ticks"""
from __future__ import annotations
import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Optional, Tuple

from blockfall_collision import collides, try_move, try_rotate
from blockfall_config import validate_config
from blockfall_grid import Grid
from blockfall_input import Key, KeyState, ROTATE_KEYS
from blockfall_piece import Mask, Part
from blockfall_scheduler import Scheduler

log = logging.getLogger(__name__)


class State(Enum):
    INTRO = "intro"
    PLAYING = "playing"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class Snapshot:
    """Everything a renderer needs; equal snapshots draw identically."""
    state: State
    running: bool
    grid: Tuple[Tuple[int, ...], ...]
    part_mask: Optional[Mask]
    part_x: int
    part_y: int
    part_shape: Optional[str]
    lines_cleared: int


class GameSession:
    def __init__(self, config: Optional[Dict[str, Any]] = None, rng=None,
                 clock: Optional[Callable[[], float]] = None,
                 render: Optional[Callable[[Snapshot], None]] = None):
        self.config = validate_config(config)
        self.rng = rng if rng is not None else random.Random(self.config["SEED"])
        self.render_sink = render
        self.rows = self.config["GRID_ROWS"]
        self.cols = self.config["GRID_COLS"]

        self.state = State.INTRO
        self.running = False
        self.key_lock = False
        self.keys = KeyState()
        self.grid = Grid.initialize(self.rows, self.cols)
        self.part: Optional[Part] = None
        self.lines_cleared = 0
        self.pieces_spawned = 0
        self.scheduler = Scheduler(self, self.config["FREQUENCY"], self.config["KEYFRAMES"],
                                   self.config["MIN_FRAME_MS"], clock)

    # ---------- lifecycle ----------
    def start(self):
        if self.state == State.PLAYING:
            return
        self.state = State.PLAYING
        self.running = True
        # a rotate key still held from the start press must be released first
        self.key_lock = self._rotate_held()
        self.grid = Grid.initialize(self.rows, self.cols)
        self.part = None
        self.lines_cleared = 0
        self.pieces_spawned = 0
        self.scheduler.reset()
        log.info("new game on a %dx%d grid", self.rows, self.cols)
        self.render()
        self.scheduler.request()

    def toggle_pause(self):
        if self.state != State.PLAYING:
            return
        self.running = not self.running
        if self.running:
            log.info("resumed")
            self.scheduler.request()
        else:
            log.info("paused")
            self.scheduler.cancel()

    def end_game(self):
        self.state = State.GAME_OVER
        self.running = False
        self.scheduler.cancel()
        log.info("game over after %d pieces, %d lines", self.pieces_spawned, self.lines_cleared)

    # ---------- keys ----------
    def key_down(self, key: Key):
        self.keys.press(key)
        if self.state in (State.INTRO, State.GAME_OVER):
            if key in (Key.CONFIRM, Key.ROTATE_ALT):
                self.start()
        elif key in (Key.CONFIRM, Key.PAUSE):
            self.toggle_pause()

    def key_up(self, key: Key):
        self.keys.release(key)
        if self.state == State.PLAYING and key in ROTATE_KEYS:
            self.key_lock = False

    def _rotate_held(self) -> bool:
        return any(self.keys.is_down(k) for k in ROTATE_KEYS)

    # ---------- ticks ----------
    def input_tick(self):
        if self.part is None:
            self.part = Part.spawn(self.cols, self.rng)
            self.pieces_spawned += 1
            log.debug("spawned %s at x=%d", self.part.shape.name, self.part.x)
            return
        part, keys = self.part, self.keys
        if part.y < 0 and self._rotate_held() and not self.key_lock:
            self.key_lock = True
            reverse = (keys.is_down(Key.ROTATE_ALT) and not keys.is_down(Key.ROTATE)
                       and self.config["ALT_ROTATE_REVERSE"])
            try_rotate(self.grid, part, reverse)
        if keys.is_down(Key.LEFT):
            try_move(self.grid, part, -1, 0)
        if keys.is_down(Key.RIGHT):
            try_move(self.grid, part, 1, 0)
        if keys.is_down(Key.DOWN):
            try_move(self.grid, part, 0, 1)

    def gravity_tick(self) -> bool:
        """Drop the part one row; settle it if it cannot move. True if the game ended."""
        part = self.part
        if part is None:
            return False
        part.translate(0, 1)
        if not collides(self.grid, part):
            return False
        part.translate(0, -1)
        if part.y < 0:
            self.end_game()
            return True
        self.grid.merge(part)
        log.debug("settled %s at (%d, %d)", part.shape.name, part.x, part.y)
        self.lines_cleared += self.grid.clear_completed_rows()
        self.part = None
        return False

    # ---------- output ----------
    def snapshot(self) -> Snapshot:
        p = self.part
        return Snapshot(
            state=self.state,
            running=self.running,
            grid=self.grid.snapshot(),
            part_mask=p.mask if p else None,
            part_x=p.x if p else 0,
            part_y=p.y if p else 0,
            part_shape=p.shape.name if p else None,
            lines_cleared=self.lines_cleared,
        )

    def render(self):
        if self.render_sink is not None:
            self.render_sink(self.snapshot())
