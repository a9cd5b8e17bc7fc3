import enum
import random
from collections import deque
from typing import Deque, Dict, Optional, Sequence, Tuple

import numpy as np

from snake_board import Board, Cell


class Direction(enum.Enum):
    STOP = "stop"
    RIGHT = "right"
    LEFT = "left"
    UP = "up"
    DOWN = "down"


class TickResult(enum.Enum):
    CONTINUE = "continue"
    ATE_ITEM = "ate_item"
    GAME_OVER = "game_over"


DIR_VECS = {
    Direction.STOP: (0, 0),
    Direction.RIGHT: (1, 0),
    Direction.LEFT: (-1, 0),
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
}

REVERSE = {
    Direction.RIGHT: Direction.LEFT,
    Direction.LEFT: Direction.RIGHT,
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
}

# grid() cell codes
EMPTY, BODY, HEAD, ITEM = 0, 1, 2, 3

MAX_PENDING = 4
START_LIVES = 3
NO_ITEM: Cell = (-1, -1)
DEFAULT_BODY: Tuple[Cell, ...] = ((0, 0), (1, 0), (2, 0), (3, 0))


def is_reverse(a: Direction, b: Direction) -> bool:
    return REVERSE.get(a) is b


class SnakeGame:
    """Tick-driven snake on a wrap-around square board.

    ``body`` is ordered tail first, head last. The driver calls
    :meth:`queue_direction` for input and :meth:`advance_tick` once per
    clock interval; renderers only read ``body``, ``item_pos`` and ``score``.
    """

    def __init__(
        self,
        board_size: int = 20,
        *,
        start_body: Optional[Sequence[Cell]] = None,
        heading: Direction = Direction.RIGHT,
        seed: Optional[int] = None,
    ):
        self.board = Board(board_size)
        if start_body is None:
            start_body = DEFAULT_BODY
        self.start_body = [(int(x), int(y)) for x, y in start_body]
        if not self.start_body:
            raise ValueError("start_body must contain at least one cell")
        if len(set(self.start_body)) != len(self.start_body):
            raise ValueError("start_body cells must be distinct")
        for cell in self.start_body:
            if not self.board.contains(cell):
                raise ValueError(f"start_body cell {cell} is outside the board")
        if not isinstance(heading, Direction) or heading is Direction.STOP:
            raise ValueError(f"Invalid starting heading: {heading!r}")
        self.start_heading = heading
        self.seed(seed)
        self.reset()

    def seed(self, seed: Optional[int] = None) -> Optional[int]:
        self._seed = seed
        self._rng = random.Random(seed)
        return seed

    def reset(self) -> None:
        self.body: Deque[Cell] = deque(self.start_body)
        self.heading = self.start_heading
        self.pending_directions: Deque[Direction] = deque()
        self.growth_pending = 0
        self.score = 0
        self.lives = START_LIVES
        self.ticks = 0
        self.game_over = False
        self.item_pos = NO_ITEM
        self._spawn_item()

    @property
    def board_size(self) -> int:
        return self.board.size

    @property
    def head(self) -> Cell:
        return self.body[-1]

    @property
    def length(self) -> int:
        return len(self.body)

    def _spawn_item(self) -> None:
        # No cap: a full board never terminates.
        while True:
            pos = self.board.random_cell(self._rng)
            if pos not in self.body:
                self.item_pos = pos
                break

    def set_item(self, cell: Cell) -> None:
        cell = (int(cell[0]), int(cell[1]))
        if not self.board.contains(cell):
            raise ValueError(f"Item out of bounds at {cell}.")
        if cell in self.body:
            raise ValueError(f"Item cannot be placed on the snake at {cell}.")
        self.item_pos = cell

    def queue_direction(self, requested) -> bool:
        if self.game_over:
            return False
        if not isinstance(requested, Direction) or requested is Direction.STOP:
            return False
        if len(self.pending_directions) >= MAX_PENDING:
            return False
        self.pending_directions.append(requested)
        return True

    def _update_heading(self) -> None:
        if not self.pending_directions:
            return
        requested = self.pending_directions.popleft()
        if not is_reverse(requested, self.heading):
            self.heading = requested

    def advance_tick(self) -> TickResult:
        if self.game_over:
            return TickResult.GAME_OVER

        self._update_heading()
        dx, dy = DIR_VECS[self.heading]
        hx, hy = self.head

        if self.growth_pending > 0:
            self.growth_pending -= 1
        else:
            self.body.popleft()

        next_head = self.board.wrap((hx + dx, hy + dy))
        self.ticks += 1

        # Checked after the tail moved: the vacated cell is free this tick.
        if next_head in self.body:
            self.game_over = True
            return TickResult.GAME_OVER

        self.body.append(next_head)

        if next_head == self.item_pos:
            self.score += 1
            self.growth_pending += 1
            self._spawn_item()
            return TickResult.ATE_ITEM
        return TickResult.CONTINUE

    def grid(self) -> np.ndarray:
        size = self.board.size
        grid = np.full((size, size), EMPTY, dtype=np.int8)
        for x, y in self.body:
            grid[y, x] = BODY
        if self.body:
            hx, hy = self.head
            grid[hy, hx] = HEAD
        if self.board.contains(self.item_pos):
            ix, iy = self.item_pos
            grid[iy, ix] = ITEM
        return grid

    def info(self) -> Dict:
        return {
            "score": self.score,
            "length": len(self.body),
            "lives": self.lives,
            "heading": self.heading.name,
            "item": self.item_pos,
            "ticks": self.ticks,
            "game_over": self.game_over,
        }
