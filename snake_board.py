import random
from typing import Optional, Tuple

Cell = Tuple[int, int]


def clamp_wrap(coord: int, size: int) -> int:
    """Wrap ``coord`` into ``[0, size)`` as if the board were a torus.

    One step past an edge lands on the opposite edge (``-1 -> size - 1``,
    ``size -> 0``); larger overshoots keep folding, so the result is always
    in range.
    """
    if coord < 0 or coord >= size:
        return coord % size
    return coord


def random_cell(size: int, rng: Optional[random.Random] = None) -> Cell:
    rng = rng or random
    return (rng.randrange(size), rng.randrange(size))


class Board:
    def __init__(self, size: int = 20):
        size = int(size)
        if size <= 0:
            raise ValueError("size must be > 0")
        self._size = size

    @property
    def size(self) -> int:
        return self._size

    @property
    def cells_count(self) -> int:
        return self._size * self._size

    def contains(self, cell: Cell) -> bool:
        x, y = cell
        return 0 <= x < self._size and 0 <= y < self._size

    def wrap(self, cell: Cell) -> Cell:
        x, y = cell
        return (clamp_wrap(x, self._size), clamp_wrap(y, self._size))

    def random_cell(self, rng: Optional[random.Random] = None) -> Cell:
        return random_cell(self._size, rng)

    def __repr__(self) -> str:
        return f"Board(size={self._size})"
