"""
Snake - play on a wrap-around board.

Controls:
    Arrow keys or WASD to steer
    Esc or closing the window quits

Use --headless to watch a random safe-move player in the terminal instead.
"""

import argparse
import random
from typing import Dict, List, Optional

import pygame

from snake_game import (
    BODY,
    DIR_VECS,
    HEAD,
    ITEM,
    Direction,
    SnakeGame,
    TickResult,
    is_reverse,
)

GAME_CONFIG = {
    "board_size": 20,
    "cell_size": 30,
    "tick_ms": 150,
    "fps": 60,
    "background": (0, 0, 0),
    "body_color": (255, 255, 255),
    "head_color": (0, 200, 255),
    "item_color": (255, 0, 0),
    "text_color": (255, 255, 0),
}

KEY_TO_DIR = {
    pygame.K_RIGHT: Direction.RIGHT, pygame.K_d: Direction.RIGHT,
    pygame.K_LEFT: Direction.LEFT, pygame.K_a: Direction.LEFT,
    pygame.K_UP: Direction.UP, pygame.K_w: Direction.UP,
    pygame.K_DOWN: Direction.DOWN, pygame.K_s: Direction.DOWN,
}

STEER_DIRECTIONS = (Direction.RIGHT, Direction.LEFT, Direction.UP, Direction.DOWN)

TEXT_CELLS = {BODY: "o", HEAD: "@", ITEM: "A"}


def key_to_direction(key: int) -> Optional[Direction]:
    return KEY_TO_DIR.get(key)


class TickClock:
    """Accumulates frame time and reports how many ticks are due."""

    def __init__(self, interval_ms: float):
        if interval_ms <= 0:
            raise ValueError("interval_ms must be > 0")
        self.interval_ms = float(interval_ms)
        self.elapsed_ms = 0.0

    def add(self, delta_ms: float) -> int:
        self.elapsed_ms += delta_ms
        due = 0
        while self.elapsed_ms >= self.interval_ms:
            self.elapsed_ms -= self.interval_ms
            due += 1
        return due


def render_text(game: SnakeGame) -> str:
    rows = []
    for row in game.grid():
        rows.append(" ".join(TEXT_CELLS.get(int(c), ".") for c in row))
    rows.append(f"score={game.score} length={game.length} heading={game.heading.name}")
    return "\n".join(rows)


def handle_events(game: SnakeGame, events: List) -> bool:
    """Feed key events to the game. Returns False once the player quits."""
    running = True
    for event in events:
        if event.type == pygame.QUIT:
            running = False
        elif event.type == pygame.KEYDOWN:
            if event.key in (pygame.K_ESCAPE, pygame.K_q):
                running = False
                continue
            direction = key_to_direction(event.key)
            if direction is not None:
                game.queue_direction(direction)
    return running


def pick_safe_direction(game: SnakeGame, rng: random.Random) -> Direction:
    """Random heading that does not run into the body next tick, if one exists."""
    hx, hy = game.head
    # The tail leaves its cell this tick unless the snake is growing.
    blocked = list(game.body)[1:] if game.growth_pending == 0 else list(game.body)
    safe = []
    for direction in STEER_DIRECTIONS:
        if is_reverse(direction, game.heading):
            continue
        dx, dy = DIR_VECS[direction]
        if game.board.wrap((hx + dx, hy + dy)) not in blocked:
            safe.append(direction)
    if not safe:
        return game.heading
    return rng.choice(safe)


def summary(game: SnakeGame) -> Dict:
    return {"score": game.score, "length": game.length, "ticks": game.ticks}


def run_headless(
    game: SnakeGame,
    max_ticks: int,
    seed: Optional[int] = None,
    debug_every: int = 0,
) -> Dict:
    rng = random.Random(seed)
    result = TickResult.CONTINUE
    while game.ticks < max_ticks:
        game.queue_direction(pick_safe_direction(game, rng))
        result = game.advance_tick()
        if debug_every and game.ticks % debug_every == 0:
            print(
                "debug "
                f"tick={game.ticks} result={result.name} head={game.head} "
                f"item={game.item_pos} len={game.length} score={game.score}"
            )
            print(render_text(game))
        if result is TickResult.GAME_OVER:
            break
    info = summary(game)
    print(
        f"Score: {info['score']} | Length: {info['length']} | Ticks: {info['ticks']} | "
        f"Game over: {game.game_over}"
    )
    return info


class Window:
    def __init__(self, board_size: int, cell_size: int, fps: int):
        pygame.init()
        self.cell_size = cell_size
        self.fps = fps
        self.screen = pygame.display.set_mode(
            (board_size * cell_size, board_size * cell_size)
        )
        pygame.display.set_caption("Snake")
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont("arial", max(16, cell_size))

    def _cell_rect(self, cell) -> pygame.Rect:
        x, y = cell
        return pygame.Rect(
            x * self.cell_size, y * self.cell_size, self.cell_size, self.cell_size
        )

    def draw(self, game: SnakeGame) -> None:
        self.screen.fill(GAME_CONFIG["background"])
        for cell in game.body:
            pygame.draw.rect(self.screen, GAME_CONFIG["body_color"], self._cell_rect(cell))
        pygame.draw.rect(self.screen, GAME_CONFIG["head_color"], self._cell_rect(game.head))
        pygame.draw.rect(self.screen, GAME_CONFIG["item_color"], self._cell_rect(game.item_pos))
        pygame.display.set_caption(f"Snake | Score: {game.score}")

    def draw_game_over(self, game: SnakeGame) -> None:
        self.draw(game)
        text = self.font.render(
            f"GAME OVER! Score: {game.score}", True, GAME_CONFIG["text_color"]
        )
        rect = text.get_rect(center=self.screen.get_rect().center)
        self.screen.blit(text, rect)
        pygame.display.set_caption("Snake | GAME OVER")
        pygame.display.flip()

    def tick(self) -> int:
        pygame.display.flip()
        return self.clock.tick(self.fps)

    def wait_for_dismiss(self) -> None:
        while True:
            event = pygame.event.wait()
            if event.type in (pygame.QUIT, pygame.KEYDOWN):
                return

    def close(self) -> None:
        pygame.quit()


def run_window(game: SnakeGame, cell_size: int, tick_ms: float, fps: int) -> Dict:
    window = Window(game.board_size, cell_size, fps)
    clock = TickClock(tick_ms)
    try:
        running = True
        while running:
            running = handle_events(game, pygame.event.get())
            for _ in range(clock.add(window.clock.get_time())):
                if game.advance_tick() is TickResult.GAME_OVER:
                    break
            if game.game_over:
                window.draw_game_over(game)
                window.wait_for_dismiss()
                break
            window.draw(game)
            window.tick()
    finally:
        window.close()

    info = summary(game)
    print(f"Score: {info['score']} | Length: {info['length']} | Ticks: {info['ticks']}")
    return info


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play Snake on a wrap-around board")
    parser.add_argument("--board-size", type=int, default=GAME_CONFIG["board_size"])
    parser.add_argument("--cell-size", type=int, default=GAME_CONFIG["cell_size"])
    parser.add_argument("--tick-ms", type=float, default=GAME_CONFIG["tick_ms"])
    parser.add_argument("--fps", type=int, default=GAME_CONFIG["fps"])
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument(
        "--headless",
        action="store_true",
        help="Run a random safe-move player in the terminal instead of a window",
    )
    parser.add_argument("--max-ticks", type=int, default=1_000)
    parser.add_argument("--debug-every", type=int, default=0)
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> Dict:
    args = parse_args(argv)
    game = SnakeGame(args.board_size, seed=args.seed)
    if args.headless:
        return run_headless(game, args.max_ticks, args.seed, args.debug_every)
    return run_window(game, args.cell_size, args.tick_ms, args.fps)


if __name__ == "__main__":
    main()
