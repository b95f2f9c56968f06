import logging
from typing import Iterator, List
from maze_carver.core.grid import Grid, Position
from maze_carver.algo.base import Generator

logger = logging.getLogger(__name__)

class RecursiveBacktracker(Generator):
    PROGRESS_INTERVAL = 1000

    def __init__(self, grid: Grid, seed: int = None, rng=None, progress_interval: int = PROGRESS_INTERVAL):
        super().__init__(grid, seed=seed, rng=rng)
        self.progress_interval = progress_interval
        self.carved_count = 0
        self.backtrack_count = 0
        self.max_stack_depth = 0

    def run(self) -> Iterator[str]:
        grid = self.grid
        rng = self.rng

        # Cursor starts at (0,0) with an empty path
        current: Position = (0, 0)
        stack: List[Position] = []

        while True:
            grid.mark_visited(current)
            available = grid.available_directions(current)

            if available:
                direction = available[rng.randrange(len(available))]
                nxt = grid.carve(current, direction)
                stack.append(current)
                current = nxt
                self.carved_count += 1
                if len(stack) > self.max_stack_depth:
                    self.max_stack_depth = len(stack)
            elif stack:
                # Backtrack
                current = stack.pop()
                self.backtrack_count += 1
            else:
                break

            self.step_count += 1
            # Yield every N steps to keep UI responsive without spamming
            if self.step_count % self.progress_interval == 0:
                yield f"Carving... Carved: {self.carved_count} Stack: {len(stack)}"

        logger.debug(
            "DFS finished on %dx%d: %d walls carved, %d backtracks, max stack %d",
            grid.width, grid.height, self.carved_count,
            self.backtrack_count, self.max_stack_depth,
        )
        yield "Done"


def generate(grid: Grid, random_source=None):
    """Carves `grid` in place into a perfect maze."""
    RecursiveBacktracker(grid, rng=random_source).run_all()
