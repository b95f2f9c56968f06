from collections import deque
from typing import Any, Dict
from maze_carver.core.grid import Grid


def count_carved_walls(grid: Grid) -> int:
    """Number of wall bits cleared anywhere in the grid."""
    carved = 0
    for val in grid.cells:
        if not (val & Grid.RIGHT_WALL):
            carved += 1
        if not (val & Grid.BOTTOM_WALL):
            carved += 1
    return carved


def is_perfect(grid: Grid) -> bool:
    """
    True if the carved passages form a spanning tree: every cell reachable
    from (0,0), and no cell reached through a second passage.
    """
    total = grid.width * grid.height
    if count_carved_walls(grid) != total - 1:
        return False

    parent = {(0, 0): None}
    queue = deque([(0, 0)])
    while queue:
        x, y = queue.popleft()
        for nxt in grid.get_open_neighbors(x, y):
            if nxt == parent[(x, y)]:
                continue
            if nxt in parent:
                # Reached twice -> cycle
                return False
            parent[nxt] = (x, y)
            queue.append(nxt)

    return len(parent) == total


class MazeAnalyzer:
    @staticmethod
    def calculate_stats(grid: Grid) -> Dict[str, Any]:
        dead_ends = 0
        corridors = 0
        junctions = 0
        isolated = 0

        for y in range(grid.height):
            for x in range(grid.width):
                exits = sum(1 for _ in grid.get_open_neighbors(x, y))
                if exits == 1: dead_ends += 1
                elif exits == 2: corridors += 1
                elif exits >= 3: junctions += 1
                else: isolated += 1

        total = grid.width * grid.height
        return {
            "dead_ends": dead_ends,
            "corridors": corridors,
            "junctions": junctions,
            "isolated": isolated,
            "dead_end_percent": (dead_ends / total) * 100 if total > 0 else 0,
            "carved_walls": count_carved_walls(grid),
            "perfect": is_perfect(grid),
        }
