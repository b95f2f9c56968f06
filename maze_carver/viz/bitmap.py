import numpy as np
from maze_carver.core.grid import Grid

# Pixel values (grayscale, 8-bit)
WALL = 0
OPEN = 255


def cell_view(grid: Grid) -> np.ndarray:
    """Zero-copy (height, width) uint8 view of the grid cells."""
    return np.frombuffer(grid.cells, dtype=np.uint8).reshape(grid.height, grid.width)


def render(grid: Grid) -> np.ndarray:
    """
    Rasterizes the grid into a (2H+1, 2W+1) uint8 bitmap indexed [row, col].

    Each cell (x, y) covers the 2x2 block at rows 2y+1..2y+2, cols 2x+1..2x+2:

        n#      n = interior (always open)
        ##      right wall, bottom wall, corner

    Row 0 and column 0 close the top and left borders.
    """
    cells = cell_view(grid)
    img = np.full((2 * grid.height + 1, 2 * grid.width + 1), OPEN, dtype=np.uint8)

    # Top and left borders (includes the outer corner at (0,0))
    img[0, :] = WALL
    img[:, 0] = WALL

    # Cell corners
    img[2::2, 2::2] = WALL

    right = img[1::2, 2::2]
    right[(cells & Grid.RIGHT_WALL) != 0] = WALL

    bottom = img[2::2, 1::2]
    bottom[(cells & Grid.BOTTOM_WALL) != 0] = WALL

    return img


def to_rgb(buffer: np.ndarray) -> np.ndarray:
    """(rows, cols, 3) copy of a grayscale bitmap; walls black, passages white."""
    return np.repeat(buffer[:, :, np.newaxis], 3, axis=2)
