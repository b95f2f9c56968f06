from array import array
from typing import Iterator, List, Tuple

Position = Tuple[int, int]


class InvalidDimensions(ValueError):
    """Raised when a grid is requested with a non-positive width or height."""


class Grid:
    # Bitmask Constants
    # Each wall is stored once, on the upper/left cell of the pair.
    BOTTOM_WALL = 0b00000001
    RIGHT_WALL  = 0b00000010

    # Flags
    VISITED     = 0b00000100

    # Fresh cell: both owned walls present, not visited
    ALL_WALLS = BOTTOM_WALL | RIGHT_WALL

    # Directions (enumeration order matters for seeded runs)
    RIGHT  = 0
    BOTTOM = 1
    LEFT   = 2
    TOP    = 3
    DIRECTIONS = (RIGHT, BOTTOM, LEFT, TOP)

    # Direction Helpers
    DX = {RIGHT: 1, BOTTOM: 0, LEFT: -1, TOP: 0}
    DY = {RIGHT: 0, BOTTOM: 1, LEFT: 0, TOP: -1}
    DIRECTION_NAMES = {RIGHT: "right", BOTTOM: "bottom", LEFT: "left", TOP: "top"}

    __slots__ = ('width', 'height', 'cells')

    def __init__(self, width: int, height: int):
        for name, value in (("width", width), ("height", height)):
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise InvalidDimensions(f"{name} must be a positive integer, got {value!r}")

        self.width = width
        self.height = height
        # using 'B' (unsigned char) -> 1 byte per cell
        self.cells = array('B', [self.ALL_WALLS]) * (width * height)

    def get_index(self, x: int, y: int) -> int:
        if 0 <= x < self.width and 0 <= y < self.height:
            return y * self.width + x
        raise IndexError(f"Coordinate ({x}, {y}) out of bounds")

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    @staticmethod
    def neighbor_position(pos: Position, direction: int) -> Position:
        """Target coordinate one step in `direction`. No bounds check."""
        x, y = pos
        return (x + Grid.DX[direction], y + Grid.DY[direction])

    def is_direction_passable(self, pos: Position, direction: int) -> bool:
        """
        True if the cursor may move from `pos` in `direction`: the neighbor
        is inside the grid and not yet visited. Wall bits are not consulted.
        """
        nx, ny = self.neighbor_position(pos, direction)
        if not self.in_bounds(nx, ny):
            return False
        return (self.cells[ny * self.width + nx] & self.VISITED) == 0

    def available_directions(self, pos: Position) -> List[int]:
        return [d for d in self.DIRECTIONS if self.is_direction_passable(pos, d)]

    def mark_visited(self, pos: Position):
        x, y = pos
        self.cells[y * self.width + x] |= self.VISITED

    def is_visited(self, x: int, y: int) -> bool:
        return (self.cells[y * self.width + x] & self.VISITED) != 0

    def has_wall(self, x: int, y: int, wall_bit: int) -> bool:
        return (self.cells[y * self.width + x] & wall_bit) != 0

    def carve(self, pos: Position, direction: int) -> Position:
        """
        Removes the wall between `pos` and its neighbor in `direction`.
        RIGHT/BOTTOM clear a bit on `pos`; LEFT/TOP clear the matching bit
        on the neighbor, which owns that wall. Returns the neighbor position.
        """
        x, y = pos
        nx, ny = self.neighbor_position(pos, direction)

        if direction == self.RIGHT:
            self.cells[y * self.width + x] &= ~self.RIGHT_WALL
        elif direction == self.BOTTOM:
            self.cells[y * self.width + x] &= ~self.BOTTOM_WALL
        elif direction == self.LEFT:
            self.cells[ny * self.width + nx] &= ~self.RIGHT_WALL
        elif direction == self.TOP:
            self.cells[ny * self.width + nx] &= ~self.BOTTOM_WALL
        else:
            raise ValueError(f"Unknown direction {direction!r}")

        return (nx, ny)

    def get_open_neighbors(self, x: int, y: int) -> Iterator[Position]:
        """
        Yields (nx, ny) for neighbors joined to (x, y) by a carved passage.
        """
        w = self.width
        val = self.cells[y * w + x]

        if x < w - 1 and not (val & self.RIGHT_WALL):
            yield (x + 1, y)
        if y < self.height - 1 and not (val & self.BOTTOM_WALL):
            yield (x, y + 1)
        if x > 0 and not (self.cells[y * w + x - 1] & self.RIGHT_WALL):
            yield (x - 1, y)
        if y > 0 and not (self.cells[(y - 1) * w + x] & self.BOTTOM_WALL):
            yield (x, y - 1)


def create_maze(width: int, height: int) -> Grid:
    """New grid with every wall present and nothing visited."""
    return Grid(width, height)
