from .directions import Mode, allowed_directions, viable_steps
from .errors import HikeError, OutOfBounds, ParseError, StructureError
from .grid import Coordinate, Direction, Grid, Tile, TileKind, locate_openings, parse_grid, tile_at
