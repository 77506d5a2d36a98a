"""Grid graph: the lattice of intersections and the streets linking them."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
import logging

from schematic_map.errors import InvalidDimension, MapError, NotAxisAligned, OutOfBounds
from schematic_map.geometry import Connection, Coord, IntersectionNode, is_grid_int

logger = logging.getLogger(__name__)


def _as_segment(segment: object) -> tuple[int, int, int, int]:
    try:
        x1, y1, x2, y2 = segment  # type: ignore[misc]
    except (TypeError, ValueError):
        raise OutOfBounds(f"{segment!r} is not an (x1, y1, x2, y2) segment") from None
    return x1, y1, x2, y2


@dataclass
class BatchResult:
    """Outcome of a best-effort batch of connections."""

    applied: list[Connection] = field(default_factory=list)
    failures: list[tuple[int, MapError]] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures


class GridGraph:
    """Width x height lattice of intersection nodes.

    Adjacency is only ever added, through :meth:`add_connection`. The order of
    each node's neighbour list follows the order connections were registered,
    which fixes how BFS breaks ties between equally short routes.
    """

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise InvalidDimension(f"grid size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.nodes: dict[Coord, IntersectionNode] = {
            (x, y): IntersectionNode(x=x, y=y) for x in range(width) for y in range(height)
        }
        self.connections: list[Connection] = []

    def contains(self, x: int, y: int) -> bool:
        if not (is_grid_int(x) and is_grid_int(y)):
            return False
        return 0 <= x < self.width and 0 <= y < self.height

    def node(self, x: int, y: int) -> IntersectionNode:
        if not self.contains(x, y):
            raise OutOfBounds(f"({x}, {y}) is outside the {self.width}x{self.height} grid")
        return self.nodes[(x, y)]

    def neighbours(self, x: int, y: int) -> list[Coord]:
        return [n.coord for n in self.node(x, y).neighbours]

    def add_connection(self, x1: int, y1: int, x2: int, y2: int) -> Connection:
        """Register a street and link every consecutive pair of nodes along it."""
        if x1 != x2 and y1 != y2:
            raise NotAxisAligned(f"connection ({x1}, {y1}) -> ({x2}, {y2}) is diagonal")
        for x, y in ((x1, y1), (x2, y2)):
            if not self.contains(x, y):
                raise OutOfBounds(
                    f"connection endpoint ({x!r}, {y!r}) is not an intersection "
                    f"of the {self.width}x{self.height} grid"
                )

        connection = Connection(x1=x1, y1=y1, x2=x2, y2=y2)
        cells = list(connection.cells())
        for a, b in zip(cells, cells[1:]):
            self.nodes[a].link(self.nodes[b])

        self.connections.append(connection)
        logger.debug("Added connection %s (%d links)", connection, max(len(cells) - 1, 0))
        return connection

    def add_multiple_connections(
        self, segments: Iterable[Sequence[int]]
    ) -> BatchResult:
        """Apply each segment in order, skipping and reporting the invalid ones."""
        result = BatchResult()
        for index, segment in enumerate(segments):
            try:
                x1, y1, x2, y2 = _as_segment(segment)
                result.applied.append(self.add_connection(x1, y1, x2, y2))
            except MapError as exc:
                logger.warning("Skipping connection #%d %r: %s", index, segment, exc)
                result.failures.append((index, exc))
        return result

    def edges(self) -> list[tuple[Coord, Coord]]:
        """Unique undirected edges, in the order they were first linked."""
        seen: set[frozenset[Coord]] = set()
        out: list[tuple[Coord, Coord]] = []
        for connection in self.connections:
            cells = list(connection.cells())
            for a, b in zip(cells, cells[1:]):
                key = frozenset((a, b))
                if key in seen:
                    continue
                seen.add(key)
                out.append((a, b))
        return out

    def intersections(self) -> list[Coord]:
        """Coordinates of nodes touched by at least one street."""
        return [coord for coord, node in self.nodes.items() if node.neighbours]

    def reset_search_state(self) -> None:
        for node in self.nodes.values():
            node.visited = False
            node.parent = None
