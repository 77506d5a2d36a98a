"""Map handle exposing the grid, places, filters and navigation to callers."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
import itertools
import logging
from typing import Literal, TypeVar

from schematic_map import filters
from schematic_map.errors import MapError, Result
from schematic_map.geometry import (
    BlockPlace,
    Category,
    Connection,
    Coord,
    LinePlace,
    NodePlace,
    Place,
)
from schematic_map.grid_graph import BatchResult, GridGraph
from schematic_map.navigation import Location, NavigationEngine, Selection, SelectionState
from schematic_map.places import PlaceRegistry

logger = logging.getLogger(__name__)

T = TypeVar("T")

_map_ids = itertools.count()


class MapDiagram:
    """One schematic map: its own graph, places, labels and navigation state.

    Mutations return a :class:`Result` instead of raising, and every rejected
    mutation is also kept in :attr:`rejected`. Registration is all-or-nothing,
    so a failed call leaves the map exactly as it was.
    """

    def __init__(
        self,
        width: int,
        height: int,
        *,
        map_id: int | None = None,
        title: str = "",
        description: str = "",
    ) -> None:
        self.graph = GridGraph(width, height)
        self.id = next(_map_ids) if map_id is None else map_id
        self.title = title
        self.description = description
        self.places = PlaceRegistry(self.graph, owner_id=self.id)
        self.navigation = NavigationEngine(self.graph, self.places)
        self.rejected: list[tuple[str, MapError]] = []

    @property
    def width(self) -> int:
        return self.graph.width

    @property
    def height(self) -> int:
        return self.graph.height

    def _attempt(self, label: str, action: Callable[[], T]) -> Result[T]:
        try:
            return Result(value=action())
        except MapError as exc:
            logger.warning("Map %s rejected %s: %s (%s)", self.id, label, exc, exc.kind.value)
            self.rejected.append((label, exc))
            return Result(error=exc)

    # --------------- Mutation ---------------------------------

    def add_connection(self, x1: int, y1: int, x2: int, y2: int) -> Result[Connection]:
        return self._attempt(
            f"connection ({x1}, {y1}, {x2}, {y2})",
            lambda: self.graph.add_connection(x1, y1, x2, y2),
        )

    def add_multiple_connections(self, connections: Iterable[Sequence[int]]) -> BatchResult:
        batch = self.graph.add_multiple_connections(connections)
        for index, exc in batch.failures:
            self.rejected.append((f"connection #{index}", exc))
        return batch

    def add_block_place(
        self,
        x: int,
        y: int,
        width: int,
        height: int,
        place_type: str,
        name: str,
        description: str = "",
    ) -> Result[BlockPlace]:
        return self._attempt(
            f"block place '{name}'",
            lambda: self.places.register_block_place(
                x, y, width, height, place_type, name, description
            ),
        )

    def add_line_place(
        self,
        x1: int,
        y1: int,
        x2: int,
        y2: int,
        place_type: str,
        name: str,
        description: str = "",
    ) -> Result[LinePlace]:
        return self._attempt(
            f"line place '{name}'",
            lambda: self.places.register_line_place(x1, y1, x2, y2, place_type, name, description),
        )

    def add_node_place(
        self,
        x: int,
        y: int,
        place_type: str,
        name: str,
        description: str = "",
    ) -> Result[NodePlace]:
        return self._attempt(
            f"node place '{name}'",
            lambda: self.places.register_node_place(x, y, place_type, name, description),
        )

    # --------------- Query ------------------------------------

    def all_places(self) -> list[Place]:
        return self.places.all_places()

    def place(self, place_id: str) -> Place | None:
        return self.places.get(place_id)

    def label_spot(self, place_id: str) -> Coord | None:
        return self.places.label_spot(place_id)

    def get_all_types(self) -> list[str]:
        return filters.distinct_types(self.all_places())

    def get_all_names(self) -> list[str]:
        return filters.distinct_names(self.all_places())

    def ids_by_type(self, place_type: str) -> list[str]:
        return filters.ids_by_type(place_type, self.all_places())

    def ids_by_name(self, name: str) -> list[str]:
        return filters.ids_by_name(name, self.all_places())

    def legend(self) -> dict[Category, list[str]]:
        return filters.legend(self.places.places_by_category())

    def filter_menu(
        self, by: Literal["type", "name"] = "type", options: Sequence[str] | None = None
    ) -> dict[str, list[str]]:
        return filters.filter_menu(self.all_places(), by=by, options=options)

    def find_path(self, source: Location, destination: Location) -> Result[list[Coord]]:
        """Stateless route query; the selection workflow is left untouched."""
        try:
            return Result(value=self.navigation.compute_path(source, destination))
        except MapError as exc:
            logger.info("Map %s: no route from %r to %r: %s", self.id, source, destination, exc)
            return Result(error=exc)

    # --------------- Selection --------------------------------

    @property
    def state(self) -> SelectionState:
        return self.navigation.state

    @property
    def current_selection(self) -> Selection | None:
        return self.navigation.current

    def begin_select_source(self) -> None:
        self.navigation.begin_select_source()

    def begin_select_destination(self) -> None:
        self.navigation.begin_select_destination()

    def select_location(self, location: Location) -> Result[Selection]:
        try:
            return Result(value=self.navigation.select_location(location))
        except MapError as exc:
            logger.info("Map %s: unsupported selection %r", self.id, location)
            return Result(error=exc)

    def navigate(self) -> Result[list[Coord]]:
        try:
            return Result(value=self.navigation.navigate())
        except MapError as exc:
            return Result(error=exc)

    def clear_selection(self) -> None:
        self.navigation.clear_selection()


def create_map(
    width: int,
    height: int,
    *,
    map_id: int | None = None,
    title: str = "",
    description: str = "",
) -> MapDiagram:
    """Build an empty map; raises InvalidDimension for a non-positive size."""
    return MapDiagram(width, height, map_id=map_id, title=title, description=description)
