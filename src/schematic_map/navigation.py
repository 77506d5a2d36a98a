"""Breadth-first navigation over the grid graph and the selection workflow."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from enum import Enum
import logging

from schematic_map.errors import (
    MissingSourceOrDestination,
    NoPathFound,
    UnsupportedLocation,
)
from schematic_map.geometry import Coord, IntersectionNode, Place
from schematic_map.grid_graph import GridGraph
from schematic_map.places import PlaceRegistry

logger = logging.getLogger(__name__)

Location = Coord | str


class SelectionState(str, Enum):
    IDLE = "Idle"
    AWAITING_SOURCE = "AwaitingSource"
    AWAITING_DESTINATION = "AwaitingDestination"
    READY = "Ready"
    PATH_COMPUTED = "PathComputed"


@dataclass(frozen=True)
class Selection:
    """A picked location, with the place behind it when there is one."""

    coord: Coord
    place: Place | None = None

    @property
    def name(self) -> str:
        return self.place.name if self.place else f"Intersection {self.coord}"

    @property
    def description(self) -> str:
        return self.place.description if self.place else ""


class NavigationEngine:
    """Shortest paths between grid locations, plus per-map selection state."""

    def __init__(self, graph: GridGraph, registry: PlaceRegistry) -> None:
        self.graph = graph
        self.registry = registry
        self.state = SelectionState.IDLE
        self.source: Selection | None = None
        self.destination: Selection | None = None
        self.current: Selection | None = None
        self.last_path: list[Coord] | None = None

    def select(self, location: Location) -> Selection:
        """Resolve a coordinate pair or place id to a grid selection."""
        if isinstance(location, str):
            place = self.registry.get(location)
            if place is None:
                raise UnsupportedLocation(f"no place with id '{location}'")
            return Selection(coord=place.anchor, place=place)

        try:
            x, y = location
        except (TypeError, ValueError):
            raise UnsupportedLocation(f"cannot interpret {location!r} as a location") from None
        if not self.graph.contains(x, y):
            raise UnsupportedLocation(f"{location!r} is not an intersection on this map")
        return Selection(coord=(x, y))

    def resolve(self, location: Location) -> Coord:
        return self.select(location).coord

    def compute_path(self, source: Location, destination: Location) -> list[Coord]:
        """Return the hop-minimal route from source to destination, both included."""
        start_xy = self.resolve(source)
        goal_xy = self.resolve(destination)
        start = self.graph.nodes[start_xy]
        goal = self.graph.nodes[goal_xy]

        self.graph.reset_search_state()
        try:
            path = self._breadth_first(start, goal)
        finally:
            self.graph.reset_search_state()

        if path is None:
            raise NoPathFound(f"no route between {start_xy} and {goal_xy}")
        logger.debug("Route %s -> %s: %d hops", start_xy, goal_xy, len(path) - 1)
        return path

    @staticmethod
    def _breadth_first(start: IntersectionNode, goal: IntersectionNode) -> list[Coord] | None:
        start.visited = True
        queue: deque[IntersectionNode] = deque([start])
        while queue:
            node = queue.popleft()
            if node is goal:
                path: list[Coord] = []
                cursor: IntersectionNode | None = node
                while cursor is not None:
                    path.append(cursor.coord)
                    cursor = cursor.parent
                path.reverse()
                return path
            for neighbour in node.neighbours:
                # Marked on enqueue so each node is queued at most once.
                if not neighbour.visited:
                    neighbour.visited = True
                    neighbour.parent = node
                    queue.append(neighbour)
        return None

    # -------------- Selection workflow -----------------------

    def begin_select_source(self) -> None:
        self.state = SelectionState.AWAITING_SOURCE

    def begin_select_destination(self) -> None:
        self.state = SelectionState.AWAITING_DESTINATION

    def select_location(self, location: Location) -> Selection:
        selection = self.select(location)
        self.current = selection

        if self.state is SelectionState.AWAITING_SOURCE:
            self.source = selection
            self.state = (
                SelectionState.READY if self.destination else SelectionState.AWAITING_DESTINATION
            )
        elif self.state is SelectionState.AWAITING_DESTINATION:
            self.destination = selection
            self.state = SelectionState.READY if self.source else SelectionState.AWAITING_SOURCE
        return selection

    def navigate(self) -> list[Coord]:
        """Route between the picked source and destination, then forget them."""
        if self.source is None or self.destination is None:
            raise MissingSourceOrDestination("select both a source and a destination first")

        source, destination = self.source, self.destination
        self.source = None
        self.destination = None
        self.last_path = None
        try:
            path = self.compute_path(source.coord, destination.coord)
        except NoPathFound:
            self.state = SelectionState.IDLE
            logger.info("No route from %s to %s", source.name, destination.name)
            raise

        self.last_path = path
        self.state = SelectionState.PATH_COMPUTED
        logger.info("Route from %s to %s: %d hops", source.name, destination.name, len(path) - 1)
        return path

    def clear_selection(self) -> None:
        self.source = None
        self.destination = None
        self.current = None
        self.last_path = None
        self.state = SelectionState.IDLE
