"""Place registry: typed map features anchored onto the grid."""

from __future__ import annotations

import logging

from schematic_map.errors import (
    DuplicatePlace,
    InvalidPlacement,
    NotAxisAligned,
    TypeCategoryMismatch,
    UnknownType,
)
from schematic_map.filters import distinct_names, distinct_types
from schematic_map.geometry import BlockPlace, Category, Coord, LinePlace, NodePlace, Place, is_grid_int
from schematic_map.grid_graph import GridGraph
from schematic_map.labels import LabelPlacementResolver

logger = logging.getLogger(__name__)

TYPE_CATEGORIES: dict[str, Category] = {
    "park": "area",
    "building": "area",
    "water": "area",
    "hospital": "area",
    "street": "segment",
    "transitLine": "segment",
    "poi": "point",
    "specialEvent": "point",
    "incident": "point",
}

CATEGORIES: tuple[Category, ...] = ("area", "segment", "point")


def category_of(place_type: str) -> Category:
    try:
        return TYPE_CATEGORIES[place_type]
    except KeyError:
        raise UnknownType(f"unknown place type '{place_type}'") from None


class PlaceRegistry:
    """Validates, labels and stores places for one map."""

    def __init__(self, graph: GridGraph, owner_id: int = 0) -> None:
        self.graph = graph
        self.owner_id = owner_id
        self.labels = LabelPlacementResolver(graph.width, graph.height)
        self._by_category: dict[Category, list[Place]] = {c: [] for c in CATEGORIES}
        self._by_id: dict[str, Place] = {}
        self._label_spots: dict[str, Coord] = {}

    def __len__(self) -> int:
        return len(self._by_id)

    def _check_type(self, place_type: str, expected: Category) -> None:
        category = category_of(place_type)
        if category != expected:
            raise TypeCategoryMismatch(
                f"type '{place_type}' is a {category} type and cannot be used for a {expected} place"
            )

    def _check_point(self, x: int, y: int) -> None:
        if not self.graph.contains(x, y):
            raise InvalidPlacement(
                f"({x!r}, {y!r}) is not an intersection of the "
                f"{self.graph.width}x{self.graph.height} grid"
            )

    def _add(self, place: Place, label_spot: Coord) -> Place:
        # Only reached once every check has passed.
        self.labels.claim(label_spot)
        self._by_category[place.category].append(place)
        self._by_id[place.id] = place
        self._label_spots[place.id] = label_spot
        logger.debug("Registered %s '%s' as %s, label at %s", place.type, place.name, place.id, label_spot)
        return place

    def register_block_place(
        self,
        x: int,
        y: int,
        width: int,
        height: int,
        place_type: str,
        name: str,
        description: str = "",
    ) -> BlockPlace:
        self._check_type(place_type, "area")
        if not all(is_grid_int(v) for v in (x, y, width, height)):
            raise InvalidPlacement(
                f"block ({x!r}, {y!r}, {width!r}, {height!r}) must use integer coordinates"
            )
        if width <= 0 or height <= 0:
            raise InvalidPlacement(f"block size must be positive, got {width}x{height}")
        if x < 0 or y < 0 or x + width > self.graph.width or y + height > self.graph.height:
            raise InvalidPlacement(
                f"block ({x}, {y}, {width}, {height}) does not fit in the "
                f"{self.graph.width}x{self.graph.height} grid"
            )
        place = BlockPlace(
            x=x, y=y, width=width, height=height,
            name=name, type=place_type, description=description, owner_id=self.owner_id,
        )
        self._reject_duplicate(place)
        spot = self.labels.find_area_spot(*place.bounding_box())
        return self._add(place, spot)

    def register_line_place(
        self,
        x1: int,
        y1: int,
        x2: int,
        y2: int,
        place_type: str,
        name: str,
        description: str = "",
    ) -> LinePlace:
        self._check_type(place_type, "segment")
        self._check_point(x1, y1)
        self._check_point(x2, y2)
        if x1 != x2 and y1 != y2:
            raise NotAxisAligned(f"line place ({x1}, {y1}) -> ({x2}, {y2}) is diagonal")
        place = LinePlace(
            x1=x1, y1=y1, x2=x2, y2=y2,
            name=name, type=place_type, description=description, owner_id=self.owner_id,
        )
        self._reject_duplicate(place)
        spot = self.labels.find_area_spot(*place.bounding_box())
        return self._add(place, spot)

    def register_node_place(
        self,
        x: int,
        y: int,
        place_type: str,
        name: str,
        description: str = "",
    ) -> NodePlace:
        self._check_type(place_type, "point")
        self._check_point(x, y)
        place = NodePlace(
            x=x, y=y, name=name, type=place_type, description=description, owner_id=self.owner_id
        )
        self._reject_duplicate(place)
        spot = self.labels.find_point_spot(x, y)
        return self._add(place, spot)

    def _reject_duplicate(self, place: Place) -> None:
        if place.id in self._by_id:
            raise DuplicatePlace(f"a place with id '{place.id}' is already registered")

    def all_places(self) -> list[Place]:
        return [p for category in CATEGORIES for p in self._by_category[category]]

    def places_by_category(self) -> dict[Category, list[Place]]:
        return {c: list(places) for c, places in self._by_category.items()}

    def get(self, place_id: str) -> Place | None:
        return self._by_id.get(place_id)

    def label_spot(self, place_id: str) -> Coord | None:
        return self._label_spots.get(place_id)

    def distinct_types(self, places: list[Place] | None = None) -> list[str]:
        return distinct_types(self.all_places() if places is None else places)

    def distinct_names(self, places: list[Place] | None = None) -> list[str]:
        return distinct_names(self.all_places() if places is None else places)
