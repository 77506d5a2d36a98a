"""Filter/highlight projections over registered places.

Every function here is a pure read over a list of places; turning the
returned ids into highlighted elements is left to the caller.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping, Sequence
from typing import Literal

from schematic_map.geometry import Category, Place


def ids_by_type(place_type: str, places: Iterable[Place]) -> list[str]:
    return [p.id for p in places if p.type == place_type]


def ids_by_name(name: str, places: Iterable[Place]) -> list[str]:
    return [p.id for p in places if p.name == name]


def _distinct(values: Iterable[str]) -> list[str]:
    return list(dict.fromkeys(values))


def distinct_types(places: Iterable[Place]) -> list[str]:
    """Place types in first-seen order."""
    return _distinct(p.type for p in places)


def distinct_names(places: Iterable[Place]) -> list[str]:
    """Place names in first-seen order."""
    return _distinct(p.name for p in places)


def legend(places_by_category: Mapping[Category, Sequence[Place]]) -> dict[Category, list[str]]:
    """Distinct types per category, for a map legend."""
    return {category: distinct_types(places) for category, places in places_by_category.items()}


_PROJECTIONS: dict[str, tuple[Callable[[str, Iterable[Place]], list[str]], Callable[[Iterable[Place]], list[str]]]] = {
    "type": (ids_by_type, distinct_types),
    "name": (ids_by_name, distinct_names),
}


def filter_menu(
    places: Sequence[Place],
    by: Literal["type", "name"] = "type",
    options: Sequence[str] | None = None,
) -> dict[str, list[str]]:
    """Map each filter option to the ids it highlights.

    Without explicit options every distinct type (or name) becomes an option.
    """
    if by not in _PROJECTIONS:
        raise ValueError(f"Unsupported filter '{by}'. Supported: type, name")
    project, default_options = _PROJECTIONS[by]
    if options is None:
        options = default_options(places)
    return {option: project(option, places) for option in options}
