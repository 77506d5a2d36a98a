"""Data model for the schematic map grid."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import ClassVar, Literal

Coord = tuple[int, int]
Category = Literal["area", "segment", "point"]


def is_grid_int(value: object) -> bool:
    """True for plain ints; bools and floats are not grid coordinates."""
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(eq=False)
class IntersectionNode:
    """One lattice point of the grid."""

    x: int
    y: int
    neighbours: list[IntersectionNode] = field(default_factory=list)
    # BFS bookkeeping, reset around every navigation query.
    visited: bool = False
    parent: IntersectionNode | None = None

    @property
    def coord(self) -> Coord:
        return (self.x, self.y)

    def link(self, other: IntersectionNode) -> None:
        """Make both nodes mutual neighbours; repeated links are ignored."""
        if other not in self.neighbours:
            self.neighbours.append(other)
        if self not in other.neighbours:
            other.neighbours.append(self)

    def __repr__(self) -> str:
        return f"IntersectionNode({self.x}, {self.y}, neighbours={len(self.neighbours)})"


@dataclass(frozen=True)
class Connection:
    """An axis-aligned street segment between two grid coordinates."""

    x1: int
    y1: int
    x2: int
    y2: int

    @property
    def orientation(self) -> Literal["horizontal", "vertical", "point"]:
        if self.x1 != self.x2:
            return "horizontal"
        if self.y1 != self.y2:
            return "vertical"
        return "point"

    @property
    def length(self) -> int:
        return abs(self.x2 - self.x1) + abs(self.y2 - self.y1)

    def cells(self) -> Iterator[Coord]:
        """Yield every lattice coordinate along the segment, low end first."""
        if self.x1 != self.x2:
            for x in range(min(self.x1, self.x2), max(self.x1, self.x2) + 1):
                yield (x, self.y1)
        else:
            for y in range(min(self.y1, self.y2), max(self.y1, self.y2) + 1):
                yield (self.x1, y)


@dataclass(frozen=True, kw_only=True)
class Place(ABC):
    """Common identity shared by every place variant."""

    name: str
    type: str
    description: str = ""
    owner_id: int = 0

    category: ClassVar[Category]
    variant_tag: ClassVar[str]

    @property
    def id(self) -> str:
        coords = ".".join(str(c) for c in self.id_coordinates())
        return f"{self.owner_id}.{self.variant_tag}.{coords}"

    @property
    @abstractmethod
    def anchor(self) -> Coord: ...

    @abstractmethod
    def id_coordinates(self) -> tuple[int, ...]: ...

    @abstractmethod
    def bounding_box(self) -> tuple[int, int, int, int]:
        """Inclusive (x_min, y_min, x_max, y_max) of the cells the place covers."""


@dataclass(frozen=True, kw_only=True)
class BlockPlace(Place):
    """A rectangular area that fits between streets."""

    x: int
    y: int
    width: int
    height: int

    category: ClassVar[Category] = "area"
    variant_tag: ClassVar[str] = "b"

    @property
    def anchor(self) -> Coord:
        return (self.x, self.y)

    def id_coordinates(self) -> tuple[int, ...]:
        return (self.x, self.y)

    def bounding_box(self) -> tuple[int, int, int, int]:
        return (self.x, self.y, self.x + self.width - 1, self.y + self.height - 1)

    def cells(self) -> Iterator[Coord]:
        for y in range(self.y, self.y + self.height):
            for x in range(self.x, self.x + self.width):
                yield (x, y)


@dataclass(frozen=True, kw_only=True)
class LinePlace(Place):
    """A place that runs along a street, such as a named road or transit line."""

    x1: int
    y1: int
    x2: int
    y2: int

    category: ClassVar[Category] = "segment"
    variant_tag: ClassVar[str] = "l"

    @property
    def anchor(self) -> Coord:
        return (self.x1, self.y1)

    def id_coordinates(self) -> tuple[int, ...]:
        return (self.x1, self.y1, self.x2, self.y2)

    def bounding_box(self) -> tuple[int, int, int, int]:
        return (
            min(self.x1, self.x2),
            min(self.y1, self.y2),
            max(self.x1, self.x2),
            max(self.y1, self.y2),
        )


@dataclass(frozen=True, kw_only=True)
class NodePlace(Place):
    """A place sitting on a single intersection."""

    x: int
    y: int

    category: ClassVar[Category] = "point"
    variant_tag: ClassVar[str] = "n"

    @property
    def anchor(self) -> Coord:
        return (self.x, self.y)

    def id_coordinates(self) -> tuple[int, ...]:
        return (self.x, self.y)

    def bounding_box(self) -> tuple[int, int, int, int]:
        return (self.x, self.y, self.x, self.y)
