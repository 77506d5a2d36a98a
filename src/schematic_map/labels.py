"""Label placement: pick a free grid cell for each place's text label."""

from __future__ import annotations

import logging

from schematic_map.errors import NoLabelSpotFound
from schematic_map.geometry import Coord

logger = logging.getLogger(__name__)

# Fallback order around a point anchor: itself, left, up, up-left.
POINT_CANDIDATE_OFFSETS: tuple[Coord, ...] = ((0, 0), (-1, 0), (0, -1), (-1, -1))


class LabelPlacementResolver:
    """First-come, first-served claims on label cells.

    Claimed cells are never released, so the result of a search depends on
    the order in which places were registered.
    """

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self._claimed: dict[Coord, None] = {}

    @property
    def claimed(self) -> list[Coord]:
        return list(self._claimed)

    def is_claimed(self, cell: Coord) -> bool:
        return cell in self._claimed

    def _free(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height and (x, y) not in self._claimed

    def find_point_spot(self, x: int, y: int) -> Coord:
        for dx, dy in POINT_CANDIDATE_OFFSETS:
            if self._free(x + dx, y + dy):
                return (x + dx, y + dy)
        raise NoLabelSpotFound(f"no free label cell around ({x}, {y})")

    def find_area_spot(self, x_min: int, y_min: int, x_max: int, y_max: int) -> Coord:
        """Scan the inclusive box row by row, then one extra row below it."""
        for y in range(y_min, y_max + 2):
            for x in range(x_min, x_max + 1):
                if self._free(x, y):
                    return (x, y)
        raise NoLabelSpotFound(
            f"no free label cell in box ({x_min}, {y_min})-({x_max}, {y_max})"
        )

    def claim(self, cell: Coord) -> None:
        if cell in self._claimed:
            raise NoLabelSpotFound(f"label cell {cell} is already claimed")
        self._claimed[cell] = None
        logger.debug("Claimed label cell %s", cell)
