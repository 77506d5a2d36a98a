"""Error kinds and the result wrapper returned by the map facade."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


class ErrorKind(str, Enum):
    INVALID_DIMENSION = "InvalidDimension"
    OUT_OF_BOUNDS = "OutOfBounds"
    NOT_AXIS_ALIGNED = "NotAxisAligned"
    UNKNOWN_TYPE = "UnknownType"
    TYPE_CATEGORY_MISMATCH = "TypeCategoryMismatch"
    INVALID_PLACEMENT = "InvalidPlacement"
    DUPLICATE_PLACE = "DuplicatePlace"
    NO_LABEL_SPOT_FOUND = "NoLabelSpotFound"
    UNSUPPORTED_LOCATION = "UnsupportedLocation"
    MISSING_SOURCE_OR_DESTINATION = "MissingSourceOrDestination"
    NO_PATH_FOUND = "NoPathFound"


class MapError(ValueError):
    """Base class for every recoverable map error."""

    kind: ErrorKind


class InvalidDimension(MapError):
    kind = ErrorKind.INVALID_DIMENSION


class OutOfBounds(MapError):
    kind = ErrorKind.OUT_OF_BOUNDS


class NotAxisAligned(MapError):
    kind = ErrorKind.NOT_AXIS_ALIGNED


class UnknownType(MapError):
    kind = ErrorKind.UNKNOWN_TYPE


class TypeCategoryMismatch(MapError):
    kind = ErrorKind.TYPE_CATEGORY_MISMATCH


class InvalidPlacement(MapError):
    kind = ErrorKind.INVALID_PLACEMENT


class DuplicatePlace(MapError):
    kind = ErrorKind.DUPLICATE_PLACE


class NoLabelSpotFound(MapError):
    kind = ErrorKind.NO_LABEL_SPOT_FOUND


class UnsupportedLocation(MapError):
    kind = ErrorKind.UNSUPPORTED_LOCATION


class MissingSourceOrDestination(MapError):
    kind = ErrorKind.MISSING_SOURCE_OR_DESTINATION


class NoPathFound(MapError):
    kind = ErrorKind.NO_PATH_FOUND


@dataclass(frozen=True)
class Result(Generic[T]):
    """Outcome of a facade operation: a value on success, the error otherwise."""

    value: T | None = None
    error: MapError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def kind(self) -> ErrorKind | None:
        return self.error.kind if self.error is not None else None

    def unwrap(self) -> T:
        """Return the value, re-raising the stored error on failure."""
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]
