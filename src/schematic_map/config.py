"""Pydantic models for YAML map definitions."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, model_validator

from schematic_map.diagram import MapDiagram
from schematic_map.places import TYPE_CATEGORIES

logger = logging.getLogger(__name__)


class SizeConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    width: int = Field(ge=1)
    height: int = Field(ge=1)


class _PlaceConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: str
    type: str
    description: str = ""


class BlockPlaceConfig(_PlaceConfig):
    x: int
    y: int
    width: int = 1
    height: int = 1


class LinePlaceConfig(_PlaceConfig):
    x1: int
    y1: int
    x2: int
    y2: int


class NodePlaceConfig(_PlaceConfig):
    x: int
    y: int


class PlacesConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    blocks: list[BlockPlaceConfig] = Field(default_factory=list)
    lines: list[LinePlaceConfig] = Field(default_factory=list)
    nodes: list[NodePlaceConfig] = Field(default_factory=list)


class FiltersConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    types: list[str] | None = None
    names: list[str] | None = None


class VisualizerConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    cell_size: int = Field(default=50, ge=10)
    show_labels: bool = True
    initial_highlight_types: list[str] = Field(default_factory=list)


class MapConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    title: str = ""
    description: str = ""
    map_id: int | None = None
    size: SizeConfig
    connections: list[tuple[int, int, int, int]] = Field(default_factory=list)
    places: PlacesConfig = Field(default_factory=PlacesConfig)
    filters: FiltersConfig = Field(default_factory=FiltersConfig)
    visualizer: VisualizerConfig = Field(default_factory=VisualizerConfig)

    _config_path: Path | None = PrivateAttr(default=None)

    @property
    def config_path(self) -> Path | None:
        return self._config_path

    @model_validator(mode="after")
    def validate_semantics(self) -> MapConfig:
        places = [*self.places.blocks, *self.places.lines, *self.places.nodes]
        for place in places:
            if place.type not in TYPE_CATEGORIES:
                raise ValueError(
                    f"place '{place.name}' has unknown type '{place.type}'. "
                    f"Supported: {', '.join(TYPE_CATEGORIES)}"
                )
        for option in (self.filters.types or []) + self.visualizer.initial_highlight_types:
            if option not in TYPE_CATEGORIES:
                raise ValueError(f"filter option '{option}' is not a known place type")
        if self.filters.names is not None:
            bad = [n for n in self.filters.names if not str(n).strip()]
            if bad:
                raise ValueError("filters.names entries must be non-empty strings")
        return self


def load_config(path: str | Path) -> MapConfig:
    """Load and validate a YAML map definition."""
    path = Path(path)
    with open(path) as f:
        raw = yaml.safe_load(f)
    if raw is None:
        raise ValueError(f"Map definition {path} is empty")

    config = MapConfig.model_validate(raw)
    config._config_path = path
    return config


def build_map(config: MapConfig) -> MapDiagram:
    """Register connections, then blocks, lines and nodes in file order.

    Entries the map rejects are logged and kept in ``diagram.rejected``.
    """
    diagram = MapDiagram(
        config.size.width,
        config.size.height,
        map_id=config.map_id,
        title=config.title,
        description=config.description,
    )
    diagram.add_multiple_connections(config.connections)
    for b in config.places.blocks:
        diagram.add_block_place(b.x, b.y, b.width, b.height, b.type, b.name, b.description)
    for ln in config.places.lines:
        diagram.add_line_place(ln.x1, ln.y1, ln.x2, ln.y2, ln.type, ln.name, ln.description)
    for n in config.places.nodes:
        diagram.add_node_place(n.x, n.y, n.type, n.name, n.description)

    logger.info(
        "Built map '%s' (%dx%d): %d connections, %d places, %d rejected",
        config.title,
        diagram.width,
        diagram.height,
        len(diagram.graph.connections),
        len(diagram.places),
        len(diagram.rejected),
    )
    return diagram
