"""
Shared pytest fixtures for schematic_map tests.

Maps are built fresh for every test (function scope) because registration
mutates adjacency and label claims.
"""

import pytest

from schematic_map.diagram import MapDiagram

CAMPUS_CONNECTIONS = [
    (0, 0, 8, 0),
    (0, 0, 0, 4),
    (0, 4, 8, 4),
    (8, 0, 8, 4),
    (2, 0, 2, 4),
    (0, 3, 8, 3),
    (7, 0, 7, 4),
    (3, 0, 3, 4),
    (4, 0, 4, 4),
    (0, 2, 8, 2),
]

CAMPUS_YAML = """\
title: Campus Map
description: Example campus
map_id: 7
size: {width: 10, height: 5}
connections:
  - [0, 0, 8, 0]
  - [0, 0, 0, 4]
  - [0, 4, 8, 4]
  - [8, 0, 8, 4]
  - [2, 0, 2, 4]
places:
  blocks:
    - {x: 0, y: 1, width: 1, height: 1, name: North Park, type: park}
    - {x: 1, y: 3, name: CS Dept., type: building, description: Computer Science}
  lines:
    - {x1: 0, y1: 0, x2: 8, y2: 0, name: Main Street, type: street}
    - {x1: 0, y1: 4, x2: 8, y2: 4, name: Green Mile, type: park}
  nodes:
    - {x: 2, y: 2, name: University Station, type: poi}
filters:
  types: [park, building]
visualizer:
  cell_size: 40
"""


@pytest.fixture
def rectangle_map() -> MapDiagram:
    """
    4x3 map: the perimeter of the grid plus one crossbar along y=1.

    Connections are registered top, right, bottom, left, crossbar; that order
    fixes BFS tie-breaking.
    """
    diagram = MapDiagram(4, 3, map_id=0, title="Rectangle")
    diagram.add_connection(0, 0, 3, 0)
    diagram.add_connection(3, 0, 3, 2)
    diagram.add_connection(0, 2, 3, 2)
    diagram.add_connection(0, 0, 0, 2)
    diagram.add_connection(0, 1, 3, 1)
    return diagram


@pytest.fixture
def campus_map() -> MapDiagram:
    """The 10x5 campus example with seven blocks, three lines and four nodes."""
    diagram = MapDiagram(10, 5, map_id=0, title="Campus Map")
    diagram.add_multiple_connections(CAMPUS_CONNECTIONS)

    diagram.add_block_place(4, 2, 1, 2, "park", "Central Park", "The main park on campus.")
    diagram.add_block_place(0, 1, 1, 1, "park", "North Park", "Smaller park on the north side.")
    diagram.add_block_place(3, 3, 1, 1, "building", "Chem Lab", "Chemistry lab.")
    diagram.add_block_place(1, 3, 1, 1, "building", "CS Dept.", "Department of Computer Science.")
    diagram.add_block_place(1, 2, 1, 1, "building", "Student Centre", "Student centre.")
    diagram.add_block_place(7, 3, 1, 1, "water", "Small Pond", "Small pond south of campus.")
    diagram.add_block_place(6, 3, 1, 1, "park", "John's Park", "Small park with a pond.")

    diagram.add_line_place(0, 0, 8, 0, "street", "Main Street", "Main street north of campus.")
    diagram.add_line_place(4, 0, 4, 4, "street", "University Street", "Major road through campus.")
    diagram.add_line_place(3, 0, 3, 4, "transitLine", "Subway Line 1", "Line 1 of the subway.")

    diagram.add_node_place(3, 2, "poi", "University Station", "Subway station by campus.")
    diagram.add_node_place(3, 4, "poi", "Downtown Station", "Downtown subway station.")
    diagram.add_node_place(1, 1, "specialEvent", "Special Event", "Club fair today 3-4pm.")
    diagram.add_node_place(6, 4, "incident", "Road closure", "Construction ongoing.")
    return diagram


@pytest.fixture
def campus_yaml(tmp_path):
    """Write a small campus map definition and return its path."""
    path = tmp_path / "campus.yaml"
    path.write_text(CAMPUS_YAML)
    return path
