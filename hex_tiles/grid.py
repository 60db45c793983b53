"""Neighbor graphs over hexagon-shaped maps."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable, Sequence, TypeAlias

import networkx as nx

from .geometry import Cube, Orientation, area, cube_to_planar, distance
from .geometry.neighbors import neighbors_within

logger = logging.getLogger(__name__)

if TYPE_CHECKING:  # pragma: no cover - typing only
    HexGraph: TypeAlias = nx.Graph[Cube]
else:  # pragma: no cover - runtime alias without subscripting
    HexGraph: TypeAlias = nx.Graph


def build_hex_grid(
    radius: int,
    orientation: Orientation | str = Orientation.FLAT,
    *,
    center: Cube | None = None,
    hex_size: float | None = None,
) -> HexGraph:
    """Return the hexagonal map of ``radius`` cells with neighbor edges.

    Nodes are :class:`Cube` coordinates. When ``hex_size`` is given each
    node also carries its planar ``position``.
    """

    origin = center if center is not None else Cube.zero()
    orientation = Orientation.coerce(orientation)
    graph: HexGraph = nx.Graph(radius=radius, orientation=orientation.value, center=origin)

    for coord in area(origin, radius):
        if hex_size is None:
            graph.add_node(coord)
        else:
            graph.add_node(coord, position=cube_to_planar(coord, hex_size, orientation))

    for coord in list(graph.nodes):
        for n in neighbors_within(coord, origin, radius, orientation):
            graph.add_edge(coord, n)

    logger.debug(
        "Built hex grid radius=%s orientation=%s: %d cells, %d edges",
        radius,
        orientation.value,
        graph.number_of_nodes(),
        graph.number_of_edges(),
    )
    return graph


def without_cells(graph: HexGraph, blocked: Iterable[Cube]) -> HexGraph:
    """Return a copy of ``graph`` with ``blocked`` cells removed."""

    trimmed = graph.copy()
    trimmed.remove_nodes_from(list(blocked))
    return trimmed


def grid_path(graph: HexGraph, start: Cube, goal: Cube) -> Sequence[Cube] | None:
    """Return the shortest cell path from ``start`` to ``goal`` using A* search.

    ``None`` is returned when either end is missing or no path exists.
    """

    if start not in graph or goal not in graph:
        return None
    if start == goal:
        return [start]
    try:
        return nx.astar_path(graph, start, goal, heuristic=distance)
    except nx.NetworkXNoPath:
        return None
