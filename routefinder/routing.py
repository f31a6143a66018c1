"""Shortest routes over a road map using Dijkstra's algorithm."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass
from itertools import pairwise

from routefinder.minheap import MinHeap
from routefinder.roadmap import LocationError, RoadMap

RESET = "\033[0m"
RED = "\033[31m"
GREEN = "\033[32m"
YELLOW = "\033[33m"
CYAN = "\033[36m"


class NoPathError(LookupError):
    """Raised when no route joins two locations."""


@dataclass(frozen=True)
class Route:
    """A sequence of location indices and the total length travelled."""

    vertices: tuple[int, ...]
    distance: int


def dijkstra(
    road_map: RoadMap, start: int, avoid: int | None = None
) -> tuple[list[float], list[int | None]]:
    """Distances and predecessors from ``start``, never passing through ``avoid``.

    Unreachable locations have distance ``math.inf`` and predecessor ``None``.
    """
    size = len(road_map)
    dist: list[float] = [math.inf] * size
    parent: list[int | None] = [None] * size
    dist[start] = 0
    heap = MinHeap(dist)

    while heap:
        u, _ = heap.extract_min()
        if u == avoid or dist[u] == math.inf:
            continue
        for v, weight in enumerate(road_map.distances[u]):
            if v == avoid or not weight or v not in heap:
                continue
            candidate = dist[u] + weight
            if candidate < dist[v]:
                dist[v] = candidate
                parent[v] = u
                heap.decrease_key(v, candidate)
    return dist, parent


def _route(
    road_map: RoadMap, start: int, end: int, avoid: int | None, message: str
) -> Route:
    dist, parent = dijkstra(road_map, start, avoid)
    if dist[end] == math.inf:
        raise NoPathError(message)
    vertices = [end]
    while (previous := parent[vertices[-1]]) is not None:
        vertices.append(previous)
    vertices.reverse()
    return Route(tuple(vertices), int(dist[end]))


def shortest_path(road_map: RoadMap, start: int, end: int) -> Route:
    """Shortest route between two location indices."""
    places = road_map.places
    return _route(
        road_map, start, end, None, f"No path exists from {places[start]} to {places[end]}."
    )


def alternate_path(road_map: RoadMap, start: int, end: int, avoid: int) -> Route:
    """Shortest route between two location indices that avoids a third."""
    places = road_map.places
    return _route(
        road_map,
        start,
        end,
        avoid,
        f"No alternate path exists from {places[start]} to {places[end]}, "
        f"avoiding {places[avoid]}.",
    )


def path_with_stops(
    road_map: RoadMap, source: str, destination: str, stops: Iterable[str]
) -> Route:
    """Shortest route from ``source`` to ``destination`` visiting ``stops`` in order."""
    try:
        road_map.index_of(source)
        road_map.index_of(destination)
    except LocationError:
        raise LocationError("Invalid source or destination.") from None

    journey = [source, *stops, destination]
    vertices: list[int] = []
    total = 0
    for first, second in pairwise(journey):
        try:
            segment_start = road_map.index_of(first)
            segment_end = road_map.index_of(second)
        except LocationError:
            raise LocationError(
                f"Invalid stop in the journey: {first} or {second}."
            ) from None
        segment = shortest_path(road_map, segment_start, segment_end)
        for vertex in segment.vertices:
            if not vertices or vertices[-1] != vertex:
                vertices.append(vertex)
        total += segment.distance
    return Route(tuple(vertices), total)


def distance_color(distance: int) -> str:
    """ANSI colour code used to display a path of this length."""
    if distance < 10:
        return GREEN
    if distance < 20:
        return YELLOW
    if distance < 50:
        return CYAN
    return RED


def format_route(road_map: RoadMap, route: Route) -> str:
    """Coloured rendering of a route followed by its total distance."""
    places = road_map.places
    hops = []
    for u, v in pairwise(route.vertices):
        length = road_map.distance(u, v)
        hops.append(
            f"{CYAN}{places[u]}{RESET} --({distance_color(length)}{length}{RESET}km)--> "
        )
    last = places[route.vertices[-1]]
    return "".join(hops) + f"{CYAN}{last}{RESET}\nTotal Distance: {route.distance}km"