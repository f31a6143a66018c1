import math
from itertools import pairwise

import pytest

from routefinder.roadmap import LocationError, RoadMap
from routefinder.routing import (
    CYAN,
    GREEN,
    RED,
    RESET,
    YELLOW,
    NoPathError,
    Route,
    alternate_path,
    dijkstra,
    distance_color,
    format_route,
    path_with_stops,
    shortest_path,
)


@pytest.fixture
def road_map():
    places = ["A", "B", "C", "D", "E"]
    distances = [
        [0, 5, 20, 0, 0],
        [5, 0, 5, 0, 0],
        [20, 5, 0, 3, 0],
        [0, 0, 3, 0, 0],
        [0, 0, 0, 0, 0],
    ]
    return RoadMap(places, distances)


def _length(road_map, route):
    return sum(road_map.distance(u, v) for u, v in pairwise(route.vertices))


def test_shortest_path_takes_cheaper_detour(road_map):
    route = shortest_path(road_map, 0, 2)
    assert route.vertices == (0, 1, 2)
    assert route.distance == _length(road_map, route)


def test_shortest_path_endpoints_and_consistency(road_map):
    route = shortest_path(road_map, 0, 3)
    assert route.vertices[0] == 0
    assert route.vertices[-1] == 3
    assert route.distance == _length(road_map, route)
    assert all(road_map.distance(u, v) for u, v in pairwise(route.vertices))


def test_shortest_path_is_symmetric_in_length(road_map):
    forward = shortest_path(road_map, 0, 3)
    backward = shortest_path(road_map, 3, 0)
    assert forward.distance == backward.distance
    assert forward.vertices == tuple(reversed(backward.vertices))


def test_shortest_path_to_self(road_map):
    assert shortest_path(road_map, 1, 1) == Route((1,), 0)


def test_shortest_path_unreachable(road_map):
    with pytest.raises(NoPathError, match="No path exists from A to E."):
        shortest_path(road_map, 0, 4)


def test_dijkstra_distances_and_parents(road_map):
    dist, parent = dijkstra(road_map, 0)
    assert dist[0] == 0
    assert parent[0] is None
    assert dist[4] == math.inf
    assert parent[4] is None
    assert dist[2] == dist[1] + road_map.distance(1, 2)


def test_alternate_path_avoids_location(road_map):
    route = alternate_path(road_map, 0, 2, 1)
    assert route.vertices == (0, 2)
    assert route.distance == 20
    assert 1 not in route.vertices


def test_alternate_path_never_shorter_than_shortest(road_map):
    best = shortest_path(road_map, 0, 3)
    other = alternate_path(road_map, 0, 3, 1)
    assert other.distance >= best.distance
    assert other.distance == _length(road_map, other)


def test_alternate_path_blocked(road_map):
    with pytest.raises(NoPathError, match="avoiding C"):
        alternate_path(road_map, 0, 3, 2)


def test_alternate_path_avoiding_start(road_map):
    with pytest.raises(NoPathError):
        alternate_path(road_map, 0, 1, 0)


def test_path_with_stops_visits_stops_in_order(road_map):
    route = path_with_stops(road_map, "A", "D", ["C"])
    assert route.vertices[0] == 0
    assert route.vertices[-1] == 3
    assert 2 in route.vertices
    assert route.distance == _length(road_map, route)


def test_path_with_no_stops_matches_shortest(road_map):
    assert path_with_stops(road_map, "A", "D", []) == shortest_path(road_map, 0, 3)


def test_path_with_repeated_stop_has_no_duplicates(road_map):
    route = path_with_stops(road_map, "A", "C", ["A"])
    assert route == shortest_path(road_map, 0, 2)


def test_path_with_backtracking_stop_sums_segments(road_map):
    route = path_with_stops(road_map, "A", "A", ["D"])
    there = shortest_path(road_map, 0, 3)
    assert route.distance == 2 * there.distance
    assert route.distance == _length(road_map, route)


def test_path_with_stops_invalid_source(road_map):
    with pytest.raises(LocationError, match="Invalid source or destination."):
        path_with_stops(road_map, "Nowhere", "A", [])


def test_path_with_stops_invalid_stop(road_map):
    with pytest.raises(LocationError, match="Invalid stop in the journey: A or Nowhere."):
        path_with_stops(road_map, "A", "D", ["Nowhere"])


def test_path_with_stops_unreachable_segment(road_map):
    with pytest.raises(NoPathError):
        path_with_stops(road_map, "A", "D", ["E"])


@pytest.mark.parametrize(
    ("distance", "color"),
    [(0, GREEN), (9, GREEN), (10, YELLOW), (19, YELLOW), (20, CYAN), (49, CYAN), (50, RED)],
)
def test_distance_color(distance, color):
    assert distance_color(distance) == color


def test_format_route(road_map):
    route = shortest_path(road_map, 0, 2)
    text = format_route(road_map, route)
    expected = (
        f"{CYAN}A{RESET} --({GREEN}5{RESET}km)--> "
        f"{CYAN}B{RESET} --({GREEN}5{RESET}km)--> "
        f"{CYAN}C{RESET}\nTotal Distance: {route.distance}km"
    )
    assert text == expected


def test_format_single_location_route(road_map):
    text = format_route(road_map, Route((3,), 0))
    assert text == f"{CYAN}D{RESET}\nTotal Distance: 0km"