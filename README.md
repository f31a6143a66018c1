# routefinder

routefinder is an interactive, menu-driven program that finds routes on a
road map of named places. The map is stored in a CSV file. The program can find:

- the shortest path between two places,
- an alternate path that avoids a given place,
- the shortest path that passes through a list of stops, in the order given.

It can also edit the map and keep a list of saved journeys.

## Installation

```
pip install .
```

## Running

```
routefinder
```

By default the map is read from `places.csv` and saved journeys are kept in
`temp.csv`, both in the current directory. To use other files:

```
routefinder --map roads.csv --journeys trips.csv
```

The command exits with status 1 if the map file cannot be read or lists no
places. Otherwise it shows this menu:

1. Display Locations
2. Find Shortest Path
3. Add Location
4. Delete Location
5. Add Path
6. Delete Path
7. Alternate Path to avoid specific location via shortest route
8. Find Shortest Path with Stops
9. Save Current Journey
10. Display Saved Journey
11. Clear Saved Journey (removes the one journey you choose)
12. Exit

After each of menu items 3–6 the map file is written back. Routes are shown
with each hop's length coloured by ANSI codes:

- green when the hop is under 10 km,
- yellow when it is under 20 km,
- cyan when it is under 50 km,
- red otherwise.

The total distance follows the route. The program also exits cleanly when
input reaches end of file.

## The map file

The first line of the map file lists the place names. One row of distances
follows for each place. Together these rows form an adjacency matrix in
kilometres, and a distance of `0` means there is no direct road.

```
Airport,Harbour,Station
0,12,5
12,0,4
5,4,0
```

The map holds at most 100 locations. Adding or deleting a location keeps the
locations in alphabetical order.

## Using it as a library

`RoadMap` (in `routefinder.roadmap`) holds the places and the distance matrix:

- `RoadMap.load(path)` reads a map and `save(path)` writes one.
- `index_of(name)` gives a place's index, and `distance(i, j)` gives the direct distance between two indices.
- `add_location`, `delete_location`, `set_path` and `delete_path` edit the map.
- `sort()` puts the locations in alphabetical order.

The functions in `routefinder.routing` are:

- `shortest_path(road_map, start, end)` and `alternate_path(road_map, start, end, avoid)`, which take location indices;
- `path_with_stops(road_map, source, destination, stops)`, which takes place names.

All three return a `Route`, which has `vertices` (a tuple of indices) and `distance`. `format_route` renders a route as coloured text, and `dijkstra(road_map, start, avoid=None)` returns the raw distances and predecessors.

```python
from routefinder.roadmap import RoadMap
from routefinder.routing import shortest_path, path_with_stops, format_route

road_map = RoadMap.load("places.csv")
route = shortest_path(road_map, road_map.index_of("Airport"), road_map.index_of("Harbour"))
print(format_route(road_map, route))

route = path_with_stops(road_map, "Airport", "Harbour", ["Station"])
print(route.distance)
```

Errors are raised as exceptions:

- An unknown place raises `LocationError`.
- A missing route raises `NoPathError`.
- Adding a location to a map that already holds 100 raises `CapacityError`.

Saved journeys are handled by `routefinder.journeys`. `JourneyStore` can:

- append a journey with `save`,
- read all journeys with `load`,
- delete a journey by its 1-based number with `remove`.

A missing journeys file holds no journeys. `format_journey` describes a numbered journey.

```python
from routefinder.journeys import Journey, JourneyStore

store = JourneyStore("temp.csv")
store.save(Journey("Airport", "Harbour", ("Station",)))
for journey in store.load():
    print(journey.to_line())
```

The indexed min-heap used by the route search is available as
`routefinder.minheap.MinHeap`.