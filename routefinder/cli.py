"""Interactive menu for exploring and editing a road map."""

from __future__ import annotations

import argparse
import re
from collections.abc import Callable, Sequence
from pathlib import Path

from routefinder.journeys import DEFAULT_PATH, Journey, JourneyStore, format_journey
from routefinder.roadmap import CapacityError, LocationError, RoadMap
from routefinder.routing import (
    NoPathError,
    alternate_path,
    format_route,
    path_with_stops,
    shortest_path,
)

DEFAULT_MAP = "places.csv"

MENU = """
Menu:
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
11. Clear Saved Journey
12. Exit"""

_WHITESPACE = " \t\n\r\f\v"
_LEADING_INT = re.compile(r"[ \t\n\r\f\v]*([+-]?\d+)")


def _ask(prompt: str) -> str:
    return input(prompt).strip(_WHITESPACE)


def _ask_int(prompt: str) -> int | None:
    match = _LEADING_INT.match(input(prompt))
    return int(match.group(1)) if match else None


def _ask_stops(prompt: str) -> list[str]:
    count = _ask_int(prompt) or 0
    return [_ask(f"Enter stop {number}: ") for number in range(1, count + 1)]


class _Session:
    """State shared by the menu actions during one run."""

    def __init__(self, road_map: RoadMap, map_path: Path, store: JourneyStore) -> None:
        self.road_map = road_map
        self.map_path = map_path
        self.store = store

    def _persist(self) -> None:
        try:
            self.road_map.save(self.map_path)
        except OSError:
            print(f"Error: Could not open file {self.map_path} for writing.")

    def display_locations(self) -> None:
        print("\nAvailable Locations:")
        for number, place in enumerate(self.road_map.places, 1):
            print(f"{number}. {place}")
        print()

    def find_shortest_path(self) -> None:
        start = _ask("Enter starting location: ")
        end = _ask("Enter ending location: ")
        try:
            start_index = self.road_map.index_of(start)
            end_index = self.road_map.index_of(end)
        except LocationError:
            print("Invalid locations.")
            return
        try:
            route = shortest_path(self.road_map, start_index, end_index)
        except NoPathError as error:
            print(error)
            return
        print(f"\nShortest path from {start} to {end}:")
        print(format_route(self.road_map, route))

    def add_location(self) -> None:
        if len(self.road_map) >= 100:
            print("Maximum locations reached.")
        else:
            name = _ask("Enter the name of the new location: ")
            try:
                self.road_map.add_location(name)
            except CapacityError as error:
                print(error)
        self._persist()

    def delete_location(self) -> None:
        name = _ask("Enter the name of the location to delete: ")
        try:
            self.road_map.delete_location(name)
        except LocationError:
            print("Location not found.")
        self._persist()

    def add_path(self) -> None:
        first = _ask("Enter the first location: ")
        second = _ask("Enter the second location: ")
        distance = _ask_int(f"Enter the distance between {first} and {second}: ")
        if distance is None:
            print("Error: Invalid distance.")
        else:
            try:
                self.road_map.set_path(first, second, distance)
            except LocationError:
                print("Error: One or both locations do not exist.")
            else:
                print(
                    f"Path added successfully between {first} and {second} "
                    f"with distance {distance}."
                )
        self._persist()

    def delete_path(self) -> None:
        first = _ask("Enter the first location: ")
        second = _ask("Enter the second location: ")
        try:
            self.road_map.delete_path(first, second)
        except LocationError:
            print("Error: One or both locations do not exist.")
        else:
            print(f"Path deleted successfully between {first} and {second}.")
        self._persist()

    def alternate_path(self) -> None:
        start = _ask("Enter starting location: ")
        end = _ask("Enter ending location: ")
        avoid = _ask("Enter location to avoid: ")
        try:
            indices = [self.road_map.index_of(name) for name in (start, end, avoid)]
        except LocationError:
            print("One or more locations are invalid.")
            return
        try:
            route = alternate_path(self.road_map, *indices)
        except NoPathError as error:
            print(error)
            return
        print(f"\nAlternate path from {start} to {end} avoiding {avoid}:")
        print(format_route(self.road_map, route))

    def path_with_stops(self) -> None:
        source = _ask("Enter starting location: ")
        destination = _ask("Enter ending location: ")
        stops = _ask_stops("Enter the number of stops: ")
        try:
            route = path_with_stops(self.road_map, source, destination, stops)
        except (LocationError, NoPathError) as error:
            print(error)
            return
        print(f"\nShortest path from {source} to {destination} via stops:")
        print(format_route(self.road_map, route))

    def save_journey(self) -> None:
        start = _ask("Enter starting location: ")
        end = _ask("Enter ending location: ")
        stops = _ask_stops("Enter the number of stops (0 if none): ")
        try:
            self.store.save(Journey(start, end, tuple(stops)))
        except OSError:
            print(f"Error: Could not open {self.store.path} for writing.")
            return
        print("Journey saved successfully.")

    def _print_journeys(self, journeys: Sequence[Journey]) -> None:
        print("\n--- Saved Journeys ---")
        for number, journey in enumerate(journeys, 1):
            print()
            print(format_journey(number, journey))

    def display_journeys(self) -> None:
        if not self.store.path.exists():
            print("No saved journeys found.")
            return
        try:
            journeys = self.store.load()
        except ValueError as error:
            print(error)
            return
        self._print_journeys(journeys)

    def remove_journey(self) -> None:
        try:
            journeys = self.store.load()
        except ValueError as error:
            print(error)
            return
        if not journeys:
            print("No saved journeys found.")
            return
        self._print_journeys(journeys)
        choice = _ask_int("\nEnter the number of the journey you want to delete: ")
        if choice is None or not 1 <= choice <= len(journeys):
            print("Invalid choice. No changes made.")
            return
        try:
            self.store.remove(choice)
        except OSError:
            print(f"Error: Could not open {self.store.path} for writing.")
            return
        print(f"Journey {choice} deleted successfully.")

    def actions(self) -> dict[int, Callable[[], None]]:
        return {
            1: self.display_locations,
            2: self.find_shortest_path,
            3: self.add_location,
            4: self.delete_location,
            5: self.add_path,
            6: self.delete_path,
            7: self.alternate_path,
            8: self.path_with_stops,
            9: self.save_journey,
            10: self.display_journeys,
            11: self.remove_journey,
        }


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="routefinder", description="Find routes between saved locations."
    )
    parser.add_argument("--map", default=DEFAULT_MAP, help="road map file to read and update")
    parser.add_argument("--journeys", default=DEFAULT_PATH, help="file of saved journeys")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive menu; returns the process exit status."""
    args = _parse_args(argv)
    map_path = Path(args.map)
    try:
        road_map = RoadMap.load(map_path)
    except OSError:
        print(f"Error: Could not open file {map_path}")
        return 1
    except (CapacityError, ValueError) as error:
        print(f"Error: {error}")
        return 1
    if len(road_map) == 0:
        return 1

    session = _Session(road_map, map_path, JourneyStore(args.journeys))
    actions = session.actions()
    try:
        while True:
            print(MENU)
            choice = _ask_int("Enter your choice: ")
            if choice == 12:
                print("Exiting.")
                return 0
            action = actions.get(choice) if choice is not None else None
            if action is None:
                print("Invalid choice.")
            else:
                action()
    except EOFError:
        return 0


if __name__ == "__main__":
    raise SystemExit(main())