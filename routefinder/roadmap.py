"""Named locations joined by undirected, weighted paths stored as a matrix."""

from __future__ import annotations

import os
import re
from collections.abc import Sequence

MAX_LOCATIONS = 100

_WHITESPACE = " \t\n\r\f\v"
_LEADING_INT = re.compile(r"[ \t\n\r\f\v]*([+-]?\d+)")


class LocationError(LookupError):
    """Raised when a named location is not on the map."""


class CapacityError(Exception):
    """Raised when the map cannot hold any more locations."""


def _trim(text: str) -> str:
    return text.strip(_WHITESPACE)


def _tokens(line: str) -> list[str]:
    return [token for token in line.split(",") if token]


def _to_int(token: str) -> int:
    match = _LEADING_INT.match(token)
    return int(match.group(1)) if match else 0


class RoadMap:
    """Locations and the distances between them; 0 means no direct path."""

    def __init__(self, places: Sequence[str], distances: Sequence[Sequence[int]]) -> None:
        if len(places) > MAX_LOCATIONS:
            raise CapacityError("Maximum locations reached.")
        if len(distances) != len(places) or any(len(row) != len(places) for row in distances):
            raise ValueError("distance matrix must be square and match the number of places")
        self.places = list(places)
        self.distances = [list(row) for row in distances]

    def __len__(self) -> int:
        return len(self.places)

    @classmethod
    def load(cls, path: str | os.PathLike[str]) -> RoadMap:
        """Read a map: a header line of names followed by one row of distances per name."""
        with open(path, encoding="utf-8") as handle:
            places = [_trim(token) for token in _tokens(handle.readline())]
            size = len(places)
            distances = []
            for _ in places:
                values = [_to_int(token) for token in _tokens(handle.readline())][:size]
                distances.append(values + [0] * (size - len(values)))
        return cls(places, distances)

    def save(self, path: str | os.PathLike[str]) -> None:
        """Write the map in the same layout that :meth:`load` reads."""
        with open(path, "w", encoding="utf-8") as handle:
            handle.write(",".join(self.places) + "\n")
            for row in self.distances:
                handle.write(",".join(str(value) for value in row) + "\n")

    def index_of(self, name: str) -> int:
        """Return the position of the first location with this name."""
        try:
            return self.places.index(name)
        except ValueError:
            raise LocationError(f"Location not found: {name}") from None

    def distance(self, first: int, second: int) -> int:
        """Direct distance between two location indices, 0 if not joined."""
        return self.distances[first][second]

    def sort(self) -> None:
        """Order locations alphabetically, carrying the distances along."""
        order = sorted(range(len(self.places)), key=self.places.__getitem__)
        self.places = [self.places[i] for i in order]
        self.distances = [[self.distances[i][j] for j in order] for i in order]

    def add_location(self, name: str) -> None:
        """Add an unconnected location and keep the map sorted."""
        if len(self.places) >= MAX_LOCATIONS:
            raise CapacityError("Maximum locations reached.")
        self.places.append(_trim(name))
        for row in self.distances:
            row.append(0)
        self.distances.append([0] * len(self.places))
        self.sort()

    def delete_location(self, name: str) -> None:
        """Remove a location and every path touching it."""
        index = self.index_of(_trim(name))
        del self.places[index]
        del self.distances[index]
        for row in self.distances:
            del row[index]
        self.sort()

    def set_path(self, first: str, second: str, distance: int) -> None:
        """Join two locations with a path of the given length in both directions."""
        i = self.index_of(first)
        j = self.index_of(second)
        self.distances[i][j] = distance
        self.distances[j][i] = distance

    def delete_path(self, first: str, second: str) -> None:
        """Remove the direct path between two locations."""
        self.set_path(first, second, 0)