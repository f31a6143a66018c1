"""Saved journeys kept one per line in a small comma-separated file."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from pathlib import Path

DEFAULT_PATH = "temp.csv"

_WHITESPACE = " \t\n\r\f\v"
_LEADING_INT = re.compile(r"[ \t\n\r\f\v]*([+-]?\d+)")


def _to_int(token: str) -> int:
    match = _LEADING_INT.match(token)
    return int(match.group(1)) if match else 0


@dataclass(frozen=True)
class Journey:
    """A start, an end and the stops visited between them."""

    start: str
    end: str
    stops: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "stops", tuple(self.stops))

    def to_line(self) -> str:
        """The line stored for this journey, without a newline."""
        return f"{self.start},{self.end},{len(self.stops)}," + ",".join(self.stops)

    @classmethod
    def from_line(cls, line: str) -> Journey:
        """Parse a stored line; raises ValueError if it is incomplete."""
        tokens = [token for token in line.strip(_WHITESPACE).split(",") if token]
        if len(tokens) < 3:
            raise ValueError(f"Malformed journey line: {line!r}")
        start, end, count_text, *rest = tokens
        count = max(_to_int(count_text), 0)
        stops = rest[:count]
        if len(stops) < count:
            raise ValueError(f"Error reading stop {len(stops) + 1}.")
        return cls(start, end, tuple(stops))


def format_journey(number: int, journey: Journey) -> str:
    """Human-readable description of a numbered journey."""
    lines = [
        f"Journey {number}:",
        f"Starting Location: {journey.start}",
        f"Ending Location: {journey.end}",
        f"Number of Stops: {len(journey.stops)}",
    ]
    if journey.stops:
        lines.append("Stops:")
        lines.extend(f"{index}. {stop}" for index, stop in enumerate(journey.stops, 1))
    else:
        lines.append("No stops in this journey.")
    return "\n".join(lines)


class JourneyStore:
    """Journeys saved in a file; a missing file holds no journeys."""

    def __init__(self, path: str | os.PathLike[str] = DEFAULT_PATH) -> None:
        self.path = Path(path)

    def _lines(self) -> list[str]:
        try:
            with open(self.path, encoding="utf-8") as handle:
                trimmed = (line.strip(_WHITESPACE) for line in handle)
                return [line for line in trimmed if line]
        except FileNotFoundError:
            return []

    def load(self) -> list[Journey]:
        """All saved journeys in the order they were saved."""
        return [Journey.from_line(line) for line in self._lines()]

    def save(self, journey: Journey) -> None:
        """Append a journey to the file."""
        with open(self.path, "a", encoding="utf-8") as handle:
            handle.write(journey.to_line() + "\n")

    def remove(self, number: int) -> Journey:
        """Delete the journey with this 1-based number and return it."""
        lines = self._lines()
        if not 1 <= number <= len(lines):
            raise IndexError("Invalid choice. No changes made.")
        removed = Journey.from_line(lines.pop(number - 1))
        with open(self.path, "w", encoding="utf-8") as handle:
            handle.writelines(line + "\n" for line in lines)
        return removed