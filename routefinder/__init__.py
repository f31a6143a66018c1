"""Shortest-route finding, map editing and saved journeys over a CSV road map."""

__version__ = "0.1.0"