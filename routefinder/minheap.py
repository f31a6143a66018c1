"""Indexed binary min-heap keyed by vertex, supporting decrease-key."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(slots=True)
class _Node:
    vertex: int
    distance: float


class MinHeap:
    """A min-heap of vertices ``0..n-1`` ordered by their distance.

    The heap keeps track of where every vertex sits so that a vertex's
    distance can be lowered in place and membership checked in constant time.
    """

    def __init__(self, distances: Iterable[float]) -> None:
        self._nodes = [_Node(vertex, distance) for vertex, distance in enumerate(distances)]
        self._position = list(range(len(self._nodes)))
        self._size = len(self._nodes)
        for idx in reversed(range(self._size // 2)):
            self._sift_down(idx)

    def __len__(self) -> int:
        return self._size

    def __contains__(self, vertex: object) -> bool:
        if not isinstance(vertex, int) or not 0 <= vertex < len(self._position):
            return False
        return self._position[vertex] < self._size

    def extract_min(self) -> tuple[int, float]:
        """Remove and return ``(vertex, distance)`` with the smallest distance."""
        if self._size == 0:
            raise IndexError("extract from an empty heap")
        root = self._nodes[0]
        self._swap(0, self._size - 1)
        self._size -= 1
        self._sift_down(0)
        return root.vertex, root.distance

    def decrease_key(self, vertex: int, distance: float) -> None:
        """Lower the distance of a vertex still in the heap."""
        if vertex not in self:
            raise KeyError(vertex)
        idx = self._position[vertex]
        node = self._nodes[idx]
        if distance > node.distance:
            raise ValueError(
                f"new distance {distance} is greater than current distance {node.distance}"
            )
        node.distance = distance
        while idx:
            parent = (idx - 1) // 2
            if not self._nodes[idx].distance < self._nodes[parent].distance:
                break
            self._swap(idx, parent)
            idx = parent

    def _swap(self, first: int, second: int) -> None:
        nodes = self._nodes
        nodes[first], nodes[second] = nodes[second], nodes[first]
        self._position[nodes[first].vertex] = first
        self._position[nodes[second].vertex] = second

    def _sift_down(self, idx: int) -> None:
        while True:
            smallest = idx
            for child in (2 * idx + 1, 2 * idx + 2):
                if (
                    child < self._size
                    and self._nodes[child].distance < self._nodes[smallest].distance
                ):
                    smallest = child
            if smallest == idx:
                return
            self._swap(idx, smallest)
            idx = smallest