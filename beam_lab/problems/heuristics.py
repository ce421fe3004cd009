# beam_lab/problems/heuristics.py
from __future__ import annotations
import math
from typing import Hashable, Mapping, Tuple

Point = Tuple[float, float]


class ZeroHeuristic:
    """h = 0 everywhere: turns the searches into (beam-limited) Dijkstra."""
    def estimate(self, a: Hashable, b: Hashable) -> float:
        return 0.0


class EuclideanHeuristic:
    """Straight-line distance between node coordinates. Admissible whenever every
    edge costs at least the distance between its endpoints."""
    def __init__(self, coords: Mapping[Hashable, Point]):
        if coords is None:
            raise ValueError("coordinates mapping is None")
        self.coords = coords

    def estimate(self, a: Hashable, b: Hashable) -> float:
        (x1, y1), (x2, y2) = self.coords[a], self.coords[b]
        return math.hypot(x1 - x2, y1 - y2)


class TableHeuristic:
    """
    Distances to one fixed landmark (e.g. straight-line distance to Bucharest).

    estimate(a, landmark) comes from the table; any other pair gets 0, so searches
    toward some other node degrade to Dijkstra instead of being misled.
    """
    def __init__(self, landmark: Hashable, table: Mapping[Hashable, float]):
        self.landmark = landmark
        self.table = table

    def estimate(self, a: Hashable, b: Hashable) -> float:
        if b == self.landmark:
            return float(self.table.get(a, 0))
        return 0.0
