# beam_lab/core/frontiers.py
from __future__ import annotations
import heapq


class PriorityQueue:
    """Min-heap of (score, node). A node may sit in the heap several times;
    callers drop stale entries when they pop them."""
    def __init__(self):
        self.h = []
        self.counter = 0  # tie-breaker: equal scores pop in insertion order
    def push(self, node, score: float):
        self.counter += 1
        heapq.heappush(self.h, (score, self.counter, node))
    def pop(self):
        return heapq.heappop(self.h)[2]
    def peek(self):
        return self.h[0][2]
    def top_score(self) -> float:
        return self.h[0][0]
    def __len__(self): return len(self.h)
