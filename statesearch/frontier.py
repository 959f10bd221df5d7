"""Pending-node collections. The pop discipline is what tells the strategies apart."""
import bisect
from collections import deque

from statesearch.heap import BinaryHeap


def cost_key(node):
    return node.state.path_cost()


def cost_away_key(node):
    state = node.state
    return state.path_cost() + state.heuristic_cost()


class Frontier:
    def push(self, node):
        raise NotImplementedError

    def pop(self):
        raise NotImplementedError

    def __len__(self):
        raise NotImplementedError

    def __bool__(self):
        return len(self) > 0


class StackFrontier(Frontier):
    """Last in, first out (depth-first)."""

    def __init__(self):
        self.q = []

    def push(self, node):
        self.q.append(node)

    def pop(self):
        return self.q.pop()

    def __len__(self):
        return len(self.q)


class QueueFrontier(Frontier):
    """First in, first out (breadth-first)."""

    def __init__(self):
        self.q = deque()

    def push(self, node):
        self.q.append(node)

    def pop(self):
        return self.q.popleft()

    def __len__(self):
        return len(self.q)


class HeapFrontier(Frontier):
    """Minimum key first, backed by a binary heap."""

    def __init__(self, key):
        self.heap = BinaryHeap(key)

    def push(self, node):
        self.heap.push(node)

    def pop(self):
        return self.heap.pop()

    def __len__(self):
        return len(self.heap)


class SortedFrontier(Frontier):
    """Minimum key first, kept as a sorted list.

    A new node goes in front of every pending node whose key is greater than
    or equal to its own, so among equal keys the newest is popped first.
    Insertion is linear; use HeapFrontier unless that tie order matters.
    """

    def __init__(self, key):
        self.key = key
        self.q = []

    def push(self, node):
        idx = bisect.bisect_left(self.q, self.key(node), key=self.key)
        self.q.insert(idx, node)

    def pop(self):
        if not self.q:
            raise IndexError("pop from an empty frontier")
        return self.q.pop(0)

    def __len__(self):
        return len(self.q)


def make_frontier(kind, key=None):
    """Build a frontier by name: "stack", "queue", "heap" or "sorted"."""
    kind = kind.lower()
    if kind == "stack":
        return StackFrontier()
    if kind == "queue":
        return QueueFrontier()
    if kind in ("heap", "sorted"):
        if key is None:
            raise ValueError(f"frontier '{kind}' needs a key function")
        return HeapFrontier(key) if kind == "heap" else SortedFrontier(key)
    raise ValueError(f"Unknown frontier kind: {kind}")
