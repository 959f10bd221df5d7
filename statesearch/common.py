import math
from typing import Iterable, List, NamedTuple, Optional, Protocol, runtime_checkable


@runtime_checkable
class State(Protocol):
    """Capabilities a problem state must provide to be searched.

    expand() returns the states reachable in one step. is_goal() is the
    objective test. path_cost() is the cumulative cost from the start state
    and heuristic_cost() the estimated remaining cost (0 for uniform-cost).
    identity() is a stable key; states with equal identity are the same node.
    """

    def expand(self) -> Iterable["State"]: ...

    def is_goal(self) -> bool: ...

    def path_cost(self) -> float: ...

    def heuristic_cost(self) -> float: ...

    def identity(self) -> str: ...


class SearchNode:
    """Wraps a state with an optional link to the node that produced it."""

    __slots__ = ("state", "parent")

    def __init__(self, state, parent=None):
        self.state = state
        self.parent = parent

    def path(self):
        """Nodes from the root down to (and including) this one."""
        chain = []
        cur = self
        while cur is not None:
            chain.append(cur)
            cur = cur.parent
        chain.reverse()
        return chain

    def __repr__(self):
        return f"SearchNode({self.state!r})"


class SearchResult(NamedTuple):
    steps: int
    goal: Optional[State]
    history: List[State]

    @property
    def found(self) -> bool:
        return self.goal is not None

    def path(self) -> List[State]:
        """History followed by the goal; empty when nothing was found."""
        if self.goal is None:
            return []
        return list(self.history) + [self.goal]


def reconstruct_history(node):
    """Ancestor states of node, initial state first, node itself excluded."""
    return [n.state for n in node.path()[:-1]]


def euclidean(a, b):
    """Euclidean distance between coordinate tuples a and b."""
    (x1, y1), (x2, y2) = a, b
    return math.hypot(x1 - x2, y1 - y2)
