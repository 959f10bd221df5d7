"""State-space search engine with interchangeable traversal strategies."""

from .common import SearchNode, SearchResult, State
from .dfs import run_dfs
from .bfs import run_bfs
from .dijkstra import run_dijkstra
from .astar import run_astar

STRATEGIES = {
    "dfs": run_dfs,
    "bfs": run_bfs,
    "dijkstra": run_dijkstra,
    "astar": run_astar,
}

__all__ = [
    "State",
    "SearchNode",
    "SearchResult",
    "run_dfs",
    "run_bfs",
    "run_dijkstra",
    "run_astar",
    "STRATEGIES",
]
