from statesearch import run_astar, run_bfs, run_dfs, run_dijkstra

# Command-line method names (upper case) mapped to search functions
METHODS = {
    "DFS": run_dfs,
    "BFS": run_bfs,
    "UCS": run_dijkstra,
    "DIJKSTRA": run_dijkstra,
    "CUS1": run_dijkstra,
    "AS": run_astar,
    "ASTAR": run_astar,
}

# Methods that accept a frontier= argument
COST_METHODS = {"UCS", "DIJKSTRA", "CUS1", "AS", "ASTAR"}

FRONTIER_KINDS = ["heap", "sorted"]
DEFAULT_FRONTIER = "heap"

METRICS_MODES = ["none", "stderr", "stdout"]
