from statesearch.driver import run_search
from statesearch.frontier import cost_key, make_frontier


def run_dijkstra(initial, keep_history=False, frontier="heap"):
    """
    Best-cost (uniform-cost) search, ordered by path_cost() alone.
    Args:
        initial: start state
        keep_history: keep parent links and return the path leading to the goal
        frontier: "heap" (default) or "sorted"; "sorted" pops the newest of
            several equal-cost nodes first
    Returns:
        SearchResult(steps, goal, history)
    """
    return run_search(initial, make_frontier(frontier, cost_key), keep_history)
