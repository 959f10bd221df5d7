from statesearch.driver import run_search
from statesearch.frontier import cost_away_key, make_frontier


def run_astar(initial, keep_history=False, frontier="heap"):
    """
    Best-cost-away (A*) search, ordered by path_cost() + heuristic_cost().
    The goal returned has minimum cost as long as heuristic_cost() never
    overestimates the remaining cost.
    Args:
        initial: start state
        keep_history: keep parent links and return the path leading to the goal
        frontier: "heap" (default) or "sorted"
    Returns:
        SearchResult(steps, goal, history)
    """
    return run_search(initial, make_frontier(frontier, cost_away_key), keep_history)
