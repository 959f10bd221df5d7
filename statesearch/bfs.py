from statesearch.driver import run_search
from statesearch.frontier import QueueFrontier


def run_bfs(initial, keep_history=False):
    """Breadth-First Search: returns SearchResult(steps, goal, history)."""
    return run_search(initial, QueueFrontier(), keep_history)
