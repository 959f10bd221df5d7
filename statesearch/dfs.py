from statesearch.driver import run_search
from statesearch.frontier import StackFrontier


def run_dfs(initial, keep_history=False):
    """Depth-First Search: returns SearchResult(steps, goal, history).

    Descendants of a node are pushed on a stack, so the last one produced by
    expand() is explored first.
    """
    return run_search(initial, StackFrontier(), keep_history)
