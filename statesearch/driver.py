import sys

from statesearch.common import SearchNode, SearchResult, reconstruct_history


def run_search(initial, frontier, keep_history=False):
    """Generic search loop shared by every strategy.

    Args:
        initial: the start state (anything implementing the State protocol)
        frontier: an empty Frontier; its pop order decides the strategy
        keep_history: when True parent links are kept and the returned history
            holds the states leading to the goal, initial state first
    Returns:
        SearchResult(steps, goal, history). steps counts every node popped,
        the goal included. goal is None when the frontier ran dry.

    The visited set is checked when a node is popped, not when it is pushed,
    so the frontier may hold several nodes with the same identity; only the
    first one popped gets expanded. On an infinite state graph with no
    reachable goal this never returns.
    """
    if initial is None:
        raise ValueError("initial state must not be None")

    visited = set()
    frontier.push(SearchNode(initial))
    steps = 0

    while frontier:
        steps += 1
        cur = frontier.pop()
        state = cur.state

        if state.is_goal():
            history = reconstruct_history(cur) if keep_history else []
            return SearchResult(steps, state, history)

        key = state.identity()
        if key in visited:
            continue
        visited.add(key)

        parent = cur if keep_history else None
        for child in state.expand():
            if child is None:
                # Malformed expand() output ends the whole search as exhausted.
                print(
                    f"Warning: expand() of state {key!r} produced None; "
                    f"search stopped after {steps} steps with no goal.",
                    file=sys.stderr,
                )
                return SearchResult(steps, None, [])
            frontier.push(SearchNode(child, parent))

    return SearchResult(steps, None, [])
