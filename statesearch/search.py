import argparse
import sys
import time
import tracemalloc

import psutil

from statesearch import constants
from statesearch.file_reader import read_any
from statesearch.util import GraphState, format_bytes


def _execute_with_metrics(run_fn, initial, **kwargs):
    """Run a search function and collect runtime and memory metrics.

    Returns: (result, runtime_seconds, peak_tracemalloc_bytes, rss_after_bytes)
    - peak_tracemalloc_bytes: peak Python allocations measured by tracemalloc
    - rss_after_bytes: process RSS at end (approx OS memory usage)
    """
    # Start Python allocation tracking
    tracemalloc.start()
    proc = psutil.Process()
    t0 = time.perf_counter()
    try:
        result = run_fn(initial, **kwargs)
    finally:
        dt = time.perf_counter() - t0
        _cur, peak = tracemalloc.get_traced_memory()
        tracemalloc.stop()
    rss_after = proc.memory_info().rss
    return result, dt, peak, rss_after


def _emit_metrics(metrics_mode, method, result, runtime_s, peak_bytes, rss_after):
    cost = f"{result.goal.path_cost():g}" if result.found else "N/A"
    metrics_line = (
        f"Metrics: method={method} nodes_processed={result.steps} "
        f"path_cost={cost} "
        f"runtime_ms={(runtime_s*1000):.3f} peak_py_mem={format_bytes(peak_bytes)}"
        f" rss_now={format_bytes(rss_after)}"
    )
    if metrics_mode == "stdout":
        print(metrics_line)
    else:
        print(metrics_line, file=sys.stderr)


def main(filename, method, metrics_mode="none", frontier=constants.DEFAULT_FRONTIER, keep_history=True):
    """Read a problem file, run the requested search and print the outcome.

    metrics_mode: "none" | "stderr" | "stdout"
    - When not "none", prints a single metrics line in addition to the result
    Returns the process exit status.
    """
    method = method.upper()
    run_fn = constants.METHODS.get(method)
    if run_fn is None:
        print(f"Unknown method: {method}")
        print(f"Methods: {', '.join(constants.METHODS)}")
        return 1

    # 1. Read and build the graph
    try:
        graph = read_any(filename)
    except FileNotFoundError:
        print(f"Error: File not found: {filename}", file=sys.stderr)
        return 1

    if graph.origin is None:
        print(f"Error: no origin given in {filename}", file=sys.stderr)
        return 1

    # 2. Run the search on the origin state
    kwargs = {"keep_history": keep_history}
    if method in constants.COST_METHODS:
        kwargs["frontier"] = frontier
    result, runtime_s, peak_bytes, rss_after = _execute_with_metrics(
        run_fn, GraphState(graph, graph.origin), **kwargs
    )

    # 3. Output the result
    # <filename> <method>
    # <goal_node> <nodes_processed> <path>
    print(f"{filename} {method}")
    if not result.found:
        print(f"None {result.steps} ")
    else:
        path_str = " -> ".join(state.identity() for state in result.path())
        print(f"Goal node reached:{result.goal.identity()}")
        print(f"Number of Nodes visited:{result.steps}")
        print(f"{path_str}")
        print(f"Total path cost:{result.goal.path_cost():g}")

    # Metrics (printed separately so the result format remains intact)
    if metrics_mode in ("stderr", "stdout"):
        _emit_metrics(metrics_mode, method, result, runtime_s, peak_bytes, rss_after)
    return 0


def cli(argv=None):
    parser = argparse.ArgumentParser(description="Run a state-space search over a graph problem file")
    parser.add_argument("filename", help="Problem file (Nodes:/Edges: sections or a [NODES]/[WAYS] map)")
    parser.add_argument("method", help="Search method: " + ", ".join(constants.METHODS))
    metrics = parser.add_mutually_exclusive_group()
    metrics.add_argument("--metrics", "-m", dest="metrics_mode", action="store_const", const="stderr",
                         default="none", help="Print a metrics line to stderr")
    metrics.add_argument("--metrics-stdout", dest="metrics_mode", action="store_const", const="stdout",
                         help="Print a metrics line to stdout")
    parser.add_argument("--frontier", choices=constants.FRONTIER_KINDS, default=constants.DEFAULT_FRONTIER,
                        help="Priority structure for UCS and AS")
    parser.add_argument("--no-history", dest="keep_history", action="store_false",
                        help="Skip path bookkeeping; only the goal is reported")
    args = parser.parse_args(argv)
    return main(args.filename, args.method, args.metrics_mode, args.frontier, args.keep_history)


if __name__ == "__main__":
    sys.exit(cli())
