from collections import Counter

import pytest


class LineState:
    """Integer n on [lo, hi]; each step to n+1 or n-1 costs 1."""

    def __init__(self, n, cost=0.0, goal=5, lo=0, hi=10, expansions=None):
        self.n = n
        self.cost = cost
        self.goal = goal
        self.lo = lo
        self.hi = hi
        self.expansions = expansions if expansions is not None else Counter()

    def expand(self):
        self.expansions[self.identity()] += 1
        return [
            LineState(m, self.cost + 1, self.goal, self.lo, self.hi, self.expansions)
            for m in (self.n + 1, self.n - 1)
            if self.lo <= m <= self.hi
        ]

    def is_goal(self):
        return self.n == self.goal

    def path_cost(self):
        return self.cost

    def heuristic_cost(self):
        return 0.0 if self.goal is None else float(abs(self.goal - self.n))

    def identity(self):
        return str(self.n)


class DictState:
    """Position in a weighted digraph given as {name: [(child, cost), ...]}."""

    def __init__(self, graph, name, goals, cost=0.0, h=None, expansions=None):
        self.graph = graph
        self.name = name
        self.goals = goals
        self.cost = cost
        self.h = h or {}
        self.expansions = expansions if expansions is not None else Counter()

    def expand(self):
        self.expansions[self.name] += 1
        return [
            DictState(self.graph, child, self.goals, self.cost + c, self.h, self.expansions)
            for child, c in self.graph.get(self.name, [])
        ]

    def is_goal(self):
        return self.name in self.goals

    def path_cost(self):
        return self.cost

    def heuristic_cost(self):
        return float(self.h.get(self.name, 0.0))

    def identity(self):
        return self.name


class CostStub:
    """Frontier test item: only costs matter."""

    def __init__(self, name, cost, away=0.0):
        self.name = name
        self.cost = cost
        self.away = away

    def path_cost(self):
        return self.cost

    def heuristic_cost(self):
        return self.away


@pytest.fixture
def line_start():
    return LineState(0)


@pytest.fixture
def cycle_start():
    graph = {"A": [("B", 1)], "B": [("A", 1)]}
    return DictState(graph, "A", goals=set())


@pytest.fixture
def problem_file(tmp_path):
    path = tmp_path / "problem.txt"
    path.write_text(
        "Nodes:\n"
        "1: (4,1)\n"
        "2: (2,2)\n"
        "3: (4,4)\n"
        "4: (6,3)\n"
        "5: (5,6)\n"
        "6: (7,5)\n"
        "Edges:\n"
        "(2,1): 4\n"
        "(3,1): 5\n"
        "(1,3): 5\n"
        "(2,3): 4\n"
        "(3,2): 5\n"
        "(4,1): 6\n"
        "(1,4): 6\n"
        "(4,3): 5\n"
        "(3,5): 6\n"
        "(5,3): 6\n"
        "(4,5): 7\n"
        "(5,4): 8\n"
        "(6,3): 7\n"
        "(3,6): 7\n"
        "Origin:\n"
        "2\n"
        "Destinations:\n"
        "5; 4\n"
    )
    return path


@pytest.fixture
def map_file(tmp_path):
    path = tmp_path / "map.txt"
    path.write_text(
        "# small road map\n"
        "[NODES]\n"
        "1,-37.80,144.96,Start (CBD, north)\n"
        "2,-37.81,144.97,Junction\n"
        "3,-37.82,144.98,Bridge\n"
        "4,-37.83,144.99,Depot\n"
        "\n"
        "[WAYS]\n"
        "100,1,2,High St,primary,3.0\n"
        "101,2,4,Low St,secondary,10.0\n"
        "102,1,3,River Rd,primary,2.0\n"
        "103,3,4,Dock Rd,tertiary,4.5\n"
        "\n"
        "[META]\n"
        "START,1\n"
        "GOAL,4\n"
    )
    return path
