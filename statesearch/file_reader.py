import pandas as pd

from statesearch.util import Graph, GraphReader, Node


def split_csv_allow_commas(line, min_fields):
    parts = []
    buf = []
    depth = 0
    for ch in line:
        if ch == '(':
            depth += 1
            buf.append(ch)
        elif ch == ')':
            depth = max(depth - 1, 0)
            buf.append(ch)
        elif ch == ',':
            if depth == 0:
                parts.append("".join(buf).strip())
                buf = []
            else:
                buf.append(ch)
        else:
            buf.append(ch)
    if buf:
        parts.append("".join(buf).strip())
    if len(parts) < min_fields:
        raise ValueError(f"Line '{line}' parsed into too few fields: {parts}")
    return parts

def parse_config_file(path):
    """Parses a road-map configuration file

    Args:
        path (string): Filepath to the configuration txt file

    Returns:
        nodes: Pandas DataFrame of nodes (index: node id, columns: lat, lon, label)
        ways: Pandas DataFrame of ways (columns: id, from, to, name, type, base_time)
        start: start node id (int) or None
        goals: list of goal node ids (int)
    """
    section = None
    nodes = {}
    ways = []
    start = None
    goals = []

    def is_header(line):
        return line.startswith("[") and line.endswith("]")

    def ignore(line):
        return (not line.strip()) or line.strip().startswith("#")

    with open(path, "r", encoding="utf-8") as f:
        for raw in f:
            line = raw.strip()
            if ignore(line):
                continue
            if is_header(line):
                section = line.upper()
                continue

            if section == "[NODES]":
                p = split_csv_allow_commas(line, 4)
                nid, lat, lon, label = int(p[0]), float(p[1]), float(p[2]), p[3]
                nodes[nid] = {"lat": lat, "lon": lon, "label": label}

            elif section == "[WAYS]":
                p = split_csv_allow_commas(line, 6)
                ways.append({
                    "id": int(p[0]),
                    "from": int(p[1]),
                    "to": int(p[2]),
                    "name": p[3],
                    "type": p[4],
                    "base_time": float(p[5]),
                })

            elif section == "[META]":
                p = [x.strip() for x in line.split(",")]
                key = p[0].upper()
                if key == "START":
                    start = int(p[1])
                elif key == "GOAL":
                    goals = [int(g) for g in p[1:] if g]

    # Convert nodes and ways to pandas DataFrames
    nodes_df = pd.DataFrame.from_dict(nodes, orient="index", columns=["lat", "lon", "label"])
    nodes_df.index.name = "id"
    ways_df = pd.DataFrame(ways, columns=["id", "from", "to", "name", "type", "base_time"])
    return nodes_df, ways_df, start, goals

def graph_from_frames(nodes_df, ways_df, start, goals):
    """Builds a Graph from the node and way DataFrames.

    Node coordinates are (lat, lon); way cost is base_time.
    """
    graph = Graph()
    for nid, row in nodes_df.iterrows():
        graph.add_node(Node(nid, row['lat'], row['lon']))
    for _, row in ways_df.iterrows():
        graph.add_edge(int(row['from']), int(row['to']), float(row['base_time']))
    graph.origin = start
    graph.destinations = set(goals)
    return graph

def read_any(path):
    """Reads either file format into a Graph, picked by the presence of a [NODES] header."""
    with open(path, "r", encoding="utf-8") as f:
        is_config = any(line.strip().upper() == "[NODES]" for line in f)
    if is_config:
        return graph_from_frames(*parse_config_file(path))
    return GraphReader(path).read_problem()
