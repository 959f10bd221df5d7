from statesearch.common import euclidean


class Node:
    """Represents a node in the 2D graph."""
    def __init__(self, node_id, x, y):
        self.id = int(node_id)
        self.x = float(x)
        self.y = float(y)

    def __repr__(self):
        return f"Node {self.id}: ({self.x:g},{self.y:g})"

class Graph:
    """Represents the complete directed graph."""
    def __init__(self):
        self.nodes = {}           # {node_id: Node_object}
        self.adjacency = {}       # {from_node_id: [(to_node_id, cost), ...]}
        self.origin = None        # Origin node ID
        self.destinations = set() # Set of destination node IDs

    def add_node(self, node):
        """Adds a Node object to the graph."""
        self.nodes[node.id] = node
        # Initialize adjacency list for the new node
        if node.id not in self.adjacency:
            self.adjacency[node.id] = []

    def add_edge(self, from_id, to_id, cost):
        """Adds a directed edge and its cost."""
        self.adjacency.setdefault(from_id, []).append((to_id, cost))

    def get_coordinates(self, node_id):
        """Returns the (x, y) coordinates of a node."""
        node = self.nodes.get(node_id)
        return (node.x, node.y) if node else None

    def start_state(self):
        """GraphState for the origin node."""
        return GraphState(self, self.origin)


class GraphState:
    """Search state for a position in a Graph, reached at a given path cost.

    Successors are produced in ascending node-id order. The heuristic is the
    straight-line distance to the nearest destination with known coordinates.
    """

    def __init__(self, graph, node_id, cost=0.0):
        self.graph = graph
        self.node_id = node_id
        self.cost = float(cost)

    def expand(self):
        edges = sorted(self.graph.adjacency.get(self.node_id, []), key=lambda x: x[0])
        return [GraphState(self.graph, to_id, self.cost + cost) for to_id, cost in edges]

    def is_goal(self):
        return self.node_id in self.graph.destinations

    def path_cost(self):
        return self.cost

    def heuristic_cost(self):
        here = self.graph.get_coordinates(self.node_id)
        if here is None:
            return 0.0
        dists = [
            euclidean(here, coords)
            for coords in map(self.graph.get_coordinates, self.graph.destinations)
            if coords is not None
        ]
        return min(dists) if dists else 0.0

    def identity(self):
        return str(self.node_id)

    def __repr__(self):
        return f"GraphState({self.node_id}, cost={self.cost:g})"


class GraphReader:
    """Handles parsing a graph problem file."""

    def __init__(self, filename):
        self.filename = filename
        self.graph = Graph()

    def read_problem(self):
        """Reads the file and populates the Graph object.

        Raises FileNotFoundError when the file does not exist. Lines that
        cannot be parsed are reported and skipped.
        """
        with open(self.filename, 'r') as f:
            lines = [line.strip() for line in f if line.strip()] # Read and clean lines

        current_section = None

        for line in lines:
            # Determining which section of the file its currently reading
            if line.startswith("Nodes:"):
                current_section = "NODES"
                continue
            elif line.startswith("Edges:"):
                current_section = "EDGES"
                continue
            elif line.startswith("Origin:"):
                current_section = "ORIGIN"
                continue
            elif line.startswith("Destinations:"):
                current_section = "DESTINATIONS"
                continue

            # Parse the lines base on the current section
            if current_section == "NODES":
                # Example: 1: (4,1)
                try:
                    parts = line.split(':')
                    node_id = int(parts[0].strip())
                    coords_str = parts[1].strip().strip('()')
                    x, y = map(float, coords_str.split(','))
                    self.graph.add_node(Node(node_id, x, y))
                except (IndexError, ValueError) as e:
                    print(f"Error parsing node line '{line}': {e}")

            elif current_section == "EDGES":
                # Example: (2,1): 4
                try:
                    parts = line.split(':')
                    cost = float(parts[1].strip())

                    # Extract (2,1)
                    nodes_str = parts[0].strip().strip('()')
                    from_id, to_id = map(int, nodes_str.split(','))

                    self.graph.add_edge(from_id, to_id, cost)
                except (IndexError, ValueError) as e:
                    print(f"Error parsing edge line '{line}': {e}")

            elif current_section == "ORIGIN":
                # Example: 2
                try:
                    self.graph.origin = int(line)
                except ValueError as e:
                    print(f"Error parsing origin line '{line}': {e}")

            elif current_section == "DESTINATIONS":
                # Example: 5; 4
                try:
                    dest_ids = [int(d.strip()) for d in line.split(';') if d.strip()]
                    self.graph.destinations.update(dest_ids)
                except ValueError as e:
                    print(f"Error parsing destinations line '{line}': {e}")

        return self.graph

def format_bytes(n_bytes: int) -> str:
    """Convert number of bytes to human-readable in KB/MB with 2 decimals.

    Args:
        n_bytes (int): Number of bytes.

    Returns:
        str: Human-readable string representation.
    """
    if n_bytes < 1024:
        return f"{n_bytes} B"
    kb = n_bytes / 1024.0
    if kb < 1024:
        return f"{kb:.2f} KB"
    mb = kb / 1024.0
    if mb < 1024:
        return f"{mb:.2f} MB"
    gb = mb / 1024.0
    return f"{gb:.2f} GB"
