"""Work-list graph traversal over the integer positions of a ModelGraph.

Adjacency is a list indexed by activity position holding ascending neighbor
positions, so traversals visit neighbors in ascending activity-id order and
never recurse.
"""

from collections import deque
from collections.abc import Iterable

from gocam_analysis.model.graph import ModelGraph
from gocam_analysis.model.models import CausalEdge


def build_adjacency(
    graph: ModelGraph,
    edges: Iterable[CausalEdge],
    undirected: bool = False,
) -> list[list[int]]:
    """Build an adjacency list from edges between known activities.

    Edges with an unknown endpoint are skipped. Parallel edges collapse to a
    single neighbor entry.

    Args:
        graph: ModelGraph providing activity positions
        edges: Edges to include
        undirected: Add each edge in both directions

    Returns:
        List of sorted neighbor positions per activity position
    """
    neighbors: list[set[int]] = [set() for _ in range(len(graph))]
    for edge in edges:
        source = graph.activity_index(edge.subject)
        target = graph.activity_index(edge.object)
        if source is None or target is None:
            continue
        neighbors[source].add(target)
        if undirected:
            neighbors[target].add(source)
    return [sorted(n) for n in neighbors]


def reachable_from(adjacency: list[list[int]], roots: Iterable[int]) -> list[bool]:
    """Breadth-first reachability from a set of root positions.

    Args:
        adjacency: Sorted neighbor positions per position
        roots: Start positions, explored in ascending order

    Returns:
        Visited flag per position
    """
    visited = [False] * len(adjacency)
    queue: deque[int] = deque()

    for root in sorted(set(roots)):
        if visited[root]:
            continue
        visited[root] = True
        queue.append(root)
        while queue:
            current = queue.popleft()
            for neighbor in adjacency[current]:
                if not visited[neighbor]:
                    visited[neighbor] = True
                    queue.append(neighbor)

    return visited


def connected_components(adjacency: list[list[int]]) -> list[list[int]]:
    """Connected components of an undirected adjacency list.

    Returns:
        Components as sorted position lists, ordered by their smallest position
    """
    component_of = [-1] * len(adjacency)
    components: list[list[int]] = []

    for start in range(len(adjacency)):
        if component_of[start] != -1:
            continue
        label = len(components)
        component_of[start] = label
        members = [start]
        stack = [start]
        while stack:
            current = stack.pop()
            for neighbor in adjacency[current]:
                if component_of[neighbor] == -1:
                    component_of[neighbor] = label
                    members.append(neighbor)
                    stack.append(neighbor)
        components.append(sorted(members))

    return components
