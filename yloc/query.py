"""Distance queries over topology graphs and their filtered views."""

from __future__ import annotations

import heapq
import math
from collections import deque
from typing import Any, Callable, Mapping, Optional, Union

from yloc.graph import EdgeRef, Graph, GraphView

GraphLike = Union[Graph, GraphView]


def _count_hop(edge: EdgeRef, previous: int) -> int:
    return previous + 1


def bfs_distance_vector(
    graph: GraphLike,
    start: int,
    on_tree_edge: Optional[Callable[[EdgeRef, Any], Any]] = None,
) -> list:
    """Breadth-first search from ``start``, computing a distance per vertex.

    Each vertex reached over a tree edge gets ``on_tree_edge(edge, distance
    of the edge's source)``; by default that counts the edges on the path.
    The start vertex and unreachable vertices keep distance 0.
    """
    step = _count_hop if on_tree_edge is None else on_tree_edge
    distances: list = [0] * graph.num_vertices()
    discovered = {start}
    queue = deque([start])
    while queue:
        source = queue.popleft()
        for edge in graph.out_edges(source):
            target = edge.target
            if target in discovered:
                continue
            discovered.add(target)
            distances[target] = step(edge, distances[source])
            queue.append(target)
    return distances


def make_edge_weight_map(graph: GraphLike, edge_weight_fn: Callable[[EdgeRef], Any]) -> dict:
    """Map every edge of ``graph`` to ``edge_weight_fn(edge)``."""
    return {edge: edge_weight_fn(edge) for edge in graph.edges()}


def dijkstra_path_distance_vector(
    graph: GraphLike,
    start: int,
    edge_weight_map: Mapping[EdgeRef, Any],
) -> tuple[list[int], list]:
    """Shortest paths from ``start``: returns (predecessors, distances).

    Unreachable vertices have distance ``math.inf`` and are their own
    predecessor, as is the start vertex. Edges missing from the weight map
    weigh 0. A negative weight raises ValueError.
    """
    count = graph.num_vertices()
    if not 0 <= start < count:
        raise IndexError(f"no vertex {start} in graph")
    predecessors = list(range(count))
    distances: list = [math.inf] * count
    distances[start] = 0
    finished: set[int] = set()
    heap: list = [(0, start)]
    while heap:
        distance, source = heapq.heappop(heap)
        if source in finished:
            continue
        finished.add(source)
        for edge in graph.out_edges(source):
            weight = edge_weight_map.get(edge, 0)
            if weight < 0:
                raise ValueError(f"negative weight {weight} on edge {edge.source}->{edge.target}")
            candidate = distance + weight
            target = edge.target
            if candidate < distances[target]:
                distances[target] = candidate
                predecessors[target] = source
                heapq.heappush(heap, (candidate, target))
    return predecessors, distances