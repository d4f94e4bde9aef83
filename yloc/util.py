"""Graph helpers: affinity lookup, counting, printing and Graphviz output."""

from __future__ import annotations

import re
import sys
from operator import itemgetter
from typing import Iterable, Iterator, Optional, TextIO, Union

from yloc.affinity import AffinityMask
from yloc.components import MPIProcess
from yloc.graph import EdgeRef, Graph, GraphView, root_graph
from yloc.graph_element import EdgeType

GraphLike = Union[Graph, GraphView]

_EDGE_LABELS = {
    EdgeType.PARENT: "parent",
    EdgeType.CHILD: "child",
    EdgeType.GPU_INTERCONNECT: "gpu2gpu",
}

_UNQUOTED_DOT_ID = re.compile(r"[A-Za-z_]\w*|-?(?:\.\d+|\d+(?:\.\d*)?)", re.ASCII)


def lowest_containing_vertex(mask: AffinityMask, graph: Optional[Graph] = None) -> int:
    """Deepest vertex below the root whose CPU affinity mask contains ``mask``.

    Descends along child edges, at each level into the child with the
    smallest mask that still contains ``mask``; MPI processes are skipped.
    The graph defaults to the root graph.
    """
    g = root_graph() if graph is None else graph
    children = g.filtered(edge_predicate=lambda e: g[e].edge_type is EdgeType.CHILD)
    vertex = g.get_root_vertex()
    while True:
        candidates = []
        for edge in children.out_edges(vertex):
            element = g[edge.target]
            target_mask = element.get("cpu_affinity_mask", AffinityMask)
            if (
                target_mask is not None
                and target_mask.is_containing(mask)
                and not element.is_a(MPIProcess)
            ):
                candidates.append((target_mask.count(), edge.target))
        if not candidates:
            return vertex
        vertex = min(candidates, key=itemgetter(0))[1]


def num_vertices_view(view: GraphLike) -> int:
    """Number of vertices a view actually contains."""
    return sum(1 for _ in view.vertices())


def print_property(
    graph: GraphLike,
    descriptor: Union[int, EdgeRef],
    property_name: str,
    file: Optional[TextIO] = None,
) -> None:
    """Print ``name=value`` for a property of a vertex or edge."""
    out = sys.stdout if file is None else file
    value = graph[descriptor].get(property_name, str)
    text = "has no value" if value is None else value
    print(f"{property_name}={text}", file=out)


def _escape_dot_string(text: str) -> str:
    if _UNQUOTED_DOT_ID.fullmatch(text):
        return text
    return '"' + text.replace('"', '\\"') + '"'


def _vertex_label(graph: GraphLike, vertex: int, vertex_properties: Iterable[str]) -> str:
    element = graph[vertex]
    label = f"{element.to_string()}\nVD={vertex}\n"
    for name in vertex_properties:
        value = element.get(name, str)
        if value is not None:
            label += f"{name}={value}\n"
    return label


def format_graph_dot(
    graph: GraphLike,
    vertex_properties: Iterable[str] = (),
    edge_labels: bool = False,
) -> str:
    """Render a graph or view in Graphviz dot format."""
    properties = list(vertex_properties)
    lines = ["digraph G {"]
    for vertex in graph.vertices():
        label = _escape_dot_string(_vertex_label(graph, vertex, properties))
        lines.append(f"{vertex}[label={label}];")
    for edge in graph.edges():
        text = _EDGE_LABELS.get(graph[edge].edge_type, "") if edge_labels else ""
        lines.append(f"{edge.source}->{edge.target} [label={_escape_dot_string(text)}];")
    lines.append("}")
    return "\n".join(lines) + "\n"


def write_graph_dot_file(
    graph: GraphLike,
    dot_file_name: str,
    vertex_properties: Iterable[str] = (),
    edge_labels: bool = False,
) -> None:
    """Write a graph or view to a Graphviz dot file."""
    with open(dot_file_name, "w", encoding="utf-8") as stream:
        stream.write(format_graph_dot(graph, vertex_properties, edge_labels))


def vertex_range(graph: GraphLike) -> Iterator[int]:
    return graph.vertices()


def edge_range(graph: GraphLike) -> Iterator[EdgeRef]:
    return graph.edges()