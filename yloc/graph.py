"""Directed topology graph, filtered views of it and the process-wide root graph."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterator, Optional, Union

from yloc.graph_element import Edge, Vertex

EdgePredicate = Callable[["EdgeRef"], bool]
VertexPredicate = Callable[[int], bool]


@dataclass(frozen=True)
class EdgeRef:
    """Handle of an edge: its endpoints and its position in the graph."""

    source: int
    target: int
    index: int


class Graph:
    """Directed multigraph whose vertices are numbered in insertion order."""

    def __init__(self) -> None:
        self._vertices: list[Vertex] = []
        self._edges: list[Edge] = []
        self._out: list[list[EdgeRef]] = []
        self._identifiers: dict[str, int] = {}
        self._root = 0

    def _check_vertex(self, vertex: int) -> None:
        if not 0 <= vertex < len(self._vertices):
            raise IndexError(f"no vertex {vertex} in graph")

    def add_vertex(self, identifier: Optional[str] = None) -> int:
        """Add a vertex, or return the existing one named ``identifier``."""
        if identifier is not None and identifier in self._identifiers:
            return self._identifiers[identifier]
        vertex = len(self._vertices)
        self._vertices.append(Vertex())
        self._out.append([])
        if identifier is not None:
            self._identifiers[identifier] = vertex
        return vertex

    def add_edge(self, source: int, target: int, edge: Edge) -> EdgeRef:
        self._check_vertex(source)
        self._check_vertex(target)
        ref = EdgeRef(source, target, len(self._edges))
        self._edges.append(edge)
        self._out[source].append(ref)
        return ref

    def has_edge(self, source: int, target: int) -> bool:
        """Return True if any edge leads from ``source`` to ``target``."""
        self._check_vertex(source)
        self._check_vertex(target)
        return any(ref.target == target for ref in self._out[source])

    def vertex_by_id(self, identifier: str) -> int:
        try:
            return self._identifiers[identifier]
        except KeyError:
            raise KeyError(f"no vertex with identifier {identifier!r}") from None

    def __getitem__(self, key: Union[int, str, EdgeRef]) -> Union[Vertex, Edge]:
        if isinstance(key, EdgeRef):
            return self._edges[key.index]
        if isinstance(key, str):
            key = self.vertex_by_id(key)
        self._check_vertex(key)
        return self._vertices[key]

    def vertices(self) -> Iterator[int]:
        return iter(range(len(self._vertices)))

    def edges(self) -> Iterator[EdgeRef]:
        for refs in self._out:
            yield from refs

    def out_edges(self, vertex: int) -> Iterator[EdgeRef]:
        self._check_vertex(vertex)
        return iter(list(self._out[vertex]))

    def num_vertices(self) -> int:
        return len(self._vertices)

    def set_root_vertex(self, vertex: int) -> None:
        self._root = vertex

    def get_root_vertex(self) -> int:
        return self._root

    def filtered(
        self,
        edge_predicate: Optional[EdgePredicate] = None,
        vertex_predicate: Optional[VertexPredicate] = None,
    ) -> GraphView:
        """View keeping the edges and vertices the predicates accept (None keeps all)."""
        return GraphView(self, edge_predicate, vertex_predicate)


class GraphView:
    """Read-only filtered view of a graph or of another view."""

    def __init__(
        self,
        base: Union[Graph, GraphView],
        edge_predicate: Optional[EdgePredicate] = None,
        vertex_predicate: Optional[VertexPredicate] = None,
    ) -> None:
        self._base = base
        self._edge_predicate = edge_predicate
        self._vertex_predicate = vertex_predicate

    def _keeps_vertex(self, vertex: int) -> bool:
        return self._vertex_predicate is None or bool(self._vertex_predicate(vertex))

    def _keeps_edge(self, ref: EdgeRef) -> bool:
        if self._edge_predicate is not None and not self._edge_predicate(ref):
            return False
        return self._keeps_vertex(ref.source) and self._keeps_vertex(ref.target)

    def __getitem__(self, key: Union[int, str, EdgeRef]) -> Union[Vertex, Edge]:
        return self._base[key]

    def vertices(self) -> Iterator[int]:
        return (v for v in self._base.vertices() if self._keeps_vertex(v))

    def edges(self) -> Iterator[EdgeRef]:
        return (e for e in self._base.edges() if self._keeps_edge(e))

    def out_edges(self, vertex: int) -> Iterator[EdgeRef]:
        return (e for e in self._base.out_edges(vertex) if self._keeps_edge(e))

    def num_vertices(self) -> int:
        """Size of the vertex index space, shared with the underlying graph."""
        return self._base.num_vertices()

    def filtered(
        self,
        edge_predicate: Optional[EdgePredicate] = None,
        vertex_predicate: Optional[VertexPredicate] = None,
    ) -> GraphView:
        return GraphView(self, edge_predicate, vertex_predicate)


_root_graph: Optional[Graph] = None


def root_graph() -> Graph:
    """The process-wide topology graph, created on first use."""
    global _root_graph
    if _root_graph is None:
        _root_graph = Graph()
    return _root_graph


def reset_root_graph() -> Graph:
    """Replace the process-wide topology graph with an empty one."""
    global _root_graph
    _root_graph = Graph()
    return _root_graph