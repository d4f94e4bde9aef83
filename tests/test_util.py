import io

import pytest

from yloc.adapter import Adapter
from yloc.affinity import AffinityMask
from yloc.components import Cache, MPIProcess, Node
from yloc.graph import Graph
from yloc.graph_element import Edge, EdgeType
from yloc.util import (
    edge_range,
    format_graph_dot,
    lowest_containing_vertex,
    num_vertices_view,
    print_property,
    vertex_range,
    write_graph_dot_file,
)

SIZE = 4


class _MaskAdapter(Adapter):
    def __init__(self, cpus=None, memory=None):
        self._mask = None if cpus is None else AffinityMask.from_cpus(cpus, SIZE)
        self._memory = memory

    def cpu_affinity_mask(self):
        return self._mask

    def memory(self):
        return self._memory


def _link(graph, parent, child):
    graph.add_edge(parent, child, Edge(EdgeType.CHILD))
    graph.add_edge(child, parent, Edge(EdgeType.PARENT))


def _add(graph, cpus, component_type=Cache):
    vertex = graph.add_vertex()
    graph[vertex].add_adapter(_MaskAdapter(cpus))
    graph[vertex].component_type = component_type
    return vertex


@pytest.fixture
def tree():
    graph = Graph()
    root = _add(graph, [0, 1, 2, 3], Node)
    graph.set_root_vertex(root)
    left = _add(graph, [0, 1])
    right = _add(graph, [2, 3])
    leaf0 = _add(graph, [0])
    leaf1 = _add(graph, [1])
    mpi = _add(graph, [1], MPIProcess)
    _link(graph, root, left)
    _link(graph, root, right)
    _link(graph, left, leaf0)
    _link(graph, left, mpi)
    _link(graph, left, leaf1)
    return graph, dict(root=root, left=left, right=right, leaf0=leaf0, leaf1=leaf1, mpi=mpi)


def test_lowest_containing_single_cpu(tree):
    graph, v = tree
    assert lowest_containing_vertex(AffinityMask.from_cpus([1], SIZE), graph) == v["leaf1"]


def test_lowest_containing_pair(tree):
    graph, v = tree
    assert lowest_containing_vertex(AffinityMask.from_cpus([0, 1], SIZE), graph) == v["left"]
    assert lowest_containing_vertex(AffinityMask.from_cpus([3], SIZE), graph) == v["right"]


def test_lowest_containing_spanning_mask_is_root(tree):
    graph, v = tree
    assert lowest_containing_vertex(AffinityMask.from_cpus([1, 2], SIZE), graph) == v["root"]


def test_lowest_containing_prefers_smaller_mask():
    graph = Graph()
    root = _add(graph, [0, 1, 2, 3], Node)
    graph.set_root_vertex(root)
    wide = _add(graph, [0, 1, 2])
    narrow = _add(graph, [0])
    _link(graph, root, wide)
    _link(graph, root, narrow)
    assert lowest_containing_vertex(AffinityMask.from_cpus([0], SIZE), graph) == narrow


def test_num_vertices_view_counts_filtered(tree):
    graph, _ = tree
    caches = graph.filtered(vertex_predicate=lambda vd: graph[vd].is_a(Cache))
    assert num_vertices_view(caches) == graph.num_vertices() - 2
    assert num_vertices_view(graph) == graph.num_vertices()


def test_vertex_and_edge_range(tree):
    graph, _ = tree
    assert list(vertex_range(graph)) == list(range(graph.num_vertices()))
    assert list(edge_range(graph)) == list(graph.edges())


def test_print_property_with_and_without_value():
    graph = Graph()
    vertex = graph.add_vertex()
    graph[vertex].add_adapter(_MaskAdapter(memory=1024))
    out = io.StringIO()
    print_property(graph, vertex, "memory", file=out)
    print_property(graph, vertex, "power", file=out)
    assert out.getvalue() == "memory=1024\npower=has no value\n"


def test_print_property_defaults_to_stdout(capsys):
    graph = Graph()
    vertex = graph.add_vertex()
    print_property(graph, vertex, "bdfid")
    assert capsys.readouterr().out == "bdfid=has no value\n"


def _small_graph():
    graph = Graph()
    host = graph.add_vertex()
    graph[host].component_type = Node
    graph[host].description = "host"
    graph[host].add_adapter(_MaskAdapter(memory=1024))
    cache = graph.add_vertex()
    graph[cache].component_type = Cache
    _link(graph, host, cache)
    return graph


def test_format_graph_dot_structure():
    text = format_graph_dot(_small_graph(), ["memory"])
    lines = text.splitlines()
    assert lines[0] == "digraph G {"
    assert lines[-1] == "}"
    assert '0[label="Node: host\nVD=0\nmemory=1024\n"];' in text
    assert '0->1 [label=""];' in text
    assert '1->0 [label=""];' in text


def test_format_graph_dot_edge_labels():
    text = format_graph_dot(_small_graph(), edge_labels=True)
    assert "0->1 [label=child];" in text
    assert "1->0 [label=parent];" in text


def test_format_graph_dot_escapes_quotes():
    graph = Graph()
    vertex = graph.add_vertex()
    graph[vertex].description = 'say "hi"'
    assert '\\"hi\\"' in format_graph_dot(graph)


def test_format_graph_dot_of_view_keeps_indices():
    graph = _small_graph()
    view = graph.filtered(vertex_predicate=lambda vd: vd == 1)
    text = format_graph_dot(view)
    assert "VD=1" in text
    assert "VD=0" not in text
    assert "->" not in text


def test_write_graph_dot_file_matches_format(tmp_path):
    graph = _small_graph()
    target = tmp_path / "graph.dot"
    write_graph_dot_file(graph, str(target), ["memory"], True)
    assert target.read_text(encoding="utf-8") == format_graph_dot(graph, ["memory"], True)