# yloc

yloc models the hardware topology of a machine, or of a whole system, as a
directed graph. Each vertex is a hardware or logical component, such as a
machine, cache, core, GPU or MPI process. Each edge records how two
components are related: parent, child or GPU interconnect.

Information modules fill in the graph. Modules attach *adapters* to
vertices, and the adapters answer property queries such as `memory`,
`bdfid`, `numa_affinity`, `mpi_rank` or `cpu_affinity_mask`.

## Installation

```
pip install .
```

Install with `pip install .[test]` to get pytest as well.

## Concepts

- `yloc.graph.Graph` is the topology graph. Vertices are numbered in
  insertion order. `add_vertex()` adds an unnamed vertex, and
  `add_vertex(identifier)` returns the existing vertex if that identifier
  is already known. This lets several modules describe the same component,
  for example a machine keyed by `"machine:<hostname>"`.
  - `graph[v]` returns the `Vertex` for a vertex number or identifier.
  - `graph[e]` returns the `Edge` for an `EdgeRef`.
  - `graph.filtered(edge_predicate, vertex_predicate)` returns a read-only
    `GraphView`. Views can be filtered again.
  - `root_graph()` returns the shared process-wide graph, and
    `reset_root_graph()` replaces it with an empty one.
- `yloc.graph_element` defines `Vertex` and `Edge`. Both have `adapters`, a
  `description` and a `component_type`. An `Edge` also carries an
  `EdgeType`: `PARENT`, `CHILD` or `GPU_INTERCONNECT`.
  - `element.get(name, value_type=int)` returns the value from the first
    adapter that has one, or `None`.
  - Pass `str` as the value type to get the value as text.
  - `element.is_a(Cache)` tests the component type.
- `yloc.components` holds the component type hierarchy as classes, for
  example `Cache`, `L2DataCache`, `GPU` and `MPIProcess`.
  `component_by_name` and `registered_components` look them up by name.
- `yloc.adapter.Adapter` is the base class for adapters. A property that an
  adapter does not provide returns `None`. `global_properties()` lists the
  predefined properties.
- `yloc.affinity.AffinityMask` is a bit set with one bit per CPU. It
  supports `from_cpus`, `to_cpus`, `count`, `is_containing` and
  `is_contained_in`.
- `yloc.lifecycle` manages modules.
  - `register_module` makes a module known, and `list_modules` lists the
    registered ones.
  - `init()` runs every enabled module on the root graph, ordered by
    `InitOrder`. It returns the `(module, YlocError)` pairs of the modules
    that failed.
  - `finalize()` ends the session.
- `yloc.query` provides `bfs_distance_vector`, `make_edge_weight_map` and
  `dijkstra_path_distance_vector`.
- `yloc.util` provides `lowest_containing_vertex`, `num_vertices_view`,
  `print_property`, `vertex_range` and `edge_range`. For Graphviz output it
  has `format_graph_dot` and `write_graph_dot_file`.
- `yloc.status` defines the `Status` codes and `YlocError`, which carries
  one of them.

## Example

```python
from yloc.graph import Graph
from yloc.graph_element import Edge, EdgeType
from yloc.components import Node, LogicalCore
from yloc.query import bfs_distance_vector
from yloc.util import write_graph_dot_file

g = Graph()
machine = g.add_vertex("machine:host0")
g[machine].component_type = Node
core = g.add_vertex()
g[core].component_type = LogicalCore
g.add_edge(machine, core, Edge(EdgeType.CHILD))
g.add_edge(core, machine, Edge(EdgeType.PARENT))
g.set_root_vertex(machine)

cores = g.filtered(vertex_predicate=lambda v: g[v].is_a(LogicalCore))
distances = bfs_distance_vector(g, machine)
for v in cores.vertices():
    print(v, distances[v])

write_graph_dot_file(g, "graph.dot", ["memory", "numa_affinity"], edge_labels=True)
```

## Modules

- `yloc.supermuc.ModuleSuperMUC(hostname, hostnames)` builds the
  island/rack/column/slot hierarchy. It expects host names of the form
  `iNNrNNcNNsNN`. It is disabled by default: set `enabled = True` to use it.
  If the host name does not follow the convention, it raises `YlocError`
  with status `INIT_ERROR`.
- `yloc.mpi.ModuleMPI(hostname, hostnames, cpusets)` adds one `MPIProcess`
  vertex per rank, attached to that rank's machine vertex. For ranks on the
  local host that have a non-empty CPU set, the process goes under the
  lowest component whose `cpu_affinity_mask` contains that set.
  `ModuleMPI.local()` builds the module for a single process on this host.

Both modules take the gathered host names and CPU sets as arguments, so
they work with any communication layer.

## What it does not do

yloc does not probe the hardware itself. There is no detection of caches,
cores, NUMA nodes, PCI devices or GPUs. An application must supply that
information through its own `Module` and `Adapter` subclasses. yloc also
does not talk to MPI: rank host names and CPU sets must be passed in.

There is no command-line tool.