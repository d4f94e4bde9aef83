"""Topology of a SuperMUC-style system derived from host names.

Host names follow the pattern ``iIIrRRcCCsSS`` (island, rack, column, slot).
Every host becomes a machine vertex below column, rack and island vertices.
"""

from __future__ import annotations

import re
import socket
from typing import Iterable, Optional

from yloc.adapter import Adapter
from yloc.components import Misc, Node
from yloc.graph import Graph
from yloc.graph_element import Edge, EdgeType
from yloc.status import Status, YlocError

_HOSTNAME_LENGTH = 12
_HOSTNAME_PATTERN = re.compile(r"i([0-9]{1,2})r([0-9]{1,2})c([0-9]{1,2})s([0-9]{1,2})")

# Prefix lengths of the host name naming column, rack and island.
_COLUMN_PREFIX = 9
_RACK_PREFIX = 6
_ISLAND_PREFIX = 3


class SuperMUCAdapter(Adapter):
    """Adapter for a system component identified by its name."""

    def __init__(self, name: str) -> None:
        self.name = name

    def to_string(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"SuperMUCAdapter({self.name!r})"


def parse_supermuc_hostname(hostname: str) -> tuple[str, str, str, str]:
    """Split a host name into its island, rack, column and slot numbers.

    Raises YlocError with status INIT_ERROR if the name does not follow the
    naming convention.
    """
    if len(hostname) != _HOSTNAME_LENGTH:
        raise YlocError(Status.INIT_ERROR, "hostname length does not match supermuc naming convention")
    match = _HOSTNAME_PATTERN.match(hostname)
    if match is None:
        raise YlocError(Status.INIT_ERROR, "hostname pattern does not match supermuc naming convention")
    island, rack, column, slot = match.groups()
    return island, rack, column, slot


def _make_system_vertex(graph: Graph, name: str) -> int:
    vertex = graph.add_vertex(f"system:{name}")
    element = graph[vertex]
    element.component_type = Misc
    element.description = name
    element.add_adapter(SuperMUCAdapter(name))
    return vertex


def _link(graph: Graph, parent: int, child: int) -> None:
    if not graph.has_edge(parent, child):
        graph.add_edge(parent, child, Edge(EdgeType.CHILD))
        graph.add_edge(child, parent, Edge(EdgeType.PARENT))


class ModuleSuperMUC:
    """Module adding the island/rack/column/slot hierarchy of all hosts.

    ``hostname`` is this process's host name and ``hostnames`` the host
    names of all processes; they default to the local host alone.
    Disabled unless switched on explicitly.
    """

    def __init__(self, hostname: Optional[str] = None, hostnames: Optional[Iterable[str]] = None) -> None:
        from yloc.lifecycle import InitOrder

        self.init_order = InitOrder.FIRST
        self.enabled = False
        self.hostname = socket.gethostname() if hostname is None else hostname
        self.hostnames = [self.hostname] if hostnames is None else list(hostnames)

    def init_graph(self, graph: Graph) -> None:
        """Add the host hierarchy to ``graph``; raises YlocError on a bad host name."""
        parse_supermuc_hostname(self.hostname)
        for name in self.hostnames:
            slot = graph.add_vertex(f"machine:{name}")
            element = graph[slot]
            element.component_type = Node
            element.description = name
            element.add_adapter(SuperMUCAdapter(name))

            column = _make_system_vertex(graph, name[:_COLUMN_PREFIX])
            rack = _make_system_vertex(graph, name[:_RACK_PREFIX])
            island = _make_system_vertex(graph, name[:_ISLAND_PREFIX])

            _link(graph, island, rack)
            _link(graph, rack, column)
            _link(graph, column, slot)