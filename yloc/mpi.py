"""MPI processes as vertices of the topology graph."""

from __future__ import annotations

import os
import socket
from typing import Iterable, Optional, Union

from yloc.adapter import Adapter
from yloc.affinity import AffinityMask
from yloc.components import MPIProcess
from yloc.graph import Graph
from yloc.graph_element import Edge, EdgeType
from yloc.lifecycle import InitOrder, Module
from yloc.status import Status, YlocError
from yloc.util import lowest_containing_vertex

CpuSet = Union[AffinityMask, Iterable[int]]


class MPIAdapter(Adapter):
    """Adapter for one MPI process, identified by its rank."""

    def __init__(self, rank: int) -> None:
        self.rank = rank
        self._mask = AffinityMask()

    def to_string(self) -> str:
        return str(self.rank)

    def mpi_rank(self) -> Optional[int]:
        return self.rank

    def numa_affinity(self) -> Optional[int]:
        """A process has no NUMA affinity of its own unless declared fixed."""
        return self._known("numa_affinity")

    def cpu_affinity_mask(self) -> Optional[AffinityMask]:
        return self._mask if self._mask.any() else None

    def set_cpu_affinity_mask(self, mask: AffinityMask) -> None:
        self._mask = mask

    def __repr__(self) -> str:
        return f"MPIAdapter({self.rank})"


def _own_affinity() -> list[int]:
    getter = getattr(os, "sched_getaffinity", None)
    if getter is None:
        return []
    return sorted(getter(0))


def _as_mask(cpus: CpuSet) -> AffinityMask:
    if isinstance(cpus, AffinityMask):
        return cpus
    return AffinityMask.from_cpus(cpus)


class ModuleMPI(Module):
    """Module adding one vertex per MPI rank below the hardware it runs on.

    ``hostname`` is this process's host name, ``hostnames`` and ``cpusets``
    hold the host name and CPU set of every rank, indexed by rank. Without
    ``hostnames`` the world is this process alone; without ``cpusets`` only
    that single process's own affinity is known.
    """

    init_order = InitOrder.SECOND

    def __init__(
        self,
        hostname: Optional[str] = None,
        hostnames: Optional[Iterable[str]] = None,
        cpusets: Optional[Iterable[CpuSet]] = None,
    ) -> None:
        self.hostname = hostname
        if hostnames is None:
            self.hostnames = [] if hostname is None else [hostname]
            default_sets: list[CpuSet] = [_own_affinity()] if hostname is not None else []
        else:
            self.hostnames = list(hostnames)
            default_sets = [[] for _ in self.hostnames]
        self.cpusets = default_sets if cpusets is None else list(cpusets)
        if len(self.cpusets) != len(self.hostnames):
            raise ValueError("one cpu set is needed per rank")

    @classmethod
    def local(cls) -> ModuleMPI:
        """Module for a single process on the local host."""
        return cls(socket.gethostname())

    def init_graph(self, graph: Graph) -> None:
        """Attach a vertex per rank; raises YlocError if no host name is known."""
        if self.hostname is None:
            raise YlocError(Status.INIT_ERROR, "MPI is not initialized")
        for rank, (name, cpus) in enumerate(zip(self.hostnames, self.cpusets)):
            node = graph.add_vertex(f"machine:{name}")
            process = graph.add_vertex(f"mpi_rank:{rank}")

            element = graph[process]
            element.component_type = MPIProcess
            adapter = MPIAdapter(rank)
            element.add_adapter(adapter)

            if name == self.hostname:
                mask = _as_mask(cpus)
                if mask.any():
                    adapter.set_cpu_affinity_mask(mask)
                    node = lowest_containing_vertex(mask, graph)

            graph.add_edge(node, process, Edge(EdgeType.CHILD))
            graph.add_edge(process, node, Edge(EdgeType.PARENT))