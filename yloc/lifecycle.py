"""Topology modules and initialisation of the root graph."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum
from typing import Iterable, Optional

from yloc.graph import Graph, root_graph
from yloc.status import YlocError


class InitOrder(IntEnum):
    """Order in which modules build their part of the graph."""

    FIRST = 0
    SECOND = 1


class Module(ABC):
    """A source of topology information that adds to the root graph."""

    init_order: InitOrder = InitOrder.FIRST
    enabled: bool = True

    @abstractmethod
    def init_graph(self, graph: Graph) -> None:
        """Build this module's subgraph and attach it to ``graph``.

        Raises YlocError if the module cannot provide its information.
        """


_MODULES: list[Module] = []
_ACTIVE: list[Module] = []


def register_module(module: Module) -> Module:
    """Make a module available to ``init``; returns the module."""
    _MODULES.append(module)
    return module


def list_modules() -> list[Module]:
    """A new list of the registered modules, in registration order."""
    return list(_MODULES)


def init(modules: Optional[Iterable[Module]] = None) -> list[tuple[Module, YlocError]]:
    """Let every enabled module build its part of the root graph.

    Modules run ordered by their init order, registration order breaking
    ties. A module that raises YlocError does not stop the others; the
    failures are returned as (module, error) pairs.
    """
    chosen = list_modules() if modules is None else list(modules)
    failures: list[tuple[Module, YlocError]] = []
    graph = root_graph()
    for module in sorted(chosen, key=lambda m: m.init_order):
        if not module.enabled:
            continue
        try:
            module.init_graph(graph)
        except YlocError as error:
            failures.append((module, error))
        else:
            _ACTIVE.append(module)
    return failures


def finalize() -> None:
    """Release the modules that ``init`` brought up."""
    _ACTIVE.clear()