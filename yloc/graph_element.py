"""Vertices and edges of the topology graph and their property lookup."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable

from yloc.adapter import Adapter, global_properties
from yloc.components import Component, UnknownComponentType


@dataclass(eq=False, kw_only=True)
class GraphElement:
    """Common part of vertices and edges: adapters, description and type."""

    adapters: list[Adapter] = field(default_factory=list)
    description: str = ""
    component_type: type[Component] = UnknownComponentType

    def _first(self, read: Callable[[Adapter], Any]) -> Any:
        for adapter in self.adapters:
            result = read(adapter)
            if result is not None:
                return result
        return None

    def get(self, property_name: str, value_type: type = int) -> Any:
        """Value of a property from the first adapter that has one.

        With ``value_type`` str the value is returned as text. Global
        properties are searched first; a name that is global but of another
        type yields None without consulting module-specific properties.
        """
        prop = global_properties().get(property_name)
        if prop is not None:
            if value_type is str:
                return self._first(prop.value_to_string)
            if prop.supports(value_type):
                return self._first(prop.value)
            return None

        for adapter in self.adapters:
            prop = adapter.module_map().get(property_name)
            if prop is None:
                continue
            if value_type is str:
                result = prop.value_to_string(adapter)
            elif prop.supports(value_type):
                result = prop.value(adapter)
            else:
                continue
            if result is not None:
                return result
        return None

    def add_adapter(self, adapter: Adapter) -> None:
        self.adapters.append(adapter)

    def is_a(self, component_type: type[Component]) -> bool:
        return self.component_type.is_a(component_type)

    def to_string(self) -> str:
        return f"{self.component_type.to_string()}: {self.description}"


@dataclass(eq=False)
class Vertex(GraphElement):
    """A hardware component in the topology graph."""


class EdgeType(Enum):
    PARENT = 0
    CHILD = 1
    GPU_INTERCONNECT = 2


@dataclass(eq=False)
class Edge(GraphElement):
    """A directed relation between two components."""

    edge_type: EdgeType

    def __post_init__(self) -> None:
        self.edge_type = EdgeType(self.edge_type)