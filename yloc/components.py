"""Hardware component types forming an is-a hierarchy.

Component types are used as classes: a graph element refers to the class
itself, and ``is_a`` checks the class hierarchy.
"""

from __future__ import annotations

_REGISTRY: dict[str, type[Component]] = {}


class Component:
    """Base type of every hardware component type."""

    def __init_subclass__(cls, **kwargs) -> None:
        super().__init_subclass__(**kwargs)
        _REGISTRY[cls.__name__] = cls

    @classmethod
    def is_a(cls, component_type: type[Component]) -> bool:
        """Return True if this type is ``component_type`` or derives from it."""
        return issubclass(cls, component_type)

    @classmethod
    def test_component(cls, other: type[Component]) -> bool:
        """Return True if ``other`` is this type or derives from it."""
        if cls is Component:
            return True
        return issubclass(other, cls)

    @classmethod
    def to_string(cls) -> str:
        return cls.__name__


def component_by_name(name: str) -> type[Component]:
    """Look up a registered component type by its name."""
    try:
        return _REGISTRY[name]
    except KeyError:
        raise KeyError(f"unknown component type: {name!r}") from None


def registered_components() -> dict[str, type[Component]]:
    """Return a copy of the name-to-type registry."""
    return dict(_REGISTRY)


class UnknownComponentType(Component):
    """Null type for elements whose type is not yet known."""


class Node(Component):
    pass


# Compute components
class Compute(Component):
    pass


class CPUCore(Compute):
    pass


class LogicalCore(CPUCore):
    pass


class PhysicalCore(CPUCore):
    pass


# Storage components
class Storage(Component):
    pass


class Memory(Storage):
    pass


class Cache(Storage):
    pass


class PersistentStorage(Storage):
    pass


class VolatileMemory(Memory):
    pass


class NonVolatileMemory(Memory):
    pass


class DataCache(Cache):
    pass


class InstructionCache(Cache):
    pass


class UnifiedCache(DataCache, InstructionCache):
    pass


class L1Cache(Cache):
    pass


class L2Cache(Cache):
    pass


class L3Cache(Cache):
    pass


class L4Cache(Cache):
    pass


class L1DataCache(L1Cache, DataCache):
    pass


class L2DataCache(L2Cache, DataCache):
    pass


class L3DataCache(L3Cache, DataCache):
    pass


class L4DataCache(L4Cache, DataCache):
    pass


class L1InstructionCache(L1Cache, InstructionCache):
    pass


class L2InstructionCache(L2Cache, InstructionCache):
    pass


class L3InstructionCache(L3Cache, InstructionCache):
    pass


class L4InstructionCache(L4Cache, InstructionCache):
    pass


class L1UnifiedCache(L1Cache, UnifiedCache):
    pass


class L2UnifiedCache(L2Cache, UnifiedCache):
    pass


class L3UnifiedCache(L3Cache, UnifiedCache):
    pass


class L4UnifiedCache(L4Cache, UnifiedCache):
    pass


class SolidStateDrive(PersistentStorage):
    pass


class HardDiskDrive(PersistentStorage):
    pass


# Accelerator components
class PCIDevice(Component):
    pass


class Bridge(Component):
    pass


class LogicalAccelerator(Component):
    pass


class LogicalGPU(LogicalAccelerator):
    pass


class Accelerator(PCIDevice):
    pass


class GPU(Accelerator):
    pass


class FPGA(Accelerator):
    pass


class GPUCore(GPU, Compute):
    pass


class GPUMemory(GPU, Memory):
    pass


# IO components
class InputOutput(Component):
    pass


class NetworkDevice(PCIDevice, InputOutput):
    pass


# Link components
class Link(Component):
    pass


class Bus(Link):
    pass


# Miscellaneous
class Misc(Component):
    """Filler type for miscellaneous components."""


class LogicalEdgeType(Component):
    """Edge type that gives the graph an ordering."""


class Parent(LogicalEdgeType):
    pass


class Child(LogicalEdgeType):
    pass


class LogicalComponent(Component):
    pass


class MPIProcess(LogicalComponent):
    pass