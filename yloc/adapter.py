"""Adapters that expose module-specific hardware data as named properties."""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Callable, ClassVar, Mapping, Optional

from yloc.affinity import AffinityMask


def _format_value(value: Any) -> str:
    """Render a property value as text; masks print highest CPU first."""
    if isinstance(value, AffinityMask):
        return "".join("1" if value[cpu] else "0" for cpu in reversed(range(len(value))))
    return str(value)


class Property:
    """A named property with a fixed value type, read from an adapter."""

    __slots__ = ("name", "value_type", "_getter")

    def __init__(self, name: str, value_type: type, getter: Callable[[Adapter], Any]) -> None:
        self.name = name
        self.value_type = value_type
        self._getter = getter

    def supports(self, value_type: type) -> bool:
        """Return True if the property yields values of exactly ``value_type``."""
        return value_type is self.value_type

    def value(self, adapter: Adapter) -> Any:
        """Value of the property for ``adapter``, or None if it has none."""
        return self._getter(adapter)

    def value_to_string(self, adapter: Adapter) -> Optional[str]:
        """Value of the property for ``adapter`` as text, or None."""
        value = self.value(adapter)
        if value is None:
            return None
        return _format_value(value)

    def __repr__(self) -> str:
        return f"Property({self.name!r}, {self.value_type.__name__})"


class Adapter:
    """Base adapter: every property is absent unless a subclass provides it.

    A subclass either overrides a property method or lists a constant value
    for it in ``_fixed_values``; anything else is absent (None).

    Units: temperature in millidegrees Celsius, memory in bytes, loads in
    percent, frequencies in Hz, latency in nanoseconds, power in microwatts,
    bandwidths and throughputs in bytes per second.
    """

    _fixed_values: ClassVar[Mapping[str, Any]] = MappingProxyType({})

    def _known(self, name: str) -> Any:
        """Constant value this adapter class declares for ``name``, or None."""
        return self._fixed_values.get(name)

    def module_map(self) -> Mapping[str, Property]:
        """Properties this adapter offers; defaults to the global properties."""
        return global_properties()

    def to_string(self) -> str:
        return str(self._known("to_string") or "")

    def temperature(self) -> Optional[int]:
        return self._known("temperature")

    def memory(self) -> Optional[int]:
        return self._known("memory")

    def memory_usage(self) -> Optional[int]:
        return self._known("memory_usage")

    def memory_load(self) -> Optional[int]:
        return self._known("memory_load")

    def memory_frequency(self) -> Optional[int]:
        return self._known("memory_frequency")

    def bdfid(self) -> Optional[int]:
        return self._known("bdfid")

    def numa_affinity(self) -> Optional[int]:
        return self._known("numa_affinity")

    def bandwidth(self) -> Optional[int]:
        return self._known("bandwidth")

    def bandwidth_min(self) -> Optional[int]:
        return self._known("bandwidth_min")

    def bandwidth_max(self) -> Optional[int]:
        return self._known("bandwidth_max")

    def throughput(self) -> Optional[int]:
        return self._known("throughput")

    def latency(self) -> Optional[int]:
        return self._known("latency")

    def frequency(self) -> Optional[int]:
        return self._known("frequency")

    def power(self) -> Optional[int]:
        return self._known("power")

    def usage(self) -> Optional[int]:
        return self._known("usage")

    def load(self) -> Optional[int]:
        return self._known("load")

    def pci_throughput(self) -> Optional[int]:
        return self._known("pci_throughput")

    def pci_throughput_read(self) -> Optional[int]:
        return self._known("pci_throughput_read")

    def pci_throughput_write(self) -> Optional[int]:
        return self._known("pci_throughput_write")

    def cpu_affinity_mask(self) -> Optional[AffinityMask]:
        return self._known("cpu_affinity_mask")

    def mpi_rank(self) -> Optional[int]:
        return self._known("mpi_rank")


_PROPERTY_TABLE: tuple[tuple[str, type, Callable[[Adapter], Any]], ...] = (
    ("memory", int, lambda a: a.memory()),
    ("memory_usage", int, lambda a: a.memory_usage()),
    ("memory_load", int, lambda a: a.memory_load()),
    ("memory_frequency", int, lambda a: a.memory_frequency()),
    ("bdfid", int, lambda a: a.bdfid()),
    ("numa_affinity", int, lambda a: a.numa_affinity()),
    ("bandwidth", int, lambda a: a.bandwidth()),
    ("bandwidth_min", int, lambda a: a.bandwidth_min()),
    ("bandwidth_max", int, lambda a: a.bandwidth_max()),
    ("throughput", int, lambda a: a.throughput()),
    ("latency", int, lambda a: a.latency()),
    ("frequency", int, lambda a: a.frequency()),
    ("temperature", int, lambda a: a.temperature()),
    ("power", int, lambda a: a.power()),
    ("usage", int, lambda a: a.usage()),
    ("load", int, lambda a: a.load()),
    ("pci_throughput", int, lambda a: a.pci_throughput()),
    ("pci_throughput_read", int, lambda a: a.pci_throughput_read()),
    ("pci_throughput_write", int, lambda a: a.pci_throughput_write()),
    ("mpi_rank", int, lambda a: a.mpi_rank()),
    ("cpu_affinity_mask", AffinityMask, lambda a: a.cpu_affinity_mask()),
)

_GLOBAL_PROPERTIES: Mapping[str, Property] = MappingProxyType(
    {name: Property(name, value_type, getter) for name, value_type, getter in _PROPERTY_TABLE}
)


def global_properties() -> Mapping[str, Property]:
    """Read-only map of the predefined properties every adapter understands."""
    return _GLOBAL_PROPERTIES