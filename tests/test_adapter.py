import pytest

from yloc.adapter import Adapter, Property, global_properties
from yloc.affinity import AffinityMask


class MemoryAdapter(Adapter):
    def __init__(self, size):
        self.size = size

    def memory(self):
        return self.size


class MaskAdapter(Adapter):
    def __init__(self, mask):
        self.mask = mask

    def cpu_affinity_mask(self):
        return self.mask


PROPERTY_NAMES = {
    "memory",
    "memory_usage",
    "memory_load",
    "memory_frequency",
    "bdfid",
    "numa_affinity",
    "bandwidth",
    "bandwidth_min",
    "bandwidth_max",
    "throughput",
    "latency",
    "frequency",
    "temperature",
    "power",
    "usage",
    "load",
    "pci_throughput",
    "pci_throughput_read",
    "pci_throughput_write",
    "mpi_rank",
    "cpu_affinity_mask",
}


def test_global_property_names():
    assert set(global_properties()) == PROPERTY_NAMES


@pytest.mark.parametrize("name", sorted(PROPERTY_NAMES))
def test_base_adapter_has_no_values(name):
    prop = global_properties()[name]
    assert prop.value(Adapter()) is None
    assert prop.value_to_string(Adapter()) is None


def test_base_adapter_to_string_is_empty():
    assert Adapter().to_string() == ""


def test_module_map_defaults_to_global():
    assert Adapter().module_map() is global_properties()


def test_global_properties_read_only():
    with pytest.raises(TypeError):
        global_properties()["extra"] = None  # type: ignore[index]


def test_property_reads_overridden_method():
    prop = global_properties()["memory"]
    assert prop.value(MemoryAdapter(1024)) == 1024
    assert prop.value_to_string(MemoryAdapter(1024)) == "1024"


def test_property_supports_exact_type():
    assert global_properties()["memory"].supports(int)
    assert not global_properties()["memory"].supports(str)
    assert global_properties()["cpu_affinity_mask"].supports(AffinityMask)
    assert not global_properties()["cpu_affinity_mask"].supports(int)


def test_mask_to_string_prints_highest_cpu_first():
    mask = AffinityMask.from_cpus([0, 2], 4)
    prop = global_properties()["cpu_affinity_mask"]
    assert prop.value(MaskAdapter(mask)) == mask
    assert prop.value_to_string(MaskAdapter(mask)) == "0101"


def test_custom_property():
    prop = Property("size", int, lambda adapter: adapter.size)
    assert prop.name == "size"
    assert prop.value(MemoryAdapter(7)) == 7
    assert prop.value_to_string(MemoryAdapter(7)) == "7"