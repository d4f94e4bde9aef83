import pytest

from yloc import components as c


def test_direct_and_transitive_is_a():
    assert c.LogicalCore.is_a(c.CPUCore)
    assert c.LogicalCore.is_a(c.Compute)
    assert c.LogicalCore.is_a(c.Component)
    assert not c.LogicalCore.is_a(c.Storage)


def test_is_a_self():
    assert c.GPU.is_a(c.GPU)


def test_multiple_inheritance():
    assert c.L1UnifiedCache.is_a(c.L1Cache)
    assert c.L1UnifiedCache.is_a(c.DataCache)
    assert c.L1UnifiedCache.is_a(c.InstructionCache)
    assert c.GPUCore.is_a(c.Compute)
    assert c.GPUCore.is_a(c.PCIDevice)
    assert c.NetworkDevice.is_a(c.InputOutput)
    assert not c.L1DataCache.is_a(c.InstructionCache)


def test_gpu_is_accelerator_and_pci_device():
    assert c.GPU.is_a(c.Accelerator)
    assert c.GPU.is_a(c.PCIDevice)
    assert not c.LogicalGPU.is_a(c.PCIDevice)


def test_test_component_is_inverse_of_is_a():
    for name, cls in c.registered_components().items():
        for other in c.registered_components().values():
            assert cls.test_component(other) == other.is_a(cls), name


def test_base_test_component_accepts_everything():
    assert c.Component.test_component(c.Misc)
    assert c.Component.test_component(c.MPIProcess)


def test_to_string_is_type_name():
    assert c.GPU.to_string() == "GPU"
    assert c.Component.to_string() == "Component"
    assert c.UnknownComponentType.to_string() == "UnknownComponentType"


def test_lookup_by_name():
    assert c.component_by_name("MPIProcess") is c.MPIProcess
    assert c.component_by_name("L3DataCache") is c.L3DataCache


def test_lookup_unknown_name():
    with pytest.raises(KeyError):
        c.component_by_name("NoSuchThing")


def test_registry_contents():
    registry = c.registered_components()
    assert "Component" not in registry
    for name, cls in registry.items():
        assert cls.to_string() == name
        assert cls.is_a(c.Component)


def test_registry_is_a_copy():
    registry = c.registered_components()
    registry.clear()
    assert c.component_by_name("Node") is c.Node