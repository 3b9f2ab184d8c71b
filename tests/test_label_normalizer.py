from proxsensors.hardware.sensors.processors import LabelNormalizer


def test_cores_are_numbered_from_one_in_order_of_appearance():
    normalizer = LabelNormalizer()
    normalizer.enter_device("coretemp-isa-0000")

    labels = [normalizer.normalize("coretemp-isa-0000", raw) for raw in ("Core 0", "Core 4", "core 9", "CORE 2")]

    assert labels == ["Core 1", "Core 2", "Core 3", "Core 4"]


def test_non_core_labels_pass_through():
    normalizer = LabelNormalizer()
    normalizer.enter_device("coretemp-isa-0000")

    assert normalizer.normalize("coretemp-isa-0000", "Package id 0") == "Package id 0"
    assert normalizer.cpu_core_counter == 1


def test_other_devices_are_untouched():
    normalizer = LabelNormalizer()
    normalizer.enter_device("k10temp-pci-00c3")

    assert normalizer.normalize("k10temp-pci-00c3", "Core 0") == "Core 0"
    assert normalizer.normalize("", "Core 0") == "Core 0"


def test_counter_resets_only_on_cpu_device_entry():
    normalizer = LabelNormalizer()
    normalizer.enter_device("coretemp-isa-0000")
    normalizer.normalize("coretemp-isa-0000", "Core 0")
    normalizer.normalize("coretemp-isa-0000", "Core 1")
    assert normalizer.cpu_core_counter == 3

    normalizer.enter_device("nvme-pci-0100")
    assert normalizer.cpu_core_counter == 3

    normalizer.enter_device("coretemp-isa-0001")
    assert normalizer.cpu_core_counter == 1
