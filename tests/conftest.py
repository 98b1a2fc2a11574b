import platform

import pytest

from hwspec.internal.constants import (
    DMIDECODE_COMMAND,
    LSBLK_COMMAND,
    LSPCI_COMMAND,
    NVIDIA_SMI_COMMAND,
    NVME_LIST_COMMAND,
    smartctl_command,
)
from hwspec.kernel.contracts import HostSnapshot
from tests.kernel.mocks import FixedHostSampler, MockCommandRunner
from tests.kernel.samples import (
    DMIDECODE_OUTPUT,
    LSBLK_OUTPUT,
    LSPCI_OUTPUT,
    NVIDIA_SMI_OUTPUT,
    NVME_LIST_OUTPUT,
    SMARTCTL_SSD_OUTPUT,
)

# --- Fixtures ---

@pytest.fixture(autouse=True)
def linux_host(monkeypatch):
    """Detectors see a Linux host unless a test says otherwise."""
    monkeypatch.setattr(platform, "system", lambda: "Linux")


@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch):
    """Keep the app data directory (and its log file) out of the real home."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    return home


@pytest.fixture
def runner():
    return MockCommandRunner()


@pytest.fixture
def healthy_runner():
    """A runner scripted with the outputs of a typical workstation."""
    return (
        MockCommandRunner()
        .set_output(LSPCI_COMMAND, LSPCI_OUTPUT)
        .set_output(NVIDIA_SMI_COMMAND, NVIDIA_SMI_OUTPUT)
        .set_output(DMIDECODE_COMMAND, DMIDECODE_OUTPUT)
        .set_output(LSBLK_COMMAND, LSBLK_OUTPUT)
        .set_output(smartctl_command("sda"), SMARTCTL_SSD_OUTPUT)
        .set_output(NVME_LIST_COMMAND, NVME_LIST_OUTPUT)
    )


@pytest.fixture
def host_snapshot():
    """8 cores at 3200 MHz with 16 GiB of memory."""
    return HostSnapshot(
        logical_cpus=8,
        cpu_frequencies_mhz=(3200.0,) * 8,
        total_memory_bytes=16 * 1024**3,
    )


@pytest.fixture
def sampler(host_snapshot):
    return FixedHostSampler(host_snapshot)
