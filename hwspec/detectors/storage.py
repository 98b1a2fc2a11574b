"""
Storage detection: the largest block device listed by `lsblk`, classified
as NVMe (by PCIe generation) or SATA SSD/HDD.
"""
from dataclasses import dataclass
from typing import Optional

from hwspec.detectors.guard import check_platform
from hwspec.internal.constants import (
    LSBLK_COMMAND,
    NVME_LIST_COMMAND,
    STORAGE_NVME,
    STORAGE_NVME_GEN3,
    STORAGE_NVME_GEN4,
    STORAGE_SATA_HDD,
    STORAGE_SATA_SSD,
    UINT64_MAX,
    UNKNOWN,
    smartctl_command,
)
from hwspec.internal.logging import get_logger
from hwspec.kernel.contracts import CommandRunner, Detection, StorageSpec
from hwspec.kernel.errors import CommandFailedError

logger = get_logger(__name__)


@dataclass(frozen=True)
class BlockDevice:
    """One row of `lsblk -d -o NAME,TYPE,SIZE,TRAN --bytes`."""
    name: str
    device_type: str
    size_bytes: int
    transport: Optional[str] = None


def parse_size(value: str) -> int:
    """Unsigned 64-bit byte count; anything else counts as 0."""
    if not (value.isascii() and value.isdigit()):
        return 0
    size = int(value)
    return size if size <= UINT64_MAX else 0


def parse_block_devices(lsblk_output: str) -> list[BlockDevice]:
    devices = []
    for line in lsblk_output.splitlines()[1:]:  # header
        fields = line.split()
        if len(fields) < 3:
            continue
        devices.append(BlockDevice(
            name=fields[0],
            device_type=fields[1],
            size_bytes=parse_size(fields[2]),
            transport=fields[3] if len(fields) > 3 else None,
        ))
    return devices


def classify_nvme(nvme_list_output: str) -> str:
    if "PCIe 4.0" in nvme_list_output:
        return STORAGE_NVME_GEN4
    if "PCIe 3.0" in nvme_list_output:
        return STORAGE_NVME_GEN3
    return STORAGE_NVME


def classify_sata(smartctl_output: str) -> str:
    if "Solid State Device" in smartctl_output:
        return STORAGE_SATA_SSD
    return STORAGE_SATA_HDD


def _classify(runner: CommandRunner, device: BlockDevice, current: str) -> str:
    """
    Technology of a newly found largest device. Keeps `current` when the
    probing command cannot be started or the transport is not recognised.

    A probe that starts but exits non-zero is still classified from its
    output: smartctl encodes health findings in its exit status.
    """
    if device.name.startswith("nvme"):
        command, classify = NVME_LIST_COMMAND, classify_nvme
    elif device.transport == "sata":
        command, classify = smartctl_command(device.name), classify_sata
    else:
        return current

    try:
        result = runner.run(command)
    except OSError as e:
        logger.warning("Storage probe could not be started", device=device.name, command=command[1], error=str(e))
        return current
    return classify(result.stdout)


def detect_storage(runner: CommandRunner) -> Detection[StorageSpec]:
    check_platform()

    try:
        result = runner.run(LSBLK_COMMAND)
    except OSError as e:
        raise CommandFailedError(f"Failed to execute lsblk: {e}", command="lsblk") from e

    if not result.ok:
        raise CommandFailedError("lsblk command failed", command="lsblk")

    largest_size = 0
    technology = UNKNOWN
    for device in parse_block_devices(result.stdout):
        if device.size_bytes > largest_size:
            largest_size = device.size_bytes
            technology = _classify(runner, device, technology)

    if largest_size == 0:
        raise CommandFailedError("Could not determine storage size", command="lsblk")

    storage = StorageSpec(size_bytes=largest_size, technology=technology)
    if technology == UNKNOWN:
        return Detection.degraded(storage, reason="largest block device has an unrecognised transport")

    logger.info("Storage detected", size_bytes=largest_size, technology=technology)
    return Detection.confident(storage)
