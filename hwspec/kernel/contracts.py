"""
Data contracts of the hwspec kernel.

Detectors, the report assembler and the adapters exchange only these types.
Every record is an immutable dataclass with no logic beyond validation; the
capabilities at the bottom are the ports that adapters provide.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Generic, Protocol, Sequence, TypeVar

from hwspec.internal.constants import UINT32_MAX, UINT64_MAX

T = TypeVar("T")


def _check_unsigned(field: str, value: int, limit: int = UINT64_MAX) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{field} must be an int")
    if value < 0 or value > limit:
        raise ValueError(f"{field} out of range: {value}")


# ---------------------------------------------------------------------
# Hardware records
# ---------------------------------------------------------------------

@dataclass(frozen=True)
class RamSpec:
    size_bytes: int
    technology: str

    def __post_init__(self):
        _check_unsigned("size_bytes", self.size_bytes)


@dataclass(frozen=True)
class StorageSpec:
    """The largest block device found on the host."""
    size_bytes: int
    technology: str

    def __post_init__(self):
        _check_unsigned("size_bytes", self.size_bytes)


@dataclass(frozen=True)
class GpuSpec:
    model: str


@dataclass(frozen=True)
class CpuSpec:
    core_count: int
    clock_hz: int  # 0 when unknown

    def __post_init__(self):
        _check_unsigned("core_count", self.core_count, UINT32_MAX)
        _check_unsigned("clock_hz", self.clock_hz)


@dataclass(frozen=True)
class Resource:
    ram: RamSpec
    storage: StorageSpec
    gpus: tuple[GpuSpec, ...]
    cpu: CpuSpec

    def __post_init__(self):
        if not self.gpus:
            raise ValueError("gpus cannot be empty")


@dataclass(frozen=True)
class ResourceReport:
    name: str
    description: str
    network: str
    kind: str
    resource: Resource


# ---------------------------------------------------------------------
# Detection outcomes
# ---------------------------------------------------------------------

class DetectionStatus(str, Enum):
    CONFIDENT = "confident"
    DEGRADED = "degraded"


@dataclass(frozen=True)
class Detection(Generic[T]):
    """
    The successful outcome of a detector.

    DEGRADED means the value is a sentinel ("Unknown", "Unknown GPU") because
    the host did not expose the information. Hard failures are raised as
    `hwspec.kernel.errors.PlatformError` instead.
    """
    value: T
    status: DetectionStatus = DetectionStatus.CONFIDENT
    reason: str = ""

    @classmethod
    def confident(cls, value: T) -> "Detection[T]":
        return cls(value=value, status=DetectionStatus.CONFIDENT)

    @classmethod
    def degraded(cls, value: T, reason: str) -> "Detection[T]":
        return cls(value=value, status=DetectionStatus.DEGRADED, reason=reason)

    @property
    def is_degraded(self) -> bool:
        return self.status is DetectionStatus.DEGRADED


# ---------------------------------------------------------------------
# Capabilities
# ---------------------------------------------------------------------

@dataclass(frozen=True)
class CommandResult:
    args: tuple[str, ...]
    returncode: int
    stdout: str
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0


@dataclass(frozen=True)
class HostSnapshot:
    """A one-shot reading of CPU and memory metrics."""
    logical_cpus: int
    cpu_frequencies_mhz: tuple[float, ...]
    total_memory_bytes: int


class CommandRunner(Protocol):
    """
    The port through which detectors reach external utilities.
    """

    def run(self, args: Sequence[str]) -> CommandResult:
        """
        Run a command to completion and capture its output.

        A non-zero exit status is reported through `CommandResult.returncode`.
        Raises OSError (e.g. FileNotFoundError) when the process cannot be started.
        """
        ...


class HostSampler(Protocol):
    def sample(self) -> HostSnapshot:
        ...
