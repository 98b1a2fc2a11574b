"""
This module defines the report assembler of the hwspec kernel.
It runs each detector through the injected capabilities and composes their
results into a single ResourceReport.
"""
from hwspec.detectors.cpu import cpu_spec_from_snapshot, ram_size_from_snapshot
from hwspec.detectors.gpu import detect_gpus
from hwspec.detectors.ram import detect_ram_type
from hwspec.detectors.storage import detect_storage
from hwspec.internal.constants import (
    REPORT_DESCRIPTION,
    REPORT_KIND,
    REPORT_NAME,
    REPORT_NETWORK,
)
from hwspec.internal.logging import get_logger
from hwspec.kernel.contracts import (
    CommandRunner,
    Detection,
    HostSampler,
    RamSpec,
    Resource,
    ResourceReport,
)

logger = get_logger(__name__)


class ReportAssembler:
    """
    Sequences the detectors: RAM type, storage, GPU, then CPU/RAM sampling.

    The first PlatformError raised by a detector propagates unchanged; no
    partial report is built. Degraded detections are logged and kept.
    """
    def __init__(self, runner: CommandRunner, sampler: HostSampler):
        self.runner = runner
        self.sampler = sampler

    def assemble(self) -> ResourceReport:
        ram_type = self._accept("ram_type", detect_ram_type(self.runner))
        storage = self._accept("storage", detect_storage(self.runner))
        gpus = self._accept("gpus", detect_gpus(self.runner))

        snapshot = self.sampler.sample()
        cpu = cpu_spec_from_snapshot(snapshot)
        logger.info(
            "Host sampled",
            cores=cpu.core_count,
            clock_hz=cpu.clock_hz,
            total_memory_bytes=snapshot.total_memory_bytes,
        )

        return ResourceReport(
            name=REPORT_NAME,
            description=REPORT_DESCRIPTION,
            network=REPORT_NETWORK,
            kind=REPORT_KIND,
            resource=Resource(
                ram=RamSpec(size_bytes=ram_size_from_snapshot(snapshot), technology=ram_type),
                storage=storage,
                gpus=gpus,
                cpu=cpu,
            ),
        )

    def _accept(self, detector: str, detection: Detection):
        if detection.is_degraded:
            logger.warning("Detection degraded", detector=detector, reason=detection.reason)
        return detection.value
