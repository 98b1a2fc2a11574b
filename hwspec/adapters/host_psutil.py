import psutil

from hwspec.internal.logging import get_logger
from hwspec.kernel.contracts import HostSampler, HostSnapshot

logger = get_logger(__name__)


class PsutilHostSampler(HostSampler):
    """Reads CPU and memory metrics once through psutil."""

    def sample(self) -> HostSnapshot:
        return HostSnapshot(
            logical_cpus=psutil.cpu_count(logical=True) or 0,
            cpu_frequencies_mhz=self._cpu_frequencies(),
            total_memory_bytes=psutil.virtual_memory().total,
        )

    def _cpu_frequencies(self) -> tuple[float, ...]:
        cpu_freq = getattr(psutil, "cpu_freq", None)
        if cpu_freq is None:
            logger.warning("psutil cannot report CPU frequency on this platform")
            return ()
        try:
            frequencies = cpu_freq(percpu=True)
        except (NotImplementedError, FileNotFoundError) as e:
            logger.warning("CPU frequency unavailable", error=str(e))
            return ()
        if not frequencies:
            return ()
        return tuple(float(freq.current) for freq in frequencies)
