from hwspec.kernel.contracts import CpuSpec, HostSnapshot

HZ_PER_MHZ = 1_000_000


def cpu_spec_from_snapshot(snapshot: HostSnapshot) -> CpuSpec:
    """
    Logical core count, and the clock of the first reported CPU in Hz
    (0 when no frequency is reported). The clock is truncated to whole MHz.
    """
    clock_hz = 0
    if snapshot.cpu_frequencies_mhz:
        clock_hz = max(int(snapshot.cpu_frequencies_mhz[0]), 0) * HZ_PER_MHZ
    return CpuSpec(core_count=snapshot.logical_cpus, clock_hz=clock_hz)


def ram_size_from_snapshot(snapshot: HostSnapshot) -> int:
    # psutil reports bytes
    return snapshot.total_memory_bytes
