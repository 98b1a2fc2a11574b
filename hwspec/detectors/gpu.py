"""
GPU detection from `lspci -v`, with model names refined by `nvidia-smi`
for NVIDIA controllers.
"""
from typing import Optional

from hwspec.detectors.guard import check_platform
from hwspec.internal.constants import LSPCI_COMMAND, NVIDIA_SMI_COMMAND, UNKNOWN_GPU
from hwspec.internal.logging import get_logger
from hwspec.kernel.contracts import CommandRunner, Detection, GpuSpec
from hwspec.kernel.errors import CommandFailedError

logger = get_logger(__name__)

DISPLAY_CONTROLLER_MARKERS = ("VGA", "3D controller")


def display_controller_lines(lspci_output: str) -> list[str]:
    """Lines of `lspci -v` output that describe a display controller, in order."""
    return [
        line for line in lspci_output.splitlines()
        if any(marker in line for marker in DISPLAY_CONTROLLER_MARKERS)
    ]


def model_from_lspci_line(line: str) -> str:
    """
    The device description after the second colon, e.g.
    "00:02.0 VGA compatible controller: Intel Corporation UHD Graphics"
    gives "Intel Corporation UHD Graphics".
    """
    fields = line.split(":")
    if len(fields) < 3:
        return UNKNOWN_GPU
    return fields[2].strip()


def query_nvidia_model(runner: CommandRunner) -> Optional[str]:
    """Product name reported by nvidia-smi, or None when it is unavailable."""
    try:
        result = runner.run(NVIDIA_SMI_COMMAND)
    except OSError as e:
        logger.debug("nvidia-smi could not be started", error=str(e))
        return None

    model = result.stdout.strip()
    if not result.ok or not model:
        logger.debug("nvidia-smi gave no model", returncode=result.returncode)
        return None
    return model


def detect_gpus(runner: CommandRunner) -> Detection[tuple[GpuSpec, ...]]:
    check_platform()

    try:
        result = runner.run(LSPCI_COMMAND)
    except OSError as e:
        raise CommandFailedError(f"Failed to execute lspci: {e}", command="lspci") from e

    if not result.ok:
        raise CommandFailedError("lspci command failed", command="lspci")

    gpus = []
    for line in display_controller_lines(result.stdout):
        if "NVIDIA" in line:
            model = query_nvidia_model(runner)
            if model is not None:
                gpus.append(GpuSpec(model=model))
                continue
        gpus.append(GpuSpec(model=model_from_lspci_line(line)))

    if not gpus:
        return Detection.degraded(
            (GpuSpec(model=UNKNOWN_GPU),),
            reason="no VGA or 3D controller found in lspci output",
        )

    logger.info("GPUs detected", count=len(gpus), models=[gpu.model for gpu in gpus])
    return Detection.confident(tuple(gpus))
