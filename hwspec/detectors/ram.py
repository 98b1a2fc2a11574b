from typing import Optional

from hwspec.detectors.guard import check_platform
from hwspec.internal.constants import DMIDECODE_COMMAND, UNKNOWN
from hwspec.internal.logging import get_logger
from hwspec.kernel.contracts import CommandRunner, Detection
from hwspec.kernel.errors import CommandFailedError

logger = get_logger(__name__)


def parse_ram_type(dmidecode_output: str) -> Optional[str]:
    """
    First DDR memory type in `dmidecode --type 17` output.

    Only values starting with "DDR" count, which skips other "Type" fields
    such as "Type Detail: Synchronous" and "Error Correction Type: None".
    """
    for line in dmidecode_output.splitlines():
        if "Type:" not in line:
            continue
        fields = line.split(":")
        if len(fields) > 1:
            ram_type = fields[1].strip()
            if ram_type.startswith("DDR"):
                return ram_type
    return None


def detect_ram_type(runner: CommandRunner) -> Detection[str]:
    check_platform()

    try:
        result = runner.run(DMIDECODE_COMMAND)
    except OSError as e:
        raise CommandFailedError(f"Failed to execute dmidecode: {e}", command="dmidecode") from e

    if not result.ok:
        raise CommandFailedError(
            "dmidecode command failed. Make sure you have sudo privileges and dmidecode is installed",
            command="dmidecode",
        )

    ram_type = parse_ram_type(result.stdout)
    if ram_type is None:
        return Detection.degraded(UNKNOWN, reason="no DDR memory type in dmidecode output")

    logger.info("RAM type detected", ram_type=ram_type)
    return Detection.confident(ram_type)
