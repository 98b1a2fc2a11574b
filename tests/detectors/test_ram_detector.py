import pytest

from hwspec.detectors.ram import detect_ram_type, parse_ram_type
from hwspec.internal.constants import DMIDECODE_COMMAND
from hwspec.kernel.contracts import DetectionStatus
from hwspec.kernel.errors import CommandFailedError
from tests.kernel.samples import DMIDECODE_OUTPUT


def test_parse_ram_type_from_dmidecode():
    assert parse_ram_type(DMIDECODE_OUTPUT) == "DDR4"


def test_parse_ram_type_single_line():
    assert parse_ram_type("Type: DDR4") == "DDR4"


def test_parse_ram_type_skips_non_ddr_type_fields():
    output = "\n".join([
        "\tType Detail: Synchronous",
        "\tType: Unknown",
        "\tType: Other",
        "\tType: DDR5",
        "\tType: DDR4",
    ])
    assert parse_ram_type(output) == "DDR5"


def test_parse_ram_type_without_ddr_returns_none():
    output = "Memory Device\n\tType: LPDDR4\n\tType Detail: Synchronous\n"
    assert parse_ram_type(output) is None


def test_parse_ram_type_empty():
    assert parse_ram_type("") is None


def test_detect_ram_type_confident(runner):
    runner.set_output(DMIDECODE_COMMAND, DMIDECODE_OUTPUT)

    detection = detect_ram_type(runner)

    assert detection.value == "DDR4"
    assert detection.status is DetectionStatus.CONFIDENT
    assert runner.calls == [DMIDECODE_COMMAND]


def test_detect_ram_type_unknown_is_success(runner):
    runner.set_output(DMIDECODE_COMMAND, "# dmidecode 3.3\n# No SMBIOS nor DMI entry point found, sorry.\n")

    detection = detect_ram_type(runner)

    assert detection.value == "Unknown"
    assert detection.status is DetectionStatus.DEGRADED


def test_dmidecode_non_zero_exit_mentions_prerequisites(runner):
    runner.set_output(DMIDECODE_COMMAND, "", returncode=1, stderr="sudo: a password is required")

    with pytest.raises(CommandFailedError, match="sudo privileges and dmidecode is installed") as exc_info:
        detect_ram_type(runner)
    assert exc_info.value.command == "dmidecode"
    assert str(exc_info.value).startswith("Command failed: dmidecode command failed")


def test_dmidecode_not_startable_fails(runner):
    runner.set_missing(DMIDECODE_COMMAND)

    with pytest.raises(CommandFailedError, match="Failed to execute dmidecode"):
        detect_ram_type(runner)
