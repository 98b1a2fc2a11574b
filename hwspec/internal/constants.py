"""
Fixed values shared across detectors, the report assembler and the CLI.
"""

# ---------------------------------------------------------------------
# External commands
# ---------------------------------------------------------------------

LSPCI_COMMAND = ("lspci", "-v")
NVIDIA_SMI_COMMAND = ("nvidia-smi", "--query-gpu=gpu_name", "--format=csv,noheader")
DMIDECODE_COMMAND = ("sudo", "dmidecode", "--type", "17")
LSBLK_COMMAND = ("lsblk", "-d", "-o", "NAME,TYPE,SIZE,TRAN", "--bytes")
NVME_LIST_COMMAND = ("sudo", "nvme", "list")


def smartctl_command(device_name: str) -> tuple[str, ...]:
    return ("sudo", "smartctl", "-i", f"/dev/{device_name}")


# Utilities the doctor command looks for on PATH.
REQUIRED_TOOLS = ("lspci", "lsblk", "dmidecode", "sudo")
OPTIONAL_TOOLS = ("nvidia-smi", "nvme", "smartctl")
# Searched after PATH; non-root users often lack them while sudo still resolves there.
SBIN_DIRS = ("/usr/sbin", "/sbin")

# ---------------------------------------------------------------------
# Sentinels and labels
# ---------------------------------------------------------------------

UNKNOWN = "Unknown"
UNKNOWN_GPU = "Unknown GPU"

STORAGE_NVME_GEN4 = "NVMeGen4"
STORAGE_NVME_GEN3 = "NVMeGen3"
STORAGE_NVME = "NVMe"
STORAGE_SATA_SSD = "SATA SSD"
STORAGE_SATA_HDD = "SATA HDD"

# ---------------------------------------------------------------------
# Report
# ---------------------------------------------------------------------

REPORT_NAME = "example"
REPORT_DESCRIPTION = "Configuration"
REPORT_NETWORK = "dev"
REPORT_KIND = "operator"

REPORT_FILE_NAME = "system_info.json"
OUTPUT_DIR_NAME = "out"

UINT32_MAX = 2**32 - 1
UINT64_MAX = 2**64 - 1
