"""Captured output of the external utilities on a typical workstation."""

LSPCI_OUTPUT = """\
00:02.0 VGA compatible controller: Intel Corporation UHD Graphics
\tSubsystem: Dell Device 0869
\tFlags: bus master, fast devsel, latency 0, IRQ 131
\tKernel driver in use: i915

00:1f.3 Audio device: Intel Corporation Cannon Lake PCH cAVS (rev 10)
\tSubsystem: Dell Device 0869

01:00.0 VGA compatible controller: NVIDIA Corporation GA102 [GeForce RTX 3080] (rev a1)
\tSubsystem: NVIDIA Corporation Device 1467
\tKernel driver in use: nvidia
"""

NVIDIA_SMI_OUTPUT = "NVIDIA GeForce RTX 3080\n"

DMIDECODE_OUTPUT = """\
# dmidecode 3.3
Getting SMBIOS data from sysfs.
SMBIOS 3.2.0 present.

Handle 0x003F, DMI type 17, 84 bytes
Memory Device
\tArray Handle: 0x003E
\tError Information Handle: Not Provided
\tTotal Width: 64 bits
\tData Width: 64 bits
\tSize: 16 GB
\tForm Factor: SODIMM
\tType: DDR4
\tType Detail: Synchronous
\tSpeed: 3200 MT/s
"""

LSBLK_OUTPUT = """\
NAME             TYPE          SIZE TRAN
sda              disk  500107862016 sata
nvme0n1          disk 1000204886016 nvme
"""

SMARTCTL_SSD_OUTPUT = """\
smartctl 7.2 2020-12-30 r5155 [x86_64-linux-5.15.0] (local build)

=== START OF INFORMATION SECTION ===
Device Model:     Samsung SSD 860 EVO 500GB
User Capacity:    500,107,862,016 bytes [500 GB]
Rotation Rate:    Solid State Device
"""

NVME_LIST_OUTPUT = """\
Node             SN                   Model                                    Namespace Usage                      Format           FW Rev
---------------- -------------------- ---------------------------------------- --------- -------------------------- ---------------- --------
/dev/nvme0n1     S4EWNX0R123456       Samsung SSD 980 PRO 1TB PCIe 4.0         1         1.00  TB /   1.00  TB    512   B +  0 B   5B2QGXA7
"""


