import platform

from hwspec.kernel.errors import UnsupportedPlatformError


def is_supported_platform() -> bool:
    return platform.system() == "Linux"


def check_platform() -> None:
    """
    Precondition for every detector that shells out to a Linux-only utility.
    """
    if not is_supported_platform():
        raise UnsupportedPlatformError("This application only supports Linux")
