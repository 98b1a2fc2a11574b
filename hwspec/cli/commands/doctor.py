import os
import platform
import shutil

import typer
from rich.console import Console
from rich.table import Table

from hwspec.detectors.guard import is_supported_platform
from hwspec.internal.constants import OPTIONAL_TOOLS, REQUIRED_TOOLS, SBIN_DIRS
from hwspec.internal import paths
from hwspec.internal.logging import get_logger, setup_logging

logger = get_logger(__name__)

console = Console()


def find_tool(tool: str) -> str | None:
    search_path = os.pathsep.join([os.environ.get("PATH", os.defpath), *SBIN_DIRS])
    return shutil.which(tool, path=search_path)


def doctor():
    """
    Check that this host can run hardware detection.
    """
    all_passed = True

    console.print(f"Platform: {platform.system()} ({platform.machine()})")
    if not is_supported_platform():
        console.print("[red]Unsupported platform: hwspec only supports Linux.[/red]")
        all_passed = False

    table = Table(title="External Utilities")
    table.add_column("Tool", style="cyan", no_wrap=True)
    table.add_column("Required")
    table.add_column("Path")
    table.add_column("Status")

    for tool in REQUIRED_TOOLS + OPTIONAL_TOOLS:
        required = tool in REQUIRED_TOOLS
        location = find_tool(tool)
        if location:
            status = "[green]found[/green]"
        elif required:
            status = "[red]missing[/red]"
            all_passed = False
        else:
            status = "[yellow]missing[/yellow]"
        table.add_row(tool, "yes" if required else "no", location or "-", status)
        logger.debug("Tool checked", tool=tool, required=required, path=location)

    console.print(table)

    if all_passed:
        console.print("[green bold]All checks PASSED![/green bold]")
        return

    console.print("[red bold]Some checks FAILED. Please review the output above.[/red bold]")
    raise typer.Exit(1)


if __name__ == "__main__":
    setup_logging(log_file_path=paths.get_log_file())
    typer.run(doctor)
