import typer
import importlib.metadata
from hwspec.internal import paths
from hwspec.internal.logging import get_logger, setup_logging

logger = get_logger(__name__)


def version():
    """
    Show the hwspec version.
    """
    try:
        # Read from installed package metadata; only works after installation
        package_version = importlib.metadata.version("hwspec")
        typer.echo(f"hwspec version: {package_version}")
    except importlib.metadata.PackageNotFoundError:
        typer.echo("hwspec is not installed or version metadata not found.")
        typer.echo("Please install the package first (e.g., pip install . or pip install -e .)")
        logger.warning("hwspec package version not found.")
        raise typer.Exit(1)


if __name__ == "__main__":
    setup_logging(log_file_path=paths.get_log_file())
    typer.run(version)
