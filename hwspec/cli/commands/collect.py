import typer

from hwspec.adapters.host_psutil import PsutilHostSampler
from hwspec.adapters.process import SubprocessCommandRunner
from hwspec.adapters.report_json import render_report
from hwspec.adapters.storage_fs import ReportWriter
from hwspec.internal import paths
from hwspec.internal.logging import get_logger, setup_logging
from hwspec.kernel.errors import PlatformError
from hwspec.kernel.report import ReportAssembler

logger = get_logger(__name__)


def collect():
    """
    Detect RAM, storage, GPUs and CPU, then print and save the resource descriptor.
    """
    assembler = ReportAssembler(runner=SubprocessCommandRunner(), sampler=PsutilHostSampler())
    try:
        report = assembler.assemble()
    except PlatformError as e:
        logger.error("Hardware detection failed", error=str(e), command=getattr(e, "command", None))
        typer.echo(typer.style(f"Error: {e}", fg=typer.colors.RED), err=True)
        raise typer.Exit(1)

    document = render_report(report)
    typer.echo(document)

    path = ReportWriter(paths.get_output_dir()).write(document)
    typer.echo(f"System information has been saved to {path}")


if __name__ == "__main__":
    setup_logging(log_file_path=paths.get_log_file())
    typer.run(collect)
