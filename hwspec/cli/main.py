import typer

from hwspec.cli.commands import (
    collect,
    doctor,
    version,
)
from hwspec.internal import paths
from hwspec.internal.logging import setup_logging

app = typer.Typer(
    name="hwspec",
    help="Collect a hardware inventory of this Linux host as a JSON resource descriptor.",
    no_args_is_help=True,
)


@app.callback()
def main():
    setup_logging(log_file_path=paths.get_log_file())


app.command("collect")(collect.collect)
app.command("doctor")(doctor.doctor)
app.command("version")(version.version)

if __name__ == "__main__":
    app()
