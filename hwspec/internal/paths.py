import os
from pathlib import Path

from hwspec.internal.constants import OUTPUT_DIR_NAME, REPORT_FILE_NAME


# ---------------------------------------------------------------------
# Base directories
# ---------------------------------------------------------------------

def get_app_data_dir() -> Path:
    """
    Returns the application data directory (~/.hwspec).
    """
    path = Path.home() / ".hwspec"
    path.mkdir(parents=True, exist_ok=True)
    return path


def get_log_file() -> Path:
    log_dir = get_app_data_dir() / "logs"
    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir / "hwspec.log.json"


# ---------------------------------------------------------------------
# Report output
# ---------------------------------------------------------------------

def get_output_dir() -> Path:
    """
    Directory the report is written to, relative to the working directory.
    Not created here; the report writer creates it on demand.
    """
    return Path(OUTPUT_DIR_NAME)


def get_report_file() -> Path:
    return get_output_dir() / REPORT_FILE_NAME


# ---------------------------------------------------------------------
# Debug
# ---------------------------------------------------------------------

if __name__ == "__main__":
    print("App Data Dir:", get_app_data_dir())
    print("Log File:", get_log_file())
    print("Output Dir:", os.path.abspath(get_output_dir()))
    print("Report File:", get_report_file())
