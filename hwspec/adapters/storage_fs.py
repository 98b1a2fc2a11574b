"""
Writes the rendered report to the local filesystem.
"""
from pathlib import Path

from hwspec.internal.constants import REPORT_FILE_NAME
from hwspec.internal.logging import get_logger

logger = get_logger(__name__)


class ReportWriter:
    """
    Owns the output directory. The directory and any missing parents are
    created on write; an existing report file is overwritten.
    """
    def __init__(self, output_dir: Path, file_name: str = REPORT_FILE_NAME):
        self._output_dir = Path(output_dir)
        self._file_name = file_name

    @property
    def report_path(self) -> Path:
        return self._output_dir / self._file_name

    def write(self, document: str) -> Path:
        self._output_dir.mkdir(parents=True, exist_ok=True)
        path = self.report_path
        with open(path, "w", encoding="utf-8") as f:
            f.write(document)
        logger.info("Report written", path=str(path), bytes=len(document.encode("utf-8")))
        return path
