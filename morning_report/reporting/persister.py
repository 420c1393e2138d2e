"""Writes rendered reports to the reports directory."""

from datetime import datetime
from pathlib import Path

from morning_report.core.logger import logger

_FILENAME_FMT = "morning_report_%Y%m%d_%H%M%S.html"


def report_path(generated_at: datetime, reports_dir: str | Path = "reports") -> Path:
    """Return ``<reports_dir>/morning_report_<YYYYMMDD_HHMMSS>.html``."""
    return Path(reports_dir) / generated_at.strftime(_FILENAME_FMT)


def save_report(html: str, generated_at: datetime, reports_dir: str | Path = "reports") -> Path:
    """
    Write the rendered HTML to a timestamped file.

    Existing files with the same name are overwritten. I/O errors are not
    caught here; a report that cannot be saved aborts the run.

    Args:
        html (str): The rendered report.
        generated_at (datetime): Generation time embedded in the filename.
        reports_dir (str | Path): Target directory, created if missing.

    Returns:
        Path: The written file.
    """
    path = report_path(generated_at, reports_dir)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(html, encoding="utf-8")
    logger.info(f"Report saved to: {path}")
    return path
