"""
Export files handed to the platform share surface.
Writes rendered CSV/text to a temporary location and returns the path.
"""
import tempfile
from datetime import date
from pathlib import Path
from typing import Optional
import logging

from simplemeal.utilities.constants import CSV_DATE_FORMAT
from simplemeal.utilities.errors import PersistenceError

logger = logging.getLogger(__name__)


def export_file_name(prefix: str, extension: str = "csv", on: Optional[date] = None) -> str:
    """e.g. shopping-list-2026-10-19.csv"""
    return f"{prefix}-{(on or date.today()).strftime(CSV_DATE_FORMAT)}.{extension}"


def write_export_file(content, file_name: str, directory: Optional[Path] = None) -> Path:
    """Write text (UTF-8) or bytes to ``directory`` (default: system temp dir)."""
    target_dir = Path(directory) if directory else Path(tempfile.gettempdir())
    output_path = target_dir / file_name
    try:
        target_dir.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            output_path.write_bytes(content)
        else:
            output_path.write_text(content, encoding="utf-8")
    except OSError as e:
        logger.error(f"Export failed for {file_name}: {e}")
        raise PersistenceError(f"Could not write {file_name}: {e}") from e
    logger.info(f"Exported {file_name} to {output_path}")
    return output_path


__all__ = ['export_file_name', 'write_export_file']
