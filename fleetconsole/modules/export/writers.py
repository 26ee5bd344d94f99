"""
CSV and JSON writers.

CSV follows the console's format: header row first, fields containing a
comma, newline or double quote are quoted with inner quotes doubled, rows
joined by ``\n`` with no trailing newline.
"""

import csv
import io
import json
import logging
from pathlib import Path
from typing import Any, Iterable, Optional, Sequence, Union

from .exceptions import ExportError

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def format_cell(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (dict, list)):
        return json.dumps(value, separators=(",", ":"))
    return str(value)


def to_csv(rows: Sequence[dict[str, Any]], columns: Optional[Iterable[str]] = None) -> str:
    """
    Render records as CSV text.

    Args:
        rows: Records to render
        columns: Column order; defaults to the keys of the first record

    Raises:
        ExportError: If ``rows`` is empty
    """
    if not rows:
        raise ExportError("No data to export")

    headers = list(columns) if columns is not None else list(rows[0].keys())
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n", quoting=csv.QUOTE_MINIMAL)
    writer.writerow(headers)
    for row in rows:
        cells = [format_cell(row.get(header)) for header in headers]
        if cells == [""]:
            # csv.writer would emit "" for a lone empty field
            buffer.write("\n")
        else:
            writer.writerow(cells)
    # Drop the terminator after the last row
    return buffer.getvalue()[:-1]


def export_to_csv(
    rows: Sequence[dict[str, Any]],
    path: PathLike,
    columns: Optional[Iterable[str]] = None,
) -> Path:
    content = to_csv(rows, columns)
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(content, encoding="utf-8")
    logger.info(f"Exported {len(rows)} rows to {target}")
    return target


def export_to_json(data: Any, path: PathLike) -> Path:
    if data is None:
        raise ExportError("No data to export")
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(json.dumps(data, indent=2, default=str), encoding="utf-8")
    logger.info(f"Exported JSON to {target}")
    return target
