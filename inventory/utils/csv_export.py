"""
CSV export utilities
"""
import csv
import io
from datetime import date, datetime
from typing import Any, Dict, Iterable, List

from fastapi.responses import StreamingResponse

from inventory.utils.datetime_utils import iso_display


def format_cell(value: Any) -> str:
    """Render one CSV cell: blanks for None, Yes/No for flags, display-timezone datetimes"""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "Yes" if value else "No"
    if isinstance(value, datetime):
        return iso_display(value)
    if isinstance(value, date):
        return value.isoformat()
    return str(value)


def stream_csv(headers: List[str], rows: Iterable[Dict], filename: str = "export.csv") -> StreamingResponse:
    """
    Stream rows as a CSV attachment, one line per chunk

    Args:
        headers: Column order; keys missing from a row render blank
        rows: Dicts keyed by header
        filename: Name offered in Content-Disposition
    """
    def generate():
        buffer = io.StringIO()
        writer = csv.writer(buffer)

        def flush() -> str:
            chunk = buffer.getvalue()
            buffer.seek(0)
            buffer.truncate(0)
            return chunk

        writer.writerow(headers)
        yield flush()
        for row in rows:
            writer.writerow([format_cell(row.get(header)) for header in headers])
            yield flush()

    return StreamingResponse(
        generate(),
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
