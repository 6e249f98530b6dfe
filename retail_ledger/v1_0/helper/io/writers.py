import csv, io, os, tempfile
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Sequence, cast
from fastapi import Response

def write_data_lines(path: Path, header: str, lines: Sequence[str], *, atomic: bool = True) -> None:
    """
    Write a header plus one record per line.

    With ``atomic`` the content goes to a temp file in the same directory and
    replaces the target in one rename, so a failed write leaves the old file.

    Raises:
        OSError: if the directory or file cannot be written.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    content = "\n".join([header, *lines]) + "\n"

    if not atomic:
        path.write_text(content, encoding="utf-8")
        return

    fd, tmp = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as fh:
            fh.write(content)
            fh.flush()
            os.fsync(fh.fileno())
        os.replace(tmp, path)
    except BaseException:
        try:
            os.unlink(tmp)
        except FileNotFoundError:
            pass
        raise

def _normalize_rows(rows: Optional[Sequence[Mapping[str, Any]]]) -> List[Dict[str, Any]]:
    if not rows:
        return []
    return [dict(r) for r in rows]

def write_csv(rows: Optional[Sequence[Mapping[str, Any]]], headers: List[str], filename: str) -> Response:
    data = _normalize_rows(rows)
    buf = io.StringIO()
    w = csv.DictWriter(buf, fieldnames=headers)
    w.writeheader()
    for r in data:
        w.writerow({k: r.get(k, "") for k in headers})
    return Response(
        buf.getvalue(),
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )

def write_xlsx(rows: Optional[Sequence[Mapping[str, Any]]], headers: List[str], filename: str) -> Response:
    import openpyxl
    from openpyxl.utils import get_column_letter
    from openpyxl.worksheet.worksheet import Worksheet

    data = _normalize_rows(rows)

    wb = openpyxl.Workbook()
    ws = cast(Worksheet, wb.active)
    ws.title = "export"

    if headers:
        ws.append(headers)
    for r in data:
        ws.append([r.get(h, "") for h in headers])

    for i, h in enumerate(headers, 1):
        ws.column_dimensions[get_column_letter(i)].width = max(10, min(40, len(str(h)) + 2))

    bio = io.BytesIO()
    wb.save(bio)
    return Response(
        bio.getvalue(),
        media_type="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
