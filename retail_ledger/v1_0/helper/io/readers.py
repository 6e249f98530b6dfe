from pathlib import Path
from typing import List, Optional

def split_record(line: str, sep: str = ",") -> List[str]:
    """Split on every separator, keeping empty trailing fields."""
    return line.split(sep)

def read_lines(content: bytes) -> List[str]:
    text = content.decode("utf-8-sig", errors="ignore")
    return text.splitlines()

def read_data_lines(path: Path, header: Optional[str] = None) -> List[str]:
    """
    Data lines of a record file.

    The first line is a header only when at least one line follows it, or
    when it is exactly the expected header. A lone line is otherwise data,
    which is how headerless legacy files with a single record load.

    Raises:
        OSError: if the file is missing or unreadable.
    """
    lines = read_lines(Path(path).read_bytes())
    if not lines:
        return []
    if len(lines) > 1:
        return lines[1:]
    if header is not None and lines[0].strip().lower() == header.lower():
        return []
    return lines
