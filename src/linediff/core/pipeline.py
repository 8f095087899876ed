"""Pipeline step functions: read two files and diff their contents"""

from pathlib import Path

from linediff.core.diff import MAX_ALIGNED_LINES, diff_lines
from linediff.core.models import DiffLine


def read_source(path: str | Path, encoding: str = "utf-8") -> str:
    """Return the text of path. Raises RuntimeError when it cannot be read."""
    p = Path(path)
    if not p.is_file():
        raise RuntimeError(f"File not found: {p}")
    try:
        return p.read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError) as e:
        raise RuntimeError(f"Failed to read {p}: {e}") from e


def diff_files(
    old_path: str | Path,
    new_path: str | Path,
    max_lines: int = MAX_ALIGNED_LINES,
    encoding: str = "utf-8",
    ) -> list[DiffLine]:
    """Diff the contents of two text files line by line."""
    old_text = read_source(old_path, encoding)
    new_text = read_source(new_path, encoding)
    return diff_lines(old_text, new_text, max_lines=max_lines)
