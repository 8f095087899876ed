"""Line diff: split text, align with LCS, and rebuild an ordered edit script"""

import logging
from typing import Sequence

from linediff.core.lcs import compute_alignment
from linediff.core.models import Alignment, ChangeTypeEnum, DiffLine


logger = logging.getLogger(__name__)

MAX_ALIGNED_LINES = 100     # combined line count above which alignment is skipped


def split_lines(text: str) -> list[str]:
    """Split text on '\\n'. Empty text has no lines; empty lines are kept as ''."""
    return text.split("\n") if text else []


def _line_at(lines: Sequence[str], idx: int) -> str:
    """Return lines[idx], or '' for any index outside the sequence."""
    return lines[idx] if 0 <= idx < len(lines) else ""


def reconstruct(
    old_lines: Sequence[str],
    new_lines: Sequence[str],
    alignment: Alignment,
    ) -> list[DiffLine]:
    """Walk both sides along the alignment and emit records in document order.

    At each divergence removed lines come before added lines. Removed lines are
    numbered on the old side; added and unchanged lines on the new side.
    """
    result: list[DiffLine] = []
    old_idx = new_idx = 0

    def _removed_until(stop: int) -> None:
        nonlocal old_idx
        while old_idx < stop:
            result.append(DiffLine(
                type=ChangeTypeEnum.remove, content=_line_at(old_lines, old_idx), line_number=old_idx + 1,
            ))
            old_idx += 1

    def _added_until(stop: int) -> None:
        nonlocal new_idx
        while new_idx < stop:
            result.append(DiffLine(
                type=ChangeTypeEnum.add, content=_line_at(new_lines, new_idx), line_number=new_idx + 1,
            ))
            new_idx += 1

    for match in alignment:
        _removed_until(match.old_idx)
        _added_until(match.new_idx)
        result.append(DiffLine(
            type=ChangeTypeEnum.unchanged, content=_line_at(old_lines, old_idx), line_number=new_idx + 1,
        ))
        old_idx += 1
        new_idx += 1

    _removed_until(len(old_lines))
    _added_until(len(new_lines))
    return result


def naive_diff(old_lines: Sequence[str], new_lines: Sequence[str]) -> list[DiffLine]:
    """Every old line removed, then every new line added; no line numbers."""
    removed = [DiffLine(type=ChangeTypeEnum.remove, content=line) for line in old_lines]
    added = [DiffLine(type=ChangeTypeEnum.add, content=line) for line in new_lines]
    return removed + added


def diff_lines(old_str: str, new_str: str, max_lines: int = MAX_ALIGNED_LINES) -> list[DiffLine]:
    """Return the line diff of old_str -> new_str as DiffLine records.

    Inputs whose combined line count exceeds max_lines get the naive diff,
    since the LCS table is quadratic in size.
    """
    old_lines, new_lines = split_lines(old_str), split_lines(new_str)
    total = len(old_lines) + len(new_lines)

    if total > max_lines:
        logger.debug("naive diff: %d lines exceeds limit of %d", total, max_lines)
        return naive_diff(old_lines, new_lines)

    alignment = compute_alignment(old_lines, new_lines)
    logger.debug("aligned diff: %d lines, %d matched", total, len(alignment))
    return reconstruct(old_lines, new_lines, alignment)
