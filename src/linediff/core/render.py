"""Render DiffLine records as inline text or JSON"""

import json
from typing import Sequence

from linediff.core.models import ChangeTypeEnum, DiffLine


_PREFIX = {
    ChangeTypeEnum.add: "+ ",
    ChangeTypeEnum.remove: "- ",
    ChangeTypeEnum.unchanged: "  ",
}


def render_text(lines: Sequence[DiffLine], line_numbers: bool = True) -> str:
    """Return one '+ '/'- '/'  ' prefixed row per record, joined with newlines.

    With line_numbers, each row starts with a right-aligned number column that
    is left blank for records without a line number (naive diffs).
    """
    if not line_numbers:
        return "\n".join(f"{_PREFIX[d.type]}{d.content}" for d in lines)

    width = max((len(str(d.line_number)) for d in lines if d.line_number), default=1)
    rows = []
    for d in lines:
        num = str(d.line_number) if d.line_number else ""
        rows.append(f"{num:>{width}} {_PREFIX[d.type]}{d.content}")
    return "\n".join(rows)


def render_json(lines: Sequence[DiffLine], indent: int = 2) -> str:
    """Return a JSON array of {type, content, lineNumber} objects; lineNumber omitted when unset."""
    records = [d.model_dump(mode="json", by_alias=True, exclude_none=True) for d in lines]
    return json.dumps(records, indent=indent, ensure_ascii=False)
