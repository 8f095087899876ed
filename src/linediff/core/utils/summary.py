"""Change counts for a computed line diff"""

from typing import Iterable

from linediff.core.models import ChangeTypeEnum, DiffLine


def diff_summary(lines: Iterable[DiffLine]) -> dict[str, int]:
    """Return added/removed/unchanged line counts. Useful for compact change stats."""
    added = removed = unchanged = 0

    for d in lines:
        if d.type == ChangeTypeEnum.add:
            added += 1
        elif d.type == ChangeTypeEnum.remove:
            removed += 1
        elif d.type == ChangeTypeEnum.unchanged:
            unchanged += 1

    return {"added": added, "removed": removed, "unchanged": unchanged}
