"""Data models for line diffs: change types, diff records, and LCS matches"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ChangeTypeEnum(str, Enum):
    add = "add"
    remove = "remove"
    unchanged = "unchanged"


class DiffLine(BaseModel):
    """A single tagged line of an edit script."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    type: ChangeTypeEnum
    content: str
    line_number: Optional[int] = Field(default=None, ge=1, alias="lineNumber")  # 1-based, source side


@dataclass(frozen=True)
class LineMatch:
    """Zero-based index pair of a line present on both sides."""
    old_idx: int
    new_idx: int


Alignment = list[LineMatch]
