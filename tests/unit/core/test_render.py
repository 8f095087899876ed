"""Unit tests for core/render.py and core/utils/summary.py"""

import json

from linediff.core.diff import diff_lines
from linediff.core.render import render_json, render_text
from linediff.core.utils.summary import diff_summary


def test_render_text_with_line_numbers():
    """render_text prefixes rows with the line number and a change marker."""
    out = render_text(diff_lines("a\nb\nc", "a\nx\nc"))
    assert out.splitlines() == ["1   a", "2 - b", "2 + x", "3   c"]


def test_render_text_without_line_numbers():
    """render_text(line_numbers=False) prints only markers and content."""
    out = render_text(diff_lines("a\nb", "a\nc"), line_numbers=False)
    assert out.splitlines() == ["  a", "- b", "+ c"]


def test_render_text_pads_number_column():
    """The number column is right-aligned to the widest line number."""
    old = "\n".join(str(i) for i in range(1, 11))
    rows = render_text(diff_lines(old, old)).splitlines()
    assert rows[0] == " 1   1"
    assert rows[-1] == "10   10"


def test_render_text_naive_diff_leaves_numbers_blank():
    """Records without line numbers get an empty number column."""
    out = render_text(diff_lines("a", "b", max_lines=1))
    assert out.splitlines() == ["  - a", "  + b"]


def test_render_text_empty():
    """No records render to an empty string."""
    assert render_text([]) == ""


def test_render_json_record_shape():
    """render_json emits type/content/lineNumber objects."""
    records = json.loads(render_json(diff_lines("a", "b")))
    assert records == [
        {"type": "remove", "content": "a", "lineNumber": 1},
        {"type": "add", "content": "b", "lineNumber": 1},
    ]


def test_render_json_omits_missing_line_numbers():
    """Naive-diff records serialize without a lineNumber key."""
    records = json.loads(render_json(diff_lines("a", "b", max_lines=0)))
    assert all("lineNumber" not in r for r in records)


def test_diff_summary_counts():
    """diff_summary counts each change type."""
    counts = diff_summary(diff_lines("a\nb\nc", "a\nx\ny\nc"))
    assert counts == {"added": 2, "removed": 1, "unchanged": 2}


def test_diff_summary_empty():
    """An empty diff has all-zero counts."""
    assert diff_summary([]) == {"added": 0, "removed": 0, "unchanged": 0}
