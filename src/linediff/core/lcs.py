"""Longest-common-subsequence alignment of two line sequences"""

from typing import Sequence

from linediff.core.models import Alignment, LineMatch


def _lcs_table(old_lines: Sequence[str], new_lines: Sequence[str]) -> list[list[int]]:
    """Return the (m+1) x (n+1) table of LCS lengths for every prefix pair."""
    m, n = len(old_lines), len(new_lines)
    dp = [[0] * (n + 1) for _ in range(m + 1)]

    for i in range(1, m + 1):
        old_line = old_lines[i - 1]
        row, prev = dp[i], dp[i - 1]
        for j in range(1, n + 1):
            if old_line == new_lines[j - 1]:
                row[j] = prev[j - 1] + 1
            else:
                row[j] = max(prev[j], row[j - 1])
    return dp


def compute_alignment(old_lines: Sequence[str], new_lines: Sequence[str]) -> Alignment:
    """Return index pairs of a longest common subsequence, in increasing order.

    Backtracking moves up (old side) whenever the up and left cells tie, so the
    chosen subsequence is deterministic when several of equal length exist.
    """
    dp = _lcs_table(old_lines, new_lines)
    matches: Alignment = []
    i, j = len(old_lines), len(new_lines)

    while i > 0 and j > 0:
        if old_lines[i - 1] == new_lines[j - 1]:
            matches.append(LineMatch(i - 1, j - 1))
            i -= 1
            j -= 1
        elif dp[i - 1][j] >= dp[i][j - 1]:
            i -= 1
        else:
            j -= 1

    matches.reverse()
    return matches
