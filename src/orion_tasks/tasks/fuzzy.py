# src/orion_tasks/tasks/fuzzy.py

"""
Approximate keyword matching for task search.

Matching compares the WHOLE description against the keyword, not substrings:
a long description only matches a keyword of similar length.
"""

from __future__ import annotations

FUZZY_SEARCH_THRESHOLD = 3


def levenshtein_distance(a: str, b: str) -> int:
    """
    Minimum number of single-character insertions, deletions or substitutions
    turning `a` into `b` (classic DP table, no transpositions).
    """
    rows = len(a) + 1
    cols = len(b) + 1
    dp = [[0] * cols for _ in range(rows)]

    for i in range(rows):
        dp[i][0] = i
    for j in range(cols):
        dp[0][j] = j

    for i in range(1, rows):
        for j in range(1, cols):
            if a[i - 1] == b[j - 1]:
                dp[i][j] = dp[i - 1][j - 1]
            else:
                dp[i][j] = 1 + min(dp[i - 1][j - 1], dp[i - 1][j], dp[i][j - 1])

    return dp[len(a)][len(b)]


def is_fuzzy_match(text: str, keyword: str, threshold: int = FUZZY_SEARCH_THRESHOLD) -> bool:
    return levenshtein_distance(text.lower(), keyword.lower()) <= threshold
