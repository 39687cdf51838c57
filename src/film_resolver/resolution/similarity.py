"""
Title similarity based on longest common subsequence.
"""
from typing import Optional


# Share of the target title the common subsequence must cover
TARGET_COVERAGE = 0.8
# Share of the candidate title the common subsequence must cover
CANDIDATE_COVERAGE = 0.5
# Common subsequences of this length or shorter never match
MIN_COMMON_LENGTH = 6


def lcs_length(a: str, b: str) -> int:
    """
    Length of the longest common subsequence of two strings.

    Characters are compared as-is; callers normalize case and whitespace
    if they need to.

    :param a: First string
    :param b: Second string
    :return: Number of characters common to both, in the same relative order
    """
    n, m = len(a), len(b)
    table = [[0] * (m + 1) for _ in range(n + 1)]

    for i in range(1, n + 1):
        for j in range(1, m + 1):
            if a[i - 1] == b[j - 1]:
                table[i][j] = table[i - 1][j - 1] + 1
            else:
                table[i][j] = max(table[i - 1][j], table[i][j - 1])

    return table[n][m]


def is_title_match(target: str, cand: str, common: Optional[int] = None) -> bool:
    """
    Decide whether two titles name the same film.

    Most of the target must be reproduced by the candidate, while the
    candidate may carry extra text such as a subtitle. Titles of
    MIN_COMMON_LENGTH characters or fewer can never match.

    :param target: Title being looked up
    :param cand: Title to compare against
    :param common: Precomputed lcs_length(target, cand)
    :return: True if the titles match
    """
    if common is None:
        common = lcs_length(target, cand)

    return (
        common >= TARGET_COVERAGE * len(target)
        and common >= CANDIDATE_COVERAGE * len(cand)
        and common > MIN_COMMON_LENGTH
    )
