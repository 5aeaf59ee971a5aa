"""
Text Similarity
Longest-common-substring similarity compatible with PHP's similar_text()
"""
from typing import Tuple


def _longest_common_substring(first: str, second: str) -> Tuple[int, int, int]:
    """
    Locate the longest common substring of two strings

    Scans every start position of the first string, then of the second, and
    keeps the earliest match; a later match replaces it only when strictly
    longer.

    Returns:
        Tuple of (position in first, position in second, length)
    """
    best_first = best_second = best_length = 0

    for i in range(len(first)):
        for j in range(len(second)):
            length = 0
            while (i + length < len(first) and j + length < len(second)
                   and first[i + length] == second[j + length]):
                length += 1
            if length > best_length:
                best_first, best_second, best_length = i, j, length

    return best_first, best_second, best_length


def similar_text(first: str, second: str) -> int:
    """
    Count the characters two strings have in common

    The longest common substring is counted, then the same is done
    recursively for the text left of it and the text right of it.

    Args:
        first: First string
        second: Second string

    Returns:
        Number of matching characters
    """
    pos_first, pos_second, length = _longest_common_substring(first, second)
    if not length:
        return 0

    total = length
    if pos_first and pos_second:
        total += similar_text(first[:pos_first], second[:pos_second])

    end_first = pos_first + length
    end_second = pos_second + length
    if end_first < len(first) and end_second < len(second):
        total += similar_text(first[end_first:], second[end_second:])

    return total


def similarity_percent(first: str, second: str) -> int:
    """
    Similarity of two strings as a whole percentage (0-100)

    Computed as matched * 200 / (len(first) + len(second)) and truncated.
    Two empty strings are 0% similar.
    """
    total_length = len(first) + len(second)
    if not total_length:
        return 0
    return int(similar_text(first, second) * 200.0 / total_length)
