"""String similarity helpers used by fuzzy component matching."""

from __future__ import annotations


def levenshtein_distance(source: str, target: str) -> int:
    """Return the single-character insert/delete/substitute edit distance."""
    matrix = [[0] * (len(source) + 1) for _ in range(len(target) + 1)]
    for row in range(len(target) + 1):
        matrix[row][0] = row
    for column in range(len(source) + 1):
        matrix[0][column] = column

    for row in range(1, len(target) + 1):
        for column in range(1, len(source) + 1):
            if target[row - 1] == source[column - 1]:
                matrix[row][column] = matrix[row - 1][column - 1]
                continue
            matrix[row][column] = 1 + min(
                matrix[row - 1][column - 1],
                matrix[row][column - 1],
                matrix[row - 1][column],
            )

    return matrix[len(target)][len(source)]


def contains_either(left: str, right: str) -> bool:
    """Return True when either string contains the other."""
    return left in right or right in left
