"""
Text similarity scoring.

Scores how closely a learner's spoken answer matches the reference text as a
percentage derived from the Levenshtein edit distance. The same function is
used by the HTTP backend and by local presenters, so both report identical
numbers.
"""

from typing import List

from .models import SimilarityResult

GOOD_THRESHOLD = 80.0
MEDIUM_THRESHOLD = 60.0


def levenshtein_distance(reference: str, candidate: str) -> int:
    """
    Compute the edit distance between two strings.

    Uses the full dynamic-programming matrix with one row per character of
    candidate and one column per character of reference. Substitution,
    insertion and deletion each cost 1, matching characters cost 0.

    Example:
        >>> levenshtein_distance("kitten", "sitting")
        3
    """
    matrix: List[List[int]] = [[i] for i in range(len(candidate) + 1)]
    matrix[0] = list(range(len(reference) + 1))

    for i in range(1, len(candidate) + 1):
        for j in range(1, len(reference) + 1):
            if candidate[i - 1] == reference[j - 1]:
                matrix[i].append(matrix[i - 1][j - 1])
            else:
                matrix[i].append(min(
                    matrix[i - 1][j - 1] + 1,  # substitution
                    matrix[i][j - 1] + 1,      # insertion
                    matrix[i - 1][j] + 1,      # deletion
                ))

    return matrix[len(candidate)][len(reference)]


def score(reference: str, candidate: str) -> float:
    """
    Return the similarity of two strings as a percentage in [0, 100].

    Both strings are lowercased before comparison; nothing else is
    normalised, so whitespace and punctuation count as characters. Two empty
    strings score 100.

    Args:
        reference: Text the learner was asked to repeat
        candidate: Text captured by speech recognition

    Returns:
        ((max_len - distance) / max_len) * 100

    Example:
        >>> score("Hola", "hola")
        100.0
        >>> round(score("kitten", "sitting"), 2)
        57.14
    """
    reference = reference.lower()
    candidate = candidate.lower()

    max_len = max(len(reference), len(candidate))
    if max_len == 0:
        return 100.0

    distance = levenshtein_distance(reference, candidate)
    return ((max_len - distance) / max_len) * 100


def compare(reference: str, candidate: str) -> SimilarityResult:
    """Score candidate against reference and keep both texts with the result."""
    return SimilarityResult(
        reference_text=reference,
        candidate_text=candidate,
        score_percent=score(reference, candidate),
    )


def grade(score_percent: float) -> str:
    """Bucket a score into 'good' (>= 80), 'medium' (>= 60) or 'poor'."""
    if score_percent >= GOOD_THRESHOLD:
        return "good"
    if score_percent >= MEDIUM_THRESHOLD:
        return "medium"
    return "poor"
