"""
PhishGuard String Similarity

Edit distance and look-alike character primitives used for brand
impersonation detection.
"""

from phishguard.utils.constants import (
    CHARACTER_SUBSTITUTIONS,
    SUBSTITUTION_SIMILARITY_THRESHOLD,
)


def levenshtein_distance(s1: str, s2: str) -> int:
    """Calculate Levenshtein edit distance between two strings."""
    if len(s1) < len(s2):
        return levenshtein_distance(s2, s1)

    if len(s2) == 0:
        return len(s1)

    previous_row = range(len(s2) + 1)
    for i, c1 in enumerate(s1):
        current_row = [i + 1]
        for j, c2 in enumerate(s2):
            insertions = previous_row[j + 1] + 1
            deletions = current_row[j] + 1
            substitutions = previous_row[j] + (c1 != c2)
            current_row.append(min(insertions, deletions, substitutions))
        previous_row = current_row

    return previous_row[-1]


def normalized_similarity(s1: str, s2: str) -> float:
    """
    Similarity in [0, 1] derived from edit distance.

    1 - distance / max(len). Two empty strings are identical.
    """
    longest = max(len(s1), len(s2))
    if longest == 0:
        return 1.0
    return 1.0 - levenshtein_distance(s1, s2) / longest


def substitute_lookalikes(legitimate: str) -> str:
    """Replace every look-alike letter with its digit or symbol stand-in."""
    substituted = legitimate
    for original, replacement in CHARACTER_SUBSTITUTIONS.items():
        substituted = substituted.replace(original, replacement)
    return substituted


def is_character_substitution(candidate: str, legitimate: str) -> bool:
    """
    Check whether ``candidate`` imitates ``legitimate`` with look-alike characters.

    The legitimate name is transformed (o->0, i->1, l->1, e->3, a->@, s->$,
    g->9); the candidate matches when it contains the transformed text or is
    more than 80% similar to it.

    Args:
        candidate: Hostname under inspection
        legitimate: Known brand domain

    Returns:
        True if a substitution attack is likely
    """
    transformed = substitute_lookalikes(legitimate)
    if transformed in candidate:
        return True
    return normalized_similarity(candidate, transformed) > SUBSTITUTION_SIMILARITY_THRESHOLD
