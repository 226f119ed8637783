"""
Bounded edit distance for typo tolerance.
"""
from rapidfuzz.distance import Levenshtein

# Maximum Levenshtein distance accepted as a typo
MAX_EDIT_DISTANCE = 2


def edit_distance(a: str, b: str) -> int:
    """
    Insert/delete/substitute distance between two strings.
    
    Once the length difference alone exceeds MAX_EDIT_DISTANCE the exact value
    no longer matters, so MAX_EDIT_DISTANCE + 1 is returned without running
    the table.
    
    :param a: First string
    :param b: Second string
    :return: Edit distance (or MAX_EDIT_DISTANCE + 1 for hopeless pairs)
    """
    if not a:
        return len(b)
    if not b:
        return len(a)
    
    if abs(len(a) - len(b)) > MAX_EDIT_DISTANCE:
        return MAX_EDIT_DISTANCE + 1
    
    return Levenshtein.distance(a, b)
