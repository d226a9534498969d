"""
Levenshtein edit distance for headword matching and ranking.

Distances are counted over Unicode code points, so one traditional-script or
Cyrillic letter is one unit regardless of its UTF-8 length. Distances come from
python-Levenshtein.
"""

from typing import Optional

from Levenshtein import distance as levenshtein_distance


def distance(a: Optional[str], b: Optional[str]) -> int:
    """
    Classic edit distance (insert, delete, substitute all cost 1).

    ``None`` is treated as the empty string. No length cap is applied; callers
    compare the result with their own threshold.

    Examples:
        >>> distance("тамир", "тамга")
        2

        >>> distance("mongol", "mongol")
        0
    """
    return levenshtein_distance(a or "", b or "")
