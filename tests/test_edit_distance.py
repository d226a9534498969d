"""
Unit tests for the edit-distance engine.
"""

import itertools

from hudam.edit_distance import distance


WORDS = ["", "тамир", "тамга", "цамхаг", "damir", "ᠲᠠᠮᠢᠷ", "ᠲᠠᠮᠠ", "mongol", "monggol"]


def distance_table(a, b):
    """Plain dynamic-programming matrix; the bottom-right cell is the distance."""
    a = a or ""
    b = b or ""
    table = [[0] * (len(b) + 1) for _ in range(len(a) + 1)]
    for i in range(len(a) + 1):
        table[i][0] = i
    for j in range(len(b) + 1):
        table[0][j] = j
    for i in range(1, len(a) + 1):
        for j in range(1, len(b) + 1):
            cost = 0 if a[i - 1] == b[j - 1] else 1
            table[i][j] = min(
                table[i - 1][j] + 1,
                table[i][j - 1] + 1,
                table[i - 1][j - 1] + cost,
            )
    return table


class TestDistance:
    """Test Levenshtein distance values."""

    def test_identical(self) -> None:
        """Distance to itself is zero."""
        for word in WORDS:
            assert distance(word, word) == 0

    def test_empty(self) -> None:
        """Distance to the empty string is the length."""
        assert distance("", "тамир") == 5
        assert distance("mongol", "") == 6

    def test_known_values(self) -> None:
        """Classic examples."""
        assert distance("kitten", "sitting") == 3
        assert distance("тамир", "тамга") == 2
        assert distance("mongol", "monggol") == 1

    def test_counts_code_points(self) -> None:
        """Multi-byte script letters count as one edit each."""
        assert distance("ᠲᠠᠮᠢᠷ", "ᠲᠠᠮᠠ") == 2
        assert distance("ө", "о") == 1

    def test_none_is_empty(self) -> None:
        """None behaves like the empty string."""
        assert distance(None, "ус") == 2
        assert distance(None, None) == 0

    def test_symmetric(self) -> None:
        """distance(a, b) == distance(b, a)."""
        for a, b in itertools.product(WORDS, repeat=2):
            assert distance(a, b) == distance(b, a)

    def test_zero_iff_equal(self) -> None:
        """Only identical strings are at distance zero."""
        for a, b in itertools.product(WORDS, repeat=2):
            assert (distance(a, b) == 0) == (a == b)

    def test_triangle_inequality(self) -> None:
        """d(a, c) <= d(a, b) + d(b, c)."""
        for a, b, c in itertools.product(WORDS, repeat=3):
            assert distance(a, c) <= distance(a, b) + distance(b, c)


class TestDistanceTable:
    """Check distance() against a plain dynamic-programming matrix."""

    def test_shape_and_borders(self) -> None:
        """First row and column count up from zero."""
        table = distance_table("ус", "усан")
        assert len(table) == 3
        assert all(len(row) == 5 for row in table)
        assert [row[0] for row in table] == [0, 1, 2]
        assert table[0] == [0, 1, 2, 3, 4]

    def test_matches_distance(self) -> None:
        """distance() equals the bottom-right cell of the matrix."""
        for a, b in itertools.product(WORDS, repeat=2):
            assert distance_table(a, b)[-1][-1] == distance(a, b)

    def test_empty_inputs(self) -> None:
        """Empty strings give a 1x1 table."""
        assert distance_table("", "") == [[0]]
        assert distance_table(None, "") == [[0]]
