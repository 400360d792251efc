import pytest

from sudokuforge.combinations import combinations


def _as_text(items, length):
    return "\t".join(
        ",".join(str(value) for value in combo) for combo in combinations(items, length)
    )


VALUES = [1, 2, 3, 4, 5]


def test_three_of_five():
    assert (
        _as_text(VALUES, 3)
        == "1,2,3\t1,2,4\t1,2,5\t1,3,4\t1,3,5\t1,4,5\t2,3,4\t2,3,5\t2,4,5\t3,4,5"
    )


def test_one_of_five():
    assert _as_text(VALUES, 1) == "1\t2\t3\t4\t5"


def test_five_of_five():
    assert _as_text(VALUES, 5) == "1,2,3,4,5"


@pytest.mark.parametrize(
    "items, length",
    [(VALUES, 0), (VALUES, 6), ([], 0), ([], 5)],
)
def test_empty_results(items, length):
    assert _as_text(items, length) == ""


def test_single_item():
    assert _as_text([1], 1) == "1"


def test_combinations_are_sorted_when_input_is_sorted():
    for combo in combinations(list(range(7)), 3):
        assert list(combo) == sorted(combo)