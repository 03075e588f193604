import random

import pytest

from listkit.sorting import insertion_sort, main, selection_sort


def test_sorts_descending_sequence():
    by_selection = list(range(50, 0, -1))
    by_insertion = list(range(50, 0, -1))
    selection_sort(by_selection)
    insertion_sort(by_insertion)
    assert by_selection == list(range(1, 51))
    assert by_insertion == list(range(1, 51))


@pytest.mark.parametrize("seed", [0, 1, 2, 3])
def test_matches_builtin_sorted(seed):
    rng = random.Random(seed)
    items = [rng.randint(-20, 20) for _ in range(60)]
    expected = sorted(items)
    by_selection = list(items)
    by_insertion = list(items)
    selection_sort(by_selection)
    insertion_sort(by_insertion)
    assert by_selection == expected
    assert by_insertion == expected


@pytest.mark.parametrize("items", [[], [7], [2, 2, 2], [1, 2, 3]])
def test_trivial_inputs(items):
    by_selection = list(items)
    by_insertion = list(items)
    selection_sort(by_selection)
    insertion_sort(by_insertion)
    assert by_selection == sorted(items)
    assert by_insertion == sorted(items)


def test_returns_none_and_sorts_in_place():
    by_selection = [3, 1, 2]
    by_insertion = [3, 1, 2]
    assert selection_sort(by_selection) is None
    assert insertion_sort(by_insertion) is None
    assert by_selection == [1, 2, 3]
    assert by_insertion == [1, 2, 3]


def test_sorts_strings():
    by_selection = ["pear", "apple", "fig"]
    by_insertion = ["pear", "apple", "fig"]
    selection_sort(by_selection)
    insertion_sort(by_insertion)
    assert by_selection == ["apple", "fig", "pear"]
    assert by_insertion == ["apple", "fig", "pear"]


def test_insertion_sort_is_stable():
    items = [(1, "a"), (0, "b"), (1, "c"), (0, "d")]
    keyed = [_Keyed(k, tag) for k, tag in items]
    insertion_sort(keyed)
    assert [k.tag for k in keyed] == ["b", "d", "a", "c"]


class _Keyed:
    def __init__(self, key, tag):
        self.key = key
        self.tag = tag

    def __lt__(self, other):
        return self.key < other.key

    def __gt__(self, other):
        return self.key > other.key


def test_main_prints_elapsed_seconds(capsys):
    assert main(["--size", "20"]) == 0
    lines = [line for line in capsys.readouterr().out.splitlines() if line]
    assert len(lines) == 3
    assert lines[-1].isdigit()


def test_main_rejects_negative_size():
    with pytest.raises(SystemExit):
        main(["--size", "-1"])