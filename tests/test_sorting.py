import pytest

from linkedkit.nodes import build_list, to_list
from linkedkit.sorting import insertion_sort_list, quick_sort_list

SORTERS = [insertion_sort_list, quick_sort_list]
CASES = [
    [4, 2, 1, 3],
    [-1, 5, 3, 4, 0],
    [3, 1, 2, 3, 1],
    [5, 4, 3, 2, 1],
    [1, 2, 3, 4, 5],
    [7],
    [2, 2, 2],
]


@pytest.mark.parametrize("sort", SORTERS)
def test_source_example(sort):
    assert to_list(sort(build_list([4, 2, 1, 3]))) == [1, 2, 3, 4]


@pytest.mark.parametrize("sort", SORTERS)
@pytest.mark.parametrize("values", CASES)
def test_matches_sorted(sort, values):
    assert to_list(sort(build_list(values))) == sorted(values)


def test_insertion_sort_empty_list():
    assert insertion_sort_list(build_list([])) is None
    assert to_list(insertion_sort_list(None)) == []


def test_quick_sort_empty_list():
    assert quick_sort_list(build_list([])) is None
    assert to_list(quick_sort_list(None)) == []


@pytest.mark.parametrize("sort", SORTERS)
@pytest.mark.parametrize("values", CASES)
def test_nodes_are_reused(sort, values):
    head = build_list(values)
    originals = set()
    node = head
    while node is not None:
        originals.add(id(node))
        node = node.next
    result = sort(head)
    seen = set()
    node = result
    while node is not None:
        seen.add(id(node))
        node = node.next
    assert seen == originals


@pytest.mark.parametrize("sort", SORTERS)
def test_longer_mixed_input(sort):
    values = [(i * 37) % 101 - 50 for i in range(200)]
    assert to_list(sort(build_list(values))) == sorted(values)