import random

import pytest

from dsakit.sorting import (
    bin_sort,
    bubble_sort,
    count_sort,
    insertion_sort,
    iterative_merge_sort,
    merge_sort,
    quick_sort,
    radix_sort,
    selection_sort,
    shell_sort,
)

SOURCE_INPUTS = [
    [8, 5, 7, 3, 2],
    [8, 6, 3, 2, 5, 4],
    [50, 70, 60, 90, 40, 80, 10, 80, 20, 30],
    [8, 3, 7, 4, 9, 2, 6, 5],
    [8, 2, 9, 6, 5, 3, 7, 4],
    [6, 3, 9, 10, 15, 6, 8, 12, 3, 6],
    [6, 8, 3, 10, 15, 6, 9, 12, 6, 3],
    [237, 146, 259, 348, 152, 163, 235, 48, 36, 62],
    [11, 13, 7, 12, 16, 9, 24, 5, 10, 3],
]


@pytest.mark.parametrize("values", SOURCE_INPUTS)
def test_source_examples_sorted(values):
    expected = sorted(values)
    assert bubble_sort(values) == expected
    assert insertion_sort(values) == expected
    assert selection_sort(values) == expected
    assert quick_sort(values) == expected
    assert iterative_merge_sort(values) == expected
    assert merge_sort(values) == expected
    assert shell_sort(values) == expected
    assert count_sort(values) == expected
    assert bin_sort(values) == expected
    assert radix_sort(values) == expected


def test_radix_example_pinned():
    data = [237, 146, 259, 348, 152, 163, 235, 48, 36, 62]
    expected = [36, 48, 62, 146, 152, 163, 235, 237, 259, 348]
    assert radix_sort(data) == expected
    assert bin_sort(data) == expected
    assert count_sort(data) == expected
    assert quick_sort(data) == expected
    assert merge_sort(data) == expected
    assert iterative_merge_sort(data) == expected
    assert shell_sort(data) == expected
    assert bubble_sort(data) == expected
    assert insertion_sort(data) == expected
    assert selection_sort(data) == expected


def test_source_example_values_pinned():
    assert bubble_sort([8, 5, 7, 3, 2]) == [2, 3, 5, 7, 8]
    assert selection_sort([8, 6, 3, 2, 5, 4]) == [2, 3, 4, 5, 6, 8]
    assert quick_sort([50, 70, 60, 90, 40, 80, 10, 80, 20, 30]) == [
        10, 20, 30, 40, 50, 60, 70, 80, 80, 90,
    ]
    assert count_sort([6, 3, 9, 10, 15, 6, 8, 12, 3, 6]) == [
        3, 3, 6, 6, 6, 8, 9, 10, 12, 15,
    ]
    assert shell_sort([11, 13, 7, 12, 16, 9, 24, 5, 10, 3]) == [
        3, 5, 7, 9, 10, 11, 12, 13, 16, 24,
    ]


@pytest.mark.parametrize("values", [[], [1], [2, 1], [1, 1, 1], [0, 0, 5]])
def test_small_inputs(values):
    expected = sorted(values)
    assert bubble_sort(values) == expected
    assert insertion_sort(values) == expected
    assert selection_sort(values) == expected
    assert quick_sort(values) == expected
    assert iterative_merge_sort(values) == expected
    assert merge_sort(values) == expected
    assert shell_sort(values) == expected
    assert count_sort(values) == expected
    assert bin_sort(values) == expected
    assert radix_sort(values) == expected


def test_input_not_modified():
    data = [5, 3, 9, 1, 3]
    copy = list(data)
    for result in (
        bubble_sort(data),
        insertion_sort(data),
        selection_sort(data),
        quick_sort(data),
        iterative_merge_sort(data),
        merge_sort(data),
        shell_sort(data),
        count_sort(data),
        bin_sort(data),
        radix_sort(data),
    ):
        assert result == [1, 3, 3, 5, 9]
    assert data == copy


@pytest.mark.parametrize("size", [3, 5, 6, 7, 9, 13, 31, 64])
def test_random_sizes(size):
    rng = random.Random(size)
    data = [rng.randrange(0, 500) for _ in range(size)]
    expected = sorted(data)
    assert bubble_sort(data) == expected
    assert insertion_sort(data) == expected
    assert selection_sort(data) == expected
    assert quick_sort(data) == expected
    assert iterative_merge_sort(data) == expected
    assert merge_sort(data) == expected
    assert shell_sort(data) == expected
    assert count_sort(data) == expected
    assert bin_sort(data) == expected
    assert radix_sort(data) == expected


def test_negative_and_mixed_values():
    data = [3, -1, 0, -7, 12, 5, -1]
    expected = [-7, -1, -1, 0, 3, 5, 12]
    assert bubble_sort(data) == expected
    assert insertion_sort(data) == expected
    assert selection_sort(data) == expected
    assert quick_sort(data) == expected
    assert iterative_merge_sort(data) == expected
    assert merge_sort(data) == expected
    assert shell_sort(data) == expected


def test_already_sorted_and_reversed():
    data = list(range(50))
    backwards = list(reversed(data))
    assert bubble_sort(data) == data
    assert bubble_sort(backwards) == data
    assert insertion_sort(data) == data
    assert insertion_sort(backwards) == data
    assert selection_sort(data) == data
    assert selection_sort(backwards) == data
    assert quick_sort(data) == data
    assert quick_sort(backwards) == data
    assert iterative_merge_sort(data) == data
    assert iterative_merge_sort(backwards) == data
    assert merge_sort(data) == data
    assert merge_sort(backwards) == data
    assert shell_sort(data) == data
    assert shell_sort(backwards) == data


def test_sorts_strings():
    data = ["pear", "apple", "fig", "banana"]
    expected = ["apple", "banana", "fig", "pear"]
    assert bubble_sort(data) == expected
    assert insertion_sort(data) == expected
    assert selection_sort(data) == expected
    assert quick_sort(data) == expected
    assert iterative_merge_sort(data) == expected
    assert merge_sort(data) == expected
    assert shell_sort(data) == expected


def test_count_sort_negative_rejected():
    with pytest.raises(ValueError):
        count_sort([3, -2, 1])


def test_bin_sort_negative_rejected():
    with pytest.raises(ValueError):
        bin_sort([3, -2, 1])


def test_radix_sort_negative_rejected():
    with pytest.raises(ValueError):
        radix_sort([3, -2, 1])


def test_radix_sort_all_zero():
    assert radix_sort([0, 0, 0]) == [0, 0, 0]


def test_accepts_generators():
    assert merge_sort(x for x in [3, 1, 2]) == [1, 2, 3]