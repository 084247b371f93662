import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.sorting import (
    bubble_sort,
    bucket_sort,
    count_sort_chars,
    counting_sort,
    heap_sort,
    insertion_sort,
    merge_sort,
    quick_sort,
    radix_sort,
    selection_sort,
    shell_sort,
)


@pytest.mark.parametrize(
    "data",
    [
        [12, 11, 13, 5, 6, 7],
        [10, 7, 8, 9, 1, 5],
        [4, 3, 2, 1, 0],
        [],
        [42],
        [3, 3, 1, 1, 2, 2],
    ],
)
def test_source_examples_are_sorted(data):
    expected = sorted(data)
    assert heap_sort(data) == expected
    assert bubble_sort(data) == expected
    assert insertion_sort(data) == expected
    assert merge_sort(data) == expected
    assert quick_sort(data) == expected
    assert shell_sort(data) == expected
    assert selection_sort(data) == expected


def test_source_example_values():
    assert heap_sort([12, 11, 13, 5, 6, 7]) == [5, 6, 7, 11, 12, 13]
    assert merge_sort([12, 11, 13, 5, 6, 7]) == [5, 6, 7, 11, 12, 13]
    assert quick_sort([10, 7, 8, 9, 1, 5]) == [1, 5, 7, 8, 9, 10]
    assert insertion_sort([4, 3, 2, 1, 0]) == [0, 1, 2, 3, 4]


@given(data=st.lists(st.integers()))
def test_general_sorts_agree_with_builtin(data):
    expected = sorted(data)
    assert heap_sort(data) == expected
    assert bubble_sort(data) == expected
    assert insertion_sort(data) == expected
    assert merge_sort(data) == expected
    assert quick_sort(data) == expected
    assert shell_sort(data) == expected
    assert selection_sort(data) == expected


def test_input_is_not_modified():
    data = [5, 1, 4, 2]
    snapshot = list(data)
    assert heap_sort(data) == [1, 2, 4, 5]
    assert bubble_sort(data) == [1, 2, 4, 5]
    assert insertion_sort(data) == [1, 2, 4, 5]
    assert merge_sort(data) == [1, 2, 4, 5]
    assert quick_sort(data) == [1, 2, 4, 5]
    assert shell_sort(data) == [1, 2, 4, 5]
    assert selection_sort(data) == [1, 2, 4, 5]
    assert data == snapshot


def test_quick_sort_handles_long_sorted_input():
    data = list(range(3000))
    assert quick_sort(data) == data


def test_merge_sort_is_stable():
    class Key:
        def __init__(self, key, tag):
            self.key, self.tag = key, tag

        def __le__(self, other):
            return self.key <= other.key

    items = [Key(1, "a"), Key(0, "b"), Key(1, "c"), Key(0, "d")]
    result = merge_sort(items)
    assert [item.tag for item in result] == ["b", "d", "a", "c"]


@given(data=st.lists(st.integers()))
def test_selection_sort_descending(data):
    assert selection_sort(data, descending=True) == sorted(data, reverse=True)


def test_bucket_sort_source_example():
    data = [0.897, 0.565, 0.656, 0.1234, 0.665, 0.3434]
    assert bucket_sort(data) == sorted(data)


@given(data=st.lists(st.floats(min_value=0, max_value=1, exclude_max=True)))
def test_bucket_sort_property(data):
    assert bucket_sort(data) == sorted(data)


@pytest.mark.parametrize("bad", [1.0, -0.1, 2.5])
def test_bucket_sort_rejects_out_of_range(bad):
    with pytest.raises(ValueError):
        bucket_sort([0.5, bad])


def test_count_sort_chars_source_example():
    assert count_sort_chars("array") == "".join(sorted("array"))


@given(text=st.text(alphabet=st.characters(max_codepoint=255)))
def test_count_sort_chars_property(text):
    assert count_sort_chars(text) == "".join(sorted(text))


def test_count_sort_chars_rejects_wide_characters():
    with pytest.raises(ValueError):
        count_sort_chars("a\u0100b")


@given(data=st.lists(st.integers(min_value=-50, max_value=50)))
def test_counting_sort_property(data):
    assert counting_sort(data, -50, 50) == sorted(data)


def test_counting_sort_rejects_value_outside_limits():
    with pytest.raises(ValueError):
        counting_sort([1, 2, 11], 0, 10)


def test_counting_sort_rejects_inverted_limits():
    with pytest.raises(ValueError):
        counting_sort([], 5, 1)


def test_radix_sort_source_example():
    data = [170, 45, 75, 90, 802, 24, 2, 66]
    assert radix_sort(data) == sorted(data)


@given(data=st.lists(st.integers(min_value=0, max_value=10**9)))
def test_radix_sort_property(data):
    assert radix_sort(data) == sorted(data)


def test_radix_sort_empty():
    assert radix_sort([]) == []


def test_radix_sort_rejects_negative():
    with pytest.raises(ValueError):
        radix_sort([3, -1, 2])