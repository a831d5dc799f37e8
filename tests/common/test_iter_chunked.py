import pytest

from autotagger.common.iter import chunked


def test_chunked_basic():
    data = list(range(10))
    chunks = list(chunked(data, 4))
    assert chunks == [[0, 1, 2, 3], [4, 5, 6, 7], [8, 9]]


def test_chunked_size_gt_len():
    assert list(chunked([7, 8], 500)) == [[7, 8]]


def test_chunked_empty_and_generator_input():
    assert list(chunked([], 3)) == []
    assert list(chunked((i * 2 for i in range(5)), 2)) == [[0, 2], [4, 6], [8]]


def test_chunked_rejects_non_positive_size():
    with pytest.raises(ValueError):
        list(chunked([1], 0))
