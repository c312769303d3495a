import math

import pytest

from numfile.binary_search import (
    SearchError,
    binary_search_file,
    find_first_occurrence,
    find_last_occurrence,
    find_occurrence,
    is_sorted,
)
from numfile.filestore import FileData, FileError

SAMPLES = [
    ([1, 2, 3, 4, 5], 3),
    ([1, 2, 2, 2, 3], 2),
    ([7, 7, 7, 7], 7),
    ([-100, -5, 0, 0, 0, 9, 100], 0),
    ([4], 4),
    ([1, 3, 5, 7, 9, 11, 13, 15, 17], 17),
]


def _last_index(numbers, value):
    return len(numbers) - 1 - numbers[::-1].index(value)


def test_is_sorted():
    assert is_sorted([1, 2, 2, 3])
    assert is_sorted([])
    assert is_sorted([5])
    assert not is_sorted([2, 1])


@pytest.mark.parametrize("numbers,value", SAMPLES)
def test_find_occurrence_hits_value(numbers, value):
    index, iterations = find_occurrence(numbers, value)
    assert numbers[index] == value
    assert 1 <= iterations <= math.ceil(math.log2(len(numbers) + 1))


@pytest.mark.parametrize("numbers,value", SAMPLES)
def test_find_first_matches_index(numbers, value):
    index, iterations = find_first_occurrence(numbers, value)
    assert index == numbers.index(value)
    assert iterations <= math.ceil(math.log2(len(numbers) + 1))


@pytest.mark.parametrize("numbers,value", SAMPLES)
def test_find_last_matches_index(numbers, value):
    index, _ = find_last_occurrence(numbers, value)
    assert index == _last_index(numbers, value)


@pytest.mark.parametrize("numbers,value", SAMPLES)
def test_occurrence_between_first_and_last(numbers, value):
    occ, _ = find_occurrence(numbers, value)
    first, _ = find_first_occurrence(numbers, value)
    last, _ = find_last_occurrence(numbers, value)
    assert first <= occ <= last


@pytest.mark.parametrize("search", [find_occurrence, find_first_occurrence, find_last_occurrence])
def test_missing_value(search):
    index, iterations = search([1, 3, 5, 7], 4)
    assert index is None
    assert iterations >= 1


@pytest.mark.parametrize("search", [find_occurrence, find_first_occurrence, find_last_occurrence])
def test_empty_sequence(search):
    assert search([], 1) == (None, 0)


@pytest.fixture
def fd(tmp_path):
    path = tmp_path / "sorted.txt"
    data = FileData()
    data.create(str(path))
    data.open(str(path))
    yield data
    data.close()


def test_search_file_found(fd):
    numbers = [1, 2, 2, 2, 5]
    fd.write_numbers(numbers)
    report = binary_search_file(fd, 2)
    assert report.found
    assert report.first == numbers.index(2)
    assert report.last == _last_index(numbers, 2)
    assert report.occurrences == numbers.count(2)
    assert report.total_iterations == (
        report.iterations_occurrence + report.iterations_first + report.iterations_last
    )
    text = report.format()
    assert f"Значение 2 найдено {numbers.count(2)} раз(а)" in text
    assert f"Первое вхождение: позиция {numbers.index(2) + 1}" in text
    assert "Статистика поиска:" in text


def test_search_file_not_found(fd):
    fd.write_numbers([1, 3, 5])
    report = binary_search_file(fd, 4)
    assert not report.found
    assert report.occurrences == 0
    assert "Значение 4 не найдено в файле." in report.format()


def test_search_file_empty(fd):
    with pytest.raises(SearchError, match="пуст"):
        binary_search_file(fd, 1)


def test_search_file_unsorted(fd):
    fd.write_numbers([3, 1, 2])
    with pytest.raises(SearchError, match="не отсортированы"):
        binary_search_file(fd, 1)


def test_search_closed_file():
    with pytest.raises(FileError):
        binary_search_file(FileData(), 1)