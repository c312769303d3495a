"""Binary search for a value in a file of numbers sorted in ascending order."""

from __future__ import annotations

import time
from dataclasses import dataclass
from itertools import pairwise
from typing import Sequence

from numfile.filestore import FileData

_RULE = "--------------------------------"


class SearchError(Exception):
    """Raised when the file's contents do not allow a search."""


def is_sorted(numbers: Sequence[int]) -> bool:
    """Return whether the numbers are in non-decreasing order."""
    return all(a <= b for a, b in pairwise(numbers))


def find_occurrence(numbers: Sequence[int], value: int) -> tuple[int | None, int]:
    """Find any index of value; return (index or None, iterations)."""
    left, right = 0, len(numbers) - 1
    iterations = 0
    while left <= right:
        iterations += 1
        mid = left + (right - left) // 2
        if numbers[mid] == value:
            return mid, iterations
        if numbers[mid] < value:
            left = mid + 1
        else:
            right = mid - 1
    return None, iterations


def find_first_occurrence(numbers: Sequence[int], value: int) -> tuple[int | None, int]:
    """Find the lowest index of value; return (index or None, iterations)."""
    left, right = 0, len(numbers) - 1
    iterations = 0
    result = None
    while left <= right:
        iterations += 1
        mid = left + (right - left) // 2
        if numbers[mid] >= value:
            right = mid - 1
            if numbers[mid] == value:
                result = mid
        else:
            left = mid + 1
    return result, iterations


def find_last_occurrence(numbers: Sequence[int], value: int) -> tuple[int | None, int]:
    """Find the highest index of value; return (index or None, iterations)."""
    left, right = 0, len(numbers) - 1
    iterations = 0
    result = None
    while left <= right:
        iterations += 1
        mid = left + (right - left) // 2
        if numbers[mid] <= value:
            left = mid + 1
            if numbers[mid] == value:
                result = mid
        else:
            right = mid - 1
    return result, iterations


@dataclass(frozen=True)
class BinarySearchReport:
    """Outcome and statistics of the three binary searches."""

    value: int
    occurrence: int | None
    first: int | None
    last: int | None
    iterations_occurrence: int
    iterations_first: int
    iterations_last: int
    seconds_occurrence: float
    seconds_first: float
    seconds_last: float

    @property
    def found(self) -> bool:
        return self.first is not None

    @property
    def occurrences(self) -> int:
        if self.first is None or self.last is None:
            return 0
        return self.last - self.first + 1

    @property
    def total_iterations(self) -> int:
        return self.iterations_occurrence + self.iterations_first + self.iterations_last

    @property
    def total_seconds(self) -> float:
        return self.seconds_occurrence + self.seconds_first + self.seconds_last

    def format(self) -> str:
        """Render the statistics and results as text."""
        lines = [
            "",
            "Статистика поиска:",
            _RULE,
            f"Итераций поиска вхождения: {self.iterations_occurrence}",
            f"Время выполнения: {self.seconds_occurrence * 1000.0:.6f} мс",
            f"Итераций поиска первого вхождения: {self.iterations_first}",
            f"Время выполнения: {self.seconds_first * 1000.0:.6f} мс",
            f"Итераций поиска последнего вхождения: {self.iterations_last}",
            f"Время выполнения: {self.seconds_last * 1000.0:.6f} мс",
            f"Всего итераций: {self.total_iterations}",
            f"Общее время выполнения: {self.total_seconds * 1000.0:.6f} мс",
            _RULE,
            "",
            "Результаты поиска:",
            _RULE,
        ]
        if self.occurrence is not None and self.first is not None and self.last is not None:
            lines += [
                f"Значение {self.value} найдено {self.occurrences} раз(а)",
                f"Найденное вхождение: позиция {self.occurrence + 1}",
                f"Первое вхождение: позиция {self.first + 1}",
                f"Последнее вхождение: позиция {self.last + 1}",
            ]
        else:
            lines.append(f"Значение {self.value} не найдено в файле.")
        lines.append(_RULE)
        return "\n".join(lines) + "\n"


def _timed(search, numbers: Sequence[int], value: int) -> tuple[int | None, int, float]:
    start = time.perf_counter()
    index, iterations = search(numbers, value)
    return index, iterations, time.perf_counter() - start


def binary_search_file(fd: FileData, value: int) -> BinarySearchReport:
    """Search the open file's numbers for value."""
    numbers = fd.read_numbers()
    if not numbers:
        raise SearchError("Файл пуст.")
    if not is_sorted(numbers):
        raise SearchError("Ошибка: данные в файле не отсортированы по возрастанию.")
    occurrence, it_occ, t_occ = _timed(find_occurrence, numbers, value)
    first, it_first, t_first = _timed(find_first_occurrence, numbers, value)
    last, it_last, t_last = _timed(find_last_occurrence, numbers, value)
    return BinarySearchReport(
        value=value,
        occurrence=occurrence,
        first=first,
        last=last,
        iterations_occurrence=it_occ,
        iterations_first=it_first,
        iterations_last=it_last,
        seconds_occurrence=t_occ,
        seconds_first=t_first,
        seconds_last=t_last,
    )