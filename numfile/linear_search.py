"""Linear search for a value in a file of numbers."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Sequence

from numfile.binary_search import SearchError
from numfile.filestore import FileData

_RULE = "--------------------------------"


@dataclass
class SearchResult:
    """Matches found by a linear scan."""

    occurrences: int = 0
    first_pos: int | None = None
    last_pos: int | None = None
    iterations: int = 0


def linear_scan(numbers: Sequence[int], value: int, search_all: bool) -> SearchResult:
    """Scan the numbers for value, stopping at the first match unless search_all."""
    result = SearchResult()
    for position, number in enumerate(numbers):
        result.iterations += 1
        if number == value:
            result.occurrences += 1
            if result.first_pos is None:
                result.first_pos = position
            result.last_pos = position
            if not search_all:
                break
    return result


@dataclass(frozen=True)
class LinearSearchReport:
    """Outcome and statistics of a linear search."""

    value: int
    count: int
    search_all: bool
    result: SearchResult
    time_ms: float

    @property
    def found(self) -> bool:
        return self.result.occurrences > 0

    def format(self) -> str:
        """Render the statistics and results as text."""
        result = self.result
        lines = [
            "",
            "Статистика поиска:",
            _RULE,
            f"Количество элементов в массиве: {self.count}",
            f"Общее время выполнения: {self.time_ms:.6f} мс",
            f"Всего итераций (сравнений): {result.iterations}",
            _RULE,
            "",
            "Результаты поиска:",
            _RULE,
        ]
        if self.found and result.first_pos is not None and result.last_pos is not None:
            if self.search_all:
                lines += [
                    f"Значение {self.value} найдено {result.occurrences} раз(а)",
                    f"Первое вхождение: позиция {result.first_pos + 1}",
                    f"Последнее вхождение: позиция {result.last_pos + 1}",
                ]
            else:
                lines.append(
                    f"Значение {self.value} найдено на позиции {result.first_pos + 1}"
                )
        else:
            lines.append(f"Значение {self.value} не найдено в файле.")
        lines.append(_RULE)
        return "\n".join(lines) + "\n"


def linear_search_file(fd: FileData, value: int, search_all: bool) -> LinearSearchReport:
    """Search the open file's numbers for value from start to end."""
    numbers = fd.read_numbers()
    if not numbers:
        raise SearchError("Файл пуст.")
    start = time.perf_counter()
    result = linear_scan(numbers, value, search_all)
    elapsed_ms = (time.perf_counter() - start) * 1000.0
    return LinearSearchReport(
        value=value,
        count=len(numbers),
        search_all=search_all,
        result=result,
        time_ms=elapsed_ms,
    )