"""Filling a number file with random values and sorting it in place."""

from __future__ import annotations

import random
from typing import Iterable

from numfile.filestore import FileData, FileError

RANDOM_LOW = -100
RANDOM_HIGH = 100


def fill_with_random_numbers(
    fd: FileData, count: int, rng: random.Random | None = None
) -> list[int]:
    """Append count random integers in [-100, 100] to the open file and return them."""
    if not fd.is_open:
        raise FileError("Ошибка: файл не открыт!")
    if count <= 0:
        raise ValueError("Ошибка ввода. Введите положительное число!")
    generator = rng if rng is not None else random.Random()
    numbers = [generator.randint(RANDOM_LOW, RANDOM_HIGH) for _ in range(count)]
    fd.append_numbers(numbers)
    return numbers


def bubble_sort(numbers: Iterable[int]) -> list[int]:
    """Return the numbers in ascending order, sorted by bubble sort."""
    result = list(numbers)
    for unsorted_end in range(len(result) - 1, 0, -1):
        swapped = False
        for j in range(unsorted_end):
            if result[j] > result[j + 1]:
                result[j], result[j + 1] = result[j + 1], result[j]
                swapped = True
        if not swapped:
            break
    return result


def sort_file(fd: FileData) -> int:
    """Sort the open file's numbers in ascending order; return how many there are."""
    if not fd.is_open:
        raise FileError("Ошибка: файл не открыт!")
    numbers = fd.read_numbers()
    if not numbers:
        raise FileError("Файл не содержит чисел для сортировки!")
    fd.write_numbers(bubble_sort(numbers))
    return len(numbers)