"""A text file of whitespace-separated integers, opened for reading and writing."""

from __future__ import annotations

import os
import re
from typing import IO, Iterable

_INTEGER = re.compile(r"\s*([+-]?\d+)")


class FileError(Exception):
    """Raised when a file operation cannot be carried out."""


def parse_numbers(stream: IO[str]) -> list[int]:
    """Read integers from the stream until the first token that is not one."""
    text = stream.read()
    numbers: list[int] = []
    position = 0
    while match := _INTEGER.match(text, position):
        numbers.append(int(match.group(1)))
        position = match.end()
    return numbers


class FileData:
    """The working file: its name and, while it is open, its handle."""

    def __init__(self) -> None:
        self.filename = ""
        self._file: IO[str] | None = None

    def __enter__(self) -> FileData:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    @property
    def is_open(self) -> bool:
        return self._file is not None

    def create(self, filename: str) -> None:
        """Create a new empty file; fail if it already exists."""
        if self.is_open:
            self.close()
        if not filename:
            raise FileError("Ошибка: имя файла не указано.")
        try:
            with open(filename, "x", encoding="utf-8"):
                pass
        except OSError as exc:
            raise FileError(f"Ошибка: не удалось создать файл '{filename}'.") from exc
        self.filename = ""

    def open(self, filename: str) -> None:
        """Open an existing file for reading and writing."""
        if self.is_open:
            raise FileError(f"Ошибка: открыт файл '{self.filename}'.")
        if not filename:
            raise FileError("Ошибка: имя файла не может быть пустым!")
        try:
            self._file = open(filename, "r+", encoding="utf-8")
        except OSError as exc:
            self.filename = ""
            raise FileError(f"Ошибка: не удалось открыть файл '{filename}'.") from exc
        self.filename = filename

    def close(self) -> bool:
        """Close the file; return whether there was one open."""
        if self._file is None:
            return False
        self._file.close()
        self._file = None
        self.filename = ""
        return True

    def delete(self, filename: str | None = None) -> None:
        """Remove the named file, or the current one when no name is given."""
        name = filename or self.filename
        if not name:
            raise FileError("Ошибка: имя файла не указано.")
        if self._file is not None:
            self._file.close()
            self._file = None
        self.filename = ""
        try:
            os.remove(name)
        except OSError as exc:
            raise FileError(f"Ошибка: не удалось удалить файл '{name}'.") from exc

    def _handle(self) -> IO[str]:
        if self._file is None:
            raise FileError("Ошибка: файл не открыт.")
        return self._file

    def clear(self) -> None:
        """Truncate the open file to zero length."""
        handle = self._handle()
        handle.seek(0)
        handle.truncate()
        handle.flush()

    def read_numbers(self) -> list[int]:
        """Read all integers from the start of the open file."""
        handle = self._handle()
        handle.seek(0)
        return parse_numbers(handle)

    def write_numbers(self, numbers: Iterable[int]) -> None:
        """Replace the file contents with the numbers, one per line."""
        handle = self._handle()
        handle.seek(0)
        handle.writelines(f"{number}\n" for number in numbers)
        handle.truncate()
        handle.flush()

    def append_numbers(self, numbers: Iterable[int]) -> None:
        """Add the numbers, one per line, to the end of the file."""
        handle = self._handle()
        handle.seek(0, os.SEEK_END)
        handle.writelines(f"{number}\n" for number in numbers)
        handle.flush()