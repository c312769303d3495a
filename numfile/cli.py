"""Interactive menu for managing and searching a file of numbers."""

from __future__ import annotations

import argparse
import re
import sys
from typing import IO, Callable

from numfile.binary_search import SearchError, binary_search_file
from numfile.edit import fill_with_random_numbers, sort_file
from numfile.filestore import FileData, FileError
from numfile.linear_search import linear_search_file

_LEADING_INTEGER = re.compile(r"\s*([+-]?\d+)")

_MENU_LINES = (
    "",
    "Управление файлом",
    "1. Создать",
    "2. Открыть (для чтения и записи)",
    "3. Закрыть",
    "4. Очистить",
    "5. Удалить",
    "Редактирование",
    "6. Заполнить автоматически",
    "7. Отсортировать (по возрастанию)",
    "Поиск",
    "8. Линейный",
    "9. Бинарный",
    "Выход",
    "0. Выйти из программы",
)


def menu_text() -> str:
    """Return the main menu followed by the selection prompt."""
    return "\n".join(_MENU_LINES) + "\nВыберите пункт: "


def _leading_int(text: str) -> int | None:
    match = _LEADING_INTEGER.match(text)
    return int(match.group(1)) if match else None


def parse_choice(text: str) -> int:
    """Parse a menu choice: the integer at the start of the text."""
    value = _leading_int(text)
    if value is None:
        raise ValueError(f"not a number: {text!r}")
    return value


class _Console:
    def __init__(self, input_stream: IO[str], output_stream: IO[str]) -> None:
        self._input = input_stream
        self._output = output_stream

    def write(self, text: str) -> None:
        self._output.write(text)
        self._output.flush()

    def say(self, text: str) -> None:
        self.write(text + "\n")

    def ask(self, prompt: str) -> str | None:
        self.write(prompt)
        line = self._input.readline()
        return line.rstrip("\r\n") if line else None


def _ask_filename(console: _Console) -> str:
    return console.ask("Введите имя файла: ") or ""


def _close(fd: FileData, console: _Console) -> None:
    name = fd.filename
    if fd.close():
        console.say(f"Файл '{name}' закрыт.")


def _create(fd: FileData, console: _Console) -> None:
    _close(fd, console)
    name = _ask_filename(console)
    fd.create(name)
    console.say(f"Файл '{name}' создан.")
    console.say(f"Файл '{name}' закрыт.")


def _open(fd: FileData, console: _Console) -> None:
    name = fd.filename or _ask_filename(console)
    fd.open(name)
    console.say(f"Файл '{name}' открыт.")


def _clear(fd: FileData, console: _Console) -> None:
    fd.clear()
    console.say(f"Файл '{fd.filename}' очищен.")


def _delete(fd: FileData, console: _Console) -> None:
    name = fd.filename or _ask_filename(console)
    fd.delete(name)
    console.say(f"Файл '{name}' удален.")


def _fill(fd: FileData, console: _Console) -> None:
    if not fd.is_open:
        console.say("Ошибка: файл не открыт!")
        return
    answer = console.ask("Введите количество чисел для заполнения в файл: ")
    count = _leading_int(answer or "")
    if count is None:
        console.say("Ошибка ввода!")
        return
    try:
        fill_with_random_numbers(fd, count)
    except ValueError as exc:
        console.say(str(exc))
        return
    console.say(f"Успешное заполнение в файл {count} случайных чисел (-100..100)")


def _sort(fd: FileData, console: _Console) -> None:
    if not fd.is_open:
        console.say("Ошибка: файл не открыт!")
        return
    count = sort_file(fd)
    console.say(f"Отсортировано {count} чисел!")


def _linear(fd: FileData, console: _Console) -> None:
    if not fd.is_open:
        console.say("Сначала откройте файл!")
        return
    value = _leading_int(console.ask("Введите значение для поиска: ") or "")
    if value is None:
        console.say("Ошибка ввода!")
        return
    mode = (console.ask("Искать все вхождения? (y/n): ") or "").strip()
    search_all = mode[:1] in ("y", "Y")
    console.write(linear_search_file(fd, value, search_all).format())


def _binary(fd: FileData, console: _Console) -> None:
    if not fd.is_open:
        console.say("Ошибка: файл не открыт.")
        return
    value = _leading_int(console.ask("Введите значение для поиска: ") or "")
    if value is None:
        console.say("Ошибка: введите положительное число.")
        return
    console.write(binary_search_file(fd, value).format())


_ACTIONS: dict[int, Callable[[FileData, _Console], None]] = {
    1: _create,
    2: _open,
    3: _close,
    4: _clear,
    5: _delete,
    6: _fill,
    7: _sort,
    8: _linear,
    9: _binary,
}


def _read_choice(console: _Console) -> int | None:
    while True:
        line = console.ask("")
        if line is None:
            return None
        try:
            return parse_choice(line)
        except ValueError:
            console.say("Ошибка: введите число!")


def run(fd: FileData, input_stream: IO[str], output_stream: IO[str]) -> int:
    """Run the menu loop until the user exits or input ends; return the exit code."""
    console = _Console(input_stream, output_stream)
    while True:
        if fd.is_open and fd.filename:
            console.say(f"\nТекущий файл: {fd.filename}")
        console.write(menu_text())
        choice = _read_choice(console)
        if choice is None or choice == 0:
            _close(fd, console)
            return 0
        action = _ACTIONS.get(choice)
        if action is None:
            console.say("Неверный пункт!")
            continue
        try:
            action(fd, console)
        except (FileError, SearchError) as exc:
            console.say(str(exc))


def main(argv: list[str] | None = None) -> int:
    """Start the interactive menu on standard input and output."""
    parser = argparse.ArgumentParser(
        description="Manage and search a text file of integers."
    )
    parser.parse_args(argv)
    with FileData() as fd:
        return run(fd, sys.stdin, sys.stdout)


if __name__ == "__main__":
    sys.exit(main())