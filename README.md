# numfile

A small console program for working with a text file of integers. From a
numbered menu you can:

- create, open, close, clear and delete a file;
- fill the open file with random numbers in the range -100..100
  (they are appended, one per line);
- sort the file in ascending order (bubble sort); the sorted numbers
  replace the file's contents, one per line;
- search for a value with a linear scan, which finds either the first
  occurrence or all of them;
- search a sorted file with binary search, which reports any occurrence,
  the first and the last, and the number of iterations and time each
  search took.

The file is read as whitespace-separated integers; reading stops at the
first token that is not an integer. All prompts and messages are in
Russian.

## Installation

```
pip install .
```

## Usage

Start the interactive menu:

```
numfile
```

The command takes no options other than `--help`. The menu it shows:

```
Управление файлом
1. Создать
2. Открыть (для чтения и записи)
3. Закрыть
4. Очистить
5. Удалить
Редактирование
6. Заполнить автоматически
7. Отсортировать (по возрастанию)
Поиск
8. Линейный
9. Бинарный
Выход
0. Выйти из программы
Выберите пункт: 
```

That is: 1 create, 2 open for reading and writing, 3 close, 4 clear,
5 delete, 6 fill with random numbers, 7 sort ascending, 8 linear search,
9 binary search, 0 exit.

Notes on behaviour:

- Creating a file makes a new empty file and fails if it already exists;
  it does not open it. Open it with item 2 afterwards.
- Opening asks for a file name and fails if another file is already open.
- Delete removes the current file, or asks for a name when none is open.
- Positions in search results start at 1.
- Binary search needs a file sorted in ascending order; otherwise it
  reports an error. Sort the file first with item 7.
- The program exits on item 0 or at the end of input, closing any open
  file.

## Library use

The building blocks can also be used from Python:

```python
from numfile.filestore import FileData
from numfile.edit import fill_with_random_numbers, sort_file
from numfile.binary_search import binary_search_file
from numfile.linear_search import linear_search_file

with FileData() as fd:
    fd.create("numbers.txt")
    fd.open("numbers.txt")
    fill_with_random_numbers(fd, 50)
    sort_file(fd)

    print(binary_search_file(fd, 7).format())
    print(linear_search_file(fd, 7, search_all=True).format())
```

- `numfile.filestore.FileData` has `create`, `open`, `close`, `delete`,
  `clear`, `read_numbers`, `write_numbers` and `append_numbers`, and an
  `is_open` property. Failures raise `numfile.filestore.FileError`.
  `parse_numbers(stream)` reads the integers from any text stream.
- `numfile.edit` provides `fill_with_random_numbers(fd, count, rng=None)`
  (returns the numbers it appended; a non-positive count raises
  `ValueError`), `bubble_sort(numbers)` (returns a new sorted list) and
  `sort_file(fd)` (returns how many numbers were sorted).
- `numfile.binary_search` provides `is_sorted`, `find_occurrence`,
  `find_first_occurrence` and `find_last_occurrence`, each of the `find_`
  functions returning `(index or None, iterations)` for any sorted list,
  and `binary_search_file(fd, value)`, which returns a
  `BinarySearchReport`. An empty or unsorted file raises `SearchError`.
- `numfile.linear_search` provides `linear_scan(numbers, value,
  search_all)`, returning a `SearchResult`, and
  `linear_search_file(fd, value, search_all)`, returning a
  `LinearSearchReport`. An empty file raises
  `numfile.binary_search.SearchError`.
- Both report classes have a `format()` method that renders the
  statistics and results as text, and a `found` property.
- `numfile.cli.run(fd, input_stream, output_stream)` runs the menu on any
  pair of text streams and returns the exit code.

## Running the tests

```
pip install .[test]
pytest
```