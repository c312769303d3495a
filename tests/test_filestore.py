import io

import pytest

from numfile.filestore import FileData, FileError, parse_numbers


@pytest.fixture
def opened(tmp_path):
    path = tmp_path / "data.txt"
    fd = FileData()
    fd.create(str(path))
    fd.open(str(path))
    yield fd, path
    fd.close()


def test_parse_numbers_reads_all_integers():
    assert parse_numbers(io.StringIO("1 2\n3\n")) == [1, 2, 3]


def test_parse_numbers_signs():
    assert parse_numbers(io.StringIO("-5\n+7\n")) == [-5, 7]


def test_parse_numbers_stops_at_non_integer():
    assert parse_numbers(io.StringIO("1 2 x 3")) == [1, 2]


def test_parse_numbers_empty():
    assert parse_numbers(io.StringIO("   \n")) == []


def test_create_makes_empty_file_and_leaves_closed(tmp_path):
    path = tmp_path / "new.txt"
    fd = FileData()
    fd.create(str(path))
    assert path.exists()
    assert path.read_text() == ""
    assert not fd.is_open
    assert fd.filename == ""


def test_create_existing_fails(tmp_path):
    path = tmp_path / "exists.txt"
    path.write_text("1\n")
    with pytest.raises(FileError):
        FileData().create(str(path))
    assert path.read_text() == "1\n"


def test_create_empty_name_fails():
    with pytest.raises(FileError):
        FileData().create("")


def test_open_missing_fails(tmp_path):
    fd = FileData()
    with pytest.raises(FileError):
        fd.open(str(tmp_path / "missing.txt"))
    assert not fd.is_open
    assert fd.filename == ""


def test_open_twice_fails(opened):
    fd, path = opened
    with pytest.raises(FileError):
        fd.open(str(path))
    assert fd.filename == str(path)


def test_close_reports_and_resets(opened):
    fd, _ = opened
    assert fd.close() is True
    assert fd.filename == ""
    assert fd.close() is False


def test_write_and_read_round_trip(opened):
    fd, path = opened
    fd.write_numbers([3, -1, 2])
    assert fd.read_numbers() == [3, -1, 2]
    assert path.read_text() == "3\n-1\n2\n"


def test_write_truncates_old_contents(opened):
    fd, _ = opened
    fd.write_numbers([100, 200, 300])
    fd.write_numbers([1])
    assert fd.read_numbers() == [1]


def test_append_adds_to_end(opened):
    fd, _ = opened
    fd.write_numbers([1, 2])
    fd.append_numbers([3])
    assert fd.read_numbers() == [1, 2, 3]


def test_clear_empties_file(opened):
    fd, path = opened
    fd.write_numbers([1, 2, 3])
    fd.clear()
    assert fd.read_numbers() == []
    assert path.read_text() == ""
    assert fd.is_open


def test_operations_on_closed_file_fail():
    fd = FileData()
    with pytest.raises(FileError):
        fd.read_numbers()
    with pytest.raises(FileError):
        fd.clear()
    with pytest.raises(FileError):
        fd.write_numbers([1])


def test_delete_open_file(opened):
    fd, path = opened
    fd.delete()
    assert not path.exists()
    assert not fd.is_open
    assert fd.filename == ""


def test_delete_by_name(tmp_path):
    path = tmp_path / "gone.txt"
    path.write_text("")
    FileData().delete(str(path))
    assert not path.exists()


def test_delete_missing_fails(tmp_path):
    with pytest.raises(FileError):
        FileData().delete(str(tmp_path / "missing.txt"))


def test_delete_without_name_fails():
    with pytest.raises(FileError):
        FileData().delete()


def test_context_manager_closes(tmp_path):
    path = tmp_path / "ctx.txt"
    path.write_text("4\n")
    with FileData() as fd:
        fd.open(str(path))
        assert fd.read_numbers() == [4]
    assert not fd.is_open