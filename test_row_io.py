import tempfile
from pathlib import Path

import pytest

from errors import SourceNotFoundError, TableIOError
from row_io import CsvRowHandler
from table import Table


def _write(tmp, text, name="data.csv"):
    path = Path(tmp) / name
    path.write_text(text, encoding="utf-8")
    return str(path)


def test_rows_are_read_as_plain_text():
    with tempfile.TemporaryDirectory() as tmp:
        path = _write(tmp, "id,name,score\n007,NA,\n2,\"x, y\",3.50\n")
        rows = CsvRowHandler(path).read_rows()
    assert rows == [
        ["id", "name", "score"],
        ["007", "NA", ""],
        ["2", "x, y", "3.50"],
    ]


def test_missing_file_is_distinguished():
    with tempfile.TemporaryDirectory() as tmp:
        with pytest.raises(SourceNotFoundError) as exc:
            CsvRowHandler(str(Path(tmp) / "missing.csv")).read_rows()
    assert "File not found" in str(exc.value)


def test_empty_file_has_no_rows():
    with tempfile.TemporaryDirectory() as tmp:
        path = _write(tmp, "")
        table = Table.load(CsvRowHandler(path))
    assert table.dimensions == (0, 0)


def test_extra_fields_are_rejected():
    with tempfile.TemporaryDirectory() as tmp:
        path = _write(tmp, "a,b\nc,d,e\n")
        with pytest.raises(TableIOError):
            CsvRowHandler(path).read_rows()


def test_custom_delimiter():
    with tempfile.TemporaryDirectory() as tmp:
        path = _write(tmp, "a;b\nc,1;d\n")
        rows = CsvRowHandler(path, delimiter=";").read_rows()
    assert rows == [["a", "b"], ["c,1", "d"]]


def test_load_save_load_round_trip():
    with tempfile.TemporaryDirectory() as tmp:
        src = _write(tmp, "h1,h2,h3\n\"quoted, comma\",\"say \"\"hi\"\"\",\n 1 ,02,x\n")
        original = Table.load(CsvRowHandler(src))

        dest = str(Path(tmp) / "copy.csv")
        original.save(CsvRowHandler(dest))
        reloaded = Table.load(CsvRowHandler(dest))

    assert reloaded == original
    assert reloaded.rows[1] == ["quoted, comma", 'say "hi"', ""]
    assert reloaded.rows[2] == [" 1 ", "02", "x"]


def test_short_rows_are_rejected():
    with tempfile.TemporaryDirectory() as tmp:
        path = _write(tmp, "a,b,c\nd,e\n")
        with pytest.raises(TableIOError):
            Table.load(CsvRowHandler(path))


def test_single_column_blank_cells_survive_round_trip():
    with tempfile.TemporaryDirectory() as tmp:
        src = _write(tmp, '" "\nx\n" \t"\ny\n')
        original = Table.load(CsvRowHandler(src))

        dest = str(Path(tmp) / "copy.csv")
        original.save(CsvRowHandler(dest))
        reloaded = Table.load(CsvRowHandler(dest))

    assert original.rows == [[" "], ["x"], [" \t"], ["y"]]
    assert reloaded == original
