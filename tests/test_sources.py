import io
from pathlib import Path

import pytest

from annosum.errors import InputSourceError
from annosum.sources import describe_source, open_lines


def test_open_lines_strips_newlines(tmp_path: Path) -> None:
    document = tmp_path / "sheet.txt"
    document.write_text("first [1]\r\nsecond [2]\n\nlast", encoding="utf-8")
    assert list(open_lines(document)) == ["first [1]", "second [2]", "", "last"]


def test_open_lines_reads_stdin(monkeypatch) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO("a [1]\nb [2]\n"))
    assert list(open_lines()) == ["a [1]", "b [2]"]
    monkeypatch.setattr("sys.stdin", io.StringIO("c\n"))
    assert list(open_lines("-")) == ["c"]


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(InputSourceError, match="does not exist") as excinfo:
        list(open_lines(tmp_path / "missing.txt"))
    assert isinstance(excinfo.value.__cause__, FileNotFoundError)


def test_directory_is_rejected(tmp_path: Path) -> None:
    with pytest.raises(InputSourceError, match="directory"):
        list(open_lines(tmp_path))


def test_undecodable_input(tmp_path: Path) -> None:
    document = tmp_path / "binary.txt"
    document.write_bytes(b"[1]\n\xff\xfe\xfa broken\n")
    with pytest.raises(InputSourceError, match="decode") as excinfo:
        list(open_lines(document))
    assert isinstance(excinfo.value.__cause__, UnicodeDecodeError)


def test_explicit_encoding(tmp_path: Path) -> None:
    document = tmp_path / "latin.txt"
    document.write_bytes("caf\xe9 [3]\n".encode("latin-1"))
    assert list(open_lines(document, encoding="latin-1")) == ["caf\xe9 [3]"]


def test_unknown_encoding(tmp_path: Path) -> None:
    document = tmp_path / "sheet.txt"
    document.write_text("[1]\n", encoding="utf-8")
    with pytest.raises(InputSourceError, match="Unknown encoding"):
        list(open_lines(document, encoding="no-such-codec"))


def test_describe_source() -> None:
    assert describe_source(None) == "<stdin>"
    assert describe_source("-") == "<stdin>"
    assert describe_source(Path("a.txt")) == "a.txt"
