import io

import pytest

from algobox.files import copy_file, main, read_file, write_stream


def test_write_then_read_round_trip(tmp_path):
    text = "first line\nsecond line\n"
    path = tmp_path / "file.txt"
    count = write_stream(io.StringIO(text), path)
    assert count == len(text)
    assert read_file(path) == text


def test_write_empty_stream(tmp_path):
    path = tmp_path / "empty.txt"
    assert write_stream(io.StringIO(""), path) == 0
    assert read_file(path) == ""


def test_write_overwrites_existing(tmp_path):
    path = tmp_path / "file.txt"
    path.write_text("old contents that are long", encoding="utf-8")
    write_stream(io.StringIO("new"), path)
    assert read_file(path) == "new"


def test_read_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_file(tmp_path / "missing.txt")


def test_copy_file_preserves_bytes(tmp_path):
    data = bytes(range(256)) * 10
    source = tmp_path / "source.bin"
    target = tmp_path / "target.bin"
    source.write_bytes(data)
    copy_file(source, target)
    assert target.read_bytes() == data


def test_copy_missing_source_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        copy_file(tmp_path / "missing", tmp_path / "target")


def test_main_copies(tmp_path):
    source = tmp_path / "a.txt"
    target = tmp_path / "b.txt"
    source.write_text("payload\n", encoding="utf-8")
    assert main([str(source), str(target)]) == 0
    assert target.read_text(encoding="utf-8") == "payload\n"


@pytest.mark.parametrize("argv", [[], ["only-one"], ["a", "b", "c"]])
def test_main_wrong_argument_count(argv, capsys):
    assert main(argv) == 1
    assert "Invalid number of arguments." in capsys.readouterr().err


def test_main_missing_source(tmp_path, capsys):
    assert main([str(tmp_path / "missing"), str(tmp_path / "out")]) == 1
    assert "Source file cannot be opened." in capsys.readouterr().err
    assert not (tmp_path / "out").exists()


def test_main_unwritable_target(tmp_path, capsys):
    source = tmp_path / "a.txt"
    source.write_text("x", encoding="utf-8")
    target = tmp_path / "no-such-dir" / "b.txt"
    assert main([str(source), str(target)]) == 1
    assert "Target file cannot be opened." in capsys.readouterr().err