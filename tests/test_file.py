import os
import stat
from pathlib import Path

import pytest

from astrelis.file import File, FileError


def test_exists_and_kind(tmp_path):
    regular = tmp_path / "a.txt"
    regular.write_text("hi")
    assert File(regular).exists()
    assert File(regular).is_regular_file()
    assert not File(regular).is_directory()
    assert File(tmp_path).is_directory()
    assert not File(tmp_path / "missing").exists()


def test_path_parts():
    f = File("some/dir/name.txt")
    assert f.filename() == "name.txt"
    assert f.stem() == "name"
    assert f.extension() == ".txt"
    assert f.parent_path() == Path("some/dir")
    assert f.path == Path("some/dir/name.txt")


def test_absolute_path_is_absolute():
    assert File("x/y").absolute_path().is_absolute()
    assert File("x/y").absolute_path().name == "y"


def test_relative_path(tmp_path):
    inner = tmp_path / "a" / "b.txt"
    assert File(inner).relative_path(File(tmp_path)) == Path("a") / "b.txt"


def test_read_text_round_trip(tmp_path):
    target = tmp_path / "t.txt"
    target.write_bytes(b"line1\nline2\r\n")
    assert File(target).read_text().unwrap() == "line1\nline2\r\n"


def test_read_binary_round_trip(tmp_path):
    target = tmp_path / "b.bin"
    payload = bytes(range(256))
    target.write_bytes(payload)
    assert File(target).read_binary().unwrap() == payload


def test_read_missing_file(tmp_path):
    result = File(tmp_path / "nope").read_text()
    assert result.unwrap_err() == "File does not exist"
    assert File(tmp_path / "nope").read_binary().unwrap_err() == "File does not exist"


def test_read_directory(tmp_path):
    assert File(tmp_path).read_text().unwrap_err() == "File is not a regular file"
    assert File(tmp_path).read_binary().unwrap_err() == "File is not a regular file"


def test_read_unchecked_missing_reports_open_failure(tmp_path):
    result = File(tmp_path / "nope").read_binary(checking=False)
    assert result.unwrap_err() == "Failed to open file"


def test_permissions_follow_owner_bits(tmp_path):
    target = tmp_path / "p"
    target.write_text("x")
    os.chmod(target, stat.S_IRUSR)
    f = File(target)
    try:
        assert f.can_read()
        assert not f.can_write()
        assert not f.can_execute()
        assert f.can_read_from_file()
    finally:
        os.chmod(target, stat.S_IRUSR | stat.S_IWUSR)


def test_unreadable_file_reports_error(tmp_path):
    target = tmp_path / "p"
    target.write_text("x")
    os.chmod(target, stat.S_IWUSR)
    try:
        assert not File(target).can_read_from_file()
        assert File(target).read_text().unwrap_err() == "File cannot be read"
    finally:
        os.chmod(target, stat.S_IRUSR | stat.S_IWUSR)


def test_missing_path_permissions_are_unknown(tmp_path):
    missing = File(tmp_path / "missing")
    assert missing.can_write()
    assert not missing.can_read_from_file()


def test_open_writes(tmp_path):
    f = File(tmp_path / "out.bin")
    with f.open("wb") as stream:
        stream.write(b"abc")
    assert f.read_binary().unwrap() == b"abc"


def test_open_failure_raises(tmp_path):
    with pytest.raises(FileError):
        File(tmp_path / "no" / "such" / "dir.txt").open("w")


def test_list_files(tmp_path):
    (tmp_path / "b.txt").write_text("")
    (tmp_path / "a.txt").write_text("")
    (tmp_path / "sub").mkdir()
    names = [f.filename() for f in File(tmp_path).list_files()]
    assert names == ["a.txt", "b.txt", "sub"]


def test_list_files_of_non_directory_raises(tmp_path):
    target = tmp_path / "f"
    target.write_text("")
    with pytest.raises(FileError):
        File(target).list_files()


def test_join_and_equality():
    joined = File("root") / File("child.txt")
    assert joined == File("root/child.txt")
    assert joined != File("root")
    assert hash(joined) == hash(File("root/child.txt"))
    assert File("root") / "x" == File("root/x")