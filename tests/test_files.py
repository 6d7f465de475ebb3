import pytest

from enshamir.files import is_file_path_existed, write_if_not_existed


def test_missing_path_does_not_exist(tmp_path):
    assert is_file_path_existed(tmp_path / "missing") is False


def test_existing_file_and_directory_exist(tmp_path):
    target = tmp_path / "present"
    target.write_bytes(b"data")
    assert is_file_path_existed(target) is True
    assert is_file_path_existed(tmp_path) is True
    assert is_file_path_existed(str(target)) is True


def test_write_creates_file_with_content(tmp_path):
    target = tmp_path / "out"
    write_if_not_existed(target, b"payload", 0o600)
    assert target.read_bytes() == b"payload"
    assert is_file_path_existed(target) is True


def test_write_empty_data(tmp_path):
    target = tmp_path / "empty"
    write_if_not_existed(str(target), b"")
    assert target.read_bytes() == b""


def test_write_refuses_to_overwrite(tmp_path):
    target = tmp_path / "out"
    target.write_bytes(b"original")
    with pytest.raises(FileExistsError, match="is existed"):
        write_if_not_existed(target, b"replacement", 0o600)
    assert target.read_bytes() == b"original"


def test_write_refuses_directory(tmp_path):
    with pytest.raises(FileExistsError):
        write_if_not_existed(tmp_path, b"data")


def test_write_into_missing_directory_fails(tmp_path):
    with pytest.raises(FileNotFoundError):
        write_if_not_existed(tmp_path / "nope" / "out", b"data")