"""Tests for the JSON file helpers."""

import pytest

from radixtable.utils import files
from radixtable.utils.files import FileOperationError, read_json, write_file


def test_write_then_read(tmp_path):
    path = tmp_path / "nested" / "data.json"
    write_file(path, '{"a": [1, 2]}')
    assert read_json(path) == {"a": [1, 2]}


def test_missing_file(tmp_path):
    with pytest.raises(files.FileNotFoundError):
        read_json(tmp_path / "absent.json")


def test_invalid_json(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{nope", encoding="utf-8")
    with pytest.raises(FileOperationError):
        read_json(path)


def test_write_into_directory_fails(tmp_path):
    with pytest.raises(FileOperationError):
        write_file(tmp_path, "{}")
