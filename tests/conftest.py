"""Shared pytest fixtures for radixtable tests."""

import os
import tempfile

import pytest

# Keep logs and tables out of the workspace while testing
_TEST_ROOT = tempfile.mkdtemp(prefix="radixtable-tests-")
os.environ.setdefault("RADIXTABLE_LOG_DIR", os.path.join(_TEST_ROOT, "logs"))
os.environ.setdefault("RADIXTABLE_LOG_CONSOLE", "false")
os.environ.setdefault("RADIXTABLE_TABLE_FILE", os.path.join(_TEST_ROOT, "table.json"))
os.environ.setdefault("RADIXTABLE_HISTORY_FILE", os.path.join(_TEST_ROOT, "history"))

from radixtable.utils.trie import RadixTree  # noqa: E402


ROUTES = [
    ("foo", 1),
    ("foobar", 2),
    ("bar", 3),
    ("barbaz", 4),
    ("barfoo", 5),
    ("barfoobaz", 6),
    ("barbar", 7),
    ("barbarbaz", 8),
    ("barbarfoo", 9),
    ("barbarfoobaz", 10),
    ("barbarbar", 11),
    ("barbarbarbaz", 12),
    ("barbarbarfoo", 13),
    ("barbarbarfoobaz", 14),
    ("barbarbarbar", 15),
    ("barbarbarbarbaz", 16),
    ("barbarbarbarfoo", 17),
    ("barbarbarbarfoobaz", 18),
]


@pytest.fixture
def routes():
    """The full list of (key, value) pairs loaded into `tree`."""
    return list(ROUTES)


@pytest.fixture
def tree():
    """RadixTree with every route in ROUTES inserted in order."""
    r = RadixTree[int]()
    for key, value in ROUTES:
        r.insert(key, value)
    return r


@pytest.fixture
def table_path(tmp_path):
    return tmp_path / "table.json"
