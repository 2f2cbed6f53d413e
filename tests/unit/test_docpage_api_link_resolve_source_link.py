"""Unit tests for docpage.api.link.resolve_source_link and read_source."""

from pathlib import Path

import pytest

from docpage.api.link.InvalidOffsetError import InvalidOffsetError
from docpage.api.link.read_source import read_source
from docpage.api.link.resolve_source_link import resolve_source_link
from docpage.api.link.SourceFileNotFoundError import SourceFileNotFoundError
from docpage.api.link.SourceLinkMatch import SourceLinkMatch

TEMPLATE = "{path}@{revision_id}#L{start_line}-{end_line}"


def _match(path="foo.go", start=10, end=20):
    return SourceLinkMatch(path=path, start=start, end=end, span=(0, 0))


def test_resolve_with_injected_reader():
    calls = []

    def reader(base_dir: Path, path: str) -> bytes:
        calls.append((base_dir, path))
        return b"x\ny\nz\n"

    url = resolve_source_link(_match(start=2, end=4), Path("/nowhere"), "rev", TEMPLATE, reader=reader)
    assert url == "foo.go@rev#L2-3"
    assert calls == [(Path("/nowhere"), "foo.go")]


def test_resolve_reads_from_base_dir(source_tree):
    assert resolve_source_link(_match(), source_tree, "abc", TEMPLATE) == "foo.go@abc#L2-3"


def test_end_before_start_raises(source_tree):
    with pytest.raises(InvalidOffsetError, match="end precedes start"):
        resolve_source_link(_match(start=20, end=10), source_tree, "abc", TEMPLATE)


def test_offset_beyond_file_raises(source_tree):
    with pytest.raises(InvalidOffsetError):
        resolve_source_link(_match(start=0, end=1000), source_tree, "abc", TEMPLATE)


def test_read_source_missing_file(tmp_path):
    with pytest.raises(SourceFileNotFoundError) as exc_info:
        read_source(tmp_path, "missing.go")
    assert exc_info.value.path == "missing.go"
    assert isinstance(exc_info.value, FileNotFoundError)


def test_read_source_directory_is_not_a_file(source_tree):
    with pytest.raises(SourceFileNotFoundError):
        read_source(source_tree, "sub")
