"""Unit tests for docpage.api.link.cached_reader."""

from pathlib import Path

from docpage.api.link.cached_reader import cached_reader


def test_caches_per_base_dir_and_path():
    calls = []

    def reader(base_dir: Path, path: str) -> bytes:
        calls.append((base_dir, path))
        return path.encode()

    read = cached_reader(reader)
    assert read(Path("/a"), "x.go") == b"x.go"
    assert read(Path("/a"), "x.go") == b"x.go"
    assert read(Path("/b"), "x.go") == b"x.go"
    assert calls == [(Path("/a"), "x.go"), (Path("/b"), "x.go")]


def test_separate_readers_do_not_share_cache():
    calls = []

    def reader(base_dir: Path, path: str) -> bytes:
        calls.append(path)
        return b""

    cached_reader(reader)(Path("."), "x.go")
    cached_reader(reader)(Path("."), "x.go")
    assert calls == ["x.go", "x.go"]


def test_default_reads_filesystem(source_tree):
    assert cached_reader()(source_tree, "sub/bar.go") == b"a\nb\nc\n"
