"""Unit tests for docpage.api.link.cmd_show."""

from docpage.api.link.cmd_show import cmd_show
from tests.conftest import run_cmd


def test_show_lists_links_with_lines(tmp_path, source_tree):
    page = tmp_path / "api.html"
    page.write_text("/target/foo.go?s=10:20#L5 /target/sub/bar.go?s=0:4#L1", encoding="utf-8")

    result = run_cmd(cmd_show, path=str(page), base_dir=str(source_tree))

    assert result.success is True
    assert result.output["links"] == [
        {"path": "foo.go", "start": 10, "end": 20, "start_line": 2, "end_line": 3},
        {"path": "sub/bar.go", "start": 0, "end": 4, "start_line": 1, "end_line": 3},
    ]
    assert result.output["warnings"] == []
    assert page.read_text(encoding="utf-8").startswith("/target/foo.go")


def test_show_unresolvable_links_become_warnings(tmp_path, source_tree):
    page = tmp_path / "api.html"
    page.write_text("/target/gone.go?s=1:2#L1 /target/foo.go?s=0:999#L1", encoding="utf-8")

    result = run_cmd(cmd_show, path=str(page), base_dir=str(source_tree))

    assert result.success is True
    assert [link["start_line"] for link in result.output["links"]] == [None, None]
    assert len(result.output["warnings"]) == 2


def test_show_base_dir_from_config(tmp_path, config_file, source_tree):
    page = tmp_path / "api.html"
    page.write_text("/target/sub/bar.go?s=2:2#L1", encoding="utf-8")

    result = run_cmd(cmd_show, path=str(page))

    assert result.output["base_dir"] == str(source_tree)
    assert result.output["links"][0]["start_line"] == 2


def test_show_missing_file(tmp_path):
    result = run_cmd(cmd_show, path=str(tmp_path / "missing.html"), base_dir=str(tmp_path))
    assert result.success is False
    assert result.output["links"] == []
