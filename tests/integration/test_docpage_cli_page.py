from typer.testing import CliRunner

from docpage.api.command.CommandResult import CommandResult
from docpage.cli.page import page
from tests.conftest import FakeRunner

runner = CliRunner()


def _patch_runner(monkeypatch, fake: FakeRunner) -> None:
    monkeypatch.setattr("docpage.api.page.cmd_build.SubprocessRunner", lambda: fake)


def test_page_build_cli(tmp_path, config_file, fake_runner, monkeypatch):
    _patch_runner(monkeypatch, fake_runner)

    result = runner.invoke(page(), ["build", "--skip-fetch"])

    assert result.exit_code == 0
    assert "links_rewritten: 1" in result.stdout
    assert "example.com/widget/blob/abc1234/foo.go#L2-3" in (tmp_path / "api.html").read_text(encoding="utf-8")
    assert "go" not in fake_runner.executables()


def test_page_build_cli_no_rewrite(tmp_path, config_file, fake_runner, monkeypatch):
    _patch_runner(monkeypatch, fake_runner)

    result = runner.invoke(page(), ["build", "--no-rewrite", "-o", str(tmp_path / "raw.html")])

    assert result.exit_code == 0
    assert "/target/foo.go" in (tmp_path / "raw.html").read_text(encoding="utf-8")


def test_page_build_cli_failure_exits_1(tmp_path, config_file, monkeypatch):
    fake = FakeRunner({"godoc": CommandResult(args=[], returncode=1, stderr="no such package")})
    _patch_runner(monkeypatch, fake)

    result = runner.invoke(page(), ["build", "--skip-fetch", "--revision", "r"])

    assert result.exit_code == 1
    assert "no such package" in result.stdout
    assert not (tmp_path / "api.html").exists()
