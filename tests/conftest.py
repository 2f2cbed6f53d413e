"""Shared pytest configuration and fixtures for all tests."""

import json
from pathlib import Path

import pytest

from docpage.api.command.CommandResult import CommandResult
from docpage.api.command.CommandRunner import CommandRunner


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests of a single API unit")
    config.addinivalue_line("markers", "integration: CLI wiring tests")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path_str:
            item.add_marker(pytest.mark.integration)


# =============================================================================
# Helpers
# =============================================================================


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result


class FakeRunner(CommandRunner):
    """CommandRunner that records calls and answers from a table keyed by executable."""

    def __init__(self, responses: dict[str, CommandResult] | None = None):
        self.responses = responses or {}
        self.calls: list[tuple[list[str], Path | None]] = []

    def run(self, args: list[str], cwd: Path | None = None) -> CommandResult:
        self.calls.append((list(args), cwd))
        response = self.responses.get(args[0])
        if response is None:
            return CommandResult(args=list(args), returncode=0, stdout="", stderr="")
        return CommandResult(
            args=list(args),
            returncode=response.returncode,
            stdout=response.stdout,
            stderr=response.stderr,
        )

    def executables(self) -> list[str]:
        return [args[0] for args, _ in self.calls]


def ok(stdout: str = "") -> CommandResult:
    return CommandResult(args=[], returncode=0, stdout=stdout)


def failed(returncode: int = 1, stderr: str = "boom", stdout: str = "") -> CommandResult:
    return CommandResult(args=[], returncode=returncode, stdout=stdout, stderr=stderr)


def minimal_config_dict(base_dir: str = ".") -> dict:
    """Config dict pointing source.base_dir at ``base_dir``."""
    return {
        "package": "example.com/widget",
        "source": {
            "base_dir": base_dir,
            "repo_url_template": "https://example.com/widget/blob/{revision_id}/{path}#L{start_line}-{end_line}",
        },
        "commands": {
            "fetch": ["go", "get", "-u", "{package}"],
            "docs": ["godoc", "-html", "{package}"],
            "revision": ["git", "rev-parse", "--short", "HEAD"],
        },
        "page": {"output": "api.html", "header": None, "footer": None},
        "log": {"level": "DEBUG"},
    }


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def docpage_env(tmp_path: Path, monkeypatch) -> Path:
    """Isolate every test: cwd, DOCPAGE_HOME and DOCPAGE_CONFIG all under tmp_path."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("DOCPAGE_HOME", str(tmp_path / ".docpage"))
    monkeypatch.setenv("DOCPAGE_CONFIG", str(tmp_path / "docpage.json"))
    return tmp_path


@pytest.fixture
def source_tree(tmp_path: Path) -> Path:
    """Source checkout with two Go files of known layout."""
    src = tmp_path / "src"
    (src / "sub").mkdir(parents=True)
    # newlines at byte 8 and byte 15
    (src / "foo.go").write_bytes(b"a" * 8 + b"\n" + b"b" * 6 + b"\n" + b"c" * 10)
    (src / "sub" / "bar.go").write_bytes(b"a\nb\nc\n")
    return src


@pytest.fixture
def config_file(docpage_env: Path, source_tree: Path) -> Path:
    """Write a config file whose base_dir is the source tree."""
    path = docpage_env / "docpage.json"
    path.write_text(json.dumps(minimal_config_dict(str(source_tree))), encoding="utf-8")
    return path


@pytest.fixture
def fake_runner() -> FakeRunner:
    """FakeRunner answering git with a revision and godoc with one source link."""
    return FakeRunner(
        {
            "git": ok("abc1234\n"),
            "godoc": ok('<a href="/target/foo.go?s=10:20#L5">Foo</a>\n'),
        }
    )
