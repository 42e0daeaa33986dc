import sys
from pathlib import Path

from click.testing import CliRunner
import pytest


def _ensure_repo_on_path() -> None:
    repo_root = Path(__file__).resolve().parent.parent
    tests_dir = Path(__file__).resolve().parent
    for path in (repo_root, tests_dir):
        if str(path) not in sys.path:
            sys.path.insert(0, str(path))


_ensure_repo_on_path()

from aiadd.defaults import AI_SECTION_END, AI_SECTION_START  # noqa: E402
from helpers import git  # noqa: E402


@pytest.fixture(autouse=True)
def isolated_git(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")
    monkeypatch.setenv("GIT_CEILING_DIRECTORIES", str(tmp_path))


@pytest.fixture
def git_repo(tmp_path: Path) -> Path:
    repo = tmp_path / "repo"
    repo.mkdir()
    git(repo, "init", "-q")
    git(repo, "config", "user.name", "Test User")
    git(repo, "config", "user.email", "test@example.com")
    git(repo, "config", "commit.gpgsign", "false")
    return repo


@pytest.fixture
def write_file():
    def _write(path: Path, content: str = "test content\n") -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def ai_section():
    def _section(*patterns: str) -> str:
        return "\n".join([AI_SECTION_START, *patterns, AI_SECTION_END])

    return _section


@pytest.fixture
def cli_runner() -> CliRunner:
    return CliRunner()
