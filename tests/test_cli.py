"""Tests for the git-aiadd command line."""

from pathlib import Path

from aiadd.cli import main
from aiadd.defaults import AI_SECTION_END, AI_SECTION_START
from helpers import requires_git, staged


def _write_sectioned_gitignore(repo: Path) -> None:
    (repo / ".gitignore").write_text(
        f"# Regular patterns\nnode_modules\n\n{AI_SECTION_START}\n*.onnx\nmodel/weights/\n{AI_SECTION_END}",
        encoding="utf-8",
    )


@requires_git
def test_on_moves_ai_patterns(git_repo: Path, cli_runner, monkeypatch) -> None:
    _write_sectioned_gitignore(git_repo)
    monkeypatch.chdir(git_repo)

    result = cli_runner.invoke(main, ["on"])

    assert result.exit_code == 0
    assert "AI development mode enabled" in result.output
    gitignore = (git_repo / ".gitignore").read_text(encoding="utf-8")
    assert "node_modules" in gitignore
    assert "ai.gitignore" in gitignore.splitlines()
    assert "*.onnx" not in gitignore
    assert "model/weights/" not in gitignore
    ai_gitignore = (git_repo / "ai.gitignore").read_text(encoding="utf-8")
    assert "*.onnx" in ai_gitignore
    assert "model/weights/" in ai_gitignore


@requires_git
def test_off_restores_section(git_repo: Path, cli_runner, monkeypatch) -> None:
    _write_sectioned_gitignore(git_repo)
    monkeypatch.chdir(git_repo)
    cli_runner.invoke(main, ["on"])

    result = cli_runner.invoke(main, ["off"])

    assert result.exit_code == 0
    assert "AI development mode disabled" in result.output
    assert not (git_repo / "ai.gitignore").exists()
    gitignore = (git_repo / ".gitignore").read_text(encoding="utf-8")
    assert AI_SECTION_START in gitignore
    assert "*.onnx" in gitignore


def test_on_and_off_cover_every_subrepo(tmp_path: Path, cli_runner, monkeypatch) -> None:
    for name in ("api", "web"):
        (tmp_path / name / ".git").mkdir(parents=True)
        (tmp_path / name / ".gitignore").write_text(
            f"dist\n{AI_SECTION_START}\n*.pt\n{AI_SECTION_END}\n", encoding="utf-8"
        )
    monkeypatch.chdir(tmp_path)

    assert cli_runner.invoke(main, ["on"]).exit_code == 0
    assert (tmp_path / "api" / "ai.gitignore").exists()
    assert (tmp_path / "web" / "ai.gitignore").exists()

    assert cli_runner.invoke(main, ["off"]).exit_code == 0
    assert not (tmp_path / "api" / "ai.gitignore").exists()
    assert not (tmp_path / "web" / "ai.gitignore").exists()


def test_status_reports_mode(tmp_path: Path, cli_runner, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)

    assert "AI mode disabled" in cli_runner.invoke(main, ["status"]).output

    (tmp_path / "ai.gitignore").write_text("", encoding="utf-8")
    assert "AI mode enabled" in cli_runner.invoke(main, ["status"]).output


def test_init_seeds_default_files(tmp_path: Path, cli_runner, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)

    result = cli_runner.invoke(main, ["init"])

    assert result.exit_code == 0
    assert (tmp_path / ".gitignore").exists()
    assert "*.onnx" in (tmp_path / "ai.gitignore").read_text(encoding="utf-8")


def test_on_without_workspaces_warns(tmp_path: Path, cli_runner, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)

    result = cli_runner.invoke(main, ["on"])

    assert result.exit_code == 0
    assert "No workspaces found" in result.output


@requires_git
def test_default_command_stages_filtered_files(git_repo: Path, cli_runner, monkeypatch, write_file) -> None:
    (git_repo / ".gitignore").write_text("ai.gitignore\n", encoding="utf-8")
    (git_repo / "ai.gitignore").write_text("*.pt\n", encoding="utf-8")
    write_file(git_repo / "a.pt")
    write_file(git_repo / "b.txt")
    monkeypatch.chdir(git_repo)

    result = cli_runner.invoke(main, [])

    assert result.exit_code == 0
    assert staged(git_repo) == [".gitignore", "b.txt"]


@requires_git
def test_bare_paths_route_to_add(git_repo: Path, cli_runner, monkeypatch, write_file) -> None:
    write_file(git_repo / "a.txt")
    write_file(git_repo / "b.txt")
    monkeypatch.chdir(git_repo)

    result = cli_runner.invoke(main, ["b.txt"])

    assert result.exit_code == 0
    assert staged(git_repo) == ["b.txt"]


@requires_git
def test_add_outside_repository_fails(tmp_path: Path, cli_runner, monkeypatch) -> None:
    plain = tmp_path / "plain"
    plain.mkdir()
    monkeypatch.chdir(plain)

    result = cli_runner.invoke(main, ["add", "x.txt"])

    assert result.exit_code == 1
    assert "Not inside a git work tree" in result.output


def test_on_reports_undecodable_gitignore(tmp_path: Path, cli_runner, monkeypatch) -> None:
    (tmp_path / "api" / ".git").mkdir(parents=True)
    (tmp_path / "api" / ".gitignore").write_bytes(b"dist\n\xff\xfe\n")
    monkeypatch.chdir(tmp_path)

    result = cli_runner.invoke(main, ["on"])

    assert result.exit_code == 1
    assert "not valid UTF-8" in result.output
    assert not (tmp_path / "api" / "ai.gitignore").exists()
