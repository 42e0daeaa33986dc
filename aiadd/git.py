"""Thin wrapper around the git binary."""

import subprocess
from pathlib import Path
from typing import Iterable, List, Sequence

from .errors import GitCommandError, NotARepositoryError


def run_git(*args: str, cwd=None, check: bool = True) -> subprocess.CompletedProcess:
    result = subprocess.run(
        ["git", *args],
        cwd=str(cwd) if cwd is not None else None,
        capture_output=True,
        text=True,
    )
    if check and result.returncode != 0:
        raise GitCommandError(args, result.returncode, result.stderr)
    return result


def _entries(output: str) -> List[str]:
    return [entry for entry in output.split("\0") if entry.strip()]


def batched(items: Sequence[str], size: int) -> Iterable[List[str]]:
    for start in range(0, len(items), size):
        yield list(items[start:start + size])


class Git:
    """The git operations the staging flow needs, bound to nothing but the binary"""

    def repo_root(self, cwd: Path) -> Path:
        result = run_git("rev-parse", "--show-toplevel", cwd=cwd, check=False)
        if result.returncode != 0 or not result.stdout.strip():
            raise NotARepositoryError(Path(cwd))
        return Path(result.stdout.strip())

    def untracked_files(self, repo_root: Path) -> List[str]:
        return _entries(run_git("ls-files", "-z", "--others", "--exclude-standard", cwd=repo_root).stdout)

    def modified_files(self, repo_root: Path) -> List[str]:
        return _entries(run_git("ls-files", "-z", "--modified", cwd=repo_root).stdout)

    def staged_files(self, repo_root: Path) -> List[str]:
        return _entries(run_git("diff", "-z", "--name-only", "--cached", cwd=repo_root).stdout)

    def add(self, paths: Sequence[str], cwd: Path, batch_size: int = 100) -> None:
        for batch in batched(list(paths), batch_size):
            run_git("add", "--", *batch, cwd=cwd)

    def has_head(self, repo_root: Path) -> bool:
        return run_git("rev-parse", "--verify", "--quiet", "HEAD", cwd=repo_root, check=False).returncode == 0

    def unstage(self, paths: Sequence[str], repo_root: Path, batch_size: int = 100) -> None:
        # Before the first commit there is no HEAD to reset against
        if self.has_head(repo_root):
            command = ("reset", "--quiet", "HEAD", "--")
        else:
            command = ("rm", "--cached", "--quiet", "--")
        for batch in batched(list(paths), batch_size):
            run_git(*command, *batch, cwd=repo_root)
