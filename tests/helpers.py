import shutil
import subprocess
from pathlib import Path
from typing import List

import pytest

from aiadd.reporter import Reporter

requires_git = pytest.mark.skipif(shutil.which("git") is None, reason="git binary not available")


def git(repo: Path, *args: str) -> str:
    result = subprocess.run(["git", *args], cwd=str(repo), capture_output=True, text=True, check=True)
    return result.stdout


def staged(repo: Path) -> List[str]:
    return git(repo, "diff", "--cached", "--name-only").splitlines()


class RecordingReporter(Reporter):
    """Collects messages as (level, message) pairs"""

    def __init__(self):
        self.messages = []

    def info(self, message: str) -> None:
        self.messages.append(("info", message))

    def success(self, message: str) -> None:
        self.messages.append(("success", message))

    def warn(self, message: str) -> None:
        self.messages.append(("warn", message))

    def debug(self, message: str) -> None:
        self.messages.append(("debug", message))

    def of_level(self, level: str) -> List[str]:
        return [message for kind, message in self.messages if kind == level]
