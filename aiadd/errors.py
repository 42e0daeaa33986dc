from pathlib import Path
from typing import Sequence


class AiAddError(Exception):
    """Base user-facing application error."""


class NotARepositoryError(AiAddError):
    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Not inside a git work tree: {path}")


class GitCommandError(AiAddError):
    def __init__(self, args: Sequence[str], returncode: int, stderr: str) -> None:
        self.args_list = list(args)
        self.returncode = returncode
        self.stderr = stderr
        detail = stderr.strip() or f"exit status {returncode}"
        super().__init__(f"git {' '.join(self.args_list)} failed ({detail})")


class WorkspaceReadError(AiAddError):
    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        self.message = message
        super().__init__(f"{message}: {path}")


class FileDecodeError(AiAddError):
    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"File is not valid UTF-8: {path}")
