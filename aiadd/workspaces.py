"""
Workspace discovery.

Two strategies are available: ``shallow`` looks at the root and its immediate
subdirectories for a ``.git`` marker, ``manifest`` additionally follows the
``workspaces`` globs of a root ``package.json`` (npm/yarn style) and recurses
into every matched package.
"""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import List

from .defaults import (
    AI_GITIGNORE_FILENAME, DISCOVERY_MANIFEST, DISCOVERY_SHALLOW, GITIGNORE_FILENAME,
    GIT_DIRNAME, MANIFEST_FILENAME,
)
from .errors import WorkspaceReadError
from .reporter import ensure_reporter


@dataclass(frozen=True)
class Workspace:
    path: Path

    @property
    def has_git(self) -> bool:
        return (self.path / GIT_DIRNAME).exists()

    @property
    def gitignore_path(self) -> Path:
        return self.path / GITIGNORE_FILENAME

    @property
    def ai_gitignore_path(self) -> Path:
        return self.path / AI_GITIGNORE_FILENAME


class WorkspaceLocator:
    def __init__(self, strategy: str = DISCOVERY_SHALLOW, reporter=None):
        if strategy not in (DISCOVERY_SHALLOW, DISCOVERY_MANIFEST):
            raise ValueError(f"Unknown discovery strategy: {strategy}")
        self.strategy = strategy
        self.reporter = ensure_reporter(reporter)

    def find(self, root: Path) -> List[Workspace]:
        root = Path(root).absolute()
        if not root.is_dir():
            raise WorkspaceReadError(root, "Cannot read directory")

        self.reporter.debug(f"Searching for workspaces in {root}")
        found: List[Path] = []

        if self.strategy == DISCOVERY_MANIFEST:
            self._scan_manifest(root, found, is_root=True)
        else:
            self._scan_shallow(root, found)

        self.reporter.debug(f"Found workspaces: {[str(path) for path in found]}")
        return [Workspace(path) for path in found]

    def _scan_shallow(self, root: Path, found: List[Path]) -> None:
        if _has_git(root):
            _remember(found, root)
        for subdir in self._subdirectories(root):
            if _has_git(subdir):
                _remember(found, subdir)

    def _scan_manifest(self, directory: Path, found: List[Path], is_root: bool = False) -> None:
        if _has_git(directory) or (not is_root and (directory / MANIFEST_FILENAME).exists()):
            _remember(found, directory)

        if is_root and not _has_git(directory):
            globs = []
        else:
            globs = self._manifest_globs(directory)
        for pattern in globs:
            for match in sorted(directory.glob(pattern)):
                match = match.absolute()
                if not match.is_dir() or match in found:
                    continue
                if _has_git(match) or (match / MANIFEST_FILENAME).exists():
                    self._scan_manifest(match, found)

        for subdir in self._subdirectories(directory):
            if _has_git(subdir):
                _remember(found, subdir)

    def _subdirectories(self, directory: Path) -> List[Path]:
        try:
            entries = sorted(directory.iterdir(), key=lambda entry: entry.name)
        except PermissionError as e:
            self.reporter.warn(f"Skipping unreadable directory {directory}: {e}")
            return []
        return [entry for entry in entries if entry.is_dir() and entry.name != GIT_DIRNAME]

    def _manifest_globs(self, directory: Path) -> List[str]:
        manifest = directory / MANIFEST_FILENAME
        if not manifest.exists():
            return []

        try:
            with open(manifest, 'r', encoding='utf-8') as f:
                payload = json.load(f)
        except (OSError, ValueError) as e:
            self.reporter.warn(f"Ignoring unreadable manifest {manifest}: {e}")
            return []

        if not isinstance(payload, dict):
            return []
        declared = payload.get('workspaces')
        if isinstance(declared, dict):
            declared = declared.get('packages')
        if not isinstance(declared, list):
            return []

        # Negated globs ("!pkg/x") are not expanded
        globs = []
        for item in declared:
            if not isinstance(item, str):
                continue
            glob = _clean_glob(item)
            if glob and not glob.startswith('!'):
                globs.append(glob)
        return globs


def _has_git(directory: Path) -> bool:
    return (directory / GIT_DIRNAME).exists()


def _clean_glob(pattern: str) -> str:
    pattern = pattern.strip()
    while pattern.startswith('./'):
        pattern = pattern[2:]
    return pattern.strip('/')


def _remember(found: List[Path], directory: Path) -> None:
    if directory not in found:
        found.append(directory)


def find_workspaces(root: Path, strategy: str = DISCOVERY_SHALLOW, reporter=None) -> List[Workspace]:
    return WorkspaceLocator(strategy, reporter).find(root)


def workspace_paths(root: Path, strategy: str = DISCOVERY_SHALLOW, reporter=None) -> List[Path]:
    return [workspace.path for workspace in find_workspaces(root, strategy, reporter)]
