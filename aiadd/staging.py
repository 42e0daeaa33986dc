"""
Staging orchestrator - the filtered ``git add``.

With AI mode off the requested paths are handed to git untouched. With it on,
the untracked and modified files are collected, scoped to the requested paths
and staged minus everything matched by the workspaces' ai.gitignore patterns.
"""

import os
import shutil
from pathlib import Path
from typing import Callable, Iterable, List, Optional, TypeVar

from .config import Config
from .defaults import BACKUP_SUFFIX, GITIGNORE_FILENAME
from .git import Git
from .matcher import filter_ignored, is_ignored, matches
from .mode import is_mode_enabled, read_ai_patterns
from .reporter import ensure_reporter
from .section import GitIgnoreState, parse, serialize
from .utils import read_text, write_text
from .workspaces import find_workspaces

T = TypeVar('T')

ALL_PATHS = ('.', './')


def stage_files(explicit_paths: Iterable[str], current_dir: Path, git: Optional[Git] = None,
                config: Optional[Config] = None, reporter=None) -> List[str]:
    """Stage files, skipping AI-pattern matches when AI mode is on.

    Returns the paths handed to ``git add``.
    """
    reporter = ensure_reporter(reporter)
    git = git or Git()
    current_dir = Path(current_dir).absolute()
    config = config or Config(current_dir)
    paths = [path for path in (explicit_paths or []) if path]

    repo_root = git.repo_root(current_dir)

    if not is_mode_enabled(current_dir):
        if not paths:
            reporter.debug("AI mode disabled, adding everything")
            git.add(['.'], cwd=repo_root, batch_size=config.batch_size)
            return ['.']
        reporter.debug(f"AI mode disabled, adding {paths}")
        git.add(paths, cwd=current_dir, batch_size=config.batch_size)
        return paths

    workspaces = find_workspaces(current_dir, config.discovery, reporter)

    for workspace in workspaces:
        if workspace.gitignore_path.exists():
            reporter.debug(f"Staging {workspace.gitignore_path}")
            git.add([GITIGNORE_FILENAME], cwd=workspace.path)

    candidates = _unique(git.untracked_files(repo_root) + git.modified_files(repo_root))
    scoped = scope_candidates(candidates, paths, current_dir, repo_root)

    pattern_sources = [workspace.path for workspace in workspaces]
    if current_dir not in pattern_sources:
        pattern_sources.append(current_dir)
    patterns = _unique(pattern for source in pattern_sources for pattern in read_ai_patterns(source))
    reporter.debug(f"AI patterns: {patterns}")

    to_add = filter_ignored(scoped, patterns, match_base=True, exclude_ai_gitignore=True)
    kept = set(to_add)
    skipped = [path for path in scoped if path not in kept]
    for path in skipped:
        reporter.debug(f"Skipping {path}")

    if to_add:
        git.add(to_add, cwd=repo_root, batch_size=config.batch_size)
    reporter.info(f"Staged {len(to_add)} file(s), skipped {len(skipped)} matching AI patterns")
    return to_add


def scope_candidates(candidates: List[str], explicit_paths: List[str], current_dir: Path,
                     repo_root: Path) -> List[str]:
    """Restrict repository-relative candidates to the requested paths.

    Each requested path is taken relative to ``current_dir`` and matches a
    candidate literally, as a directory prefix or as a glob.
    """
    if not explicit_paths or any(path in ALL_PATHS for path in explicit_paths):
        return list(candidates)

    scopes = []
    for path in explicit_paths:
        relative = _repo_relative(path, current_dir, repo_root)
        if relative is None:
            continue
        if relative == '.':
            return list(candidates)
        scopes.append(relative)

    return [candidate for candidate in candidates if any(_in_scope(candidate, scope) for scope in scopes)]


def without_ai_patterns(repo_dir: Path, operation: Callable[[], T], git: Optional[Git] = None,
                        reporter=None) -> T:
    """Run ``operation`` with the AI section removed from .gitignore.

    Anything the operation staged that the AI patterns match is un-staged
    again, and .gitignore is restored from its backup however the operation
    exits.
    """
    reporter = ensure_reporter(reporter)
    git = git or Git()
    repo_dir = Path(repo_dir)
    gitignore_path = repo_dir / GITIGNORE_FILENAME
    backup_path = repo_dir / (GITIGNORE_FILENAME + BACKUP_SUFFIX)

    state = parse(read_text(gitignore_path)) if gitignore_path.exists() else GitIgnoreState()

    backed_up = gitignore_path.exists()
    if backed_up:
        shutil.copyfile(gitignore_path, backup_path)

    try:
        if backed_up:
            write_text(gitignore_path, serialize(GitIgnoreState(regular_content=state.regular_content)))

        result = operation()

        repo_root = git.repo_root(repo_dir)
        to_unstage = [path for path in git.staged_files(repo_root) if is_ignored(path, state.ai_patterns)]
        if to_unstage:
            reporter.debug(f"Un-staging files matching AI patterns: {to_unstage}")
            git.unstage(to_unstage, repo_root)

        for path in git.untracked_files(repo_root):
            if is_ignored(path, state.ai_patterns):
                reporter.debug(f"Left untracked: {path}")

        return result
    finally:
        if backed_up:
            shutil.copyfile(backup_path, gitignore_path)
            backup_path.unlink()


def _repo_relative(path: str, current_dir: Path, repo_root: Path) -> Optional[str]:
    absolute = os.path.normpath(os.path.join(str(current_dir.resolve()), path))
    relative = os.path.relpath(absolute, str(repo_root.resolve())).replace(os.sep, '/')
    if relative == '..' or relative.startswith('../'):
        return None
    return relative


def _in_scope(candidate: str, scope: str) -> bool:
    scope = scope.rstrip('/')
    if candidate == scope or candidate.startswith(scope + '/'):
        return True
    return matches(candidate, scope)


def _unique(items: Iterable[str]) -> List[str]:
    return list(dict.fromkeys(items))
