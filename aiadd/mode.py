"""
AI mode controller.

AI mode is on for a workspace exactly when its ai.gitignore exists. Turning it
on moves the AI section out of .gitignore into ai.gitignore; turning it off
moves the patterns back into a freshly written section.
"""

from pathlib import Path
from typing import List

from .defaults import (
    AI_GITIGNORE_FILENAME, DEFAULT_AI_GITIGNORE, DEFAULT_GITIGNORE, GITIGNORE_FILENAME,
)
from .reporter import ensure_reporter
from .section import (
    GitIgnoreState, has_section, parse, pattern_lines, serialize, strip_section,
)
from .utils import read_text, trim_trailing_blanks, write_lines, write_text


def is_mode_enabled(workspace_dir: Path) -> bool:
    return (Path(workspace_dir) / AI_GITIGNORE_FILENAME).exists()


def enable_mode(workspace_dir: Path, reporter=None, seed_defaults: bool = False) -> bool:
    """Move the AI section of .gitignore into ai.gitignore.

    Returns True when any file was written.
    """
    reporter = ensure_reporter(reporter)
    workspace_dir = Path(workspace_dir)
    gitignore_path = workspace_dir / GITIGNORE_FILENAME
    ai_gitignore_path = workspace_dir / AI_GITIGNORE_FILENAME

    if not gitignore_path.exists():
        reporter.debug(f"No {GITIGNORE_FILENAME} in {workspace_dir}, skipping")
        return False

    content = read_text(gitignore_path)

    if has_section(content):
        state = parse(content)
        existing = read_text(ai_gitignore_path) if ai_gitignore_path.exists() else ''
        known = pattern_lines(existing)
        extracted = []
        for pattern in state.ai_patterns:
            pattern = pattern.strip()
            if pattern not in known and pattern not in extracted:
                extracted.append(pattern)

        reporter.debug(f"Extracted AI patterns in {workspace_dir}: {extracted}")
        write_lines(ai_gitignore_path, trim_trailing_blanks(existing.splitlines()) + extracted)
        write_lines(gitignore_path, _with_reference(state.regular_content))
        return True

    if not ai_gitignore_path.exists():
        reporter.debug(f"No AI section in {gitignore_path}, creating {AI_GITIGNORE_FILENAME}")
        write_text(ai_gitignore_path, DEFAULT_AI_GITIGNORE if seed_defaults else '')
        write_lines(gitignore_path, _with_reference(content.splitlines()))
        return True

    if not _has_reference(content.splitlines()):
        write_lines(gitignore_path, _with_reference(content.splitlines()))
        return True

    return False


def disable_mode(workspace_dir: Path, reporter=None) -> bool:
    """Merge ai.gitignore back into .gitignore as an AI section and delete it.

    Returns True when the workspace was in AI mode.
    """
    reporter = ensure_reporter(reporter)
    workspace_dir = Path(workspace_dir)
    gitignore_path = workspace_dir / GITIGNORE_FILENAME
    ai_gitignore_path = workspace_dir / AI_GITIGNORE_FILENAME

    if not ai_gitignore_path.exists():
        reporter.debug(f"No {AI_GITIGNORE_FILENAME} in {workspace_dir}, skipping")
        return False

    ai_lines = [
        line for line in trim_trailing_blanks(read_text(ai_gitignore_path).splitlines())
        if line.strip() != AI_GITIGNORE_FILENAME
    ]
    gitignore_existed = gitignore_path.exists()
    content = read_text(gitignore_path) if gitignore_existed else ''

    # The section carries its own reference line
    regular = [line for line in strip_section(content) if line.strip() != AI_GITIGNORE_FILENAME]
    merged = serialize(GitIgnoreState(ai_patterns=ai_lines, regular_content=regular), include_section=True)

    if merged or gitignore_existed:
        write_text(gitignore_path, merged)
    ai_gitignore_path.unlink()
    reporter.debug(f"Merged {len(ai_lines)} lines from {ai_gitignore_path} into {gitignore_path}")
    return True


def setup_workspace(workspace_dir: Path, reporter=None) -> List[Path]:
    """Create default .gitignore/ai.gitignore files, returning the files written"""
    reporter = ensure_reporter(reporter)
    workspace_dir = Path(workspace_dir)
    gitignore_path = workspace_dir / GITIGNORE_FILENAME
    ai_gitignore_path = workspace_dir / AI_GITIGNORE_FILENAME
    written = []

    if not gitignore_path.exists():
        write_text(gitignore_path, DEFAULT_GITIGNORE)
        written.append(gitignore_path)
    else:
        content = read_text(gitignore_path)
        if not _has_reference(content.splitlines()):
            write_text(gitignore_path, f"# AI gitignore file\n{AI_GITIGNORE_FILENAME}\n\n{content}")
            written.append(gitignore_path)

    if not ai_gitignore_path.exists():
        write_text(ai_gitignore_path, DEFAULT_AI_GITIGNORE)
        written.append(ai_gitignore_path)

    for path in written:
        reporter.debug(f"Wrote {path}")
    return written


def read_ai_patterns(workspace_dir: Path) -> List[str]:
    ai_gitignore_path = Path(workspace_dir) / AI_GITIGNORE_FILENAME
    if not ai_gitignore_path.exists():
        return []
    return pattern_lines(read_text(ai_gitignore_path))


def _has_reference(lines: List[str]) -> bool:
    return any(line.strip() == AI_GITIGNORE_FILENAME for line in lines)


def _with_reference(lines: List[str]) -> List[str]:
    rest = [line for line in lines if line.strip() != AI_GITIGNORE_FILENAME]
    return [AI_GITIGNORE_FILENAME] + trim_trailing_blanks(rest)

