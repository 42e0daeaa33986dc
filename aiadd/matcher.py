"""
Pattern filter - shell-glob matching of repository paths against ignore patterns.

Patterns and paths are compared segment by segment with ``fnmatch``, so ``*``
and ``?`` never cross a ``/``; a whole ``**`` segment spans directories. A
leading ``/`` anchors a pattern to the start of the path and a trailing ``/``
limits it to directories.
"""

import fnmatch
import re
from functools import lru_cache
from typing import Iterable, List

from .defaults import AI_GITIGNORE_FILENAME
from .section import is_pattern_line

GLOBSTAR = '**'


def _normalize_path(file_path: str) -> str:
    path = file_path.replace('\\', '/')
    while path.startswith('./'):
        path = path[2:]
    return path.strip('/')


@lru_cache(maxsize=512)
def _segment_regex(segment: str):
    return re.compile(fnmatch.translate(segment))


def _segment_matches(segment: str, name: str) -> bool:
    return _segment_regex(segment).match(name) is not None


def match_segments(pattern_parts: List[str], path_parts: List[str]) -> bool:
    """Match a split pattern against a split path, all segments consumed"""
    if not pattern_parts:
        return not path_parts

    head, rest = pattern_parts[0], pattern_parts[1:]
    if head == GLOBSTAR:
        # A trailing ** needs something beneath it
        start = 1 if not rest else 0
        return any(match_segments(rest, path_parts[index:]) for index in range(start, len(path_parts) + 1))

    if not path_parts or not _segment_matches(head, path_parts[0]):
        return False
    return match_segments(rest, path_parts[1:])


def matches(file_path: str, pattern: str, match_base: bool = False) -> bool:
    """Check whether a repository-relative path is matched by an ignore pattern.

    Path-aware by default: a single-segment pattern is compared with the
    basename, a multi-segment one with the full path (or a leading directory
    of it). With ``match_base`` a slash-free pattern also matches any
    directory component at any depth.
    """
    pattern = pattern.strip()
    if not is_pattern_line(pattern):
        return False

    dir_only = pattern.endswith('/')
    anchored = pattern.startswith('/')
    pattern = pattern.strip('/')
    path = _normalize_path(file_path)
    if not pattern or not path:
        return False

    path_parts = path.split('/')
    pattern_parts = pattern.split('/')

    if GLOBSTAR not in pattern_parts and len(pattern_parts) > len(path_parts):
        return False

    if len(pattern_parts) == 1 and not anchored:
        if not dir_only and _segment_matches(pattern, path_parts[-1]):
            return True
        if dir_only or match_base:
            return any(_segment_matches(pattern, part) for part in path_parts[:-1])
        return False

    # Anchored: the pattern has to cover the path or one of its leading directories
    limit = len(path_parts) - 1 if dir_only else len(path_parts)
    for count in range(1, limit + 1):
        if match_segments(pattern_parts, path_parts[:count]):
            return True
    return False


def is_ignored(file_path: str, patterns: Iterable[str], match_base: bool = False) -> bool:
    return any(matches(file_path, pattern, match_base) for pattern in patterns)


def filter_ignored(paths: Iterable[str], patterns: Iterable[str], match_base: bool = False,
                   exclude_ai_gitignore: bool = False) -> List[str]:
    """Keep the paths (in order) that no pattern matches"""
    active = [pattern.strip() for pattern in patterns if is_pattern_line(pattern)]
    kept = []

    for path in paths:
        if exclude_ai_gitignore and _normalize_path(path).split('/')[-1] == AI_GITIGNORE_FILENAME:
            continue
        if is_ignored(path, active, match_base):
            continue
        kept.append(path)

    return kept
