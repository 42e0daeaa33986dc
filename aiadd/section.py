"""
Section codec - reads and writes the marker-delimited AI section of a .gitignore.

A section is the first start marker followed by the next end marker. Anything
unterminated is left in the regular content untouched.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .defaults import AI_SECTION_START, AI_SECTION_END, AI_GITIGNORE_FILENAME
from .utils import trim_trailing_blanks


@dataclass
class GitIgnoreState:
    ai_patterns: List[str] = field(default_factory=list)
    regular_content: List[str] = field(default_factory=list)


def is_pattern_line(line: str) -> bool:
    """True for lines that carry an ignore pattern (not blank, not a comment)"""
    stripped = line.strip()
    return bool(stripped) and not stripped.startswith('#')


def find_section(lines: List[str]) -> Optional[Tuple[int, int]]:
    """Return (start, end) indexes of the marker lines, or None"""
    try:
        start = lines.index(AI_SECTION_START)
        end = lines.index(AI_SECTION_END, start + 1)
    except ValueError:
        return None
    return start, end


def parse(content: str) -> GitIgnoreState:
    lines = content.splitlines()
    bounds = find_section(lines)

    if bounds is None:
        return GitIgnoreState(ai_patterns=[], regular_content=lines)

    start, end = bounds
    ai_patterns = [
        line for line in lines[start + 1:end]
        if is_pattern_line(line) and line.strip() != AI_GITIGNORE_FILENAME
    ]
    regular_content = lines[:start] + lines[end + 1:]
    return GitIgnoreState(ai_patterns=ai_patterns, regular_content=regular_content)


def serialize(state: GitIgnoreState, include_section: bool = False) -> str:
    if include_section and state.ai_patterns:
        lines = trim_trailing_blanks(state.regular_content)
        if lines:
            lines.append('')
        lines.extend([AI_SECTION_START, AI_GITIGNORE_FILENAME])
        lines.extend(state.ai_patterns)
        lines.append(AI_SECTION_END)
    else:
        lines = list(state.regular_content)

    if not lines:
        return ''
    return '\n'.join(lines) + '\n'


def has_section(content: str) -> bool:
    return find_section(content.splitlines()) is not None


def strip_section(content: str) -> List[str]:
    """Regular lines of a .gitignore with the AI section and trailing blanks removed"""
    return trim_trailing_blanks(parse(content).regular_content)


def pattern_lines(text: str) -> List[str]:
    """Unique, trimmed pattern lines of an ai.gitignore body, in file order"""
    patterns = []
    for line in text.splitlines():
        if not is_pattern_line(line):
            continue
        pattern = line.strip()
        if pattern not in patterns:
            patterns.append(pattern)
    return patterns

