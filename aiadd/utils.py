from pathlib import Path
from typing import List

from .errors import FileDecodeError


def read_text(path: Path) -> str:
    try:
        with open(path, 'r', encoding='utf-8') as f:
            return f.read()
    except UnicodeDecodeError as e:
        raise FileDecodeError(Path(path)) from e


def write_text(path: Path, content: str) -> None:
    with open(path, 'w', encoding='utf-8') as f:
        f.write(content)


def write_lines(path: Path, lines: List[str]) -> None:
    write_text(path, '\n'.join(lines) + '\n' if lines else '')


def trim_trailing_blanks(lines: List[str]) -> List[str]:
    trimmed = list(lines)
    while trimmed and not trimmed[-1].strip():
        trimmed.pop()
    return trimmed
