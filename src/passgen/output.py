from __future__ import annotations

import os

from pathlib import Path

from .settings import PREVIEW_LIMIT


def format_preview(password: str, limit: int = PREVIEW_LIMIT) -> str:
    """
    Return the text to show for a password on the console.

    Passwords longer than limit are cut, followed by a notice with the
    full length and a hint to use --out.
    """
    if len(password) <= limit:
        return password

    return (
        f'{password[:limit]}\n'
        f'\n... (printed first {limit} chars of {len(password)})\n'
        'Tip: use --out <file> to save full password.'
    )


def write_password(path: str | os.PathLike[str], password: str) -> Path:
    """
    Write a password to a text file, creating parent directories.

    Args:
        path: Destination file. Overwritten if it exists.
        password: Password to write, stored without a trailing newline.

    Returns:
        Absolute path of the written file.
    """
    target = Path(path).absolute()
    target.parent.mkdir(parents=True, exist_ok=True)

    with open(target, 'w', encoding='utf-8') as f:
        f.write(password)

    return target
