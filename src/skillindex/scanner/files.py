"""Recursive file enumeration for skill bundles."""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path

from skillindex.constants.discovery import SKILL_MARKDOWN_FILENAME


def iter_bundle_files(directory: Path, base: Path) -> Iterator[str]:
    """Yield every regular file under *directory* as a POSIX path relative to *base*.

    Symlinks are neither followed nor listed. Order follows the filesystem.
    Errors from ``os.scandir`` propagate.
    """
    pending = [directory]
    while pending:
        current = pending.pop()
        with os.scandir(current) as entries:
            for entry in entries:
                if entry.is_dir(follow_symlinks=False):
                    pending.append(Path(entry.path))
                elif entry.is_file(follow_symlinks=False):
                    yield Path(entry.path).relative_to(base).as_posix()


def collect_bundle_files(bundle_dir: Path) -> tuple[str, ...]:
    """Return the bundle's files with SKILL.md first and the rest sorted.

    The rest are ordered by UTF-16 code unit, so characters above U+FFFF
    sort before those in U+E000..U+FFFF.
    """
    others = sorted(
        (relative for relative in iter_bundle_files(bundle_dir, bundle_dir) if relative != SKILL_MARKDOWN_FILENAME),
        key=_utf16_key,
    )
    return (SKILL_MARKDOWN_FILENAME, *others)


def _utf16_key(text: str) -> bytes:
    # Big-endian bytes compare the same as UTF-16 code units.
    return text.encode("utf-16-be", "surrogatepass")
