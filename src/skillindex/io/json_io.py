"""JSON rendering and atomic persistence for the skills index."""

from __future__ import annotations

import json
import os
import tempfile
from contextlib import suppress
from pathlib import Path

from skillindex.constants.reporting import COMPACT_SEPARATORS, INDEX_TEMP_PREFIX, INDEX_TEMP_SUFFIX
from skillindex.model import SkillIndex


def render_index_json(index: SkillIndex, *, indent: int | None = None) -> str:
    """Serialize *index* as the discovery document.

    Keys keep their declared order so repeated builds are byte-identical.
    """
    if indent is None:
        return json.dumps(index.to_dict(), ensure_ascii=False, separators=COMPACT_SEPARATORS)
    return json.dumps(index.to_dict(), ensure_ascii=False, indent=indent)


def write_index_atomic(path: Path, index: SkillIndex, *, indent: int | None = None) -> None:
    """Write *index* to *path* with a trailing newline.

    The document goes to a sibling temp file first and is renamed over *path*,
    so readers never see a partial index. The temp file is removed on failure.
    """
    text = render_index_json(index, indent=indent) + "\n"
    path.parent.mkdir(parents=True, exist_ok=True)

    handle = tempfile.NamedTemporaryFile(
        mode="w",
        encoding="utf-8",
        dir=path.parent,
        prefix=INDEX_TEMP_PREFIX,
        suffix=INDEX_TEMP_SUFFIX,
        delete=False,
    )
    temp_path = Path(handle.name)
    try:
        with handle:
            handle.write(text)
        os.replace(temp_path, path)
    except Exception:
        with suppress(FileNotFoundError):
            temp_path.unlink()
        raise
