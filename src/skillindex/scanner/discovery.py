"""Skill bundle discovery over a skills root directory."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from skillindex.constants.discovery import SKILL_MARKDOWN_FILENAME
from skillindex.exceptions import SkillMetadataError, SkillParseError
from skillindex.model import SkillIndex, SkillRecord, SkippedSkill
from skillindex.parsers import read_skill_metadata
from skillindex.scanner.files import collect_bundle_files
from skillindex.types import WarningSink
from skillindex.utils import collation_key

logger = logging.getLogger(__name__)


def build_skill_index(
    root: Path,
    *,
    warn: WarningSink | None = None,
    fail_on_unreadable_bundles: bool = False,
) -> SkillIndex:
    """Scan *root* and return one record per valid skill bundle.

    A missing *root* yields an empty index. Any other error listing *root*
    propagates. Bundles without SKILL.md are skipped silently; bundles whose
    SKILL.md cannot be read or parsed are skipped through *warn*. Errors while
    enumerating a bundle's files skip that bundle the same way (a vanished
    directory silently) unless *fail_on_unreadable_bundles* is set.
    """
    emit = warn if warn is not None else logger.warning
    try:
        bundle_dirs = list_bundle_dirs(root)
    except FileNotFoundError:
        logger.debug("Skills root %s does not exist; emitting empty index", root)
        return SkillIndex()

    records: list[SkillRecord] = []
    skipped: list[SkippedSkill] = []

    def skip(bundle_dir: Path, reason: str) -> None:
        emit(reason)
        skipped.append(SkippedSkill(directory=bundle_dir.name, reason=reason))

    for bundle_dir in bundle_dirs:
        skill_path = bundle_dir / SKILL_MARKDOWN_FILENAME
        try:
            metadata = read_skill_metadata(skill_path)
        except FileNotFoundError:
            logger.debug("No %s in %s; not a skill bundle", SKILL_MARKDOWN_FILENAME, bundle_dir)
            continue
        except SkillMetadataError as exc:
            reason = f"Skill {bundle_dir.name} missing required frontmatter ({'/'.join(exc.missing_fields)})"
            skip(bundle_dir, reason)
            continue
        except (SkillParseError, OSError) as exc:
            reason = f"Failed to parse skill {bundle_dir.name}: {exc}"
            skip(bundle_dir, reason)
            continue

        try:
            files = collect_bundle_files(bundle_dir)
        except FileNotFoundError:
            if fail_on_unreadable_bundles:
                raise
            logger.debug("Skill bundle %s vanished while listing files", bundle_dir)
            continue
        except OSError as exc:
            if fail_on_unreadable_bundles:
                raise
            reason = f"Failed to list files for skill {bundle_dir.name}: {exc}"
            skip(bundle_dir, reason)
            continue

        records.append(SkillRecord(name=metadata.name, description=metadata.description, files=files))

    records.sort(key=lambda record: collation_key(record.name))
    logger.debug("Indexed %d skill(s) under %s, skipped %d", len(records), root, len(skipped))
    return SkillIndex(skills=tuple(records), skipped=tuple(skipped))


def list_bundle_dirs(root: Path) -> list[Path]:
    """Return immediate subdirectories of *root*, ordered by name.

    Symlinks are not bundles, even when they point at a directory.

    Raises ``FileNotFoundError`` when *root* is missing and
    ``NotADirectoryError`` when it is a file.
    """
    with os.scandir(root) as entries:
        return sorted(Path(entry.path) for entry in entries if entry.is_dir(follow_symlinks=False))
