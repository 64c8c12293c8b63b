"""Organize files into category folders based on their extension.

Categories come from the configured extension table; an extension that no
category lists goes to ``Other``. Files with a dangerous extension
(executables, scripts, macro-enabled documents) are never moved.
"""

import logging
import os
from typing import Dict, Mapping, Sequence

from clean_config import OTHER_CATEGORY, Settings
from name_tokens import scan_files
from safe_move import MoveReport, check_directory, ensure_folder, move_into


def build_extension_index(table: Mapping[str, Sequence[str]]) -> Dict[str, str]:
    """Map each lowercased extension to its category.

    Categories are visited in name order; an extension listed under several
    categories belongs to the last of them (``.iso`` is a DiskImage, not an
    Archive).
    """
    index = {}
    for category in sorted(table):
        for ext in table[category]:
            index[ext.lower()] = category
    return index


def category_for(extension: str, index: Mapping[str, str]) -> str:
    """Return the category of ``extension``, ``Other`` when unknown."""
    if not extension:
        return OTHER_CATEGORY
    return index.get(extension.lower(), OTHER_CATEGORY)


def organize_by_type(directory: str, settings: Settings) -> MoveReport:
    """Move each regular file of ``directory`` into its category folder.

    Raises :class:`safe_move.DirectoryInvalid` before any change when
    ``directory`` is not a directory.
    """
    directory = check_directory(directory)
    index = build_extension_index(settings.categories)
    report = MoveReport()

    for entry in scan_files(directory):
        if entry.extension in settings.dangerous_exts:
            logging.warning("Skipped dangerous file: %s", entry.name)
            report.skip(entry.name, f"dangerous extension {entry.extension}")
            continue

        category = category_for(entry.extension, index)
        folder = os.path.join(directory, category)
        if not ensure_folder(folder, report):
            report.skip(entry.name, f"could not create {category}/")
            continue
        move_into(entry.path, folder, report)

    return report
