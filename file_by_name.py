"""Group files into folders named after a token found in their filenames.

Two modes are offered. With a query, every file whose name contains it is
moved into one folder named after the query. Without one, the most common
tokens of the directory are detected and each becomes a folder, best
ranked first; a file belongs to the first token that claims it.

Name-based moves do not consult the dangerous-extension list: the user is
grouping by name on purpose, and that list only guards the by-type sweep.
"""

import logging
import os
from typing import AbstractSet, List, Optional, Sequence, Tuple

from clean_config import Settings
from name_tokens import MIN_COUNT, FileEntry, rank_tokens, scan_files
from safe_move import MoveReport, check_directory, ensure_folder, move_into


def folder_name_for(query: str) -> str:
    """Return a folder name for ``query`` with path separators made safe."""
    return query.replace("/", "_").replace("\\", "_")


def find_matches(directory: str, needle: str) -> List[FileEntry]:
    """Files of ``directory`` whose lowercased name contains ``needle``."""
    needle = needle.lower()
    return [entry for entry in scan_files(directory) if needle in entry.name.lower()]


def move_matching(directory: str, query: str) -> MoveReport:
    """Move every file whose name contains ``query`` into one folder."""
    report = MoveReport()
    name = folder_name_for(query)
    if name in (".", ".."):
        report.messages.append(f"'{query}' cannot be used as a folder name.")
        return report
    matches = find_matches(directory, query)
    if not matches:
        report.messages.append(f"No files found containing '{query}'.")
        return report

    folder = os.path.join(directory, name)
    if not ensure_folder(folder, report):
        return report
    for entry in matches:
        move_into(entry.path, folder, report)
    return report


def materialize_groups(
    directory: str,
    ranked: Sequence[Tuple[str, int]],
    stop_words: AbstractSet[str],
    min_group_size: int = MIN_COUNT,
) -> MoveReport:
    """Create one folder per ranked token and move its matching files there.

    The directory is re-read for every token, so files moved by a better
    ranked token are no longer candidates for the ones after it. A token
    that now matches fewer than ``min_group_size`` files gets no folder.
    """
    report = MoveReport(detected=list(ranked))
    for token, count in ranked:
        if token in stop_words:
            continue
        found = find_matches(directory, token)
        logging.debug("Token %r (count %d) matches %d file(s)", token, count, len(found))
        if len(found) < min_group_size:
            continue

        folder = os.path.join(directory, token)
        if not ensure_folder(folder, report):
            continue
        for entry in found:
            move_into(entry.path, folder, report)
    return report


def organize_by_name(directory: str, settings: Settings, query: Optional[str] = None) -> MoveReport:
    """Organize ``directory`` by filename.

    A non-blank ``query`` selects the explicit search; otherwise common
    tokens are detected. Raises :class:`safe_move.DirectoryInvalid` before
    touching anything when ``directory`` is not a directory.
    """
    directory = check_directory(directory)
    query = (query or "").strip()
    if query:
        logging.info("Searching %s for '%s'", directory, query)
        return move_matching(directory, query)

    ranked = rank_tokens(
        scan_files(directory),
        settings.stop_words,
        min_length=settings.min_token_length,
        limit=settings.max_groups,
    )
    if not ranked:
        report = MoveReport()
        report.messages.append("No common name tokens detected. Nothing to move.")
        return report
    logging.info("Detected tokens in %s: %s", directory, ", ".join(t for t, _ in ranked))
    return materialize_groups(directory, ranked, settings.stop_words, settings.min_group_size)
