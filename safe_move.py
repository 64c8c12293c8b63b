"""Move files into sub-folders without ever overwriting anything."""

import logging
import os
import shutil
from dataclasses import dataclass, field
from typing import Dict, List, Tuple


class DirectoryInvalid(Exception):
    """The directory to organize does not exist or is not a directory."""


def check_directory(directory: str) -> str:
    """Return ``directory`` as an absolute path or raise :class:`DirectoryInvalid`."""
    if not directory or not os.path.isdir(directory):
        raise DirectoryInvalid(f"'{directory}' is invalid or not a directory")
    return os.path.abspath(directory)


@dataclass
class MoveReport:
    """Outcome of one organize operation, ready for display."""

    moved: int = 0
    folders: List[str] = field(default_factory=list)
    messages: List[str] = field(default_factory=list)
    detected: List[Tuple[str, int]] = field(default_factory=list)
    skip_reasons: Dict[str, str] = field(default_factory=dict)

    @property
    def skipped(self) -> int:
        return len(self.skip_reasons)

    @property
    def skipped_names(self) -> List[str]:
        return list(self.skip_reasons)

    def skip(self, name: str, reason: str) -> None:
        # A file is listed once, with the first reason it was left behind.
        self.skip_reasons.setdefault(name, reason)

    def record_move(self, name: str, folder: str) -> None:
        self.moved += 1
        self.skip_reasons.pop(name, None)
        if folder not in self.folders:
            self.folders.append(folder)

    def reason_for(self, name: str) -> str:
        return self.skip_reasons.get(name, "")


def ensure_folder(folder: str, report: MoveReport) -> bool:
    """Create ``folder`` if it is missing.

    Returns False, with the failure noted on ``report``, when the folder
    cannot be created (for example when a file already uses that name).
    """
    if os.path.isdir(folder):
        return True
    try:
        os.mkdir(folder)
    except OSError as exc:
        logging.warning("Failed to create directory '%s': %s", folder, exc)
        report.messages.append(f"Failed to create directory '{folder}': {exc}")
        return False
    logging.info("Created %s", folder)
    return True


def move_into(src: str, folder: str, report: MoveReport) -> bool:
    """Move ``src`` into ``folder`` unless a same-named file is already there."""
    name = os.path.basename(src)
    dest = os.path.join(folder, name)
    if os.path.lexists(dest):
        logging.info("Skipping file due to name conflict: %s", name)
        report.skip(name, f"'{name}' already exists in {os.path.basename(folder)}")
        return False
    try:
        shutil.move(src, dest)
    except OSError as exc:
        logging.warning("Failed to move %s -> %s: %s", src, dest, exc)
        report.skip(name, str(exc))
        return False
    logging.info("Moved %s -> %s", name, folder)
    report.record_move(name, os.path.basename(folder))
    return True
