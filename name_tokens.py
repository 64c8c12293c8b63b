"""Detect common name tokens in a directory listing."""

import logging
import os
import re
from collections import Counter
from dataclasses import dataclass
from typing import AbstractSet, Iterable, List, Set, Tuple

# Anything that is not an ASCII letter or digit separates two tokens.
TOKEN_SPLIT = re.compile(r"[^a-z0-9]+")

MIN_TOKEN_LENGTH = 4
MAX_GROUPS = 10
MIN_COUNT = 2


@dataclass(frozen=True)
class FileEntry:
    """A regular file directly inside the directory being organized."""

    path: str
    name: str
    stem: str
    extension: str

    @classmethod
    def from_path(cls, path: str) -> "FileEntry":
        name = os.path.basename(path)
        stem, ext = os.path.splitext(name)
        return cls(path=os.path.abspath(path), name=name, stem=stem, extension=ext.lower())


def scan_files(directory: str) -> List[FileEntry]:
    """Return the regular files of ``directory``, sorted by name.

    Sub-directories and other non-regular entries are left out.
    """
    entries = []
    for name in sorted(os.listdir(directory)):
        path = os.path.join(directory, name)
        if not os.path.isfile(path):
            logging.debug("Skipping non-regular file: %s", name)
            continue
        entries.append(FileEntry.from_path(path))
    return entries


def extract_tokens(stem: str, stop_words: AbstractSet[str], min_length: int = MIN_TOKEN_LENGTH) -> Set[str]:
    """Return the candidate grouping tokens of a filename stem.

    The lowercased stem is split on every non alphanumeric character and
    each run of at least ``min_length`` characters that is not a stop word
    is kept. The whole lowercased stem is judged the same way, so a name
    such as ``holidayphotos`` can still group with an identical stem.
    """
    lower = stem.lower()
    tokens = {
        part
        for part in TOKEN_SPLIT.split(lower)
        if len(part) >= min_length and part not in stop_words
    }
    if len(lower) >= min_length and lower not in stop_words:
        tokens.add(lower)
    return tokens


def count_tokens(
    entries: Iterable[FileEntry],
    stop_words: AbstractSet[str],
    min_length: int = MIN_TOKEN_LENGTH,
) -> Counter:
    """Count in how many filenames each token appears.

    A token repeated inside one stem still counts once for that file.
    """
    counts = Counter()
    for entry in entries:
        # sets are unordered; sorting keeps tie order reproducible
        counts.update(sorted(extract_tokens(entry.stem, stop_words, min_length)))
    return counts


def rank_tokens(
    entries: Iterable[FileEntry],
    stop_words: AbstractSet[str],
    min_length: int = MIN_TOKEN_LENGTH,
    limit: int = MAX_GROUPS,
) -> List[Tuple[str, int]]:
    """Return up to ``limit`` ``(token, count)`` pairs, most frequent first.

    Only tokens seen in at least two filenames qualify. Ties keep the order
    in which the tokens were first encountered.
    """
    counts = count_tokens(entries, stop_words, min_length)
    common = [(token, n) for token, n in counts.items() if n >= MIN_COUNT]
    common.sort(key=lambda pair: pair[1], reverse=True)
    ranked = common[:limit]
    logging.debug("Ranked tokens: %s", ranked)
    return ranked
