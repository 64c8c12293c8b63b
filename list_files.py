"""Tabulate the files of a directory by category."""

from typing import List

import pandas as pd
from colorama import Fore, Style

from clean_config import OTHER_CATEGORY, Settings
from file_by_type import build_extension_index, category_for
from name_tokens import scan_files

DISPLAY_ORDER = ["Images", "Videos", "Audio", "Documents", "Archives", "Code"]

CATEGORY_COLORS = {
    "Images": Fore.GREEN,
    "Videos": Fore.MAGENTA,
    "Audio": Fore.CYAN,
    "Documents": Fore.YELLOW,
    "Archives": Fore.RED,
    "Code": Fore.BLUE,
}

COLUMNS = ["name", "extension", "category"]
RULE = "-" * 66


def file_table(directory: str, settings: Settings) -> pd.DataFrame:
    """Return one row per regular file: name, extension and category."""
    index = build_extension_index(settings.categories)
    rows = [
        {
            "name": entry.name,
            "extension": entry.extension,
            "category": category_for(entry.extension, index),
        }
        for entry in scan_files(directory)
    ]
    return pd.DataFrame(rows, columns=COLUMNS)


def category_order(categories: List[str]) -> List[str]:
    """Known categories first, then the rest alphabetically, ``Other`` last."""
    head = [c for c in DISPLAY_ORDER if c in categories]
    rest = sorted(c for c in categories if c not in DISPLAY_ORDER and c != OTHER_CATEGORY)
    tail = [OTHER_CATEGORY] if OTHER_CATEGORY in categories else []
    return head + rest + tail


def render_listing(directory: str, table: pd.DataFrame) -> List[str]:
    """Lines of the colored listing shown by the "List all files" menu entry."""
    lines = [
        f"{Style.BRIGHT}{Fore.YELLOW}Listing Files in: {Fore.GREEN}{directory}{Style.RESET_ALL}",
        f"{Style.DIM}{RULE}{Style.RESET_ALL}",
    ]
    if table.empty:
        lines.append(f"{Style.BRIGHT}{Fore.RED}No files found in this directory.{Style.RESET_ALL}")
        return lines

    groups = dict(tuple(table.groupby("category", sort=False)))
    for category in category_order(list(groups)):
        color = CATEGORY_COLORS.get(category, Fore.WHITE)
        lines.append(f"{Style.BRIGHT}{Fore.WHITE}-- {category} --{Style.RESET_ALL}")
        for row in groups[category].itertuples(index=False):
            lines.append(
                f"{color}{row.name:<60}{Style.RESET_ALL}{Style.DIM} ({row.extension}){Style.RESET_ALL}"
            )
        lines.append("")

    lines.append(f"{Style.DIM}{RULE}{Style.RESET_ALL}")
    lines.append(f"{Fore.GREEN}Total files: {Fore.WHITE}{len(table)}{Style.RESET_ALL}")
    return lines
