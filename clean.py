"""Clean: tidy a directory into sub-folders by file type or by name.

Run without ``--by``/``--list`` for the interactive menus, or e.g.::

    clean --dir ~/Downloads --by type
    clean --dir ~/Downloads --by name --query invoice
"""

import argparse
import logging
import os
import sys
from typing import List, Optional, Tuple

import colorama
from colorama import Cursor, Fore, Style, ansi

from clean_config import DEFAULT_CONFIG_PATH, Settings, load_config, load_settings
from file_by_name import organize_by_name
from file_by_type import organize_by_type
from list_files import file_table, render_listing
from safe_move import DirectoryInvalid, MoveReport, check_directory

TITLE = r"""
             _____   _
            / ____| | |
            | |     | | ___  __ _ _ __
            | |     | |/ _ \/ _` | '_ \
            | |___  | |  __/ (_| | | | |
            \_____| |_|\___|\__,_|_| |_|
"""

MODES = ("type", "name")


def clear_screen() -> None:
    print(ansi.clear_screen() + Cursor.POS(1, 1), end="")


def show_header() -> None:
    clear_screen()
    print(f"{Style.BRIGHT}{Fore.CYAN}{TITLE}{Style.RESET_ALL}")
    print(f"{Style.DIM}{'-' * 39}{Style.RESET_ALL}")


def pause(message: str = "Press Enter to return to the menu...") -> None:
    input(f"{Fore.YELLOW}{message}{Style.RESET_ALL}")


def prompt_directory() -> str:
    """Ask until the user names an existing directory; blank means cwd."""
    while True:
        show_header()
        print(
            f"{Style.BRIGHT}{Fore.WHITE}\nEnter the full path of the directory you want to clean "
            f"eg (/home/user/Downloads) or (C:\\Users\\User\\Downloads){Style.RESET_ALL}"
        )
        raw = input(f"{Fore.YELLOW}\nPress Enter to use the current directory\n>>: {Style.RESET_ALL}").strip()
        try:
            return check_directory(os.path.expanduser(raw) if raw else os.getcwd())
        except DirectoryInvalid:
            print(f'{Fore.RED}\nError: The specified path "{Fore.GREEN}{raw}{Fore.RED}" is invalid or not a directory.{Style.RESET_ALL}')
            pause("Press Enter to try again...")


def choose(options: List[str], breaks: Tuple[int, ...] = (0,)) -> int:
    """Show numbered ``options`` and return the index picked by the user.

    A rule is drawn after each option number listed in ``breaks``.
    """
    high = len(options) - 1
    while True:
        for number, label in enumerate(options):
            print(f"{number}. {label}")
            if number in breaks:
                print(f"{Fore.BLUE}-----{Style.RESET_ALL}")
        raw = input(f"{Fore.YELLOW}>>: {Style.RESET_ALL}").strip()
        if raw.isdigit() and 0 <= int(raw) <= high:
            return int(raw)
        print(f"{Fore.RED}Invalid input. Please enter a number between 0 and {high}.\n{Style.RESET_ALL}")


def render_report(report: MoveReport) -> List[str]:
    """Lines summarizing a :class:`MoveReport` for the terminal."""
    lines = []
    if report.detected:
        tokens = ", ".join(f"{token} ({count})" for token, count in report.detected)
        lines.append(f"{Style.DIM}Detected names: {tokens}{Style.RESET_ALL}")
    lines.extend(f"{Fore.YELLOW}{msg}{Style.RESET_ALL}" for msg in report.messages)
    if report.folders:
        lines.append(f"{Style.DIM}Folders: {', '.join(report.folders)}{Style.RESET_ALL}")
    lines.append(f"{Fore.GREEN}Moved: {report.moved}{Style.RESET_ALL}  {Fore.YELLOW}Skipped: {report.skipped}{Style.RESET_ALL}")
    if report.skipped:
        lines.append(f"{Style.DIM}Skipped files (name conflicts or errors):{Style.RESET_ALL}")
        lines.extend(f" - {name} ({report.reason_for(name)})" for name in report.skipped_names)
    return lines


def print_lines(lines: List[str]) -> None:
    for line in lines:
        print(line)


def run_mode(mode: str, directory: str, settings: Settings, query: Optional[str] = None) -> MoveReport:
    if mode == "type":
        return organize_by_type(directory, settings)
    return organize_by_name(directory, settings, query)


def mode_menu(mode: str, directory: str, settings: Settings) -> None:
    """Sub-menu for one mode; returns when the user goes back."""
    while True:
        show_header()
        print(f"{Style.DIM}Directory: {directory}{Style.RESET_ALL}")
        option = choose([
            "Return to main menu",
            "List all files in the directory",
            f"clean files into subdirectories by {mode}",
            "Change Directory",
        ], breaks=(0, 2))
        if option == 0:
            return
        if option == 1:
            show_header()
            print_lines(render_listing(directory, file_table(directory, settings)))
        elif option == 2:
            query = None
            if mode == "name":
                query = input(
                    f"{Style.BRIGHT}{Fore.WHITE}Enter a name to search for in filenames "
                    f"(press Enter to auto-detect common names):\n>>: {Style.RESET_ALL}"
                ).strip()
            try:
                report = run_mode(mode, directory, settings, query)
            except DirectoryInvalid as exc:
                print(f"{Fore.RED}{exc}{Style.RESET_ALL}")
            else:
                print_lines(render_report(report))
        elif option == 3:
            directory = prompt_directory()
            continue
        pause()


def main_menu(settings: Settings) -> None:
    while True:
        show_header()
        print(f"{Style.BRIGHT}{Fore.MAGENTA}Choose an operation:{Style.RESET_ALL}")
        option = choose(["Exit", "clean by type", "clean by name"])
        if option == 0:
            print(f"{Fore.GREEN}Good Bye{Style.RESET_ALL}")
            return
        mode_menu(MODES[option - 1], prompt_directory(), settings)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Organize a directory into sub-folders by type or by name")
    parser.add_argument("--dir", help="directory to organize (default: current directory)")
    parser.add_argument("--by", choices=MODES, help="organize once, without the menus")
    parser.add_argument("--query", help="with --by name: group files containing this text")
    parser.add_argument("--list", action="store_true", help="list the files by category and exit")
    parser.add_argument("--config", default=DEFAULT_CONFIG_PATH, help="YAML settings file")
    parser.add_argument("--data-dir", help="directory holding the JSON tables (overrides config)")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="more log output (-vv for debug)")
    return parser.parse_args(argv)


def configure_logging(level_name: str, verbose: int) -> None:
    level = getattr(logging, str(level_name).upper(), logging.WARNING)
    if verbose:
        level = min(level, logging.DEBUG if verbose > 1 else logging.INFO)
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(message)s")


def run_once(args: argparse.Namespace, settings: Settings) -> int:
    try:
        directory = check_directory(os.path.expanduser(args.dir) if args.dir else os.getcwd())
    except DirectoryInvalid as exc:
        print(f"{Fore.RED}Error: {exc}{Style.RESET_ALL}", file=sys.stderr)
        return 2
    if args.list:
        print_lines(render_listing(directory, file_table(directory, settings)))
        return 0
    report = run_mode(args.by, directory, settings, args.query)
    print_lines(render_report(report))
    return 1 if report.skipped else 0


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    if args.query and not args.by:
        args.by = "name"
    config = load_config(args.config)
    configure_logging(config.get("log_level", "WARNING"), args.verbose)
    settings = load_settings(config, args.data_dir)

    colorama.init(autoreset=True)
    try:
        if args.by or args.list:
            return run_once(args, settings)
        main_menu(settings)
    except (EOFError, KeyboardInterrupt):
        print(f"\n{Fore.GREEN}Good Bye{Style.RESET_ALL}")
    finally:
        colorama.deinit()
    return 0


if __name__ == "__main__":  # pragma: no cover - simple CLI entry point
    raise SystemExit(main())
