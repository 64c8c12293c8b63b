"""Configuration for the organizer.

Settings come from ``config.yaml``; the three lookup tables (stop words,
extension categories and dangerous extensions) come from JSON files under
``data/``. Every loader falls back to a built-in default when its file is
missing or unreadable, so nothing here ever fails the caller.
"""

import logging
import os
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, FrozenSet, Mapping, Optional, Tuple

import yaml


DEFAULT_CONFIG_PATH = "config.yaml"

DEFAULTS = {
    "data_dir": "data",
    "log_level": "WARNING",
    "min_token_length": 4,
    "max_groups": 10,
    "min_group_size": 2,
}

STOP_WORDS_FILE = "ignoreTokens.json"
STOP_WORDS_KEY = "ignoreTokens"
FILE_TYPES_FILE = "filetypes.json"
DANGEROUS_FILE = "dangerousExts.json"
DANGEROUS_KEY = "dangerousExtensions"

OTHER_CATEGORY = "Other"

DEFAULT_STOP_WORDS = [
    "official", "lyrics", "video", "audio", "hd", "remix", "mv", "live",
    "youtube", "ft", "feat", "2025", "720p", "1080", "1080p", "best", "song",
    "songs", "360p", "featuring", "www", "com", "net", "org", "sample",
    "256k", "season", "episode", "lyric", "music",
]

DEFAULT_FILE_TYPES = {
    "Images": [".jpg", ".jpeg", ".png", ".gif", ".bmp", ".tiff", ".webp",
               ".heic", ".heif", ".svg", ".ico", ".jfif", ".raw", ".arw",
               ".cr2", ".nef", ".orf", ".dng"],
    "Videos": [".mp4", ".mov", ".avi", ".mkv", ".wmv", ".flv", ".webm",
               ".mpeg", ".mpg", ".3gp", ".m4v", ".ts", ".mts", ".vob"],
    "Audio": [".mp3", ".wav", ".flac", ".aac", ".ogg", ".wma", ".m4a",
              ".opus", ".aiff", ".mid", ".midi"],
    "Documents": [".pdf", ".doc", ".docx", ".txt", ".rtf", ".odt", ".csv",
                  ".xlsx", ".xls", ".ppt", ".pptx", ".epub", ".md", ".tex",
                  ".pages", ".numbers", ".key"],
    "Archives": [".zip", ".rar", ".7z", ".tar", ".gz", ".bz2", ".xz", ".iso",
                 ".dmg", ".tgz", ".cab"],
    "Code": [".py", ".js", ".html", ".css", ".c", ".cpp", ".h", ".hpp",
             ".java", ".sh", ".ts", ".php", ".rb", ".go", ".swift", ".kt",
             ".rs", ".lua", ".sql", ".json", ".xml", ".yml", ".yaml", ".cs",
             ".vb", ".pl", ".asm", ".bat", ".cmd"],
    "Fonts": [".ttf", ".otf", ".woff", ".woff2", ".eot", ".fon"],
    "3D_Models": [".obj", ".fbx", ".stl", ".blend", ".3ds", ".dae", ".ply",
                  ".gltf", ".glb"],
    "Subtitles": [".srt", ".vtt", ".ass", ".ssa", ".sub"],
    "Configs": [".ini", ".cfg", ".conf", ".jsonc", ".toml", ".env",
                ".properties"],
    "DiskImages": [".iso", ".img", ".vhd", ".vhdx", ".vdi", ".vmdk"],
    "Packages": [".deb", ".rpm", ".apk", ".jar", ".whl", ".gem", ".msi"],
    "Other": [],
}

# Executable, script and macro-enabled formats.
DEFAULT_DANGEROUS_EXTS = [
    ".exe", ".dll", ".com", ".msi", ".bin", ".sys",
    ".bat", ".cmd", ".vbs", ".js", ".jse", ".wsf", ".wsh",
    ".ps1", ".psm1", ".sh", ".bash", ".zsh",
    ".lnk", ".inf", ".msu", ".msp",
    ".docm", ".xlsm", ".pptm",
    ".scr", ".pif", ".jar", ".reg",
]


class ConfigLoadError(Exception):
    """A configuration or data file could not be used."""


@dataclass(frozen=True)
class Settings:
    """Everything the organizer core needs, loaded once at start-up."""

    stop_words: FrozenSet[str]
    categories: Mapping[str, Tuple[str, ...]]
    dangerous_exts: FrozenSet[str]
    min_token_length: int = 4
    max_groups: int = 10
    min_group_size: int = 2


def load_config(path: str = DEFAULT_CONFIG_PATH) -> Dict[str, Any]:
    """Read ``config.yaml`` merged over :data:`DEFAULTS`."""
    config = dict(DEFAULTS)
    if not path or not os.path.exists(path):
        return config
    try:
        with open(path, "r", encoding="utf-8") as fh:
            loaded = yaml.safe_load(fh) or {}
        if not isinstance(loaded, dict):
            raise ConfigLoadError(f"{path} does not contain a mapping")
    except (OSError, yaml.YAMLError, ConfigLoadError) as exc:
        logging.warning("Failed to read config %s: %s; using defaults", path, exc)
        return config
    config.update(loaded)
    return config


def _read_data_file(path: str) -> Any:
    # JSON is a subset of YAML, so one parser serves both formats.
    try:
        with open(path, "r", encoding="utf-8") as fh:
            return yaml.safe_load(fh)
    except OSError as exc:
        raise ConfigLoadError(f"could not open {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigLoadError(f"invalid data in {path}: {exc}") from exc


def _string_list(value: Any, path: str) -> list:
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ConfigLoadError(f"{path} must hold a list of strings")
    return [v.lower() for v in value]


def load_stop_words(data_dir: str) -> FrozenSet[str]:
    """Return the lowercased stop-word set from ``ignoreTokens.json``."""
    path = os.path.join(data_dir, STOP_WORDS_FILE)
    try:
        data = _read_data_file(path)
        if not isinstance(data, dict) or STOP_WORDS_KEY not in data:
            raise ConfigLoadError(f"{path} is missing '{STOP_WORDS_KEY}'")
        return frozenset(_string_list(data[STOP_WORDS_KEY], path))
    except ConfigLoadError as exc:
        logging.info("%s; using default ignore tokens", exc)
        return frozenset(DEFAULT_STOP_WORDS)


def load_category_table(data_dir: str) -> Mapping[str, Tuple[str, ...]]:
    """Return category -> extensions from ``filetypes.json``."""
    path = os.path.join(data_dir, FILE_TYPES_FILE)
    try:
        data = _read_data_file(path)
        if not isinstance(data, dict):
            raise ConfigLoadError(f"{path} must map categories to extensions")
        table = {
            str(category): tuple(_string_list(exts, path))
            for category, exts in data.items()
        }
    except ConfigLoadError as exc:
        logging.warning("%s; using fallback file types", exc)
        table = {k: tuple(v) for k, v in DEFAULT_FILE_TYPES.items()}
    return MappingProxyType(table)


def load_dangerous_exts(data_dir: str) -> FrozenSet[str]:
    """Return the extensions that by-type moves always leave alone."""
    path = os.path.join(data_dir, DANGEROUS_FILE)
    try:
        data = _read_data_file(path)
        if not isinstance(data, dict) or DANGEROUS_KEY not in data:
            raise ConfigLoadError(f"{path} is missing '{DANGEROUS_KEY}'")
        return frozenset(_string_list(data[DANGEROUS_KEY], path))
    except ConfigLoadError as exc:
        logging.warning("%s; using fallback dangerous extensions", exc)
        return frozenset(DEFAULT_DANGEROUS_EXTS)


# Smallest accepted value of each numeric setting.
MINIMUMS = {
    "min_token_length": 1,
    "max_groups": 1,
    "min_group_size": 2,
}


def _int_setting(config: Dict[str, Any], key: str) -> int:
    raw = config.get(key, DEFAULTS[key])
    try:
        value = int(raw)
    except (TypeError, ValueError):
        value = None
    if isinstance(raw, bool) or value is None or value < MINIMUMS[key]:
        logging.warning("Invalid %s %r in config; using %s", key, raw, DEFAULTS[key])
        return DEFAULTS[key]
    return value


def load_settings(config: Dict[str, Any], data_dir: Optional[str] = None) -> Settings:
    """Build :class:`Settings` from a loaded config mapping.

    ``data_dir`` overrides the ``data_dir`` key of the config.
    """
    data_dir = data_dir or config.get("data_dir") or DEFAULTS["data_dir"]
    return Settings(
        stop_words=load_stop_words(data_dir),
        categories=load_category_table(data_dir),
        dangerous_exts=load_dangerous_exts(data_dir),
        min_token_length=_int_setting(config, "min_token_length"),
        max_groups=_int_setting(config, "max_groups"),
        min_group_size=_int_setting(config, "min_group_size"),
    )


def default_settings() -> Settings:
    """Settings built purely from the built-in fallbacks."""
    return Settings(
        stop_words=frozenset(DEFAULT_STOP_WORDS),
        categories=MappingProxyType({k: tuple(v) for k, v in DEFAULT_FILE_TYPES.items()}),
        dangerous_exts=frozenset(DEFAULT_DANGEROUS_EXTS),
    )
