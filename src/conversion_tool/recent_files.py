# conversion_tool/recent_files.py

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

logger = logging.getLogger(__name__)

CONFIG_DIR_ENV = "CONVERSION_TOOL_CONFIG_DIR"
PREFERENCES_FILE = "preferences.yml"

RECENT_FILES_NODE = "conversion_tool.recent_files"
RECENT_FILES_KEY = "RecentFiles"
SEPARATOR = "|"
MAX_RECENT_FILES = 10


def default_preferences_path() -> Path:
    """``$CONVERSION_TOOL_CONFIG_DIR/preferences.yml`` or ``~/.config/conversion-tool/preferences.yml``."""
    base = os.environ.get(CONFIG_DIR_ENV)
    if base:
        return Path(base).expanduser() / PREFERENCES_FILE
    return Path.home() / ".config" / "conversion-tool" / PREFERENCES_FILE


class PreferenceStore:
    """Per-user key/value store kept as a YAML mapping of nodes to string values.

    Every read goes to disk, so two stores on the same file see each
    other's writes.
    """

    def __init__(self, path: Optional[Path] = None) -> None:
        self.path = Path(path) if path is not None else default_preferences_path()

    def _load(self) -> Dict[str, Dict[str, str]]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, ValueError, yaml.YAMLError) as exc:
            logger.warning("Ignoring unreadable preferences %s: %s", self.path, exc)
            return {}
        if not isinstance(data, dict):
            return {}
        return {str(k): v for k, v in data.items() if isinstance(v, dict)}

    def _save(self, data: Dict[str, Any]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            yaml.safe_dump(
                data, f, default_flow_style=False, allow_unicode=True, sort_keys=True
            )

    def get(self, node: str, key: str, default: str = "") -> str:
        value = self._load().get(node, {}).get(key)
        return default if value is None else str(value)

    def put(self, node: str, key: str, value: str) -> None:
        data = self._load()
        data.setdefault(node, {})[key] = value
        self._save(data)


class RecentFilesManager:
    """Most-recently-used list of file paths, capped at ``MAX_RECENT_FILES``."""

    def __init__(self, store: Optional[PreferenceStore] = None) -> None:
        self._store = store if store is not None else PreferenceStore()
        self._recent: List[str] = []
        self._load()

    def _load(self) -> None:
        stored = self._store.get(RECENT_FILES_NODE, RECENT_FILES_KEY, "")
        self._recent = [
            p for p in stored.split(SEPARATOR)
            if p and Path(p).is_file()
        ]

    def _save(self) -> None:
        self._store.put(RECENT_FILES_NODE, RECENT_FILES_KEY, SEPARATOR.join(self._recent))

    def add_recent_file(self, path: str | os.PathLike[str]) -> None:
        """Put ``path`` at the front, dropping any older entry for it."""
        path = os.fspath(path) if path is not None else ""
        if not path:
            return
        if path in self._recent:
            self._recent.remove(path)
        self._recent.insert(0, path)
        del self._recent[MAX_RECENT_FILES:]
        self._save()

    def get_recent_files(self) -> List[str]:
        """Most recent first; paths that no longer exist are skipped."""
        self._load()
        return list(self._recent)

    def clear_recent_files(self) -> None:
        self._recent.clear()
        self._save()

    def has_recent_files(self) -> bool:
        self._load()
        return bool(self._recent)
