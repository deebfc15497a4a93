# pricetick/config/settings.py
# -*- coding: utf-8 -*-
"""
Persistent settings manager for PriceTick.

Features:
  - Loads/saves a small JSON file with user preferences and window state.
  - Works both in development and when frozen with PyInstaller.
  - Typed helpers validate/clamp values and fall back to defaults.
"""

from __future__ import annotations
import json
import logging
import os
import sys
from decimal import Decimal
from typing import Any, Dict, Optional, Tuple

from pricetick.config import constants as C
from pricetick.core.differ import (
    STRUCTURAL_FALLBACK,
    STRUCTURAL_POLICIES,
    UNCHANGED_NONE,
    UNCHANGED_POLICIES,
)
from pricetick.core.errors import FormatError
from pricetick.utils.price import to_decimal

logger = logging.getLogger(__name__)


def _app_dir() -> str:
    """
    Return a writable directory to keep user settings:
      - If frozen by PyInstaller: next to the executable.
      - Else: current working directory.
    """
    if getattr(sys, "frozen", False) and hasattr(sys, "_MEIPASS"):
        return os.path.dirname(sys.executable)
    return os.getcwd()


def _settings_path() -> str:
    """Absolute path to the JSON settings file."""
    return os.path.join(_app_dir(), C.SETTINGS_FILE)


class SettingsManager:
    """Manages application settings, loading from and saving to a JSON file."""

    def __init__(self, path: Optional[str] = None) -> None:
        # Defaults are minimal and safe; unknown keys in file are preserved on load.
        self.default_settings: Dict[str, Any] = {
            # UI / Theme
            "theme": "dark",
            "window_position": list(C.WIN_POS),   # [x, y]

            # Ticker
            "initial_price": C.INITIAL_PRICE,
            "increment": C.INCREMENT,
            "highlight_ms": C.HIGHLIGHT_MS,
            "unchanged_policy": UNCHANGED_NONE,
            "structural_policy": STRUCTURAL_FALLBACK,

            # Live feed
            "feed_url": C.FEED_URL,
            "feed_amount_path": C.FEED_AMOUNT_PATH,
            "feed_interval_ms": C.FEED_INTERVAL_MS,

            # Diagnostics
            "log_level": C.LOG_LEVEL,
        }
        self._path = path or _settings_path()
        self.settings: Dict[str, Any] = self.load_settings()

    @property
    def path(self) -> str:
        return self._path

    # ---------- load/save ----------
    def load_settings(self) -> Dict[str, Any]:
        """Load settings from disk and overlay onto defaults. Never raises."""
        path = self._path
        if os.path.exists(path):
            try:
                with open(path, "r", encoding="utf-8") as f:
                    loaded = json.load(f)
                if isinstance(loaded, dict):
                    return {**self.default_settings, **loaded}
                logger.warning("Ignoring settings file %s: not a JSON object", path)
            except (OSError, json.JSONDecodeError) as e:
                logger.warning("Could not read settings from %s: %s", path, e)
        return self.default_settings.copy()

    def save_settings(self) -> None:
        """Persist current settings to disk. Best-effort; failures are logged."""
        try:
            with open(self._path, "w", encoding="utf-8") as f:
                json.dump(self.settings, f, indent=2, ensure_ascii=False)
        except OSError as e:
            logger.warning("Could not save settings to %s: %s", self._path, e)

    # ---------- generic API ----------
    def get(self, key: str, default: Any = None) -> Any:
        """Get a setting, returning default if missing."""
        return self.settings.get(key, default)

    def set(self, key: str, value: Any) -> None:
        """Set a setting and save immediately."""
        self.settings[key] = value
        self.save_settings()

    def _decimal(self, key: str) -> Decimal:
        try:
            d = to_decimal(self.settings.get(key, self.default_settings[key]))
            if d >= 0:
                return d
        except FormatError:
            pass
        return to_decimal(self.default_settings[key])

    def _int(self, key: str, minimum: int) -> int:
        try:
            return max(minimum, int(self.settings.get(key, self.default_settings[key])))
        except (TypeError, ValueError):
            return int(self.default_settings[key])

    def _choice(self, key: str, choices: Tuple[str, ...]) -> str:
        v = str(self.settings.get(key, "")).strip().lower()
        return v if v in choices else str(self.default_settings[key])

    # ---------- helpers: theme ----------
    def theme_name(self) -> str:
        """Return the current theme name."""
        return str(self.settings.get("theme", self.default_settings["theme"]))

    def set_theme_name(self, name: str) -> None:
        """Set and persist the theme name."""
        self.set("theme", str(name or "dark"))

    # ---------- helpers: window ----------
    def window_position(self) -> Tuple[int, int]:
        """Return (x, y) of the window."""
        try:
            x, y = self.settings.get("window_position", list(C.WIN_POS))[:2]
            return int(x), int(y)
        except (TypeError, ValueError):
            return C.WIN_POS

    def set_window_position(self, x: int, y: int) -> None:
        self.set("window_position", [int(x), int(y)])

    # ---------- helpers: ticker ----------
    def initial_price(self) -> Decimal:
        return self._decimal("initial_price")

    def increment(self) -> Decimal:
        return self._decimal("increment")

    def highlight_ms(self) -> int:
        return self._int("highlight_ms", C.MIN_HIGHLIGHT_MS)

    def unchanged_policy(self) -> str:
        return self._choice("unchanged_policy", UNCHANGED_POLICIES)

    def structural_policy(self) -> str:
        return self._choice("structural_policy", STRUCTURAL_POLICIES)

    # ---------- helpers: feed ----------
    def feed_url(self) -> str:
        return str(self.settings.get("feed_url") or C.FEED_URL)

    def feed_amount_path(self) -> str:
        return str(self.settings.get("feed_amount_path") or C.FEED_AMOUNT_PATH)

    def feed_interval_ms(self) -> int:
        return self._int("feed_interval_ms", C.MIN_FEED_INTERVAL_MS)

    # ---------- helpers: diagnostics ----------
    def log_level(self) -> str:
        level = str(self.settings.get("log_level") or C.LOG_LEVEL).upper()
        return level if level in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL") else C.LOG_LEVEL
