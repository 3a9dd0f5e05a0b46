"""GCI bot settings management.

This module manages the controller settings used to build a parser:
the controller's callsign (its wake word), an optional custom
vocabulary file and the log level of the command-line tools.

Settings are stored in ~/.gcibot/settings.json under the "gci" key.

Typical usage:
    from gcibot.settings import get_gci_settings

    settings = get_gci_settings()
    settings.set_callsign("magic")
    settings.save()
"""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

DEFAULT_CALLSIGN = "magic"
DEFAULT_LOG_LEVEL = "INFO"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass
class GCISettings:
    """GCI controller settings with persistence.

    Attributes:
        callsign: Controller callsign, a single word.
        vocabulary_path: Path to a custom vocabulary YAML, empty for the
            packaged vocabulary.
        log_level: Root log level for the command-line tools.
    """

    callsign: str = DEFAULT_CALLSIGN
    vocabulary_path: str = ""
    log_level: str = DEFAULT_LOG_LEVEL
    _settings_path: Path = field(
        default_factory=lambda: Path.home() / ".gcibot" / "settings.json"
    )
    _dirty: bool = field(default=False, repr=False)

    def set_callsign(self, callsign: str) -> None:
        """Set the controller callsign.

        Args:
            callsign: Single-word callsign (e.g., "magic", "overlord").

        Raises:
            ValueError: If the callsign is empty or has several words.
        """
        words = callsign.split()
        if len(words) != 1:
            raise ValueError(f"Controller callsign must be a single word, got {callsign!r}")
        self.callsign = words[0].lower()
        self._dirty = True

    def set_vocabulary_path(self, path: str | Path) -> None:
        """Set a custom vocabulary file, or "" for the packaged one."""
        self.vocabulary_path = str(path)
        self._dirty = True

    def set_log_level(self, level: str) -> None:
        """Set the log level.

        Args:
            level: One of DEBUG, INFO, WARNING, ERROR. Unknown levels are ignored.
        """
        if level.upper() in LOG_LEVELS:
            self.log_level = level.upper()
            self._dirty = True

    def load(self, path: Path | str | None = None) -> bool:
        """Load settings from file.

        Args:
            path: Optional path to settings file.
                 Defaults to ~/.gcibot/settings.json.

        Returns:
            True if loaded successfully, False otherwise.
        """
        if path is not None:
            self._settings_path = Path(path)

        if not self._settings_path.exists():
            logger.info("No settings file found, using GCI defaults")
            return False

        try:
            with open(self._settings_path, encoding="utf-8") as f:
                data = json.load(f)

            gci_data = data.get("gci", {})
            self.callsign = gci_data.get("callsign", DEFAULT_CALLSIGN)
            self.vocabulary_path = gci_data.get("vocabulary_path", "")
            self.log_level = gci_data.get("log_level", DEFAULT_LOG_LEVEL)

            self._dirty = False
            logger.info("Loaded GCI settings from %s", self._settings_path)
            return True

        except (OSError, json.JSONDecodeError, AttributeError) as e:
            logger.error("Failed to load GCI settings: %s", e)
            return False

    def save(self, path: Path | str | None = None) -> bool:
        """Save settings to file.

        Other top-level sections of the file are preserved.

        Args:
            path: Optional path to settings file.
                 Defaults to ~/.gcibot/settings.json.

        Returns:
            True if saved successfully, False otherwise.
        """
        if path is not None:
            self._settings_path = Path(path)

        try:
            self._settings_path.parent.mkdir(parents=True, exist_ok=True)

            existing_data: dict[str, Any] = {}
            if self._settings_path.exists():
                with open(self._settings_path, encoding="utf-8") as f:
                    existing_data = json.load(f)

            existing_data["gci"] = self.to_dict()

            with open(self._settings_path, "w", encoding="utf-8") as f:
                json.dump(existing_data, f, indent=2)

            self._dirty = False
            logger.info("Saved GCI settings to %s", self._settings_path)
            return True

        except (OSError, json.JSONDecodeError) as e:
            logger.error("Failed to save GCI settings: %s", e)
            return False

    @property
    def is_dirty(self) -> bool:
        """Check if settings have unsaved changes."""
        return self._dirty

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization.

        Returns:
            Dictionary representation of settings.
        """
        return {
            "callsign": self.callsign,
            "vocabulary_path": self.vocabulary_path,
            "log_level": self.log_level,
        }


# Global singleton instance
_global_settings: GCISettings | None = None


def get_gci_settings() -> GCISettings:
    """Get the global GCI settings singleton.

    Loads settings from disk on first access.

    Returns:
        GCISettings instance.
    """
    global _global_settings
    if _global_settings is None:
        _global_settings = GCISettings()
        _global_settings.load()
    return _global_settings


def reset_gci_settings() -> None:
    """Reset the global GCI settings singleton.

    Forces reload on next access.
    """
    global _global_settings
    _global_settings = None
