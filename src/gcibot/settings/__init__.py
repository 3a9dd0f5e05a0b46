"""User settings management for gcibot.

This package provides persistent controller settings that are saved
across sessions.
"""

from gcibot.settings.gci_settings import (
    DEFAULT_CALLSIGN,
    GCISettings,
    get_gci_settings,
    reset_gci_settings,
)

__all__ = [
    "DEFAULT_CALLSIGN",
    "GCISettings",
    "get_gci_settings",
    "reset_gci_settings",
]
