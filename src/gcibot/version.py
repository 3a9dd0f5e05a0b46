"""Version information for gcibot.

This module provides version information read from the VERSION file
in the project root, with fallback for packaged distributions.
"""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)

# Version info
__version__ = "0.1.0"  # Fallback version
__license__ = "MIT"


def get_version() -> str:
    """Get the current version string.

    Reads from VERSION file in project root or falls back to __version__.

    Returns:
        Version string (e.g., "0.1.0").
    """
    version_paths = [
        Path(__file__).parent.parent.parent / "VERSION",  # src/gcibot -> root
        Path("VERSION"),
    ]

    for version_path in version_paths:
        if version_path.exists():
            try:
                return version_path.read_text().strip()
            except OSError as e:
                logger.debug("Could not read %s: %s", version_path, e)

    return __version__
