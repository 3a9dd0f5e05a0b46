"""Coalition identifiers.

The values of the two teams are fixed by the telemetry feed. Any other
value, including 0 and values above 2, is a spectator or other
non-participant.
"""

from enum import IntEnum


class Coalition(IntEnum):
    """The two participating coalitions."""

    RED = 1
    BLUE = 2


def is_non_participant(coalition: int) -> bool:
    """Check whether a coalition value belongs to neither team.

    Args:
        coalition: Raw coalition value from the telemetry feed.

    Returns:
        True unless the value is Coalition.RED or Coalition.BLUE.
    """
    return coalition not in (Coalition.RED, Coalition.BLUE)
