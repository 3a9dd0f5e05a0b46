"""Radio network types shared with the telemetry side."""

from gcibot.radio.coalition import Coalition, is_non_participant

__all__ = ["Coalition", "is_non_participant"]
