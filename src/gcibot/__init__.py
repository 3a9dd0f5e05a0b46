"""gcibot - radio call parsing and brevity helpers for a GCI bot.

Converts free-form pilot transmissions into typed GCI requests and
summarizes contact altitudes into STACKS.

Typical usage:
    from gcibot.parser import Parser

    parser = Parser("magic")
    request, ok = parser.parse("Anyface, Eagle 1, spiked 2-7-0")
"""

from gcibot.version import __version__

__all__ = ["__version__"]
