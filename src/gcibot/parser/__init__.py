"""Transmission parsing.

Converts transcribed pilot transmissions into typed GCI requests.
"""

from gcibot.parser.callsign import parse_callsign
from gcibot.parser.parser import ParseFailure, Parser, ParseResult
from gcibot.parser.sanitizer import sanitize
from gcibot.parser.vocabulary import (
    RequestWord,
    Vocabulary,
    VocabularyError,
    load_vocabulary,
)

__all__ = [
    "ParseFailure",
    "ParseResult",
    "Parser",
    "RequestWord",
    "Vocabulary",
    "VocabularyError",
    "load_vocabulary",
    "parse_callsign",
    "sanitize",
]
