"""Transmission parser.

Turns a transcribed pilot transmission into a typed GCI request.

A transmission is read as:

    <wake word> <callsign> <trigger> <fields>

where the wake word is the controller's callsign or the universal alias
("anyface"), the callsign is a word and/or digits, the trigger is one
of the vocabulary's trigger phrases, and the fields depend on the
trigger. For example "Anyface, Eagle 1, spiked 2-7-0" is a SPIKED
request from "eagle 1" with bearing 270.

Typical usage:
    parser = Parser("magic")
    request, ok = parser.parse("Magic, Viper 1-1, bogey dope fighters")
    if ok:
        print(request.to_dict())
"""

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from gcibot.brevity.requests import (
    BRA,
    AlphaCheckRequest,
    BogeyDopeRequest,
    ContactCategory,
    DeclareRequest,
    PictureRequest,
    RadioCheckRequest,
    Request,
    SnaplockRequest,
    SpikedRequest,
)
from gcibot.core.logging_system import get_logger
from gcibot.parser.callsign import parse_callsign
from gcibot.parser.fields import (
    BULLSEYE_WORD,
    is_number,
    read_altitude,
    read_bearing,
    read_keyword,
    read_number,
)
from gcibot.parser.sanitizer import sanitize
from gcibot.parser.tokens import TokenCursor
from gcibot.parser.vocabulary import RequestWord, Vocabulary, load_vocabulary
from gcibot.settings.gci_settings import GCISettings

logger = get_logger(__name__)

# Tokens discarded between the trigger and the request fields. Field
# reading starts right after the trigger ("spiked 2 7 0"), so none are.
SEPARATOR_SKIP = 0


class ParseFailure(Enum):
    """Why a transmission could not be turned into a request."""

    # Wake word is neither our callsign nor the universal alias
    NOT_ADDRESSED = "not_addressed"
    # Transmission ended before any trigger phrase
    NO_TRIGGER = "no_trigger"
    # No digit could be decoded from the callsign
    INVALID_CALLSIGN = "invalid_callsign"
    # Fields after the trigger do not fit the request's grammar
    INVALID_REQUEST = "invalid_request"


@dataclass(frozen=True)
class ParseResult:
    """Outcome of parsing one transmission.

    Attributes:
        request: Parsed request, None on failure.
        failure: Failure reason, None on success.
        callsign: Decoded callsign when parsing got that far.
    """

    request: Request | None = None
    failure: ParseFailure | None = None
    callsign: str = ""

    @property
    def ok(self) -> bool:
        return self.request is not None

    @classmethod
    def failed(cls, failure: ParseFailure, callsign: str = "") -> "ParseResult":
        return cls(failure=failure, callsign=callsign)


class Parser:
    """Parser for transmissions addressed to one controller.

    The parser holds only its controller callsign and an immutable
    vocabulary, so one instance can serve concurrent callers.
    """

    def __init__(self, callsign: str, vocabulary: Vocabulary | None = None) -> None:
        """Initialize the parser.

        Args:
            callsign: The controller's own callsign, used as a wake word.
            vocabulary: Radio vocabulary, defaults to the packaged one.

        Raises:
            ValueError: If the callsign is not a single word.
        """
        wake_words = sanitize(callsign).split()
        if len(wake_words) != 1:
            raise ValueError(f"Controller callsign must be a single word, got {callsign!r}")

        self._callsign = wake_words[0]
        self._vocabulary = vocabulary if vocabulary is not None else load_vocabulary()
        self._request_parsers: dict[RequestWord, Callable[[str, TokenCursor], Request | None]] = {
            RequestWord.ALPHA_CHECK: self._parse_alpha_check,
            RequestWord.BOGEY_DOPE: self._parse_bogey_dope,
            RequestWord.DECLARE: self._parse_declare,
            RequestWord.PICTURE: self._parse_picture,
            RequestWord.RADIO_CHECK: self._parse_radio_check,
            RequestWord.SPIKED: self._parse_spiked,
            RequestWord.SNAPLOCK: self._parse_snaplock,
        }

    @classmethod
    def from_settings(cls, settings: GCISettings) -> "Parser":
        """Create a parser from user settings.

        Args:
            settings: Settings providing the controller callsign and
                optional vocabulary file.

        Returns:
            Parser instance.
        """
        vocabulary = load_vocabulary(settings.vocabulary_path or None)
        return cls(settings.callsign, vocabulary)

    @property
    def callsign(self) -> str:
        """Controller callsign in sanitized form."""
        return self._callsign

    @property
    def vocabulary(self) -> Vocabulary:
        return self._vocabulary

    def parse(self, text: str) -> tuple[Request | None, bool]:
        """Parse a transmission into a request.

        Args:
            text: Transcribed transmission.

        Returns:
            Tuple of (request, ok). When ok is False the request is None
            and the transmission should be ignored or answered with a
            request to repeat.
        """
        result = self.parse_detailed(text)
        return result.request, result.ok

    def parse_detailed(self, text: str) -> ParseResult:
        """Parse a transmission, keeping the reason of a failure.

        Args:
            text: Transcribed transmission.

        Returns:
            ParseResult with either a request or a failure reason.
        """
        cursor = TokenCursor(sanitize(text))

        if not self._read_wake_word(cursor):
            logger.debug("Transmission not addressed to %s: %r", self._callsign, text)
            return ParseResult.failed(ParseFailure.NOT_ADDRESSED)

        match = self._scan_trigger(cursor)
        if match is None:
            logger.debug("No request trigger in transmission: %r", text)
            return ParseResult.failed(ParseFailure.NO_TRIGGER)
        request_word, segment = match

        callsign, is_valid = parse_callsign(segment, self._vocabulary)
        if not is_valid:
            logger.debug("Could not decode callsign from %r in %r", segment, text)
            return ParseResult.failed(ParseFailure.INVALID_CALLSIGN)

        cursor.skip(SEPARATOR_SKIP)

        request = self._request_parsers[request_word](callsign, cursor)
        if request is None:
            logger.debug(
                "Invalid %s request from %s: %r", request_word.value, callsign, text
            )
            return ParseResult.failed(ParseFailure.INVALID_REQUEST, callsign)

        logger.info("Parsed %s request from %s", request.request_type.value, callsign)
        return ParseResult(request=request, callsign=callsign)

    def _read_wake_word(self, cursor: TokenCursor) -> bool:
        """Check that the transmission opens with a wake word."""
        token = cursor.next()
        return token is not None and token in (self._callsign, self._vocabulary.universal_alias)

    def _scan_trigger(self, cursor: TokenCursor) -> tuple[RequestWord, str] | None:
        """Read tokens until the text read so far ends with a trigger phrase.

        Longer phrases are tried before shorter ones so a phrase that ends
        with another trigger is never shadowed by it.

        Returns:
            Tuple of (request word, callsign segment), or None if the
            transmission ends first.
        """
        scanned: list[str] = []
        while (token := cursor.next()) is not None:
            scanned.append(token)
            for phrase in self._vocabulary.triggers:
                length = len(phrase.tokens)
                if len(scanned) >= length and tuple(scanned[-length:]) == phrase.tokens:
                    return phrase.request_word, " ".join(scanned[:-length])
        return None

    def _parse_alpha_check(self, callsign: str, cursor: TokenCursor) -> Request | None:
        return AlphaCheckRequest(callsign=callsign)

    def _parse_radio_check(self, callsign: str, cursor: TokenCursor) -> Request | None:
        return RadioCheckRequest(callsign=callsign)

    def _parse_spiked(self, callsign: str, cursor: TokenCursor) -> Request | None:
        bearing = read_bearing(cursor, self._vocabulary)
        if bearing is None:
            return None
        return SpikedRequest(callsign=callsign, bearing=bearing)

    def _parse_bogey_dope(self, callsign: str, cursor: TokenCursor) -> Request | None:
        token = cursor.peek()
        category = self._vocabulary.decode_category(token) if token is not None else None
        return BogeyDopeRequest(callsign=callsign, filter=category or ContactCategory.EVERYTHING)

    def _parse_picture(self, callsign: str, cursor: TokenCursor) -> Request | None:
        if not is_number(cursor.peek(), self._vocabulary):
            return PictureRequest(callsign=callsign)
        return PictureRequest(callsign=callsign, radius=read_number(cursor, self._vocabulary))

    def _parse_declare(self, callsign: str, cursor: TokenCursor) -> Request | None:
        is_bullseye = read_keyword(cursor, BULLSEYE_WORD)
        bra = self._read_bra(cursor)
        if bra is None:
            return None
        return DeclareRequest(callsign=callsign, bra=bra, is_bullseye=is_bullseye)

    def _parse_snaplock(self, callsign: str, cursor: TokenCursor) -> Request | None:
        bra = self._read_bra(cursor)
        if bra is None:
            return None
        return SnaplockRequest(callsign=callsign, bra=bra)

    def _read_bra(self, cursor: TokenCursor) -> BRA | None:
        """Read bearing, range and altitude in that order.

        The altitude must end the transmission; leftover tokens mean the
        fields were split differently than spoken.
        """
        bearing = read_bearing(cursor, self._vocabulary)
        if bearing is None:
            return None
        range_ = read_number(cursor, self._vocabulary)
        if range_ is None:
            return None
        altitude = read_altitude(cursor, self._vocabulary)
        if altitude is None or not cursor.exhausted:
            return None
        return BRA(bearing=bearing, range=range_, altitude=altitude)
