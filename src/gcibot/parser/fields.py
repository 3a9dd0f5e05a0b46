"""Field readers for request grammars.

Each reader consumes tokens from a TokenCursor and returns the decoded
value, or None when the tokens do not fit the field. Readers may leave
the cursor partway through a field on failure; a failed field fails
the whole request, so the cursor is not reused.
"""

from gcibot.parser.callsign import decode_digits
from gcibot.parser.tokens import TokenCursor
from gcibot.parser.vocabulary import Vocabulary

BEARING_DIGITS = 3
ANGELS_WORD = "angels"
THOUSAND_WORD = "thousand"
BULLSEYE_WORD = "bullseye"


def read_bearing(cursor: TokenCursor, vocabulary: Vocabulary) -> int | None:
    """Read a bearing spoken as three digits.

    The digits may be separate tokens ("2 7 0", "two seven zero",
    "tree six zero") or run together ("270").

    Returns:
        Bearing in degrees, 0-359. 360 is read as north (0).
    """
    digits: list[int] = []
    while len(digits) < BEARING_DIGITS:
        token = cursor.next()
        if token is None:
            return None
        decoded = decode_digits(token, vocabulary)
        if decoded is None:
            return None
        digits.extend(decoded)

    if len(digits) != BEARING_DIGITS:
        return None

    bearing = digits[0] * 100 + digits[1] * 10 + digits[2]
    if bearing > 360:
        return None
    return bearing % 360


def is_number(token: str | None, vocabulary: Vocabulary) -> bool:
    """Check whether a token reads as a whole number."""
    if token is None:
        return False
    return token.isdecimal() or vocabulary.decode_digit(token) is not None


def read_number(cursor: TokenCursor, vocabulary: Vocabulary) -> int | None:
    """Read a non-negative whole number.

    A multi-digit token ("26") is a number on its own. A number spoken
    digit by digit ("2 6", "two six", "fife zero") is read up to the
    first token that is not a single digit.
    """
    token = cursor.next()
    if token is None:
        return None
    if token.isdecimal() and len(token) > 1:
        return int(token)

    number = vocabulary.decode_digit(token)
    if number is None:
        return None
    while (token := cursor.peek()) is not None:
        digit = vocabulary.decode_digit(token)
        if digit is None:
            break
        cursor.next()
        number = number * 10 + digit
    return number


def read_altitude(cursor: TokenCursor, vocabulary: Vocabulary) -> int | None:
    """Read an altitude in feet.

    Accepts a plain number of feet ("20000"), a number of thousands
    ("20 thousand", "one two thousand") or angels ("angels 20",
    "angels two five"). The number may be spoken digit by digit.
    """
    if cursor.peek() == ANGELS_WORD:
        cursor.next()
        angels = read_number(cursor, vocabulary)
        return angels * 1000 if angels is not None else None

    altitude = read_number(cursor, vocabulary)
    if altitude is None:
        return None
    if cursor.peek() == THOUSAND_WORD:
        cursor.next()
        altitude *= 1000
    return altitude


def read_keyword(cursor: TokenCursor, keyword: str) -> bool:
    """Consume the next token if it equals keyword."""
    if cursor.peek() == keyword:
        cursor.next()
        return True
    return False
