"""Callsign decoding.

Pilots say their callsign as a word followed by digits ("Eagle 1",
"Raven one four", "Viper 1-1") or as digits alone. The decoded form is
the lowercase word followed by each digit separated by a space:
"raven 1 4".
"""

from gcibot.parser.vocabulary import Vocabulary


def _decode_leading_digits(token: str, vocabulary: Vocabulary) -> tuple[list[int], bool]:
    """Decode as many digits from the start of a token as possible.

    The whole token is tried first ("niner", "7"), then each character
    on its own, which handles digits spoken without a pause ("14").

    Returns:
        Tuple of (digits, complete). complete is False when decoding
        stopped at a character that is not a digit.
    """
    digit = vocabulary.decode_digit(token)
    if digit is not None:
        return [digit], True
    digits: list[int] = []
    for char in token:
        digit = vocabulary.decode_digit(char)
        if digit is None:
            return digits, False
        digits.append(digit)
    return digits, True


def decode_digits(token: str, vocabulary: Vocabulary) -> list[int] | None:
    """Decode a token made only of digits into those digits.

    Returns:
        Decoded digits in order, or None if the token is not made of digits.
    """
    digits, complete = _decode_leading_digits(token, vocabulary)
    return digits if complete and digits else None


def parse_callsign(segment: str, vocabulary: Vocabulary) -> tuple[str, bool]:
    """Decode a callsign from the words spoken before the request trigger.

    Accepted forms are a single word followed by any number of digits,
    or digits alone. Decoding stops at the first token that is neither
    a digit word nor a run of digit characters; the callsign decoded up
    to that point is returned.

    Args:
        segment: Sanitized text between the wake word and the trigger.
        vocabulary: Digit table to decode with.

    Returns:
        Tuple of (callsign, is_valid). is_valid is True if at least one
        digit was decoded. When False, the callsign is the raw first word
        and should not be used.
    """
    tokens = segment.split()
    if not tokens:
        return "", False

    parts: list[str] = []
    is_valid = False

    first = tokens[0]
    digit = vocabulary.decode_digit(first)
    if digit is not None:
        parts.append(str(digit))
        is_valid = True
    else:
        parts.append(first)

    for token in tokens[1:]:
        digits, complete = _decode_leading_digits(token, vocabulary)
        parts.extend(str(digit) for digit in digits)
        is_valid = is_valid or bool(digits)
        if not complete:
            break

    return " ".join(parts), is_valid
