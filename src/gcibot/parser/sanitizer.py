"""Transmission text normalization.

Transcribed transmissions arrive with mixed case, punctuation
("2-7-0", "Raven 1-4,") and numbers spelled out in words. sanitize()
turns them into lowercase, punctuation-free text in which English
cardinal numbers are written as digits, ready to be split on
whitespace.
"""

import re
import unicodedata
from itertools import groupby

UNITS: dict[str, int] = {
    "zero": 0,
    "one": 1,
    "two": 2,
    "three": 3,
    "four": 4,
    "five": 5,
    "six": 6,
    "seven": 7,
    "eight": 8,
    "nine": 9,
}

TEENS: dict[str, int] = {
    "ten": 10,
    "eleven": 11,
    "twelve": 12,
    "thirteen": 13,
    "fourteen": 14,
    "fifteen": 15,
    "sixteen": 16,
    "seventeen": 17,
    "eighteen": 18,
    "nineteen": 19,
}

TENS: dict[str, int] = {
    "twenty": 20,
    "thirty": 30,
    "forty": 40,
    "fifty": 50,
    "sixty": 60,
    "seventy": 70,
    "eighty": 80,
    "ninety": 90,
}

SCALES: dict[str, int] = {
    "hundred": 100,
    "thousand": 1000,
}

NUMBER_WORDS = {**UNITS, **TEENS, **TENS, **SCALES}

# Longest words first so "seventeen" is not read as "seven"
_NUMBER_ALTERNATION = "|".join(sorted(NUMBER_WORDS, key=len, reverse=True))
NUMBER_RUN_PATTERN = re.compile(rf"\b(?:{_NUMBER_ALTERNATION})(?:\s+(?:{_NUMBER_ALTERNATION}))*\b")


def _is_punctuation(char: str) -> bool:
    # Unicode punctuation categories (Pc, Pd, Ps, Pe, Pi, Pf, Po)
    return unicodedata.category(char).startswith("P")


def replace_punctuation(text: str) -> str:
    """Replace every run of punctuation characters with a single space.

    Symbols such as "+" or "$" are not punctuation and are kept.
    """
    return "".join(
        " " if is_punct else "".join(chars) for is_punct, chars in groupby(text, _is_punctuation)
    )


def _is_single_digit(group: list[str]) -> bool:
    return len(group) == 1 and group[0] in UNITS


def _continues_group(groups: list[list[str]], word: str) -> bool:
    """Check whether word extends the last number group.

    "twenty seven" and "two hundred" form one number; "two seven" is
    two separately spoken digits. After two or more separate digits a
    scale word applies to the whole run ("one two thousand" is 12
    thousand), so it does not join the last digit alone.
    """
    if not groups:
        return False
    previous = groups[-1][-1]
    if word in SCALES:
        if previous == "zero":
            return False
        if len(groups) > 1 and _is_single_digit(groups[-1]) and _is_single_digit(groups[-2]):
            return False
        return previous not in SCALES or (previous == "hundred" and word == "thousand")
    if word in UNITS:
        return word != "zero" and (previous in TENS or previous in SCALES)
    return previous in SCALES


def _compose(words: list[str]) -> int:
    total = 0
    # None until a number word is read, so a bare scale counts as one of it
    current: int | None = None
    for word in words:
        if word == "hundred":
            current = (1 if current is None else current) * 100
        elif word == "thousand":
            total += (1 if current is None else current) * 1000
            current = None
        else:
            current = (current or 0) + NUMBER_WORDS[word]
    return total + (current or 0)


def expand_number_words(text: str) -> str:
    """Replace spelled-out numbers with digits.

    Args:
        text: Lowercase text.

    Returns:
        Text with each number written in digits, e.g. "two seven zero"
        becomes "2 7 0" and "twenty thousand" becomes "20000". A scale
        word that cannot be composed with the word before it is kept,
        so "one two thousand" becomes "1 2 thousand".
    """

    def repl(match: re.Match[str]) -> str:
        groups: list[list[str]] = []
        for word in match.group(0).split():
            if _continues_group(groups, word):
                groups[-1].append(word)
            else:
                groups.append([word])
        # A scale word without a preceding number ("20 thousand") is kept as a word
        return " ".join(
            " ".join(group) if group[0] in SCALES else str(_compose(group)) for group in groups
        )

    return NUMBER_RUN_PATTERN.sub(repl, text)


def sanitize(text: str) -> str:
    """Normalize a transmission for tokenization.

    Lowercases the text, replaces every run of punctuation with a single
    space and expands spelled-out numbers. Normalized text is returned
    unchanged.

    Args:
        text: Raw transmission.

    Returns:
        Sanitized transmission.
    """
    text = text.lower()
    text = replace_punctuation(text)
    return expand_number_words(text)
