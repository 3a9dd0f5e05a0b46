"""Radio vocabulary recognized by the transmission parser.

The vocabulary (trigger phrases, digit pronunciations and bogey dope
filter words) is defined in a YAML file and loaded once into an
immutable Vocabulary, which is then handed to each Parser. Parsers
never read process-wide tables, so instances can be built with a test
vocabulary and shared between threads.

Typical usage:
    from gcibot.parser.vocabulary import load_vocabulary

    vocabulary = load_vocabulary()
    vocabulary.decode_digit("niner")  # 9
"""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any

import yaml

from gcibot.brevity.requests import ContactCategory
from gcibot.core.logging_system import get_logger

logger = get_logger(__name__)

# Vocabulary shipped with the package
DEFAULT_VOCABULARY_FILE = Path(__file__).parent.parent / "config" / "vocabulary.yaml"


class VocabularyError(ValueError):
    """Raised when a vocabulary definition is malformed."""


class RequestWord(Enum):
    """Request triggers, in the order they are tried for equally long phrases."""

    ALPHA_CHECK = "alpha_check"
    BOGEY_DOPE = "bogey_dope"
    DECLARE = "declare"
    PICTURE = "picture"
    RADIO_CHECK = "radio_check"
    SPIKED = "spiked"
    SNAPLOCK = "snaplock"


@dataclass(frozen=True)
class TriggerPhrase:
    """One recognized spelling of a trigger, split into tokens."""

    tokens: tuple[str, ...]
    request_word: RequestWord

    @property
    def text(self) -> str:
        return " ".join(self.tokens)


@dataclass(frozen=True)
class Vocabulary:
    """Immutable radio vocabulary.

    Attributes:
        universal_alias: Wake word that addresses any controller.
        triggers: Trigger phrases ordered for matching: longest first,
            then by RequestWord order, then by order in the definition.
        digits: Word to digit mapping.
        contact_categories: Word to bogey dope filter mapping.
    """

    universal_alias: str
    triggers: tuple[TriggerPhrase, ...]
    digits: Mapping[str, int]
    contact_categories: Mapping[str, ContactCategory]

    def decode_digit(self, word: str) -> int | None:
        """Decode a word or character spelling a single digit.

        Returns:
            The digit, or None if the word does not spell one.
        """
        return self.digits.get(word)

    def decode_category(self, word: str) -> ContactCategory | None:
        return self.contact_categories.get(word)

    def phrases_for(self, request_word: RequestWord) -> list[str]:
        return [t.text for t in self.triggers if t.request_word == request_word]

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Vocabulary":
        """Build and validate a vocabulary from its YAML structure.

        Args:
            data: Parsed YAML document.

        Returns:
            Vocabulary instance.

        Raises:
            VocabularyError: If a section is missing or inconsistent.
        """
        if not isinstance(data, Mapping):
            raise VocabularyError("Vocabulary must be a mapping")

        alias = _normalize_phrase(data.get("universal_alias", ""))
        if len(alias.split()) != 1:
            raise VocabularyError(f"universal_alias must be one word, got {alias!r}")

        return cls(
            universal_alias=alias,
            triggers=_build_triggers(data.get("triggers")),
            digits=MappingProxyType(_build_digits(data.get("digits"))),
            contact_categories=MappingProxyType(
                _build_categories(data.get("contact_categories") or {})
            ),
        )


def _normalize_phrase(value: Any) -> str:
    return " ".join(str(value).lower().split())


def _build_triggers(section: Any) -> tuple[TriggerPhrase, ...]:
    if not isinstance(section, Mapping):
        raise VocabularyError("triggers section is missing")

    unknown = set(section) - {w.value for w in RequestWord}
    if unknown:
        raise VocabularyError(f"Unknown request words: {sorted(unknown)}")

    phrases: list[TriggerPhrase] = []
    owner: dict[str, RequestWord] = {}
    for request_word in RequestWord:
        spellings = section.get(request_word.value) or []
        if not spellings:
            raise VocabularyError(f"No trigger phrase for {request_word.value}")
        for spelling in spellings:
            text = _normalize_phrase(spelling)
            if not text:
                raise VocabularyError(f"Empty trigger phrase for {request_word.value}")
            if text in owner and owner[text] != request_word:
                raise VocabularyError(
                    f"Trigger {text!r} used by both {owner[text].value} and {request_word.value}"
                )
            owner[text] = request_word
            phrases.append(TriggerPhrase(tokens=tuple(text.split()), request_word=request_word))

    # Stable sort keeps RequestWord and definition order among equal lengths
    return tuple(sorted(phrases, key=lambda p: -len(p.tokens)))


def _build_digits(section: Any) -> dict[str, int]:
    if not isinstance(section, Mapping):
        raise VocabularyError("digits section is missing")

    digits: dict[str, int] = {}
    for key, words in section.items():
        try:
            digit = int(key)
        except (TypeError, ValueError) as e:
            raise VocabularyError(f"Invalid digit key: {key!r}") from e
        if not 0 <= digit <= 9:
            raise VocabularyError(f"Digit out of range: {digit}")
        for word in words or []:
            digits[_normalize_phrase(word)] = digit

    missing = set(range(10)) - set(digits.values())
    if missing:
        raise VocabularyError(f"No spelling for digits: {sorted(missing)}")
    return digits


def _build_categories(section: Any) -> dict[str, ContactCategory]:
    if not isinstance(section, Mapping):
        raise VocabularyError("contact_categories must be a mapping")

    categories: dict[str, ContactCategory] = {}
    for key, words in section.items():
        try:
            category = ContactCategory(key)
        except ValueError as e:
            raise VocabularyError(f"Unknown contact category: {key!r}") from e
        for word in words or []:
            categories[_normalize_phrase(word)] = category
    return categories


@lru_cache(maxsize=8)
def _load_cached(path: Path) -> Vocabulary:
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f)
    vocabulary = Vocabulary.from_dict(data or {})
    logger.info(
        "Loaded vocabulary from %s (%d trigger phrases)", path, len(vocabulary.triggers)
    )
    return vocabulary


def load_vocabulary(path: str | Path | None = None) -> Vocabulary:
    """Load a vocabulary from YAML.

    Each file is read once; later calls return the same instance.

    Args:
        path: Vocabulary file, defaults to the packaged vocabulary.

    Returns:
        Vocabulary instance.

    Raises:
        OSError: If the file cannot be read.
        VocabularyError: If the file content is malformed.
    """
    resolved = Path(path) if path is not None else DEFAULT_VOCABULARY_FILE
    return _load_cached(resolved.resolve())
