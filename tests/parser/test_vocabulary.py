"""Tests for the radio vocabulary."""

import tempfile
from pathlib import Path
from typing import Any

import pytest
import yaml

from gcibot.brevity.requests import ContactCategory
from gcibot.parser.parser import Parser
from gcibot.parser.vocabulary import (
    DEFAULT_VOCABULARY_FILE,
    RequestWord,
    Vocabulary,
    VocabularyError,
    load_vocabulary,
)


def _default_data() -> dict[str, Any]:
    with open(DEFAULT_VOCABULARY_FILE, encoding="utf-8") as f:
        return yaml.safe_load(f)


class TestDefaultVocabulary:
    """Tests for the packaged vocabulary."""

    @pytest.fixture
    def vocabulary(self) -> Vocabulary:
        """Packaged vocabulary fixture."""
        return load_vocabulary()

    def test_universal_alias(self, vocabulary: Vocabulary) -> None:
        """Test the universal wake word."""
        assert vocabulary.universal_alias == "anyface"

    def test_required_triggers(self, vocabulary: Vocabulary) -> None:
        """Test the recognized trigger phrases."""
        assert "alpha check" in vocabulary.phrases_for(RequestWord.ALPHA_CHECK)
        assert "bogey dope" in vocabulary.phrases_for(RequestWord.BOGEY_DOPE)
        assert "declare" in vocabulary.phrases_for(RequestWord.DECLARE)
        assert "picture" in vocabulary.phrases_for(RequestWord.PICTURE)
        assert "radio check" in vocabulary.phrases_for(RequestWord.RADIO_CHECK)
        assert vocabulary.phrases_for(RequestWord.SPIKED)[:2] == ["spiked", "spike"]
        assert "snaplock" in vocabulary.phrases_for(RequestWord.SNAPLOCK)

    def test_every_request_word_has_a_phrase(self, vocabulary: Vocabulary) -> None:
        """Test no request word is unreachable."""
        for request_word in RequestWord:
            assert vocabulary.phrases_for(request_word)

    def test_triggers_longest_first(self, vocabulary: Vocabulary) -> None:
        """Test trigger phrases are ordered by decreasing length."""
        lengths = [len(t.tokens) for t in vocabulary.triggers]
        assert lengths == sorted(lengths, reverse=True)

    @pytest.mark.parametrize(
        ("word", "digit"),
        [
            ("0", 0),
            ("zero", 0),
            ("oh", 0),
            ("wun", 1),
            ("tree", 3),
            ("fower", 4),
            ("fife", 5),
            ("ait", 8),
            ("niner", 9),
            ("9", 9),
        ],
    )
    def test_digit_words(self, vocabulary: Vocabulary, word: str, digit: int) -> None:
        """Test digit pronunciations."""
        assert vocabulary.decode_digit(word) == digit

    def test_unknown_digit_word(self, vocabulary: Vocabulary) -> None:
        """Test non-digit words."""
        assert vocabulary.decode_digit("ten") is None
        assert vocabulary.decode_digit("eagle") is None

    def test_categories(self, vocabulary: Vocabulary) -> None:
        """Test bogey dope filter words."""
        assert vocabulary.decode_category("fighters") == ContactCategory.FIGHTERS
        assert vocabulary.decode_category("helo") == ContactCategory.HELICOPTERS
        assert vocabulary.decode_category("tanker") is None

    def test_immutable(self, vocabulary: Vocabulary) -> None:
        """Test the vocabulary tables cannot be modified."""
        with pytest.raises(TypeError):
            vocabulary.digits["won"] = 1  # type: ignore[index]

    def test_loaded_once(self) -> None:
        """Test repeated loads return the same instance."""
        assert load_vocabulary() is load_vocabulary(DEFAULT_VOCABULARY_FILE)


class TestVocabularyValidation:
    """Tests for Vocabulary.from_dict() validation."""

    def test_default_data_is_valid(self) -> None:
        """Test the packaged data passes validation."""
        assert Vocabulary.from_dict(_default_data()).universal_alias == "anyface"

    def test_not_a_mapping(self) -> None:
        """Test a non-mapping document."""
        with pytest.raises(VocabularyError):
            Vocabulary.from_dict(["anyface"])  # type: ignore[arg-type]

    def test_missing_trigger(self) -> None:
        """Test a request word without phrases."""
        data = _default_data()
        del data["triggers"]["snaplock"]
        with pytest.raises(VocabularyError, match="snaplock"):
            Vocabulary.from_dict(data)

    def test_unknown_request_word(self) -> None:
        """Test a trigger section for an unknown request."""
        data = _default_data()
        data["triggers"]["vector"] = ["vector"]
        with pytest.raises(VocabularyError, match="vector"):
            Vocabulary.from_dict(data)

    def test_phrase_shared_by_two_triggers(self) -> None:
        """Test one phrase cannot trigger two requests."""
        data = _default_data()
        data["triggers"]["picture"].append("declare")
        with pytest.raises(VocabularyError, match="declare"):
            Vocabulary.from_dict(data)

    def test_missing_digit(self) -> None:
        """Test every digit needs a spelling."""
        data = _default_data()
        del data["digits"][7]
        with pytest.raises(VocabularyError, match="7"):
            Vocabulary.from_dict(data)

    def test_unknown_category(self) -> None:
        """Test category keys must be known."""
        data = _default_data()
        data["contact_categories"]["tankers"] = ["tanker"]
        with pytest.raises(VocabularyError, match="tankers"):
            Vocabulary.from_dict(data)

    @pytest.mark.parametrize("alias", ["", "any face"])
    def test_alias_must_be_one_word(self, alias: str) -> None:
        """Test the universal alias is a single word."""
        data = _default_data()
        data["universal_alias"] = alias
        with pytest.raises(VocabularyError):
            Vocabulary.from_dict(data)


class TestCustomVocabularyFile:
    """Tests for loading a vocabulary from a custom file."""

    def test_custom_alias_and_trigger(self) -> None:
        """Test a parser built on a custom vocabulary file."""
        data = _default_data()
        data["universal_alias"] = "anybody"
        data["triggers"]["radio_check"].append("how copy")

        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "vocabulary.yaml"
            with open(path, "w", encoding="utf-8") as f:
                yaml.safe_dump(data, f)

            vocabulary = load_vocabulary(path)

        parser = Parser("magic", vocabulary)
        request, ok = parser.parse("Anybody, Eagle 1, how copy?")
        assert ok
        assert request is not None
        assert request.callsign == "eagle 1"
        assert parser.parse("anyface eagle 1 radio check") == (None, False)
