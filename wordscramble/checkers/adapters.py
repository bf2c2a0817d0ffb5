import json
import logging
from pathlib import Path
from typing import Iterable
from spellchecker import SpellChecker
from wordfreq import zipf_frequency
from wordscramble.checkers.base import WordChecker
from wordscramble.game.errors import ConfigurationError

logger = logging.getLogger(__name__)

class WordSetChecker(WordChecker):
    """
    Checks words against a fixed list for a single language.
    """

    def __init__(self, words: Iterable[str], language: str = "en"):
        # Store as lowercase for consistent comparison
        self.words = {w.strip().lower() for w in words if w.strip()}
        self.language = language

    @classmethod
    def from_file(cls, filepath: str, language: str = "en"):
        path = Path(filepath)
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as e:
            raise ConfigurationError(f"Could not read dictionary {filepath}: {e}") from e

        if path.suffix == ".json":
            words = json.loads(text)
        else:
            words = text.split("\n")
        checker = cls(words, language=language)
        logger.info(f"Loaded {len(checker.words)} dictionary words from {filepath}")
        return checker

    def is_real_word(self, word: str, language: str) -> bool:
        if language != self.language:
            logger.warning(f"Dictionary is for '{self.language}', cannot check '{language}'")
            return False
        return word.lower() in self.words

class SpellCheckerChecker(WordChecker):
    """
    Looks words up in the pyspellchecker dictionary for the requested language.
    """

    def __init__(self):
        # language -> SpellChecker, loaded on first use
        self._spellers = {}

    def _speller(self, language: str) -> SpellChecker | None:
        if language not in self._spellers:
            try:
                self._spellers[language] = SpellChecker(language=language)
            except ValueError:
                logger.warning(f"pyspellchecker has no dictionary for language '{language}'")
                self._spellers[language] = None
        return self._spellers[language]

    def is_real_word(self, word: str, language: str) -> bool:
        speller = self._speller(language)
        if speller is None:
            return False
        return bool(speller.known([word.lower()]))

class WordfreqChecker(WordChecker):
    """
    Accepts dictionary words that are also common in the wordfreq corpus.
    """

    def __init__(self, min_zipf: float = 3.0, dictionary: WordChecker | None = None):
        # Zipf scale: 0 means unseen, ~3 is an everyday word
        self.min_zipf = min_zipf
        self.dictionary = dictionary or SpellCheckerChecker()

    def is_real_word(self, word: str, language: str) -> bool:
        if not self.dictionary.is_real_word(word, language):
            return False
        try:
            frequency = zipf_frequency(word, language)
        except LookupError:
            logger.warning(f"wordfreq has no word list for language '{language}'")
            return False
        return frequency >= self.min_zipf
