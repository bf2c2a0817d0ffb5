import logging
import random
from pathlib import Path
from typing import Iterable, Iterator
from wordscramble.game.errors import ConfigurationError

logger = logging.getLogger(__name__)

class WordList:
    """
    Holds the candidate root words and picks one at random.
    """

    def __init__(self, words: Iterable[str]):
        # Store as lowercase, skipping blank lines
        self.words = [w.strip().lower() for w in words if w and w.strip()]
        if not self.words:
            raise ConfigurationError("Word list contains no words")

    @classmethod
    def from_file(cls, filepath: str):
        try:
            text = Path(filepath).read_text(encoding="utf-8")
        except OSError as e:
            raise ConfigurationError(f"Could not load word list {filepath}: {e}") from e
        word_list = cls(text.split("\n"))
        logger.debug(f"Loaded {len(word_list)} root words from {filepath}")
        return word_list

    def choose(self, rng: random.Random | None = None) -> str:
        return (rng or random).choice(self.words)

    def __len__(self) -> int:
        return len(self.words)

    def __iter__(self) -> Iterator[str]:
        return iter(self.words)
