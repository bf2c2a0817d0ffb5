import logging
import random
from typing import Iterable
from wordscramble.checkers.base import WordChecker
from wordscramble.game.errors import ConfigurationError
from wordscramble.game.models import Accepted, GameConfig, Rejected, SessionState
from wordscramble.game.rules import check_candidate, normalize
from wordscramble.prompts.templates import rejection_text
from wordscramble.words.bank import WordList

logger = logging.getLogger(__name__)

class GameSession:
    """
    Runs a single game: holds the root word, the accepted guesses and the score.
    """

    def __init__(
        self,
        checker: WordChecker,
        config: GameConfig | None = None,
        rng: random.Random | None = None
    ):
        self.checker = checker
        self.config = config or GameConfig()
        self.rng = rng or random.Random()
        self.state = SessionState()

    @property
    def root_word(self) -> str:
        return self.state.root_word

    @property
    def used_words(self) -> list[str]:
        return list(self.state.used_words)

    @property
    def score(self) -> int:
        return self.state.score

    def start_game(self, word_list: WordList | Iterable[str] | None) -> str:
        """
        Picks a new root word. Accepted words and score are left alone.
        """
        if word_list is None:
            raise ConfigurationError("No word list available to start the game")
        if not isinstance(word_list, WordList):
            word_list = WordList(word_list)

        self.state.root_word = word_list.choose(self.rng)
        logger.info(f"Root word is '{self.state.root_word}'")
        return self.state.root_word

    def restart(self, word_list: WordList | Iterable[str] | None) -> str:
        root = self.start_game(word_list)
        self.state.reset()
        return root

    def submit(self, raw: str) -> Accepted | Rejected | None:
        """
        Validates a guess and records it if every rule passes.
        Blank input is ignored and returns None.
        """
        word = normalize(raw)
        if not word:
            return None
        if not self.state.root_word:
            raise ConfigurationError("Game has not been started")

        reason = check_candidate(word, self.state, self.checker, self.config)
        if reason is not None:
            logger.debug(f"Rejected '{word}': {reason.value}")
            title, message = rejection_text(reason, self.state.root_word, self.config.min_word_length)
            return Rejected(word=word, reason=reason, title=title, message=message)

        points = self.state.record(word)
        logger.debug(f"Accepted '{word}' for {points} points")
        return Accepted(word=word, points=points, score=self.state.score)
