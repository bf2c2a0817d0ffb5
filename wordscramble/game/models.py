from enum import Enum
from pydantic import BaseModel, Field

class GameConfig(BaseModel):
    min_word_length: int = Field(default=3, ge=1)  # Shorter guesses are rejected
    language: str = "en"                           # Passed through to the word checker

class RejectionReason(str, Enum):
    ORIGINALITY_VIOLATION = "originality_violation"
    INFEASIBLE_SPELLING = "infeasible_spelling"
    UNRECOGNIZED_WORD = "unrecognized_word"
    TOO_SHORT = "too_short"
    EQUALS_ROOT = "equals_root"

class SessionState(BaseModel):
    root_word: str = ""                                  # Lowercase, empty until a game starts
    used_words: list[str] = Field(default_factory=list)  # Accepted words, newest first
    score: int = Field(default=0, ge=0)

    @property
    def expected_score(self) -> int:
        return sum(len(w) for w in self.used_words)

    def record(self, word: str) -> int:
        """
        Stores an accepted word and returns the points it earned.
        """
        self.used_words.insert(0, word)
        self.score += len(word)
        return len(word)

    def reset(self):
        self.used_words = []
        self.score = 0

class Accepted(BaseModel):
    word: str
    points: int   # Length of the accepted word
    score: int    # Running total after this word

class Rejected(BaseModel):
    word: str
    reason: RejectionReason
    title: str
    message: str
