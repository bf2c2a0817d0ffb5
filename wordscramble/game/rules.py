from collections import Counter
from wordscramble.checkers.base import WordChecker
from wordscramble.game.models import GameConfig, RejectionReason, SessionState

def normalize(raw: str) -> str:
    return raw.strip().lower()

def is_original(word: str, state: SessionState) -> bool:
    return word not in state.used_words

def is_possible(word: str, state: SessionState) -> bool:
    """
    True if every letter of word can be matched to its own, not yet used
    letter of the root word.
    """
    remaining = Counter(state.root_word)
    for letter in word:
        if remaining[letter] == 0:
            return False
        remaining[letter] -= 1  # consume one instance
    return True

def is_real(word: str, checker: WordChecker, language: str) -> bool:
    return checker.is_real_word(word, language)

def is_long_enough(word: str, min_length: int) -> bool:
    return len(word) >= min_length

def is_not_root(word: str, state: SessionState) -> bool:
    return word != state.root_word

def check_candidate(
    word: str,
    state: SessionState,
    checker: WordChecker,
    config: GameConfig
) -> RejectionReason | None:
    """
    Runs the rules in their fixed order and returns the first one that fails.
    The root word is turned away before the dictionary is asked, so it is
    always EQUALS_ROOT whether or not the dictionary knows it.
    """
    if not is_original(word, state):
        return RejectionReason.ORIGINALITY_VIOLATION
    if not is_possible(word, state):
        return RejectionReason.INFEASIBLE_SPELLING
    if not is_not_root(word, state):
        return RejectionReason.EQUALS_ROOT
    if not is_real(word, checker, config.language):
        return RejectionReason.UNRECOGNIZED_WORD
    if not is_long_enough(word, config.min_word_length):
        return RejectionReason.TOO_SHORT
    return None
