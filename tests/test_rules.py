import pytest
from wordscramble.checkers.adapters import WordSetChecker
from wordscramble.checkers.base import WordChecker
from wordscramble.game.models import GameConfig, RejectionReason, SessionState
from wordscramble.game.rules import (
    check_candidate,
    is_long_enough,
    is_not_root,
    is_original,
    is_possible,
    normalize,
)

class RecordingChecker(WordChecker):
    def __init__(self, answer: bool):
        self.answer = answer
        self.calls = []

    def is_real_word(self, word: str, language: str) -> bool:
        self.calls.append((word, language))
        return self.answer

@pytest.mark.parametrize("raw,expected", [
    ("  Silk  ", "silk"),
    ("WORM", "worm"),
    ("\tmilk\n", "milk"),
    ("   ", ""),
])
def test_normalize(raw, expected):
    assert normalize(raw) == expected

@pytest.mark.parametrize("word,expected", [
    ("silk", True),
    ("worm", True),
    ("milks", True),
    ("silkworm", True),
    ("silkworms", False),  # only one 's' in the root
    ("mill", False),       # only one 'l' in the root
    ("xq", False),
])
def test_is_possible_consumes_each_letter_once(word, expected):
    state = SessionState(root_word="silkworm")
    assert is_possible(word, state) is expected

def test_is_original():
    state = SessionState(root_word="silkworm", used_words=["silk"])
    assert is_original("silk", state) is False
    assert is_original("milk", state) is True

def test_length_and_root_rules():
    state = SessionState(root_word="silkworm")
    assert is_long_enough("owl", 3) is True
    assert is_long_enough("ow", 3) is False
    assert is_not_root("silkworm", state) is False
    assert is_not_root("silk", state) is True

def test_check_candidate_rule_order():
    state = SessionState(root_word="silkworm", used_words=["silk"])
    config = GameConfig()
    checker = WordSetChecker(["silk", "milk", "ok", "silkworm"])

    assert check_candidate("silk", state, checker, config) == RejectionReason.ORIGINALITY_VIOLATION
    assert check_candidate("xq", state, checker, config) == RejectionReason.INFEASIBLE_SPELLING
    assert check_candidate("worms", state, checker, config) == RejectionReason.UNRECOGNIZED_WORD
    assert check_candidate("ok", state, checker, config) == RejectionReason.TOO_SHORT
    assert check_candidate("silkworm", state, checker, config) == RejectionReason.EQUALS_ROOT
    assert check_candidate("milk", state, checker, config) is None

def test_dictionary_not_consulted_for_infeasible_words():
    state = SessionState(root_word="silkworm")
    checker = RecordingChecker(answer=True)

    reason = check_candidate("zebra", state, checker, GameConfig())

    assert reason == RejectionReason.INFEASIBLE_SPELLING
    assert checker.calls == []

def test_dictionary_receives_configured_language():
    state = SessionState(root_word="silkworm")
    checker = RecordingChecker(answer=True)

    check_candidate("silk", state, checker, GameConfig(language="de"))

    assert checker.calls == [("silk", "de")]

def test_root_word_is_equals_root_even_if_dictionary_rejects_it():
    state = SessionState(root_word="silkworm")
    checker = RecordingChecker(answer=False)

    reason = check_candidate("silkworm", state, checker, GameConfig())

    assert reason == RejectionReason.EQUALS_ROOT
    assert checker.calls == []

def test_min_length_is_configurable():
    state = SessionState(root_word="silkworm")
    checker = RecordingChecker(answer=True)
    assert check_candidate("silk", state, checker, GameConfig(min_word_length=5)) == RejectionReason.TOO_SHORT
