from wordscramble.game.models import RejectionReason, SessionState

REJECTION_TITLES = {
    RejectionReason.ORIGINALITY_VIOLATION: "Word used already",
    RejectionReason.INFEASIBLE_SPELLING: "Word not possible",
    RejectionReason.UNRECOGNIZED_WORD: "Word not recognized",
    RejectionReason.TOO_SHORT: "Word too short",
    RejectionReason.EQUALS_ROOT: "Word is the root word",
}

REJECTION_MESSAGES = {
    RejectionReason.ORIGINALITY_VIOLATION: "Be more original",
    RejectionReason.INFEASIBLE_SPELLING: "You can't spell that word from {root}",
    RejectionReason.UNRECOGNIZED_WORD: "You can't just make them up, you know!",
    RejectionReason.TOO_SHORT: "Words must be at least {min_length} letters long",
    RejectionReason.EQUALS_ROOT: "You can't just use the word you were given",
}

def rejection_text(reason: RejectionReason, root: str, min_length: int) -> tuple[str, str]:
    """
    Returns the (title, message) pair shown to the player for a rejected guess.
    """
    message = REJECTION_MESSAGES[reason].format(root=root, min_length=min_length)
    return REJECTION_TITLES[reason], message

def format_accepted(word: str) -> str:
    return f"{word}, {len(word)} letters"

def format_score(state: SessionState) -> str:
    return f"Your score: {state.score}"
