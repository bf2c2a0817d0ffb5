from wordscramble.checkers.base import WordChecker
from wordscramble.checkers.adapters import SpellCheckerChecker, WordfreqChecker, WordSetChecker

def create_checker(provider: str, dictionary_file: str | None = None, **kwargs) -> WordChecker:
    provider = provider.lower()
    if provider == "spellchecker":
        return SpellCheckerChecker()
    elif provider == "wordfreq":
        return WordfreqChecker(**kwargs)
    elif provider == "words":
        if not dictionary_file:
            raise ValueError("The 'words' checker needs a dictionary file")
        return WordSetChecker.from_file(dictionary_file, **kwargs)
    else:
        raise ValueError(f"Unknown checker: {provider}")
