from abc import ABC, abstractmethod

class WordChecker(ABC):
    """
    Abstract dictionary lookup used to decide whether a guess is a real word.
    Implement this to plug in another word source.
    """

    @abstractmethod
    def is_real_word(self, word: str, language: str) -> bool:
        """
        Returns True if word is a known word in the given language.
        """
        pass
