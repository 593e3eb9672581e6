from abc import ABC, abstractmethod


class TextSimilarity(ABC):
    """Port for the text matching used by cross-checking, clustering and synthesis."""

    @abstractmethod
    def normalize(self, text: str) -> str:
        """Canonical form used to compare free-text claims for equality."""

    @abstractmethod
    def contains_fragment(self, haystack: str, needle: str, length: int) -> bool:
        """True if `haystack` contains the first `length` characters of `needle`."""

    @abstractmethod
    def word_overlap(self, a: str, b: str) -> float:
        """Overlap of the two texts' vocabularies in [0, 1]."""
