import re

from src.domain.ports.text_similarity_port import TextSimilarity

WORD_SPLIT_PATTERN = re.compile(r"\W+")
MIN_WORD_LENGTH = 4


class LexicalTextSimilarity(TextSimilarity):
    """Case-insensitive string heuristics. No semantic matching."""

    def normalize(self, text: str) -> str:
        return text.lower().strip()

    def contains_fragment(self, haystack: str, needle: str, length: int) -> bool:
        return needle.lower()[:length] in haystack.lower()

    def word_overlap(self, a: str, b: str) -> float:
        a_words = self._significant_words(a)
        b_words = self._significant_words(b)
        union = a_words | b_words
        if not union:
            return 0.0
        return len(a_words & b_words) / len(union)

    def _significant_words(self, text: str) -> set[str]:
        return {w for w in WORD_SPLIT_PATTERN.split(text.lower()) if len(w) >= MIN_WORD_LENGTH}
