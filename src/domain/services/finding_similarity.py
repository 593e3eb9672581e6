from __future__ import annotations

from typing import TYPE_CHECKING

from src.domain.services.lexical_similarity import LexicalTextSimilarity

if TYPE_CHECKING:
    from src.domain.entities.finding import Finding
    from src.domain.ports.text_similarity_port import TextSimilarity

CATEGORY_WEIGHT = 0.3
SEVERITY_WEIGHT = 0.1
LOCATION_WEIGHT = 0.4
TEXT_WEIGHT = 0.2

SAME_FILE_SCORE = 0.2
SAME_LINE_SCORE = 0.2
NEAR_LINE_SCORE = 0.1
NEAR_LINE_DISTANCE = 5


class FindingSimilarity:
    """Pairwise similarity between two findings, in [0, 1].

    The score is normalized by the weights that actually applied, so two
    findings without a location are not penalized for the missing
    location component.
    """

    def __init__(self, text_similarity: TextSimilarity | None = None):
        self.text_similarity = text_similarity or LexicalTextSimilarity()

    def score(self, a: Finding, b: Finding) -> float:
        score = 0.0
        weights = CATEGORY_WEIGHT + SEVERITY_WEIGHT + TEXT_WEIGHT

        if a.category == b.category:
            score += CATEGORY_WEIGHT
        if a.severity == b.severity:
            score += SEVERITY_WEIGHT

        if a.location and b.location:
            weights += LOCATION_WEIGHT
            if a.location.file == b.location.file:
                score += SAME_FILE_SCORE
                if a.location.line_start and b.location.line_start:
                    distance = abs(a.location.line_start - b.location.line_start)
                    if distance == 0:
                        score += SAME_LINE_SCORE
                    elif distance <= NEAR_LINE_DISTANCE:
                        score += NEAR_LINE_SCORE

        overlap = self.text_similarity.word_overlap(
            f"{a.title} {a.description}", f"{b.title} {b.description}"
        )
        score += overlap * TEXT_WEIGHT

        return min(1.0, max(0.0, score / weights))
