from __future__ import annotations

import math
from collections.abc import Iterable

from src.domain.entities.review_output import RiskAssessment
from src.domain.value_objects.review_enums import RiskLevel

RISK_LEVEL_ORDER: list[RiskLevel] = [
    RiskLevel.MINIMAL,
    RiskLevel.LOW,
    RiskLevel.MEDIUM,
    RiskLevel.HIGH,
    RiskLevel.CRITICAL,
]
MAX_TOP_CONCERNS = 5


def combine_risk_assessments(assessments: Iterable[RiskAssessment]) -> RiskAssessment:
    """Merge per-reviewer risk assessments into one.

    Scores are averaged, the highest level wins, concerns are deduplicated in
    first-seen order and capped, mitigations are unioned.
    """
    assessments = list(assessments)
    if not assessments:
        return RiskAssessment(
            overall_level=RiskLevel.MEDIUM,
            score=50,
            summary="No risk assessments available",
            top_concerns=[],
        )

    scores = [a.score for a in assessments]
    highest = max(
        (a.overall_level for a in assessments),
        key=RISK_LEVEL_ORDER.index,
    )

    concerns = list(dict.fromkeys(c for a in assessments for c in a.top_concerns))
    mitigations = list(dict.fromkeys(m for a in assessments for m in (a.mitigations or [])))

    return RiskAssessment(
        overall_level=highest,
        score=math.floor(sum(scores) / len(scores) + 0.5),
        summary=(
            f"Combined assessment from {len(assessments)} models. "
            f"Scores ranged from {_format_score(min(scores))} to {_format_score(max(scores))}."
        ),
        top_concerns=concerns[:MAX_TOP_CONCERNS],
        mitigations=mitigations or None,
    )


def _format_score(score: float) -> str:
    return str(int(score)) if float(score).is_integer() else str(score)
