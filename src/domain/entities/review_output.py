from pydantic import BaseModel, Field

from src.domain.entities.finding import Finding
from src.domain.value_objects.review_enums import (
    AgreementAssessment,
    AlternativeRecommendation,
    DisagreementIssue,
    RiskLevel,
)


class Agreement(BaseModel, frozen=True):
    original_claim: str
    assessment: AgreementAssessment
    confidence: float = Field(ge=0.0, le=1.0)
    supporting_evidence: str | None = None
    notes: str | None = None


class Disagreement(BaseModel, frozen=True):
    original_claim: str
    issue: DisagreementIssue
    confidence: float = Field(ge=0.0, le=1.0)
    reason: str
    correction: str | None = None
    evidence: str | None = None


class Alternative(BaseModel, frozen=True):
    topic: str
    current_approach: str
    alternative: str
    pros: list[str] = Field(default_factory=list)
    cons: list[str] = Field(default_factory=list)
    recommendation: AlternativeRecommendation


class RiskAssessment(BaseModel, frozen=True):
    overall_level: RiskLevel
    score: float = Field(ge=0, le=100)
    summary: str
    top_concerns: list[str] = Field(default_factory=list)
    mitigations: list[str] | None = None


class ReviewOutput(BaseModel, frozen=True):
    """Complete structured output of a single reviewer."""

    reviewer: str
    findings: list[Finding] = Field(default_factory=list)
    agreements: list[Agreement] = Field(default_factory=list)
    disagreements: list[Disagreement] = Field(default_factory=list)
    alternatives: list[Alternative] = Field(default_factory=list)
    risk_assessment: RiskAssessment
    files_examined: list[str] | None = None
    execution_notes: str | None = None
