from pydantic import BaseModel, Field, model_validator

from src.domain.entities.finding import Finding
from src.domain.entities.review_output import ReviewOutput, RiskAssessment
from src.domain.value_objects.review_enums import PeerValidation


class FindingCluster(BaseModel):
    """Findings from different reviewers judged to describe the same issue."""

    finding: Finding
    sources: list[str] = Field(min_length=1)


class ConsensusFinding(Finding, frozen=True):
    consensus_score: float = Field(ge=0.0, le=1.0)
    agreement_count: int = Field(ge=1)
    sources: list[str] = Field(min_length=1)
    peer_validation: PeerValidation

    @model_validator(mode="after")
    def _check_sources(self) -> "ConsensusFinding":
        if self.agreement_count != len(self.sources):
            raise ValueError("agreement_count must equal the number of sources")
        if len(set(self.sources)) != len(self.sources):
            raise ValueError("sources must be distinct reviewer ids")
        return self

    @classmethod
    def from_cluster(cls, cluster: FindingCluster, consensus_score: float) -> "ConsensusFinding":
        peer_validation = (
            PeerValidation.VALIDATED if len(cluster.sources) > 1 else PeerValidation.UNREVIEWED
        )
        return cls(
            **cluster.finding.model_dump(),
            consensus_score=consensus_score,
            agreement_count=len(cluster.sources),
            sources=list(cluster.sources),
            peer_validation=peer_validation,
        )


class ModelConflict(BaseModel, frozen=True):
    topic: str
    positions: dict[str, str]
    recommendation: str | None = None


class CouncilReviewOutput(BaseModel):
    individual_reviews: dict[str, ReviewOutput]
    consensus_findings: list[ConsensusFinding]
    unanimous_agreements: list[str]
    conflicts: list[ModelConflict]
    unique_insights: dict[str, list[str]]
    combined_risk: RiskAssessment
    models_participated: list[str]
    models_failed: list[str] | None = None
    synthesis_notes: str = ""
