from pydantic import BaseModel, Field


class ConsensusConfig(BaseModel, frozen=True):
    """Policy knobs for clustering and consensus filtering."""

    min_consensus_threshold: float = Field(default=0.3, ge=0.0, le=1.0)
    agreement_boost: float = Field(default=1.5, ge=1.0)
    # Reserved for peer review scoring; not applied by the scorer.
    dispute_penalty: float = Field(default=0.5, ge=0.0, le=1.0)
    include_single_source_findings: bool = True
    single_source_min_confidence: float = Field(default=0.7, ge=0.0, le=1.0)
    similarity_threshold: float = Field(default=0.6, ge=0.0, le=1.0)


DEFAULT_CONSENSUS_CONFIG = ConsensusConfig()
