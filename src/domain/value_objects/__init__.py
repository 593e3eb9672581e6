from src.domain.value_objects.code_location import CodeLocation
from src.domain.value_objects.consensus_config import DEFAULT_CONSENSUS_CONFIG, ConsensusConfig
from src.domain.value_objects.review_enums import (
    AgreementAssessment,
    AlternativeRecommendation,
    DisagreementIssue,
    FindingAction,
    FindingCategory,
    PeerValidation,
    RiskLevel,
    Severity,
)

__all__ = [
    "DEFAULT_CONSENSUS_CONFIG",
    "AgreementAssessment",
    "AlternativeRecommendation",
    "CodeLocation",
    "ConsensusConfig",
    "DisagreementIssue",
    "FindingAction",
    "FindingCategory",
    "PeerValidation",
    "RiskLevel",
    "Severity",
]
