from src.domain.entities.council_review import (
    ConsensusFinding,
    CouncilReviewOutput,
    FindingCluster,
    ModelConflict,
)
from src.domain.entities.finding import Finding
from src.domain.entities.prior_analysis import PriorAnalysis, PriorFinding
from src.domain.entities.review_output import (
    Agreement,
    Alternative,
    Disagreement,
    ReviewOutput,
    RiskAssessment,
)
from src.domain.entities.verified_finding import (
    CrossCheckResult,
    VerificationResult,
    VerifiedFinding,
)

__all__ = [
    "Agreement",
    "Alternative",
    "ConsensusFinding",
    "CouncilReviewOutput",
    "CrossCheckResult",
    "Disagreement",
    "Finding",
    "FindingCluster",
    "ModelConflict",
    "PriorAnalysis",
    "PriorFinding",
    "ReviewOutput",
    "RiskAssessment",
    "VerificationResult",
    "VerifiedFinding",
]
