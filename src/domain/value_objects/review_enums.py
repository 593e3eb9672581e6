from enum import Enum


class FindingCategory(str, Enum):
    SECURITY = "security"
    PERFORMANCE = "performance"
    ARCHITECTURE = "architecture"
    CORRECTNESS = "correctness"
    MAINTAINABILITY = "maintainability"
    SCALABILITY = "scalability"
    TESTING = "testing"
    DOCUMENTATION = "documentation"
    BEST_PRACTICE = "best-practice"
    OTHER = "other"


class Severity(str, Enum):
    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
    INFO = "info"


class RiskLevel(str, Enum):
    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
    MINIMAL = "minimal"


class AgreementAssessment(str, Enum):
    CORRECT = "correct"
    MOSTLY_CORRECT = "mostly_correct"
    PARTIALLY_CORRECT = "partially_correct"


class DisagreementIssue(str, Enum):
    INCORRECT = "incorrect"
    MISLEADING = "misleading"
    INCOMPLETE = "incomplete"
    OUTDATED = "outdated"
    HALLUCINATED = "hallucinated"


class AlternativeRecommendation(str, Enum):
    STRONGLY_PREFER = "strongly_prefer"
    CONSIDER = "consider"
    SITUATIONAL = "situational"
    INFORMATIONAL = "informational"


class FindingAction(str, Enum):
    FIX_NOW = "fix_now"
    INVESTIGATE = "investigate"
    DEFER = "defer"
    REJECT = "reject"


class PeerValidation(str, Enum):
    VALIDATED = "validated"
    UNREVIEWED = "unreviewed"
