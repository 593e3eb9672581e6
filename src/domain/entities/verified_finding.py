from pydantic import BaseModel, Field

from src.domain.entities.finding import Finding
from src.domain.value_objects.code_location import CodeLocation
from src.domain.value_objects.review_enums import Severity


class VerificationResult(BaseModel, frozen=True):
    file_exists: bool = True
    line_valid: bool = True
    code_snippet_matches: bool | None = None
    verification_notes: str | None = None


class CrossCheckResult(BaseModel, frozen=True):
    already_addressed: bool = False
    conflicts_with_prior: bool = False
    prior_mentioned: bool = False


class VerifiedFinding(BaseModel, frozen=True):
    finding: Finding
    verification: VerificationResult
    cross_check: CrossCheckResult = Field(default_factory=CrossCheckResult)
    adjusted_confidence: float = Field(ge=0.0, le=1.0)

    @property
    def id(self) -> str:
        return self.finding.id

    @property
    def title(self) -> str:
        return self.finding.title

    @property
    def severity(self) -> Severity:
        return self.finding.severity

    @property
    def location(self) -> CodeLocation | None:
        return self.finding.location

    @property
    def suggestion(self) -> str | None:
        return self.finding.suggestion
