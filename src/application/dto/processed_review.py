from pydantic import BaseModel, Field

from src.domain.entities.finding import Finding
from src.domain.entities.review_output import ReviewOutput
from src.domain.entities.verified_finding import VerifiedFinding
from src.domain.value_objects.review_enums import FindingAction
from src.infrastructure.filesystem.file_cache import FileCacheStats


class ActionItem(BaseModel, frozen=True):
    finding: VerifiedFinding
    action: FindingAction
    priority: float = Field(ge=0.0, le=100.0)
    reason: str
    suggested_fix: str | None = None


class RejectedFinding(BaseModel, frozen=True):
    finding: Finding
    reason: str


class ReviewSummary(BaseModel):
    total_findings: int
    verified_count: int
    rejected_count: int
    actionable_count: int
    top_priority: list[ActionItem]


class ProcessedReview(BaseModel):
    original: ReviewOutput
    verified: list[VerifiedFinding]
    rejected: list[RejectedFinding]
    action_plan: list[ActionItem]
    summary: ReviewSummary
    cache_stats: FileCacheStats


class FollowUpQuestion(BaseModel, frozen=True):
    topic: str
    question: str
    related_findings: list[str]
    context: str
