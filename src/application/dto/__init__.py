from src.application.dto.processed_review import (
    ActionItem,
    FollowUpQuestion,
    ProcessedReview,
    RejectedFinding,
    ReviewSummary,
)

__all__ = [
    "ActionItem",
    "FollowUpQuestion",
    "ProcessedReview",
    "RejectedFinding",
    "ReviewSummary",
]
