from src.application.use_cases.process_review import ProcessReview, generate_follow_up_questions
from src.application.use_cases.synthesize_council_review import (
    NoReviewerOutputError,
    SynthesizeCouncilReview,
)

__all__ = [
    "NoReviewerOutputError",
    "ProcessReview",
    "SynthesizeCouncilReview",
    "generate_follow_up_questions",
]
