from src.cli.formatters.council_formatter import RISK_STYLES, format_council_review
from src.cli.formatters.review_formatter import (
    ACTION_STYLES,
    SEVERITY_STYLES,
    format_follow_up_questions,
    format_processed_review,
)

__all__ = [
    "ACTION_STYLES",
    "RISK_STYLES",
    "SEVERITY_STYLES",
    "format_council_review",
    "format_follow_up_questions",
    "format_processed_review",
]
