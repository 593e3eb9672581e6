from src.infrastructure.persistence.review_loader import (
    ReviewLoadError,
    load_prior_analysis,
    load_review_output,
    load_reviews,
)

__all__ = ["ReviewLoadError", "load_prior_analysis", "load_review_output", "load_reviews"]
