from pathlib import Path
from typing import TypeVar

from loguru import logger
from pydantic import BaseModel, ValidationError

from src.domain.entities.prior_analysis import PriorAnalysis
from src.domain.entities.review_output import ReviewOutput


T = TypeVar("T", bound=BaseModel)


class ReviewLoadError(Exception):
    def __init__(self, path: Path, reason: str):
        super().__init__(f"Could not load {path}: {reason}")
        self.path = path
        self.reason = reason


def _load_model(path: Path, model: type[T]) -> T:
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ReviewLoadError(path, str(e)) from e

    try:
        return model.model_validate_json(raw)
    except ValidationError as e:
        raise ReviewLoadError(path, f"{e.error_count()} validation errors") from e


def load_review_output(path: Path) -> ReviewOutput:
    """Load an already-structured reviewer output from a JSON file."""
    output = _load_model(path, ReviewOutput)
    logger.debug("Loaded {} findings from {} ({})", len(output.findings), output.reviewer, path)
    return output


def load_prior_analysis(path: Path) -> PriorAnalysis:
    return _load_model(path, PriorAnalysis)


def load_reviews(paths: list[Path]) -> tuple[dict[str, ReviewOutput], list[str]]:
    """Load several reviewer outputs.

    Returns the successfully loaded outputs keyed by reviewer id, and the ids
    (file stems) of the files that failed. Duplicate reviewer names are
    suffixed with the file stem.
    """
    reviews: dict[str, ReviewOutput] = {}
    failed: list[str] = []

    for path in paths:
        try:
            output = load_review_output(path)
        except ReviewLoadError as e:
            logger.warning("Skipping reviewer file: {}", e)
            failed.append(path.stem)
            continue

        reviewer_id = output.reviewer
        if reviewer_id in reviews:
            reviewer_id = f"{output.reviewer}:{path.stem}"
        reviews[reviewer_id] = output

    return reviews, failed
