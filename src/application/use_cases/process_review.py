from pathlib import Path

from loguru import logger

from src.application.dto.processed_review import (
    ActionItem,
    FollowUpQuestion,
    ProcessedReview,
    RejectedFinding,
    ReviewSummary,
)
from src.application.services.cross_checker import CrossChecker
from src.application.services.finding_verifier import FindingVerifier
from src.application.services.prioritizer import Prioritizer
from src.domain.entities.prior_analysis import PriorAnalysis
from src.domain.entities.review_output import ReviewOutput
from src.domain.entities.verified_finding import VerifiedFinding
from src.domain.value_objects.review_enums import FindingAction
from src.infrastructure.filesystem.file_cache import FileCache


class ProcessReview:
    """Use case for running one reviewer's findings through verify, cross-check and prioritize."""

    def __init__(
        self,
        verifier: FindingVerifier | None = None,
        cross_checker: CrossChecker | None = None,
        prioritizer: Prioritizer | None = None,
    ):
        self.verifier = verifier or FindingVerifier()
        self.cross_checker = cross_checker or CrossChecker()
        self.prioritizer = prioritizer or Prioritizer()

    def run(
        self,
        output: ReviewOutput,
        working_dir: str | Path,
        prior: PriorAnalysis | None = None,
    ) -> ProcessedReview:
        """Process every finding of `output` against `working_dir`.

        A failure on one finding rejects that finding only; the rest of the
        batch is still processed.
        """
        cache = FileCache(working_dir)
        verified: list[VerifiedFinding] = []
        rejected: list[RejectedFinding] = []
        action_plan: list[ActionItem] = []

        for finding in output.findings:
            try:
                checked = self.verifier.verify(finding, working_dir, cache)
                checked = self.cross_checker.cross_check(checked, prior)
                item = self.prioritizer.prioritize(checked)
            except Exception as e:
                logger.exception(
                    "Failed to process finding {} from {}", finding.id, output.reviewer
                )
                rejected.append(RejectedFinding(finding=finding, reason=f"Verification error: {e}"))
                continue

            if item.action == FindingAction.REJECT:
                rejected.append(RejectedFinding(finding=finding, reason=item.reason))
            else:
                verified.append(checked)
                action_plan.append(item)

        action_plan.sort(key=lambda a: a.priority, reverse=True)
        top_priority = [a for a in action_plan if a.action == FindingAction.FIX_NOW]
        stats = cache.get_stats()

        logger.info(
            "Processed {} findings from {}: {} kept, {} rejected, {} fix now ({} files checked)",
            len(output.findings),
            output.reviewer,
            len(verified),
            len(rejected),
            len(top_priority),
            stats.files_checked,
        )

        return ProcessedReview(
            original=output,
            verified=verified,
            rejected=rejected,
            action_plan=action_plan,
            summary=ReviewSummary(
                total_findings=len(output.findings),
                verified_count=len(verified),
                rejected_count=len(rejected),
                actionable_count=len(top_priority),
                top_priority=top_priority,
            ),
            cache_stats=stats,
        )


def generate_follow_up_questions(processed: ProcessedReview) -> list[FollowUpQuestion]:
    """Questions to send back to the reviewer for findings marked investigate."""
    questions: list[FollowUpQuestion] = []

    for item in processed.action_plan:
        if item.action != FindingAction.INVESTIGATE:
            continue
        f = item.finding

        if f.verification.code_snippet_matches is False:
            location = f.location
            questions.append(
                FollowUpQuestion(
                    topic=f.title,
                    question=(
                        f'The evidence for "{f.title}" doesn\'t match the code at the '
                        "specified location. Can you verify this finding?"
                    ),
                    related_findings=[f.id],
                    context=(
                        f"File: {location.file if location else None}, "
                        f"Line: {location.line_start if location else None}"
                    ),
                )
            )

        if f.cross_check.conflicts_with_prior:
            questions.append(
                FollowUpQuestion(
                    topic=f.title,
                    question=(
                        "This finding conflicts with a prior assumption. "
                        "Which assessment is correct?"
                    ),
                    related_findings=[f.id],
                    context=f.finding.description,
                )
            )

    return questions
