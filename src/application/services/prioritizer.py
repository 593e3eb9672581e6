from src.application.dto.processed_review import ActionItem
from src.domain.entities.verified_finding import VerifiedFinding
from src.domain.value_objects.review_enums import FindingAction, Severity

SEVERITY_SCORES: dict[Severity, int] = {
    Severity.CRITICAL: 100,
    Severity.HIGH: 75,
    Severity.MEDIUM: 50,
    Severity.LOW: 25,
    Severity.INFO: 10,
}

SEVERITY_FACTOR = 0.4
CONFIDENCE_FACTOR = 0.6

LOW_CONFIDENCE_THRESHOLD = 0.3
CRITICAL_FIX_THRESHOLD = 70
FIX_NOW_THRESHOLD = 60
INVESTIGATE_THRESHOLD = 40


class Prioritizer:
    def calculate_priority(self, verified: VerifiedFinding) -> float:
        """Priority in [0, 100] from severity, adjusted confidence and verification state."""
        base = (
            SEVERITY_SCORES[verified.severity] * SEVERITY_FACTOR
            + verified.adjusted_confidence * 100 * CONFIDENCE_FACTOR
        )

        location_mod = 1.1 if verified.location else 0.9
        suggestion_mod = 1.1 if verified.suggestion else 1.0
        match_mod = 1.2 if verified.verification.code_snippet_matches is True else 1.0
        addressed_mod = 0.3 if verified.cross_check.already_addressed else 1.0

        priority = base * location_mod * suggestion_mod * match_mod * addressed_mod
        return min(100.0, max(0.0, priority))

    def determine_action(
        self, verified: VerifiedFinding, priority: float
    ) -> tuple[FindingAction, str]:
        verification = verified.verification

        if not verification.file_exists:
            return (
                FindingAction.REJECT,
                "Referenced file does not exist (possible hallucination)",
            )
        if not verification.line_valid:
            return FindingAction.REJECT, "Referenced line number is invalid"
        if verification.code_snippet_matches is False:
            return (
                FindingAction.INVESTIGATE,
                "Code evidence does not match - needs manual verification",
            )
        if verified.cross_check.already_addressed:
            return FindingAction.REJECT, "Already addressed in prior analysis"
        if verified.adjusted_confidence < LOW_CONFIDENCE_THRESHOLD:
            return FindingAction.DEFER, "Low confidence - may not be accurate"
        if verified.severity == Severity.CRITICAL and priority > CRITICAL_FIX_THRESHOLD:
            return FindingAction.FIX_NOW, "Critical severity with high confidence"
        if priority > FIX_NOW_THRESHOLD:
            return FindingAction.FIX_NOW, "High priority issue"
        if priority > INVESTIGATE_THRESHOLD:
            return FindingAction.INVESTIGATE, "Worth investigating further"
        return FindingAction.DEFER, "Lower priority - can address later"

    def prioritize(self, verified: VerifiedFinding) -> ActionItem:
        priority = self.calculate_priority(verified)
        action, reason = self.determine_action(verified, priority)
        return ActionItem(
            finding=verified,
            action=action,
            priority=priority,
            reason=reason,
            suggested_fix=verified.suggestion,
        )
