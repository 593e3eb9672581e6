"""Markdown rendering of processed reviews and council reports."""

import math

from src.application.dto.processed_review import ActionItem, ProcessedReview
from src.domain.entities.council_review import (
    ConsensusFinding,
    CouncilReviewOutput,
    ModelConflict,
)
from src.domain.value_objects.review_enums import FindingAction, RiskLevel, Severity

SEVERITY_ORDER = [Severity.CRITICAL, Severity.HIGH, Severity.MEDIUM, Severity.LOW, Severity.INFO]

SEVERITY_EMOJI: dict[Severity, str] = {
    Severity.CRITICAL: "🔴",
    Severity.HIGH: "🟠",
    Severity.MEDIUM: "🟡",
    Severity.LOW: "🟢",
    Severity.INFO: "ℹ️",
}

RISK_EMOJI: dict[RiskLevel, str] = {
    RiskLevel.CRITICAL: "🔴",
    RiskLevel.HIGH: "🟠",
    RiskLevel.MEDIUM: "🟡",
    RiskLevel.LOW: "🟢",
    RiskLevel.MINIMAL: "✅",
}


def _round(value: float) -> int:
    return math.floor(value + 0.5)


def _by_action(items: list[ActionItem], action: FindingAction) -> list[ActionItem]:
    return [a for a in items if a.action == action]


def format_processed_review(processed: ProcessedReview) -> str:
    summary = processed.summary
    lines = [
        "# Review Analysis\n",
        f"**Total Findings:** {summary.total_findings}",
        f"**Verified:** {summary.verified_count}",
        f"**Rejected:** {summary.rejected_count}",
        f"**Actionable:** {summary.actionable_count}",
        "",
    ]

    fix_now = _by_action(processed.action_plan, FindingAction.FIX_NOW)
    investigate = _by_action(processed.action_plan, FindingAction.INVESTIGATE)
    defer = _by_action(processed.action_plan, FindingAction.DEFER)

    if fix_now:
        lines.append("## Fix Now (High Priority)\n")
        for item in fix_now:
            f = item.finding
            lines.append(f"### {f.title}")
            lines.append(
                f"**Severity:** {f.severity.value} | "
                f"**Confidence:** {_round(f.adjusted_confidence * 100)}% | "
                f"**Priority:** {_round(item.priority)}"
            )
            if f.location:
                lines.append(f"**Location:** {f.location.display()}")
            lines.append(f"\n{f.finding.description}")
            if f.suggestion:
                lines.append(f"\n💡 **Suggestion:** {f.suggestion}")
            lines.append("")

    if investigate:
        lines.append("## Investigate\n")
        for item in investigate:
            f = item.finding
            lines.append(f"- **{f.title}** [{f.severity.value}] - {item.reason}")
            if f.location:
                lines.append(f"  📍 {f.location.display()}")
        lines.append("")

    if defer:
        lines.append("## Deferred\n")
        for item in defer:
            f = item.finding
            lines.append(f"- {f.title} [{f.severity.value}] - {item.reason}")
        lines.append("")

    if processed.rejected:
        lines.append("## Rejected (Verification Failed)\n")
        for rejected in processed.rejected:
            lines.append(f"- ~~{rejected.finding.title}~~ - {rejected.reason}")
        lines.append("")

    return "\n".join(lines)


def format_consensus_findings(findings: list[ConsensusFinding]) -> str:
    if not findings:
        return "_No consensus findings_"

    lines: list[str] = []
    for severity in SEVERITY_ORDER:
        group = [f for f in findings if f.severity == severity]
        if not group:
            continue

        lines.append(
            f"\n### {SEVERITY_EMOJI[severity]} {severity.value.capitalize()} Severity\n"
        )
        for finding in group:
            if finding.agreement_count > 1:
                indicator = f"✓✓ ({finding.agreement_count} models agree)"
            else:
                indicator = "✓"
            confidence = _round(finding.consensus_score * 100)
            lines.append(f"**{finding.title}** {indicator} [{confidence}% confidence]")
            if finding.location:
                lines.append(f"  📍 {finding.location.display()}")
            lines.append(f"  {finding.description}")
            if finding.suggestion:
                lines.append(f"  💡 {finding.suggestion}")
            if finding.cwe_id:
                owasp = f" ({finding.owasp_category})" if finding.owasp_category else ""
                lines.append(f"  🔒 {finding.cwe_id}{owasp}")
            lines.append("")

    return "\n".join(lines)


def format_conflicts(conflicts: list[ModelConflict]) -> str:
    if not conflicts:
        return "_No conflicts detected_"

    lines: list[str] = []
    for conflict in conflicts:
        lines.append(f"**{conflict.topic}**")
        for model, position in conflict.positions.items():
            lines.append(f"  - {model}: {position}")
        if conflict.recommendation:
            lines.append(f"  → Recommendation: {conflict.recommendation}")
        lines.append("")
    return "\n".join(lines)


def format_council_review(review: CouncilReviewOutput) -> str:
    risk = review.combined_risk
    lines = [
        "# Council Review Report\n",
        f"**Models:** {', '.join(review.models_participated)}",
    ]
    if review.models_failed:
        lines.append(f"**Failed:** {', '.join(review.models_failed)}")
    lines.append("")

    lines.append(f"## Risk Assessment {RISK_EMOJI[risk.overall_level]}\n")
    lines.append(
        f"**Level:** {risk.overall_level.value.upper()} (Score: {risk.score:g}/100)"
    )
    lines.append(f"\n{risk.summary}\n")
    if risk.top_concerns:
        lines.append("**Top Concerns:**")
        lines.extend(f"- {concern}" for concern in risk.top_concerns)
        lines.append("")

    lines.append("## Consensus Findings\n")
    lines.append(format_consensus_findings(review.consensus_findings))

    if review.unanimous_agreements:
        lines.append("\n## Unanimous Agreements ✓✓\n")
        lines.append("_All models agreed on these assessments:_\n")
        lines.extend(f"- {agreement}" for agreement in review.unanimous_agreements)
        lines.append("")

    if review.conflicts:
        lines.append("\n## Conflicts ⚠️\n")
        lines.append("_Models disagreed on these points:_\n")
        lines.append(format_conflicts(review.conflicts))

    insights = {model: items for model, items in review.unique_insights.items() if items}
    if insights:
        lines.append("\n## Unique Insights\n")
        lines.append("_Findings from individual models that others missed:_\n")
        for model, items in insights.items():
            lines.append(f"**{model}:**")
            lines.extend(f"- {insight}" for insight in items)
            lines.append("")

    if review.synthesis_notes:
        lines.append(f"\n---\n_{review.synthesis_notes}_")

    return "\n".join(lines)
