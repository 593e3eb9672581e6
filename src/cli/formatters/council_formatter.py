from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from src.cli.formatters.review_formatter import SEVERITY_STYLES
from src.cli.theme import theme
from src.domain.entities.council_review import CouncilReviewOutput
from src.domain.value_objects.review_enums import RiskLevel

RISK_STYLES: dict[RiskLevel, str] = {
    RiskLevel.CRITICAL: theme.SEVERITY_CRITICAL,
    RiskLevel.HIGH: theme.SEVERITY_HIGH,
    RiskLevel.MEDIUM: theme.SEVERITY_MEDIUM,
    RiskLevel.LOW: theme.SEVERITY_LOW,
    RiskLevel.MINIMAL: theme.SUCCESS,
}


def format_council_review(console: Console, review: CouncilReviewOutput) -> None:
    risk = review.combined_risk
    style = RISK_STYLES[risk.overall_level]

    console.print(f"\n[{theme.HEADER}]🏛  Council Review[/]")
    console.print(f"   Models: [{theme.INFO}]{escape(', '.join(review.models_participated))}[/]")
    if review.models_failed:
        console.print(f"   Failed: [{theme.ERROR}]{escape(', '.join(review.models_failed))}[/]")

    concerns = "\n".join(f"• {escape(c)}" for c in risk.top_concerns)
    console.print(
        Panel(
            f"[{style}]{risk.overall_level.value.upper()}[/] (score {risk.score:g}/100)\n"
            f"{escape(risk.summary)}" + (f"\n\n{concerns}" if concerns else ""),
            title="Risk",
            border_style=theme.BORDER_WARNING,
        )
    )

    if review.consensus_findings:
        table = Table(title="Consensus Findings")
        table.add_column("Score", justify="right", style=theme.TABLE_VALUE)
        table.add_column("Severity")
        table.add_column("Title")
        table.add_column("Sources", style=theme.TABLE_ID)
        table.add_column("Location", style=theme.DIM)

        for finding in review.consensus_findings:
            table.add_row(
                f"{finding.consensus_score:.0%}",
                f"[{SEVERITY_STYLES[finding.severity]}]{finding.severity.value}[/]",
                escape(finding.title),
                escape(", ".join(finding.sources)),
                finding.location.display() if finding.location else "-",
            )
        console.print(table)
    else:
        console.print(f"[{theme.DIM}]No consensus findings[/]")

    if review.unanimous_agreements:
        console.print(f"\n[{theme.SUCCESS_BOLD}]✓✓ Unanimous agreements:[/]")
        for agreement in review.unanimous_agreements:
            console.print(f"   • {escape(agreement)}")

    if review.conflicts:
        console.print(f"\n[{theme.WARNING_BOLD}]⚠️  Conflicts:[/]")
        for conflict in review.conflicts:
            console.print(f"   [{theme.HEADER}]{escape(conflict.topic)}[/]")
            for model, position in conflict.positions.items():
                console.print(f"     - {escape(model)}: {position}")

    for model, insights in review.unique_insights.items():
        if not insights:
            continue
        console.print(f"\n[{theme.INFO_BOLD}]💡 Only {escape(model)} found:[/]")
        for insight in insights:
            console.print(f"   • {escape(insight)}")

    console.print(f"\n[{theme.DIM_ITALIC}]{review.synthesis_notes}[/]")
