from rich.console import Console
from rich.markup import escape
from rich.table import Table

from src.application.dto.processed_review import FollowUpQuestion, ProcessedReview
from src.cli.theme import theme
from src.domain.value_objects.review_enums import FindingAction, Severity

SEVERITY_STYLES: dict[Severity, str] = {
    Severity.CRITICAL: theme.SEVERITY_CRITICAL,
    Severity.HIGH: theme.SEVERITY_HIGH,
    Severity.MEDIUM: theme.SEVERITY_MEDIUM,
    Severity.LOW: theme.SEVERITY_LOW,
    Severity.INFO: theme.SEVERITY_INFO,
}

ACTION_STYLES: dict[FindingAction, str] = {
    FindingAction.FIX_NOW: theme.ACTION_FIX_NOW,
    FindingAction.INVESTIGATE: theme.ACTION_INVESTIGATE,
    FindingAction.DEFER: theme.ACTION_DEFER,
    FindingAction.REJECT: theme.ACTION_REJECT,
}


def format_processed_review(console: Console, processed: ProcessedReview) -> None:
    summary = processed.summary
    console.print(f"\n[{theme.HEADER}]🔎 Review from {escape(processed.original.reviewer)}[/]")
    console.print(
        f"   {summary.total_findings} findings: "
        f"[{theme.SUCCESS}]{summary.verified_count} kept[/], "
        f"[{theme.ERROR}]{summary.rejected_count} rejected[/], "
        f"[{theme.ACTION_FIX_NOW}]{summary.actionable_count} fix now[/]"
    )

    if processed.action_plan:
        table = Table(title="Action Plan")
        table.add_column("Priority", justify="right", style=theme.TABLE_VALUE)
        table.add_column("Action")
        table.add_column("Severity")
        table.add_column("Title")
        table.add_column("Location", style=theme.DIM)
        table.add_column("Confidence", justify="right")

        for item in processed.action_plan:
            f = item.finding
            table.add_row(
                f"{item.priority:.0f}",
                f"[{ACTION_STYLES[item.action]}]{item.action.value}[/]",
                f"[{SEVERITY_STYLES[f.severity]}]{f.severity.value}[/]",
                escape(f.title),
                f.location.display() if f.location else "-",
                f"{f.adjusted_confidence:.0%}",
            )
        console.print(table)

    if processed.rejected:
        console.print(f"\n[{theme.WARNING}]Rejected:[/]")
        for rejected in processed.rejected:
            title = escape(rejected.finding.title)
            console.print(f"   • {title} [{theme.DIM}]({escape(rejected.reason)})[/]")

    stats = processed.cache_stats
    console.print(
        f"\n[{theme.DIM}]📁 {stats.files_checked} files checked, {stats.files_loaded} loaded[/]"
    )


def format_follow_up_questions(console: Console, questions: list[FollowUpQuestion]) -> None:
    if not questions:
        return

    console.print(f"\n[{theme.HEADER_SECTION}]❓ Follow-up questions[/]")
    for i, question in enumerate(questions, 1):
        console.print(f"  {i}. {escape(question.question)}")
        console.print(f"     [{theme.DIM}]{escape(question.context)}[/]")
