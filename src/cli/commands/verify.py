import json
from pathlib import Path

import typer
from rich.console import Console
from rich.markdown import Markdown

from src.application.use_cases.process_review import ProcessReview, generate_follow_up_questions
from src.cli.commands.output_format import OutputFormat
from src.cli.formatters.markdown_report import format_processed_review as processed_markdown
from src.cli.formatters.review_formatter import format_follow_up_questions, format_processed_review
from src.cli.theme import theme
from src.infrastructure.persistence.review_loader import (
    ReviewLoadError,
    load_prior_analysis,
    load_review_output,
)

console = Console()


def verify_review(
    review_file: Path = typer.Argument(..., help="Reviewer output (JSON)"),
    workdir: Path = typer.Option(
        Path("."), "--workdir", "-w", help="Working directory the review refers to"
    ),
    prior_file: Path | None = typer.Option(
        None, "--prior", "-p", help="Prior analysis (JSON) to cross-check against"
    ),
    output_format: OutputFormat = typer.Option(
        OutputFormat.RICH, "--format", "-f", help="Output format"
    ),
) -> None:
    """Verify one reviewer's findings against the working tree."""
    try:
        output = load_review_output(review_file)
        prior = load_prior_analysis(prior_file) if prior_file else None
    except ReviewLoadError as e:
        console.print(f"[{theme.ERROR_BOLD}]Error:[/] {e}")
        raise typer.Exit(1) from e

    if not workdir.is_dir():
        console.print(f"[{theme.ERROR_BOLD}]Working directory not found:[/] {workdir}")
        raise typer.Exit(1)

    processed = ProcessReview().run(output, workdir.resolve(), prior)
    questions = generate_follow_up_questions(processed)

    if output_format == OutputFormat.JSON:
        payload = {
            "processed": processed.model_dump(mode="json"),
            "follow_up_questions": [q.model_dump(mode="json") for q in questions],
        }
        console.print_json(json.dumps(payload))
    elif output_format == OutputFormat.MARKDOWN:
        console.print(Markdown(processed_markdown(processed)))
    else:
        format_processed_review(console, processed)
        format_follow_up_questions(console, questions)
