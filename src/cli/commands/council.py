from pathlib import Path

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markdown import Markdown

from src.application.use_cases.synthesize_council_review import SynthesizeCouncilReview
from src.cli.commands.output_format import OutputFormat
from src.cli.formatters.council_formatter import format_council_review
from src.cli.formatters.markdown_report import format_council_review as council_markdown
from src.cli.theme import theme
from src.domain.value_objects.consensus_config import ConsensusConfig
from src.infrastructure.persistence.review_loader import load_reviews

console = Console()


def council_review(
    review_files: list[Path] = typer.Argument(
        ..., help="Reviewer outputs (JSON), one per reviewer"
    ),
    min_consensus: float = typer.Option(
        0.3, "--min-consensus", help="Minimum consensus score (0-1)"
    ),
    include_single_source: bool = typer.Option(
        True, "--single-source/--no-single-source", help="Keep findings reported by one reviewer"
    ),
    single_source_min_confidence: float = typer.Option(
        0.7, "--single-source-min-confidence", help="Minimum confidence for single-source findings"
    ),
    similarity_threshold: float = typer.Option(
        0.6, "--similarity-threshold", help="Similarity needed to merge findings (0-1)"
    ),
    agreement_boost: float = typer.Option(
        1.5, "--agreement-boost", help="Score multiplier when every reviewer agrees (>= 1)"
    ),
    output_format: OutputFormat = typer.Option(
        OutputFormat.RICH, "--format", "-f", help="Output format"
    ),
) -> None:
    """Synthesize several reviewers' outputs into a council review."""
    try:
        config = ConsensusConfig(
            min_consensus_threshold=min_consensus,
            include_single_source_findings=include_single_source,
            single_source_min_confidence=single_source_min_confidence,
            similarity_threshold=similarity_threshold,
            agreement_boost=agreement_boost,
        )
    except ValidationError as e:
        console.print(f"[{theme.ERROR_BOLD}]Invalid option:[/] {e.errors()[0]['msg']}")
        raise typer.Exit(1) from e

    reviews, failed = load_reviews(review_files)
    if not reviews:
        console.print(f"[{theme.ERROR_BOLD}]No reviewer output could be loaded[/]")
        raise typer.Exit(1)

    review = SynthesizeCouncilReview(config).run(reviews, failed)

    if output_format == OutputFormat.JSON:
        console.print_json(review.model_dump_json())
    elif output_format == OutputFormat.MARKDOWN:
        console.print(Markdown(council_markdown(review)))
    else:
        format_council_review(console, review)
