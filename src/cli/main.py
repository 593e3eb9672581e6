import sys
from pathlib import Path

import typer
from loguru import logger

from src.cli.commands import council, verify


def setup_logging(verbose: bool = False, log_file: Path | None = None) -> Path:
    """Configure loguru logging."""
    logger.remove()

    file_path = log_file or Path("council-review.log")
    logger.add(
        file_path,
        format=(
            "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} - {message}"
        ),
        level="DEBUG",
        rotation="10 MB",
        encoding="utf-8",
    )

    if verbose:
        logger.add(
            sys.stderr,
            format="{time:HH:mm:ss} | {level: <8} | {message}",
            level="DEBUG",
        )

    return file_path


app = typer.Typer(
    name="council-review",
    help="Council review - verify and reconcile findings from multiple AI reviewers",
    no_args_is_help=True,
)

# Register commands
app.command(name="verify")(verify.verify_review)
app.command(name="council")(council.council_review)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output", is_eager=True),
    log_file: Path | None = typer.Option(None, "--log-file", help="Log file path"),
) -> None:
    """Council review - verify and reconcile findings from multiple AI reviewers."""
    setup_logging(verbose=verbose, log_file=log_file)


if __name__ == "__main__":
    app()
