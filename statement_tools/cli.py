"""Typer console interface: convert statement PDFs into one CSV file."""

from pathlib import Path
from typing import List, Optional

import typer

from .exceptions import StatementParseError
from .logging_setup import configure_logging
from .processor_factory import ProcessorFactory

app = typer.Typer(add_completion=False, help="Convert bank statement PDFs to CSV.")


@app.command()
def convert(
    inputs: List[Path] = typer.Argument(..., help="One or more statement PDFs."),
    output: Path = typer.Option(..., "--output", "-o", help="CSV file to write."),
    no_header: bool = typer.Option(False, "--no-header", help="Omit the Date,Description,Amount header line."),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Logging level, e.g. DEBUG."),
) -> None:
    """Read every statement and write all transactions, oldest first, to OUTPUT.

    Each file is routed by its issuer. The whole run stops at the first
    statement that is unsupported or fails to parse or reconcile.
    """
    configure_logging(log_level)
    paths = [str(p) for p in inputs]
    try:
        processor = ProcessorFactory().processor_for(paths)
        transactions = processor.transform_statements(str(output), paths, add_header=not no_header)
    except StatementParseError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
    typer.echo(f"Wrote {len(transactions)} transactions from {len(inputs)} statement(s) to {output}")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
