"""
Command-line interface for language detection.

Example Usage:
    # Detect the languages of a text
    langsift detect text "the quick brown fox" --profiles ./profiles

    # Restrict languages, remap codes and print JSON
    langsift detect text "der schnelle Fuchs" -p ./profiles -l en,de \\
        --map codes.yaml --json

    # Detect every line of a file
    langsift detect file notes.txt --profiles ./profiles --lines
"""

import json
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.table import Table

from langsift.cli.utils.options import build_service
from langsift.core.logging.logger import get_logger
from langsift.detection.ranker import Language

app = typer.Typer(help="Language detection commands")
console = Console()
logger = get_logger(__name__)


def _print_json(rows: List[tuple], as_list: bool) -> None:
    payload = [
        {"input": label, "languages": [r.to_dict() for r in results]}
        for label, results in rows
    ]
    typer.echo(json.dumps(payload if as_list else payload[0], indent=2))


def _print_table(title: str, rows: List[tuple]) -> None:
    table = Table(title=title)
    table.add_column("Input", style="cyan")
    table.add_column("Language", style="green")
    table.add_column("Probability", style="yellow")
    for label, results in rows:
        if not results:
            table.add_row(label, "-", "-")
            continue
        for i, result in enumerate(results):
            table.add_row(
                label if i == 0 else "",
                result.code,
                f"{result.probability:.6f}",
            )
    console.print(table)


def _preview(text: str, width: int = 40) -> str:
    text = " ".join(text.split())
    return text if len(text) <= width else text[: width - 3] + "..."


@app.command()
def text(
    input_text: str = typer.Argument(..., help="Text to analyze."),
    profiles: Optional[str] = typer.Option(
        None, "--profiles", "-p", help="Directory holding language profiles."
    ),
    profile: Optional[str] = typer.Option(
        None, "--profile", help="Profile set sub-directory to use."
    ),
    languages: Optional[str] = typer.Option(
        None, "--languages", "-l", help="Comma separated language codes."
    ),
    code_map: Optional[str] = typer.Option(
        None, "--map", help="JSON/YAML file mapping language codes."
    ),
    config_file: Optional[str] = typer.Option(
        None, "--config", "-c", help="Detection configuration file."
    ),
    max_results: Optional[int] = typer.Option(
        None, "--max", help="Maximum number of languages to report."
    ),
    as_json: bool = typer.Option(False, "--json", help="Print results as JSON."),
) -> None:
    """Detect the languages of a text."""
    service = build_service(
        console,
        profiles,
        profile,
        languages,
        code_map,
        config_file,
        max_results=max_results,
    )
    results: List[Language] = service.detect_all(input_text)
    rows = [(_preview(input_text), results)]
    if as_json:
        _print_json(rows, as_list=False)
    else:
        _print_table("Detected Languages", rows)


@app.command()
def file(
    input_file: str = typer.Argument(..., help="Path to a UTF-8 text file."),
    lines: bool = typer.Option(
        False, "--lines", help="Detect each non-empty line separately."
    ),
    profiles: Optional[str] = typer.Option(
        None, "--profiles", "-p", help="Directory holding language profiles."
    ),
    profile: Optional[str] = typer.Option(
        None, "--profile", help="Profile set sub-directory to use."
    ),
    languages: Optional[str] = typer.Option(
        None, "--languages", "-l", help="Comma separated language codes."
    ),
    code_map: Optional[str] = typer.Option(
        None, "--map", help="JSON/YAML file mapping language codes."
    ),
    config_file: Optional[str] = typer.Option(
        None, "--config", "-c", help="Detection configuration file."
    ),
    max_results: Optional[int] = typer.Option(
        None, "--max", help="Maximum number of languages to report."
    ),
    as_json: bool = typer.Option(False, "--json", help="Print results as JSON."),
) -> None:
    """Detect the languages of a file, whole or line by line."""
    path = Path(input_file)
    if not path.is_file():
        console.print(f"Input file not found: {input_file}", style="red")
        raise typer.Exit(1)

    service = build_service(
        console,
        profiles,
        profile,
        languages,
        code_map,
        config_file,
        max_results=max_results,
    )
    content = path.read_text(encoding="utf-8")

    if lines:
        rows = [
            (_preview(line), service.detect_all(line))
            for line in content.splitlines()
            if line.strip()
        ]
    else:
        rows = [(path.name, service.detect_all(content))]

    if not rows:
        console.print("Nothing to detect, the file is empty", style="yellow")
        return
    logger.info("File detection finished", path=str(path), inputs=len(rows))
    if as_json:
        _print_json(rows, as_list=lines)
    else:
        _print_table(f"Detected Languages: {path.name}", rows)
