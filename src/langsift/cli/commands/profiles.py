"""
Command-line interface for inspecting language profiles.

Example Usage:
    # List the languages a profile directory provides
    langsift profiles list --profiles ./profiles --languages en,de,fr

    # Show the most frequent n-grams of one profile
    langsift profiles show en --profiles ./profiles --top 20
"""

from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from langsift.cli.utils.options import parse_languages, resolve_profile_dir
from langsift.core.exceptions.custom_exceptions import LangSiftError
from langsift.core.logging.logger import get_logger
from langsift.resources.loader import (
    find_code_map,
    load_profile_store,
    read_profile,
    resolve_profile_path,
)

app = typer.Typer(help="Language profile commands")
console = Console()
logger = get_logger(__name__)


@app.command(name="list")
def list_profiles(
    profiles: Optional[str] = typer.Option(
        None, "--profiles", "-p", help="Directory holding language profiles."
    ),
    profile: Optional[str] = typer.Option(
        None, "--profile", help="Profile set sub-directory to use."
    ),
    languages: Optional[str] = typer.Option(
        None, "--languages", "-l", help="Comma separated language codes."
    ),
) -> None:
    """Load profiles and list the languages of the resulting store."""
    profile_dir = resolve_profile_dir(profiles, console)
    try:
        store = load_profile_store(profile_dir, parse_languages(languages), profile)
        code_map = find_code_map(profile_dir, profile)
    except LangSiftError as e:
        console.print(f"Error: {e.message}", style="red")
        raise typer.Exit(1)

    table = Table(title="Language Profiles")
    table.add_column("Index", style="cyan")
    table.add_column("Language", style="green")
    table.add_column("Display Code", style="blue")
    table.add_column("N-grams", style="yellow")

    for index, code in enumerate(store.languages):
        observed = sum(
            1 for vector in store.ngram_probabilities.values() if vector[index] > 0.0
        )
        table.add_row(str(index), code, code_map.get(code, code), str(observed))

    console.print(table)
    console.print(f"{len(store)} distinct n-grams indexed", style="bold green")


@app.command()
def show(
    code: str = typer.Argument(..., help="Language code of the profile."),
    profiles: Optional[str] = typer.Option(
        None, "--profiles", "-p", help="Directory holding language profiles."
    ),
    profile: Optional[str] = typer.Option(
        None, "--profile", help="Profile set sub-directory to use."
    ),
    top: int = typer.Option(10, "--top", "-n", help="Number of n-grams to show."),
) -> None:
    """Show the totals and most frequent n-grams of one profile."""
    profile_dir = resolve_profile_dir(profiles, console)
    try:
        language_profile = read_profile(
            resolve_profile_path(profile_dir, code, profile)
        )
    except LangSiftError as e:
        console.print(f"Error: {e.message}", style="red")
        raise typer.Exit(1)

    totals = ", ".join(
        f"{n}-grams: {count}"
        for n, count in enumerate(language_profile.word_count_by_length, start=1)
    )
    console.print(f"Profile [bold]{language_profile.name}[/bold] ({totals})")

    table = Table(title=f"Top {top} N-grams")
    table.add_column("N-gram", style="cyan")
    table.add_column("Count", style="green")
    ranked = sorted(
        language_profile.frequency.items(), key=lambda item: (-item[1], item[0])
    )
    for ngram, count in ranked[:top]:
        table.add_row(repr(ngram), str(count))
    console.print(table)
