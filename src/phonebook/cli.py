"""Seed/inspection CLI for the phonebook store.

Usage:
    phonebook                  # List every entry
    phonebook NAME NUMBER      # Add one entry (validated like the API)

Reads NEO4J_URI, NEO4J_USER, NEO4J_PASSWORD from the environment or .env.
"""

import logging
from typing import List, Optional

import typer

from phonebook.application import PhonebookService, Rejection, classify
from phonebook.config import Settings, load_env_file
from phonebook.domain import PhonebookError
from phonebook.infrastructure import open_repository

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="phonebook",
    help="List phonebook entries, or add one when NAME and NUMBER are given.",
    add_completion=False,
)


def run(service: PhonebookService, entry: list[str]) -> int:
    if not entry:
        typer.echo("phonebook:")
        for person in service.list_persons():
            typer.echo(f"{person.name} {person.number}")
        return 0

    name, number = entry
    try:
        result = service.create_person(name, number)
    except PhonebookError as exc:
        result = exc
    if isinstance(result, (Rejection, PhonebookError)):
        error = classify(result)
        typer.echo(f"could not add {name}: {error.body['error']}", err=True)
        return 1
    typer.echo(f"added {result.name} number {result.number} to phonebook")
    return 0


@app.command()
def main(
    entry: Optional[List[str]] = typer.Argument(
        None, metavar="[NAME NUMBER]", help="Name and 10-digit number of the entry to add"
    ),
) -> None:
    """List phonebook entries, or add one when NAME and NUMBER are given."""
    entry = entry or []
    if len(entry) not in (0, 2):
        raise typer.BadParameter("expected no arguments, or NAME and NUMBER", param_hint="NAME NUMBER")

    load_env_file()
    settings = Settings.from_env()
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=logging.WARNING,
    )
    with open_repository(settings) as repository:
        code = run(PhonebookService(repository), entry)
    if code:
        raise typer.Exit(code)


if __name__ == "__main__":
    app()
