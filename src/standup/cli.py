"""Standup CLI - daily stand-up journal."""

import logging
import sys

import click

from .config import load_config, path_provider_for
from .core import Aspect
from .errors import (
    ConfigurationError,
    DecodeError,
    InvalidInputError,
    StandupError,
    StorageError,
)
from .session import Session

ASPECT_CHOICES = [a.value for a in Aspect] + ["blocked"]

date_option = click.option(
    "--date", "-d", "target_date", default=None,
    help="Date of the stand-up (YYYY-MM-DD), defaults to today",
)


def _fail(e: StandupError) -> None:
    """Report a core error and exit non-zero."""
    match e:
        case ConfigurationError():
            prefix = "Configuration error"
        case DecodeError():
            prefix = "Corrupt journal"
        case StorageError():
            prefix = "File error"
        case InvalidInputError():
            prefix = "Invalid input"
        case _:
            prefix = "Error"
    click.echo(f"{prefix}: {e}", err=True)
    sys.exit(1)


def _open(target_date: str | None) -> Session:
    try:
        config = load_config()
        return Session.open(target_date, path_provider_for(config))
    except StandupError as e:
        _fail(e)


@click.group()
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.version_option(package_name="standup")
def main(debug: bool):
    """Standup - manages stand-up entries and keeps a log."""
    if debug:
        logging.basicConfig(
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            level=logging.DEBUG,
        )


def _record(aspect: Aspect, message: str, target_date: str | None) -> None:
    session = _open(target_date)
    try:
        entry = session.record(aspect, message)
    except StandupError as e:
        _fail(e)
    click.echo(entry.format())


@main.command()
@date_option
@click.argument("message")
def today(message: str, target_date: str | None):
    """Record what you will be working on."""
    _record(Aspect.TODAY, message, target_date)


@main.command()
@date_option
@click.argument("message")
def yesterday(message: str, target_date: str | None):
    """Record what you worked on the day before."""
    _record(Aspect.YESTERDAY, message, target_date)


@main.command()
@date_option
@click.argument("message")
def blocker(message: str, target_date: str | None):
    """Record what is blocking you."""
    _record(Aspect.BLOCKER, message, target_date)


@main.command()
@date_option
def show(target_date: str | None):
    """Display the notes from a stand-up."""
    session = _open(target_date)
    click.echo(session.show())


@main.command("list")
@click.option("--newest-first/--oldest-first", default=None,
              help="Order of entries (default from LIST_ORDER in config)")
def list_entries(newest_first: bool | None):
    """Display every recorded stand-up."""
    try:
        config = load_config()
        session = Session.open(path_provider=path_provider_for(config))
    except StandupError as e:
        _fail(e)

    if newest_first is None:
        newest_first = config.newest_first

    if not session.all_entries():
        click.echo("No stand-ups recorded.")
        return
    click.echo(session.list_report(newest_first=newest_first))


@main.command()
@click.option("--date", "-d", "target_date", required=True,
              help="Date of the stand-up to delete (YYYY-MM-DD)")
@click.argument("aspect", required=False, type=click.Choice(ASPECT_CHOICES))
@click.argument("line_number", required=False, type=click.IntRange(min=1))
def delete(target_date: str, aspect: str | None, line_number: int | None):
    """Delete the stand-up on a day, or a single line of it."""
    if (aspect is None) != (line_number is None):
        raise click.UsageError("ASPECT and LINE_NUMBER must be given together.")

    session = _open(target_date)
    try:
        if aspect is None:
            removed = session.delete_entry()
            if removed is None:
                click.echo(f"No stand-up for {session.working_date.isoformat()}.")
            else:
                click.echo(f"Deleted stand-up for {removed.date.isoformat()}.")
            return

        entry = session.delete_line(Aspect.parse(aspect), line_number - 1)
    except StandupError as e:
        _fail(e)
    click.echo(entry.format())


main.add_command(today, "t")
main.add_command(yesterday, "y")
main.add_command(blocker, "b")
main.add_command(blocker, "blocked")
main.add_command(show, "s")
main.add_command(list_entries, "l")
main.add_command(delete, "d")


if __name__ == "__main__":
    main()
