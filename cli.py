"""CLI commands for wedding RSVP management."""

import asyncio

import typer

from src.config.settings import settings
from src.rsvp.dependencies import get_rsvp_store
from src.rsvp.dtos import StorageError
from src.rsvp.summary import summarize

app = typer.Typer(help="CLI commands for wedding RSVP management")


def _load_rsvps():
    try:
        return asyncio.run(get_rsvp_store().list_all())
    except StorageError as e:
        typer.secho(f"Could not read RSVPs: {e}", fg=typer.colors.RED)
        raise typer.Exit(1)


@app.command()
def list_rsvps(
    attending_only: bool = typer.Option(
        False,
        "--attending",
        "-a",
        help="Only show guests who will attend",
    ),
):
    """Print every stored RSVP in submission order."""
    rsvps = _load_rsvps()
    if attending_only:
        rsvps = [rsvp for rsvp in rsvps if rsvp.attending]

    if not rsvps:
        typer.secho("No RSVPs yet.", fg=typer.colors.YELLOW)
        return

    for rsvp in rsvps:
        color = typer.colors.GREEN if rsvp.attending else typer.colors.RED
        typer.secho(f"{rsvp.name} <{rsvp.email}>: {rsvp.attendance.value}", fg=color)
        typer.secho(f"  Submitted: {rsvp.submitted_at.isoformat()}", fg=typer.colors.CYAN)
        if rsvp.diet:
            typer.secho(f"  Diet: {rsvp.diet}", fg=typer.colors.BLUE)
        if rsvp.allergies:
            typer.secho(f"  Allergies: {rsvp.allergies}", fg=typer.colors.BLUE)
        if rsvp.message:
            typer.secho(f"  Message: {rsvp.message}", fg=typer.colors.MAGENTA)


@app.command()
def summary():
    """Count attending and declining guests, using each guest's latest RSVP."""
    result = summarize(_load_rsvps())

    typer.secho(f"Submissions: {result.total_submissions}", fg=typer.colors.BLUE)
    typer.secho(f"Guests: {result.guests}", fg=typer.colors.BLUE)
    typer.secho(f"Attending: {result.attending}", fg=typer.colors.GREEN)
    typer.secho(f"Declining: {result.declining}", fg=typer.colors.RED)
    if result.diets:
        typer.echo()
        typer.secho("Diets:", fg=typer.colors.GREEN)
        for diet, count in sorted(result.diets.items()):
            typer.secho(f"  - {diet}: {count}", fg=typer.colors.BLUE)


@app.command()
def check_config():
    """Show which notification settings are present, without their values."""
    for key, present in settings.env_check().items():
        typer.secho(
            f"{key}: {'yes' if present else 'no'}",
            fg=typer.colors.GREEN if present else typer.colors.YELLOW,
        )


if __name__ == "__main__":
    app()
