#!/usr/bin/env python3
"""Command-line interface for dailymotion_sdk.

This CLI is primarily for debugging and development.
For production use, import dailymotion_sdk as a library.

Credentials are read from ``DAILYMOTION_*`` environment variables; see
``DailymotionOptions.from_env``.
"""

import json
import logging
import sys

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from dailymotion_sdk.client import DailymotionClient
from dailymotion_sdk.config import DailymotionOptions
from dailymotion_sdk.exceptions import DailymotionError
from dailymotion_sdk.models.fields import VideoField, from_wire_name
from dailymotion_sdk.models.metadata import VideoMetadata
from dailymotion_sdk.models.responses import VideoListResponse

logger = logging.getLogger("dailymotion_sdk")

DEFAULT_VIDEO_FIELDS = (
    VideoField.ID,
    VideoField.TITLE,
    VideoField.CHANNEL,
    VideoField.DURATION,
    VideoField.OWNER,
    VideoField.VIEWS_TOTAL,
    VideoField.CREATED_TIME,
    VideoField.URL,
)


def setup_logging(verbose: bool = False, console: Console | None = None) -> None:
    """Configure logging with Rich handler.

    Args:
        verbose: If True, set log level to DEBUG. Otherwise WARNING.
        console: Optional Console instance to use for RichHandler.
    """
    level = logging.DEBUG if verbose else logging.WARNING

    root_logger = logging.getLogger()
    root_logger.handlers.clear()

    handler = RichHandler(
        rich_tracebacks=True,
        show_path=False,
        console=console,
    )
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))

    root_logger.setLevel(level)
    root_logger.addHandler(handler)
    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)


def parse_fields(value: str | None) -> list[VideoField]:
    """Parse a comma-separated list of wire field names.

    Raises:
        click.BadParameter: If a name is not a known field.
    """
    if not value:
        return list(DEFAULT_VIDEO_FIELDS)
    fields = []
    for name in value.split(","):
        name = name.strip()
        if not name:
            continue
        field = from_wire_name(name)
        if field is None:
            raise click.BadParameter(f"Unknown field: {name}", param_hint="--fields")
        fields.append(field)
    return fields


def format_duration(seconds: int | None) -> str:
    """Format seconds as M:SS or H:MM:SS."""
    if seconds is None:
        return "-"
    hours, rest = divmod(seconds, 3600)
    minutes, secs = divmod(rest, 60)
    if hours:
        return f"{hours}:{minutes:02d}:{secs:02d}"
    return f"{minutes}:{secs:02d}"


def format_value(value: object) -> str:
    if value is None:
        return "[dim](none)[/dim]"
    if isinstance(value, list):
        return ", ".join(str(v) for v in value) or "[dim](empty)[/dim]"
    return str(value)


def print_video_card(console: Console, video: VideoMetadata) -> None:
    """Print every available field of a video as a vertical card."""
    table = Table(
        show_header=False,
        padding=(0, 1),
        title=f"[bold yellow]{video.title or video.id or 'Video'}[/bold yellow]",
        title_justify="left",
    )
    table.add_column("Field", style="bold cyan")
    table.add_column("Value", overflow="fold")

    for field in video.available_fields():
        value = video.get(field)
        if field == VideoField.DURATION:
            table.add_row(field.value, format_duration(video.duration))
        else:
            table.add_row(field.value, format_value(value))

    console.print()
    console.print(table)


def print_video_list(console: Console, page: VideoListResponse, title: str) -> None:
    """Print a page of videos as a table."""
    table = Table(title=title, title_justify="left")
    table.add_column("#", justify="right", style="dim")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Title", overflow="fold")
    table.add_column("Duration", justify="right")
    table.add_column("Views", justify="right")

    first = (page.page - 1) * page.limit
    for index, video in enumerate(page.items, start=first + 1):
        table.add_row(
            str(index),
            video.id or "-",
            video.title or "-",
            format_duration(video.duration),
            format_value(video.views_total),
        )

    console.print()
    console.print(table)
    more = " [dim](more available)[/dim]" if page.has_more else ""
    console.print(f"Page {page.page}, {len(page.items)} videos{more}")


def build_client(authenticate: bool) -> DailymotionClient:
    """Create a client from the environment, authenticating when possible."""
    options = DailymotionOptions.from_env()
    client = DailymotionClient(options)
    if authenticate and (options.has_user_credentials or options.api_credentials[0]):
        token = client.authenticate()
        if not token.is_successful:
            client.close()
            raise click.ClickException("Authentication failed (see log output)")
    return client


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
@click.pass_context
def main(ctx: click.Context, verbose: bool) -> None:
    """Query the Dailymotion API."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    setup_logging(verbose=verbose)


@main.command(name="video")
@click.argument("video_id", metavar="ID")
@click.option(
    "--fields", help="Comma-separated field names, e.g. id,title,duration."
)
@click.option("--json", "as_json", is_flag=True, help="Output as JSON.")
@click.option(
    "--no-auth", is_flag=True, help="Do not authenticate before the request."
)
def video_cmd(
    video_id: str, fields: str | None, as_json: bool, no_auth: bool
) -> None:
    """Show metadata of a single video.

    \b
    Examples:
      dailymotion video x8abc12
      dailymotion video x8abc12 --fields id,title,tags --json
    """
    console = Console()
    requested = parse_fields(fields)

    try:
        with build_client(authenticate=not no_auth) as client:
            video = client.get_video(video_id, requested)
    except DailymotionError as e:
        logger.error(e.message)
        raise click.ClickException(e.message) from e
    except ValueError as e:
        raise click.ClickException(str(e)) from e

    if video is None:
        raise click.ClickException(f"Video not found: {video_id}")

    if as_json:
        json.dump(
            video.to_wire_dict(), sys.stdout, indent=2, ensure_ascii=False
        )
        sys.stdout.write("\n")
    else:
        print_video_card(console, video)


@main.command(name="search")
@click.argument("query")
@click.option(
    "--limit",
    type=click.IntRange(1, 100),
    default=10,
    show_default=True,
    help="Results per page.",
)
@click.option(
    "--page", type=click.IntRange(min=1), default=1, show_default=True
)
@click.option("--json", "as_json", is_flag=True, help="Output as JSON.")
def search_cmd(query: str, limit: int, page: int, as_json: bool) -> None:
    """Search public videos.

    \b
    Examples:
      dailymotion search "surf" --limit 5
    """
    console = Console()
    fields = list(DEFAULT_VIDEO_FIELDS)

    try:
        with build_client(authenticate=False) as client:
            result = client.search_videos(query, limit, page, fields=fields)
    except DailymotionError as e:
        logger.error(e.message)
        raise click.ClickException(e.message) from e
    except ValueError as e:
        raise click.ClickException(str(e)) from e

    if as_json:
        data = {
            "page": result.page,
            "limit": result.limit,
            "has_more": result.has_more,
            "list": [video.to_wire_dict() for video in result.items],
        }
        json.dump(data, sys.stdout, indent=2, ensure_ascii=False)
        sys.stdout.write("\n")
    else:
        print_video_list(console, result, f"Search: {query}")


@main.command(name="token")
def token_cmd() -> None:
    """Authenticate from the environment and show the token.

    The access token itself is never printed.
    """
    console = Console()

    try:
        with build_client(authenticate=False) as client:
            token = client.authenticate()
            if not token.is_successful:
                raise click.ClickException("Authentication failed (see log output)")
            validation = client.validate_token()
            state = client.auth.state
            key_type = client.auth.api_key_type
            expires_at = client.auth.expires_at
    except DailymotionError as e:
        logger.error(e.message)
        raise click.ClickException(e.message) from e
    except ValueError as e:
        raise click.ClickException(str(e)) from e

    table = Table(show_header=False, padding=(0, 1))
    table.add_column("Field", style="bold cyan")
    table.add_column("Value", overflow="fold")
    table.add_row("State", str(state))
    table.add_row("Key type", str(key_type))
    table.add_row("Token type", token.token_type)
    table.add_row("Expires in", f"{token.expires_in}s")
    table.add_row("Expires at", format_value(expires_at))
    table.add_row("Scopes", format_value(token.scopes))
    table.add_row("User id", format_value(token.uid))
    table.add_row("Refresh token", "yes" if token.has_refresh_token else "no")
    if validation is None:
        table.add_row("Valid", "[yellow]unknown[/yellow]")
    else:
        valid = "[green]yes[/green]" if validation.valid else "[red]no[/red]"
        table.add_row("Valid", valid)

    console.print()
    console.print(table)


if __name__ == "__main__":
    main()
