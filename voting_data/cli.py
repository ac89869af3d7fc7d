"""Click CLI: loads settings, preloads meeting data and prints a summary."""

import asyncio
import logging
import sys

import click
from dotenv import load_dotenv
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from config.config_loader import AppSettings, load_settings
from voting_data.errors import LoaderError
from voting_data.loader import MeetingLoader
from voting_data.output import print_failures, print_meetings
from voting_data.transport import transport_for

logger = logging.getLogger(__name__)

console = Console(legacy_windows=False)


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
    )


async def _run(settings: AppSettings, meeting_path: str | None) -> int:
    """Load data according to settings and print it. Returns the exit code."""
    transport = transport_for(
        settings.source.location,
        timeout_sec=settings.http.timeout_sec,
        user_agent=settings.http.user_agent,
    )
    logger.debug("Source %s, configuration %s", settings.source.location, settings.source.config_path)
    async with transport:
        loader = MeetingLoader(transport, default_config_path=settings.source.config_path)
        try:
            if meeting_path:
                await loader.load_config()
                meetings = [await loader.load_meeting_file(meeting_path)]
                failures = []
            else:
                result = await loader.preload()
                meetings = result.meetings
                failures = result.failures
        except LoaderError as exc:
            console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
            return 1

        print_meetings(meetings)
        print_failures(failures)
    return 0


@click.command()
@click.option("--location", default=None,
              help="Directory or http(s) base URL holding the data (default: from settings)")
@click.option("--config-path", default=None,
              help="Configuration document, relative to the location (default: from settings)")
@click.option("--meeting", "meeting_path", default=None,
              help="Load a single meeting file instead of every configured one")
@click.option("--verbose", is_flag=True, help="Enable DEBUG-level logging")
def main(
    location: str | None,
    config_path: str | None,
    meeting_path: str | None,
    verbose: bool,
) -> None:
    """Voting data loader -- validate and list council meeting records.

    \b
    Examples:
      python -m voting_data.cli
      python -m voting_data.cli --location ./data --meeting meetings/2024-01-08.json
      python -m voting_data.cli --location https://example.org/voting/
    """
    load_dotenv()
    _setup_logging(verbose)

    try:
        settings = load_settings()
    except (FileNotFoundError, ValueError) as exc:
        console.print(f"[bold red]Config error:[/bold red] {exc}")
        sys.exit(1)

    if location:
        settings.source.location = location
    if config_path:
        settings.source.config_path = config_path

    sys.exit(asyncio.run(_run(settings, meeting_path)))


if __name__ == "__main__":
    main()
