"""Command-line interface for the Oura API."""

import argparse
import json
import logging
import os
import sys

from dotenv import load_dotenv
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel

from oura_cli import __version__, display
from oura_cli.client import OuraClient
from oura_cli.dates import resolve_date, trailing_window
from oura_cli.errors import MissingCredentialError, OuraError
from oura_cli.trend import for_day, join_scores, periods_for_day

console = Console()
err_console = Console(stderr=True)

log = logging.getLogger(__name__)


def configure_logging(verbose: bool):
    """Send log records to stderr through Rich."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
    )


def non_negative_int(value: str) -> int:
    """argparse type for day counts."""
    days = int(value)
    if days < 0:
        raise argparse.ArgumentTypeError(f"must not be negative: {value}")
    return days


def require_token(args) -> str:
    """Load env vars and require a token."""
    load_dotenv()
    token = getattr(args, "token", None) or os.getenv("OURA_TOKEN")
    if not token:
        raise MissingCredentialError()
    return token


def open_client(args) -> OuraClient:
    """Create a client from CLI flags and environment."""
    return OuraClient(token=require_token(args), base_url=os.getenv("OURA_API_URL"))


def cmd_scores(args):
    """Sleep, readiness and activity scores for a day."""
    day = resolve_date(args.date)
    with open_client(args) as client:
        sleep = client.daily_sleep(day)
        readiness = client.daily_readiness(day)
        activity = client.daily_activity(day)

    display.display_scores(
        for_day(sleep, day),
        for_day(readiness, day),
        for_day(activity, day),
    )


def cmd_sleep(args):
    """Detailed sleep breakdown for a day."""
    day = resolve_date(args.date)
    with open_client(args) as client:
        periods = client.sleep(day)
        daily = client.daily_sleep(day)

    display.display_sleep(for_day(daily, day), periods_for_day(periods, day))


def cmd_readiness(args):
    """Readiness score and contributors for a day."""
    day = resolve_date(args.date)
    with open_client(args) as client:
        readiness = client.daily_readiness(day)

    display.display_readiness(for_day(readiness, day))


def cmd_activity(args):
    """Activity summary for a day."""
    day = resolve_date(args.date)
    with open_client(args) as client:
        activity = client.daily_activity(day)

    display.display_activity(for_day(activity, day))


def cmd_hrv(args):
    """Heart rate variability from the night's sleep."""
    day = resolve_date(args.date)
    with open_client(args) as client:
        periods = client.sleep(day)
        daily = client.daily_sleep(day)

    display.display_hrv(for_day(daily, day), periods_for_day(periods, day))


def cmd_stress(args):
    """Daily stress summary."""
    day = resolve_date(args.date)
    with open_client(args) as client:
        stress = client.daily_stress(day)

    display.display_stress(for_day(stress, day))


def cmd_trend(args):
    """Score trend over the last N days."""
    window = trailing_window(args.days)
    days = window.days()
    if window.is_empty:
        display.display_trend(join_scores(days, [], [], []))
        return

    with open_client(args) as client:
        sleep = client.daily_sleep_range(window.start, window.end)
        readiness = client.daily_readiness_range(window.start, window.end)
        activity = client.daily_activity_range(window.start, window.end)

    display.display_trend(join_scores(days, sleep, readiness, activity))


def cmd_json(args):
    """Raw JSON from any endpoint."""
    day = resolve_date(args.date)
    with open_client(args) as client:
        raw_data = client.raw(args.endpoint, day)

    print(json.dumps(raw_data, indent=2))


def cmd_token_help(args):
    """Show instructions for obtaining a personal access token."""
    instructions = """
[bold cyan]How to Get Your Oura Personal Access Token[/bold cyan]

1. Open [link=https://cloud.ouraring.com/personal-access-tokens]https://cloud.ouraring.com/personal-access-tokens[/link]
2. Log in with your Oura account
3. Click "Create New Personal Access Token"
4. Copy the token (it is only shown once)

[bold cyan]Using Your Token[/bold cyan]

1. Set it in your environment or a .env file:
   [dim]OURA_TOKEN=your_token_here[/dim]

2. Pass it directly to commands:
   [dim]oura scores --token YOUR_TOKEN[/dim]

[bold yellow]Note:[/bold yellow] Revoke the token from the same page if it leaks.
"""
    console.print(Panel(instructions, title="Token Guide", border_style="blue"))


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    common_parser = argparse.ArgumentParser(add_help=False)
    common_parser.add_argument(
        "-t", "--token", default=argparse.SUPPRESS, help="Oura personal access token (default: $OURA_TOKEN)"
    )
    common_parser.add_argument(
        "-v", "--verbose", action="store_true", default=argparse.SUPPRESS, help="Log API requests to stderr"
    )

    parser = argparse.ArgumentParser(
        prog="oura",
        description="Oura Ring CLI - sleep, readiness, and activity from your terminal",
        parents=[common_parser],
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.set_defaults(func=cmd_scores, date=None)

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    date_help = 'Date: YYYY-MM-DD, "today", or "yesterday" (default: today)'
    daily_commands = [
        ("scores", "Sleep + readiness + activity scores (default)", cmd_scores),
        ("sleep", "Detailed sleep breakdown", cmd_sleep),
        ("readiness", "Readiness score and contributors", cmd_readiness),
        ("activity", "Activity summary (steps, calories, movement)", cmd_activity),
        ("hrv", "Heart rate variability from sleep", cmd_hrv),
        ("stress", "Daily stress summary", cmd_stress),
    ]
    for name, help_text, func in daily_commands:
        sub = subparsers.add_parser(name, help=help_text, parents=[common_parser])
        sub.add_argument("date", nargs="?", help=date_help)
        sub.set_defaults(func=func)

    trend_parser = subparsers.add_parser(
        "trend", help="Score trend over the last N days", parents=[common_parser]
    )
    trend_parser.add_argument(
        "-d", "--days", type=non_negative_int, default=7, help="Number of days to show (default: 7)"
    )
    trend_parser.set_defaults(func=cmd_trend)

    json_parser = subparsers.add_parser(
        "json", help="Raw JSON from any endpoint (for piping)", parents=[common_parser]
    )
    json_parser.add_argument(
        "endpoint", help="API endpoint (e.g. daily_sleep, sleep, daily_activity, daily_stress)"
    )
    json_parser.add_argument("date", nargs="?", help=date_help)
    json_parser.set_defaults(func=cmd_json)

    token_parser = subparsers.add_parser("token", help="Token utilities")
    token_parser.set_defaults(func=cmd_token_help)
    token_subparsers = token_parser.add_subparsers(dest="token_command")

    token_help_parser = token_subparsers.add_parser("help", help="How to get your access token")
    token_help_parser.set_defaults(func=cmd_token_help)

    return parser


def main(argv: list[str] | None = None):
    """Main entry point for CLI."""
    args = build_parser().parse_args(argv)
    configure_logging(getattr(args, "verbose", False))

    try:
        args.func(args)
    except OuraError as e:
        log.debug("Command failed", exc_info=True)
        err_console.print(f"[red]Error:[/red] {escape(str(e))}", highlight=False)
        sys.exit(1)


if __name__ == "__main__":
    main()
