"""Command line interface for searching stations."""

import asyncio
import json
import sys
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

import aiohttp

from station_finder.adapters.terminal import (
    format_result_line,
    format_station_card,
    render_snapshot,
)
from station_finder.domain.models import NavigationKey, ScoredStation, SessionSnapshot
from station_finder.main import (
    configure_logging,
    create_catalog,
    create_recents,
    create_session,
    load_config,
)

if TYPE_CHECKING:
    from station_finder.application.services import QuerySessionController

INTERACTIVE_HELP = """Type a query to search. Commands:
  :down / :up        move the highlight
  :enter             select the highlighted station
  :esc               close the results
  :pick N            select result number N
  :remove CODE       remove a selected station
  :clear             clear the query
  :retry             retry loading the dataset
  :help              show this help
  :quit              exit"""

_KEY_COMMANDS: dict[str, NavigationKey] = {
    ":down": NavigationKey.DOWN,
    ":up": NavigationKey.UP,
    ":enter": NavigationKey.CONFIRM,
    ":esc": NavigationKey.DISMISS,
}


def _print_snapshot(snapshot: SessionSnapshot) -> None:
    print(render_snapshot(snapshot))
    print()


def handle_command(controller: "QuerySessionController", line: str) -> bool | None:
    """Apply one line of interactive input to the session.

    Returns:
        False to quit, None for async work (retry) the caller must run, True otherwise.
    """
    text = line.strip()
    if text in (":quit", ":q"):
        return False
    if text == ":help":
        print(INTERACTIVE_HELP)
        return True
    if text == ":retry":
        return None
    if text == ":clear":
        controller.clear_query()
        return True
    if text in _KEY_COMMANDS:
        if not controller.handle_key(_KEY_COMMANDS[text]):
            print("(nothing to navigate)")
        return True
    if text.startswith(":pick "):
        try:
            index = int(text.split(maxsplit=1)[1]) - 1
        except ValueError:
            print("Usage: :pick N")
            return True
        if not 0 <= index < len(controller.results):
            print(f"No result number {index + 1}")
            return True
        controller.select(controller.results[index])
        return True
    if text.startswith(":remove "):
        controller.remove_selected(text.split(maxsplit=1)[1].strip())
        return True

    controller.set_query(line.rstrip("\n"))
    return True


async def run_interactive(
    controller: "QuerySessionController", read_line: Callable[[str], str] = input
) -> None:
    """Run a line-driven search session until the user quits."""
    unsubscribe = controller.subscribe(_print_snapshot)
    try:
        await controller.start()
        print(INTERACTIVE_HELP)
        while True:
            try:
                line = read_line("search> ")
            except EOFError:
                break
            outcome = handle_command(controller, line)
            if outcome is False:
                break
            if outcome is None:
                await controller.retry()
    finally:
        unsubscribe()


def positive_int(value: str) -> int:
    """Argparse type for counts that must be at least 1."""
    import argparse

    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}") from None
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


async def search_once(query: str, limit: int | None = None) -> list[ScoredStation]:
    """Load the dataset and return the ranked matches for one query."""
    config = load_config()
    async with aiohttp.ClientSession() as session:
        catalog = create_catalog(config, session)
        if not await catalog.load() or catalog.matcher is None:
            reason = catalog.error.reason if catalog.error else "dataset unavailable"
            raise RuntimeError(reason)
        cap = config.result_cap if limit is None else min(limit, config.result_cap)
        return catalog.matcher.search(query, cap)


def show_recent(format_json: bool = False) -> None:
    """Print the persisted recent stations."""
    recents = create_recents(load_config()).load()
    if format_json:
        print(json.dumps([s.to_dict() for s in recents], indent=2, ensure_ascii=False))
        return
    if not recents:
        print("No recent stations.")
        return
    print("Recently viewed stations\n")
    for station in recents:
        print(format_station_card(station))
        print()


async def main() -> None:
    """Main CLI entry point."""
    import argparse

    parser = argparse.ArgumentParser(
        description="Indian Railway Station Search",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Search by name, code, district, state or regional script
  station-finder search "new delhi"
  station-finder search GZB
  station-finder search "नई दिल्ली" --json

  # Extended search: prefix, exact, exclude
  station-finder search "^mumbai !central"

  # Show recently selected stations
  station-finder recent

  # Interactive session
  station-finder interactive
        """,
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    search_parser = subparsers.add_parser("search", help="Search for stations")
    search_parser.add_argument("query", help="Search query")
    search_parser.add_argument("--limit", type=positive_int, default=None, help="Maximum results")
    search_parser.add_argument("--json", action="store_true", help="Output as JSON")

    recent_parser = subparsers.add_parser("recent", help="Show recently selected stations")
    recent_parser.add_argument("--json", action="store_true", help="Output as JSON")

    subparsers.add_parser("interactive", help="Start an interactive search session")

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    configure_logging("DEBUG" if args.verbose else "WARNING")

    try:
        if args.command == "search":
            results = await search_once(args.query, limit=args.limit)
            if args.json:
                payload = [_match_to_dict(match) for match in results]
                print(json.dumps(payload, indent=2, ensure_ascii=False))
            else:
                if not results:
                    print(f"No stations found for '{args.query}'", file=sys.stderr)
                    sys.exit(1)
                print(f"\nFound {len(results)} station(s):\n")
                for match in results:
                    print(format_result_line(match.station))

        elif args.command == "recent":
            show_recent(format_json=args.json)

        elif args.command == "interactive":
            config = load_config()
            async with aiohttp.ClientSession() as session:
                controller = create_session(
                    config, create_catalog(config, session), create_recents(config)
                )
                await run_interactive(controller)

    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


def _match_to_dict(match: ScoredStation) -> dict[str, Any]:
    return {
        **match.station.to_dict(),
        "score": round(match.score, 4),
        "matchedField": match.matched_field,
    }


def cli_main() -> None:
    """Synchronous entry point for the CLI command."""
    asyncio.run(main())


if __name__ == "__main__":
    cli_main()
