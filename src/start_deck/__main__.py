"""CLI entry point for StartDeck."""

import argparse
import sys
import time
from pathlib import Path
from typing import List, Optional

from start_deck import PACKAGE_NAME, PROJECT_NAME, PROJECT_TAGLINE

from .core.errors import ConfigError
from .core.loader import load_deck_config
from .dashboard import Dashboard
from .render import apply
from .widgets.clock import ClockTicker


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PACKAGE_NAME,
        description=f"{PROJECT_NAME} - {PROJECT_TAGLINE}",
    )
    parser.add_argument("--config", type=Path, default=None, help="Path to startdeck.yaml")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("render", help="Render the dashboard page")

    links_parser = subparsers.add_parser("links", help="Manage links")
    links_sub = links_parser.add_subparsers(dest="links_command", required=True)
    links_sub.add_parser("list", help="List saved links")
    add_parser = links_sub.add_parser("add", help="Add a link")
    add_parser.add_argument("title")
    add_parser.add_argument("url")
    remove_parser = links_sub.add_parser("remove", help="Remove the first link with this URL")
    remove_parser.add_argument("url")

    city_parser = subparsers.add_parser("city", help="Set the weather city")
    city_parser.add_argument("name")

    title_parser = subparsers.add_parser("title", help="Set the dashboard title")
    title_parser.add_argument("text")

    notes_parser = subparsers.add_parser("notes", help="Replace the notes text")
    notes_parser.add_argument("text")

    subparsers.add_parser("joke", help="Fetch a new Chuck Norris joke")
    subparsers.add_parser("background", help="Fetch a new background image")
    subparsers.add_parser("watch", help="Keep the clock ticking and re-render every tick")

    return parser


def list_links(dashboard: Dashboard) -> int:
    records = list(dashboard.registry)
    if not records:
        print("No links saved")
    for record in records:
        print(f"{record.title}\t{record.url}")
    return 0


def handle_links(dashboard: Dashboard, args: argparse.Namespace) -> int:
    if args.links_command == "add":
        dashboard.submit_form("link-form", {"link-title": args.title, "link-url": args.url})
        print(f"✅ Added link: {args.title}")
        return 0

    if dashboard.delete_link(args.url):
        print(f"🗑️  Removed link: {args.url}")
        return 0
    print(f"⚠️  No link with URL {args.url}")
    return 1


def watch(dashboard: Dashboard, output_path: Path) -> int:
    def on_tick(moment):
        dashboard.tick(moment)
        apply(dashboard.view(), output_path)

    ticker = ClockTicker(on_tick, period=dashboard.config.clock_period_seconds)
    print(f"⏱️  Watching {output_path} (Ctrl+C to stop)")
    ticker.start()
    try:
        while ticker.running:
            time.sleep(0.5)
    except KeyboardInterrupt:
        print("\n👋 Stopped")
    finally:
        ticker.stop()
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    try:
        config = load_deck_config(args.config)
    except ConfigError as e:
        print(f"❌ {e}")
        return 2

    dashboard = Dashboard.create(config)
    if args.command == "links" and args.links_command == "list":
        return list_links(dashboard)

    dashboard.initialize()

    status = 0
    if args.command == "links":
        status = handle_links(dashboard, args)
    elif args.command == "city":
        dashboard.submit_form("city-form", {"city-input": args.name})
    elif args.command == "title":
        dashboard.edit_title(args.text)
    elif args.command == "notes":
        dashboard.edit_notes(args.text)
    elif args.command == "joke":
        dashboard.request_joke()
    elif args.command == "background":
        dashboard.request_background()
    elif args.command == "watch":
        return watch(dashboard, config.output_path)

    output = apply(dashboard.view(), config.output_path)
    print(f"💾 Rendered {output}")
    return status


if __name__ == "__main__":
    sys.exit(main())
