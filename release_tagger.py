#!/usr/bin/env python3
import argparse
import sys

from rich.console import Console

from cdn_assets.clients.git_client import GitClient
from cdn_assets.models import ReleaseRequest
from cdn_assets.repositories import SettingsRepository
from cdn_assets.services.release_service import ReleaseService
from cdn_assets.utils.console import build_confirmer, print_error
from cdn_assets.utils.logging import setup_logger

EPILOG = """\
Examples:
  cdn-release v1.0.1
  cdn-release v2.0.0 "Major release"
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Create a release tag for the CDN assets and print its immutable URLs",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument('version', nargs='?', help='Release tag, e.g. v1.0.1')
    parser.add_argument('message', nargs='?', help='Tag message (default: "Release <version>")')
    parser.add_argument('-d', '--dry-run', action='store_true', help='Show what would be done without making changes')
    parser.add_argument('-y', '--yes', action='store_true', help='Answer yes to every confirmation')
    parser.add_argument('-c', '--config', metavar='FILE', help='YAML config file')
    return parser


def main(argv: list[str] | None = None, console: Console | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    console = console or Console()
    logger = setup_logger("ReleaseTagger")

    try:
        settings = SettingsRepository(args.config).load()
        if not args.version:
            print_error(console, "Version required")
            console.print(parser.format_usage(), markup=False, highlight=False)
            console.print("Current tags:")
            for tag in GitClient(settings.work_dir).list_tags(5):
                console.print(f"  {tag}", markup=False, highlight=False)
            return 1
        request = ReleaseRequest(version=args.version, message=args.message, dry_run=args.dry_run)
        logger.info(f"Releasing {request.version} of {settings.full_name}")
        service = ReleaseService(settings, request, console=console, confirm=build_confirmer(console, args.yes))
        service.run()
        return 0
    except Exception as e:
        logger.error(f"Release failed: {e}")
        print_error(console, str(e))
        return 1


if __name__ == "__main__":
    sys.exit(main())
