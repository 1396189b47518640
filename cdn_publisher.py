#!/usr/bin/env python3
import argparse
import sys

from rich.console import Console

from cdn_assets.models import PublishRequest
from cdn_assets.repositories import SettingsRepository
from cdn_assets.services.publish_service import PublishService
from cdn_assets.utils.console import build_confirmer, print_error
from cdn_assets.utils.logging import setup_logger

EPILOG = """\
Environment Variables (override config):
  CDN_GITHUB_USER      GitHub username
  CDN_GITHUB_REPO      Repository name
  CDN_GITHUB_BRANCH    Branch name (default: main)
  CDN_GITHUB_TOKEN     GitHub Personal Access Token
  CDN_ASSETS_DIR       Local assets directory
  CDN_CONFIG_FILE      YAML config file (default: cdn.yaml)

Examples:
  cdn-publish                          # Basic upload
  cdn-publish -t v1.0.0                # Upload with version tag
  cdn-publish -p                       # Upload and purge cache
  cdn-publish -t v1.0.0 -p -m 'Release 1.0.0'
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Publish assets to a public GitHub repository and print jsDelivr CDN URLs",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument('-t', '--tag', metavar='VERSION', help='Create a git tag for versioned CDN URLs (e.g., v1.0.0)')
    parser.add_argument('-m', '--message', metavar='MSG', help='Custom commit message')
    parser.add_argument('-p', '--purge', action='store_true', help='Purge jsDelivr cache after upload')
    parser.add_argument('-d', '--dry-run', action='store_true', help='Show what would be done without making changes')
    parser.add_argument('--minify', action='store_true', help='Print auto-minified URLs for .js and .css assets')
    parser.add_argument('-y', '--yes', action='store_true', help='Answer yes to every confirmation')
    parser.add_argument('-c', '--config', metavar='FILE', help='YAML config file')
    return parser


def main(argv: list[str] | None = None, console: Console | None = None) -> int:
    args = build_parser().parse_args(argv)
    console = console or Console()
    logger = setup_logger("CdnPublisher")

    try:
        settings = SettingsRepository(args.config).load()
        request = PublishRequest(
            local_directory=settings.assets_path,
            tag=args.tag,
            commit_message=args.message,
            purge=args.purge,
            dry_run=args.dry_run,
            minify=args.minify,
        )
        logger.info(f"Publishing {request.local_directory} to {settings.full_name}@{settings.branch}")
        service = PublishService(settings, request, console=console, confirm=build_confirmer(console, args.yes))
        service.run()
        return 0
    except Exception as e:
        logger.error(f"Publishing failed: {e}")
        print_error(console, str(e))
        return 1


if __name__ == "__main__":
    sys.exit(main())
