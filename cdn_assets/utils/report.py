from rich.console import Console

from cdn_assets.models import AssetFile, AssetReference, Settings
from cdn_assets.repositories import total_size
from cdn_assets.utils.cdn_urls import build_pattern_url, build_reference_urls
from cdn_assets.utils.formatting import format_bytes

LISTING_LIMIT = 20


def _print_overflow(console: Console, total: int, limit: int) -> None:
    if total > limit:
        console.print(f"... and {total - limit} more files", style="yellow")
        console.print()


def print_asset_urls(
    console: Console,
    settings: Settings,
    assets: list[AssetFile],
    commit: str,
    tag: str | None = None,
    minify: bool = False,
    limit: int = LISTING_LIMIT,
) -> None:
    console.print("📁 Asset URLs:", style="bold")
    console.print()
    for asset in assets[:limit]:
        console.print(asset.path, style="cyan", markup=False, highlight=False, soft_wrap=True)
        urls = build_reference_urls(
            settings.account, settings.repository, asset.path, settings.branch, commit, tag, minify
        )
        for label, url in urls.items():
            console.print(f"   {label + ':':<8} {url}", markup=False, highlight=False, soft_wrap=True)
        console.print()
    _print_overflow(console, len(assets), limit)


def print_release_urls(
    console: Console,
    settings: Settings,
    assets: list[AssetFile],
    tag: str,
    limit: int = LISTING_LIMIT,
) -> None:
    console.print("CDN URLs (immutable):", style="bold")
    console.print()
    for asset in assets[:limit]:
        url = AssetReference(
            account=settings.account, repository=settings.repository, asset_path=asset.path, reference=tag
        ).cdn_url()
        console.print(f"  {url}", markup=False, highlight=False, soft_wrap=True)
    console.print()
    _print_overflow(console, len(assets), limit)


def print_summary(console: Console, assets: list[AssetFile], commit: str, tag: str | None = None) -> None:
    console.print("📊 Summary:", style="bold")
    console.print(f"   Total files: {len(assets)}", highlight=False)
    console.print(f"   Total size:  {format_bytes(total_size(assets))}", highlight=False)
    console.print(f"   Commit:      {commit}", highlight=False)
    if tag:
        console.print(f"   Tag:         {tag}", markup=False, highlight=False, soft_wrap=True)
    console.print()


def print_url_patterns(console: Console, settings: Settings, commit: str, tag: str | None = None) -> None:
    patterns = [("Latest (24h cache):", settings.branch)]
    if tag:
        patterns.append(("Versioned (permanent cache):", tag))
    patterns.append(("Immutable (permanent cache):", commit))

    console.print("🔗 URL Patterns:", style="bold")
    console.print()
    for title, reference in patterns:
        console.print(f"   {title}")
        pattern = build_pattern_url(settings.account, settings.repository, reference)
        console.print(f"   {pattern}", style="cyan", markup=False, highlight=False, soft_wrap=True)
        console.print()


def print_tips(console: Console) -> None:
    console.print("💡 Tips:", style="bold")
    console.print("   • Add .min before extension for auto-minification (JS/CSS)")
    console.print("   • Example: /app.js → /app.min.js")
    console.print("   • Use commit SHA or tags for production (permanent cache)")
    console.print("   • Use branch for development (24h cache)")
    console.print()
