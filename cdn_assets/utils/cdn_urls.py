CDN_HOST = "cdn.jsdelivr.net"
PURGE_HOST = "purge.jsdelivr.net"
DEFAULT_REFERENCE = "main"
ASSETS_PREFIX = "assets"
MINIFIABLE_EXTENSIONS = (".js", ".css")


def build_base_url(account: str, repository: str, reference: str = "", host: str = CDN_HOST) -> str:
    reference = reference or DEFAULT_REFERENCE
    return f"https://{host}/gh/{account}/{repository}@{reference}"


def minified_path(asset_path: str) -> str:
    # not guarded against paths that are already minified: app.min.js -> app.min.min.js
    for extension in MINIFIABLE_EXTENSIONS:
        if asset_path.endswith(extension):
            return f"{asset_path[:-len(extension)]}.min{extension}"
    return asset_path


def build_asset_url(
    account: str,
    repository: str,
    asset_path: str,
    reference: str = "",
    minify: bool = False,
) -> str:
    base = build_base_url(account, repository, reference)
    if minify:
        asset_path = minified_path(asset_path)
    return f"{base}/{ASSETS_PREFIX}/{asset_path}"


def build_purge_url(account: str, repository: str, asset_path: str, reference: str = "") -> str:
    base = build_base_url(account, repository, reference, host=PURGE_HOST)
    return f"{base}/{ASSETS_PREFIX}/{asset_path}"


def build_pattern_url(account: str, repository: str, reference: str = "") -> str:
    return f"{build_base_url(account, repository, reference)}/{ASSETS_PREFIX}/<path>"


def build_reference_urls(
    account: str,
    repository: str,
    asset_path: str,
    branch: str,
    commit: str,
    tag: str | None = None,
    minify: bool = False,
) -> dict[str, str]:
    """Return the branch, version (when tagged) and commit URLs of one asset.

    Branch URLs are cached for a short time and may resolve to new content
    later; tag and commit URLs are cached permanently.
    """
    urls = {"Branch": build_asset_url(account, repository, asset_path, branch, minify)}
    if tag:
        urls["Version"] = build_asset_url(account, repository, asset_path, tag, minify)
    urls["Commit"] = build_asset_url(account, repository, asset_path, commit, minify)
    return urls
