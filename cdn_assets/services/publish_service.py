import logging
from datetime import datetime
from typing_extensions import override

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from cdn_assets.clients.cdn_client import CdnClient
from cdn_assets.clients.git_client import GitClient
from cdn_assets.clients.github_client import GitHubClient
from cdn_assets.errors import ConfigurationError, OperationAborted
from cdn_assets.models import AssetFile, AssetReference, PublishRequest, PurgeSummary, RepositoryVisibility, Settings
from cdn_assets.repositories import AssetRepository, total_size
from cdn_assets.services.preconditions import require_git, require_new_tag, require_repository_settings
from cdn_assets.services.service import Service
from cdn_assets.utils import console as out
from cdn_assets.utils import report
from cdn_assets.utils.formatting import format_bytes
from cdn_assets.utils.logging import setup_logger


class PublishService(Service):
    def __init__(
        self,
        settings: Settings,
        request: PublishRequest,
        console: Console | None = None,
        confirm: out.Confirmer | None = None,
        git: GitClient | None = None,
        github: GitHubClient | None = None,
        cdn: CdnClient | None = None,
    ):
        self.settings: Settings = settings
        self.request: PublishRequest = request
        self.console: Console = console or Console()
        self.confirm: out.Confirmer = confirm or out.build_confirmer(self.console)
        self.git: GitClient = git or GitClient(settings.work_dir)
        self.github: GitHubClient = github or GitHubClient(settings.token)
        self.cdn: CdnClient = cdn or CdnClient()
        self.assets: AssetRepository = AssetRepository(request.local_directory)
        self.logger: logging.Logger = setup_logger("PublishService")
        self.dry_run: bool = request.dry_run

    @override
    def run(self) -> None:
        out.print_banner(self.console, "CDN Assets Publisher", "via jsDelivr CDN")
        if self.dry_run:
            out.print_header(self.console, "DRY RUN MODE", style="bold yellow")

        self.check_requirements()
        self.validate_config()
        self.check_repo_visibility()

        assets = self.assets.find_all()
        self.console.print()
        out.print_info(self.console, f"Files to publish: {len(assets)}")
        out.print_info(self.console, f"Total size: {format_bytes(total_size(assets))}")
        self.console.print()

        self.publish_assets()
        self.purge_cdn_cache(assets)
        self.print_cdn_urls(assets)

        out.print_success(self.console, "Done! Your assets are now available via jsDelivr CDN.")

    def check_requirements(self) -> None:
        out.print_step(self.console, "Checking requirements...")
        require_git(self.git)
        out.print_success(self.console, "All requirements met")

    def validate_config(self) -> None:
        out.print_step(self.console, "Validating configuration...")
        require_repository_settings(self.settings)
        if not self.assets.exists():
            raise ConfigurationError(f"Assets directory not found: {self.request.local_directory}")
        if self.request.tag:
            require_new_tag(self.git, self.request.tag)
        if not self.assets.find_all():
            out.print_warning(self.console, "No files found in assets directory (excluding .gitkeep files)")
            if not self.confirm("Continue anyway?", False):
                raise OperationAborted("Publishing cancelled: no assets to publish")
        out.print_success(self.console, "Configuration valid")

    def check_repo_visibility(self) -> None:
        out.print_step(self.console, "Checking repository visibility...")
        check = self.github.check_visibility(self.settings.full_name)
        match check.visibility:
            case RepositoryVisibility.PUBLIC:
                out.print_success(self.console, "Repository is PUBLIC - jsDelivr will work ✓")
            case RepositoryVisibility.PRIVATE | RepositoryVisibility.NOT_FOUND:
                out.print_warning(self.console, "Repository not found or is PRIVATE")
                self._print_visibility_help()
                if not self.confirm("Continue anyway?", False):
                    raise OperationAborted("Publishing cancelled: repository is not public")
            case _:
                out.print_info(self.console, f"Could not verify repository visibility (HTTP {check.status_code:03d})")

    def _print_visibility_help(self) -> None:
        body = "\n".join([
            "jsDelivr requires PUBLIC repositories!",
            "",
            "If your repo is private:",
            f"1. Go to: https://github.com/{self.settings.full_name}/settings",
            "2. Scroll to 'Danger Zone'",
            "3. Click 'Change visibility' → Make public",
        ])
        self.console.print()
        self.console.print(Panel(Text(body), border_style="yellow", style="yellow"))
        self.console.print()

    def publish_assets(self) -> None:
        out.print_step(self.console, "Publishing assets to GitHub...")
        branch = self.settings.branch
        is_repository = self.git.is_repository()

        if not is_repository:
            out.print_info(self.console, "Initializing git repository...")
            if self.dry_run:
                out.print_dry_run(self.console, "Would initialize git repository")
            else:
                self.git.init(self.settings.remote_url)

        if self.dry_run:
            if is_repository and self.git.current_branch() != branch:
                out.print_dry_run(self.console, f"Would switch to branch {branch}")
            out.print_dry_run(self.console, "Would stage all changes")
            has_changes = not is_repository or self.git.has_pending_changes()
        else:
            self.git.switch_branch(branch)
            self.git.stage_all()
            has_changes = self.git.has_staged_changes()

        if has_changes:
            self._commit_and_push()
        else:
            out.print_info(self.console, "No changes to commit")

        if self.request.tag:
            self._tag_and_push(self.request.tag)

        out.print_success(self.console, "Assets published successfully!")

    def _commit_and_push(self) -> None:
        branch = self.settings.branch
        message = self.request.commit_message or f"update: assets {datetime.now():%Y-%m-%d %H:%M:%S}"
        if self.dry_run:
            out.print_dry_run(self.console, f"Would commit with message: {message}")
        else:
            self.git.commit(message)
            self.logger.info(f"Committed assets: {message}")

        out.print_info(self.console, f"Pushing to origin/{branch}...")
        if self.dry_run:
            out.print_dry_run(self.console, f"Would push to origin/{branch}")
        else:
            self.git.push(self.settings.push_target, branch)
            self.logger.info(f"Pushed {branch} to {self.settings.full_name}")

    def _tag_and_push(self, tag: str) -> None:
        out.print_info(self.console, f"Creating tag: {tag}")
        if self.dry_run:
            out.print_dry_run(self.console, f"Would create and push tag: {tag}")
            return
        if self.git.short_commit() == "unknown":
            raise ConfigurationError(f"Cannot create tag {tag}: the repository has no commits yet")
        self.git.create_tag(tag, f"Release {tag}")
        self.git.push(self.settings.push_target, tag)
        self.logger.info(f"Created and pushed tag {tag}")

    def purge_cdn_cache(self, assets: list[AssetFile]) -> PurgeSummary | None:
        if not self.request.purge:
            return None

        out.print_step(self.console, "Purging jsDelivr cache...")
        purged = failed = 0
        for asset in assets:
            url = AssetReference(
                account=self.settings.account,
                repository=self.settings.repository,
                asset_path=asset.path,
                reference=self.settings.branch,
            ).purge_url()
            if self.dry_run:
                out.print_dry_run(self.console, f"Would purge: {url}")
                purged += 1
            elif self.cdn.purge(url):
                purged += 1
            else:
                failed += 1

        summary = PurgeSummary(purged=purged, failed=failed)
        if summary.failed:
            out.print_warning(self.console, f"Purged {summary.purged} files, {summary.failed} failed")
        else:
            out.print_success(self.console, f"Purged {summary.purged} files from cache")
        return summary

    def print_cdn_urls(self, assets: list[AssetFile]) -> None:
        out.print_header(self.console, "CDN URLs Generated")
        commit = self.git.short_commit()
        tag = self.request.tag
        report.print_asset_urls(self.console, self.settings, assets, commit, tag, self.request.minify)
        report.print_summary(self.console, assets, commit, tag)
        report.print_url_patterns(self.console, self.settings, commit, tag)
        report.print_tips(self.console)
