import logging
import re
from typing_extensions import override

from rich.console import Console

from cdn_assets.clients.git_client import GitClient
from cdn_assets.errors import ConfigurationError, OperationAborted
from cdn_assets.models import ReleaseRequest, Settings
from cdn_assets.repositories import AssetRepository
from cdn_assets.services.preconditions import require_git, require_new_tag, require_repository_settings
from cdn_assets.services.service import Service
from cdn_assets.utils import console as out
from cdn_assets.utils import report
from cdn_assets.utils.logging import setup_logger

SEMVER_TAG = re.compile(r"^v[0-9]+\.[0-9]+\.[0-9]+$")


class ReleaseService(Service):
    """Cuts an annotated release tag and prints the immutable URLs it serves."""

    def __init__(
        self,
        settings: Settings,
        request: ReleaseRequest,
        console: Console | None = None,
        confirm: out.Confirmer | None = None,
        git: GitClient | None = None,
    ):
        self.settings: Settings = settings
        self.request: ReleaseRequest = request
        self.console: Console = console or Console()
        self.confirm: out.Confirmer = confirm or out.build_confirmer(self.console)
        self.git: GitClient = git or GitClient(settings.work_dir)
        self.assets: AssetRepository = AssetRepository(settings.assets_path)
        self.logger: logging.Logger = setup_logger("ReleaseService")
        self.dry_run: bool = request.dry_run

    @override
    def run(self) -> None:
        version = self.request.version
        require_git(self.git)
        require_repository_settings(self.settings)
        if not self.git.is_repository():
            raise ConfigurationError(f"Not a git repository: {self.settings.work_dir}")
        require_new_tag(self.git, version)
        self.check_version_format()
        self.commit_pending_changes()

        out.print_banner(self.console, "Creating Release", f"{self.settings.full_name}@{version}")
        self.console.print(f"Version: {version}", markup=False, highlight=False)
        self.console.print(f"Message: {self.request.tag_message}", markup=False, highlight=False)
        self.console.print()

        self.create_release()

        out.print_header(self.console, f"✅ Release {version} created successfully!")
        report.print_release_urls(self.console, self.settings, self.assets.find_all(), version)
        self.console.print("GitHub Release:", style="bold")
        self.console.print(
            f"  https://github.com/{self.settings.full_name}/releases/tag/{version}",
            markup=False, highlight=False, soft_wrap=True,
        )
        self.console.print()
        self.console.print("💡 Don't forget to update CHANGELOG.md with release notes!", style="yellow")

    def check_version_format(self) -> None:
        version = self.request.version
        if SEMVER_TAG.match(version):
            return
        out.print_warning(self.console, f"Version '{version}' doesn't follow semver format (vX.Y.Z)")
        if not self.confirm("Continue anyway?", False):
            raise OperationAborted(f"Release cancelled: {version} is not a semver tag")

    def commit_pending_changes(self) -> None:
        if not self.git.has_uncommitted_changes():
            return
        self.console.print("You have uncommitted changes:", style="yellow")
        self.console.print(self.git.status_short(), markup=False, highlight=False)
        self.console.print()
        if not self.confirm("Commit these changes before release?", True):
            self.logger.info("Releasing without the uncommitted changes")
            return
        message = f"chore: prepare for {self.request.version} release"
        if self.dry_run:
            out.print_dry_run(self.console, f"Would commit with message: {message}")
            return
        self.git.stage_all()
        self.git.commit(message)

    def create_release(self) -> None:
        version = self.request.version
        branch = self.settings.branch
        target = self.settings.push_target
        if self.dry_run:
            out.print_dry_run(self.console, f"Would create tag {version}")
            out.print_dry_run(self.console, f"Would push tag {version} to origin")
            out.print_dry_run(self.console, f"Would push {branch} to origin")
            return

        out.print_step(self.console, "Creating tag...")
        self.git.create_tag(version, self.request.tag_message)
        out.print_step(self.console, "Pushing tag to origin...")
        self.git.push(target, version)
        out.print_step(self.console, "Pushing commits...")
        self.git.push(target, branch)
        self.logger.info(f"Released {version} of {self.settings.full_name}")
