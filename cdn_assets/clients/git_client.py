import logging
import re
import shutil
import subprocess
from pathlib import Path

from cdn_assets.errors import GitCommandError

logger = logging.getLogger(__name__)

_CREDENTIALS = re.compile(r"(https?://)[^/@\s]+@")


def redact(text: str) -> str:
    return _CREDENTIALS.sub(r"\1***@", text)


class GitClient:
    def __init__(self, work_dir: str | Path = "."):
        self.work_dir: Path = Path(work_dir)

    @staticmethod
    def is_available() -> bool:
        return shutil.which("git") is not None

    def _run(self, *args: str, check: bool = True) -> subprocess.CompletedProcess:
        cmd = ["git", *args]
        command = redact(" ".join(cmd))
        logger.debug(f"Running {command} in {self.work_dir}")
        result = subprocess.run(cmd, cwd=self.work_dir, capture_output=True, text=True, check=False)
        if check and result.returncode != 0:
            logger.error(f"{command} failed with code {result.returncode}")
            raise GitCommandError(command, result.returncode, redact(result.stderr or ""))
        return result

    def is_repository(self) -> bool:
        return (self.work_dir / ".git").exists()

    def init(self, remote_url: str) -> None:
        self._run("init")
        self._run("remote", "add", "origin", remote_url)

    def current_branch(self) -> str:
        result = self._run("branch", "--show-current", check=False)
        if result.returncode != 0:
            return ""
        return result.stdout.strip()

    def switch_branch(self, branch: str) -> None:
        current = self.current_branch()
        if current == branch:
            return
        # an unborn repository has no branch to check out yet
        attempts = [("checkout", branch), ("checkout", "-b", branch)]
        if not current:
            attempts.reverse()
        first, second = attempts
        if self._run(*first, check=False).returncode != 0:
            self._run(*second)

    def stage_all(self) -> None:
        self._run("add", "-A")

    def has_staged_changes(self) -> bool:
        return self._run("diff", "--cached", "--quiet", check=False).returncode != 0

    def has_uncommitted_changes(self) -> bool:
        if self._run("diff", "--quiet", check=False).returncode != 0:
            return True
        return self.has_staged_changes()

    def status_short(self) -> str:
        return self._run("status", "--short", check=False).stdout.rstrip()

    def has_pending_changes(self) -> bool:
        result = self._run("status", "--porcelain", check=False)
        return result.returncode != 0 or bool(result.stdout.strip())

    def commit(self, message: str) -> None:
        self._run("commit", "-m", message)

    def push(self, target: str, ref: str) -> None:
        self._run("push", target, ref)

    def create_tag(self, tag: str, message: str) -> None:
        self._run("tag", "-a", tag, "-m", message)

    def tag_exists(self, tag: str) -> bool:
        result = self._run("rev-parse", "--verify", "--quiet", f"refs/tags/{tag}", check=False)
        return result.returncode == 0

    def list_tags(self, limit: int = 5) -> list[str]:
        result = self._run("tag", "-l", check=False)
        tags = [line for line in result.stdout.splitlines() if line.strip()]
        return tags[-limit:]

    def short_commit(self) -> str:
        result = self._run("rev-parse", "--short", "HEAD", check=False)
        if result.returncode != 0 or not result.stdout.strip():
            return "unknown"
        return result.stdout.strip()
