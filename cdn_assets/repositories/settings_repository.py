import os
from collections.abc import Mapping
from dataclasses import asdict

from cdn_assets.models import Settings, SettingsFile
from cdn_assets.utils.yaml_loader import load_mapping

DEFAULT_CONFIG_FILE = "cdn.yaml"

ENV_OVERRIDES = {
    "account": "CDN_GITHUB_USER",
    "repository": "CDN_GITHUB_REPO",
    "branch": "CDN_GITHUB_BRANCH",
    "token": "CDN_GITHUB_TOKEN",
    "assets_dir": "CDN_ASSETS_DIR",
    "work_dir": "CDN_WORK_DIR",
}


class SettingsRepository:
    """Resolves publisher settings from the YAML config file and the environment.

    Environment variables win over the file; empty variables are ignored.
    """

    def __init__(self, file_path: str | None = None, environ: Mapping[str, str] | None = None):
        self.environ: Mapping[str, str] = os.environ if environ is None else environ
        self.file_path: str = file_path or self.environ.get("CDN_CONFIG_FILE") or DEFAULT_CONFIG_FILE

    def read_file(self) -> SettingsFile:
        if not os.path.isfile(self.file_path):
            return SettingsFile()
        data = load_mapping(self.file_path)
        try:
            return SettingsFile(**data)
        except Exception as e:
            raise ValueError(f"Invalid {os.path.basename(self.file_path)} structure: {e}") from e

    def load(self) -> Settings:
        values = {key: value for key, value in asdict(self.read_file()).items() if value is not None}
        for key, env_var in ENV_OVERRIDES.items():
            value = self.environ.get(env_var)
            if value:
                values[key] = value
        values.setdefault("account", "")
        values.setdefault("repository", "")
        return Settings(**values)
