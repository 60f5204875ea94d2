"""
Configuration Management.

Loads environment overrides from config/.env (and the process environment)
and settings from the YAML files shipped in appmgr/settings/.
No hardcoded endpoint values in code — all configuration comes from these sources.

Environment (APPMGR_ prefix):
    APPMGR_HOST, APPMGR_PORT

Settings (YAML, packaged with appmgr):
    application.yaml   - App identity, API prefix, default server, timeouts
    logging.yaml       - Logging configuration

The .project_root marker is optional. When found, it locates config/.env
and the directory that relative log file paths are resolved against.
"""

from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from appmgr.core.config_schema import ApplicationSchema, LoggingSchema

PACKAGE_ROOT = Path(__file__).resolve().parent.parent.parent
SETTINGS_DIR = resources.files("appmgr") / "settings"


def _search_upwards(start: Path) -> Path | None:
    current = start
    while current != current.parent:
        if (current / ".project_root").exists():
            return current
        current = current.parent
    return None


def find_project_root() -> Path:
    """
    Find project root by looking for .project_root marker file.

    Searches upwards from the working directory first, then from the
    directory the package was installed from.
    """
    root = _search_upwards(Path.cwd()) or _search_upwards(PACKAGE_ROOT)
    if root is None:
        raise RuntimeError("Project root not found. Ensure .project_root file exists.")
    return root


def find_project_root_or_cwd() -> Path:
    """Project root when there is one, otherwise the working directory."""
    try:
        return find_project_root()
    except RuntimeError:
        return Path.cwd()


def load_yaml_config(filename: str) -> dict[str, Any]:
    """
    Load a YAML configuration file from appmgr/settings/.

    Raises:
        FileNotFoundError: If the file is not shipped with the package
        ValueError: If the file is not valid YAML
    """
    config_path = SETTINGS_DIR / filename

    if not config_path.is_file():
        raise FileNotFoundError(f"Configuration file not found: {filename}")

    try:
        return yaml.safe_load(config_path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {filename}:\n{e}") from e


class Settings(BaseSettings):
    """Endpoint overrides loaded from the environment and config/.env."""

    host: str | None = None
    port: int | None = None

    model_config = SettingsConfigDict(
        env_prefix="APPMGR_",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


def _load_validated(schema_cls: type, filename: str) -> Any:
    """Load YAML and validate against schema. Returns typed model instance."""
    raw = load_yaml_config(filename)
    try:
        return schema_cls(**raw)
    except ValidationError as e:
        raise ValueError(
            f"Invalid configuration in {filename}:\n{e}"
        ) from e


class AppConfig:
    """
    Application configuration loaded from YAML files.

    Each YAML file is validated against its Pydantic schema at load time.
    Missing keys, wrong types, or unknown fields raise a clear error
    immediately instead of causing cryptic KeyErrors later.
    """

    def __init__(self) -> None:
        self._application = _load_validated(ApplicationSchema, "application.yaml")
        self._logging = _load_validated(LoggingSchema, "logging.yaml")

    @property
    def application(self) -> ApplicationSchema:
        """Application settings."""
        return self._application

    @property
    def logging(self) -> LoggingSchema:
        """Logging settings."""
        return self._logging


@lru_cache
def get_settings() -> Settings:
    """Get cached environment settings. Reads config/.env under the project root, if present."""
    env_path = find_project_root_or_cwd() / "config" / ".env"
    return Settings(_env_file=str(env_path))


@lru_cache
def get_app_config() -> AppConfig:
    """Get cached application configuration."""
    return AppConfig()


def get_server_address(
    host: str | None = None,
    port: int | None = None,
) -> tuple[str, int]:
    """
    Resolve the xApp manager host and port.

    Precedence: explicit argument, then APPMGR_HOST / APPMGR_PORT,
    then server defaults from application.yaml.

    Returns:
        Tuple of (host, port).
    """
    settings = get_settings()
    server = get_app_config().application.server
    resolved_host = host or settings.host or server.host
    resolved_port = port if port is not None else (
        settings.port if settings.port is not None else server.port
    )
    return resolved_host, resolved_port
