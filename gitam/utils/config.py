import os
from dataclasses import dataclass
from pathlib import Path

from gitam.utils.errors import SettingsError

DEFAULT_LOG_FILE = "~/git_alias_usage.log"
DEFAULT_BACKUP_FILE = "~/git_alias_usage_backup.log"
DEFAULT_MAX_LOG_SIZE_KB = 1024
TOP_ALIAS_COUNT = 5


@dataclass(frozen=True)
class Settings:
    git_executable: str = "git"
    log_file: Path = Path(DEFAULT_LOG_FILE).expanduser()
    backup_file: Path = Path(DEFAULT_BACKUP_FILE).expanduser()
    max_log_size_kb: int = DEFAULT_MAX_LOG_SIZE_KB


def _parse_size(raw: str) -> int:
    try:
        size = int(raw)
    except ValueError:
        raise SettingsError(f"GITAM_MAX_LOG_SIZE must be an integer number of KB, got '{raw}'.") from None
    if size < 0:
        raise SettingsError(f"GITAM_MAX_LOG_SIZE cannot be negative, got {size}.")
    return size


def load_settings(environ: dict[str, str] | None = None) -> Settings:
    """Reads gam settings from the environment, falling back to defaults."""
    env = os.environ if environ is None else environ

    max_size = env.get("GITAM_MAX_LOG_SIZE")
    return Settings(
        git_executable=env.get("GITAM_GIT_EXECUTABLE") or "git",
        log_file=Path(env.get("GITAM_LOG_FILE") or DEFAULT_LOG_FILE).expanduser(),
        backup_file=Path(env.get("GITAM_BACKUP_FILE") or DEFAULT_BACKUP_FILE).expanduser(),
        max_log_size_kb=_parse_size(max_size) if max_size else DEFAULT_MAX_LOG_SIZE_KB,
    )
