import os
import tempfile
from collections.abc import Generator
from pathlib import Path
from typing import Any

import pytest
from rich.console import Console

from gitam.utils import render
from gitam.utils.usage_log import UsageLog
from tests.utils import run_git_command


@pytest.fixture
def git_repo(monkeypatch) -> Generator[Path, Any, None]:
    """
    A pytest fixture that creates a temporary Git repository for testing.

    The repository gets a private global config so only aliases set by the
    test are visible, and gam's usage log and archive live inside the
    temporary directory.
    """
    with tempfile.TemporaryDirectory() as tmpdir:
        repo_path = Path(tmpdir)
        original_dir = Path.cwd()
        os.chdir(repo_path)

        global_config = repo_path / "gitconfig"
        global_config.touch()
        monkeypatch.setenv("GIT_CONFIG_GLOBAL", str(global_config))
        monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")
        monkeypatch.setenv("GIT_PAGER", "cat")
        monkeypatch.setenv("GITAM_LOG_FILE", str(repo_path / "usage.log"))
        monkeypatch.setenv("GITAM_BACKUP_FILE", str(repo_path / "usage_backup.log"))
        monkeypatch.delenv("GITAM_MAX_LOG_SIZE", raising=False)
        monkeypatch.delenv("GITAM_GIT_EXECUTABLE", raising=False)

        try:
            run_git_command(["init", "-b", "main"])
            run_git_command(["config", "user.name", "Test User"])
            run_git_command(["config", "user.email", "test@example.com"])

            initial_file = repo_path / "initial.txt"
            initial_file.write_text("initial commit")
            run_git_command(["add", "initial.txt"])
            run_git_command(["commit", "-m", "Initial commit"])

            yield repo_path
        finally:
            # Teardown: Change back to the original directory
            os.chdir(original_dir)


@pytest.fixture(autouse=True)
def plain_console(monkeypatch) -> Console:
    """Renders rich output without colour codes, whatever the environment forces."""
    console = Console(highlight=False, force_terminal=False, no_color=True)
    monkeypatch.setattr(render, "console", console)
    return console


@pytest.fixture
def usage_log(tmp_path: Path) -> Generator[UsageLog, Any, None]:
    """An open usage log with its archive in a temporary directory."""
    with UsageLog(tmp_path / "usage.log", tmp_path / "archive.log") as log:
        yield log
