import subprocess
import sys
from collections.abc import Iterable
from pathlib import Path
from unittest.mock import patch

from gitam import main as gam_main


def run_gam_command(args: list[str], inputs: Iterable[str] | None = None):
    """
    Helper to run the 'gam' tool with a given list of arguments.

    Lines in `inputs` are returned by successive input() calls; once they
    run out, input() behaves as if stdin were closed.
    """
    sys.argv = ["gam", *args]
    answers = iter(inputs or [])

    def fake_input(prompt: str = "") -> str:
        try:
            return next(answers)
        except StopIteration:
            raise EOFError from None

    with patch("builtins.input", fake_input):
        try:
            gam_main.main()
        except SystemExit as e:
            if e.code != 0:
                raise


def run_git_command(
    args: list[str],
    cwd: Path | None = None,
    check: bool = True,
    capture_output: bool = True,
) -> subprocess.CompletedProcess:
    """
    Helper to run a Git command using subprocess.

    Parameters:
    - args: A list of strings representing the command and its arguments (e.g., ["commit", "-m", "Initial commit"]).
    - cwd: The working directory to run the command in. Defaults to None (current directory).
    - check: If True, raises CalledProcessError if the command returns a non-zero exit code. Defaults to True.
    - capture_output: If True, captures stdout and stderr. Defaults to True.

    Returns:
    - A subprocess.CompletedProcess instance.
    """
    command = ["git", *args]
    return subprocess.run(
        command,
        cwd=str(cwd) if cwd else None,
        check=check,
        capture_output=capture_output,
        text=True,
    )


def set_alias(name: str, definition: str) -> None:
    """Helper to define a git alias in the test repository."""
    run_git_command(["config", f"alias.{name}", definition])


def read_usage_log(repo_path: Path) -> list[str]:
    """Helper to read the alias names recorded in the test usage log."""
    log_file = repo_path / "usage.log"
    if not log_file.exists():
        return []
    return log_file.read_text().splitlines()
