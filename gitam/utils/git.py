import subprocess

from gitam.utils.errors import ConfigReadError

ALIAS_KEY_PREFIX = "alias."


def parse_alias_records(output: str) -> dict[str, str]:
    """
    Parses the NUL-separated output of 'git config -z --get-regexp'.

    Each record is the key, a newline, then the value verbatim. Later
    entries win when a key is set in more than one config file, as git does.
    """
    aliases: dict[str, str] = {}
    for record in output.split("\0"):
        if not record:
            continue
        key, _, value = record.partition("\n")
        if not key.startswith(ALIAS_KEY_PREFIX):
            continue
        name = key[len(ALIAS_KEY_PREFIX) :]
        if name:
            aliases[name] = value
    return aliases


def get_aliases(git_executable: str = "git") -> dict[str, str]:
    """Returns the configured git aliases as a name -> definition mapping, in config order."""
    try:
        result = subprocess.run(
            [git_executable, "config", "-z", "--get-regexp", r"^alias\."],
            capture_output=True,
            text=True,
            encoding="utf-8",
        )
    except FileNotFoundError:
        raise ConfigReadError(
            f"Git executable '{git_executable}' not found. Check GITAM_GIT_EXECUTABLE environment variable."
        ) from None

    # Exit status 1 with nothing on stderr means no key matched
    if result.returncode == 1 and not result.stderr.strip():
        return {}
    if result.returncode != 0:
        raise ConfigReadError(
            f"Could not read git aliases (exit code {result.returncode}): {result.stderr.strip()}"
        )
    return parse_alias_records(result.stdout)
