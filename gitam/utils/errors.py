class GitamError(Exception):
    """Base class for every failure that ends a gam run."""

    exit_code: int = 1


class SettingsError(GitamError):
    """An environment setting could not be parsed."""


class ConfigReadError(GitamError):
    """The git config store could not be queried."""


class EmptyAliasSetError(GitamError):
    """No aliases are configured."""

    def __init__(self, message: str = "No Git aliases found."):
        super().__init__(message)


class EmptySelectionError(GitamError):
    """The user entered no alias name."""

    def __init__(self, message: str = "No alias name entered. Please try again."):
        super().__init__(message)


class NotFoundError(GitamError):
    """The selected alias is not in the alias table."""

    def __init__(self, alias_name: str):
        self.alias_name = alias_name
        super().__init__(f"Alias '{alias_name}' not found in the list of aliases. Please try again.")


class LogWriteError(GitamError):
    """Appending to or truncating the usage log failed."""


class RotationArchiveError(GitamError):
    """Writing the rotation summary to the archive failed; the log was left intact."""
