from typing import Protocol

from gitam.utils import git, resolver
from gitam.utils.classes import (
    AliasDefinition,
    ExecutableCommand,
    NativeCommand,
    NativeInvocation,
    ShellCommand,
)
from gitam.utils.errors import EmptyAliasSetError, EmptySelectionError
from gitam.utils.reassemble import reassemble_arguments


class UsageRecorder(Protocol):
    def append(self, name: str) -> None: ...


class Dispatcher:
    """Turns a selected alias plus extra arguments into a runnable command."""

    def __init__(
        self,
        usage_log: UsageRecorder,
        aliases: dict[str, str],
        git_executable: str = "git",
    ):
        if not aliases:
            raise EmptyAliasSetError()
        self.usage_log = usage_log
        self.aliases: dict[str, str] = aliases
        self.git_executable: str = git_executable

    @classmethod
    def from_git_config(cls, usage_log: UsageRecorder, git_executable: str = "git") -> "Dispatcher":
        """Creates a dispatcher over the aliases currently configured in git."""
        return cls(usage_log, git.get_aliases(git_executable), git_executable=git_executable)

    def select(self, name: str) -> AliasDefinition:
        """Validates a user-entered alias name and returns its definition."""
        name = name.strip()
        if not name:
            raise EmptySelectionError()
        return resolver.lookup(name, self.aliases)

    def prepare(self, definition: AliasDefinition, extra_tokens: list[str]) -> ExecutableCommand:
        """Builds the command for an alias without recording anything."""
        invocation = resolver.classify(definition)
        if isinstance(invocation, NativeInvocation):
            arguments = reassemble_arguments([*invocation.tokens, *extra_tokens])
            return NativeCommand(program=self.git_executable, args=tuple(arguments))
        # Shell aliases are not git arguments, so they are never reassembled
        return ShellCommand(command=" ".join([invocation.command, *extra_tokens]))

    def dispatch(self, name: str, extra_tokens: list[str] | None = None) -> ExecutableCommand:
        """
        Resolve an alias, build its command and record the invocation.

        Selection errors are raised before anything is written, so a bad
        name never shows up in the usage statistics.

        Parameters
        ----------
        name : str
            The alias name as entered by the user.
        extra_tokens : list[str], optional
            Additional arguments appended after the stored definition.

        Returns
        -------
        ExecutableCommand
            A NativeCommand for git aliases or a ShellCommand for '!' aliases.

        """
        definition = self.select(name)
        command = self.prepare(definition, extra_tokens or [])
        self.usage_log.append(definition.name)
        return command
