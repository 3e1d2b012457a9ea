from dataclasses import dataclass, field


# Dataclasses for command arguments
@dataclass
class PickArgs:
    pass  # No specific arguments


@dataclass
class ListArgs:
    pass  # No specific arguments


@dataclass
class TopArgs:
    count: int = 5


@dataclass
class RunArgs:
    alias_name: str
    extra_args: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class RankEntry:
    name: str
    count: int


@dataclass(frozen=True)
class AliasDefinition:
    name: str
    raw: str  # Exact value from git config, spaces and all


@dataclass(frozen=True)
class NativeInvocation:
    tokens: tuple[str, ...]


@dataclass(frozen=True)
class ShellInvocation:
    command: str


@dataclass(frozen=True)
class NativeCommand:
    program: str
    args: tuple[str, ...]

    @property
    def argv(self) -> list[str]:
        return [self.program, *self.args]

    @property
    def command_line(self) -> str:
        return " ".join(["git", *self.args])


@dataclass(frozen=True)
class ShellCommand:
    """
    A raw command line for the shell.

    This is the one place untrusted text from an alias definition or from
    user input reaches a shell unmodified. Nothing is escaped or validated.
    """

    command: str

    @property
    def command_line(self) -> str:
        return self.command


Invocation = NativeInvocation | ShellInvocation
ExecutableCommand = NativeCommand | ShellCommand
