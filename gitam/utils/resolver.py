import shlex

from gitam.utils.classes import AliasDefinition, Invocation, NativeInvocation, ShellInvocation
from gitam.utils.errors import NotFoundError

SHELL_ESCAPE_MARKER = "!"


def lookup(name: str, table: dict[str, str]) -> AliasDefinition:
    """Finds an alias definition by name, raising NotFoundError if it is missing."""
    if name not in table:
        raise NotFoundError(name)
    return AliasDefinition(name=name, raw=table[name])


def split_definition(raw: str) -> list[str]:
    """Splits a stored git alias like a shell would, one level of quotes deep."""
    try:
        return shlex.split(raw)
    except ValueError:
        # Unbalanced quotes
        return raw.split()


def classify(definition: AliasDefinition) -> Invocation:
    """
    Splits an alias into a shell escape or a native git invocation.

    Definitions starting with '!' run in the shell, marker stripped. Anything
    else is a git argument list, split with shell quoting rules.
    """
    if definition.raw.startswith(SHELL_ESCAPE_MARKER):
        return ShellInvocation(command=definition.raw[len(SHELL_ESCAPE_MARKER) :].strip())
    return NativeInvocation(tokens=tuple(split_definition(definition.raw)))
