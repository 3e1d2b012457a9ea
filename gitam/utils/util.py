import subprocess
import sys

from gitam.utils.classes import ExecutableCommand, NativeCommand


def execute(command: ExecutableCommand) -> int:
    """
    Runs a prepared alias command and returns its exit code.

    Native git commands are run as an argument vector without a shell.
    Shell commands are passed to the shell verbatim. The exit code is
    reported but not acted upon.
    """
    print(f"Executing command: {command.command_line}")
    sys.stdout.flush()

    if isinstance(command, NativeCommand):
        try:
            result = subprocess.run(command.argv, check=False)
        except FileNotFoundError:
            print(f"Error: Command not found: {command.program}", file=sys.stderr)
            sys.exit(1)
    else:
        result = subprocess.run(command.command, shell=True, check=False)

    return result.returncode
