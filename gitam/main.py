import argparse
import signal
import sys

from gitam.commands.list import handle_list
from gitam.commands.pick import handle_pick
from gitam.commands.run import handle_run
from gitam.commands.top import handle_top
from gitam.utils.classes import ListArgs, PickArgs, RunArgs, TopArgs
from gitam.utils.config import TOP_ALIAS_COUNT, load_settings
from gitam.utils.errors import GitamError
from gitam.utils.usage_log import UsageLog

ENVIRONMENT_HELP = """
Environment:
  GITAM_GIT_EXECUTABLE   git binary to run (default: git)
  GITAM_LOG_FILE         usage log (default: ~/git_alias_usage.log)
  GITAM_BACKUP_FILE      rotation archive (default: ~/git_alias_usage_backup.log)
  GITAM_MAX_LOG_SIZE     rotate the usage log above this many KB (default: 1024)"""


def positive_int(value: str) -> int:
    """argparse type for counts that must be at least one."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"must be a positive number, got '{value}'") from None
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive number, got '{value}'")
    return number


def build_parser() -> argparse.ArgumentParser:
    """Builds and returns the main argument parser."""
    parser = argparse.ArgumentParser(
        prog="gam",
        description="Pick and run one of your git aliases, most used first.",
        epilog=ENVIRONMENT_HELP,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    # Running 'gam' on its own opens the interactive menu
    parser.set_defaults(func=handle_pick, args_class=PickArgs)
    subparsers = parser.add_subparsers(dest="command", help="Sub-command help")

    parser_pick = subparsers.add_parser("pick", help="List aliases and choose one to run (default).")
    parser_pick.set_defaults(func=handle_pick, args_class=PickArgs)

    parser_list = subparsers.add_parser("list", aliases=["ls"], help="List aliases, highlighting the most used.")
    parser_list.set_defaults(func=handle_list, args_class=ListArgs)

    parser_top = subparsers.add_parser("top", help="Show the most used aliases from the usage log.")
    parser_top.add_argument(
        "-n",
        "--count",
        type=positive_int,
        default=TOP_ALIAS_COUNT,
        help=f"How many aliases to show (default: {TOP_ALIAS_COUNT}).",
    )
    parser_top.set_defaults(func=handle_top, args_class=TopArgs)

    parser_run = subparsers.add_parser("run", help="Run an alias directly, without the menu.")
    parser_run.add_argument("alias_name", help="The alias to run.")
    parser_run.add_argument(
        "extra_args",
        nargs=argparse.REMAINDER,
        metavar="ARGS",
        help="Additional arguments appended to the alias.",
    )
    parser_run.set_defaults(func=handle_run, args_class=RunArgs)

    return parser


def _exit_on_signal(signum, frame) -> None:
    sys.exit(0)


def main() -> None:
    """The main entry point for the 'gam' CLI."""
    parser = build_parser()
    args = parser.parse_args()
    signal.signal(signal.SIGTERM, _exit_on_signal)

    # Create dataclass instance, excluding 'func', 'command', and 'args_class'
    args_class = args.args_class
    dataclass_args_dict = {k: v for k, v in vars(args).items() if k in args_class.__annotations__}
    args_instance = args_class(**dataclass_args_dict)

    try:
        settings = load_settings()
        with UsageLog(settings.log_file, settings.backup_file) as usage_log:
            usage_log.rotate_if_needed(settings.max_log_size_kb)
            args.func(args_instance, usage_log=usage_log, settings=settings)
    except GitamError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(e.exit_code)
    except KeyboardInterrupt:
        # Interrupting gam is a normal way out, not a failure
        print()
        sys.exit(0)


if __name__ == "__main__":
    main()
