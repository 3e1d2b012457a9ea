from gitam.utils.classes import RunArgs
from gitam.utils.config import Settings
from gitam.utils.dispatcher import Dispatcher
from gitam.utils.usage_log import UsageLog
from gitam.utils.util import execute


def handle_run(args: RunArgs, *, usage_log: UsageLog, settings: Settings) -> None:
    """
    Handle the 'run' command.

    Runs a single alias without the interactive menu. Arguments after the
    alias name are appended to the stored definition exactly as the
    interactive prompt would.

    Parameters
    ----------
    args : RunArgs
        The parsed command-line arguments as a dataclass.
        Contains the `alias_name` and `extra_args` attributes.
    usage_log : UsageLog
        The open usage log for this run.
    settings : Settings
        Settings loaded from the environment.

    """
    dispatcher = Dispatcher.from_git_config(usage_log, settings.git_executable)
    command = dispatcher.dispatch(args.alias_name, args.extra_args)
    execute(command)
