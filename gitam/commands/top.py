from gitam.utils.classes import TopArgs
from gitam.utils.config import Settings
from gitam.utils.render import render_ranking
from gitam.utils.usage_log import UsageLog


def handle_top(args: TopArgs, *, usage_log: UsageLog, settings: Settings) -> None:
    """
    Handle the 'top' command.

    Prints the most used aliases recorded in the usage log, one
    '<name> <count>' line each.

    Parameters
    ----------
    args : TopArgs
        The parsed command-line arguments as a dataclass.
        Contains the `count` attribute, already validated as positive.
    usage_log : UsageLog
        The open usage log for this run.
    settings : Settings
        Settings loaded from the environment.

    """
    render_ranking(usage_log.rank_top(args.count), args.count)
