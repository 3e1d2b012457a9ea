from gitam.utils.classes import NativeInvocation, PickArgs
from gitam.utils.config import TOP_ALIAS_COUNT, Settings
from gitam.utils.dispatcher import Dispatcher
from gitam.utils.render import render_alias_list, render_ranking
from gitam.utils.resolver import classify
from gitam.utils.usage_log import UsageLog
from gitam.utils.util import execute

MOST_USED_KEYWORD = "most-used"


def _prompt(message: str) -> str:
    """Reads one line of input; end of input counts as an empty line."""
    try:
        return input(message)
    except EOFError:
        print()
        return ""


def handle_pick(args: PickArgs, *, usage_log: UsageLog, settings: Settings) -> None:
    """
    Handle the interactive alias menu.

    Lists every configured alias with the most used ones highlighted, asks
    for an alias name and any extra arguments, records the selection and
    runs the resulting command.

    Parameters
    ----------
    args : PickArgs
        The parsed command-line arguments as a dataclass.
    usage_log : UsageLog
        The open usage log for this run.
    settings : Settings
        Settings loaded from the environment.

    """
    dispatcher = Dispatcher.from_git_config(usage_log, settings.git_executable)
    ranking = usage_log.rank_top(TOP_ALIAS_COUNT)
    render_alias_list(dispatcher.aliases, {entry.name for entry in ranking})

    selected_name = _prompt(f"Enter the alias name to execute (or '{MOST_USED_KEYWORD}' to see the top aliases): ")

    # A real alias called 'most-used' wins over the keyword
    if selected_name.strip() == MOST_USED_KEYWORD and MOST_USED_KEYWORD not in dispatcher.aliases:
        render_ranking(ranking, TOP_ALIAS_COUNT)
        return

    definition = dispatcher.select(selected_name)
    invocation = classify(definition)

    print(f"You selected alias: {definition.name}")
    if isinstance(invocation, NativeInvocation):
        print(f"Alias command: git {definition.raw}")
    else:
        print(f"Alias command: {invocation.command}")

    extra_args = _prompt("Enter any additional arguments (or leave empty if none): ").split()
    command = dispatcher.dispatch(definition.name, extra_args)
    execute(command)
