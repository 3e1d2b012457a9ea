from gitam.utils import git
from gitam.utils.classes import ListArgs
from gitam.utils.config import TOP_ALIAS_COUNT, Settings
from gitam.utils.errors import EmptyAliasSetError
from gitam.utils.render import render_alias_list
from gitam.utils.usage_log import UsageLog


def handle_list(args: ListArgs, *, usage_log: UsageLog, settings: Settings) -> None:
    """Handle the 'list' command: print all aliases without prompting."""
    aliases = git.get_aliases(settings.git_executable)
    if not aliases:
        raise EmptyAliasSetError()

    top_names = {entry.name for entry in usage_log.rank_top(TOP_ALIAS_COUNT)}
    render_alias_list(aliases, top_names)
