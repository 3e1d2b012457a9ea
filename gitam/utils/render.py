from rich.console import Console
from rich.text import Text

from gitam.utils.classes import RankEntry

console = Console(highlight=False)


def render_alias_list(aliases: dict[str, str], top_names: set[str]) -> None:
    """Prints every alias with its definition, frequently used names highlighted."""
    console.print("Available Git aliases:", soft_wrap=True)
    for name, definition in aliases.items():
        line = Text()
        line.append(name, style="bold cyan" if name in top_names else "")
        line.append(" - ")
        line.append(definition, style="yellow")
        console.print(line, soft_wrap=True)


def render_ranking(ranking: list[RankEntry], count: int) -> None:
    if not ranking:
        console.print("No alias usage recorded yet.", soft_wrap=True)
        return
    console.print(f"Top {count} most used aliases:", soft_wrap=True)
    for entry in ranking:
        console.print(Text.assemble((entry.name, "bold cyan"), f" {entry.count}"), soft_wrap=True)
