FORMAT_PREFIXES: tuple[str, ...] = (
    "--pretty=format:",
    "--pretty=tformat:",
    "--format=format:",
    "--format=tformat:",
)
# '--format=' also takes named formats such as 'oneline', so it only counts
# as a format prefix when followed by a placeholder string.
PLACEHOLDER_FORMAT_PREFIX = "--format="


def _format_prefix(token: str) -> str | None:
    for prefix in FORMAT_PREFIXES:
        if token.startswith(prefix):
            return prefix
    if token.startswith(PLACEHOLDER_FORMAT_PREFIX) and "%" in token:
        return PLACEHOLDER_FORMAT_PREFIX
    return None


def _looks_like_option(token: str) -> bool:
    # A lone "-" is literal text, e.g. the separator in "%h - %s".
    return token.startswith("-") and len(token) > 1


def reassemble_arguments(tokens: list[str]) -> list[str]:
    """
    Rebuild logical arguments from a split token list.

    A pretty-format value containing spaces ends up split over several
    tokens when it was not quoted, e.g. ``--pretty=format:%h by %an``
    becomes ``["--pretty=format:%h", "by", "%an"]``. Tokens following a
    format prefix are folded back into that argument until the next option
    or the end of input.

    Parameters
    ----------
    tokens : list[str]
        The flat token sequence.

    Returns
    -------
    list[str]
        The logical arguments, never longer than ``tokens``.

    """
    arguments: list[str] = []
    prefix: str | None = None
    buffer = ""

    for token in tokens:
        if prefix is not None and not _looks_like_option(token):
            buffer += f" {token}"
            continue

        if prefix is not None:
            arguments.append(prefix + buffer)
            prefix = None
            buffer = ""

        token_prefix = _format_prefix(token)
        if token_prefix is not None:
            prefix = token_prefix
            buffer = token[len(token_prefix) :]
        else:
            arguments.append(token)

    # The format value was the last argument
    if prefix is not None:
        arguments.append(prefix + buffer)

    return arguments
