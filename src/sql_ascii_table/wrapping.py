import textwrap
from typing import List

NEWLINE = "\n"


def _split_lines(text: str) -> List[str]:
    """Splits on hard newlines, dropping trailing empty segments."""
    lines = text.split(NEWLINE)
    while lines and lines[-1] == "":
        lines.pop()
    return lines or [""]


def wrap(text: str, width: int) -> List[str]:
    """Wraps a string to ``width`` columns.

    Embedded newlines are authoritative: if ``text`` contains one, the
    segments between them are returned verbatim and never width-wrapped.
    Otherwise the string is wrapped greedily at whitespace boundaries.
    Tokens longer than ``width`` are kept whole on their own line.

    Args:
        text (str): The string to wrap.
        width (int): Maximum line width, at least 1.

    Returns:
        List[str]: The wrapped lines; never empty.

    Raises:
        ValueError: If ``width`` is less than 1.
    """
    if width < 1:
        raise ValueError(f"width must be >= 1, got {width}")

    if NEWLINE in text:
        return _split_lines(text)

    if len(text) <= width:
        return [text]

    lines = textwrap.wrap(
        text,
        width=width,
        expand_tabs=False,
        replace_whitespace=False,
        break_long_words=False,
        break_on_hyphens=False,
    )
    # whitespace-only input collapses to nothing
    return lines or [""]
