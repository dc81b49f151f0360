from typing import Any, List, Optional, Sequence, Tuple

from .cells import to_text
from .wrapping import NEWLINE, wrap

MIN_EXPANDED_HEIGHT = 2

DisplayRow = Tuple[Any, ...]


def is_multiline(text: str, max_column_width: int) -> bool:
    """A cell needs expansion if it holds a newline or is wider than the column."""
    return NEWLINE in text or len(text) > max_column_width


def expand_row(row: Sequence[Any], max_column_width: int) -> List[DisplayRow]:
    """Expands one logical row into the display rows needed to draw it.

    Multiline cells are wrapped to ``max_column_width``; the remaining cells
    keep their original value in the first display row and are blank in the
    continuation rows. An expanded row is always at least two display rows
    high.

    Args:
        row (Sequence[Any]): The cells of the logical row, in column order.
        max_column_width (int): Maximum width of a display cell.

    Returns:
        List[DisplayRow]: The display rows, top to bottom.
    """
    texts = [to_text(value) for value in row]
    multiline = [is_multiline(text, max_column_width) for text in texts]

    if not any(multiline):
        return [tuple(row)]

    columns: List[Optional[List[Any]]] = [
        wrap(text, max_column_width) if flagged else None
        for text, flagged in zip(texts, multiline)
    ]
    height = max([MIN_EXPANDED_HEIGHT] + [len(lines) for lines in columns if lines is not None])

    padded = []
    for value, lines in zip(row, columns):
        if lines is None:
            lines = [value]
        padded.append(lines + [""] * (height - len(lines)))

    return [tuple(column[r] for column in padded) for r in range(height)]
