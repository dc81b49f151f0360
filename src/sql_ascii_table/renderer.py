from typing import List, Optional

import tabulate as tabulate_module
from tabulate import tabulate

from .adapter import TableAware
from .cells import to_text
from .settings import settings


def render_rows(table: TableAware) -> List[List[str]]:
    """Resolves every display cell to its final text.

    ``table.format_cell`` gets the first say; cells it declines are rendered
    with ``to_text``.
    """
    headers = list(table.headers())
    rendered = []
    for r, row in enumerate(table.data()):
        cells = []
        for c, value in enumerate(row):
            text = table.format_cell(headers[c], r, c, value)
            cells.append(to_text(value) if text is None else text)
        rendered.append(cells)
    return rendered


def render_table(table: TableAware, table_format: Optional[str] = None) -> str:
    """Draws the table as ASCII text, one line per display row.

    Args:
        table (TableAware): The headers and display rows to draw.
        table_format (Optional[str]): tabulate format name; defaults to settings.

    Returns:
        str: The rendered table.
    """
    rows = render_rows(table)
    # tabulate strips cell padding unless told otherwise
    preserve = tabulate_module.PRESERVE_WHITESPACE
    tabulate_module.PRESERVE_WHITESPACE = True
    try:
        return tabulate(
            rows,
            headers=list(table.headers()),
            tablefmt=table_format or settings.table_format,
            disable_numparse=True,
        )
    finally:
        tabulate_module.PRESERVE_WHITESPACE = preserve
