from .adapter import ResultTableAdapter, TableAware
from .cells import format_decimal_cell, parse_decimal, to_text
from .errors import AsciiTableError, DataAccessFailure, ErrorCode, ErrorStage
from .expander import expand_row, is_multiline
from .renderer import render_table
from .sources import DBAPICursorSource, ResultSource, RowsResultSource, SQLAlchemyResultSource
from .wrapping import wrap

__all__ = [
    "ResultTableAdapter",
    "TableAware",
    "ResultSource",
    "RowsResultSource",
    "SQLAlchemyResultSource",
    "DBAPICursorSource",
    "AsciiTableError",
    "DataAccessFailure",
    "ErrorCode",
    "ErrorStage",
    "expand_row",
    "is_multiline",
    "wrap",
    "to_text",
    "parse_decimal",
    "format_decimal_cell",
    "render_table",
]
