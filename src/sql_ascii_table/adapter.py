from typing import Any, Callable, Optional, Protocol, Sequence, Tuple, TypeVar, Union, runtime_checkable

from babel import Locale
from sqlalchemy import Connection, Engine
from sqlalchemy.exc import SQLAlchemyError

from .cells import format_decimal_cell
from .errors import DataAccessFailure, ErrorStage
from .expander import DisplayRow, expand_row
from .logger import get_logger
from .settings import settings
from .sources import ResultSource, SQLAlchemyResultSource

logger = get_logger(__name__)

T = TypeVar("T")


@runtime_checkable
class TableAware(Protocol):
    """
    Structural definition of a renderable table.
    Any class implementing these methods can be drawn by the renderer.
    """

    def headers(self) -> Sequence[str]:
        """Column headers, in column order."""
        ...

    def data(self) -> Sequence[Sequence[Any]]:
        """Display rows, indexed ``[row][column]``."""
        ...

    def format_cell(self, header: str, row: int, col: int, value: Any) -> Optional[str]:
        """Custom rendering for a cell, or None to use the default."""
        ...


def _resolve_width(max_column_width: Optional[int]) -> int:
    if max_column_width is None:
        max_column_width = settings.max_column_width
    if max_column_width < 1:
        raise ValueError(f"max_column_width must be a positive integer, got {max_column_width}")
    return max_column_width


def _resolve_locale(number_locale: Optional[str]) -> Locale:
    identifier = number_locale or settings.number_locale
    try:
        return Locale.parse(identifier)
    except ValueError:
        # BCP 47 style tags such as de-DE
        return Locale.parse(identifier, sep="-")


def _access(stage: ErrorStage, func: Callable[..., T], *args: Any) -> T:
    """Calls into the result source, translating its failures to DataAccessFailure."""
    try:
        return func(*args)
    except Exception as e:
        logger.error(f"Result source failed during {stage.value}: {e}")
        raise DataAccessFailure.from_exception(e, stage) from e


class ResultTableAdapter:
    """
    Adapts a query result to headers and fixed-width display rows.

    The source is drained once, eagerly, during construction. Cells that hold
    newlines or are wider than ``max_column_width`` are wrapped across extra
    continuation rows so that every display row draws as a single line.
    Afterwards the adapter is an immutable value object.
    """

    def __init__(
        self,
        source: ResultSource,
        max_column_width: Optional[int] = None,
        number_locale: Optional[str] = None,
    ):
        self._max_column_width = _resolve_width(max_column_width)
        self._locale = _resolve_locale(number_locale)
        self._row_count = 0
        self._headers: Tuple[str, ...] = ()
        self._data: Tuple[DisplayRow, ...] = ()
        self._load(source)

    def __repr__(self):
        return (
            f"ResultTableAdapter(columns={len(self._headers)}, rows={self._row_count}, "
            f"display_rows={len(self._data)}, max_column_width={self._max_column_width})"
        )

    @classmethod
    def from_query(
        cls,
        bind: Union[Engine, Connection],
        sql: str,
        max_column_width: Optional[int] = None,
        number_locale: Optional[str] = None,
    ) -> "ResultTableAdapter":
        """Executes ``sql`` and builds the table from its result.

        Args:
            bind (Union[Engine, Connection]): Where to run the statement. An
                engine is connected for the duration of the call; a connection
                is used as is and left open.
            sql (str): The statement to execute.
            max_column_width (Optional[int]): Wrap width; defaults to settings.
            number_locale (Optional[str]): Locale for decimal cells; defaults to settings.

        Returns:
            ResultTableAdapter: The drained table.

        Raises:
            DataAccessFailure: If connecting, executing or reading the result fails.
        """
        _resolve_width(max_column_width)
        _resolve_locale(number_locale)

        if isinstance(bind, Engine):
            try:
                conn = bind.connect()
            except SQLAlchemyError as e:
                logger.error(f"Failed to connect to database: {e}")
                raise DataAccessFailure.from_exception(e, ErrorStage.EXECUTE) from e
            with conn:
                return cls.from_query(conn, sql, max_column_width, number_locale)

        try:
            result = bind.exec_driver_sql(sql)
        except SQLAlchemyError as e:
            logger.error(f"Failed to execute query: {e}")
            raise DataAccessFailure.from_exception(e, ErrorStage.EXECUTE) from e

        try:
            return cls(SQLAlchemyResultSource(result), max_column_width, number_locale)
        finally:
            result.close()

    def _load(self, source: ResultSource) -> None:
        width = self._max_column_width
        col_count = _access(ErrorStage.METADATA, source.col_count)
        self._headers = tuple(
            str(_access(ErrorStage.METADATA, source.column_label, i)).upper()
            for i in range(col_count)
        )

        data = []
        while _access(ErrorStage.ADVANCE, source.advance):
            row = [_access(ErrorStage.FETCH, source.value_at, i) for i in range(col_count)]
            data.extend(expand_row(row, width))
            self._row_count += 1

        self._data = tuple(data)
        logger.debug(
            f"Loaded {self._row_count} rows into {len(self._data)} display rows",
            extra={"columns": col_count, "max_column_width": width},
        )

    @property
    def max_column_width(self) -> int:
        return self._max_column_width

    @property
    def number_locale(self) -> str:
        return str(self._locale)

    @property
    def row_count(self) -> int:
        """Number of logical rows read from the source."""
        return self._row_count

    @property
    def column_count(self) -> int:
        return len(self._headers)

    def headers(self) -> Tuple[str, ...]:
        return self._headers

    def data(self) -> Tuple[DisplayRow, ...]:
        return self._data

    def format_cell(self, header: str, row: int, col: int, value: Any) -> Optional[str]:
        """Formats decimal-looking cells with the configured locale.

        Returns None for anything that does not parse as a decimal, telling the
        renderer to use its default stringification.
        """
        return format_decimal_cell(value, self._locale)
