from typing import Any, List, Optional, Protocol, Sequence, runtime_checkable

from sqlalchemy.engine import CursorResult, Row


@runtime_checkable
class ResultSource(Protocol):
    """
    Forward-only view over a query result.
    Columns are addressed with zero-based indexes.
    """

    def col_count(self) -> int:
        """Number of columns in the result."""
        ...

    def column_label(self, index: int) -> str:
        """Label of the column at ``index``."""
        ...

    def advance(self) -> bool:
        """Moves to the next row; returns False once the result is exhausted."""
        ...

    def value_at(self, index: int) -> Any:
        """Value of the column at ``index`` in the current row."""
        ...


class RowsResultSource:
    """In-memory result source over already-fetched rows."""

    def __init__(self, columns: Sequence[str], rows: Sequence[Sequence[Any]]):
        self._columns = list(columns)
        self._rows = iter(rows)
        self._current: Optional[Sequence[Any]] = None

    def col_count(self) -> int:
        return len(self._columns)

    def column_label(self, index: int) -> str:
        return self._columns[index]

    def advance(self) -> bool:
        self._current = next(self._rows, None)
        return self._current is not None

    def value_at(self, index: int) -> Any:
        if self._current is None:
            raise RuntimeError("No current row; call advance() first")
        return self._current[index]


class SQLAlchemyResultSource:
    """
    Result source over a SQLAlchemy ``CursorResult``.
    The caller owns the result and is responsible for closing it.
    """

    def __init__(self, result: CursorResult):
        self.result = result
        self._labels: Optional[List[str]] = None
        self._current: Optional[Row] = None

    def _keys(self) -> List[str]:
        if self._labels is None:
            # DML without RETURNING has no columns
            if self.result.returns_rows:
                self._labels = [str(key) for key in self.result.keys()]
            else:
                self._labels = []
        return self._labels

    def col_count(self) -> int:
        return len(self._keys())

    def column_label(self, index: int) -> str:
        return self._keys()[index]

    def advance(self) -> bool:
        if not self.result.returns_rows:
            return False
        self._current = self.result.fetchone()
        return self._current is not None

    def value_at(self, index: int) -> Any:
        if self._current is None:
            raise RuntimeError("No current row; call advance() first")
        return self._current[index]


class DBAPICursorSource:
    """
    Result source over a PEP 249 cursor that has already executed a query.
    Labels come from ``cursor.description``; the cursor is not closed.
    """

    def __init__(self, cursor: Any):
        self.cursor = cursor
        self._current: Optional[Sequence[Any]] = None

    def col_count(self) -> int:
        return len(self.cursor.description or ())

    def column_label(self, index: int) -> str:
        return self.cursor.description[index][0]

    def advance(self) -> bool:
        self._current = self.cursor.fetchone()
        return self._current is not None

    def value_at(self, index: int) -> Any:
        if self._current is None:
            raise RuntimeError("No current row; call advance() first")
        return self._current[index]
