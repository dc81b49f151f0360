from sql_ascii_table.adapter import ResultTableAdapter
from sql_ascii_table.renderer import render_rows, render_table


class _StaticTable:
    """Minimal TableAware implementation with a custom cell formatter."""

    def headers(self):
        return ("ID", "STATUS")

    def data(self):
        return ((1, "on"), (2, None))

    def format_cell(self, header, row, col, value):
        if header == "STATUS" and value == "on":
            return "ENABLED"
        return None


def test_render_rows_prefers_format_cell_then_text(make_source):
    # Arrange
    source = make_source(["amount", "label"], [("1234567.5", None), ("abc", "x")])
    table = ResultTableAdapter(source, max_column_width=20, number_locale="en_US")

    # Act
    rows = render_rows(table)

    # Assert
    assert rows == [["1,234,567.5", "null"], ["abc", "x"]]


def test_render_rows_accepts_any_table_aware():
    assert render_rows(_StaticTable()) == [["1", "ENABLED"], ["2", "null"]]


def test_render_table_draws_one_line_per_display_row(make_source):
    # Validates single-line rows because the renderer draws fixed-width cells.
    # Arrange
    source = make_source(["col", "x"], [("hello world foo bar", "y")])
    table = ResultTableAdapter(source, max_column_width=11)

    # Act
    lines = render_table(table, "psql").splitlines()

    # Assert
    assert len(lines) == 6
    assert len({len(line) for line in lines}) == 1
    assert "COL" in lines[1]
    assert "hello world" in lines[3] and "y" in lines[3]
    assert "foo bar" in lines[4]


def test_render_table_uses_configured_format(make_source, monkeypatch):
    # Arrange
    from sql_ascii_table.settings import settings
    monkeypatch.setattr(settings, "table_format", "grid")
    table = ResultTableAdapter(make_source(["a"], [("x",)]), max_column_width=5)

    # Act
    output = render_table(table)

    # Assert
    assert "+===" in output


def test_render_table_without_rows_keeps_headers(make_source):
    table = ResultTableAdapter(make_source(["id", "name"], []), max_column_width=5)

    output = render_table(table, "psql")

    assert "ID" in output and "NAME" in output


def test_render_table_keeps_cell_padding(make_source):
    # Validates whitespace preservation because drawn cells must equal data() cells.
    # Arrange
    table = ResultTableAdapter(make_source(["a"], [("  x  ",)]), max_column_width=10)

    # Act
    output = render_table(table, "psql")

    # Assert
    assert "|   x   |" in output
