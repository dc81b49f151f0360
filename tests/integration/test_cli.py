from typer.testing import CliRunner

from sql_ascii_table.cli import app

runner = CliRunner()


def test_query_prints_wrapped_table(sqlite_db_path):
    # Arrange
    url = f"sqlite:///{sqlite_db_path}"

    # Act
    result = runner.invoke(
        app,
        ["query", url, "SELECT title, body FROM notes ORDER BY id", "--max-width", "11"],
    )

    # Assert
    assert result.exit_code == 0, result.output
    assert "TITLE" in result.output
    assert "hello world" in result.output
    assert "foo bar" in result.output
    assert "(3 rows)" in result.output


def test_query_formats_numbers_with_locale(sqlite_db_path):
    result = runner.invoke(
        app,
        ["query", f"sqlite:///{sqlite_db_path}", "SELECT amount FROM notes WHERE id = 1", "--locale", "de_DE"],
    )

    assert result.exit_code == 0, result.output
    assert "1.234.567,5" in result.output
    assert "(1 row)" in result.output


def test_query_reports_data_access_failure(sqlite_db_path):
    result = runner.invoke(app, ["query", f"sqlite:///{sqlite_db_path}", "SELECT * FROM nowhere"])

    assert result.exit_code == 1
    assert "DATA_ACCESS_FAILURE" in result.output


def test_query_rejects_invalid_url():
    result = runner.invoke(app, ["query", "not a url", "SELECT 1"])

    assert result.exit_code == 2


def test_query_rejects_non_positive_width(sqlite_db_path):
    result = runner.invoke(app, ["query", f"sqlite:///{sqlite_db_path}", "SELECT 1", "--max-width", "0"])

    assert result.exit_code != 0


def test_query_prints_emoji_codes_verbatim(sqlite_db_path):
    # Validates literal output because cell text must not be rewritten by the console.
    result = runner.invoke(
        app,
        ["query", f"sqlite:///{sqlite_db_path}", "SELECT ':thumbs_up:' AS reaction"],
    )

    assert result.exit_code == 0, result.output
    assert ":thumbs_up:" in result.output
    assert "\U0001F44D" not in result.output


def test_query_accepts_hyphenated_locale(sqlite_db_path):
    result = runner.invoke(
        app,
        ["query", f"sqlite:///{sqlite_db_path}", "SELECT amount FROM notes WHERE id = 1", "--locale", "de-DE"],
    )

    assert result.exit_code == 0, result.output
    assert "1.234.567,5" in result.output


def test_query_reports_unknown_locale(sqlite_db_path):
    result = runner.invoke(
        app,
        ["query", f"sqlite:///{sqlite_db_path}", "SELECT 1", "--locale", "xx_YY"],
    )

    assert result.exit_code == 2
    assert "Invalid option" in result.output
    assert "Unexpected Error" not in result.output
