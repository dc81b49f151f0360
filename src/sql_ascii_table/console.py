import sys
import traceback
from functools import wraps

from rich.console import Console
from rich.markup import escape
from rich.theme import Theme

from .errors import AsciiTableError

custom_theme = Theme({
    "info": "cyan",
    "warning": "yellow",
    "error": "bold red",
    "success": "bold green",
})

console = Console(theme=custom_theme)
err_console = Console(theme=custom_theme, stderr=True)


def print_error(message: str) -> None:
    err_console.print(f"[error]✘ {escape(message)}[/error]", highlight=False)


def handle_cli_errors(func):
    """
    Decorator to wrap CLI commands with unified error handling.

    - AsciiTableError: Prints a clean red error message.
    - KeyboardInterrupt: Exits gracefully.
    - Unexpected Exception: Prints stack trace and error.
    """
    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except AsciiTableError as e:
            print_error(f"{e.error_code.value}: {e}")
            sys.exit(1)
        except KeyboardInterrupt:
            err_console.print("\n[warning]Operation cancelled by user.[/warning]")
            sys.exit(130)  # Standard SIGINT exit code
        except Exception as e:
            err_console.print(f"[bold red]Unexpected Error:[/bold red] {escape(str(e))}", highlight=False)
            err_console.print(traceback.format_exc(), markup=False)
            sys.exit(1)

    return wrapper
