"""Theme for consistent Rich styling across CLI commands."""

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.theme import Theme


class Colors:
    """Standardized color palette for CLI output."""

    SUCCESS = "bold green"
    ERROR = "bold red"
    WARNING = "bold yellow"
    INFO = "bold blue"

    PRIMARY = "cyan"
    MUTED = "dim"
    HEADER = "bold cyan"


class Icons:
    """Icons with plain text fallbacks for terminals without emoji."""

    EMOJI = {
        "SUCCESS": "✅",
        "ERROR": "❌",
        "WARNING": "⚠️",
        "INFO": "ℹ️",
        "BULLET": "•",
    }
    TEXT = {
        "SUCCESS": "[OK]",
        "ERROR": "[ERROR]",
        "WARNING": "[WARN]",
        "INFO": "[INFO]",
        "BULLET": "-",
    }

    @classmethod
    def get_icon(cls, icon_name: str, use_emoji: bool = True) -> str:
        icons = cls.EMOJI if use_emoji else cls.TEXT
        return icons.get(icon_name, "")


FEEDPUSH_THEME = Theme(
    {
        "success": Colors.SUCCESS,
        "error": Colors.ERROR,
        "warning": Colors.WARNING,
        "info": Colors.INFO,
        "primary": Colors.PRIMARY,
        "muted": Colors.MUTED,
    }
)


class ThemedConsole:
    """Console wrapper with the feedpush theme applied.

    Messages are printed literally; square brackets in paths or parser
    errors are not read as markup.
    """

    def __init__(self, use_emoji: bool = True, console: Console | None = None) -> None:
        self.console = console or Console(theme=FEEDPUSH_THEME)
        self.use_emoji = use_emoji

    def print_success(self, message: str) -> None:
        icon = Icons.get_icon("SUCCESS", self.use_emoji)
        self.console.print(f"{icon} {escape(message)}", style="success")

    def print_error(self, message: str) -> None:
        icon = Icons.get_icon("ERROR", self.use_emoji)
        self.console.print(f"{icon} {escape(message)}", style="error")

    def print_warning(self, message: str) -> None:
        icon = Icons.get_icon("WARNING", self.use_emoji)
        self.console.print(f"{icon} {escape(message)}", style="warning")

    def print_list_item(self, message: str, indent: int = 1) -> None:
        spacing = "  " * indent
        bullet = Icons.get_icon("BULLET", self.use_emoji)
        self.console.print(f"{spacing}{bullet} {escape(message)}", style="primary")


def create_basic_table(title: str, columns: list[str]) -> Table:
    table = Table(title=title, show_header=True, header_style=Colors.HEADER)
    for column in columns:
        table.add_column(column)
    return table


def get_themed_console(use_emoji: bool = True) -> ThemedConsole:
    return ThemedConsole(use_emoji=use_emoji)
