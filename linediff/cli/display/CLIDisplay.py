"""CLI display implementation using Rich library."""

import json
import sys
from datetime import datetime
from typing import Any

import yaml
from rich.console import Console
from rich.markup import escape
from rich.text import Text

_DIFF_STYLES = {
    "+": "green",
    "-": "red",
    "@": "cyan",
    "\\": "dim",
}


class CLIDisplay:
    """CLI display: status on stderr, diff and structured output on stdout."""

    def __init__(self, color: bool = False):
        self.color = color
        self.console = Console(file=sys.stdout, force_terminal=color, no_color=not color, highlight=False)
        self.stderr_console = Console(file=sys.stderr, highlight=False)

    def status(self, message: str, **kwargs) -> None:  # noqa: ARG002
        timestamp = datetime.now().strftime("%H:%M:%S")
        self.stderr_console.print(f"[dim]{timestamp}[/dim] [blue]i[/blue] {escape(message)}")

    def success(self, message: str, **kwargs) -> None:  # noqa: ARG002
        timestamp = datetime.now().strftime("%H:%M:%S")
        self.stderr_console.print(f"[dim]{timestamp}[/dim] [green]✓[/green] {escape(message)}")

    def error(self, message: str, **kwargs) -> None:
        details = kwargs.get("details", "")
        self.stderr_console.print(f"[red]✗[/red] {escape(message)}")
        if details:
            self.stderr_console.print(f"  [dim]{escape(details)}[/dim]")

    def info(self, message: str, **kwargs) -> None:  # noqa: ARG002
        self.stderr_console.print(message)

    def diff_output(self, diff_text: str) -> None:
        """Write diff text to stdout, colored by line prefix when color is on."""
        if not self.color:
            sys.stdout.write(diff_text)
            sys.stdout.flush()
            return

        text = Text()
        for line in diff_text.splitlines(keepends=True):
            if line.startswith(("---", "+++")):
                text.append(line, style="bold")
            else:
                text.append(line, style=_DIFF_STYLES.get(line[:1], ""))
        self.console.print(text, end="", soft_wrap=True)

    def json_output(self, data: Any, **kwargs) -> None:
        output_format = kwargs.get("format", "yaml")
        indent = kwargs.get("indent", 2)

        if output_format == "yaml":
            print(yaml.safe_dump(data, default_flow_style=False, sort_keys=False, allow_unicode=True), end="")
        else:
            print(json.dumps(data, indent=indent, ensure_ascii=False), file=sys.stdout)
