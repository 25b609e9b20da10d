from typing import Any, Dict, Optional

from rich.console import Console
from rich.panel import Panel
from rich.text import Text


class Printer:
    def __init__(self, console: Optional[Console] = None):
        if console is None:
            self.console = Console()
        else:
            self.console = console

    def print_str_in_terminal(self, content: str, style: Optional[str] = None):
        if style:
            self.console.print(content, style=style, markup=False, highlight=False)
        else:
            self.console.print(content, markup=False, highlight=False)

    def print_error(self, content: str):
        self.print_str_in_terminal(content, style="bold red")

    def print_panel(self, content: str, text_options: Dict[str, Any], panel_options: Dict[str, Any]):
        panel = Panel(Text(content, **text_options), **panel_options)
        self.console.print(panel)
