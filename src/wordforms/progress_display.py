"""
Rich-based live progress panel for the GrammarDB build.

The panel is drawn on stdout, log records stay on stderr. The lists
themselves are written to files, never to stdout.
"""

import time
from typing import Any, Dict, Optional

from rich import box
from rich.console import Console
from rich.live import Live
from rich.panel import Panel
from rich.table import Table
from rich.text import Text


class ProgressDisplay:
    """
    Context manager showing live-updating build counters.

    Usage:
        with ProgressDisplay("Parsing GrammarDB") as progress:
            for fname in files:
                ...
                progress.update(Files=n, Lemmas=len(lemmas))

    With enabled=False nothing is drawn but metrics are still recorded.
    """

    def __init__(
        self,
        title: str = "Progress",
        enabled: bool = True,
        refresh_per_second: int = 4,
        console: Optional[Console] = None
    ):
        self.title = title
        self.enabled = enabled
        self.refresh_per_second = refresh_per_second
        self.console = console or Console()

        self.metrics: Dict[str, Any] = {}
        self.live: Optional[Live] = None
        self.start_time: float = 0

    def __enter__(self):
        self.start_time = time.time()
        self.metrics["Elapsed"] = 0.0

        if self.enabled:
            self.live = Live(
                self._make_panel(),
                console=self.console,
                refresh_per_second=self.refresh_per_second,
                transient=False
            )
            self.live.__enter__()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.metrics["Elapsed"] = time.time() - self.start_time
        if self.live:
            self.live.update(self._make_panel())
            self.live.__exit__(exc_type, exc_val, exc_tb)
            self.live = None
        return False

    def update(self, **metrics):
        """Replace the given counters and redraw."""
        self.metrics.update(metrics)
        self.metrics["Elapsed"] = time.time() - self.start_time
        if self.live:
            self.live.update(self._make_panel())

    def _make_panel(self) -> Panel:
        grid = Table.grid(padding=(0, 2))
        grid.add_column(justify="left", no_wrap=True)
        grid.add_column(justify="right", no_wrap=True)

        for key, value in self.metrics.items():
            grid.add_row(
                Text(f"{key}:", style="bold grey50"),
                Text(format_metric(key, value), style="bright_cyan")
            )

        return Panel(grid, title=self.title, box=box.SIMPLE, border_style="bright_black")


def format_metric(key: str, value: Any) -> str:
    """Format a counter for display: MM:SS for elapsed time, thousands separators for counts."""
    if key == "Elapsed" and isinstance(value, float):
        if value >= 3600:
            return f"{int(value // 3600):02d}:{int(value % 3600 // 60):02d}:{int(value % 60):02d}"
        return f"{int(value // 60):02d}:{int(value % 60):02d}"
    if isinstance(value, float):
        return f"{value:,.2f}"
    if isinstance(value, int):
        return f"{value:,}"
    return str(value)
