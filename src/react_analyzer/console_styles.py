"""Console styling helpers for the analyzer's Rich output.

Example:
    >>> from react_analyzer.console_styles import create_summary_table, format_count
    >>> table = create_summary_table("File Summary")
    >>> table.add_row("Total Files", format_count(150))
    >>> console.print(table)
"""

from typing import Dict, List, Tuple

from rich.box import ROUNDED
from rich.panel import Panel
from rich.table import Table


def get_status_icon(success: bool) -> str:
    return "[green]✓[/green]" if success else "[red]✗[/red]"


def format_count(count: int) -> str:
    """Format a count with thousands separator."""
    return f"{count:,}"


def format_time(seconds: float) -> str:
    """Format a duration, switching to minutes past 60 seconds."""
    minutes, rest = divmod(seconds, 60)
    if minutes > 0:
        return f"{int(minutes)}m {rest:.2f}s"
    return f"{rest:.2f}s"


def create_summary_table(title: str, header_style: str = "bold cyan") -> Table:
    """Create a two-column Metric/Count table.

    Args:
        title: Table title
        header_style: Rich style for header (default: "bold cyan")

    Returns:
        Table: Configured Rich Table
    """
    table = Table(
        title=title,
        show_header=True,
        header_style=header_style,
        box=ROUNDED,
    )
    table.add_column("Metric", style="cyan")
    table.add_column("Count", justify="right", style="green")
    return table


def create_data_table(title: str, columns: List[Tuple[str, str, str]]) -> Table:
    """Create a table from ``(column_name, justify, style)`` tuples."""
    table = Table(
        title=title,
        show_header=True,
        header_style="bold cyan",
        box=ROUNDED,
    )

    for col_name, justify, style in columns:
        table.add_column(col_name, justify=justify, style=style)

    return table


def create_header_panel(title: str, subtitle: str = "", border_style: str = "cyan") -> Panel:
    """Create a styled header panel.

    Args:
        title: Panel title
        subtitle: Optional subtitle
        border_style: Rich style for border

    Returns:
        Panel: Configured Rich Panel
    """
    if subtitle:
        content = f"[bold cyan]{title}[/bold cyan]\n{subtitle}"
    else:
        content = f"[bold cyan]{title}[/bold cyan]"

    return Panel.fit(
        content,
        border_style=border_style,
        padding=(0, 1),
    )


def create_timing_panel(total: float, phases: Dict[str, float]) -> Panel:
    """Panel with the total run time and a per-phase breakdown."""
    lines = [
        f"[bold green]Total analysis time:[/bold green] [yellow]{format_time(total)}[/yellow]",
        "",
        "[bold cyan]Breakdown:[/bold cyan]",
    ]
    for phase, seconds in phases.items():
        lines.append(f"  • {phase}: [yellow]{format_time(seconds)}[/yellow]")

    return Panel(
        "\n".join(lines),
        border_style="green",
        padding=(0, 2),
        title="[bold white]⏱  Performance Metrics[/bold white]",
    )
