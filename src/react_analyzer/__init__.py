"""react-analyzer - import graph and dead-file analysis for JavaScript/TypeScript projects."""

__version__ = "0.1.0"

from .cli import cli  # noqa: E402


def main() -> None:
    """Entry point for the CLI application."""
    cli()
