"""Shared console for operator-facing output"""

from rich.console import Console

console = Console()
