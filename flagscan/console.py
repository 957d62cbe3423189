# Flagscan — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instances for Flagscan output and diagnostics."""
from rich.console import Console

console = Console(highlight=False)
error_console = Console(stderr=True, highlight=False)
