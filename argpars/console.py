# Argpars Command Line Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instance for Argpars help, version and error output."""
from rich.console import Console

console = Console(highlight=False)
