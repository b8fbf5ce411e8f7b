# Argkit CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""Console instances used by the runner to print usage and errors."""
from rich.console import Console

console = Console(color_system="truecolor")
error_console = Console(color_system="truecolor", stderr=True)
