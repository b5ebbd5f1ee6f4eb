"""
Dent CLI Package.

- main.py: Typer application, global options, entry point
- commands.py: query, check, and show commands
- utils.py: Shared utilities
"""

from dent.cli.main import app, main
from dent.cli.utils import version_callback

__all__ = ["app", "main", "version_callback"]
