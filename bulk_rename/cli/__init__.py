"""
cli - Command Line Interface for Bulk Rename Tool
"""

from .cli_entry import main
from .cli_interactive import console_confirm, review_plan

__all__ = ["main", "console_confirm", "review_plan"]
