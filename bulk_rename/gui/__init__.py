"""
gui - PySide6 Interface for Bulk Rename Tool
"""

from .gui_entry import main

__all__ = ["main"]
