"""
bulk_rename - Bulk File Rename Tool

Renames the files of one directory with a prefix, the original name and/or
a zero-padded sequence number.
"""

__version__ = "1.0.0"
