"""
text_match.py - Filename Text Tools

Provides filename validity checks
"""

from typing import Optional
import platform

WINDOWS_INVALID_CHARS = '<>:"/\\|?*'

WINDOWS_RESERVED_NAMES = {
    'CON', 'PRN', 'AUX', 'NUL',
    'COM1', 'COM2', 'COM3', 'COM4', 'COM5', 'COM6', 'COM7', 'COM8', 'COM9',
    'LPT1', 'LPT2', 'LPT3', 'LPT4', 'LPT5', 'LPT6', 'LPT7', 'LPT8', 'LPT9'
}


def is_valid_filename(name: str, windows: Optional[bool] = None) -> tuple[bool, Optional[str]]:
    """
    Check if filename is a valid single path component

    Args:
        name: Filename
        windows: Apply Windows rules (defaults to the current platform)

    Returns:
        (is_valid, error_reason)
    """
    if windows is None:
        windows = platform.system() == "Windows"

    if not name:
        return False, "Filename cannot be empty"

    if name in (".", ".."):
        return False, f"Filename cannot be '{name}'"

    if "/" in name or "\0" in name:
        return False, "Filename cannot contain a path separator or NUL"

    if len(name) > 255:
        return False, "Filename exceeds 255 characters"

    if not windows:
        return True, None

    for char in WINDOWS_INVALID_CHARS:
        if char in name:
            return False, f"Filename contains invalid character: {char}"

    # Trailing space or dot
    if name.endswith(' ') or name.endswith('.'):
        return False, "Filename cannot end with space or dot"

    name_upper = name.upper().split('.')[0]
    if name_upper in WINDOWS_RESERVED_NAMES:
        return False, f"Filename is a Windows reserved name: {name_upper}"

    return True, None
