"""
sort_rules.py - Sorting Rules Module

Provides lexicographic and numeric-aware file sorting
"""

from typing import List, Callable, Union
import math
import re

from .models_fs import FileItem

# Sort key of files without any digits; sorts after every numbered file
NO_NUMBER = math.inf

_DIGIT_RUN = re.compile(r"[0-9]+")


def numeric_sort_key(stem: str) -> Union[int, float]:
    """
    Extract the numeric sort key from a filename

    Args:
        stem: Filename without extension

    Returns:
        Integer value of the last run of digits, or NO_NUMBER if there is none
    """
    runs = _DIGIT_RUN.findall(stem)
    if not runs:
        return NO_NUMBER
    return int(runs[-1])


def get_sort_key(by_number: bool) -> Callable[[FileItem], tuple]:
    """
    Get sort key function

    Args:
        by_number: Whether to sort by the numeric key first

    Returns:
        Sort key function
    """
    if by_number:
        return lambda f: (numeric_sort_key(f.stem), str(f.path))
    return lambda f: (str(f.path),)


def sort_files(files: List[FileItem], by_number: bool = False) -> List[FileItem]:
    """
    Sort file list

    Lexicographic mode compares full path strings ordinally. Numeric mode
    orders by the numeric key, then by full path for equal or missing keys.

    Args:
        files: File list
        by_number: Whether to use numeric-aware sorting

    Returns:
        Sorted file list (new list)
    """
    return sorted(files, key=get_sort_key(by_number))
