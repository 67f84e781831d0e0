"""
plan_rename.py - Rename Plan Generation Module

Responsibilities:
- Synthesize new names from prefix / original name / sequence number
- Pair sorted files with their new names into a RenamePlan
"""

from typing import List, Optional, Sequence

from .models_fs import FileItem, RenamePlan, RenameOptions, SequenceFormat


def synthesize_name(
    f: FileItem,
    position: int,
    seq_format: SequenceFormat,
    prefix: Optional[str] = None,
    use_original_name: bool = False,
    add_sequence: bool = False,
) -> str:
    """
    Build the new name of one file

    Args:
        f: Source file
        position: 1-based position in the sorted list
        seq_format: Sequence numbering of the whole plan
        prefix: Literal text put first
        use_original_name: Whether to include the original stem
        add_sequence: Whether to append the padded sequence number

    Returns:
        New filename; the original filename if no part was produced
    """
    parts = []

    if prefix:
        parts.append(prefix)

    if use_original_name:
        parts.append(f.stem)

    if add_sequence:
        parts.append(seq_format.format(position))

    new_name = "".join(parts)
    if new_name:
        return new_name + f.suffix
    return f.name


def synthesize_names(
    files: Sequence[FileItem],
    prefix: Optional[str] = None,
    use_original_name: bool = False,
    add_sequence: bool = False,
) -> List[str]:
    """
    Build new names for already sorted files

    Args:
        files: Sorted file list
        prefix: Literal text put first
        use_original_name: Whether to include the original stem
        add_sequence: Whether to append the padded sequence number

    Returns:
        New names, same length and order as files
    """
    seq_format = SequenceFormat.for_count(len(files))
    return [
        synthesize_name(f, i, seq_format, prefix, use_original_name, add_sequence)
        for i, f in enumerate(files, start=1)
    ]


def build_plan(files: Sequence[FileItem], options: RenameOptions) -> RenamePlan:
    """
    Generate rename plan for sorted files

    Args:
        files: Sorted file list
        options: Rename options

    Returns:
        Rename plan
    """
    new_names = synthesize_names(
        files,
        prefix=options.prefix,
        use_original_name=options.use_original_name,
        add_sequence=options.add_sequence,
    )
    return RenamePlan.from_pairs([f.path for f in files], new_names, options)
