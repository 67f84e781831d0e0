"""
safety_checks.py - Safety Check Module

Validates a rename plan before any file is touched. Every problem is
collected so they can be reported together.
"""

from pathlib import Path
from typing import Dict, List, Optional, Sequence
import logging
import os

from .errors import (
    ConflictError, InvalidNameError, LengthMismatchFault,
    PlanProblem, PlanRejected, TargetExistsError,
)
from .models_fs import RenamePlan, is_case_insensitive_fs, normalize_for_comparison
from .text_match import is_valid_filename

logger = logging.getLogger(__name__)


def find_duplicates(
    old_paths: Sequence[Path],
    new_names: Sequence[str],
    case_insensitive: bool = False,
) -> List[ConflictError]:
    """
    Find new names shared by several source files

    Returns:
        One ConflictError per colliding name, in plan order
    """
    groups: Dict[str, List[int]] = {}
    for i, name in enumerate(new_names):
        groups.setdefault(normalize_for_comparison(name, case_insensitive), []).append(i)

    return [
        ConflictError(new_names[indexes[0]], [old_paths[i] for i in indexes])
        for indexes in groups.values()
        if len(indexes) > 1
    ]


def _is_same_entry(src: Path, dst: Path) -> bool:
    """Whether two paths name the same directory entry"""
    # Hard links share a stat but are separate entries
    if str(src).casefold() != str(dst).casefold():
        return False
    try:
        return os.path.samestat(os.lstat(src), os.lstat(dst))
    except OSError:
        return False


def check_target(src: Path, new_name: str) -> Optional[TargetExistsError]:
    """
    Check that a rename does not clobber an existing file

    A target that is the source file itself is allowed (no-op rename, or
    case-only rename on a case-insensitive filesystem). Links count as
    occupying their name even when broken.

    Args:
        src: Source path
        new_name: New filename in the same directory

    Returns:
        Error if the target is occupied by another file, else None
    """
    dst = src.parent / new_name
    if not os.path.lexists(dst):
        return None
    if _is_same_entry(src, dst):
        return None
    return TargetExistsError(dst, src)


def find_plan_problems(
    old_paths: Sequence[Path],
    new_names: Sequence[str],
    case_insensitive: Optional[bool] = None,
) -> List[PlanProblem]:
    """
    Check a plan for internal and filesystem conflicts (read-only)

    Args:
        old_paths: Source paths
        new_names: New names, index-aligned with old_paths
        case_insensitive: Compare new names ignoring case (defaults to platform)

    Returns:
        Every problem found, empty if the plan is safe

    Raises:
        LengthMismatchFault: sequences are not index-aligned
    """
    if len(old_paths) != len(new_names):
        raise LengthMismatchFault(len(old_paths), len(new_names))

    if case_insensitive is None:
        case_insensitive = is_case_insensitive_fs()

    problems: List[PlanProblem] = []
    problems.extend(find_duplicates(old_paths, new_names, case_insensitive))

    for src, new_name in zip(old_paths, new_names):
        src = Path(src)
        error = check_target(src, new_name)
        if error:
            problems.append(error)

    for src, new_name in zip(old_paths, new_names):
        valid, reason = is_valid_filename(new_name)
        if not valid:
            problems.append(InvalidNameError(new_name, Path(src), reason))

    for problem in problems:
        logger.debug("Plan problem: %s", problem)

    return problems


def validate_plan(plan: RenamePlan) -> None:
    """
    Validate rename plan

    Args:
        plan: Rename plan

    Raises:
        PlanRejected: at least one problem was found
        LengthMismatchFault: plan sequences are not index-aligned
    """
    problems = find_plan_problems(
        plan.old_paths,
        plan.new_names,
        case_insensitive=plan.options.case_insensitive_detect,
    )
    if problems:
        raise PlanRejected(problems)
