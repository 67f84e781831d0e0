"""
pipeline.py - Rename Pipeline

Runs list -> sort -> synthesize -> validate -> review -> execute and
reports how the run ended as a RunOutcome instead of raising.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Callable, List, Optional
import logging

from .errors import (
    BulkRenameError, DirectoryNotFound, ListingError, NoMatchError,
    PlanRejected, RenameExecutionError,
)
from .exec_rename import RenameResult, execute_rename
from .models_fs import RenameOptions, RenamePlan
from .plan_rename import build_plan
from .safety_checks import validate_plan
from .scan_files import list_files
from .sort_rules import sort_files

logger = logging.getLogger(__name__)

Confirmer = Callable[[RenamePlan], bool]
Reviewer = Callable[[RenamePlan], None]
ProgressCallback = Callable[[int, int, str], None]


class OutcomeKind(Enum):
    """How a run ended"""
    COMPLETED = "completed"     # Every file renamed
    NO_MATCH = "no_match"       # Nothing to do
    PREVIEWED = "previewed"     # Dry run, plan shown only
    CANCELLED = "cancelled"     # Operator declined the plan
    INVALID = "invalid"         # Missing directory or rejected plan, nothing renamed
    FAILED = "failed"           # A rename failed part way through


@dataclass
class RunOutcome:
    """Result of one pipeline run"""
    kind: OutcomeKind
    plan: Optional[RenamePlan] = None
    result: Optional[RenameResult] = None
    errors: List[BulkRenameError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.kind not in (OutcomeKind.INVALID, OutcomeKind.FAILED)

    @property
    def message(self) -> str:
        if self.errors:
            return "\n".join(str(e) for e in self.errors)
        if self.kind == OutcomeKind.COMPLETED and self.result is not None:
            return f"Renamed {self.result.success_count} files"
        if self.kind == OutcomeKind.PREVIEWED:
            return "Preview only, nothing renamed"
        if self.kind == OutcomeKind.CANCELLED:
            return "Cancelled, nothing renamed"
        return self.kind.value


def prepare_plan(options: RenameOptions) -> RenamePlan:
    """
    Build the rename plan without validating it

    Args:
        options: Rename options

    Returns:
        Plan over the sorted matching files (empty if nothing matches)

    Raises:
        DirectoryNotFound: source directory does not exist
        ListingError: source directory could not be read
    """
    files = list_files(options.source_dir, options.file_pattern)
    sorted_files = sort_files(files, by_number=options.sort_by_number)
    return build_plan(sorted_files, options)


def run_bulk_rename(
    options: RenameOptions,
    confirm: Confirmer,
    review: Optional[Reviewer] = None,
    dry_run: bool = False,
    progress_callback: Optional[ProgressCallback] = None,
    log_dir: Optional[Path] = None,
) -> RunOutcome:
    """
    Run the whole rename pipeline

    Nothing is renamed unless the plan passes validation and confirm()
    returns True.

    Args:
        options: Rename options
        confirm: Asked once with the validated plan; False cancels the run
        review: Shows the validated plan before confirmation
        dry_run: Stop after review
        progress_callback: Called after each completed rename
        log_dir: Directory for JSON execution logs

    Returns:
        Run outcome
    """
    try:
        plan = prepare_plan(options)
    except (DirectoryNotFound, ListingError) as e:
        return RunOutcome(OutcomeKind.INVALID, errors=[e])

    if not plan.ops:
        return RunOutcome(
            OutcomeKind.NO_MATCH, plan=plan,
            errors=[NoMatchError(options.source_dir, options.file_pattern)],
        )

    logger.debug(plan.summary())

    try:
        validate_plan(plan)
    except PlanRejected as e:
        return RunOutcome(OutcomeKind.INVALID, plan=plan, errors=list(e.problems))

    if review:
        review(plan)

    if dry_run:
        return RunOutcome(OutcomeKind.PREVIEWED, plan=plan)

    if not confirm(plan):
        return RunOutcome(OutcomeKind.CANCELLED, plan=plan)

    try:
        result = execute_rename(plan, progress_callback=progress_callback, log_dir=log_dir)
    except RenameExecutionError as e:
        return RunOutcome(OutcomeKind.FAILED, plan=plan, result=e.result, errors=[e])

    return RunOutcome(OutcomeKind.COMPLETED, plan=plan, result=result)
