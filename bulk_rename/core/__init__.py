"""
core - Bulk Rename Core Module

Provides file listing, sorting, name synthesis, plan validation and execution.
"""

from .errors import (
    BulkRenameError,
    DirectoryNotFound,
    ListingError,
    NoMatchError,
    LengthMismatchFault,
    PlanProblem,
    ConflictError,
    TargetExistsError,
    InvalidNameError,
    PlanRejected,
    RenameExecutionError,
)

from .models_fs import (
    FileItem,
    RenameOp,
    RenamePlan,
    RenameOptions,
    SequenceFormat,
)

from .scan_files import (
    list_files,
)

from .text_match import (
    is_valid_filename,
)

from .sort_rules import (
    NO_NUMBER,
    numeric_sort_key,
    sort_files,
)

from .plan_rename import (
    synthesize_names,
    build_plan,
)

from .safety_checks import (
    find_plan_problems,
    validate_plan,
)

from .exec_rename import (
    execute_rename,
    find_temp_files,
    RenameResult,
)

from .pipeline import (
    OutcomeKind,
    RunOutcome,
    prepare_plan,
    run_bulk_rename,
)

__all__ = [
    # Errors
    "BulkRenameError",
    "DirectoryNotFound",
    "ListingError",
    "NoMatchError",
    "LengthMismatchFault",
    "PlanProblem",
    "ConflictError",
    "TargetExistsError",
    "InvalidNameError",
    "PlanRejected",
    "RenameExecutionError",

    # Data models
    "FileItem",
    "RenameOp",
    "RenamePlan",
    "RenameOptions",
    "SequenceFormat",
    "RenameResult",

    # Listing and sorting
    "list_files",
    "NO_NUMBER",
    "numeric_sort_key",
    "sort_files",

    # Planning
    "is_valid_filename",
    "synthesize_names",
    "build_plan",
    "find_plan_problems",
    "validate_plan",

    # Execution
    "execute_rename",
    "find_temp_files",

    # Pipeline
    "OutcomeKind",
    "RunOutcome",
    "prepare_plan",
    "run_bulk_rename",
]
