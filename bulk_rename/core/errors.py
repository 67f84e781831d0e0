"""
errors.py - Error Taxonomy

Contains:
- DirectoryNotFound / ListingError / NoMatchError: file listing outcomes
- PlanProblem subclasses: problems found while validating a rename plan
- PlanRejected: aggregate of every problem found in one plan
- LengthMismatchFault: internal invariant violation
- RenameExecutionError: a single rename failed during execution
"""

from pathlib import Path
from typing import List, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .exec_rename import RenameResult


class BulkRenameError(Exception):
    """Base class of all bulk rename errors"""


class DirectoryNotFound(BulkRenameError):
    """Source directory does not exist"""

    def __init__(self, directory: Path):
        self.directory = Path(directory)
        super().__init__(f"Directory does not exist: {self.directory}")


class ListingError(BulkRenameError):
    """Source directory could not be read"""

    def __init__(self, directory: Path, cause: OSError):
        self.directory = Path(directory)
        self.cause = cause
        super().__init__(f"Cannot list {self.directory}: {cause}")


class NoMatchError(BulkRenameError):
    """Pattern matched no files (informational, not fatal)"""

    def __init__(self, directory: Path, pattern: str):
        self.directory = Path(directory)
        self.pattern = pattern
        super().__init__(f"No files matching '{pattern}' in {self.directory}")


class LengthMismatchFault(BulkRenameError):
    """Parallel sequences of a plan have different lengths"""

    def __init__(self, old_count: int, new_count: int):
        self.old_count = old_count
        self.new_count = new_count
        super().__init__(
            f"Internal error: {old_count} source files but {new_count} new names"
        )


class PlanProblem(BulkRenameError):
    """A problem found while validating a rename plan"""


class ConflictError(PlanProblem):
    """Several source files would be renamed to the same name"""

    def __init__(self, name: str, sources: List[Path]):
        self.name = name
        self.sources = list(sources)
        listed = ", ".join(str(s) for s in self.sources)
        super().__init__(f"Duplicate new name '{name}' for: {listed}")


class TargetExistsError(PlanProblem):
    """Target path already exists and is not the source itself"""

    def __init__(self, target: Path, source: Path):
        self.target = Path(target)
        self.source = Path(source)
        super().__init__(f"Target already exists: {self.target} (renaming {self.source})")


class InvalidNameError(PlanProblem):
    """New name is not a valid filename"""

    def __init__(self, name: str, source: Path, reason: str):
        self.name = name
        self.source = Path(source)
        self.reason = reason
        super().__init__(f"Invalid new name '{name}' for {self.source}: {reason}")


class PlanRejected(BulkRenameError):
    """Plan failed validation; carries every problem found"""

    def __init__(self, problems: List[PlanProblem]):
        self.problems = list(problems)
        lines = [f"Rename plan rejected ({len(self.problems)} problems):"]
        lines.extend(f"  - {p}" for p in self.problems)
        super().__init__("\n".join(lines))


class RenameExecutionError(BulkRenameError):
    """A rename failed; the remaining entries were not attempted"""

    def __init__(
        self,
        index: int,
        src: Path,
        dst: Path,
        cause: OSError,
        result: Optional["RenameResult"] = None,
    ):
        self.index = index
        self.src = Path(src)
        self.dst = Path(dst)
        self.cause = cause
        self.result = result
        super().__init__(
            f"Rename #{index} failed: {self.src} -> {self.dst.name}: {cause}"
        )
