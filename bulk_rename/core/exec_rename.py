"""
exec_rename.py - Rename Execution Module

Responsibilities:
- Two-phase execution per entry (rename to temporary name, then to final name)
- Stop at the first failure; entries already renamed stay renamed
- JSON execution logs
"""

from pathlib import Path
from typing import List, Optional, Callable
from dataclasses import dataclass, field
from datetime import datetime
import errno
import json
import logging
import os
import uuid

from .errors import RenameExecutionError
from .models_fs import RenamePlan, RenameOp

logger = logging.getLogger(__name__)

TEMP_PREFIX = ".__tmp_rename__"


@dataclass
class RenameResult:
    """Rename execution result"""
    success: List[RenameOp] = field(default_factory=list)
    failed: Optional[RenameOp] = None
    error: str = ""
    not_attempted: List[RenameOp] = field(default_factory=list)

    @property
    def success_count(self) -> int:
        return len(self.success)

    @property
    def not_attempted_count(self) -> int:
        return len(self.not_attempted)

    def summary(self) -> str:
        """Generate summary"""
        lines = [
            f"Execution Result:",
            f"  - Success: {self.success_count}",
            f"  - Failed: {1 if self.failed else 0}",
            f"  - Not attempted: {self.not_attempted_count}",
        ]
        if self.failed:
            lines.append("Failure Details:")
            lines.append(f"  - {self.failed.src.name} -> {self.failed.new_name}: {self.error}")
        return "\n".join(lines)


def _generate_temp_name(original: Path) -> Path:
    """Generate unused temporary filename next to original"""
    while True:
        temp_path = original.parent / f"{TEMP_PREFIX}{uuid.uuid4().hex}{original.suffix}"
        if not os.path.lexists(temp_path):
            return temp_path


def _is_temp_name(name: str) -> bool:
    """Check if it's a temporary filename"""
    return name.startswith(TEMP_PREFIX)


def rename_one(op: RenameOp) -> None:
    """
    Rename a single file through a temporary name

    Raises:
        OSError: either phase failed. If the second phase failed, the file
            has been moved back to its source name when possible.
    """
    temp_path = _generate_temp_name(op.src)
    os.rename(op.src, temp_path)

    try:
        # The source has moved away, so anything at dst now is another file
        if os.path.lexists(op.dst):
            raise FileExistsError(errno.EEXIST, "Target already exists", str(op.dst))
        os.rename(temp_path, op.dst)
    except OSError:
        try:
            os.rename(temp_path, op.src)
        except OSError as e2:
            logger.error("Could not restore %s from %s: %s", op.src, temp_path.name, e2)
        else:
            logger.warning("Restored %s after failed rename", op.src.name)
        raise


def execute_rename(
    plan: RenamePlan,
    progress_callback: Optional[Callable[[int, int, str], None]] = None,
    log_dir: Optional[Path] = None
) -> RenameResult:
    """
    Execute rename plan sequentially, in plan order

    Args:
        plan: Validated rename plan
        progress_callback: Called after each completed rename (current, total, message)
        log_dir: Log directory (for saving execution logs)

    Returns:
        Execution result

    Raises:
        RenameExecutionError: a rename failed; the error carries the partial result
    """
    result = RenameResult()
    total = plan.total_count

    if total == 0:
        return result

    # Save execution plan log
    if log_dir:
        save_plan_log(plan, log_dir)

    for i, op in enumerate(plan.ops):
        try:
            rename_one(op)
        except OSError as e:
            result.failed = op
            result.error = str(e)
            result.not_attempted = list(plan.ops[i + 1:])
            logger.error("Failed: %s -> %s: %s", op.src, op.new_name, e)
            if log_dir:
                save_result_log(result, log_dir)
            raise RenameExecutionError(
                i + 1, op.src, op.dst, e,
                result=result,
            ) from e

        result.success.append(op)
        message = f"{op.src.name} -> {op.new_name}"
        logger.debug("Renamed %s -> %s", op.src, op.dst)
        if progress_callback:
            progress_callback(i + 1, total, message)

    # Save execution result log
    if log_dir:
        save_result_log(result, log_dir)

    return result


def _timestamp() -> str:
    return datetime.now().strftime("%Y%m%d_%H%M%S_%f")


def save_plan_log(plan: RenamePlan, log_dir: Path) -> Path:
    """Save execution plan log"""
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)

    timestamp = _timestamp()
    log_file = log_dir / f"rename_plan_{timestamp}.json"

    data = {
        "timestamp": timestamp,
        "total_ops": plan.total_count,
        "operations": [
            {"src": str(op.src), "dst": str(op.dst)}
            for op in plan.ops
        ],
    }

    with open(log_file, 'w', encoding='utf-8') as f:
        json.dump(data, f, ensure_ascii=False, indent=2)

    logger.debug("Plan log written to %s", log_file)
    return log_file


def save_result_log(result: RenameResult, log_dir: Path) -> Path:
    """Save execution result log"""
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)

    timestamp = _timestamp()
    log_file = log_dir / f"rename_result_{timestamp}.json"

    data = {
        "timestamp": timestamp,
        "success_count": result.success_count,
        "not_attempted_count": result.not_attempted_count,
        "success": [
            {"src": str(op.src), "dst": str(op.dst)}
            for op in result.success
        ],
        "failed": None if result.failed is None else {
            "src": str(result.failed.src),
            "dst": str(result.failed.dst),
            "error": result.error,
        },
        "not_attempted": [
            {"src": str(op.src), "dst": str(op.dst)}
            for op in result.not_attempted
        ],
    }

    with open(log_file, 'w', encoding='utf-8') as f:
        json.dump(data, f, ensure_ascii=False, indent=2)

    logger.debug("Result log written to %s", log_file)
    return log_file


def find_temp_files(directory: Path) -> List[Path]:
    """
    List temporary files left behind by an interrupted run

    Args:
        directory: Directory

    Returns:
        Temporary file paths
    """
    return sorted(
        item for item in Path(directory).iterdir()
        if item.is_file() and _is_temp_name(item.name)
    )
