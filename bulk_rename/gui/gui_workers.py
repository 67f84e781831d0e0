"""
gui_workers.py - GUI Worker Threads

Provides background execution of planning and renaming to avoid blocking UI
"""

from typing import Optional

from PySide6.QtCore import QThread, Signal, QObject

from ..core import (
    RenameOptions, RenamePlan, RenameExecutionError,
    prepare_plan, find_plan_problems, execute_rename,
)


class PlanWorker(QThread):
    """Rename plan generation worker thread"""

    # Signals
    progress = Signal(str)              # Progress message
    finished = Signal(object, object)   # RenamePlan, list of PlanProblem
    error = Signal(str)                 # Error message

    def __init__(self, options: RenameOptions, parent: Optional[QObject] = None):
        super().__init__(parent)
        self.options = options

    def run(self):
        try:
            self.progress.emit("Generating rename plan...")
            plan = prepare_plan(self.options)
            problems = find_plan_problems(
                plan.old_paths,
                plan.new_names,
                case_insensitive=self.options.case_insensitive_detect,
            )
            self.finished.emit(plan, problems)
        except Exception as e:
            self.error.emit(str(e))


class RenameWorker(QThread):
    """Rename execution worker thread"""

    # Signals
    progress = Signal(int, int, str)    # current, total, message
    finished = Signal(object)           # RenameResult
    error = Signal(str, object)         # Error message, partial RenameResult

    def __init__(self, plan: RenamePlan, parent: Optional[QObject] = None):
        super().__init__(parent)
        self.plan = plan

    def run(self):
        def progress_callback(current: int, total: int, msg: str):
            self.progress.emit(current, total, msg)

        try:
            result = execute_rename(self.plan, progress_callback=progress_callback)
            self.finished.emit(result)
        except RenameExecutionError as e:
            self.error.emit(str(e), e.result)
        except Exception as e:
            self.error.emit(str(e), None)
