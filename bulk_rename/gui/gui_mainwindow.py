"""
gui_mainwindow.py - GUI Main Window

Form for the rename options, a preview table of the plan and a confirmed
execute step
"""

from pathlib import Path
from typing import Optional, List

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QGridLayout,
    QLabel, QLineEdit, QPushButton, QCheckBox, QTableWidget,
    QTableWidgetItem, QTextEdit, QProgressBar, QFileDialog, QMessageBox,
    QHeaderView, QGroupBox
)
from PySide6.QtCore import Slot
from PySide6.QtGui import QColor

from ..core import RenameOptions, RenamePlan, RenameResult, PlanProblem
from .gui_workers import PlanWorker, RenameWorker


class RenameWidget(QWidget):
    """Bulk rename form and preview"""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.plan: Optional[RenamePlan] = None
        self.problems: List[PlanProblem] = []
        self.plan_worker: Optional[PlanWorker] = None
        self.rename_worker: Optional[RenameWorker] = None

        self._init_ui()

    def _init_ui(self):
        layout = QVBoxLayout(self)

        # Source settings group
        source_group = QGroupBox("Files")
        source_layout = QGridLayout(source_group)

        source_layout.addWidget(QLabel("Directory:"), 0, 0)
        self.dir_edit = QLineEdit()
        self.dir_edit.setPlaceholderText("Select target directory...")
        source_layout.addWidget(self.dir_edit, 0, 1)
        self.browse_btn = QPushButton("Browse...")
        self.browse_btn.clicked.connect(self._browse_directory)
        source_layout.addWidget(self.browse_btn, 0, 2)

        source_layout.addWidget(QLabel("Pattern:"), 1, 0)
        self.pattern_edit = QLineEdit("*")
        self.pattern_edit.setPlaceholderText("e.g., *.jpg")
        source_layout.addWidget(self.pattern_edit, 1, 1, 1, 2)

        self.sortnum_check = QCheckBox("Sort by number in file name")
        source_layout.addWidget(self.sortnum_check, 2, 0, 1, 3)

        layout.addWidget(source_group)

        # Naming settings group
        naming_group = QGroupBox("New Names")
        naming_layout = QGridLayout(naming_group)

        naming_layout.addWidget(QLabel("Prefix:"), 0, 0)
        self.prefix_edit = QLineEdit()
        self.prefix_edit.setPlaceholderText("Leave empty for no prefix")
        naming_layout.addWidget(self.prefix_edit, 0, 1)

        options_layout = QHBoxLayout()
        self.origin_check = QCheckBox("Keep original name")
        self.suffix_check = QCheckBox("Add sequence number")
        options_layout.addWidget(self.origin_check)
        options_layout.addWidget(self.suffix_check)
        options_layout.addStretch()
        naming_layout.addLayout(options_layout, 1, 0, 1, 2)

        self.preview_btn = QPushButton("Preview")
        self.preview_btn.clicked.connect(self._do_preview)
        naming_layout.addWidget(self.preview_btn, 2, 0, 1, 2)

        layout.addWidget(naming_group)

        # Preview table
        self.table = QTableWidget()
        self.table.setColumnCount(3)
        self.table.setHorizontalHeaderLabels(["Original Name", "New Name", "Status"])
        self.table.horizontalHeader().setSectionResizeMode(0, QHeaderView.ResizeMode.Stretch)
        self.table.horizontalHeader().setSectionResizeMode(1, QHeaderView.ResizeMode.Stretch)
        self.table.horizontalHeader().setSectionResizeMode(2, QHeaderView.ResizeMode.ResizeToContents)
        self.table.setSelectionBehavior(QTableWidget.SelectionBehavior.SelectRows)
        layout.addWidget(self.table, 1)

        # Validation problems
        self.problems_edit = QTextEdit()
        self.problems_edit.setReadOnly(True)
        self.problems_edit.setMaximumHeight(100)
        self.problems_edit.setVisible(False)
        layout.addWidget(self.problems_edit)

        # Progress and execution
        bottom_layout = QHBoxLayout()

        self.progress_bar = QProgressBar()
        self.progress_bar.setVisible(False)
        bottom_layout.addWidget(self.progress_bar, 1)

        self.execute_btn = QPushButton("Execute Rename")
        self.execute_btn.clicked.connect(self._do_execute)
        self.execute_btn.setEnabled(False)
        self.execute_btn.setStyleSheet("QPushButton { background-color: #4CAF50; color: white; font-weight: bold; padding: 8px 16px; }")
        bottom_layout.addWidget(self.execute_btn)

        layout.addLayout(bottom_layout)

        # Status label
        self.status_label = QLabel("")
        layout.addWidget(self.status_label)

    def _browse_directory(self):
        """Browse and select directory"""
        directory = QFileDialog.getExistingDirectory(self, "Select Directory")
        if directory:
            self.dir_edit.setText(directory)

    def _options(self) -> RenameOptions:
        return RenameOptions(
            source_dir=Path(self.dir_edit.text().strip()),
            file_pattern=self.pattern_edit.text().strip() or "*",
            sort_by_number=self.sortnum_check.isChecked(),
            prefix=self.prefix_edit.text() or None,
            use_original_name=self.origin_check.isChecked(),
            add_sequence=self.suffix_check.isChecked(),
        )

    def _do_preview(self):
        """Generate preview"""
        if not self.dir_edit.text().strip():
            QMessageBox.warning(self, "Warning", "Please select a directory first")
            return

        self.preview_btn.setEnabled(False)
        self.preview_btn.setText("Generating...")
        self.execute_btn.setEnabled(False)

        self.plan_worker = PlanWorker(self._options())
        self.plan_worker.progress.connect(self.status_label.setText)
        self.plan_worker.finished.connect(self._on_plan_finished)
        self.plan_worker.error.connect(self._on_plan_error)
        self.plan_worker.start()

    @Slot(object, object)
    def _on_plan_finished(self, plan: RenamePlan, problems: List[PlanProblem]):
        """Plan generation complete"""
        self.plan = plan
        self.problems = problems
        self.preview_btn.setEnabled(True)
        self.preview_btn.setText("Preview")

        self._update_table_preview()

        if problems:
            self.problems_edit.setPlainText("\n".join(str(p) for p in problems))
            self.problems_edit.setVisible(True)
            self.status_label.setText(f"{len(problems)} problems found, nothing can be renamed")
        elif plan.ops:
            self.problems_edit.setVisible(False)
            self.execute_btn.setEnabled(True)
            self.status_label.setText(f"Will perform {plan.total_count} rename operations")
        else:
            self.problems_edit.setVisible(False)
            self.status_label.setText("No matching files found")

    @Slot(str)
    def _on_plan_error(self, error: str):
        """Plan generation error"""
        self.preview_btn.setEnabled(True)
        self.preview_btn.setText("Preview")
        QMessageBox.critical(self, "Error", f"Failed to generate preview: {error}")

    def _update_table_preview(self):
        """Update table to display preview results"""
        if not self.plan:
            self.table.setRowCount(0)
            return

        # Sources with at least one problem
        flagged = set()
        for problem in self.problems:
            for attr in ("source", "sources"):
                value = getattr(problem, attr, None)
                if value is None:
                    continue
                flagged.update(str(s) for s in (value if isinstance(value, list) else [value]))

        self.table.setRowCount(len(self.plan.ops))
        for i, op in enumerate(self.plan.ops):
            self.table.setItem(i, 0, QTableWidgetItem(op.src.name))
            new_name_item = QTableWidgetItem(op.new_name)

            if str(op.src) in flagged:
                new_name_item.setBackground(QColor(255, 220, 220))
                status_item = QTableWidgetItem("Conflict")
                status_item.setForeground(QColor(200, 0, 0))
            elif op.is_same:
                status_item = QTableWidgetItem("No Change")
                status_item.setForeground(QColor(150, 150, 150))
            elif op.is_case_only_change:
                status_item = QTableWidgetItem("Case Change")
                status_item.setForeground(QColor(0, 100, 200))
            else:
                status_item = QTableWidgetItem("Will Rename")
                status_item.setForeground(QColor(0, 150, 0))

            self.table.setItem(i, 1, new_name_item)
            self.table.setItem(i, 2, status_item)

    def _do_execute(self):
        """Execute rename"""
        if not self.plan or not self.plan.ops or self.problems:
            return

        # Confirm
        reply = QMessageBox.question(
            self, "Confirm",
            f"Are you sure you want to execute {self.plan.total_count} rename operations?\n\nThis action cannot be undone!",
            QMessageBox.StandardButton.Yes | QMessageBox.StandardButton.No
        )
        if reply != QMessageBox.StandardButton.Yes:
            self.status_label.setText("Cancelled")
            return

        self.execute_btn.setEnabled(False)
        self.execute_btn.setText("Executing...")
        self.preview_btn.setEnabled(False)
        self.progress_bar.setVisible(True)
        self.progress_bar.setRange(0, self.plan.total_count)
        self.progress_bar.setValue(0)

        # Start execution thread
        self.rename_worker = RenameWorker(self.plan)
        self.rename_worker.progress.connect(self._on_rename_progress)
        self.rename_worker.finished.connect(self._on_rename_finished)
        self.rename_worker.error.connect(self._on_rename_error)
        self.rename_worker.start()

    @Slot(int, int, str)
    def _on_rename_progress(self, current: int, total: int, msg: str):
        """Execution progress update"""
        self.progress_bar.setValue(current)
        self.status_label.setText(msg)

    def _reset_after_execute(self):
        self.execute_btn.setEnabled(False)
        self.execute_btn.setText("Execute Rename")
        self.preview_btn.setEnabled(True)
        self.progress_bar.setVisible(False)
        self.plan = None
        self.problems = []
        self.table.setRowCount(0)

    @Slot(object)
    def _on_rename_finished(self, result: RenameResult):
        """Execution complete"""
        self._reset_after_execute()
        QMessageBox.information(self, "Complete", f"Rename complete!\n\nSuccess: {result.success_count}")
        self.status_label.setText("Complete")

    @Slot(str, object)
    def _on_rename_error(self, error: str, result: Optional[RenameResult]):
        """Execution error"""
        self._reset_after_execute()
        msg = f"Execution failed: {error}"
        if result is not None:
            msg += f"\n\n{result.summary()}"
        QMessageBox.critical(self, "Error", msg)
        self.status_label.setText("Failed")


class MainWindow(QMainWindow):
    """Main window"""

    def __init__(self):
        super().__init__()
        self.setWindowTitle("Bulk Rename Tool")
        self.setMinimumSize(800, 600)

        self.rename_widget = RenameWidget()
        self.setCentralWidget(self.rename_widget)

        # Status bar
        self.statusBar().showMessage("Ready")
