from pathlib import Path
from unittest.mock import Mock

import pytest

from bulk_rename.core import (
    ConflictError, DirectoryNotFound, ListingError, NoMatchError, OutcomeKind,
    RenameExecutionError, RenameOptions, RunOutcome, TargetExistsError,
    prepare_plan, run_bulk_rename,
)
from bulk_rename.core import exec_rename


def _names(directory):
    return sorted(p.name for p in directory.iterdir())


def _options(tmp_path, **kwargs):
    kwargs.setdefault("file_pattern", "*.txt")
    kwargs.setdefault("case_insensitive_detect", False)
    return RenameOptions(source_dir=tmp_path, **kwargs)


def test_prepare_plan_sorts_before_numbering(tmp_path, make_files) -> None:
    make_files("page10.txt", "page2.txt", "page1.txt")

    plan = prepare_plan(_options(tmp_path, sort_by_number=True, prefix="p", add_sequence=True))

    assert [p.name for p in plan.old_paths] == ["page1.txt", "page2.txt", "page10.txt"]
    assert plan.new_names == ["p1.txt", "p2.txt", "p3.txt"]


def test_completed_run(tmp_path, make_files) -> None:
    make_files("b.txt", "a.txt", "c.jpg")
    confirm = Mock(return_value=True)
    review = Mock()

    outcome = run_bulk_rename(
        _options(tmp_path, prefix="v_", add_sequence=True), confirm=confirm, review=review,
    )

    assert outcome.kind == OutcomeKind.COMPLETED
    assert outcome.ok
    assert outcome.result.success_count == 2
    assert _names(tmp_path) == ["c.jpg", "v_1.txt", "v_2.txt"]
    assert (tmp_path / "v_1.txt").read_text() == "a.txt"
    review.assert_called_once_with(outcome.plan)
    confirm.assert_called_once_with(outcome.plan)


def test_cancelled_run_changes_nothing(tmp_path, make_files) -> None:
    make_files("a.txt", "b.txt")

    outcome = run_bulk_rename(_options(tmp_path, prefix="x", add_sequence=True), confirm=lambda plan: False)

    assert outcome.kind == OutcomeKind.CANCELLED
    assert outcome.ok
    assert _names(tmp_path) == ["a.txt", "b.txt"]


def test_dry_run_reviews_without_confirming(tmp_path, make_files) -> None:
    make_files("a.txt")
    confirm = Mock(return_value=True)
    review = Mock()

    outcome = run_bulk_rename(
        _options(tmp_path, prefix="x"), confirm=confirm, review=review, dry_run=True,
    )

    assert outcome.kind == OutcomeKind.PREVIEWED
    review.assert_called_once()
    confirm.assert_not_called()
    assert _names(tmp_path) == ["a.txt"]


def test_no_matching_files(tmp_path, make_files) -> None:
    make_files("a.jpg")
    confirm = Mock(return_value=True)

    outcome = run_bulk_rename(_options(tmp_path), confirm=confirm)

    assert outcome.kind == OutcomeKind.NO_MATCH
    assert outcome.ok
    assert isinstance(outcome.errors[0], NoMatchError)
    confirm.assert_not_called()
    assert _names(tmp_path) == ["a.jpg"]


def test_missing_directory(tmp_path) -> None:
    outcome = run_bulk_rename(_options(tmp_path / "nope"), confirm=lambda plan: True)

    assert outcome.kind == OutcomeKind.INVALID
    assert not outcome.ok
    assert isinstance(outcome.errors[0], DirectoryNotFound)


def test_rejected_plan_is_never_confirmed(tmp_path, make_files) -> None:
    make_files("a.txt", "b.txt", "v_.txt")
    confirm = Mock(return_value=True)
    review = Mock()

    # Prefix alone gives every file the same name
    outcome = run_bulk_rename(_options(tmp_path, prefix="v_"), confirm=confirm, review=review)

    assert outcome.kind == OutcomeKind.INVALID
    kinds = {type(e) for e in outcome.errors}
    assert kinds == {ConflictError, TargetExistsError}
    review.assert_not_called()
    confirm.assert_not_called()
    assert _names(tmp_path) == ["a.txt", "b.txt", "v_.txt"]


def test_identity_configuration_renames_to_same_names(tmp_path, make_files) -> None:
    make_files("a.txt", "b.txt")

    outcome = run_bulk_rename(_options(tmp_path), confirm=lambda plan: True)

    assert outcome.kind == OutcomeKind.COMPLETED
    assert outcome.plan.new_names == ["a.txt", "b.txt"]
    assert _names(tmp_path) == ["a.txt", "b.txt"]


def test_failed_run_keeps_partial_progress(tmp_path, make_files, monkeypatch) -> None:
    make_files("1.txt", "2.txt", "3.txt", "4.txt", "5.txt")
    real_rename_one = exec_rename.rename_one

    def flaky_rename_one(op):
        if op.src.name == "3.txt":
            raise PermissionError(13, "Permission denied", str(op.src))
        real_rename_one(op)

    monkeypatch.setattr(exec_rename, "rename_one", flaky_rename_one)
    progress = []

    outcome = run_bulk_rename(
        _options(tmp_path, prefix="n", add_sequence=True),
        confirm=lambda plan: True,
        progress_callback=lambda current, total, msg: progress.append(current),
    )

    assert outcome.kind == OutcomeKind.FAILED
    assert not outcome.ok
    error = outcome.errors[0]
    assert isinstance(error, RenameExecutionError)
    assert error.index == 3
    assert "3.txt" in outcome.message
    assert outcome.result.success_count == 2
    assert progress == [1, 2]
    assert _names(tmp_path) == ["3.txt", "4.txt", "5.txt", "n1.txt", "n2.txt"]


@pytest.mark.parametrize("kind", list(OutcomeKind))
def test_every_outcome_has_a_message(kind) -> None:
    assert RunOutcome(kind).message


def test_unreadable_directory_is_invalid(tmp_path, make_files, monkeypatch) -> None:
    make_files("a.txt")
    confirm = Mock(return_value=True)

    def denied(self):
        raise PermissionError(13, "Permission denied", str(self))

    monkeypatch.setattr(Path, "iterdir", denied)

    outcome = run_bulk_rename(_options(tmp_path, prefix="n"), confirm=confirm)

    assert outcome.kind == OutcomeKind.INVALID
    assert isinstance(outcome.errors[0], ListingError)
    assert outcome.plan is None
    confirm.assert_not_called()
