import json

import pytest

from bulk_rename.core import RenameExecutionError, RenamePlan, execute_rename, find_temp_files


def _names(directory):
    return sorted(p.name for p in directory.iterdir())


def test_execute_renames_every_entry(tmp_path, make_files) -> None:
    a, b = make_files("a.txt", "b.txt")
    plan = RenamePlan.from_pairs([a, b], ["1.txt", "2.txt"])

    result = execute_rename(plan)

    assert result.success_count == 2
    assert result.failed is None
    assert _names(tmp_path) == ["1.txt", "2.txt"]
    assert (tmp_path / "1.txt").read_text() == "a.txt"
    assert (tmp_path / "2.txt").read_text() == "b.txt"


def test_execute_handles_case_only_and_identity_renames(tmp_path, make_files) -> None:
    upper, same = make_files("PHOTO.JPG", "same.txt")
    plan = RenamePlan.from_pairs([upper, same], ["photo.JPG", "same.txt"])

    execute_rename(plan)

    assert _names(tmp_path) == ["photo.JPG", "same.txt"]
    assert (tmp_path / "photo.JPG").read_text() == "PHOTO.JPG"


def test_execute_reports_each_step(tmp_path, make_files) -> None:
    paths = make_files("a.txt", "b.txt", "c.txt")
    plan = RenamePlan.from_pairs(paths, ["x.txt", "y.txt", "z.txt"])
    seen = []

    def on_progress(current, total, msg):
        # Earlier steps are already on disk when a step is reported
        seen.append((current, total, msg, (tmp_path / "x.txt").exists()))

    execute_rename(plan, progress_callback=on_progress)

    assert [s[:3] for s in seen] == [
        (1, 3, "a.txt -> x.txt"),
        (2, 3, "b.txt -> y.txt"),
        (3, 3, "c.txt -> z.txt"),
    ]
    assert all(s[3] for s in seen)


def test_failure_stops_remaining_entries(tmp_path, make_files) -> None:
    paths = make_files("1.txt", "2.txt", "3.txt", "4.txt", "5.txt")
    # Third target lives in a directory that does not exist
    plan = RenamePlan.from_pairs(
        paths, ["a.txt", "b.txt", "missing/c.txt", "d.txt", "e.txt"],
    )

    with pytest.raises(RenameExecutionError) as excinfo:
        execute_rename(plan)

    err = excinfo.value
    assert err.index == 3
    assert err.src == paths[2]
    assert isinstance(err.cause, OSError)
    assert "#3" in str(err)
    assert err.result.success_count == 2
    assert err.result.failed.src == paths[2]
    assert [op.src for op in err.result.not_attempted] == paths[3:]
    # Completed renames stay, the failed entry is back under its own name
    assert _names(tmp_path) == ["3.txt", "4.txt", "5.txt", "a.txt", "b.txt"]
    assert find_temp_files(tmp_path) == []


def test_target_created_after_planning_is_not_overwritten(tmp_path, make_files) -> None:
    (a,) = make_files("a.txt")
    plan = RenamePlan.from_pairs([a], ["b.txt"])
    (tmp_path / "b.txt").write_text("other")

    with pytest.raises(RenameExecutionError) as excinfo:
        execute_rename(plan)

    assert isinstance(excinfo.value.cause, FileExistsError)
    assert (tmp_path / "b.txt").read_text() == "other"
    assert (tmp_path / "a.txt").read_text() == "a.txt"


def test_missing_source_fails_first_phase(tmp_path, make_files) -> None:
    a, b = make_files("a.txt", "b.txt")
    plan = RenamePlan.from_pairs([a, b], ["x.txt", "y.txt"])
    a.unlink()

    with pytest.raises(RenameExecutionError) as excinfo:
        execute_rename(plan)

    assert excinfo.value.index == 1
    assert excinfo.value.result.success_count == 0
    assert _names(tmp_path) == ["b.txt"]


def test_empty_plan_does_nothing(tmp_path) -> None:
    result = execute_rename(RenamePlan(), log_dir=tmp_path / "logs")

    assert result.success_count == 0
    assert not (tmp_path / "logs").exists()


def test_execution_logs(tmp_path, make_files) -> None:
    a, b = make_files("a.txt", "b.txt")
    log_dir = tmp_path / "logs"
    plan = RenamePlan.from_pairs([a, b], ["x.txt", "y.txt"])

    execute_rename(plan, log_dir=log_dir)

    plan_log = json.loads(next(log_dir.glob("rename_plan_*.json")).read_text(encoding="utf-8"))
    result_log = json.loads(next(log_dir.glob("rename_result_*.json")).read_text(encoding="utf-8"))
    assert plan_log["total_ops"] == 2
    assert plan_log["operations"][0] == {"src": str(a), "dst": str(tmp_path / "x.txt")}
    assert result_log["success_count"] == 2
    assert result_log["failed"] is None


def test_failure_is_logged(tmp_path, make_files) -> None:
    (a,) = make_files("a.txt")
    log_dir = tmp_path / "logs"
    plan = RenamePlan.from_pairs([a], ["missing/x.txt"])

    with pytest.raises(RenameExecutionError):
        execute_rename(plan, log_dir=log_dir)

    result_log = json.loads(next(log_dir.glob("rename_result_*.json")).read_text(encoding="utf-8"))
    assert result_log["success_count"] == 0
    assert result_log["failed"]["src"] == str(a)
    assert result_log["failed"]["error"]
