"""Tests for fix metrics logging and stats."""

import json
import os

import pytest

from autofix.fixing.metrics import log_fix_metric, read_fix_stats


@pytest.fixture
def tmp_project(tmp_path):
    return str(tmp_path)


def _metrics_file(project_root):
    return os.path.join(project_root, ".autofix", "metrics", "fix_metrics.jsonl")


class TestLogFixMetric:
    def test_creates_file_and_writes_entry(self, tmp_project):
        log_fix_metric({"passes": 2, "fixed": True}, project_root=tmp_project)

        path = _metrics_file(tmp_project)
        assert os.path.isfile(path)

        with open(path) as f:
            lines = f.readlines()
        assert len(lines) == 1

        entry = json.loads(lines[0])
        assert entry["passes"] == 2
        assert entry["fixed"] is True
        assert "timestamp" in entry

    def test_appends_multiple_entries(self, tmp_project):
        for passes in (1, 2, 3):
            log_fix_metric({"passes": passes}, project_root=tmp_project)

        with open(_metrics_file(tmp_project)) as f:
            assert len(f.readlines()) == 3

    def test_custom_metrics_dir(self, tmp_project):
        log_fix_metric({"passes": 1}, project_root=tmp_project, metrics_dir="stats")
        assert os.path.isfile(os.path.join(tmp_project, "stats", "fix_metrics.jsonl"))

    def test_write_failure_is_logged_not_raised(self, tmp_path, caplog):
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")

        log_fix_metric({"passes": 1}, project_root=str(blocker))

        assert "Failed to write metrics" in caplog.text


class TestReadFixStats:
    def test_empty_stats(self, tmp_project):
        stats = read_fix_stats(project_root=tmp_project)

        assert stats == {
            "total_runs": 0,
            "avg_passes": 0.0,
            "fixed_rate": 0.0,
            "avg_applied": 0.0,
            "avg_rejected": 0.0,
        }

    def test_stats_from_entries(self, tmp_project):
        entries = [
            {"passes": 1, "applied": 0, "rejected": 0, "fixed": False},
            {"passes": 3, "applied": 4, "rejected": 1, "fixed": True},
            {"passes": 2, "applied": 2, "rejected": 1, "fixed": True},
            {"passes": 2, "applied": 2, "rejected": 0, "fixed": True},
        ]
        for entry in entries:
            log_fix_metric(entry, project_root=tmp_project)

        stats = read_fix_stats(project_root=tmp_project)

        assert stats["total_runs"] == 4
        assert stats["avg_passes"] == pytest.approx(2.0)
        assert stats["fixed_rate"] == pytest.approx(75.0)
        assert stats["avg_applied"] == pytest.approx(2.0)
        assert stats["avg_rejected"] == pytest.approx(0.5)

    def test_last_n_limits_window(self, tmp_project):
        for passes in (10, 1, 1):
            log_fix_metric({"passes": passes}, project_root=tmp_project)

        stats = read_fix_stats(last_n=2, project_root=tmp_project)

        assert stats["total_runs"] == 2
        assert stats["avg_passes"] == pytest.approx(1.0)

    def test_skips_malformed_lines(self, tmp_project):
        log_fix_metric({"passes": 2}, project_root=tmp_project)
        with open(_metrics_file(tmp_project), "a") as f:
            f.write("{not json\n\n[1, 2]\n")

        stats = read_fix_stats(project_root=tmp_project)

        assert stats["total_runs"] == 1
        assert stats["avg_passes"] == pytest.approx(2.0)
