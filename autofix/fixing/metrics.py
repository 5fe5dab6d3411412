"""
Fix metrics — tracks multi-pass fix runs in a JSONL log file.
"""

from __future__ import annotations

import json
import logging
import os
from datetime import datetime, timezone

logger = logging.getLogger(__name__)

_METRICS_DIR = ".autofix/metrics"
_METRICS_FILE = "fix_metrics.jsonl"


def _metrics_path(project_root: str | None = None,
                  metrics_dir: str | None = None) -> str:
    """Return the absolute path to the metrics file."""
    base = project_root or os.getcwd()
    return os.path.join(base, metrics_dir or _METRICS_DIR, _METRICS_FILE)


def log_fix_metric(data: dict, project_root: str | None = None,
                   metrics_dir: str | None = None) -> None:
    """Append a single fix-run entry to the JSONL log.

    Parameters
    ----------
    data:
        Metric fields to log (passes, applied, rejected, fixed, etc.).
    project_root:
        Optional project root directory. Defaults to CWD.
    metrics_dir:
        Optional directory relative to *project_root*.
    """
    path = _metrics_path(project_root, metrics_dir)

    entry = {"timestamp": datetime.now(timezone.utc).isoformat()}
    entry.update(data)

    try:
        os.makedirs(os.path.dirname(path), exist_ok=True)
        with open(path, "a", encoding="utf-8") as f:
            f.write(json.dumps(entry) + "\n")
    except OSError as exc:
        logger.warning("[Metrics] Failed to write metrics: %s", exc)


def read_fix_stats(
    last_n: int = 50,
    project_root: str | None = None,
    metrics_dir: str | None = None,
) -> dict:
    """Compute rolling statistics from the metrics log.

    Returns
    -------
    dict
        ``total_runs``, ``avg_passes``, ``fixed_rate`` (percent),
        ``avg_applied`` and ``avg_rejected``.
    """
    path = _metrics_path(project_root, metrics_dir)

    entries: list[dict] = []
    if os.path.isfile(path):
        try:
            with open(path, "r", encoding="utf-8") as f:
                for line in f:
                    line = line.strip()
                    if not line:
                        continue
                    try:
                        entry = json.loads(line)
                    except json.JSONDecodeError:
                        continue
                    if isinstance(entry, dict):
                        entries.append(entry)
        except OSError as exc:
            logger.warning("[Metrics] Failed to read metrics: %s", exc)

    entries = entries[-last_n:]

    if not entries:
        return {
            "total_runs": 0,
            "avg_passes": 0.0,
            "fixed_rate": 0.0,
            "avg_applied": 0.0,
            "avg_rejected": 0.0,
        }

    total = len(entries)

    def _avg(key: str) -> float:
        values = [e[key] for e in entries if isinstance(e.get(key), (int, float))]
        return sum(values) / len(values) if values else 0.0

    return {
        "total_runs": total,
        "avg_passes": _avg("passes"),
        "fixed_rate": sum(1 for e in entries if e.get("fixed")) / total * 100,
        "avg_applied": _avg("applied"),
        "avg_rejected": _avg("rejected"),
    }
