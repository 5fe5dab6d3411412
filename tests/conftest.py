import pytest


@pytest.fixture(autouse=True)
def _clean_autofix_env(monkeypatch):
    """Keep developer AUTOFIX_* variables out of the tests."""
    for key in ("AUTOFIX_MAX_PASSES", "AUTOFIX_METRICS", "AUTOFIX_METRICS_DIR",
                "AUTOFIX_LOG_DIR", "AUTOFIX_LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)
