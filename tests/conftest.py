from datetime import datetime, timezone
import sys
from pathlib import Path

import pytest

# Ensure `import errata` works when running `pytest` without needing PYTHONPATH hacks.
PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(PROJECT_ROOT))


@pytest.fixture(autouse=True)
def _freeze_report_timestamp(monkeypatch) -> None:
    fixed_now = datetime(2026, 2, 8, 0, 0, 0, tzinfo=timezone.utc)
    monkeypatch.setattr("errata.core.report.builder._utcnow", lambda: fixed_now)


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch):
    from errata.config import get_settings

    for name in ("ERRATA_DEBUG", "ERRATA_STRICT", "ERRATA_LOG_VERBOSITY", "ERRATA_CONFIG", "ERRATA_DEFAULT_LOCALE"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
