# Test configuration
import sys
from pathlib import Path

import pytest

REPO_ROOT = Path(__file__).parent.parent

# Add repo root to path so tests can import modules
sys.path.insert(0, str(REPO_ROOT))


class RecordingLogger:
    """Diagnostic logger double that keeps records in memory."""

    def __init__(self):
        self.records: list[tuple[str, str, dict]] = []

    def _record(self, level, event, **kw):
        self.records.append((level, event, kw))

    def info(self, event, **kw):
        self._record("info", event, **kw)

    def warning(self, event, **kw):
        self._record("warning", event, **kw)

    def error(self, event, **kw):
        self._record("error", event, **kw)

    def levels(self) -> list[str]:
        return [level for level, _, _ in self.records]

    def events(self, level: str | None = None) -> list[str]:
        return [event for lvl, event, _ in self.records if level is None or lvl == level]


@pytest.fixture
def recording_logger():
    return RecordingLogger()
