import logging

import pytest

from cmdtable.config import get_settings
from cmdtable.dispatcher import get_dispatcher

_ENV_KEYS = (
    "CMDTABLE_ENV",
    "LOG_LEVEL",
    "CMDTABLE_SEPARATORS",
    "CMDTABLE_PROMPT",
    "CMDTABLE_MAX_LINE_LENGTH",
    "CMDTABLE_OUTPUT_PREFIX",
)


class RecordingHooks:
    """Output hooks that remember every call instead of printing."""

    def __init__(self) -> None:
        self.emitted: list[str] = []
        self.unknown: list[tuple[str, str]] = []

    def emit(self, message: str) -> None:
        self.emitted.append(message)

    def report_unknown(self, line: str, token: str) -> None:
        self.unknown.append((line, token))


@pytest.fixture(autouse=True)
def test_env(monkeypatch: pytest.MonkeyPatch):
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    get_settings.cache_clear()
    get_dispatcher.cache_clear()
    yield
    get_settings.cache_clear()
    get_dispatcher.cache_clear()
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)


@pytest.fixture
def hooks() -> RecordingHooks:
    return RecordingHooks()
