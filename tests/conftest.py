import importlib
import pytest

from conversion_tool.engine import ConversionEngine, TextBuffer
from conversion_tool.logic import Field
from conversion_tool.recent_files import PreferenceStore, RecentFilesManager


class RecordingBuffer(TextBuffer):
    """TextBuffer that remembers every write, for counting cascades."""
    def __init__(self, text: str = "") -> None:
        super().__init__(text)
        self.writes: list[str] = []

    def set(self, value: str) -> None:
        self.writes.append(value)
        super().set(value)


@pytest.fixture(scope="session")
def logic():
    return importlib.import_module("conversion_tool.logic")

@pytest.fixture
def engine():
    """Engine whose views call back into it on every write, like Tk traces do."""
    eng = ConversionEngine()
    for field in Field:
        buf = RecordingBuffer()
        buf.add_listener(eng.listener_for(field))
        eng.bind(field, buf)
    return eng

@pytest.fixture
def type_into(engine):
    """Simulate the user replacing the text of a field."""
    def _type(field: Field, text: str) -> None:
        engine.view(field).set(text)
    return _type

@pytest.fixture
def prefs(tmp_path):
    return PreferenceStore(tmp_path / "prefs" / "preferences.yml")

@pytest.fixture
def recent(prefs):
    return RecentFilesManager(prefs)
