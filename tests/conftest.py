import pytest

from todo_tui.db import Store
from todo_tui.ui_state import AppState


@pytest.fixture
def store(tmp_path):
    s = Store.open(str(tmp_path / "todos.db"))
    yield s
    s.close()


@pytest.fixture
def state(store):
    st = AppState(store)
    st.refresh_data()
    return st


@pytest.fixture
def feed():
    """Build a reader that hands out the given byte chunks one read at a time."""

    def make(*chunks: bytes):
        queue = list(chunks)

        def read(timeout):
            if queue:
                return queue.pop(0)
            return b""

        return read

    return make
