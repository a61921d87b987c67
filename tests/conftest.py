# tests/conftest.py

from __future__ import annotations

import pytest

from controller.book_controller import BookController
from controller.task_controller import TaskController

from .fakes import FakeTaskStore

SEED_ROWS = [
    {"id": "c", "title": "Third", "description": "", "priority": "high",
     "created": "2024-01-03 10:00:00.000Z", "updated_at": ""},
    {"id": "b", "title": "Second", "description": "two", "priority": "medium",
     "created": "2024-01-02 10:00:00.000Z", "updated_at": ""},
    {"id": "a", "title": "First", "description": "one", "priority": "low",
     "created": "2024-01-01 10:00:00.000Z", "updated_at": ""},
]


@pytest.fixture()
def store() -> FakeTaskStore:
    return FakeTaskStore()


@pytest.fixture()
def seeded_store() -> FakeTaskStore:
    return FakeTaskStore(SEED_ROWS)


@pytest.fixture()
def controller(store: FakeTaskStore) -> TaskController:
    return TaskController(store)


@pytest.fixture()
def loaded(seeded_store: FakeTaskStore) -> TaskController:
    """Controller after a successful initial fetch of the three seed rows."""
    c = TaskController(seeded_store)
    c.fetch_tasks()
    seeded_store.calls.clear()
    return c


@pytest.fixture()
def books() -> BookController:
    return BookController()


@pytest.fixture()
def tk_root():
    """Hidden Tk root that records callback errors instead of printing them."""
    tk = pytest.importorskip("tkinter")
    try:
        r = tk.Tk()
    except tk.TclError:
        pytest.skip("no display available")
    r.withdraw()
    r.callback_errors = []
    r.report_callback_exception = lambda exc, val, tb: r.callback_errors.append(val)
    yield r
    r.destroy()
