import datetime as dt
import logging
from dataclasses import replace
from typing import Callable, List, Optional

from core.exceptions import PBError
from core.models import Task, TaskDraft
from core.ports import TaskStore

logger = logging.getLogger(__name__)

FETCH_ERROR = "Failed to fetch tasks"
ADD_ERROR = "Failed to add task"
UPDATE_ERROR = "Failed to update task"
DELETE_ERROR = "Failed to delete task"

_DRAFT_FIELDS = ("title", "description", "priority")


def _now_iso() -> str:
    return dt.datetime.now(dt.timezone.utc).isoformat()


class TaskController:
    """
    View state of the task panel and the remote calls behind each user action.

    The list is a projection of the remote table: it is replaced on fetch and
    patched after every successful insert/update/delete. Remote failures never
    propagate; they end up as a fixed message in ``error``.
    """

    def __init__(self, store: TaskStore, on_change: Optional[Callable[[], None]] = None):
        self.store = store
        self.on_change = on_change
        self.tasks: List[Task] = []
        self.new_task = TaskDraft()
        self.editing_task: Optional[Task] = None
        self.is_editing = False
        self.loading = False
        self.error: Optional[str] = None

    def _changed(self):
        if self.on_change:
            self.on_change()

    def _set_loading(self, value: bool):
        self.loading = value
        self._changed()

    def _fail(self, message: str):
        logger.exception(message)
        self.error = message

    # ---- READ ----
    def fetch_tasks(self):
        try:
            self._set_loading(True)
            items = self.store.list_tasks()
            self.tasks = [Task.from_record(t) for t in (items or [])]
            logger.info("Tasks fetched: %d", len(self.tasks))
        except PBError:
            self._fail(FETCH_ERROR)
        finally:
            self._set_loading(False)

    # ---- CREATE ----
    def set_new_task_field(self, name: str, value: str):
        if name not in _DRAFT_FIELDS:
            raise KeyError(name)
        setattr(self.new_task, name, value)

    def add_task(self):
        draft = self.new_task
        if not draft.title.strip():
            return
        try:
            self._set_loading(True)
            record = self.store.create_task(
                title=draft.title,
                description=draft.description,
                priority=draft.priority,
            )
            if record:
                self.tasks = [Task.from_record(record)] + self.tasks
            self.new_task = TaskDraft()
        except PBError:
            self._fail(ADD_ERROR)
        finally:
            self._set_loading(False)

    # ---- UPDATE ----
    def begin_edit(self, task: Task):
        # una sola edición a la vez: el borrador anterior se descarta
        self.editing_task = replace(task)
        self.is_editing = True
        self._changed()

    def set_edit_field(self, name: str, value: str):
        if self.editing_task is None:
            return
        if name not in _DRAFT_FIELDS:
            raise KeyError(name)
        setattr(self.editing_task, name, value)

    def save_edit(self):
        draft = self.editing_task
        if draft is None or not draft.title.strip():
            return
        try:
            self._set_loading(True)
            self.store.patch_task(
                draft.id,
                title=draft.title,
                description=draft.description,
                priority=draft.priority,
                updated_at=_now_iso(),
            )
            # the local timestamp is the one shown, not the one sent
            edited = replace(draft, updated_at=_now_iso())
            self.tasks = [edited if t.id == draft.id else t for t in self.tasks]
            self.is_editing = False
            self.editing_task = None
        except PBError:
            self._fail(UPDATE_ERROR)
        finally:
            self._set_loading(False)

    def cancel_edit(self):
        self.is_editing = False
        self.editing_task = None
        self._changed()

    # ---- DELETE ----
    def delete_task(self, task_id: str):
        try:
            self._set_loading(True)
            self.store.delete_task(task_id)
            self.tasks = [t for t in self.tasks if t.id != task_id]
        except PBError:
            self._fail(DELETE_ERROR)
        finally:
            self._set_loading(False)

