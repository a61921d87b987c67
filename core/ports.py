"""
Ports used by the controllers.

The task controller depends on this Protocol instead of PocketBaseClient so
tests can plug an in-memory store.
"""
from typing import Any, Dict, List, Protocol


class TaskStore(Protocol):
    """Remote ``tasks`` table. Every method raises PBError on failure; records always carry an ``id``."""

    def list_tasks(self) -> List[Dict[str, Any]]: ...

    def create_task(self, *, title: str, description: str, priority: str) -> Dict[str, Any]: ...

    def patch_task(self, task_id: str, **fields) -> Dict[str, Any]: ...

    def delete_task(self, task_id: str) -> None: ...
