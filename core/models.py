from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Union

PRIORITIES = ("low", "medium", "high")
DEFAULT_PRIORITY = "medium"


@dataclass
class Task:
    id: str
    title: str
    description: str = ""
    priority: str = DEFAULT_PRIORITY  # low | medium | high
    created_at: Optional[str] = None  # asignado por el store
    updated_at: Optional[str] = None  # None hasta la primera edición

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "Task":
        """Build a Task from a PocketBase record (``created`` is the system column)."""
        return cls(
            id=record["id"],
            title=record.get("title") or "",
            description=record.get("description") or "",
            priority=record.get("priority") or DEFAULT_PRIORITY,
            created_at=record.get("created_at") or record.get("created") or None,
            updated_at=record.get("updated_at") or None,
        )


@dataclass
class TaskDraft:
    title: str = ""
    description: str = ""
    priority: str = DEFAULT_PRIORITY


@dataclass
class Book:
    id: int
    title: str
    author: str
    year: Union[int, str]  # "" si el año no se pudo leer


@dataclass
class BookDraft:
    title: str = ""
    author: str = ""
    year: Union[int, str] = ""
