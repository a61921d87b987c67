"""
Scrollable task list widget for Tkinter
---------------------------------------
Each task is rendered as a card (a Frame) inside a scrollable Canvas, with:
- the title and the description (wrapping)
- a colored priority tag plus created / updated dates
- "Edit" and "Delete" buttons

The widget is view-only state. Edit/Delete are forwarded to the callbacks
passed in the constructor; call `set_tasks()` to re-render and `set_busy()`
to disable the Delete buttons while a remote call is running.
"""
from __future__ import annotations
from typing import Callable, Dict, List, Optional, Tuple
import datetime as dt
import tkinter as tk
from tkinter import ttk

from core.models import Task

PRIORITY_COLORS = {
    "low": "#22C55E",
    "medium": "#EAB308",
    "high": "#DC2626",
}


def format_date(value: Optional[str]) -> str:
    """ISO timestamp (PocketBase or ISO-8601) -> local date string."""
    if not value:
        return ""
    try:
        return dt.datetime.fromisoformat(str(value).replace("Z", "+00:00")).strftime("%x")
    except ValueError:
        return str(value)[:10]


def task_tags(task: Task) -> List[Tuple[str, str]]:
    tags = [(f"Priority: {task.priority}", PRIORITY_COLORS.get(task.priority, "#CBD5E1"))]
    if task.created_at:
        tags.append((f"Created: {format_date(task.created_at)}", "#CBD5E1"))
    if task.updated_at:
        tags.append((f"Updated: {format_date(task.updated_at)}", "#CBD5E1"))
    return tags


class TaskCard(ttk.Frame):
    """A single task card with text, colored tags and action buttons."""
    def __init__(
        self,
        master,
        task: Task,
        on_edit: Optional[Callable[[Task], None]] = None,
        on_delete: Optional[Callable[[str], None]] = None,
        busy: bool = False,
        wrap: int = 600,
    ):
        super().__init__(master, padding=(6, 4), relief="groove", borderwidth=1)
        self.task = task
        self._on_edit = on_edit
        self._on_delete = on_delete

        self.columnconfigure(0, weight=1)

        self.title_lbl = ttk.Label(self, text=task.title, style="Task.Title.TLabel",
                                   wraplength=wrap, anchor="w", justify="left")
        self.title_lbl.grid(row=0, column=0, sticky="we")
        self.lbl = ttk.Label(self, text=task.description, wraplength=wrap, anchor="w", justify="left")
        self.lbl.grid(row=1, column=0, sticky="we")

        self.tag_container = ttk.Frame(self)
        self.tag_container.grid(row=2, column=0, sticky="w", pady=(2, 4))
        self._render_tags(task_tags(task))

        actions = ttk.Frame(self)
        actions.grid(row=0, column=1, rowspan=3, sticky="ne", padx=(6, 0))
        self.edit_btn = ttk.Button(actions, text="Edit", command=self._edit)
        self.edit_btn.pack(side="left")
        self.delete_btn = ttk.Button(actions, text="Delete", command=self._delete)
        self.delete_btn.pack(side="left", padx=(4, 0))
        self.set_busy(busy)

    # --- Public API ---
    def set_busy(self, busy: bool):
        self.delete_btn.configure(text="Deleting..." if busy else "Delete",
                                  state="disabled" if busy else "normal")

    # --- Internals ---
    def _render_tags(self, tags: List[Tuple[str, str]]):
        for label, color in tags:
            # tk.Label para poder usar color de fondo sin estilos ttk
            tag = tk.Label(
                self.tag_container,
                text=label,
                bg=color,
                fg=_ideal_text_color(color),
                padx=4,
                pady=2,
                borderwidth=0,
                relief="flat",
            )
            tag.pack(side="left", padx=(0, 6))

    # los callbacks pueden re-renderizar la lista y destruir esta tarjeta
    def _edit(self):
        if self._on_edit:
            self._on_edit(self.task)

    def _delete(self):
        if self._on_delete:
            self._on_delete(self.task.id)


class ScrollableTaskList(ttk.Frame):
    """Canvas + interior Frame pattern with mousewheel support."""
    def __init__(
        self,
        master,
        on_edit: Optional[Callable[[Task], None]] = None,
        on_delete: Optional[Callable[[str], None]] = None,
        row_wrap: int = 520,
        row_padding: Tuple[int, int] = (3, 3),
        **kwargs,
    ):
        super().__init__(master, **kwargs)
        self._on_edit = on_edit
        self._on_delete = on_delete
        self._row_wrap = row_wrap
        self._row_padding = row_padding
        self._rows: Dict[str, TaskCard] = {}
        self._busy = False

        style = ttk.Style(self)
        style.configure("Task.Title.TLabel", font=("TkDefaultFont", 11, "bold"))
        style.configure("Task.Empty.TLabel", foreground="#888888")

        self.canvas = tk.Canvas(self, highlightthickness=0)
        self.vbar = ttk.Scrollbar(self, orient="vertical", command=self.canvas.yview)
        self.canvas.configure(yscrollcommand=self.vbar.set)

        self.canvas.grid(row=0, column=0, sticky="nsew")
        self.vbar.grid(row=0, column=1, sticky="ns")
        self.rowconfigure(0, weight=1)
        self.columnconfigure(0, weight=1)

        self.interior = ttk.Frame(self.canvas)
        self.interior.columnconfigure(0, weight=1)
        self._win_id = self.canvas.create_window(0, 0, window=self.interior, anchor="nw")
        self.empty_lbl = ttk.Label(self.interior, style="Task.Empty.TLabel")

        self.interior.bind("<Configure>", self._on_interior_configure)
        self.canvas.bind("<Configure>", self._on_canvas_configure)

        self._bind_mousewheel(self.canvas)

    # --- Public API ---
    def set_tasks(self, tasks: List[Task], empty_text: str = ""):
        """Replace all cards, keeping the given order."""
        for row in list(self._rows.values()):
            row.destroy()
        self._rows.clear()

        if not tasks and empty_text:
            self.empty_lbl.configure(text=empty_text)
            self.empty_lbl.grid(row=0, column=0, sticky="w", padx=8, pady=8)
        else:
            self.empty_lbl.grid_remove()

        for i, task in enumerate(tasks):
            card = TaskCard(
                self.interior,
                task,
                on_edit=self._on_edit,
                on_delete=self._on_delete,
                busy=self._busy,
                wrap=self._row_wrap,
            )
            self._rows[task.id] = card
            card.grid(row=i, column=0, sticky="we", padx=(8, 8), pady=self._row_padding)
        self._update_scrollregion()

    def set_busy(self, busy: bool):
        self._busy = busy
        for row in self._rows.values():
            row.set_busy(busy)

    # --- Internals ---
    def _update_scrollregion(self):
        self.update_idletasks()
        self.canvas.configure(scrollregion=self.canvas.bbox("all"))

    def _on_interior_configure(self, _):
        self._update_scrollregion()

    def _on_canvas_configure(self, event):
        # ancho del interior = ancho del canvas (para el wrap)
        self.canvas.itemconfigure(self._win_id, width=event.width)
        for row in self._rows.values():
            row.lbl.configure(wraplength=event.width - 160)
            row.title_lbl.configure(wraplength=event.width - 160)

    def _bind_mousewheel(self, widget):
        widget.bind_all("<MouseWheel>", self._on_mousewheel_windows_mac, add="+")
        widget.bind_all("<Button-4>", self._on_mousewheel_linux, add="+")
        widget.bind_all("<Button-5>", self._on_mousewheel_linux, add="+")

    def _on_mousewheel_windows_mac(self, event):
        # Windows: delta +/-120; macOS usa valores más chicos
        delta = int(-1 * (event.delta / 120))
        self.canvas.yview_scroll(delta, "units")

    def _on_mousewheel_linux(self, event):
        if event.num == 4:
            self.canvas.yview_scroll(-1, "units")
        elif event.num == 5:
            self.canvas.yview_scroll(1, "units")


def _ideal_text_color(bg_hex: str) -> str:
    """Return black or white depending on background brightness."""
    bg_hex = bg_hex.strip().lstrip('#')
    if len(bg_hex) == 3:
        bg_hex = ''.join(c*2 for c in bg_hex)
    try:
        r = int(bg_hex[0:2], 16)
        g = int(bg_hex[2:4], 16)
        b = int(bg_hex[4:6], 16)
    except ValueError:
        return "black"
    luminance = 0.299*r + 0.587*g + 0.114*b
    return "black" if luminance > 186 else "white"
