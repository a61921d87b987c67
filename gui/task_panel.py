import logging
import tkinter as tk
from tkinter import ttk

from controller.task_controller import TaskController
from core.models import PRIORITIES, Task
from gui.task_list import ScrollableTaskList

logger = logging.getLogger(__name__)

PRIORITY_LABELS = {
    "low": "Low Priority",
    "medium": "Medium Priority",
    "high": "High Priority",
}
_LABEL_TO_PRIORITY = {v: k for k, v in PRIORITY_LABELS.items()}


class TaskForm(ttk.LabelFrame):
    """Title / description / priority inputs bound to a controller draft."""
    def __init__(self, parent, text: str, on_field):
        super().__init__(parent, text=text, padding=6)
        self._on_field = on_field
        self.columnconfigure(0, weight=1)

        self.title_var = tk.StringVar()
        self.title_entry = ttk.Entry(self, textvariable=self.title_var)
        self.title_entry.grid(row=0, column=0, sticky="we")

        self.desc = tk.Text(self, height=3, wrap="word")
        self.desc.grid(row=1, column=0, sticky="we", pady=4)

        self.priority_var = tk.StringVar()
        self.priority_cb = ttk.Combobox(self, textvariable=self.priority_var, state="readonly",
                                        values=[PRIORITY_LABELS[p] for p in PRIORITIES])
        self.priority_cb.grid(row=2, column=0, sticky="w")

        self.buttons = ttk.Frame(self)
        self.buttons.grid(row=3, column=0, sticky="w", pady=(6, 0))

        self.title_var.trace_add("write", lambda *_: self._on_field("title", self.title_var.get()))
        self.desc.bind("<<Modified>>", self._on_desc_modified)
        self.priority_cb.bind("<<ComboboxSelected>>", self._on_priority)

    def load(self, title: str, description: str, priority: str):
        """Show a draft without echoing the values back to the controller."""
        cb = self._on_field
        self._on_field = lambda *_: None
        try:
            self.title_var.set(title)
            self.desc.delete("1.0", "end")
            self.desc.insert("1.0", description)
            self.desc.edit_modified(False)
            self.priority_var.set(PRIORITY_LABELS.get(priority, PRIORITY_LABELS["medium"]))
        finally:
            self._on_field = cb

    def _on_desc_modified(self, _event=None):
        if not self.desc.edit_modified():
            return
        self._on_field("description", self.desc.get("1.0", "end-1c"))
        self.desc.edit_modified(False)

    def _on_priority(self, _event=None):
        self._on_field("priority", _LABEL_TO_PRIORITY.get(self.priority_var.get(), "medium"))


class TaskPanel(ttk.Frame):
    """Create form, optional edit form and the task cards, driven by TaskController."""
    def __init__(self, parent, controller: TaskController):
        super().__init__(parent, padding=8)
        self.controller = controller
        controller.on_change = self.render

        ttk.Label(self, text="Task Manager", font=("TkDefaultFont", 16, "bold")).pack(anchor="w")
        self.error_var = tk.StringVar()
        self.error_lbl = tk.Label(self, textvariable=self.error_var, fg="#B00020", anchor="w")
        self.loading_lbl = ttk.Label(self, text="Loading task manager...")
        self._anchor = ttk.Frame(self)
        self._anchor.pack(fill="x")

        # CREATE
        self.new_form = TaskForm(self, "Add New Task", controller.set_new_task_field)
        self.new_form.pack(fill="x", pady=(6, 4))
        self.add_btn = ttk.Button(self.new_form.buttons, text="Add Task", command=self._on_add)
        self.add_btn.pack(side="left")
        self.new_form.title_entry.bind("<Return>", self._on_add)

        # UPDATE (se muestra sólo en edición)
        self.edit_form = TaskForm(self, "Edit Task", controller.set_edit_field)
        self.save_btn = ttk.Button(self.edit_form.buttons, text="Save Changes", command=self._on_save)
        self.save_btn.pack(side="left")
        ttk.Button(self.edit_form.buttons, text="Cancel", command=controller.cancel_edit).pack(side="left", padx=(6, 0))
        self._edit_shown_for = None

        # READ
        ttk.Label(self, text="Your Tasks", font=("TkDefaultFont", 13, "bold")).pack(anchor="w", pady=(6, 2))
        self.task_list = ScrollableTaskList(self, on_edit=self._on_edit, on_delete=controller.delete_task)
        self.task_list.pack(fill="both", expand=True)

        self.new_form.load("", "", "medium")

    # ---------- lifecycle ----------
    def mount(self):
        logger.info("Task panel mounted")
        self.controller.fetch_tasks()

    # ---------- render ----------
    def render(self):
        c = self.controller
        self.error_var.set(c.error or "")
        if c.error:
            self.error_lbl.pack(fill="x", before=self._anchor)
        else:
            self.error_lbl.pack_forget()
        if c.loading:
            self.loading_lbl.pack(anchor="w", before=self._anchor)
        else:
            self.loading_lbl.pack_forget()

        state = "disabled" if c.loading else "normal"
        self.add_btn.configure(text="Adding..." if c.loading else "Add Task", state=state)
        self.save_btn.configure(text="Saving..." if c.loading else "Save Changes", state=state)

        if c.is_editing and c.editing_task is not None:
            if self._edit_shown_for is not c.editing_task:
                t = c.editing_task
                self.edit_form.load(t.title, t.description, t.priority)
                self._edit_shown_for = t
            if not self.edit_form.winfo_ismapped():
                self.edit_form.pack(fill="x", pady=4, after=self.new_form)
        else:
            self._edit_shown_for = None
            self.edit_form.pack_forget()

        if not c.loading:
            # el borrador se resetea tras un alta exitosa
            d = c.new_task
            if self.new_form.title_var.get() != d.title:
                self.new_form.load(d.title, d.description, d.priority)

        self.task_list.set_busy(c.loading)
        if not c.loading:
            self.task_list.set_tasks(c.tasks, empty_text="No tasks yet. Add a task to get started!")
        # pintar antes de la llamada bloqueante
        self.update_idletasks()

    # ---------- actions ----------
    def _on_add(self, event=None):
        self.controller.add_task()

    def _on_save(self):
        self.controller.save_edit()

    def _on_edit(self, task: Task):
        self.controller.begin_edit(task)
