import tkinter as tk
from tkinter import ttk
from core.config import TOPMOST, WINDOW_GEOMETRY
from controller.book_controller import BookController
from controller.task_controller import TaskController
from gui.book_list import BookPanel
from gui.task_panel import TaskPanel


class MainWindow(tk.Tk):
    """Hosts the two independent panels, one per notebook tab."""
    def __init__(self, tasks: TaskController, books: BookController):
        super().__init__()
        self.title("Tasks & Books")
        self.geometry(WINDOW_GEOMETRY)
        self.configure(padx=8, pady=8)
        if TOPMOST:
            self.attributes("-topmost", True)

        self.nb = ttk.Notebook(self)
        self.nb.pack(fill="both", expand=True)

        self.task_panel = TaskPanel(self.nb, tasks)
        self.nb.add(self.task_panel, text="Tasks")
        self.book_panel = BookPanel(self.nb, books)
        self.nb.add(self.book_panel, text="Books")

        self.bind("<F5>", lambda e: tasks.fetch_tasks())
        # carga inicial una vez que la ventana está en pantalla
        self.after_idle(self.task_panel.mount)
