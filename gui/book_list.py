import tkinter as tk
from tkinter import ttk, messagebox as mb

from controller.book_controller import BookController
from core.models import Book


class BookPanel(ttk.Frame):
    """Book collection; the row being edited is swapped for an inline form."""
    def __init__(self, parent, controller: BookController):
        super().__init__(parent, padding=8)
        self.controller = controller

        ttk.Label(self, text="Book Collection", font=("TkDefaultFont", 16, "bold")).pack(anchor="w")
        self.rows = ttk.Frame(self)
        self.rows.pack(fill="both", expand=True, pady=(6, 0))
        self.rows.columnconfigure(0, weight=1)
        self.render()

    # ---------- render ----------
    def render(self):
        for child in self.rows.winfo_children():
            child.destroy()
        c = self.controller
        for i, book in enumerate(c.books):
            if c.editing_id == book.id:
                row = self._edit_row(book)
            else:
                row = self._view_row(book)
            row.grid(row=i, column=0, sticky="we", pady=3)

    def _view_row(self, book: Book) -> ttk.Frame:
        row = ttk.Frame(self.rows, padding=6, relief="groove", borderwidth=1)
        row.columnconfigure(0, weight=1)
        ttk.Label(row, text=book.title, font=("TkDefaultFont", 11, "bold")).grid(row=0, column=0, sticky="w")
        ttk.Label(row, text=f"Author: {book.author}").grid(row=1, column=0, sticky="w")
        ttk.Label(row, text=f"Year: {book.year}").grid(row=2, column=0, sticky="w")
        ttk.Button(row, text="Edit", command=lambda b=book: self._on_edit(b)).grid(row=0, column=1, rowspan=3)
        return row

    def _edit_row(self, book: Book) -> ttk.Frame:
        c = self.controller
        row = ttk.Frame(self.rows, padding=6, relief="groove", borderwidth=1)
        row.columnconfigure(1, weight=1)
        self._vars = {}
        for r, (name, label) in enumerate((("title", "Title:"), ("author", "Author:"), ("year", "Year:"))):
            ttk.Label(row, text=label).grid(row=r, column=0, sticky="w", padx=(0, 6))
            var = tk.StringVar(value=str(getattr(c.edit_form, name)))
            entry = ttk.Entry(row, textvariable=var)
            entry.grid(row=r, column=1, sticky="we", pady=1)
            entry.bind("<Return>", self._on_submit)
            if name == "year":
                # el campo muestra lo que quedó tras parsear
                entry.bind("<FocusOut>", lambda e, v=var: v.set(str(c.edit_form.year)))
            var.trace_add("write", lambda *_, n=name, v=var: c.change_field(n, v.get()))
            self._vars[name] = var
        buttons = ttk.Frame(row)
        buttons.grid(row=3, column=1, sticky="w", pady=(4, 0))
        ttk.Button(buttons, text="Save", command=self._on_submit).pack(side="left")
        ttk.Button(buttons, text="Cancel", command=self._on_cancel).pack(side="left", padx=(6, 0))
        return row

    # ---------- actions ----------
    def _on_edit(self, book: Book):
        self.controller.begin_edit(book)
        self.render()

    def _on_submit(self, event=None):
        # equivalente a los campos "required" del formulario
        missing = self.controller.missing_fields()
        if missing:
            mb.showwarning("Book", f"Please fill out: {', '.join(missing)}")
            return
        self.controller.submit()
        self.render()

    def _on_cancel(self):
        self.controller.cancel()
        self.render()
