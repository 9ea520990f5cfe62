import tkinter as tk
from tkinter import ttk

from logic.state import CaseBoard
from model.models import STATUSES, status_from_label, status_label
from ui.badges import status_badge
from ui.theme import FG, FIELD_BG, apply_styles

# (wire key, label, widget kind, rows)
FIELDS = [
    ("caseHeading", "Case Heading", "entry", 1),
    ("query", "Query", "text", 3),
    ("applicableArticle", "Applicable Articles", "entry", 1),
    ("description", "Description", "text", 4),
    ("status", "Status", "status", 1),
]


class CaseDialog(tk.Toplevel):
    """Modal view/edit dialog for the board's open case."""
    def __init__(self, parent, board: CaseBoard, on_save, on_close):
        super().__init__(parent)
        self.board = board
        self._on_save = on_save
        self._on_close = on_close
        self._badge = None
        self.transient(parent)
        self.grab_set()

        apply_styles(self)
        self.configure(bg=FIELD_BG)

        outer = ttk.Frame(self, style="Dialog.TFrame", padding=16)
        outer.pack(fill="both", expand=True)

        # Title row + close
        head = ttk.Frame(outer, style="Dialog.TFrame")
        head.pack(fill="x")
        self.title_label = ttk.Label(head, style="DialogTitle.TLabel")
        self.title_label.pack(side="left")
        ttk.Button(head, text="✕", style="Ghost.TButton", width=3, command=self.close).pack(side="right")

        self.body = ttk.Frame(outer, style="Dialog.TFrame")
        self.body.pack(fill="both", expand=True, pady=(8, 0))

        actions = ttk.Frame(outer, style="Dialog.TFrame")
        actions.pack(fill="x", pady=(12, 0))
        self.save_btn = ttk.Button(actions, text="Save Changes", style="Accent.TButton", command=self.save)
        self.toggle_btn = ttk.Button(actions, style="Ghost.TButton", command=self.toggle)
        self.toggle_btn.pack(side="left")

        self.bind("<Escape>", lambda e: self.close())
        self.bind("<Control-s>", lambda e: self.save())
        self.protocol("WM_DELETE_WINDOW", self.close)

        self.minsize(600, 520)
        self.render()
        self._center_on_parent(parent)

    # ---------- rendering ----------
    def render(self):
        session = self.board.session
        if session is None:
            return
        case = session.original
        self.title(f"Case {case.id}")
        self.title_label.config(text="Edit Case" if session.editing else "Case Details")

        for w in self.body.winfo_children():
            w.destroy()
        self.body.grid_columnconfigure(0, weight=1)

        values = case.editable_values()
        row = 0
        for key, label, kind, rows in FIELDS:
            ttk.Label(self.body, text=label, style="DialogLabel.TLabel").grid(
                row=row, column=0, sticky="w", pady=(10, 2))
            if session.editing:
                widget = self._editor(key, kind, rows, session.draft.get(key, ""))
            else:
                widget = self._read_only(key, values[key])
            widget.grid(row=row + 1, column=0, sticky="ew")
            row += 2
            if key == "applicableArticle":
                # tags sit between articles and description and are never editable
                ttk.Label(self.body, text="Tags", style="DialogLabel.TLabel").grid(
                    row=row, column=0, sticky="w", pady=(10, 2))
                self._read_only("tags", case.tags_text).grid(row=row + 1, column=0, sticky="ew")
                row += 2

        self.toggle_btn.config(text="View" if session.editing else "Edit")
        if session.editing:
            self.save_btn.pack(side="right")
            self.set_saving(self.board.is_saving)
        else:
            self.save_btn.pack_forget()

    def _read_only(self, key, value):
        if key == "status":
            self._badge = status_badge(value)
            return ttk.Label(self.body, image=self._badge, text=f"  {status_label(value)}",
                             compound="left", style="DialogValue.TLabel")
        return ttk.Label(self.body, text=value or "—", style="DialogValue.TLabel",
                         wraplength=540, justify="left")

    def _editor(self, key, kind, rows, value):
        if kind == "text":
            text = tk.Text(self.body, height=rows, wrap="word", bg=FIELD_BG, fg=FG,
                           insertbackground=FG, relief="flat", padx=6, pady=6)
            text.insert("1.0", value)
            text.edit_modified(False)
            text.bind("<<Modified>>", lambda e, k=key, t=text: self._text_changed(k, t))
            return text

        var = tk.StringVar(master=self, value=value)
        var.trace_add("write", lambda *_, k=key, v=var: self.board.update_field(k, v.get()))
        if kind == "status":
            labels = [label for _, label in STATUSES]
            shown = tk.StringVar(master=self, value=status_label(value))
            shown.trace_add("write", lambda *_: var.set(status_from_label(shown.get())))
            box = ttk.Combobox(self.body, textvariable=shown, values=labels, state="readonly")
            box._var = shown  # keep the StringVar alive with the widget
            return box
        entry = ttk.Entry(self.body, textvariable=var)
        entry._var = var
        return entry

    def _text_changed(self, key, text):
        if not text.edit_modified():
            return
        self.board.update_field(key, text.get("1.0", "end-1c"))
        text.edit_modified(False)

    # ---------- actions ----------
    def set_saving(self, saving: bool):
        self.save_btn.state(["disabled"] if saving else ["!disabled"])
        self.save_btn.config(text="Saving…" if saving else "Save Changes")

    def toggle(self):
        if self.board.session is None or self.board.session.saving:
            return
        self.board.toggle_editing()
        self.render()

    def save(self):
        session = self.board.session
        if session is None or not session.editing:
            return
        self._on_save()

    def close(self):
        self._on_close()

    def _center_on_parent(self, parent):
        try:
            self.update_idletasks()
            px = parent.winfo_rootx()
            py = parent.winfo_rooty()
            pw = parent.winfo_width()
            ph = parent.winfo_height()
            w = self.winfo_width()
            h = self.winfo_height()
            x = px + (pw - w) // 2
            y = py + (ph - h) // 2
            self.geometry(f"+{max(x, 0)}+{max(y, 0)}")
        except tk.TclError:
            pass
