import tkinter as tk
from tkinter import ttk, messagebox

from logic.backend import load_cases
from logic.editor import CaseEditor
from logic.logger import get_logger
from logic.state import CaseBoard, LoadResult, LoadStatus
from logic.tasks import BackgroundTask, TaskResult
from logic.viewport import ViewportController
from ui.badges import scroll_top_icon, status_badge
from ui.case_dialog import CaseDialog
from ui.theme import BG, apply_styles

log = get_logger(__name__)

WIDE_LAYOUT = 1100  # three card columns from here on
NAV_ITEMS = ("Dashboard", "Case Database", "Submit Query", "Help")


class DatabaseFrame(tk.Frame):
    """Case cards with a details/edit modal, loaded from the case backend."""
    def __init__(self, parent, controller):
        super().__init__(parent, bg=BG)
        self.controller = controller
        self.board = CaseBoard()
        self.viewport = ViewportController(width=controller.winfo_width())
        self.dialog = None
        self._alive = True
        self._columns = 0
        self._images = []  # PhotoImages must outlive their labels
        self.tasks = BackgroundTask(self.after, lambda: self._alive)
        self.editor = CaseEditor(self.board, controller.api, self.tasks, view=self)

        apply_styles(self)

        # ---------- Layout ----------
        footer = ttk.Frame(self, style="App.TFrame", padding=(16, 8))
        footer.pack(side="bottom", fill="x")
        ttk.Label(footer, text="Case Database · legal query tracking", style="Footer.TLabel").pack()

        self.main = ttk.Frame(self, style="App.TFrame")
        self.main.pack(side="left", fill="both", expand=True)

        self.sidebar = self._nav(vertical=True)
        self.menubar = self._nav(vertical=False)

        ttk.Label(self.main, text="Case Database", style="H1.TLabel").pack(pady=(24, 16))

        body = ttk.Frame(self.main, style="App.TFrame")
        body.pack(fill="both", expand=True, padx=16)
        self.canvas = tk.Canvas(body, bg=BG, highlightthickness=0)
        self.vscroll = ttk.Scrollbar(body, orient="vertical", command=self.canvas.yview)
        self.canvas.configure(yscrollcommand=self._on_yscroll)
        self.vscroll.pack(side="right", fill="y")
        self.canvas.pack(side="left", fill="both", expand=True)

        self.grid_frame = ttk.Frame(self.canvas, style="App.TFrame")
        self._grid_window = self.canvas.create_window((0, 0), window=self.grid_frame, anchor="nw")
        self.grid_frame.bind("<Configure>", lambda e: self.canvas.configure(scrollregion=self.canvas.bbox("all")))
        self.canvas.bind("<Configure>", lambda e: self.canvas.itemconfigure(self._grid_window, width=e.width))

        self._top_icon = scroll_top_icon()
        self.top_btn = tk.Label(self, image=self._top_icon, bg=BG, cursor="hand2")
        self.top_btn.bind("<Button-1>", lambda e: self.scroll_to_top())

        # ---------- Window signals ----------
        top = self.winfo_toplevel()
        self._configure_id = top.bind("<Configure>", self._on_window_configure, add="+")
        self.bind_all("<MouseWheel>", self._on_wheel)
        self.bind_all("<Button-4>", lambda e: self.canvas.yview_scroll(-3, "units"))
        self.bind_all("<Button-5>", lambda e: self.canvas.yview_scroll(3, "units"))
        self._unsubscribe = self.viewport.subscribe(self._apply_viewport)

        self._apply_viewport(self.viewport)
        self.render_cards()
        self.load()

    # ---------- lifecycle ----------
    def load(self):
        self.tasks.submit(lambda: load_cases(self.controller.api), self._on_loaded, name="load")

    def _on_loaded(self, result: TaskResult):
        if result.ok:
            outcome = result.value
        else:
            log.exception("Case load crashed", exc_info=result.error)
            outcome = LoadResult(cases=[], error=str(result.error))
        self.board.finish_load(outcome)
        self.render_cards()

    def destroy(self):
        self._alive = False
        self._unsubscribe()
        try:
            self.winfo_toplevel().unbind("<Configure>", self._configure_id)
        except tk.TclError:
            pass
        for seq in ("<MouseWheel>", "<Button-4>", "<Button-5>"):
            self.unbind_all(seq)
        super().destroy()

    # ---------- navigation chrome ----------
    def _nav(self, vertical):
        nav = ttk.Frame(self, style="Nav.TFrame", padding=(16, 12))
        ttk.Label(nav, text="⚖  Case Tracker", style="Nav.TLabel").pack(
            side="top" if vertical else "left", anchor="w", pady=(0, 12) if vertical else 0)
        for item in NAV_ITEMS:
            ttk.Label(nav, text=item, style="NavItem.TLabel").pack(
                side="top" if vertical else "left", anchor="w", padx=(0 if vertical else 14, 0), pady=4)
        return nav

    def _apply_viewport(self, viewport: ViewportController):
        if viewport.compact:
            self.sidebar.pack_forget()
            self.menubar.pack(side="top", fill="x", before=self.main)
        else:
            self.menubar.pack_forget()
            self.sidebar.pack(side="left", fill="y", before=self.main)

        if viewport.show_scroll_top:
            self.top_btn.place(relx=1.0, rely=1.0, anchor="se", x=-24, y=-48)
            self.top_btn.lift()
        else:
            self.top_btn.place_forget()

    def _on_window_configure(self, event):
        if event.widget is not self.winfo_toplevel():
            return
        self.viewport.resize(event.width)
        if self._column_count() != self._columns:
            self.render_cards()

    def _on_yscroll(self, first, last):
        self.vscroll.set(first, last)
        self.viewport.scroll(int(float(first) * self._content_height()))

    def _on_wheel(self, event):
        if not event.delta:
            return
        self.canvas.yview_scroll(int(-event.delta / 120) or (-1 if event.delta > 0 else 1), "units")

    def _content_height(self):
        region = self.canvas.cget("scrollregion")
        if not region:
            return 0
        return max(int(float(region.split()[3])), 1)

    def scroll_to_top(self):
        height = self._content_height()
        if not height:
            return
        for i, offset in enumerate(self.viewport.scroll_to_top_path()):
            self.after(16 * (i + 1), lambda o=offset: self._alive and self.canvas.yview_moveto(o / height))

    # ---------- cards ----------
    def _column_count(self):
        if self.viewport.compact:
            return 1
        return 3 if self.viewport.width >= WIDE_LAYOUT else 2

    def render_cards(self):
        for w in self.grid_frame.winfo_children():
            w.destroy()
        self._images.clear()
        self._columns = self._column_count()
        for col in range(3):
            active = col < self._columns
            self.grid_frame.grid_columnconfigure(col, weight=1 if active else 0, uniform="cards" if active else "")

        if not self.board.cases:
            text = "Loading cases…" if self.board.load_status is LoadStatus.LOADING else "No cases available"
            ttk.Label(self.grid_frame, text=text, style="Muted.TLabel").grid(row=0, column=0, columnspan=self._columns, pady=40)
            return

        for i, case in enumerate(self.board.cases):
            card = self._card(case)
            card.grid(row=i // self._columns, column=i % self._columns, sticky="nsew", padx=8, pady=8)

    def _card(self, case):
        card = ttk.Frame(self.grid_frame, style="Card.TFrame", padding=16)
        head = ttk.Frame(card, style="Card.TFrame")
        head.pack(fill="x")
        ttk.Label(head, text=case.case_heading, style="CardTitle.TLabel", wraplength=260).pack(side="left")
        badge = status_badge(case.status)
        self._images.append(badge)
        ttk.Label(head, image=badge, style="Card.TLabel").pack(side="right")

        ttk.Label(card, text=case.query, style="Card.TLabel", wraplength=320, justify="left").pack(
            anchor="w", pady=(10, 0))
        ttk.Label(card, text=f"Tags: {case.tags_text}", style="Tags.TLabel", wraplength=320).pack(
            anchor="w", pady=(8, 0))

        actions = ttk.Frame(card, style="Card.TFrame")
        actions.pack(fill="x", pady=(12, 0))
        ttk.Button(actions, text="Show Details", style="Link.TButton",
                   command=lambda cid=case.id: self.open_details(cid)).pack(side="left")
        ttk.Button(actions, text="Edit", style="Warn.TButton",
                   command=lambda cid=case.id: self.open_editor(cid)).pack(side="right")
        return card

    # ---------- editor ----------
    def open_details(self, case_id):
        self.board.open_details(case_id)
        self._show_dialog()

    def open_editor(self, case_id):
        self.board.open_editor(case_id)
        self._show_dialog()

    def _show_dialog(self):
        self._destroy_dialog()
        self.dialog = CaseDialog(self, self.board, on_save=self.save_changes, on_close=self.close_dialog)

    def _destroy_dialog(self):
        if self.dialog is not None:
            self.dialog.destroy()
            self.dialog = None

    def close_dialog(self):
        self.board.close()
        self._destroy_dialog()

    def save_changes(self):
        self.editor.save()

    # ---------- editor view ----------
    def saving_changed(self, saving):
        if self.dialog is not None:
            self.dialog.set_saving(saving)

    def session_closed(self):
        self._destroy_dialog()

    def cases_changed(self):
        self.render_cards()

    def show_warning(self, message):
        messagebox.showwarning("Case Database", message, parent=self.dialog or self)

    def show_info(self, message):
        messagebox.showinfo("Case Database", message, parent=self)

    def show_error(self, message):
        messagebox.showerror("Case Database", message, parent=self.dialog or self)
