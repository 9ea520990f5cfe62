from tkinter import ttk

PRIMARY  = "#0ea5e9"  # cyan-500
BG       = "#0b1220"  # slate-950
CARD_BG  = "#0f172a"  # slate-900
FG       = "#e5e7eb"  # gray-200
MUTED    = "#94a3b8"  # gray-400
FIELD_BG = "#111827"  # gray-900
BORDER   = "#1f2937"  # slate-800
WARN     = "#facc15"  # yellow-400
TAGS     = "#f87171"  # red-400

# status badge tone -> fill
TONE_COLORS = {
    "affirmative": "#22c55e",  # green-500
    "negative":    "#ef4444",  # red-500
    "caution":     "#eab308",  # yellow-500
    "neutral":     "#6b7280",  # gray-500
}

FONT = "Segoe UI"


def apply_styles(widget) -> ttk.Style:
    """Register the app's ttk styles on the widget's interpreter."""
    style = ttk.Style(widget)
    try:
        style.theme_use("clam")
    except Exception:
        pass

    style.configure("App.TFrame", background=BG)
    style.configure("Nav.TFrame", background=CARD_BG)
    style.configure("Card.TFrame", background=CARD_BG)
    style.configure("Dialog.TFrame", background=CARD_BG)

    style.configure("H1.TLabel", background=BG, foreground=FG, font=(FONT, 22, "bold"))
    style.configure("Muted.TLabel", background=BG, foreground=MUTED, font=(FONT, 13, "bold"))
    style.configure("Nav.TLabel", background=CARD_BG, foreground=FG, font=(FONT, 12, "bold"))
    style.configure("NavItem.TLabel", background=CARD_BG, foreground=MUTED)
    style.configure("Footer.TLabel", background=BG, foreground=MUTED, font=(FONT, 9))
    style.configure("CardTitle.TLabel", background=CARD_BG, foreground=FG, font=(FONT, 14, "bold"))
    style.configure("Card.TLabel", background=CARD_BG, foreground=FG)
    style.configure("Tags.TLabel", background=CARD_BG, foreground=TAGS, font=(FONT, 9))
    style.configure("DialogTitle.TLabel", background=CARD_BG, foreground=FG, font=(FONT, 16, "bold"))
    style.configure("DialogLabel.TLabel", background=CARD_BG, foreground=FG, font=(FONT, 10, "bold"))
    style.configure("DialogValue.TLabel", background=CARD_BG, foreground=MUTED)

    style.configure("TEntry",
                    fieldbackground=FIELD_BG, foreground=FG,
                    insertcolor=FG, bordercolor=BORDER, padding=6)
    style.map("TEntry",
              fieldbackground=[("disabled", "#1f2937"), ("!disabled", FIELD_BG)],
              bordercolor=[("focus", PRIMARY), ("!focus", BORDER)])

    style.configure("Accent.TButton", background=PRIMARY, foreground="#0b1220",
                    padding=(14, 8), borderwidth=0)
    style.map("Accent.TButton",
              background=[("disabled", BORDER), ("active", "#22d3ee"), ("!active", PRIMARY)])
    style.configure("Ghost.TButton", background=CARD_BG, foreground=MUTED,
                    padding=(12, 8), borderwidth=0)
    style.map("Ghost.TButton",
              background=[("active", "#111827")],
              foreground=[("active", FG), ("!active", MUTED)])
    style.configure("Link.TButton", background=CARD_BG, foreground=PRIMARY,
                    padding=(4, 4), borderwidth=0)
    style.map("Link.TButton", background=[("active", CARD_BG)], foreground=[("active", "#22d3ee")])
    style.configure("Warn.TButton", background=CARD_BG, foreground=WARN,
                    padding=(4, 4), borderwidth=0)
    style.map("Warn.TButton", background=[("active", CARD_BG)], foreground=[("active", "#fde047")])
    return style
