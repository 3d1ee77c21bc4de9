"""
Design (ui.py)
- Purpose: Build and manage the Tkinter UI (phrase buttons, counters, total, reset, sharing, logs).
- Inputs: CounterStore (shared state, read via snapshots), page URL for sharing.
- Outputs: None (renders UI; state changes go through TasbihController).
- Side effects: Creates windows; rings the bell; shows desktop notifications; opens web browser;
                writes to the clipboard.
- Thread-safety: UI code runs on main thread; append_log reschedules itself via Tk.after().
"""

import tkinter as tk
from tkinter import ttk, messagebox
import webbrowser

from plyer import notification

from .config import APP_TITLE, LOG_MAX_LINES, MESSAGE_MS, PULSE_MS, RESET_TITLE
from .controller import TasbihController
from .effects import Effects
from .models import Snapshot
from .repository import CounterStore
from .utils import format_count

BG = "#1e1e1e"
PANEL_BG = "#2b2b2b"
FG = "#f0f0f0"
ACCENT = "#7CFC00"
FONT = "Segoe UI"

# Tk event.state bit for the Control modifier
CONTROL_MASK = 0x0004


class TkEffects(Effects):
    """
    Design (TkEffects)
    - Purpose: Effects implemented with Tk widgets, plyer notifications and webbrowser.
    - Notifications honour AppUI.enable_notifications.
    """

    def __init__(self, ui: "AppUI") -> None:
        self.ui = ui

    def pulse(self, phrase: str) -> None:
        button = self.ui.buttons.get(phrase)
        if button is None:
            return
        button.configure(relief=tk.SUNKEN)
        self.ui.root.after(PULSE_MS, lambda: button.configure(relief=tk.RAISED))

    def play_tone(self) -> None:
        self.ui.root.bell()

    def show_message(self, text: str, color: str | None = None) -> None:
        label = tk.Label(
            self.ui.root,
            text=text,
            fg="white",
            bg=color or PANEL_BG,
            font=(FONT, 14, "bold"),
            padx=30,
            pady=15,
        )
        label.place(relx=0.5, rely=0.5, anchor="center")
        self.ui.root.after(MESSAGE_MS, label.destroy)

    def notify(self, title: str, message: str) -> None:
        if not self.ui.enable_notifications.get():
            return
        notification.notify(title=title, message=message, timeout=5)

    def copy_to_clipboard(self, text: str) -> None:
        self.ui.root.clipboard_clear()
        self.ui.root.clipboard_append(text)

    def open_url(self, url: str) -> None:
        webbrowser.open(url)


class AppUI:
    """
    Design (AppUI)
    - Purpose: Encapsulate all UI creation and behavior.
    - Public attributes:
        controller (TasbihController): input handling bound to this window
        enable_notifications (tk.BooleanVar): toggles desktop notification on reset
        show_logs (tk.BooleanVar): toggles visibility of the logs panel
    - Public methods:
        render(snapshot): repaint counters and total
        confirm(prompt): blocking yes/no dialog
        append_log(line): append one line into the Logs panel (any thread)
    """

    def __init__(self, root: tk.Tk, store: CounterStore, page_url: str):
        self.root = root
        self.page_url = page_url

        self.enable_notifications = tk.BooleanVar(value=True)
        self.show_logs = tk.BooleanVar(value=False)

        self.effects = TkEffects(self)
        self.controller = TasbihController(store, self.effects, self.confirm, self.render)

        # Window
        self.root.title(APP_TITLE)
        self.root.configure(bg=BG)
        self.root.columnconfigure(0, weight=1)
        self.root.rowconfigure(0, weight=1)

        content = tk.Frame(self.root, bg=BG)
        content.grid(row=0, column=0, sticky="nsew", padx=10, pady=10)
        content.columnconfigure(0, weight=1)

        # Phrase buttons: text on top, running count below
        self.buttons: dict[str, tk.Button] = {}
        for index, phrase in enumerate(store.phrases):
            button = tk.Button(
                content,
                text=phrase,
                font=(FONT, 16),
                fg=FG,
                bg=PANEL_BG,
                activebackground="#444",
                activeforeground="white",
                relief=tk.RAISED,
                bd=2,
                command=lambda p=phrase: self.controller.tap(p),
            )
            button.grid(row=index, column=0, sticky="ew", pady=4)
            self.buttons[phrase] = button

        # Total
        total_frame = tk.Frame(content, bg=BG)
        total_frame.grid(row=len(store.phrases), column=0, sticky="ew", pady=(10, 5))
        tk.Label(total_frame, text="المجموع", fg=FG, bg=BG, font=(FONT, 12)).pack(side=tk.RIGHT)
        self.total_label = tk.Label(total_frame, text="0", fg=ACCENT, bg=BG, font=(FONT, 18, "bold"))
        self.total_label.pack(side=tk.RIGHT, padx=10)

        # Buttons & toggles
        button_frame = tk.Frame(content, bg=BG)
        button_frame.grid(row=len(store.phrases) + 1, column=0, sticky="ew", pady=(5, 0))

        ttk.Button(button_frame, text="Reset", command=self.controller.request_reset).pack(side=tk.LEFT, padx=5)
        ttk.Button(
            button_frame, text="WhatsApp", command=lambda: self.controller.share("whatsapp", self.page_url)
        ).pack(side=tk.LEFT, padx=5)
        ttk.Button(
            button_frame, text="Facebook", command=lambda: self.controller.share("facebook", self.page_url)
        ).pack(side=tk.LEFT, padx=5)
        ttk.Button(
            button_frame, text="Copy Link", command=lambda: self.controller.copy_link(self.page_url)
        ).pack(side=tk.LEFT, padx=5)

        tk.Checkbutton(
            button_frame,
            text="Enable Notifications",
            variable=self.enable_notifications,
            fg="white",
            bg=BG,
            selectcolor=PANEL_BG,
            activebackground=BG,
            activeforeground="white",
        ).pack(side=tk.LEFT, padx=5)

        tk.Checkbutton(
            button_frame,
            text="Show Logs",
            variable=self.show_logs,
            fg="white",
            bg=BG,
            selectcolor=PANEL_BG,
            command=self.toggle_logs,
        ).pack(side=tk.LEFT, padx=5)

        # Logs panel (hidden by default)
        self.logs_box = tk.Text(self.root, height=6, bg="#1b1b1b", fg="#dddddd", wrap="none")
        self.logs_box.configure(state="disabled")
        self.logs_box.grid(row=1, column=0, sticky="nsew", padx=10, pady=(0, 6))
        self.logs_box.grid_remove()

        # Keyboard shortcuts: 1..4 and Ctrl+R
        self.root.bind("<Key>", self.on_key)

        # Initial paint
        self.controller.refresh()

    # ---------- Collaborators for the controller ----------

    def render(self, snapshot: Snapshot) -> None:
        """
        Purpose: Rewrite every counter and the total from a snapshot.
        Thread-safety: Must run on main thread.
        """
        for phrase, count in snapshot.counts.items():
            button = self.buttons.get(phrase)
            if button is not None:
                button.configure(text=f"{phrase}\n{format_count(count)}")
        self.total_label.configure(text=format_count(snapshot.total))

    def confirm(self, prompt: str) -> bool:
        return messagebox.askyesno(RESET_TITLE, prompt, parent=self.root)

    # ---------- UI callbacks & utilities ----------

    def on_key(self, event) -> None:
        ctrl = bool(event.state & CONTROL_MASK)
        # With Control held, event.char is a control character; keysym keeps the letter
        char = event.keysym if ctrl else event.char
        self.controller.press_key(char or "", ctrl=ctrl)

    def toggle_logs(self) -> None:
        if self.show_logs.get():
            self.logs_box.grid()
        else:
            self.logs_box.grid_remove()

    def append_log(self, text: str) -> None:
        """Thread-safe entry point for the logging handler."""
        self.root.after(0, lambda: self._append_log(text))

    # ---------- internal helper for Logs ----------

    def _append_log(self, text: str) -> None:
        """
        Purpose: Append one line to the Logs panel and trim to LOG_MAX_LINES.
        Thread-safety: Main thread only (called via after()).
        """
        self.logs_box.configure(state="normal")
        self.logs_box.insert("end", text)
        self.logs_box.see("end")
        total_lines = int(self.logs_box.index("end-1c").split(".")[0])
        if total_lines > LOG_MAX_LINES:
            remove = total_lines - LOG_MAX_LINES
            self.logs_box.delete("1.0", f"{remove + 1}.0")
        self.logs_box.configure(state="disabled")
