# conversion_tool/gui.py

from __future__ import annotations

import logging
import tkinter as tk
import tkinter.messagebox as mbox
from pathlib import Path
from tkinter import filedialog, ttk
from typing import Optional

from .__about__ import APP_TITLE
from .engine import ConversionEngine
from .gui_menu import (
    build_menubar,
    show_about_dialog,
    show_shortcuts_dialog,
)
from .logic import INT64_MAX, INT64_MIN, BitWidth, Field, parse_int_maybe
from .recent_files import RecentFilesManager

logger = logging.getLogger(__name__)


# (label, entry width in chars, tooltip) per field, in layout order
FIELD_LAYOUT: dict[Field, tuple[str, int, str]] = {
    Field.DECIMAL: ("Dec:", 21, "Enter a decimal number (e.g., 97)"),
    Field.HEX: ("Hex:", 19, "Enter a hexadecimal number with or without '0x' prefix (e.g., 0x61)"),
    Field.BINARY: ("Bin:", 34, "Enter a binary number with or without '0b' prefix (e.g., 0b01100001)"),
    Field.CHAR: ("ASCII:", 3, "Enter a single character (e.g., a)"),
}


class Tooltip:
    """Small hover popup attached to a widget."""
    def __init__(self, widget: tk.Widget, text: str) -> None:
        self.widget = widget
        self.text = text
        self.tip: Optional[tk.Toplevel] = None
        if text:
            widget.bind("<Enter>", self._show, add="+")
            widget.bind("<Leave>", self._hide, add="+")

    def _show(self, _event=None) -> None:
        if self.tip or not self.text:
            return
        x = self.widget.winfo_rootx() + self.widget.winfo_width() // 2
        y = self.widget.winfo_rooty() + self.widget.winfo_height() + 6
        self.tip = tk.Toplevel(self.widget.winfo_toplevel())
        self.tip.wm_overrideredirect(True)
        self.tip.wm_geometry(f"+{x}+{y}")
        tk.Label(
            self.tip, text=self.text, background="#ffffe0",
            relief="solid", borderwidth=1, padx=6, pady=3,
        ).pack()

    def _hide(self, _event=None) -> None:
        if self.tip:
            self.tip.destroy()
            self.tip = None


class ConversionToolPanel(ttk.Frame):
    """Four labeled entries (Dec, Hex, Bin, ASCII) kept in sync by an engine."""
    def __init__(self, parent, engine: Optional[ConversionEngine] = None) -> None:
        super().__init__(parent)
        self.engine = engine or ConversionEngine()
        self.vars: dict[Field, tk.StringVar] = {}
        self.entries: dict[Field, ttk.Entry] = {}

        col = 0
        for field, (label, width, tip) in FIELD_LAYOUT.items():
            ttk.Label(self, text=label).grid(row=0, column=col, sticky="w", padx=(0, 4))
            var = tk.StringVar(self)
            entry = ttk.Entry(self, textvariable=var, width=width)
            entry.grid(row=0, column=col + 1, sticky="w", padx=(0, 10))
            Tooltip(entry, tip)
            self.vars[field] = var
            self.entries[field] = entry
            col += 2

        self.engine.bind_all(self.vars)

        # Typing, deleting and pasting all end up as a write on the variable
        for field, var in self.vars.items():
            var.trace_add("write", self.engine.listener_for(field))

    def set_value_from_long(self, value: int, bit_width: int = BitWidth.W64) -> None:
        self.engine.set_value_from_long(value, bit_width)

    def clear(self) -> None:
        self.engine.clear()


def create_panel(parent, engine: Optional[ConversionEngine] = None) -> ConversionToolPanel:
    return ConversionToolPanel(parent, engine)


class ConverterApp:
    """Tkinter window hosting the conversion panel, its menu and value loading."""

    def __init__(self, root: tk.Tk, recent: Optional[RecentFilesManager] = None) -> None:
        self.root = root
        root.title(APP_TITLE)
        root.minsize(760, 120)

        self.recent = recent or RecentFilesManager()

        self.main = ttk.Frame(root, padding=12)
        self.main.grid(row=0, column=0, sticky="nsew")
        root.columnconfigure(0, weight=1)
        root.rowconfigure(0, weight=1)

        self.bit_width_var = tk.IntVar(value=int(BitWidth.W64))

        build_menubar(self.root, self)
        self._build_controls_bar(row=0)

        ttk.Separator(self.main, orient="horizontal").grid(
            row=1, column=0, columnspan=2, sticky="ew", pady=(8, 10)
        )

        self.panel = create_panel(self.main)
        self.panel.grid(row=2, column=0, columnspan=2, sticky="w")

        self.error_var = tk.StringVar()
        ttk.Label(self.main, textvariable=self.error_var, foreground="#8B0000").grid(
            row=3, column=0, columnspan=2, sticky="w", pady=(6, 0)
        )

        self.panel.entries[Field.DECIMAL].focus()

    # ----------------- Controls bar -----------------
    def _build_controls_bar(self, row: int) -> None:
        ttk.Label(self.main, text="Loaded value width:").grid(row=row, column=0, sticky="w", padx=(0, 8))
        width_frame = ttk.Frame(self.main)
        width_frame.grid(row=row, column=1, sticky="w")
        for bits in BitWidth:
            ttk.Radiobutton(
                width_frame,
                text=f"{int(bits)}-bit",
                value=int(bits),
                variable=self.bit_width_var,
            ).pack(side="left", padx=(0, 10))

    def _set_bit_width(self, bits: int) -> None:
        self.bit_width_var.set(int(BitWidth.coerce(bits)))

    def _clear_fields(self) -> None:
        self.panel.clear()
        self.error_var.set("")

    def _show_about(self):
        show_about_dialog(self, self.root)

    def _show_shortcuts(self):
        show_shortcuts_dialog(self, self.root)

    def _set_error_state(self, msg: str) -> None:
        self.error_var.set(msg)

    # ----------------- Value loading -----------------
    def _load_value(self) -> None:
        path = filedialog.askopenfilename(parent=self.root, title="Load Value")
        if path:
            self.load_value_from(path)

    def load_value_from(self, path: str) -> bool:
        """Push the first integer literal in ``path`` into the panel."""
        try:
            text = Path(path).read_text(encoding="utf-8")
            tokens = text.split()
            value = parse_int_maybe(tokens[0] if tokens else "")
            if not (INT64_MIN <= value <= INT64_MAX):
                raise ValueError(f"{value} does not fit in 64 bits")
        except (OSError, ValueError) as exc:
            logger.warning("Could not load value from %s: %s", path, exc)
            msg = f"{Path(path).name}: {exc}"
            self._set_error_state(msg)
            mbox.showerror("Load Value", msg, parent=self.root)
            return False

        self.panel.set_value_from_long(value, self.bit_width_var.get())
        self.recent.add_recent_file(path)
        self.error_var.set("")
        return True

    def _populate_recent_menu(self, menu: tk.Menu) -> None:
        menu.delete(0, "end")
        files = self.recent.get_recent_files()
        if not files:
            menu.add_command(label="(none)", state="disabled")
            return
        for path in files:
            menu.add_command(label=path, command=lambda p=path: self.load_value_from(p))

    def _clear_recent(self) -> None:
        self.recent.clear_recent_files()


def run() -> None:
    root = tk.Tk()
    ConverterApp(root)
    root.mainloop()


def main() -> None:
    run()


if __name__ == "__main__":
    main()
