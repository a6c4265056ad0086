# conversion_tool/gui_menu.py

from __future__ import annotations

import platform
import tkinter as tk
import tkinter.messagebox as mbox

from .__about__ import APP_NAME, about_text


# Declarative menu spec.
# "shortcut" can be a string like "MOD+L" or a list of them (e.g., ["MOD+R", "F5"]).
# Valid tokens: MOD, CTRL, CMD, ALT, SHIFT, letters (A-Z), numbers (0-9),
# named keys like ENTER, ESC, F1-F24, UP, DOWN, LEFT, RIGHT, SPACE, etc.
# A "submenu" item is filled by calling the named app method with the tk.Menu
# each time it is posted.
MENU_SPEC = [
    {
        "menu": "File",
        "items": [
            {
                "label": "Load Value…",
                "command": "_load_value",
                "shortcut": "MOD+O",
            },
            {
                "type": "submenu",
                "label": "Open Recent",
                "populate": "_populate_recent_menu",
            },
            {
                "label": "Clear Recent",
                "command": "_clear_recent",
            },
        ],
    },
    {
        "menu": "View",
        "items": [
            {
                "label": "32-bit Width",
                "command": "_set_bit_width",
                "command_args": [32],
                "shortcut": "MOD+3",
            },
            {
                "label": "64-bit Width",
                "command": "_set_bit_width",
                "command_args": [64],
                "shortcut": "MOD+6",
            },
            {
                "type": "separator",
            },
            {
                "label": "Clear Fields",
                "command": "_clear_fields",
                "shortcut": "MOD+K",
            },
        ],
    },
    {
        "menu": "Help",
        "items": [
            {
                "label": "About",
                "command": "_show_about",
            },
            {
                "label": "Shortcuts…",
                "command": "_show_shortcuts",
            },
        ],
    },
]

def _platform_keycfg():
    """
    Platform-aware names for Tk bindings and user-facing labels.
    Also exposes explicit CTRL/CMD/ALT/SHIFT tokens in addition to MOD.
    """
    if platform.system() == "Darwin":
        return {
            "MOD": "Command",     "MOD_LABEL": "Cmd",
            "CTRL": "Control",    "CTRL_LABEL": "Ctrl",
            "CMD": "Command",     "CMD_LABEL": "Cmd",
            "ALT": "Option",      "ALT_LABEL": "Opt",
            "SHIFT": "Shift",     "SHIFT_LABEL": "Shift",
        }
    return {
        "MOD": "Control",     "MOD_LABEL": "Ctrl",
        "CTRL": "Control",    "CTRL_LABEL": "Ctrl",
        "CMD": "Control",     "CMD_LABEL": "Ctrl",  # no Command key off macOS
        "ALT": "Alt",         "ALT_LABEL": "Alt",
        "SHIFT": "Shift",     "SHIFT_LABEL": "Shift",
    }

KEYSYM_MAP = {
    "ENTER":  ("Enter",  "Return"),
    "RETURN": ("Return", "Return"),
    "ESC":    ("Esc",    "Escape"),
    "ESCAPE": ("Escape", "Escape"),
    "SPACE":  ("Space",  "space"),
    "TAB":    ("Tab",    "Tab"),
    "BACKSPACE": ("Backspace", "BackSpace"),
    "DELETE": ("Delete", "Delete"),
    "UP":     ("Up",     "Up"),
    "DOWN":   ("Down",   "Down"),
    "LEFT":   ("Left",   "Left"),
    "RIGHT":  ("Right",  "Right"),
    **{f"F{i}": (f"F{i}", f"F{i}") for i in range(1, 25)},
    "COMMA":  (",", "comma"),
    "PERIOD": (".", "period"),
    "SLASH":  ("/", "slash"),
    "MINUS":  ("-", "minus"),
}

MOD_TOKENS = ("MOD", "CTRL", "CMD", "ALT", "SHIFT")

def _resolve_shortcut(shortcut: str, keycfg: dict[str, str]) -> tuple[str, str]:
    """
    Convert tokenized shortcuts (e.g., 'MOD+SHIFT+K') into:
      - a menu accelerator label (e.g., 'Cmd+Shift+K')
      - a Tk binding sequence (e.g., '<Command-Shift-k>')
    """
    parts = [p.strip().upper() for p in shortcut.split("+") if p.strip()]

    mods: list[str] = []
    key_token: str | None = None
    for up in parts:
        if up in MOD_TOKENS:
            if up not in mods:
                mods.append(up)
        else:
            key_token = up  # last non-mod wins

    # CMD/CTRL are explicit; MOD is dropped alongside them
    has_cmdctrl = "CMD" in mods or "CTRL" in mods
    order = ["CMD", "CTRL", "ALT", "SHIFT"] if has_cmdctrl else ["MOD", "ALT", "SHIFT"]

    label_parts = [keycfg.get(f"{m}_LABEL", m.title()) for m in order if m in mods]
    bind_parts = [keycfg.get(m, m.title()) for m in order if m in mods]

    if key_token is not None:
        if key_token in KEYSYM_MAP:
            nice_label, keysym = KEYSYM_MAP[key_token]
        elif len(key_token) == 1:
            nice_label, keysym = key_token.upper(), key_token.lower()
        else:
            nice_label, keysym = key_token.title(), key_token
        label_parts.append(nice_label)
        bind_parts.append(keysym)

    label = "+".join(label_parts)
    bind = "<" + "-".join(bind_parts) + ">" if bind_parts else ""
    return label, bind

def _case_variants(bind_seq: str) -> set[str]:
    """Upper/lower variants of a letter binding so Caps Lock doesn't matter."""
    variants = {bind_seq}
    parts = bind_seq[1:-1].split("-")
    key = parts[-1]
    if len(key) == 1 and key.isalpha():
        for k in (key.lower(), key.upper()):
            variants.add("<" + "-".join(parts[:-1] + [k]) + ">")
    return variants

def build_menubar(root: tk.Tk, app: object, spec: list[dict] = MENU_SPEC) -> tk.Menu:
    """
    Create and attach a menubar to `root` using `spec`, binding shortcuts to methods on `app`.
    Returns the created menubar.
    """
    keycfg = _platform_keycfg()
    menubar = tk.Menu(root)
    root.config(menu=menubar)

    for menu_def in spec:
        m = tk.Menu(menubar, tearoff=False)
        menubar.add_cascade(label=menu_def["menu"], menu=m)

        for item in menu_def.get("items", []):
            kind = item.get("type")
            if kind == "separator":
                m.add_separator()
                continue

            if kind == "submenu":
                sub = tk.Menu(m, tearoff=False)
                populate = getattr(app, item["populate"], None)
                if populate is not None:
                    sub.configure(postcommand=lambda fn=populate, menu=sub: fn(menu))
                m.add_cascade(label=item["label"], menu=sub)
                continue

            command = getattr(app, item["command"], None) or (lambda *a, **k: None)
            cmd_args = item.get("command_args", [])
            cmd_kwargs = item.get("command_kwargs", {})

            def invoke(fn=command, args=cmd_args, kwargs=cmd_kwargs):
                fn(*args, **kwargs)

            accel_for_menu = ""
            sc = item.get("shortcut")
            shortcuts = sc if isinstance(sc, (list, tuple)) else ([sc] if sc else [])
            for idx, s in enumerate(shortcuts):
                accel_label, bind_seq = _resolve_shortcut(s, keycfg)
                if idx == 0:
                    accel_for_menu = accel_label
                if not bind_seq:
                    continue
                for v in _case_variants(bind_seq):
                    root.bind_all(v, lambda e, inv=invoke: (inv(), "break"))

            m.add_command(label=item["label"], command=invoke, accelerator=accel_for_menu)

    return menubar

def show_about_dialog(app, root):
    mbox.showinfo(f"About {APP_NAME}", about_text(), parent=root)

def shortcut_lines(keycfg: dict[str, str], spec: list[dict] = MENU_SPEC) -> list[str]:
    """'Label: Accel' lines for every menu item that has a shortcut."""
    lines = []
    for menu in spec:
        for item in menu.get("items", []):
            shortcut = item.get("shortcut")
            if not shortcut:
                continue
            shortcuts = shortcut if isinstance(shortcut, (list, tuple)) else [shortcut]
            labels = [_resolve_shortcut(s, keycfg)[0] for s in shortcuts]
            lines.append(f"{item['label']}: {', '.join(labels)}")
    return lines

def show_shortcuts_dialog(app, root):
    """
    Show a popup with the list of shortcuts from MENU_SPEC.
    """
    lines = shortcut_lines(_platform_keycfg())
    mbox.showinfo("Keyboard Shortcuts", "\n".join(lines), parent=root)
