# conversion_tool/cli.py
from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from . import __version__
from .engine import ConversionEngine, TextBuffer
from .logic import INT64_MAX, INT64_MIN, BitWidth, Field, parse_int_maybe
from .recent_files import PreferenceStore, RecentFilesManager

logger = logging.getLogger(__name__)

FIELD_NAMES = {f.value: f for f in Field}
FIELD_LABELS = {
    Field.DECIMAL: "Dec",
    Field.HEX: "Hex",
    Field.BINARY: "Bin",
    Field.CHAR: "ASCII",
}


# ---------- helpers ----------
def _print_kv(key: str, value: str) -> None:
    print(f"{key}: {value}")

def _headless_engine() -> ConversionEngine:
    """Engine bound to in-memory views that fire listeners like Tk traces."""
    engine = ConversionEngine()
    for field in Field:
        buf = TextBuffer()
        buf.add_listener(engine.listener_for(field))
        engine.bind(field, buf)
    return engine

def _print_fields(engine: ConversionEngine) -> None:
    for field, text in engine.texts().items():
        # repr keeps blanks and whitespace characters visible
        _print_kv(FIELD_LABELS[field], repr(text) if field is Field.CHAR else text)

def _recent_manager(args: argparse.Namespace) -> RecentFilesManager:
    store = PreferenceStore(args.prefs) if args.prefs else PreferenceStore()
    return RecentFilesManager(store)


# ---------- subcommands ----------
def cmd_edit(args: argparse.Namespace) -> int:
    engine = _headless_engine()
    # Writing the edited view fires its listener, exactly like typing into it
    engine.view(FIELD_NAMES[args.field]).set(args.text)
    _print_fields(engine)
    return 0 if engine.value is not None else 1


def cmd_push(args: argparse.Namespace) -> int:
    val = parse_int_maybe(args.value)
    if not (INT64_MIN <= val <= INT64_MAX):
        raise ValueError(f"{args.value} does not fit in a signed 64-bit integer")
    engine = _headless_engine()
    engine.set_value_from_long(val, args.width)
    _print_fields(engine)
    return 0


def cmd_recent(args: argparse.Namespace) -> int:
    manager = _recent_manager(args)
    if args.action == "add":
        for path in args.paths:
            manager.add_recent_file(path)
    elif args.action == "clear":
        manager.clear_recent_files()
    else:
        for path in manager.get_recent_files():
            print(path)
    return 0


def cmd_gui(args: argparse.Namespace) -> int:
    # Imported lazily so the CLI works where Tk is unavailable
    from .gui import run
    run()
    return 0


# ---------- parser ----------
def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="conversion-tool",
        description="Dec ⇆ Hex ⇆ Bin ⇆ ASCII Converter (CLI)"
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    p.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")

    sp = p.add_subparsers(dest="cmd")

    # edit
    pe = sp.add_parser("edit", help="type TEXT into one field and show all four")
    pe.add_argument("field", choices=tuple(FIELD_NAMES), help="field being edited")
    pe.add_argument("text", help="text typed into the field, e.g. 0x61")
    pe.set_defaults(func=cmd_edit)

    # push
    pp = sp.add_parser("push", help="push a value into all four fields")
    pp.add_argument("value", help="number (dec or 0x… / 0b… / 0o…)")
    pp.add_argument(
        "--width", type=int, choices=tuple(int(b) for b in BitWidth), default=64,
        help="register width used for display (default: 64)"
    )
    pp.set_defaults(func=cmd_push)

    # recent
    pr = sp.add_parser("recent", help="show or edit the recent files list")
    pr.add_argument("action", choices=("list", "add", "clear"), nargs="?", default="list")
    pr.add_argument("paths", nargs="*", help="paths for 'add'")
    pr.add_argument("--prefs", default=None, help="preferences file (default: per-user)")
    pr.set_defaults(func=cmd_recent)

    # gui
    pg = sp.add_parser("gui", help="open the converter window")
    pg.set_defaults(func=cmd_gui)

    return p


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not getattr(args, "cmd", None):
        parser.print_help()
        return 0

    logger.debug("Running %s", args.cmd)
    try:
        return args.func(args)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
