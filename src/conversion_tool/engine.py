# conversion_tool/engine.py

"""Keeps the decimal, hex, binary and char views of one value in sync.

The engine knows nothing about Tk. A view is anything with ``get()`` and
``set(text)``; ``tk.StringVar`` qualifies, and so does ``TextBuffer`` below,
which the CLI and the tests use.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Callable, Dict, Iterator, Optional, Protocol

from .logic import (
    BitWidth,
    Field,
    ParseError,
    format_field,
    parse_field,
)

logger = logging.getLogger(__name__)


class TextView(Protocol):
    def get(self) -> str: ...
    def set(self, value: str) -> None: ...


class TextBuffer:
    """In-memory text view that notifies listeners on every write."""
    def __init__(self, text: str = "") -> None:
        self._text = text
        self._listeners: list[Callable[[], None]] = []

    def get(self) -> str:
        return self._text

    def set(self, value: str) -> None:
        self._text = value
        for listener in list(self._listeners):
            listener()

    def add_listener(self, listener: Callable[[], None]) -> None:
        self._listeners.append(listener)


class ReentrancyGuard:
    """Latch that stops a sync cascade from re-entering itself."""
    def __init__(self) -> None:
        self._held = False

    @property
    def held(self) -> bool:
        return self._held

    @contextmanager
    def enter(self) -> Iterator[bool]:
        """Yield True if the guard was acquired, False if it was already held.

        The latch is released on every exit path when this call acquired it.
        """
        if self._held:
            yield False
            return
        self._held = True
        try:
            yield True
        finally:
            self._held = False


class ConversionEngine:
    """Owns the four field views and the update protocol between them."""

    def __init__(self) -> None:
        self._views: Dict[Field, TextView] = {}
        self._guard = ReentrancyGuard()
        self.value: Optional[int] = None
        self.bit_width = BitWidth.W64

    # ----------------- Wiring -----------------
    def bind(self, field: Field, view: TextView) -> None:
        self._views[field] = view

    def bind_all(self, views: Dict[Field, TextView]) -> None:
        for field, view in views.items():
            self.bind(field, view)

    @property
    def is_bound(self) -> bool:
        return all(f in self._views for f in Field)

    @property
    def updating(self) -> bool:
        return self._guard.held

    def view(self, field: Field) -> TextView:
        return self._views[field]

    def text(self, field: Field) -> str:
        return self._views[field].get()

    def texts(self) -> dict[Field, str]:
        return {f: self._views[f].get() for f in Field}

    def listener_for(self, field: Field) -> Callable[..., None]:
        """Callback for any text-change trigger of ``field``.

        Accepts and ignores whatever arguments the toolkit passes, so the
        same callable serves Tk traces and plain listeners alike.
        """
        return lambda *_: self.update_from(field)

    # ----------------- Edit-triggered -----------------
    def update_from(self, field: Field) -> None:
        """Re-render the other three views from the text of ``field``."""
        if not self.is_bound:
            return
        with self._guard.enter() as entered:
            if not entered:
                return
            others = [f for f in Field if f is not field]
            try:
                value = parse_field(field, self._views[field].get())
            except ParseError as exc:
                logger.debug("Blanking dependent fields: %s", exc)
                value = None

            self.value = value
            self.bit_width = BitWidth.W64
            for f in others:
                text = "" if value is None else format_field(f, value, BitWidth.W64)
                self._views[f].set(text)

    def update_from_decimal(self) -> None:
        self.update_from(Field.DECIMAL)

    def update_from_hex(self) -> None:
        self.update_from(Field.HEX)

    def update_from_binary(self) -> None:
        self.update_from(Field.BINARY)

    def update_from_char(self) -> None:
        self.update_from(Field.CHAR)

    # ----------------- Programmatic push -----------------
    def set_value_from_long(self, value: int, bit_width: int = BitWidth.W64) -> None:
        """Render ``value`` into all four views at ``bit_width``.

        No-op if the views are not bound yet or an update is in flight.
        """
        if not self.is_bound:
            return
        width = BitWidth.coerce(bit_width)
        if int(bit_width) != int(width):
            logger.debug("Unsupported bit width %r, using %d", bit_width, width)
        with self._guard.enter() as entered:
            if not entered:
                return
            self.value = value
            self.bit_width = width
            for f in Field:
                self._views[f].set(format_field(f, value, width))

    def clear(self) -> None:
        """Blank all four views."""
        if not self.is_bound:
            return
        with self._guard.enter() as entered:
            if not entered:
                return
            self.value = None
            for f in Field:
                self._views[f].set("")
