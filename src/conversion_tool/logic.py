# conversion_tool/logic.py

from __future__ import annotations

import enum
import re
from typing import Callable, Dict, Optional

INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1
ASCII_MAX = 127

_DECIMAL_RE = re.compile(r"-?[0-9]+")
_HEX_DIGITS_RE = re.compile(r"[0-9A-Fa-f]+")
_BIN_DIGITS_RE = re.compile(r"[01]+")


class BitWidth(enum.IntEnum):
    """Assumed register width used when rendering a pushed value."""
    W32 = 32
    W64 = 64

    @classmethod
    def coerce(cls, bits: int | "BitWidth") -> "BitWidth":
        """Anything that is not 32 is treated as 64."""
        return cls.W32 if int(bits) == 32 else cls.W64


class Field(enum.Enum):
    DECIMAL = "dec"
    HEX = "hex"
    BINARY = "bin"
    CHAR = "char"


class ParseError(ValueError):
    """Raised by a field adapter when its text is not a valid value."""
    def __init__(self, field: Field, text: str, reason: str) -> None:
        super().__init__(f"{field.value}: {reason}: {text!r}")
        self.field = field
        self.text = text
        self.reason = reason


# ---------------- Bit-width policy ----------------
def unsigned_form(value: int, bit_width: int = BitWidth.W64) -> int:
    """Bit pattern of ``value`` masked to ``bit_width`` bits, read unsigned."""
    bits = int(BitWidth.coerce(bit_width))
    return value & ((1 << bits) - 1)

def signed_form(value: int, bit_width: int = BitWidth.W64) -> int:
    """Bit pattern of ``value`` masked to ``bit_width`` bits, read as 2's complement."""
    bits = int(BitWidth.coerce(bit_width))
    u = unsigned_form(value, bits)
    sign_bit = 1 << (bits - 1)
    return u - (1 << bits) if u & sign_bit else u


# ---------------- Sign / prefix handling ----------------
def split_sign(text: str) -> tuple[bool, str]:
    """Strip one leading '-' and report whether it was there."""
    if text.startswith("-"):
        return True, text[1:]
    return False, text

def strip_prefix(text: str, prefix: str) -> str:
    """Drop a case-insensitive radix prefix like '0x' if present."""
    if text[:len(prefix)].lower() == prefix:
        return text[len(prefix):]
    return text


# ---------------- Parsing ----------------
def parse_decimal(text: str) -> int:
    s = text.strip()
    if not _DECIMAL_RE.fullmatch(s):
        raise ParseError(Field.DECIMAL, text, "not a decimal integer")
    val = int(s, 10)
    if not (INT64_MIN <= val <= INT64_MAX):
        raise ParseError(Field.DECIMAL, text, "out of 64-bit range")
    return val

def _parse_magnitude(field: Field, text: str, prefix: str, digits: re.Pattern[str], base: int) -> int:
    negative, body = split_sign(text.strip())
    body = strip_prefix(body, prefix)
    if not digits.fullmatch(body):
        raise ParseError(field, text, f"not a base-{base} number")
    magnitude = int(body, base)
    if magnitude > INT64_MAX:
        raise ParseError(field, text, "out of 64-bit range")
    return -magnitude if negative else magnitude

def parse_hex(text: str) -> int:
    """Parse '[-][0x]digits'; the sign negates the magnitude."""
    return _parse_magnitude(Field.HEX, text, "0x", _HEX_DIGITS_RE, 16)

def parse_binary(text: str) -> int:
    """Parse '[-][0b]digits'; the sign negates the magnitude."""
    return _parse_magnitude(Field.BINARY, text, "0b", _BIN_DIGITS_RE, 2)

def parse_char(text: str) -> Optional[int]:
    """Return the code point of the first character, or None for empty text.

    Surrounding whitespace is trimmed, except when the text is nothing but
    whitespace: then its first character is the value (so ' ' reads as 32).
    """
    if not text:
        return None
    s = text.strip() or text
    return ord(s[0])

def parse_int_maybe(text: str) -> int:
    """Parse an integer accepting 0x/0b/0o prefixes or decimal."""
    s = text.strip().replace("_", "")
    if not s:
        raise ValueError("Enter a number (e.g., 97 or 0x61).")
    return int(s, 0)


# ---------------- Formatting ----------------
def format_decimal(value: int, bit_width: int = BitWidth.W64) -> str:
    return str(signed_form(value, bit_width))

def format_hex(value: int, bit_width: int = BitWidth.W64) -> str:
    return f"0x{unsigned_form(value, bit_width):x}"

def format_binary(value: int, bit_width: int = BitWidth.W64) -> str:
    return f"0b{unsigned_form(value, bit_width):b}"

def format_char(value: int, bit_width: int = BitWidth.W64) -> str:
    u = unsigned_form(value, bit_width)
    return chr(u) if 0 <= u <= ASCII_MAX else ""


PARSERS: Dict[Field, Callable[[str], Optional[int]]] = {
    Field.DECIMAL: parse_decimal,
    Field.HEX: parse_hex,
    Field.BINARY: parse_binary,
    Field.CHAR: parse_char,
}

FORMATTERS: Dict[Field, Callable[[int, int], str]] = {
    Field.DECIMAL: format_decimal,
    Field.HEX: format_hex,
    Field.BINARY: format_binary,
    Field.CHAR: format_char,
}


def parse_field(field: Field, text: str) -> Optional[int]:
    """Parse ``text`` with the adapter for ``field``.

    Returns None only for the Char field's empty "no value" case; every other
    failure raises ``ParseError``.
    """
    return PARSERS[field](text)

def format_field(field: Field, value: int, bit_width: int = BitWidth.W64) -> str:
    return FORMATTERS[field](value, bit_width)

def format_all(value: int, bit_width: int = BitWidth.W64) -> dict[Field, str]:
    """Render ``value`` into all four views at ``bit_width``."""
    return {f: format_field(f, value, bit_width) for f in Field}
