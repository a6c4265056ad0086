import pytest

from conversion_tool.engine import ConversionEngine, TextBuffer
from conversion_tool.logic import BitWidth, Field

DEC, HEX, BIN, CHR = Field.DECIMAL, Field.HEX, Field.BINARY, Field.CHAR


def _texts(engine):
    return {f: engine.text(f) for f in Field}


# ---------------- Programmatic push ----------------
@pytest.mark.parametrize("value", [0, 97, -97, 1 << 40, -(1 << 63), (1 << 63) - 1])
def test_push_at_64_bits_renders_every_field(engine, value):
    engine.set_value_from_long(value)
    unsigned = value & ((1 << 64) - 1)
    assert engine.text(DEC) == str(value)
    assert engine.text(HEX) == f"0x{unsigned:x}"
    assert engine.text(BIN) == f"0b{unsigned:b}"
    assert engine.value == value
    assert engine.bit_width is BitWidth.W64

def test_push_minus_one_at_32_bits(engine):
    engine.set_value_from_long(-1, 32)
    assert _texts(engine) == {
        DEC: "-1",
        HEX: "0xffffffff",
        BIN: "0b11111111111111111111111111111111",
        CHR: "",
    }
    assert engine.bit_width is BitWidth.W32

def test_push_at_32_bits_masks_high_bits(engine):
    engine.set_value_from_long(0x1_0000_0061, 32)
    assert _texts(engine) == {DEC: "97", HEX: "0x61", BIN: "0b1100001", CHR: "a"}

@pytest.mark.parametrize("value,char", [(127, "\x7f"), (128, ""), (97, "a")])
def test_push_char_visibility_boundary(engine, value, char):
    engine.set_value_from_long(value)
    assert engine.text(CHR) == char

def test_push_with_unsupported_width_is_treated_as_64(engine):
    engine.set_value_from_long(-1, 16)
    assert engine.text(HEX) == "0x" + "f" * 16
    assert engine.bit_width is BitWidth.W64

def test_push_writes_each_field_once_without_cascading(engine):
    engine.set_value_from_long(97)
    for f in Field:
        assert engine.view(f).writes == [engine.text(f)]
    assert not engine.updating

def test_push_before_fields_exist_is_a_no_op():
    engine = ConversionEngine()
    engine.set_value_from_long(97)
    assert engine.value is None

def test_push_with_only_some_fields_bound_is_a_no_op():
    engine = ConversionEngine()
    dec = TextBuffer()
    engine.bind(DEC, dec)
    engine.set_value_from_long(97)
    assert dec.get() == ""


# ---------------- Edit-triggered ----------------
def test_editing_hex_updates_the_other_three_once(engine, type_into):
    type_into(HEX, "0x61")
    assert _texts(engine) == {DEC: "97", HEX: "0x61", BIN: "0b1100001", CHR: "a"}
    assert engine.view(DEC).writes == ["97"]
    assert engine.view(BIN).writes == ["0b1100001"]
    assert engine.view(CHR).writes == ["a"]
    assert engine.view(HEX).writes == ["0x61"]

@pytest.mark.parametrize("text", ["61", "0x61", "0X61"])
def test_hex_prefix_tolerance(engine, type_into, text):
    type_into(HEX, text)
    assert engine.text(DEC) == "97"
    assert engine.text(HEX) == text

def test_negative_hex_negates_the_magnitude(engine, type_into):
    type_into(HEX, "-0x61")
    assert engine.value == -97
    assert engine.text(DEC) == "-97"
    assert engine.text(BIN) == "0b" + format(-97 & ((1 << 64) - 1), "b")
    assert engine.text(CHR) == ""

def test_editing_decimal(engine, type_into):
    type_into(DEC, "97")
    assert _texts(engine) == {DEC: "97", HEX: "0x61", BIN: "0b1100001", CHR: "a"}

def test_editing_binary(engine, type_into):
    type_into(BIN, "0b1000001")
    assert _texts(engine) == {DEC: "65", HEX: "0x41", BIN: "0b1000001", CHR: "A"}

def test_editing_char(engine, type_into):
    type_into(CHR, "a")
    assert _texts(engine) == {DEC: "97", HEX: "0x61", BIN: "0b1100001", CHR: "a"}

def test_non_ascii_char_still_fills_numeric_fields(engine, type_into):
    type_into(CHR, "é")
    assert engine.text(DEC) == "233"
    assert engine.text(HEX) == "0xe9"
    assert engine.text(CHR) == "é"

def test_invalid_decimal_blanks_dependents_and_keeps_typed_text(engine, type_into):
    engine.set_value_from_long(5)
    type_into(DEC, "12a")
    assert _texts(engine) == {DEC: "12a", HEX: "", BIN: "", CHR: ""}
    assert engine.value is None

def test_clearing_char_blanks_numeric_fields(engine, type_into):
    type_into(CHR, "a")
    type_into(CHR, "")
    assert _texts(engine) == {DEC: "", HEX: "", BIN: "", CHR: ""}

def test_out_of_range_decimal_is_a_parse_failure(engine, type_into):
    type_into(DEC, str(1 << 63))
    assert engine.text(HEX) == ""

def test_edit_renders_at_64_bits_after_a_32_bit_push(engine, type_into):
    engine.set_value_from_long(-1, 32)
    type_into(DEC, "-1")
    assert engine.text(HEX) == "0x" + "f" * 16
    assert engine.bit_width is BitWidth.W64

@pytest.mark.parametrize("field", list(Field))
def test_listener_ignores_its_arguments(engine, field):
    engine.set_value_from_long(97)
    listener = engine.listener_for(field)
    listener("PY_VAR0", "", "write")
    listener()
    assert engine.text(DEC) == "97"

def test_same_result_whichever_trigger_fired(engine, type_into):
    type_into(HEX, "0x61")
    first = _texts(engine)
    engine.update_from_hex()
    assert _texts(engine) == first
    engine.listener_for(HEX)("PY_VAR1", "", "write")
    assert _texts(engine) == first

@pytest.mark.parametrize(
    "field,handler,text",
    [
        (DEC, "update_from_decimal", "97"),
        (HEX, "update_from_hex", "0x61"),
        (BIN, "update_from_binary", "0b1100001"),
        (CHR, "update_from_char", "a"),
    ],
)
def test_named_handlers_match_the_tagged_handler(field, handler, text):
    engine = ConversionEngine()
    engine.bind_all({f: TextBuffer(text if f is field else "") for f in Field})
    getattr(engine, handler)()
    assert engine.value == 97
    assert engine.text(DEC) == "97"
    assert engine.text(CHR) == "a"


# ---------------- Reentrancy ----------------
def test_push_during_an_edit_is_ignored(engine, type_into):
    engine.view(BIN).add_listener(lambda: engine.set_value_from_long(5))
    type_into(HEX, "0x61")
    assert engine.text(DEC) == "97"
    assert engine.value == 97

def test_guard_is_released_after_a_handler_raises():
    engine = ConversionEngine()

    class Exploding(TextBuffer):
        def set(self, value):
            raise RuntimeError("widget destroyed")

    for f in Field:
        engine.bind(f, Exploding() if f is CHR else TextBuffer())
    with pytest.raises(RuntimeError):
        engine.set_value_from_long(97)
    assert not engine.updating
    engine.bind(CHR, TextBuffer())
    engine.set_value_from_long(98)
    assert engine.text(CHR) == "b"

def test_clear_blanks_every_field(engine):
    engine.set_value_from_long(97)
    engine.clear()
    assert _texts(engine) == {f: "" for f in Field}
    assert engine.value is None
