import pytest

from conversion_tool.logic import BitWidth, signed_form, unsigned_form

M32 = (1 << 32) - 1
M64 = (1 << 64) - 1


@pytest.mark.parametrize(
    "value,bits,expected",
    [
        (0, 32, 0),
        (97, 32, 97),
        (-1, 32, M32),
        (-1, 64, M64),
        (0x1_0000_0061, 32, 0x61),
        (0x1_0000_0061, 64, 0x1_0000_0061),
        (-(1 << 63), 64, 1 << 63),
    ],
)
def test_unsigned_form_masks_to_width(value, bits, expected):
    assert unsigned_form(value, bits) == expected


@pytest.mark.parametrize(
    "value,bits,expected",
    [
        (-1, 32, -1),
        (0xFFFF_FFFF, 32, -1),
        (0x8000_0000, 32, -(1 << 31)),
        (0x7FFF_FFFF, 32, (1 << 31) - 1),
        (0x1_0000_0061, 32, 0x61),
        (-5, 64, -5),
        ((1 << 63) - 1, 64, (1 << 63) - 1),
        (-(1 << 63), 64, -(1 << 63)),
    ],
)
def test_signed_form_sign_extends_from_width(value, bits, expected):
    assert signed_form(value, bits) == expected


@pytest.mark.parametrize("value", [0, 1, -1, 12345, -(1 << 63), (1 << 63) - 1])
def test_64_bit_forms_share_the_raw_bit_pattern(value):
    assert signed_form(value, 64) == value
    assert unsigned_form(value, 64) == value & M64


@pytest.mark.parametrize("bits,expected", [(32, BitWidth.W32), (64, BitWidth.W64), (16, BitWidth.W64), (0, BitWidth.W64)])
def test_bit_width_coerce(bits, expected):
    assert BitWidth.coerce(bits) is expected
