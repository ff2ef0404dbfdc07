import pytest

from numeric_core.int_types import (
    BYTE,
    INT,
    LONG,
    SBYTE,
    SHORT,
    UINT,
    ULONG,
    USHORT,
    TypedInt,
    int_type_from_literal,
)


@pytest.mark.parametrize(
    "int_type, min_value, max_value",
    [
        (SBYTE, -128, 127),
        (BYTE, 0, 255),
        (SHORT, -32768, 32767),
        (USHORT, 0, 65535),
        (INT, -(2**31), 2**31 - 1),
        (UINT, 0, 2**32 - 1),
        (LONG, -(2**63), 2**63 - 1),
        (ULONG, 0, 2**64 - 1),
    ],
)
def test_ranges(int_type, min_value, max_value):
    assert int_type.min_value == min_value
    assert int_type.max_value == max_value
    assert int_type.contains(min_value)
    assert int_type.contains(max_value)
    assert not int_type.contains(min_value - 1)
    assert not int_type.contains(max_value + 1)


def test_can_widen_to():
    assert SHORT.can_widen_to(INT)
    assert BYTE.can_widen_to(SHORT)
    assert BYTE.can_widen_to(UINT)
    assert INT.can_widen_to(INT)

    assert not INT.can_widen_to(SHORT)
    assert not INT.can_widen_to(BYTE)
    # a sign is never representable in an unsigned type
    assert not SBYTE.can_widen_to(ULONG)
    assert not UINT.can_widen_to(INT)


def test_typed_int_rejects_out_of_range():
    assert TypedInt(200, BYTE).value == 200
    with pytest.raises(ValueError):
        TypedInt(350, BYTE)
    with pytest.raises(ValueError):
        TypedInt(-1, BYTE)


def test_int_type_from_literal():
    assert int_type_from_literal("short") is SHORT
    with pytest.raises(ValueError):
        int_type_from_literal("int128")
