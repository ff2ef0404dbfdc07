import pytest

from numeric_core.arithmetic import add, multiply
from numeric_core.conversion import (
    OVERFLOW_MESSAGE,
    ArithmeticOverflowError,
    Converted,
    NarrowingAssignmentError,
    OverflowMode,
    Overflowed,
    checked_convert,
    convert,
    widen,
    wrap,
)
from numeric_core.int_types import BYTE, INT, SBYTE, SHORT, TypedInt
from numeric_core.scope import OverflowContext, checked, overflow_scope, unchecked


def test_widening_multiply_never_fails():
    x, y = TypedInt(20, SHORT), TypedInt(21, SHORT)
    for mode in OverflowMode:
        result = multiply(x, y, mode)
        assert isinstance(result, Converted)
        assert result.unwrap() == TypedInt(420, INT)


def test_implicit_narrowing_is_rejected():
    product = multiply(TypedInt(2020, SHORT), TypedInt(2021, SHORT)).unwrap()
    assert product.value == 4_082_420
    with pytest.raises(NarrowingAssignmentError) as exc_info:
        widen(product, SHORT)
    assert isinstance(exc_info.value, TypeError)
    assert widen(TypedInt(21, SHORT), INT) == TypedInt(21, INT)


@pytest.mark.parametrize(
    "value, target, expected",
    [
        (4_082_420, SHORT, 19188),
        (4_084_420, SHORT, 21188),
        (53_444, SHORT, -12092),
        (350, BYTE, 94),
        (200, BYTE, 200),
        (200, SBYTE, -56),
        (-1, BYTE, 255),
        (2**31, INT, -(2**31)),
    ],
)
def test_wrap(value, target, expected):
    assert wrap(value, target) == TypedInt(expected, target)


def test_lossless_byte_conversion():
    result = checked_convert(TypedInt(200, INT), BYTE)
    assert result == Converted(TypedInt(200, BYTE))
    assert convert(200, BYTE, OverflowMode.UNCHECKED).unwrap().value == 200


def test_unchecked_add_wraps_every_time():
    b1, b2 = TypedInt(100, BYTE), TypedInt(250, BYTE)
    for _ in range(3):
        total = add(b1, b2).unwrap()
        assert total == TypedInt(350, INT)
        assert convert(total, BYTE, OverflowMode.UNCHECKED).unwrap().value == 94


def test_checked_expression_reports_overflow():
    result = checked_convert(add(100, 250).unwrap(), BYTE)
    assert isinstance(result, Overflowed)
    assert result.is_overflow()
    assert result.value == 350
    assert result.message == OVERFLOW_MESSAGE

    with pytest.raises(ArithmeticOverflowError) as exc_info:
        result.unwrap()
    assert str(exc_info.value) == OVERFLOW_MESSAGE
    assert exc_info.value.target is BYTE


def test_checked_block_matches_expression_form():
    b1, b2 = TypedInt(100, BYTE), TypedInt(250, BYTE)
    expression = checked_convert(add(b1, b2).unwrap(), BYTE)
    with checked() as ctx:
        block = ctx.convert(ctx.add(b1, b2).unwrap(), BYTE)
    assert block == expression
    assert block.is_overflow()


def test_unchecked_block_never_overflows():
    with unchecked() as ctx:
        assert ctx.mode == OverflowMode.UNCHECKED
        result = ctx.convert(ctx.add(100, 250).unwrap(), BYTE)
    assert result == Converted(TypedInt(94, BYTE))


def test_int_arithmetic_overflow():
    big = INT.max_value
    assert add(big, 1).unwrap().value == INT.min_value
    assert add(big, 1, OverflowMode.CHECKED).is_overflow()
    assert OverflowContext(OverflowMode.CHECKED).multiply(big, 2).is_overflow()


def test_scopes_do_not_leak():
    with overflow_scope(OverflowMode.CHECKED) as outer:
        with unchecked() as inner:
            assert inner.convert(300, BYTE).unwrap().value == 44
        assert outer.convert(300, BYTE).is_overflow()
    # nothing global changed
    assert convert(300, BYTE, OverflowMode.UNCHECKED).unwrap().value == 44
