from numeric_core.conversion import ConversionResult, OverflowMode, convert, widen
from numeric_core.int_types import INT, TypedInt


def _promote(operand: int | TypedInt) -> TypedInt:
    # narrow operands are promoted to int before any arithmetic happens
    if isinstance(operand, TypedInt):
        return widen(operand, INT)
    return TypedInt(operand, INT)


def add(
    x: int | TypedInt, y: int | TypedInt, mode: OverflowMode = OverflowMode.UNCHECKED
) -> ConversionResult:
    return convert(_promote(x).value + _promote(y).value, INT, mode)


def multiply(
    x: int | TypedInt, y: int | TypedInt, mode: OverflowMode = OverflowMode.UNCHECKED
) -> ConversionResult:
    return convert(_promote(x).value * _promote(y).value, INT, mode)
