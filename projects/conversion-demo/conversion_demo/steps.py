import logging
from dataclasses import dataclass, field
from typing import Any

from conversion_demo.kinds import DemoState
from conversion_demo.settings import (
    ADDITION_OPERAND_TYPE,
    ADDITION_OPERANDS,
    ADDITION_TARGET_TYPE,
    LOSSLESS_SOURCE_TYPE,
    LOSSLESS_TARGET_TYPE,
    LOSSLESS_VALUE,
    NARROWING_OPERAND_TYPE,
    NARROWING_OPERANDS,
    NARROWING_TARGET_TYPE,
    WIDENING_OPERAND_TYPE,
    WIDENING_OPERANDS,
)
from numeric_core import arithmetic
from numeric_core.conversion import (
    ConversionResult,
    Converted,
    NarrowingAssignmentError,
    Overflowed,
    checked_convert,
    widen,
    wrap,
)
from numeric_core.int_types import IntType, TypedInt
from numeric_core.scope import OverflowContext, checked, unchecked

logger = logging.getLogger("demo")


@dataclass
class StepReport:
    state: DemoState

    # exact output lines of this step, "" is an empty line
    lines: list[str] = field(default_factory=list)

    # named results, e.g. {"product": TypedInt(420, INT)}
    values: dict[str, Any] = field(default_factory=dict)

    # every truncating conversion of this step as (source, target, result)
    wrapped: list[tuple[int, IntType, int]] = field(default_factory=list)


def _sum_line(result: ConversionResult) -> str:
    match result:
        case Converted(value=value):
            return f"sum = {value}"
        case Overflowed(message=message):
            return message
    raise TypeError(f"Unexpected conversion result {result!r}")


def _record_wrap(report: StepReport, result: ConversionResult, source: int, target: IntType):
    if isinstance(result, Converted):
        report.wrapped.append((source, target, result.value.value))


# ---------------------------------------------------------------------------- #
#                                     Steps                                    #
# ---------------------------------------------------------------------------- #


def show_widening(ctx: OverflowContext) -> StepReport:
    """Both shorts are promoted to int before multiplying, nothing is lost."""
    report = StepReport(DemoState.WIDEN)
    x, y = (TypedInt(v, WIDENING_OPERAND_TYPE) for v in WIDENING_OPERANDS)

    product = ctx.multiply(x, y).unwrap()
    report.values["product"] = product
    report.lines.append(f"{x} * {y} = {product}")
    return report


def show_narrowing(ctx: OverflowContext) -> StepReport:
    report = StepReport(DemoState.NARROW)
    x, y = (TypedInt(v, NARROWING_OPERAND_TYPE) for v in NARROWING_OPERANDS)

    product = ctx.multiply(x, y).unwrap()
    report.values["product"] = product

    # storing the int product in a short without an explicit cast is rejected
    try:
        widen(product, NARROWING_TARGET_TYPE)
    except NarrowingAssignmentError as e:
        logger.debug(f"implicit narrowing rejected: {e}")
        report.values["implicit_error"] = e

    # explicit cast that accepts the loss of data
    answer = wrap(product, NARROWING_TARGET_TYPE)
    report.values["answer"] = answer
    report.wrapped.append((product.value, NARROWING_TARGET_TYPE, answer.value))

    report.lines.append("")
    report.lines.append(f"{x} * {y} = {product}")
    report.lines.append(f"{x} * {y} = {answer}")

    # explicit cast without loss of data
    my_int = TypedInt(LOSSLESS_VALUE, LOSSLESS_SOURCE_TYPE)
    byte_result = ctx.convert(my_int, LOSSLESS_TARGET_TYPE)
    _record_wrap(report, byte_result, my_int.value, LOSSLESS_TARGET_TYPE)
    my_byte = byte_result.unwrap()
    report.values["my_byte"] = my_byte

    report.lines.append("")
    report.lines.append(f"Value of myByte: {my_byte}")
    return report


def using_checked(ctx: OverflowContext) -> StepReport:
    """Adds two bytes whose sum does not fit a byte, first in the default mode
    of `ctx`, then twice with overflow checking: once for a single expression
    and once for a whole block of statements.
    """
    report = StepReport(DemoState.CHECKED_ADD)
    b1, b2 = (TypedInt(v, ADDITION_OPERAND_TYPE) for v in ADDITION_OPERANDS)
    total = arithmetic.add(b1, b2).unwrap()

    # sum should hold 350, without checking it holds 94
    default_sum = ctx.convert(total, ADDITION_TARGET_TYPE)
    _record_wrap(report, default_sum, total.value, ADDITION_TARGET_TYPE)
    report.values["default_sum"] = default_sum
    report.lines.append("")
    report.lines.append(_sum_line(default_sum))

    expression_sum = checked_convert(arithmetic.add(b1, b2).unwrap(), ADDITION_TARGET_TYPE)
    report.values["checked_expression_sum"] = expression_sum
    report.lines.append(_sum_line(expression_sum))

    with checked() as block:
        block_total = block.add(b1, b2).unwrap()
        block_sum = block.convert(block_total, ADDITION_TARGET_TYPE)
    report.values["checked_block_sum"] = block_sum
    report.lines.append(_sum_line(block_sum))

    for key in ("checked_expression_sum", "checked_block_sum"):
        if report.values[key].is_overflow():
            logger.info(f"{key}: overflow caught and reported")
    return report


def using_unchecked(ctx: OverflowContext) -> StepReport:
    """Same addition, explicitly unchecked: this always wraps, whatever the
    default mode of `ctx` is.
    """
    report = StepReport(DemoState.UNCHECKED_ADD)
    b1, b2 = (TypedInt(v, ADDITION_OPERAND_TYPE) for v in ADDITION_OPERANDS)

    logger.debug(f"default mode {ctx.mode.value} is overridden by an unchecked block")
    with unchecked() as block:
        total = block.add(b1, b2).unwrap()
        sum_result = block.convert(total, ADDITION_TARGET_TYPE)

    _record_wrap(report, sum_result, total.value, ADDITION_TARGET_TYPE)
    report.values["sum"] = sum_result.unwrap()
    report.lines.append("")
    report.lines.append(_sum_line(sum_result))
    return report


STEPS = {
    DemoState.WIDEN: show_widening,
    DemoState.NARROW: show_narrowing,
    DemoState.CHECKED_ADD: using_checked,
    DemoState.UNCHECKED_ADD: using_unchecked,
}
