import logging
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator

from numeric_core import arithmetic
from numeric_core.conversion import ConversionResult, OverflowMode, convert
from numeric_core.int_types import IntType, TypedInt

logger = logging.getLogger("demo")


@dataclass(frozen=True)
class OverflowContext:
    """Carries an overflow mode over a block of statements.

    There is no process-wide switch: code that should honor a mode receives
    the context it runs in.
    """

    mode: OverflowMode

    def convert(self, value: int | TypedInt, target: IntType) -> ConversionResult:
        return convert(value, target, self.mode)

    def add(self, x: int | TypedInt, y: int | TypedInt) -> ConversionResult:
        return arithmetic.add(x, y, self.mode)

    def multiply(self, x: int | TypedInt, y: int | TypedInt) -> ConversionResult:
        return arithmetic.multiply(x, y, self.mode)


@contextmanager
def overflow_scope(mode: OverflowMode) -> Iterator[OverflowContext]:
    logger.debug(f"enter {mode.value} scope")
    try:
        yield OverflowContext(mode)
    finally:
        logger.debug(f"leave {mode.value} scope")


def checked():
    return overflow_scope(OverflowMode.CHECKED)


def unchecked():
    return overflow_scope(OverflowMode.UNCHECKED)
