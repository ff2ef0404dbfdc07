import logging
from dataclasses import dataclass
from enum import Enum

from numeric_core.int_types import IntType, TypedInt

logger = logging.getLogger("demo")

OVERFLOW_MESSAGE = "Arithmetic operation resulted in an overflow."


class OverflowMode(str, Enum):
    CHECKED = "checked"
    UNCHECKED = "unchecked"


# ---------------------------------------------------------------------------- #
#                                    Errors                                    #
# ---------------------------------------------------------------------------- #


class ArithmeticOverflowError(ArithmeticError):
    def __init__(self, value: int, target: IntType, message: str = OVERFLOW_MESSAGE):
        super().__init__(message)
        self.value = value
        self.target = target


class NarrowingAssignmentError(TypeError):
    """Raised when a value would be narrowed without an explicit conversion."""

    def __init__(self, source: IntType, target: IntType):
        super().__init__(
            f"Cannot implicitly convert type '{source}' to '{target}'. "
            "An explicit conversion exists (are you missing a cast?)"
        )
        self.source = source
        self.target = target


# ---------------------------------------------------------------------------- #
#                                 Result Types                                 #
# ---------------------------------------------------------------------------- #


@dataclass(frozen=True)
class Converted:
    value: TypedInt

    def is_overflow(self) -> bool:
        return False

    def unwrap(self) -> TypedInt:
        return self.value


@dataclass(frozen=True)
class Overflowed:
    # the unconverted value that did not fit into `target`
    value: int
    target: IntType
    message: str = OVERFLOW_MESSAGE

    def is_overflow(self) -> bool:
        return True

    def unwrap(self) -> TypedInt:
        raise ArithmeticOverflowError(self.value, self.target, self.message)


ConversionResult = Converted | Overflowed


# ---------------------------------------------------------------------------- #
#                                  Conversions                                 #
# ---------------------------------------------------------------------------- #


def _raw(value: int | TypedInt) -> int:
    return value.value if isinstance(value, TypedInt) else value


def widen(source: TypedInt, target: IntType) -> TypedInt:
    """Implicit conversion. Only lossless (widening) conversions are allowed,
    anything else has to go through `wrap` or `checked_convert` explicitly.
    """
    if not source.int_type.can_widen_to(target):
        raise NarrowingAssignmentError(source.int_type, target)
    return TypedInt(source.value, target)


def wrap(value: int | TypedInt, target: IntType) -> TypedInt:
    """Explicit truncating conversion: keep the low `target.bits` bits and
    reinterpret them as two's complement if `target` is signed.
    """
    raw = _raw(value)
    low = raw & (target.modulus - 1)
    if target.signed and low > target.max_value:
        low -= target.modulus
    if low != raw:
        logger.debug(f"wrapped {raw} to {target}: {low}")
    return TypedInt(low, target)


def checked_convert(value: int | TypedInt, target: IntType) -> ConversionResult:
    raw = _raw(value)
    if not target.contains(raw):
        logger.debug(f"overflow converting {raw} to {target}")
        return Overflowed(raw, target)
    return Converted(TypedInt(raw, target))


def convert(value: int | TypedInt, target: IntType, mode: OverflowMode) -> ConversionResult:
    match mode:
        case OverflowMode.CHECKED:
            return checked_convert(value, target)
        case OverflowMode.UNCHECKED:
            return Converted(wrap(value, target))
    raise ValueError(f"Unknown overflow mode '{mode}'")
