from dataclasses import dataclass


@dataclass(frozen=True)
class IntType:
    literal: str
    bits: int
    signed: bool

    @property
    def modulus(self) -> int:
        return 1 << self.bits

    @property
    def min_value(self) -> int:
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def max_value(self) -> int:
        return (1 << (self.bits - 1)) - 1 if self.signed else (1 << self.bits) - 1

    def contains(self, value: int) -> bool:
        return self.min_value <= value <= self.max_value

    def can_widen_to(self, other: "IntType") -> bool:
        """True if every value of this type is representable in `other`."""
        return other.min_value <= self.min_value and self.max_value <= other.max_value

    def __str__(self) -> str:
        return self.literal


# --- Fixed-Width Integer Types ---

SBYTE = IntType("sbyte", 8, True)
BYTE = IntType("byte", 8, False)
SHORT = IntType("short", 16, True)
USHORT = IntType("ushort", 16, False)
INT = IntType("int", 32, True)
UINT = IntType("uint", 32, False)
LONG = IntType("long", 64, True)
ULONG = IntType("ulong", 64, False)

LITERAL_TO_INT_TYPE = {
    "sbyte": SBYTE,
    "byte": BYTE,
    "short": SHORT,
    "ushort": USHORT,
    "int": INT,
    "uint": UINT,
    "long": LONG,
    "ulong": ULONG,
}

SIGNED_TYPES = [t for t in LITERAL_TO_INT_TYPE.values() if t.signed]
UNSIGNED_TYPES = [t for t in LITERAL_TO_INT_TYPE.values() if not t.signed]


def int_type_from_literal(literal: str) -> IntType:
    if literal not in LITERAL_TO_INT_TYPE:
        raise ValueError(f"Unknown integer type '{literal}'")
    return LITERAL_TO_INT_TYPE[literal]


@dataclass(frozen=True)
class TypedInt:
    value: int
    int_type: IntType

    def __post_init__(self):
        # a typed value never wraps on construction, use the conversion module for that
        if not self.int_type.contains(self.value):
            raise ValueError(
                f"TypedInt value {self.value} out of range "
                f"[{self.int_type.min_value}, {self.int_type.max_value}] for {self.int_type}"
            )

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)
