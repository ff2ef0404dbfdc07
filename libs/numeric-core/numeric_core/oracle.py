import logging

import numpy as np

from numeric_core.int_types import IntType, TypedInt

logger = logging.getLogger("demo")

INT_TYPE_TO_DTYPE = {
    "sbyte": np.int8,
    "byte": np.uint8,
    "short": np.int16,
    "ushort": np.uint16,
    "int": np.int32,
    "uint": np.uint32,
    "long": np.int64,
    "ulong": np.uint64,
}


class NumpyOracle:
    """Ground truth for truncating conversions, computed with numpy's
    fixed-width dtypes instead of our own bit masking.
    """

    def wrap(self, value: int, target: IntType) -> int:
        if target.literal not in INT_TYPE_TO_DTYPE:
            raise ValueError(f"No numpy dtype for {target}")
        # go through a 64-bit buffer, astype between integer dtypes keeps the low bits
        source = np.array([value & 0xFFFFFFFFFFFFFFFF], dtype=np.uint64)
        return int(source.astype(INT_TYPE_TO_DTYPE[target.literal])[0])

    def verify(self, value: int, target: IntType, observed: int | TypedInt) -> bool:
        observed_value = observed.value if isinstance(observed, TypedInt) else observed
        expected = self.wrap(value, target)
        if expected != observed_value:
            logger.error(
                f"oracle mismatch for {value} -> {target}: expected {expected}, got {observed_value}"
            )
            return False
        logger.debug(f"oracle agrees on {value} -> {target}: {expected}")
        return True
