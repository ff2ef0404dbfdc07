from numeric_core.int_types import BYTE, INT, SHORT

#
# Widening
#

WIDENING_OPERANDS = (20, 21)
WIDENING_OPERAND_TYPE = SHORT

#
# Narrowing
#

NARROWING_OPERANDS = (2020, 2021)
NARROWING_OPERAND_TYPE = SHORT
NARROWING_TARGET_TYPE = SHORT

# the lossless example: an int that fits into a byte
LOSSLESS_VALUE = 200
LOSSLESS_SOURCE_TYPE = INT
LOSSLESS_TARGET_TYPE = BYTE

#
# Overflow (checked and unchecked addition)
#

ADDITION_OPERANDS = (100, 250)
ADDITION_OPERAND_TYPE = BYTE
ADDITION_TARGET_TYPE = BYTE

#
# Process
#

LOGGER_PREFIX = "Demo"
