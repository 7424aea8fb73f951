"""
calculators/
------------
Bitwise reducers and base converters over typed number lists.

    from calculators import compute_xor_list, dec_to_binary, CalculatorError
"""

from calculators.bitwise import (
    CalculatorError,
    CalcResult,
    ConversionResult,
    OPERATIONS,
    parse_plain_list,
    compute_and_list,
    compute_or_list,
    compute_xor_list,
    dec_to_binary,
    bin_to_decimal,
)

__all__ = [
    "CalculatorError",
    "CalcResult",
    "ConversionResult",
    "OPERATIONS",
    "parse_plain_list",
    "compute_and_list",
    "compute_or_list",
    "compute_xor_list",
    "dec_to_binary",
    "bin_to_decimal",
]
