"""
bitwise.py — Number List Calculators
=====================================
Small reducers over a list of typed numbers, plus decimal ↔ binary.

    "12, 10 0x6"  → AND = 0, OR = 14, XOR = 0

Tokens go through the same normalizer as edge weights, but here a bad
token is fatal: the whole input is rejected with a message naming it.
Python ints are unbounded, so there is no 32-bit wrap-around.
"""

import re
from dataclasses import dataclass
from typing import Callable, List, Optional

from graph.tokens import parse_number_token

_SPLIT_RE  = re.compile(r"[, \t]+")
_BINARY_RE = re.compile(r"^[01]+$")


class CalculatorError(ValueError):
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


@dataclass(frozen=True)
class CalcResult:
    result: int
    inputs: List[int]

    def to_dict(self) -> dict:
        return {"result": self.result, "inputs": list(self.inputs)}


@dataclass(frozen=True)
class ConversionResult:
    input:  str
    output: str

    def to_dict(self) -> dict:
        return {"input": self.input, "output": self.output}


def _tokens(raw: Optional[str]) -> List[str]:
    if raw is None:
        raise CalculatorError("No input")
    return [t.strip() for t in _SPLIT_RE.split(str(raw)) if t.strip()]


def parse_plain_list(raw: Optional[str]) -> List[int]:
    tokens = _tokens(raw)
    if not tokens:
        raise CalculatorError("No numbers found")

    nums = []
    for tok in tokens:
        n = parse_number_token(tok)
        if n is None:
            raise CalculatorError(f'Invalid token: "{tok}"')
        nums.append(n)
    return nums


def _combine(raw: Optional[str], reducer: Callable[[int, int], int]) -> CalcResult:
    nums = parse_plain_list(raw)
    acc  = nums[0]
    for n in nums[1:]:
        acc = reducer(acc, n)
    return CalcResult(result=acc, inputs=nums)


def compute_and_list(raw: Optional[str]) -> CalcResult:
    return _combine(raw, lambda a, b: a & b)


def compute_or_list(raw: Optional[str]) -> CalcResult:
    return _combine(raw, lambda a, b: a | b)


def compute_xor_list(raw: Optional[str]) -> CalcResult:
    return _combine(raw, lambda a, b: a ^ b)


def _first_token(raw: Optional[str]) -> str:
    tokens = _tokens(raw)
    if not tokens:
        raise CalculatorError("No input")
    return tokens[0]


def dec_to_binary(raw: Optional[str]) -> ConversionResult:
    """First token only.  Negative numbers come back as "-" + bin(|n|)."""
    first = _first_token(raw)
    n = parse_number_token(first)
    if n is None:
        raise CalculatorError(f'Invalid number: "{first}"')
    binary = format(abs(n), "b")
    return ConversionResult(input=str(n), output=f"-{binary}" if n < 0 else binary)


def bin_to_decimal(raw: Optional[str]) -> ConversionResult:
    """First token only.  Accepts "1010", "0b1010", "-0b11", "+101"."""
    first    = _first_token(raw)
    sign     = -1 if first[0] == "-" else 1
    unsigned = first[1:] if first[0] in "+-" else first
    digits   = unsigned[2:] if unsigned[:2] in ("0b", "0B") else unsigned

    if not _BINARY_RE.match(digits):
        raise CalculatorError(f'Invalid binary token: "{first}"')
    return ConversionResult(input=first, output=str(sign * int(digits, 2)))


# op name → function, for the /api/calc/<op> route
OPERATIONS = {
    "and":        compute_and_list,
    "or":         compute_or_list,
    "xor":        compute_xor_list,
    "dec-to-bin": dec_to_binary,
    "bin-to-dec": bin_to_decimal,
}
