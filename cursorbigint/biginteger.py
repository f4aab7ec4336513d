"""Arbitrary-precision signed integers stored as base 10**9 digits."""

from __future__ import annotations

import re
from itertools import zip_longest
from typing import Union

from .cursorlist import CursorList

POWER = 9
BASE = 10**POWER

_NUMBER = re.compile(r"[+-]?[0-9]+")

Operand = Union["BigInteger", int]


def _strip_leading_zeros(columns: list[int]) -> list[int]:
    """Drop leading zero columns, keeping at least one column."""
    start = 0
    while start < len(columns) - 1 and columns[start] == 0:
        start += 1
    return columns[start:] or [0]


def _magnitude_from_int(n: int) -> list[int]:
    chunks: list[int] = []
    while True:
        n, digit = divmod(n, BASE)
        chunks.append(digit)
        if not n:
            break
    chunks.reverse()
    return chunks


def _magnitude_from_digits(text: str) -> list[int]:
    chunks = [int(text[max(0, end - POWER):end]) for end in range(len(text), 0, -POWER)]
    chunks.reverse()
    return _strip_leading_zeros(chunks)


def _sum_columns(a: list[int], b: list[int], sgn: int) -> list[int]:
    """Add (or subtract, with sgn=-1) two column lists aligned at the back."""
    total = [x + sgn * y for x, y in zip_longest(reversed(a), reversed(b), fillvalue=0)]
    total.reverse()
    return total


def _carry(columns: list[int]) -> list[int] | None:
    """Propagate carries; return None if the value is negative."""
    out: list[int] = []
    carry = 0
    for column in reversed(columns):
        carry, digit = divmod(column + carry, BASE)
        out.append(digit)
    while carry > 0:
        carry, digit = divmod(carry, BASE)
        out.append(digit)
    if carry < 0:
        return None
    out.reverse()
    return out


def _normalize(columns: list[int]) -> tuple[int, list[int]]:
    """Bring every column into [0, BASE); return the sign and the magnitude."""
    sign = 1
    digits = _carry(columns)
    if digits is None:
        sign = -1
        digits = _carry([-c for c in columns])
        assert digits is not None
    digits = _strip_leading_zeros(digits)
    if digits == [0]:
        sign = 0
    return sign, digits


class BigInteger:
    """A signed integer of any size with value semantics and a few mutators."""

    __slots__ = ("_sign", "_digits")

    def __init__(self, value: BigInteger | int | str = 0) -> None:
        if isinstance(value, BigInteger):
            self._sign = value._sign
            self._digits = value._digits.copy()
        elif isinstance(value, int):
            self._sign = (value > 0) - (value < 0)
            self._digits = CursorList(_magnitude_from_int(abs(value)))
        elif isinstance(value, str):
            if not value:
                raise ValueError("BigInteger: empty string")
            if not _NUMBER.fullmatch(value):
                raise ValueError("BigInteger: non-numeric string")
            sign = -1 if value[0] == "-" else 1
            magnitude = _magnitude_from_digits(value.lstrip("+-"))
            self._sign = 0 if magnitude == [0] else sign
            self._digits = CursorList(magnitude)
        else:
            raise TypeError(f"cannot build a BigInteger from {type(value).__name__}")

    @classmethod
    def _from_parts(cls, sign: int, digits: list[int]) -> BigInteger:
        result = cls()
        result._sign = sign
        result._digits = CursorList(digits)
        return result

    @staticmethod
    def _coerce(value: object) -> BigInteger | None:
        if isinstance(value, BigInteger):
            return value
        if isinstance(value, int):
            return BigInteger(value)
        return None

    def _signed_columns(self) -> list[int]:
        return [self._sign * digit for digit in self._digits]

    # Access -----------------------------------------------------------------

    def sign(self) -> int:
        """Return -1, 0 or 1."""
        return self._sign

    def compare(self, other: BigInteger) -> int:
        """Return -1, 0 or 1 as self is less than, equal to or greater than other."""
        if self._sign != other._sign:
            return -1 if self._sign < other._sign else 1
        if self._sign == 0:
            return 0
        mine, theirs = list(self._digits), list(other._digits)
        if len(mine) != len(theirs):
            bigger = len(mine) > len(theirs)
        elif mine != theirs:
            bigger = mine > theirs
        else:
            return 0
        return self._sign if bigger else -self._sign

    # Mutators ---------------------------------------------------------------

    def make_zero(self) -> None:
        self._digits.clear()
        self._sign = 0

    def negate(self) -> None:
        self._sign = -self._sign

    # Arithmetic -------------------------------------------------------------

    def add(self, other: BigInteger) -> BigInteger:
        return BigInteger._from_parts(
            *_normalize(_sum_columns(self._signed_columns(), other._signed_columns(), 1))
        )

    def sub(self, other: BigInteger) -> BigInteger:
        return BigInteger._from_parts(
            *_normalize(_sum_columns(self._signed_columns(), other._signed_columns(), -1))
        )

    def mult(self, other: BigInteger) -> BigInteger:
        if self._sign == 0 or other._sign == 0:
            return BigInteger()
        mine = list(self._digits)
        acc: list[int] = []
        for shift, digit in enumerate(reversed(list(other._digits))):
            partial = [x * digit for x in mine] + [0] * shift
            _, acc = _normalize(_sum_columns(acc, partial, 1))
        return BigInteger._from_parts(self._sign * other._sign, _strip_leading_zeros(acc))

    # Presentation -----------------------------------------------------------

    def __str__(self) -> str:
        if self._sign == 0:
            return "0"
        digits = list(self._digits)
        text = str(digits[0]) + "".join(str(d).zfill(POWER) for d in digits[1:])
        return "-" + text if self._sign < 0 else text

    def __repr__(self) -> str:
        return f"BigInteger('{self}')"

    # Comparisons ------------------------------------------------------------

    __hash__ = None  # type: ignore[assignment]

    def __eq__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self.compare(rhs) == 0

    def __lt__(self, other: Operand) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self.compare(rhs) < 0

    def __le__(self, other: Operand) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self.compare(rhs) <= 0

    def __gt__(self, other: Operand) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self.compare(rhs) > 0

    def __ge__(self, other: Operand) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self.compare(rhs) >= 0

    # Operators --------------------------------------------------------------

    def __add__(self, other: Operand) -> BigInteger:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self.add(rhs)

    def __radd__(self, other: Operand) -> BigInteger:
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs.add(self)

    def __sub__(self, other: Operand) -> BigInteger:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self.sub(rhs)

    def __rsub__(self, other: Operand) -> BigInteger:
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs.sub(self)

    def __mul__(self, other: Operand) -> BigInteger:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self.mult(rhs)

    def __rmul__(self, other: Operand) -> BigInteger:
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs.mult(self)