# cursorbigint

Arbitrary-precision signed integers stored as base-10⁹ digit groups in a
cursor-based list, plus a small command that writes a fixed set of
arithmetic results for two numbers read from a file.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## The cursor list

`cursorbigint.cursorlist.CursorList` is a sequence of integers with a
cursor that sits *between* elements, at a position from `0` (front) to
`len(lst)` (back). A new list has its cursor at the back.

```python
from cursorbigint.cursorlist import CursorList

lst = CursorList([1, 2, 3])   # cursor at position 3
lst.insert_before(4)          # (1, 2, 3, 4), cursor at 4
lst.move_front()
lst.find_next(3)              # returns 3; cursor just after the 3
lst.peek_prev()               # 3
str(lst)                      # "(1, 2, 3, 4)"
```

Other operations: `front`, `back`, `position`, `peek_next`, `move_back`,
`move_next` and `move_prev` (each returns the element passed over),
`insert_after`, `set_after`, `set_before`, `erase_after`, `erase_before`,
`find_prev`, `cleanup` (removes repeated elements, keeping the frontmost
of each, and keeps the cursor between the same retained elements),
`concat` (a new list with its cursor at the front), `copy` (cursor at the
back) and `clear`. Lists support `len()`, iteration and `==`, which
compares the elements only.

An operation whose precondition does not hold raises `IndexError`: for
example `front()` of an empty list, `peek_next()` or `erase_after()` with
the cursor at the back, `move_prev()` with the cursor at the front, or
`cleanup()` of an empty list. `find_next` and `find_prev` return `-1` when
the element is not found, leaving the cursor at the back or front.

## Big integers

```python
from cursorbigint.biginteger import BigInteger

a = BigInteger("+12222222222")
b = BigInteger("-122239009090")
print(a - b)              # 134461231312
print(a + b)              # -110016786868
print(a.compare(b))       # 1
print(a * b)
print(3 * a - 2 * b)
```

A `BigInteger` is built from an `int`, from another `BigInteger` (a copy),
or from a decimal string with an optional leading `+` or `-`;
`BigInteger()` is zero. An empty or non-numeric string raises
`ValueError`; any other type raises `TypeError`.

`+`, `-`, `*` and the comparison operators work between `BigInteger`
values and with plain `int` values on either side; the methods `add`,
`sub`, `mult` and `compare` take a `BigInteger`. `compare` returns `-1`,
`0` or `1`, and `sign()` returns `-1`, `0` or `1`. `negate()` and
`make_zero()` change the value in place. `str()` gives the decimal form.
`BigInteger` values are not hashable.

There is no division, remainder or power operation.

## The arithmetic command

```
cursorbigint-arithmetic INPUT OUTPUT
```

`INPUT` holds a number A on its first line and a number B on its third;
the second line is ignored. `OUTPUT` receives, each followed by a blank
line:

A, B, A+B, A−B, A−A, 3A−2B, AB, A², B², 9A⁴+16B⁵

The command prints a message to standard error and exits with status 1
when it is not given exactly two arguments, when a file cannot be opened,
or when a line does not hold a valid number.

The same results are available from Python as a list of `BigInteger`
values through `cursorbigint.arithmetic.compute(first, third)`, which
accepts strings, integers or `BigInteger` values.