# seqwrap

TCP sequence numbers are 32 bits wide and wrap around. A byte stream, by
contrast, is indexed from zero with 64-bit "absolute" positions. `seqwrap`
converts between the two. It has no dependencies beyond the standard library.

## Installation

```
pip install seqwrap
```

## Usage

```python
from seqwrap.wrapping import WrappingInt32, wrap, unwrap

isn = WrappingInt32(15)

# Absolute index -> 32-bit sequence number
seqno = wrap(3 * 2**32 + 17, isn)
assert seqno == WrappingInt32(32)

# 32-bit sequence number -> absolute index closest to a checkpoint
assert unwrap(WrappingInt32(1), WrappingInt32(0), 2**32 - 1) == 2**32 + 1
```

### `WrappingInt32`

`WrappingInt32(raw_value)` is a frozen dataclass that holds an unsigned
32-bit value. It raises `TypeError` if `raw_value` is not an `int`. It raises
`ValueError` if the value lies outside `0 .. 2**32 - 1`.

It supports these operations:

- `a + n` and `a - n`, where `n` is an integer. The result is a new
  `WrappingInt32`, reduced modulo 2**32.
- `a - b`, where `b` is another `WrappingInt32`. The result is the signed
  32-bit offset from `b` to `a`, an `int` in `-2**31 .. 2**31 - 1`.
- `==` and `!=` comparison.
- Use as a dictionary key or set member.
- `str(a)`, which gives the raw value in decimal.

### `wrap(n, isn)`

`wrap(n, isn)` turns the absolute sequence number `n` into the
`WrappingInt32` that is `n` steps past `isn`. `n` must fit in an unsigned
64-bit integer; otherwise the function raises `ValueError`.

### `unwrap(n, isn, checkpoint)`

`unwrap(n, isn, checkpoint)` returns the absolute sequence number that wraps
to `n` and lies closest to `checkpoint`. The arithmetic is modulo 2**64.
`checkpoint` must fit in an unsigned 64-bit integer; otherwise the function
raises `ValueError`.

Each direction of a TCP connection has its own initial sequence number (ISN).
Use the ISN that belongs to the stream in question.

## Scope

`seqwrap` does only the sequence-number arithmetic. It does not send or
receive segments. It has no sender, receiver or connection state machine, and
it provides no command-line tool.

## Running the tests

```
pip install -e ".[test]"
pytest
```