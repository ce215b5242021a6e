"""32-bit wrapping sequence numbers and conversion to 64-bit absolute numbers."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["WrappingInt32", "wrap", "unwrap"]

_MASK32 = (1 << 32) - 1
_FACTOR = 1 << 32
_MOD64 = 1 << 64


def _check_uint64(name: str, value: int) -> None:
    if not 0 <= value < _MOD64:
        raise ValueError(f"{name} must fit in an unsigned 64-bit integer, got {value}")


@dataclass(frozen=True, order=False)
class WrappingInt32:
    """A 32-bit integer expressed relative to an arbitrary initial sequence number."""

    raw_value: int

    def __post_init__(self) -> None:
        if not isinstance(self.raw_value, int):
            raise TypeError("raw_value must be an int")
        if not 0 <= self.raw_value <= _MASK32:
            raise ValueError(
                f"raw_value must fit in an unsigned 32-bit integer, got {self.raw_value}"
            )

    def __add__(self, other: object) -> WrappingInt32:
        """Step `other` positions past this point, wrapping at 2**32."""
        if not isinstance(other, int):
            return NotImplemented
        return WrappingInt32((self.raw_value + other) & _MASK32)

    def __sub__(self, other: object) -> int | WrappingInt32:
        """Signed offset to another WrappingInt32, or step back by an int."""
        if isinstance(other, WrappingInt32):
            diff = (self.raw_value - other.raw_value) & _MASK32
            return diff - _FACTOR if diff >= 1 << 31 else diff
        if isinstance(other, int):
            return WrappingInt32((self.raw_value - other) & _MASK32)
        return NotImplemented

    def __str__(self) -> str:
        return str(self.raw_value)


def wrap(n: int, isn: WrappingInt32) -> WrappingInt32:
    """Convert an absolute 64-bit sequence number into a WrappingInt32."""
    _check_uint64("n", n)
    return isn + (n & _MASK32)


def unwrap(n: WrappingInt32, isn: WrappingInt32, checkpoint: int) -> int:
    """Return the absolute sequence number that wraps to `n` closest to `checkpoint`."""
    _check_uint64("checkpoint", checkpoint)

    offset = (n.raw_value - isn.raw_value) & _MASK32
    base = checkpoint // _FACTOR * _FACTOR
    candidate = base + offset

    def distance(x: int) -> int:
        return x - checkpoint if x > checkpoint else checkpoint - x

    if candidate > checkpoint:
        lower = (candidate - _FACTOR) % _MOD64
        if distance(lower) < distance(candidate):
            return lower
    elif candidate < checkpoint:
        upper = (candidate + _FACTOR) % _MOD64
        if distance(upper) < distance(candidate):
            return upper
    return candidate