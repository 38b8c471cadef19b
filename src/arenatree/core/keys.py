from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Dict, Generic, Tuple, TypeVar

from .errors import KeyOverflowError

K = TypeVar('K')  # KeyType


@dataclass(frozen=True)
class KeyKind(Generic[K]):
    """The numeric capabilities a tree needs from its keys.

    A kind is totally ordered, closed under addition, and exposes its
    additive identity together with its extremal values. The extremal
    values are used as sentinels by the BST check, so bounded kinds must
    report their exact range limits.

    Unbounded kinds use ``-inf``/``+inf`` as sentinels.
    """
    name: str
    types: Tuple[type, ...] = field(repr=False)
    zero: K = field(repr=False)
    minimum: K = field(repr=False)
    maximum: K = field(repr=False)
    bounded: bool = True

    def contains(self, value) -> bool:
        """Return True if *value* is a representable key of this kind."""
        if isinstance(value, bool) or not isinstance(value, self.types):
            return False
        if isinstance(value, float) and math.isnan(value):
            return False
        if not self.bounded:
            return True
        return self.minimum <= value <= self.maximum

    def fit(self, value: K) -> K:
        """Return *value*, raising KeyOverflowError if the kind cannot represent it.

        Queries add keys in plain Python arithmetic and check only the
        result, so partial totals may leave the range on the way.
        """
        if not self.contains(value):
            raise KeyOverflowError(value, self.name)
        return value

    def __str__(self):
        return self.name


def _fixed_width(name: str, bits: int, signed: bool) -> KeyKind[int]:
    if signed:
        lo, hi = -(1 << (bits - 1)), (1 << (bits - 1)) - 1
    else:
        lo, hi = 0, (1 << bits) - 1
    return KeyKind(name, (int,), 0, lo, hi)


I8    = _fixed_width("i8",     8, signed=True)
U8    = _fixed_width("u8",     8, signed=False)
I16   = _fixed_width("i16",   16, signed=True)
U16   = _fixed_width("u16",   16, signed=False)
I32   = _fixed_width("i32",   32, signed=True)
U32   = _fixed_width("u32",   32, signed=False)
I64   = _fixed_width("i64",   64, signed=True)
U64   = _fixed_width("u64",   64, signed=False)
I128  = _fixed_width("i128", 128, signed=True)
U128  = _fixed_width("u128", 128, signed=False)
ISIZE = _fixed_width("isize", 64, signed=True)
USIZE = _fixed_width("usize", 64, signed=False)

# int keys with float sentinels, -inf and +inf order against any int
INT:   KeyKind[Any]   = KeyKind("int",   (int,),        0,   -math.inf, math.inf, bounded=False)
FLOAT: KeyKind[float] = KeyKind("float", (int, float),  0.0, -math.inf, math.inf, bounded=False)

KINDS: Dict[str, KeyKind] = {
    kind.name: kind for kind in (
        INT, FLOAT,
        I8, U8, I16, U16, I32, U32, I64, U64, I128, U128, ISIZE, USIZE,
    )
}


def key_kind(kind: KeyKind | str) -> KeyKind:
    """Resolve a kind given either as a KeyKind or by its name ("u32", "int", ...)."""
    if isinstance(kind, KeyKind):
        return kind
    try:
        return KINDS[kind.lower()]
    except (KeyError, AttributeError):
        raise ValueError(f"Unknown key kind: {kind!r}. Expected one of {sorted(KINDS)}") from None
