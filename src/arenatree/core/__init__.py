# Core package - key kinds and error types
from .keys import (
    KeyKind, key_kind, KINDS,
    INT, FLOAT,
    I8, U8, I16, U16, I32, U32, I64, U64, I128, U128, ISIZE, USIZE,
)
from .errors import (
    TreeError,
    InvalidNodeIdError,
    ChildSlotOccupiedError,
    KeyOutOfRangeError,
    KeyOverflowError,
)

__all__ = [
    # Key kinds
    'KeyKind',
    'key_kind',
    'KINDS',
    'INT', 'FLOAT',
    'I8', 'U8', 'I16', 'U16', 'I32', 'U32',
    'I64', 'U64', 'I128', 'U128', 'ISIZE', 'USIZE',

    # Errors
    'TreeError',
    'InvalidNodeIdError',
    'ChildSlotOccupiedError',
    'KeyOutOfRangeError',
    'KeyOverflowError',
]
