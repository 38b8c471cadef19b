# arenatree - arena-backed binary trees
"""
An in-memory binary tree whose nodes live in a single arena and refer to
their children by index. Trees are built once through sequential insertions
and then queried for the sum of their keys, binary-search-tree validity and
the maximum path sum between special nodes.
"""

# Import main public API components
from .core import (
    KeyKind, key_kind, KINDS,
    INT, FLOAT,
    I8, U8, I16, U16, I32, U32, I64, U64, I128, U128, ISIZE, USIZE,
    TreeError, InvalidNodeIdError, ChildSlotOccupiedError,
    KeyOutOfRangeError, KeyOverflowError,
)
from .models import (
    Tree, Node,
    to_networkx, special_nodes, leaf_to_leaf_paths, brute_force_max_path_sum,
)
# Import subpackages for advanced usage
from . import core
from . import models
from . import utils

__version__ = "0.1.0"

__all__ = [
    # Main components (most commonly used)
    'Tree',
    'Node',
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
    # Graph view
    'to_networkx',
    'special_nodes',
    'leaf_to_leaf_paths',
    'brute_force_max_path_sum',
    # Subpackages for advanced usage
    'core',
    'models',
    'utils',
]
