from __future__ import annotations

from typing import Any, Literal, TypeAlias

Side: TypeAlias = Literal['left', 'right']


class TreeError(Exception):
    """Base class for every precondition violation raised by a Tree."""


class InvalidNodeIdError(TreeError, IndexError):
    def __init__(self, node_id: Any, size: int):
        super().__init__(f"Node id {node_id!r} does not exist (tree has {size} nodes)")
        self.node_id = node_id
        self.size = size


class ChildSlotOccupiedError(TreeError):
    def __init__(self, parent_id: int, side: Side, child_id: int):
        super().__init__(f"Node {parent_id} has the {side} child already set (node {child_id})")
        self.parent_id = parent_id
        self.side = side
        self.child_id = child_id


class KeyOutOfRangeError(TreeError, ValueError):
    def __init__(self, key: Any, kind_name: str):
        super().__init__(f"Key {key!r} is not representable as {kind_name}")
        self.key = key
        self.kind_name = kind_name


class KeyOverflowError(TreeError, OverflowError):
    def __init__(self, value: Any, kind_name: str):
        super().__init__(f"Result {value!r} overflows {kind_name}")
        self.value = value
        self.kind_name = kind_name
