from __future__ import annotations

import logging
from typing import Generic, Iterator, List, Optional, Tuple, TypeAlias

from ..core import KeyKind, key_kind, INT
from ..core.keys import K
from ..core.errors import InvalidNodeIdError, ChildSlotOccupiedError, KeyOutOfRangeError
from ..utils import bfs, postorder_fold
from .nx_tree import to_networkx

logger = logging.getLogger(__name__)


NodeId: TypeAlias = int  # position in the arena, 0 is the root


class Node(Generic[K]):
    """A key and the arena positions of its children. Read-only outside the tree."""
    __slots__ = ('_key', '_left', '_right')
    def __init__(self, key: K):
        self._key = key
        self._left: Optional[NodeId] = None
        self._right: Optional[NodeId] = None

    @property
    def key(self) -> K:
        return self._key

    @property
    def left(self) -> Optional[NodeId]:
        return self._left

    @property
    def right(self) -> Optional[NodeId]:
        return self._right

    def __repr__(self):
        return f"Node({self._key!r}, left={self._left}, right={self._right})"


class Tree(Generic[K]):
    """A binary tree stored in a single arena.

    Nodes live in one list and refer to their children by position, so the
    tree owns every node and no node owns another. The root is node 0 and is
    created together with the tree; further nodes are appended one at a time
    and attached to a free child slot of an existing node. Nothing is ever
    removed, and an occupied child slot is never overwritten.

    Keys must be representable by the tree's key kind (see `KeyKind`).
    """
    ROOT: NodeId = 0

    def __init__(self, key: K, kind: KeyKind[K] | str = INT):
        self._kind: KeyKind[K] = key_kind(kind)
        self._check_key(key)
        self._nodes: List[Node[K]] = [Node(key)]

    @classmethod
    def with_root(cls, key: K, kind: KeyKind[K] | str = INT) -> Tree[K]:
        """Create a tree holding a single node, the root, with `key`."""
        return cls(key, kind)

    @property
    def kind(self) -> KeyKind[K]:
        return self._kind

    @property
    def root(self) -> NodeId:
        return self.ROOT

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[NodeId]:
        return iter(range(len(self._nodes)))

    def __contains__(self, node_id) -> bool:
        return isinstance(node_id, int) and not isinstance(node_id, bool) and 0 <= node_id < len(self._nodes)

    def __repr__(self):
        return f"Tree(root={self._nodes[0].key!r}, kind={self._kind.name}, size={len(self._nodes)})"

    ## Lookup
    def node(self, node_id: NodeId) -> Node[K]:
        if node_id not in self:
            logger.error(f"Cannot access node {node_id!r}: tree has {len(self._nodes)} nodes")
            raise InvalidNodeIdError(node_id, len(self._nodes))
        return self._nodes[node_id]

    def key(self, node_id: NodeId) -> K:
        return self.node(node_id).key

    def children(self, node_id: NodeId) -> Tuple[NodeId, ...]:
        """Return the ids of the present children of a node, left first."""
        node = self.node(node_id)
        return tuple(child for child in (node.left, node.right) if child is not None)

    def walk(self) -> List[NodeId]:
        """Return every node id in breadth-first order, starting at the root."""
        return bfs(self.ROOT, children=self.children)

    ## Construction
    def add_node(self, parent_id: NodeId, key: K, is_left: bool) -> NodeId:
        """
        Attach a new node holding `key` to `parent_id` and return its id.

        The new node becomes the left child of `parent_id` if `is_left` is
        true, the right child otherwise. Ids are handed out in insertion
        order and never reused.

        Raises:
            InvalidNodeIdError: if `parent_id` does not exist
            ChildSlotOccupiedError: if the targeted child slot is already set
            KeyOutOfRangeError: if `key` is not representable by the tree's kind
        """
        parent = self.node(parent_id)
        side = 'left' if is_left else 'right'
        existing = parent.left if is_left else parent.right
        if existing is not None:
            logger.error(f"Cannot add {side} child to node {parent_id}: slot holds node {existing}")
            raise ChildSlotOccupiedError(parent_id, side, existing)
        self._check_key(key)

        child_id = len(self._nodes)
        self._nodes.append(Node(key))
        if is_left:
            parent._left = child_id
        else:
            parent._right = child_id

        logger.debug(f"Added node {child_id} ({key!r}) as {side} child of {parent_id}")
        return child_id

    def add_left(self, parent_id: NodeId, key: K) -> NodeId:
        return self.add_node(parent_id, key, is_left=True)

    def add_right(self, parent_id: NodeId, key: K) -> NodeId:
        return self.add_node(parent_id, key, is_left=False)

    def _check_key(self, key):
        if not self._kind.contains(key):
            logger.error(f"Rejected key {key!r}: not a {self._kind.name}")
            raise KeyOutOfRangeError(key, self._kind.name)

    def _child_slots(self, node_id: NodeId) -> Tuple[Optional[NodeId], Optional[NodeId]]:
        node = self._nodes[node_id]
        return node.left, node.right

    ## Queries
    def sum(self) -> K:
        """
        Return the sum of all the keys in the tree.

        Raises:
            KeyOverflowError: if the total is not representable by the tree's kind
        """
        def visit(node_id, left_sum, right_sum):
            return left_sum + right_sum + self._nodes[node_id].key

        total = postorder_fold(self.ROOT, self._child_slots, visit, self._kind.zero)
        return self._kind.fit(total)

    def is_bst(self) -> bool:
        """
        Return True if the tree is a binary search tree.

        Every key in the left subtree of a node must be less than or equal
        to the node's key, every key in its right subtree strictly greater.
        """
        def visit(node_id, left, right):
            left_ok, left_min, left_max = left
            right_ok, right_min, right_max = right
            node = self._nodes[node_id]

            ok = left_ok and right_ok and left_max <= node.key
            # an empty right subtree reports kind.maximum, which a key at the maximum would fail
            if node.right is not None:
                ok = ok and right_min > node.key

            return (
                ok,
                min(left_min, right_min, node.key),
                max(left_max, right_max, node.key),
            )

        # an empty subtree is a BST whose bounds can never violate its parent
        empty = (True, self._kind.maximum, self._kind.minimum)
        return postorder_fold(self.ROOT, self._child_slots, visit, empty)[0]

    def max_path_sum(self) -> K:
        """
        Return the maximum path sum between two special nodes.

        A special node is connected to exactly one other node: a leaf, or
        the root when it has a single child. A root-only tree returns the
        root's key. Only the answer has to be representable by the tree's
        kind, partial path sums may leave its range.
        """
        # (best path from the node down to a leaf, best path found inside the subtree)
        def visit(node_id, left, right):
            left_down, left_best = left
            right_down, right_best = right
            key = self._nodes[node_id].key

            here = left_down + right_down + key
            best = max([here] + [b for b in (left_best, right_best) if b is not None])
            return key + max(left_down, right_down), best

        best = postorder_fold(self.ROOT, self._child_slots, visit, (self._kind.zero, None))[1]
        return self._kind.fit(best)

    ## Export
    def to_networkx(self):
        """Return the tree as an undirected networkx.Graph, see `to_networkx`."""
        return to_networkx(self)
