from __future__ import annotations

import logging
from itertools import combinations
from typing import TYPE_CHECKING, Iterator, List

import networkx as nx

if TYPE_CHECKING:
    from .tree import Tree, NodeId

logger = logging.getLogger(__name__)


def to_networkx(tree: Tree) -> nx.Graph:
    """Build the undirected adjacency of a tree.

    Every node id becomes a vertex with a `key` attribute, every parent/child
    link an edge with a `side` attribute ("left" or "right").
    """
    graph = nx.Graph(kind=tree.kind.name)
    for node_id in tree:
        graph.add_node(node_id, key=tree.key(node_id))

    for node_id in tree:
        node = tree.node(node_id)
        if node.left is not None:
            graph.add_edge(node_id, node.left, side='left')
        if node.right is not None:
            graph.add_edge(node_id, node.right, side='right')

    return graph


def special_nodes(tree: Tree) -> List[NodeId]:
    """Return the ids of the nodes connected to exactly one other node, ascending.

    These are the leaves, plus the root when it has a single child. A tree
    made of the root alone has none.
    """
    graph = to_networkx(tree)
    return sorted(node_id for node_id, degree in graph.degree if degree == 1)


def leaf_to_leaf_paths(tree: Tree) -> Iterator[List[NodeId]]:
    """Yield the path between every unordered pair of distinct special nodes."""
    graph = to_networkx(tree)
    ends = sorted(node_id for node_id, degree in graph.degree if degree == 1)
    for source, target in combinations(ends, 2):
        # a tree has exactly one simple path between two vertices
        yield nx.shortest_path(graph, source, target)


def brute_force_max_path_sum(tree: Tree):
    """
    Compute the maximum path sum between special nodes by enumerating paths.

    Quadratic in the number of leaves; meant to cross-check `Tree.max_path_sum`
    on trees with non-negative keys.

    Returns:
        The best path sum, or the root key when the tree has fewer than two
        special nodes.
    """
    best = None
    count = 0
    for path in leaf_to_leaf_paths(tree):
        total = sum((tree.key(node_id) for node_id in path), tree.kind.zero)
        if best is None or total > best:
            best = total
        count += 1

    logger.debug(f"Enumerated {count} special-node paths in {tree!r}")
    return tree.kind.fit(best) if best is not None else tree.key(tree.root)
