from .tree import Tree, Node, NodeId
from .nx_tree import to_networkx, special_nodes, leaf_to_leaf_paths, brute_force_max_path_sum

__all__ = [
    'Tree',
    'Node',
    'NodeId',
    'to_networkx',
    'special_nodes',
    'leaf_to_leaf_paths',
    'brute_force_max_path_sum',
]
