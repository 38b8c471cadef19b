# Utils package - traversal helpers shared by the tree queries
from collections import deque
from typing import Callable, Dict, Hashable, List, Optional, Tuple, TypeVar

T = TypeVar('T', bound=Hashable)  # ItemType
R = TypeVar('R')  # ResultType


def bfs(*root, children:Callable, reverse:bool=False) -> List:
    queue = deque(root)
    result = list()
    visited = set()  # Track visited items to prevent cycles

    while queue:
        item = queue.popleft()

        if item in visited:
            continue

        visited.add(item)
        result.append(item)

        for child in children(item):
            if child not in visited:
                queue.append(child)

    return list(reversed(result)) if reverse else result


def postorder_fold(root:T,
                   children:Callable[[T], Tuple[Optional[T], Optional[T]]],
                   visit:Callable[[T, R, R], R],
                   empty:R) -> R:
    """
    Evaluate a binary structure bottom-up without recursion.

    Args:
        root: The item to start from
        children: Returns the (left, right) children of an item, None where absent
        visit: Combines an item with the results of its left and right subtrees
        empty: The result standing for an absent subtree
    Returns:
        The result of visit() for root.
    """
    results: Dict[T, R] = {}
    stack: List[Tuple[T, bool]] = [(root, False)]

    while stack:
        item, expanded = stack.pop()
        left, right = children(item)

        if expanded:
            # both subtrees are already in results
            left_result = results.pop(left) if left is not None else empty
            right_result = results.pop(right) if right is not None else empty
            results[item] = visit(item, left_result, right_result)
            continue

        stack.append((item, True))
        for child in (right, left):
            if child is not None:
                stack.append((child, False))

    return results[root]


__all__ = [
    'bfs',
    'postorder_fold',
]
