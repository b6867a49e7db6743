"""
Ordered Tree - An unbalanced binary search tree with on-demand rebalancing.

Values are kept in a plain BST: smaller values to the left, greater or
equal values to the right. Nothing is rebalanced on mutation; call
balance() to rebuild a minimal-height tree from the sorted contents.
The tree renders itself as text in one of three visiting orders.
"""

import copy as _copy
import logging
from enum import Enum
from typing import TypeVar, Generic, Dict, List, Optional, Tuple, Union

T = TypeVar('T')

logger = logging.getLogger(__name__)


class EmptyTreeError(ValueError):
    """Raised when an operation needs at least one element."""

    def __init__(self, message: str = "operation on an empty tree") -> None:
        super().__init__(message)


class InvalidOrderError(ValueError):
    """Raised for a visiting order that is not one of VisitingOrder."""


class VisitingOrder(Enum):
    IN_ORDER = "in"
    PRE_ORDER = "pre"
    POST_ORDER = "post"


class OrderedTree(Generic[T]):
    class Node:
        def __init__(self, value: T) -> None:
            self.value: T = value
            self.left: Optional['OrderedTree.Node'] = None
            self.right: Optional['OrderedTree.Node'] = None

        def __repr__(self) -> str:
            return f"Node({self.value!r})"

    def __init__(
        self,
        value: Optional[T] = None,
        order: Union[VisitingOrder, str] = VisitingOrder.IN_ORDER,
    ) -> None:
        self._root: Optional[OrderedTree.Node] = None
        self._size: int = 0
        self._order: VisitingOrder = self._coerce_order(order)
        if value is not None:
            self.insert(value)

    @property
    def order(self) -> VisitingOrder:
        return self._order

    def set_order(self, mode: Union[VisitingOrder, str]) -> None:
        self._order = self._coerce_order(mode)

    def insert(self, value: T) -> None:
        new_node = OrderedTree.Node(value)
        self._size += 1
        if self._root is None:
            self._root = new_node
            return

        node = self._root
        while True:
            if value < node.value:
                if node.left is None:
                    node.left = new_node
                    return
                node = node.left
            else:
                # equal values go right
                if node.right is None:
                    node.right = new_node
                    return
                node = node.right

    def contains(self, value: T) -> bool:
        node = self._root
        while node is not None:
            if node.value == value:
                return True
            node = node.left if node.value > value else node.right
        return False

    def delete(self, value: T) -> bool:
        """
        Remove one occurrence of value.

        A node with at most one child is replaced by that child (or nothing).
        A node with two children takes the value of its in-order successor,
        the leftmost node of its right subtree, and the successor is spliced
        out instead. The successor has no left child, so that splice always
        hits the simple case.

        Returns:
            True if a matching value was found and removed, False otherwise
        """
        parent: Optional[OrderedTree.Node] = None
        node = self._root
        while node is not None and node.value != value:
            parent = node
            node = node.left if value < node.value else node.right

        if node is None:
            logger.debug("delete(%r): value not present", value)
            return False

        if node.left is not None and node.right is not None:
            parent = node
            successor = node.right
            while successor.left is not None:
                parent = successor
                successor = successor.left
            node.value = successor.value
            node = successor

        self._splice(parent, node)
        self._size -= 1
        return True

    def min(self) -> T:
        if self._root is None:
            raise EmptyTreeError("min from empty tree")
        return self._find_min(self._root).value

    def max(self) -> T:
        if self._root is None:
            raise EmptyTreeError("max from empty tree")
        return self._find_max(self._root).value

    def height(self) -> int:
        return self._subtree_height(self._root)

    def is_balanced(self) -> bool:
        """
        Shallow balance check: compares only the heights of the root's two
        subtrees. Deeper subtrees may still be lopsided.
        """
        if self._root is None:
            return True
        left = self._subtree_height(self._root.left)
        right = self._subtree_height(self._root.right)
        return abs(left - right) <= 1

    def balance(self) -> None:
        """
        Rebuild the tree with minimal height.

        The sorted contents are collected by an in-order walk, then the tree
        is rebuilt by taking the middle of each range as the subtree root
        (the lower middle for even-length ranges). The resulting height is
        ceil(log2(n + 1)).
        """
        values = self.in_order()
        self._root = self._build(values, 0, len(values) - 1)
        logger.debug("rebalanced %d values, height is now %d", len(values), self.height())

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._root is None

    def clear(self) -> None:
        logger.debug("clearing tree of %d values", self._size)
        self._root = None
        self._size = 0

    def root_value(self) -> T:
        return self._require_root().value

    def root_left(self) -> Optional[Node]:
        return self._require_root().left

    def root_right(self) -> Optional[Node]:
        return self._require_root().right

    def in_order(self) -> List[T]:
        result: List[T] = []
        stack: List[OrderedTree.Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            result.append(node.value)
            node = node.right
        return result

    def pre_order(self) -> List[T]:
        result: List[T] = []
        if self._root is None:
            return result
        stack: List[OrderedTree.Node] = [self._root]
        while stack:
            node = stack.pop()
            result.append(node.value)
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
        return result

    def post_order(self) -> List[T]:
        result: List[T] = []
        if self._root is None:
            return result
        stack: List[OrderedTree.Node] = [self._root]
        while stack:
            node = stack.pop()
            result.append(node.value)
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        result.reverse()
        return result

    def render(self) -> str:
        """Render the values in the current visiting order, each preceded by a space."""
        if self._order is VisitingOrder.IN_ORDER:
            values = self.in_order()
        elif self._order is VisitingOrder.PRE_ORDER:
            values = self.pre_order()
        elif self._order is VisitingOrder.POST_ORDER:
            values = self.post_order()
        else:
            raise InvalidOrderError(f"Order value invalid {self._order!r}")
        return "".join(f" {value}" for value in values)

    def copy(self) -> 'OrderedTree[T]':
        clone: OrderedTree[T] = OrderedTree(order=self._order)
        for value in self.pre_order():
            clone.insert(value)
        return clone

    def copy_from(self, other: 'OrderedTree[T]') -> 'OrderedTree[T]':
        """Replace this tree's contents and order with an independent copy of other."""
        if other is self:
            return self
        clone = other.copy()
        self._root, self._size, self._order = clone._root, clone._size, clone._order
        logger.debug("copied %d values into tree", self._size)
        return self

    def move_from(self, other: 'OrderedTree[T]') -> 'OrderedTree[T]':
        """Take over other's nodes and order. other is left empty with the default order."""
        if other is self:
            return self
        self._root, self._size, self._order = other._root, other._size, other._order
        other._root = None
        other._size = 0
        other._order = VisitingOrder.IN_ORDER
        logger.debug("moved %d values into tree", self._size)
        return self

    def _require_root(self) -> Node:
        if self._root is None:
            raise EmptyTreeError()
        return self._root

    def _splice(self, parent: Optional[Node], node: Node) -> None:
        # node has at most one child; a leaf is replaced by None
        child = node.right if node.left is None else node.left
        if parent is None:
            self._root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child

    def _build(self, values: List[T], low: int, high: int) -> Optional[Node]:
        if low > high:
            return None
        mid = (low + high) // 2
        node = OrderedTree.Node(values[mid])
        node.left = self._build(values, low, mid - 1)
        node.right = self._build(values, mid + 1, high)
        return node

    @staticmethod
    def _subtree_height(node: Optional[Node]) -> int:
        if node is None:
            return 0
        deepest = 0
        stack: List[Tuple[OrderedTree.Node, int]] = [(node, 1)]
        while stack:
            current, depth = stack.pop()
            deepest = max(deepest, depth)
            if current.left is not None:
                stack.append((current.left, depth + 1))
            if current.right is not None:
                stack.append((current.right, depth + 1))
        return deepest

    @staticmethod
    def _coerce_order(mode: Union[VisitingOrder, str]) -> VisitingOrder:
        try:
            return VisitingOrder(mode)
        except ValueError:
            raise InvalidOrderError(f"unknown visiting order {mode!r}") from None

    def _find_min(self, node: Node) -> Node:
        while node.left is not None:
            node = node.left
        return node

    def _find_max(self, node: Node) -> Node:
        while node.right is not None:
            node = node.right
        return node

    def __len__(self) -> int:
        return self._size

    def __contains__(self, value: T) -> bool:
        return self.contains(value)

    def __iadd__(self, value: T) -> 'OrderedTree[T]':
        self.insert(value)
        return self

    def __copy__(self) -> 'OrderedTree[T]':
        return self.copy()

    def __deepcopy__(self, memo: Dict[int, object]) -> 'OrderedTree[T]':
        clone: OrderedTree[T] = OrderedTree(order=self._order)
        for value in self.pre_order():
            clone.insert(_copy.deepcopy(value, memo))
        return clone

    def __repr__(self) -> str:
        return f"OrderedTree({self.in_order()!r}, order={self._order})"

    def __str__(self) -> str:
        return f"[{self.render()} ]"
