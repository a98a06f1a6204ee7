"""Unbalanced binary search tree.

Equal values are routed to the right subtree, so every node satisfies
``left < value <= right``. All public walks are iterative; the recursive
``walk_recursive`` helper is kept as a reference for balanced trees only.
"""

from typing import Callable, TypeVar, Generic, Iterable, List, Iterator, Optional, Tuple

from circular_queue import Queue

T = TypeVar('T')

Visitor = Callable[[T], None]

ORDERS = ("pre", "in", "post")


class BinarySearchTree(Generic[T]):
    class Node:
        def __init__(self, value: T) -> None:
            self.value: T = value
            self.left: Optional['BinarySearchTree.Node'] = None
            self.right: Optional['BinarySearchTree.Node'] = None

        def __repr__(self) -> str:
            return f"Node({self.value!r})"

    def __init__(self, values: Optional[Iterable[T]] = None) -> None:
        self._root: Optional[BinarySearchTree.Node] = None
        self._size: int = 0
        if values is not None:
            for value in values:
                self.insert(value)

    @property
    def root(self) -> Optional[Node]:
        return self._root

    def insert(self, value: T) -> None:
        if self._root is None:
            self._root = BinarySearchTree.Node(value)
            self._size += 1
            return

        node = self._root
        while True:
            if value < node.value:
                if node.left is None:
                    node.left = BinarySearchTree.Node(value)
                    self._size += 1
                    return
                node = node.left
            else:
                if node.right is None:
                    node.right = BinarySearchTree.Node(value)
                    self._size += 1
                    return
                node = node.right

    def search(self, value: T) -> bool:
        return self._find(value)[0] is not None

    def contains(self, value: T) -> bool:
        return self.search(value)

    def remove(self, value: T) -> bool:
        """Delete the copy of ``value`` nearest the root.

        Returns False, leaving the tree untouched, when the value is absent.
        A node with two children is replaced by its in-order successor node,
        which takes over both of the removed node's subtrees.
        """
        node, parent = self._find(value)
        if node is None:
            return False

        if node.left is None and node.right is None:
            replacement = None
        elif node.left is None:
            replacement = node.right
        elif node.right is None:
            replacement = node.left
        else:
            successor_parent = node
            successor = node.right
            while successor.left is not None:
                successor_parent = successor
                successor = successor.left
            if successor_parent is not node:
                successor_parent.left = successor.right
                successor.right = node.right
            successor.left = node.left
            replacement = successor

        if parent is None:
            self._root = replacement
        elif parent.left is node:
            parent.left = replacement
        else:
            parent.right = replacement
        self._size -= 1
        return True

    def get_min_value(self) -> Optional[T]:
        if self._root is None:
            return None
        node = self._root
        while node.left is not None:
            node = node.left
        return node.value

    def get_max_value(self) -> Optional[T]:
        if self._root is None:
            return None
        node = self._root
        while node.right is not None:
            node = node.right
        return node.value

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._root is None

    def height(self) -> int:
        """Number of nodes on the longest root-to-leaf path."""
        if self._root is None:
            return 0
        levels = 0
        queue = Queue()
        queue.enqueue(self._root)
        while queue:
            levels += 1
            for _ in range(len(queue)):
                node = queue.dequeue()
                if node.left is not None:
                    queue.enqueue(node.left)
                if node.right is not None:
                    queue.enqueue(node.right)
        return levels

    def clear(self) -> None:
        self._root = None
        self._size = 0

    def pre_order_traverse(self, visit: Optional[Visitor] = None) -> Iterator[T]:
        if self._root is None:
            return
        stack: List[BinarySearchTree.Node] = [self._root]
        while stack:
            node = stack.pop()
            if visit is not None:
                visit(node.value)
            yield node.value
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def in_order_traverse(self, visit: Optional[Visitor] = None) -> Iterator[T]:
        stack: List[BinarySearchTree.Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            if visit is not None:
                visit(node.value)
            yield node.value
            node = node.right

    def post_order_traverse(self, visit: Optional[Visitor] = None) -> Iterator[T]:
        stack: List[BinarySearchTree.Node] = []
        last: Optional[BinarySearchTree.Node] = None
        node = self._root
        while stack or node is not None:
            if node is not None:
                stack.append(node)
                node = node.left
                continue
            top = stack[-1]
            # descend right only once; on the way back up ``last`` is the right child
            if top.right is not None and top.right is not last:
                node = top.right
            else:
                stack.pop()
                if visit is not None:
                    visit(top.value)
                yield top.value
                last = top

    def level_order_traverse(self, visit: Optional[Visitor] = None) -> Iterator[T]:
        if self._root is None:
            return
        queue = Queue()
        queue.enqueue(self._root)
        while queue:
            node = queue.dequeue()
            if visit is not None:
                visit(node.value)
            yield node.value
            if node.left is not None:
                queue.enqueue(node.left)
            if node.right is not None:
                queue.enqueue(node.right)

    def pre_order(self) -> List[T]:
        return list(self.pre_order_traverse())

    def in_order(self) -> List[T]:
        return list(self.in_order_traverse())

    def post_order(self) -> List[T]:
        return list(self.post_order_traverse())

    def level_order(self) -> List[T]:
        return list(self.level_order_traverse())

    def copy(self) -> 'BinarySearchTree[T]':
        # pre-order re-insertion rebuilds the same shape
        return BinarySearchTree(self.pre_order_traverse())

    def _find(self, value: T) -> Tuple[Optional[Node], Optional[Node]]:
        parent: Optional[BinarySearchTree.Node] = None
        node = self._root
        while node is not None:
            if node.value == value:
                return node, parent
            parent = node
            if node.value < value:
                node = node.right
            else:
                node = node.left
        return None, parent

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0

    def __contains__(self, value: T) -> bool:
        return self.search(value)

    def __iter__(self) -> Iterator[T]:
        return self.in_order_traverse()

    def __repr__(self) -> str:
        return f"BinarySearchTree({self.in_order()})"

    def __str__(self) -> str:
        return f"BinarySearchTree(size={self._size})"


def walk_recursive(node: Optional[BinarySearchTree.Node], order: str = "in") -> List[T]:
    """Recursive pre/in/post-order walk starting at ``node``.

    Recursion depth equals tree height, so a degenerate tree of a few
    thousand nodes will hit the interpreter's recursion limit. Use the
    tree's iterative traversals for anything but small or balanced trees.
    """
    if order not in ORDERS:
        raise ValueError(f"order must be one of {ORDERS}, got {order!r}")
    result: List[T] = []
    _walk(node, order, result)
    return result


def _walk(node: Optional[BinarySearchTree.Node], order: str, out: List[T]) -> None:
    if node is None:
        return
    if order == "pre":
        out.append(node.value)
    _walk(node.left, order, out)
    if order == "in":
        out.append(node.value)
    _walk(node.right, order, out)
    if order == "post":
        out.append(node.value)
