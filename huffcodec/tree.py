"""
tree.py

Huffman tree nodes and construction.

"""


import heapq
from itertools import count
from typing import Hashable, Iterator, List, Mapping, Optional, Tuple, Union

from .errors import EmptyAlphabetError, MalformedTreeError
from .logger import Logger, TreeMergeLog
from .models import FrequencyTable


class LeafNode:
    """
    A tree node carrying exactly one symbol.
    """
    is_leaf = True

    def __init__(self, symbol: Hashable, frequency: int) -> None:
        self.symbol: Hashable = symbol
        self.frequency: int = frequency

    def __repr__(self) -> str:
        return f"LeafNode({self.symbol!r}, {self.frequency})"


class InternalNode:
    """
    A tree node with two children and no symbol; its frequency is the sum of theirs.
    """
    is_leaf = False

    def __init__(self, left: 'TreeNode', right: 'TreeNode') -> None:
        if left is None or right is None:
            raise MalformedTreeError("Internal node requires both a left and a right child")
        self.left: TreeNode = left
        self.right: TreeNode = right
        self.frequency: int = left.frequency + right.frequency

    def __repr__(self) -> str:
        return f"InternalNode({self.frequency})"


TreeNode = Union[LeafNode, InternalNode]


class HuffmanTree:
    """
    Owns the root of a Huffman tree.
    """
    def __init__(self, root: TreeNode) -> None:
        if not isinstance(root, (LeafNode, InternalNode)):
            raise MalformedTreeError(f"Tree root must be a LeafNode or InternalNode, got {type(root).__name__}")
        self.root: TreeNode = root

    @property
    def frequency(self) -> int:
        return self.root.frequency

    @property
    def symbol_count(self) -> int:
        return sum(1 for _ in self.leaves())

    def leaves(self) -> Iterator[LeafNode]:
        """Yield the leaves from left to right."""
        stack: List[TreeNode] = [self.root]
        while stack:
            node = stack.pop()
            if isinstance(node, LeafNode):
                yield node
            elif isinstance(node, InternalNode):
                stack.append(node.right)
                stack.append(node.left)
            else:
                raise MalformedTreeError(f"Unexpected node of type {type(node).__name__}")

    def depth(self) -> int:
        """Length of the longest root-to-leaf path."""
        deepest = 0
        stack: List[Tuple[TreeNode, int]] = [(self.root, 0)]
        while stack:
            node, level = stack.pop()
            if isinstance(node, InternalNode):
                stack.append((node.left, level + 1))
                stack.append((node.right, level + 1))
            else:
                deepest = max(deepest, level)
        return deepest


def build_tree(frequency_table: Mapping, logger: Optional[Logger] = None) -> HuffmanTree:
    """
    Build a Huffman tree from symbol frequencies.

    Leaves enter the queue in ascending symbol order and every node receives the next
    value of a running sequence number. Nodes of equal frequency therefore leave the
    queue in insertion order, which makes the tree a function of the table alone.
    The first node extracted becomes the left child, the second the right child.

    Args:
        frequency_table (Mapping): Symbol to positive count.
        logger (Optional[Logger]): Logger instance for logging.

    Returns:
        HuffmanTree: The constructed tree.

    Raises:
        EmptyAlphabetError: If the table has no symbols.
    """
    if not isinstance(frequency_table, FrequencyTable):
        frequency_table = FrequencyTable(frequency_table)
    if len(frequency_table) == 0:
        raise EmptyAlphabetError()

    sequence = count()
    heap: List[Tuple[int, int, TreeNode]] = [
        (sf.frequency, next(sequence), LeafNode(sf.symbol, sf.frequency))
        for sf in frequency_table.items_sorted()
    ]
    heapq.heapify(heap)

    while len(heap) > 1:
        _, _, left = heapq.heappop(heap)
        _, _, right = heapq.heappop(heap)
        merged = InternalNode(left, right)
        if logger is not None:
            logger.log(TreeMergeLog(left.frequency, right.frequency))
        heapq.heappush(heap, (merged.frequency, next(sequence), merged))

    return HuffmanTree(heap[0][2])
