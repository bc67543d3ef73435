"""
codebook.py

Code assignment by traversal of a Huffman tree.

"""


from typing import Dict, Hashable, List, Optional, Tuple, Union

from .errors import MalformedTreeError
from .logger import Logger, CodeAssignmentLog
from .models import CodeBook
from .tree import HuffmanTree, InternalNode, LeafNode, TreeNode


def generate_codebook(tree: Union[HuffmanTree, TreeNode], logger: Optional[Logger] = None) -> CodeBook:
    """
    Assign a code to every leaf: '0' for each step left, '1' for each step right.

    A tree made of a single leaf gives that symbol the code '0'.

    Args:
        tree (Union[HuffmanTree, TreeNode]): The tree or its root node.
        logger (Optional[Logger]): Logger instance for logging.

    Returns:
        CodeBook: The symbol to code mapping.

    Raises:
        MalformedTreeError: If a node is missing a child or is not a tree node.
    """
    root = tree.root if isinstance(tree, HuffmanTree) else tree
    codes: Dict[Hashable, str] = {}
    stack: List[Tuple[TreeNode, str]] = [(root, "")]

    while stack:
        node, prefix = stack.pop()
        if isinstance(node, LeafNode):
            code = prefix or "0"
            if node.symbol in codes:
                raise MalformedTreeError(f"Symbol {node.symbol!r} appears in more than one leaf")
            codes[node.symbol] = code
            if logger is not None:
                logger.log(CodeAssignmentLog(node.symbol, code, node.frequency))
        elif isinstance(node, InternalNode):
            left = getattr(node, "left", None)
            right = getattr(node, "right", None)
            if left is None or right is None:
                raise MalformedTreeError(f"Internal node at prefix '{prefix}' is missing a child")
            stack.append((right, prefix + "1"))
            stack.append((left, prefix + "0"))
        else:
            raise MalformedTreeError(f"Unexpected node of type {type(node).__name__} at prefix '{prefix}'")

    return CodeBook(codes)
