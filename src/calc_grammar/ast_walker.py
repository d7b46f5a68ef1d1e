from typing import Callable, List, Optional

from parsimonious.nodes import Node

from .node_types import NodeKind


class ParseTreeWalker:
    """Utilities for traversing and searching the calculator parse tree"""

    @staticmethod
    def walk(node: Node, callback: Callable[[Node], None]):
        """Perform a depth-first traversal of the parse tree"""
        callback(node)
        for child in node.children:
            ParseTreeWalker.walk(child, callback)

    @staticmethod
    def find_first(node: Node, predicate: Callable[[Node], bool]) -> Optional[Node]:
        """Depth-first search of the subtree rooted at node, node itself included"""
        if predicate(node):
            return node
        for child in node.children:
            found = ParseTreeWalker.find_first(child, predicate)
            if found is not None:
                return found
        return None

    @staticmethod
    def find_first_of_kind(node: Node, kind: NodeKind) -> Optional[Node]:
        return ParseTreeWalker.find_first(node, lambda n: NodeKind.of(n) is kind)

    @staticmethod
    def get_child_of_kind(node: Node, kind: NodeKind) -> Optional[Node]:
        """Find the first direct child of a specific kind"""
        for child in node.children:
            if NodeKind.of(child) is kind:
                return child
        return None

    @staticmethod
    def find_all_of_kind(node: Node, kind: NodeKind) -> List[Node]:
        """Find all descendant nodes of a specific kind"""
        results = []

        def check(n):
            if NodeKind.of(n) is kind:
                results.append(n)

        ParseTreeWalker.walk(node, check)
        return results
