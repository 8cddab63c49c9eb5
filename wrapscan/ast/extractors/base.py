"""
Base Extractor Interface

Abstract base class that all wrapper extractors must implement.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterator
from typing import Optional

from tree_sitter import Node, Tree

from wrapscan.ast.models import WrapperScan


class LanguageExtractor(ABC):
    """
    Abstract base class for language-specific wrapper extractors.

    Each grammar (TypeScript, TSX) registers one extractor that turns a
    parsed tree into a WrapperScan.
    """

    @property
    @abstractmethod
    def language(self) -> str:
        """Return the language name (e.g., 'typescript', 'tsx')."""
        pass

    @abstractmethod
    def scan(self, tree: Tree, class_name: str) -> WrapperScan:
        """
        Collect wrapper metadata for one class from the AST.

        Args:
            tree: Parsed AST tree
            class_name: Name of the wrapper class to describe

        Returns:
            WrapperScan with operations, config type and capability flags
        """
        pass

    # Helper methods for AST traversal

    def get_node_text(self, node: Node) -> str:
        """Extract the text content of an AST node."""
        return node.text.decode("utf-8") if node.text else ""

    def find_child(self, node: Node, type_name: str) -> Optional[Node]:
        """Find the first direct child of a specific type."""
        for child in node.children:
            if child.type == type_name:
                return child
        return None

    def walk_tree(self, node: Node, type_names: set[str]) -> Iterator[Node]:
        """
        Walk the tree in document order, yielding nodes of the given types.

        Args:
            node: Starting node
            type_names: Node types to yield

        Returns:
            Iterator over matching nodes
        """
        stack = [node]
        while stack:
            current = stack.pop()
            if current.type in type_names:
                yield current
            stack.extend(reversed(current.children))


# Registry of extractors by language
_extractors: dict[str, LanguageExtractor] = {}


def register_extractor(extractor: LanguageExtractor) -> None:
    """Register an extractor for a language."""
    _extractors[extractor.language] = extractor


def get_extractor(language: str) -> Optional[LanguageExtractor]:
    """
    Get the extractor for a language.

    Args:
        language: Language name (typescript, tsx)

    Returns:
        LanguageExtractor or None if unsupported
    """
    return _extractors.get(language)
