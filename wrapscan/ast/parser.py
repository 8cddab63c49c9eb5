"""
Tree-sitter Parser Wrapper

Handles language detection and tree-sitter parsing of wrapper sources.
Unlike a tolerant indexer, wrapper extraction refuses trees with errors:
tree-sitter always returns a tree, so error and missing nodes are collected
into diagnostics and raised as SourceSyntaxError.
"""

from pathlib import Path
from typing import Optional

import tree_sitter_typescript
from tree_sitter import Language, Node, Parser, Tree

from logging_config import get_logger
from wrapscan.exceptions import SourceSyntaxError

logger = get_logger("ast.parser")


# Supported languages and their tree-sitter language getters
LANGUAGE_MODULES = {
    "typescript": tree_sitter_typescript.language_typescript,
    "tsx": tree_sitter_typescript.language_tsx,
}

DEFAULT_LANGUAGE = "typescript"

# File extension to language mapping
EXTENSION_TO_LANGUAGE = {
    ".ts": "typescript",
    ".mts": "typescript",
    ".cts": "typescript",
    ".tsx": "tsx",
    ".js": "typescript",  # Use TS parser for JS (superset)
    ".mjs": "typescript",
    ".cjs": "typescript",
    ".jsx": "tsx",
}


class ASTParser:
    """
    Tree-sitter based parser for TypeScript wrapper sources.

    Lazily initializes parsers for each language on first use.
    """

    def __init__(self):
        self._parsers: dict[str, Parser] = {}
        self._languages: dict[str, Language] = {}

    def _get_language(self, lang_name: str) -> Language:
        """Get or create Language object for a language."""
        if lang_name in self._languages:
            return self._languages[lang_name]

        getter = LANGUAGE_MODULES.get(lang_name)
        if getter is None:
            raise ValueError(f"Unsupported language: {lang_name}")

        language = Language(getter())
        self._languages[lang_name] = language
        return language

    def _get_parser(self, lang_name: str) -> Parser:
        """Get or create Parser for a language."""
        if lang_name in self._parsers:
            return self._parsers[lang_name]

        parser = Parser(self._get_language(lang_name))
        self._parsers[lang_name] = parser
        return parser

    def detect_language(self, file_path: str) -> str:
        """
        Detect language from file extension.

        Args:
            file_path: Path to the source file

        Returns:
            Language name; unknown extensions use the TypeScript grammar
        """
        ext = Path(file_path).suffix.lower()
        return EXTENSION_TO_LANGUAGE.get(ext, DEFAULT_LANGUAGE)

    def parse(self, source: str, language: str = DEFAULT_LANGUAGE) -> Tree:
        """
        Parse source code into an AST.

        Args:
            source: Source code as string
            language: Language name (typescript, tsx)

        Returns:
            Tree-sitter Tree without error nodes

        Raises:
            SourceSyntaxError: If the source does not parse cleanly
        """
        parser = self._get_parser(language)
        tree = parser.parse(source.encode("utf-8"))

        if tree.root_node.has_error:
            diagnostics = collect_diagnostics(tree.root_node)
            logger.debug(f"Rejected {language} source with {len(diagnostics)} syntax errors")
            first = diagnostics[0] if diagnostics else None
            if first:
                message = f"{first['message']} ({first['line']}:{first['column']})"
            else:
                message = "Invalid source"
            raise SourceSyntaxError(message, diagnostics)

        return tree


def collect_diagnostics(root: Node) -> list[dict]:
    """
    Describe every ERROR node and MISSING token under root.

    Lines are 1-based, columns 0-based (byte offsets within the line).
    Children of an ERROR node are not reported separately.
    """
    diagnostics = []

    def _walk(node: Node):
        if node.is_missing:
            diagnostics.append(_diagnostic(node, f"Missing {node.type}"))
            return
        if node.is_error:
            text = node.text.decode("utf-8", errors="replace") if node.text else ""
            snippet = " ".join(text.split())[:40]
            diagnostics.append(_diagnostic(node, f"Unexpected token {snippet!r}"))
            return
        if not node.has_error:
            return
        for child in node.children:
            _walk(child)

    _walk(root)
    return diagnostics


def _diagnostic(node: Node, message: str) -> dict:
    row, column = node.start_point
    return {"line": row + 1, "column": column, "message": message}


# Global parser instance (lazy singleton)
_parser: Optional[ASTParser] = None


def get_parser() -> ASTParser:
    """Get the global ASTParser instance."""
    global _parser
    if _parser is None:
        _parser = ASTParser()
    return _parser
