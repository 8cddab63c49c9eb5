"""
Wrapscan - static extraction of contract wrapper metadata.

Parses TypeScript contract wrapper classes with tree-sitter and describes
their send/get operations, config type and factory capabilities for
binding generators.
"""

__version__ = "1.0.0"
