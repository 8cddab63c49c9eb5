"""
AST-Based Wrapper Analysis

Tree-sitter based extraction of contract wrapper metadata from
TypeScript sources. The source is parsed, never executed.
"""

from wrapscan.ast.models import (
    ConfigFieldInfo,
    ConfigTypeInfo,
    OperationTable,
    ParameterInfo,
    ParameterSet,
    WrapperInfo,
    WrapperScan,
)
from wrapscan.ast.parser import ASTParser, get_parser
from wrapscan.ast.render import TypeRenderer

__all__ = [
    # Models
    "WrapperInfo",
    "WrapperScan",
    "ParameterInfo",
    "ParameterSet",
    "OperationTable",
    "ConfigFieldInfo",
    "ConfigTypeInfo",
    # Parser
    "ASTParser",
    "get_parser",
    # Rendering
    "TypeRenderer",
]
