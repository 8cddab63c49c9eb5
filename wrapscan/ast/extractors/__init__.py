"""
Language-Specific Extractors

Each extractor implements the LanguageExtractor interface for one grammar.
"""

from wrapscan.ast.extractors.base import LanguageExtractor, get_extractor, register_extractor

# Import extractors to trigger registration
from wrapscan.ast.extractors.typescript import TsxExtractor, TypeScriptExtractor

__all__ = [
    "LanguageExtractor",
    "get_extractor",
    "register_extractor",
    "TypeScriptExtractor",
    "TsxExtractor",
]
