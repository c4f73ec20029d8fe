"""
Normalization module
"""

from .normalizer import normalize, FIELD_RULES, STRATEGY_RULES
from .sections import DocumentFormat, detect_format, extract_sections

__all__ = [
    "normalize",
    "FIELD_RULES",
    "STRATEGY_RULES",
    "DocumentFormat",
    "detect_format",
    "extract_sections",
]
