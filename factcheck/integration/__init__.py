"""
Integration layer: explanations and report formatting.
"""

from .explanation_generator import ExplanationGenerator
from .result_formatter import ResultFormatter

__all__ = [
    "ExplanationGenerator",
    "ResultFormatter",
]
